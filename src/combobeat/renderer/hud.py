"""Heads-up display — score, combo, command buffer, and hp bar."""

from __future__ import annotations

import pygame

from combobeat.models import Player, ScoreState
from combobeat.renderer.colors import HP_BAR_BG, HP_BAR_FILL, HUD_TEXT


def render_hud(
    surface: pygame.Surface,
    rect: pygame.Rect,
    stats: ScoreState,
    buffer_text: str,
    command_text: str = "",
) -> None:
    font = pygame.font.SysFont("monospace", 20)

    lines = [
        f"Score: {stats.score}",
        f"Combo: {stats.combo} (max {stats.max_combo})",
        f"Buffer: {buffer_text}",
    ]
    if command_text:
        lines.append(command_text)

    y = rect.y + 10
    for line in lines:
        text = font.render(line, True, HUD_TEXT)
        surface.blit(text, (rect.x + 10, y))
        y += 26


def render_hp_bar(surface: pygame.Surface, rect: pygame.Rect, player: Player) -> None:
    pad = 6
    bar = rect.inflate(-pad * 2, -pad * 2)
    ratio = player.hp / player.hp_max if player.hp_max > 0 else 0.0
    pygame.draw.rect(surface, HP_BAR_BG, bar)
    pygame.draw.rect(surface, HP_BAR_FILL, pygame.Rect(bar.x, bar.y, int(bar.w * ratio), bar.h))

    font = pygame.font.SysFont("monospace", max(12, int(bar.h * 0.8)))
    text = font.render(f"{int(player.hp)}/{int(player.hp_max)}", True, HUD_TEXT)
    surface.blit(text, text.get_rect(center=bar.center))
