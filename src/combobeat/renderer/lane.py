"""Note lane visualization — scrolling notes, trigger line, judgement popups."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from combobeat.models import Target
from combobeat.renderer.colors import GRADE_COLORS, HUD_TEXT, LANE_BG, NOTE, TRIGGER_LINE


@dataclass
class JudgementPopup:
    label: str
    t: float  # ms, when the judgement happened
    ttl: float = 700.0


def render_lane(
    surface: pygame.Surface,
    rect: pygame.Rect,
    notes: list[Target],
    trigger_x: float,
) -> None:
    """Draw the lane band with unhit notes centered vertically."""
    pygame.draw.rect(surface, LANE_BG, rect)
    pygame.draw.line(surface, TRIGGER_LINE, (rect.x + trigger_x, rect.y), (rect.x + trigger_x, rect.bottom), 2)

    cy = rect.centery
    for note in notes:
        if note.consumed:
            continue
        half = note.size / 2
        note_rect = pygame.Rect(int(rect.x + note.x - half), int(cy - half), int(note.size), int(note.size))
        pygame.draw.rect(surface, NOTE, note_rect, border_radius=6)


def render_popups(
    surface: pygame.Surface,
    rect: pygame.Rect,
    popups: list[JudgementPopup],
    trigger_x: float,
    now: float,
) -> list[JudgementPopup]:
    """Draw fading judgement labels. Returns the popups still alive."""
    font = pygame.font.SysFont("sans", 20)
    alive: list[JudgementPopup] = []

    for popup in popups:
        age = now - popup.t
        if age > popup.ttl:
            continue
        alive.append(popup)
        ratio = max(0.0, age / popup.ttl)
        color = GRADE_COLORS.get(popup.label, HUD_TEXT)
        text = font.render(popup.label.upper(), True, color)
        text.set_alpha(int(255 * (1 - ratio)))
        surface.blit(text, (rect.x + trigger_x + 30, rect.centery - 10 - ratio * 30))

    return alive
