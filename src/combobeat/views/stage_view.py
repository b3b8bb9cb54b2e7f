"""Rhythm stage view — hit notes on the beat to chain Z/X commands."""

from __future__ import annotations

import logging

import pygame

from combobeat.commands import CommandRecognizer, create_default_recognizer, format_buffer
from combobeat.config import LANE_HEIGHT, TRIGGER_X
from combobeat.models import Player, monotonic_ms
from combobeat.notes import NoteLane
from combobeat.renderer import colors as colors_mod
from combobeat.renderer.hud import render_hp_bar, render_hud
from combobeat.renderer.lane import JudgementPopup, render_lane, render_popups
from combobeat.rhythm import RhythmSession
from combobeat.stage import StageCommands
from combobeat.views.base import ViewAction, ViewContext, layout_regions

logger = logging.getLogger(__name__)

COMMAND_KEYS = frozenset({"Z", "X"})


class StageView:
    name = "stage"

    def __init__(self) -> None:
        self._context: ViewContext | None = None
        self._player = Player()
        self._lane: NoteLane | None = None
        self._commands: StageCommands | None = None
        self._recognizer: CommandRecognizer | None = None
        self._session: RhythmSession | None = None
        self._popups: list[JudgementPopup] = []
        self._regions: dict[str, pygame.Rect] = {}

    def on_enter(self, context: ViewContext) -> None:
        self._context = context
        width, height = context.screen_size
        self._regions = layout_regions(
            pygame.Rect(0, 0, width, height),
            [("hud", "top", 140), ("hp", "bottom", 28), ("lane", "bottom", LANE_HEIGHT)],
        )
        self._player = Player()
        self._lane = NoteLane(width=width)
        self._commands = StageCommands(self._player)
        self._recognizer = create_default_recognizer(
            self._commands,
            capacity=context.capacity,
            window_ms=context.window_ms,
            overwrite_on_full=context.overwrite_on_full,
        )
        self._commands.bind(self._recognizer)
        self._session = RhythmSession(
            self._recognizer,
            self._lane.live_notes,
            trigger_x=TRIGGER_X,
            player=self._player,
            command_symbols=COMMAND_KEYS,
        )
        self._popups = []
        logger.info(
            "Stage started: capacity=%d window=%sms overwrite=%s",
            self._recognizer.capacity, self._recognizer.window_ms, self._recognizer.overwrite_on_full,
        )

    def on_exit(self) -> None:
        if self._session:
            stats = self._session.stats
            logger.info(
                "Stage ended: score=%d max_combo=%d accuracy=%.1f%%",
                stats.score, stats.max_combo, stats.accuracy_pct,
            )
        if self._recognizer:
            self._recognizer.reset()

    def handle_event(self, event: pygame.event.Event) -> ViewAction | None:
        if event.type != pygame.KEYDOWN:
            return None
        if event.key == pygame.K_ESCAPE:
            return ViewAction(kind="pop")
        if event.key == pygame.K_p and self._lane:
            self._lane.paused = not self._lane.paused
        return None

    def update(self, dt: float) -> ViewAction | None:
        session, lane = self._session, self._lane
        if session is None or lane is None:
            return None

        source = self._context.keyboard_input if self._context else None
        while source is not None and (press := source.poll()) is not None:
            if lane.paused or (press.symbol != "SPACE" and press.symbol not in COMMAND_KEYS):
                continue
            try:
                result = session.attempt_input(
                    press.symbol,
                    press.time_ms,
                    allow_recovery=press.symbol not in COMMAND_KEYS,
                )
            except Exception:
                logger.exception("Command handler failed for %s", press.symbol)
                continue
            if press.symbol in COMMAND_KEYS and not result.judgement.grade.is_success:
                self._commands.clear_label(press.time_ms)
            self._popups.append(JudgementPopup(label=result.judgement.name, t=press.time_ms))

        # dt is capped so a stalled frame doesn't teleport notes past the line
        now = monotonic_ms()
        for note in lane.update(min(dt, 0.1) * 1000.0):
            judgement = session.register_miss(note)
            self._popups.append(JudgementPopup(label=judgement.name, t=now))

        if self._player.hp <= 0:
            logger.info("Player defeated")
            return ViewAction(kind="pop")
        return None

    def draw(self, surface: pygame.Surface) -> None:
        session, lane = self._session, self._lane
        if session is None or lane is None or self._commands is None:
            return

        now = monotonic_ms()
        surface.fill(colors_mod.BG)
        render_hud(
            surface,
            self._regions["hud"],
            session.stats,
            format_buffer(session.recognizer),
            self._commands.current_label(now),
        )
        lane_rect = self._regions["lane"]
        render_lane(surface, lane_rect, lane.notes, session.trigger_x)
        self._popups = render_popups(surface, lane_rect, self._popups, session.trigger_x, now)
        render_hp_bar(surface, self._regions["hp"], self._player)
