"""Rhythm coupling — judge each press, then feed good presses to the recognizer."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from combobeat.commands import CommandRecognizer
from combobeat.config import TRIGGER_X
from combobeat.evaluator import DEFAULT_WINDOWS, JudgeWindows, judge_hit
from combobeat.models import (
    AttemptResult,
    InputToken,
    Judgement,
    Player,
    ScoreState,
    Target,
)
from combobeat.selector import offset_for, select_nearest

logger = logging.getLogger(__name__)

TargetSource = Callable[[], Iterable[Target]]


class RhythmSession:
    """Per-stage state tying the note lane, the judge and the recognizer together.

    A command only goes through when every step was pressed on the beat:
    a successful press is forwarded to the recognizer, a miss wipes it.
    """

    def __init__(
        self,
        recognizer: CommandRecognizer,
        targets: TargetSource | Iterable[Target],
        trigger_x: float = TRIGGER_X,
        windows: JudgeWindows = DEFAULT_WINDOWS,
        player: Player | None = None,
        command_symbols: Iterable[str] | None = None,
    ) -> None:
        self.recognizer = recognizer
        self._targets = targets if callable(targets) else (lambda: targets)
        self.trigger_x = trigger_x
        self.windows = windows
        self.player = player if player is not None else Player()
        # None forwards every symbol
        self.command_symbols = frozenset(command_symbols) if command_symbols is not None else None
        self.stats = ScoreState()

    def attempt_input(
        self,
        symbol: str,
        now: float | None = None,
        *,
        allow_recovery: bool = True,
    ) -> AttemptResult:
        """Judge a key press against the nearest note and apply its effects.

        Always returns a result; pressing with no note in reach is a MISS.
        """
        selection = select_nearest(self._targets(), self.trigger_x)
        judgement = judge_hit(offset_for(selection), self.windows)
        target = selection[0] if selection is not None else None

        recovery = self._apply_judgement(judgement, allow_recovery)
        if target is not None and judgement.grade.is_success:
            target.consumed = True

        forwarded = False
        if self.command_symbols is None or symbol in self.command_symbols:
            if judgement.grade.is_success:
                if now is None:
                    now = self.recognizer.now()
                self.recognizer.push(InputToken(symbol=symbol, timestamp=now, judgement=judgement), now)
                forwarded = True
            else:
                logger.debug("Missed %s, resetting command buffer", symbol)
                self.recognizer.reset()

        return AttemptResult(
            judgement=judgement,
            recovery_amount=recovery,
            target=target,
            forwarded=forwarded,
        )

    def register_miss(self, target: Target) -> Judgement:
        """Judge a note that left the lane without being hit."""
        judgement = judge_hit(target.time_to_arrival_ms(self.trigger_x), self.windows)
        self._apply_judgement(judgement, allow_recovery=True)
        return judgement

    def _apply_judgement(self, judgement: Judgement, allow_recovery: bool) -> float:
        """Update score/combo and player hp. Returns the hp delta applied."""
        self.stats.apply(judgement)

        delta = self.player.hp_regen * judgement.recovery
        if delta < 0 or (delta > 0 and allow_recovery and judgement.grade.is_success):
            self.player.apply_hp_delta(delta)
            return delta
        return 0.0
