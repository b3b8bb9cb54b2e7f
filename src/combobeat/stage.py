"""Stage command effects — what attack, defend and advance do to the player."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from combobeat.commands import CommandRecognizer
from combobeat.config import COMMAND_DISPLAY_MS, MAP_LENGTH
from combobeat.models import CommandMatch, Player, monotonic_ms

logger = logging.getLogger(__name__)


@dataclass
class CommandOutcome:
    name: str
    label: str
    damage: float = 0.0
    distance: float = 0.0
    judgements: list[str] = field(default_factory=list)


class StageCommands:
    """Command callback for a stage: resolves recognised commands into effects.

    A command whose steps include an unjudged or missed press is cancelled
    and the recognizer is wiped.
    """

    def __init__(
        self,
        player: Player,
        map_length: float = MAP_LENGTH,
        display_ms: float = COMMAND_DISPLAY_MS,
    ) -> None:
        self.player = player
        self.map_length = map_length
        self.display_ms = display_ms
        self.distance = 0.0
        self.total_damage = 0.0
        self.history: list[CommandOutcome] = []
        self.recognizer: CommandRecognizer | None = None
        self._label = ""
        self._label_time = 0.0

    def bind(self, recognizer: CommandRecognizer) -> None:
        self.recognizer = recognizer

    def __call__(self, match: CommandMatch) -> None:
        now = match.entries[-1].timestamp if match.entries else monotonic_ms()
        if any(e.judgement is None or not e.judgement.grade.is_success for e in match.entries):
            logger.debug("Command %s cancelled by a missed step", match.name)
            self._reset_recognizer()
            self.clear_label(now)
            return

        outcome = CommandOutcome(
            name=match.name,
            label=match.name.upper(),
            judgements=[e.judgement.name for e in match.entries],
        )
        if match.name == "attack":
            outcome.damage = self.player.attack * math.prod(e.judgement.attack for e in match.entries)
            self.total_damage += outcome.damage
            outcome.label = f"ATTACK {round(outcome.damage, 1)}"
        elif match.name == "defend":
            self.player.defending = True
            outcome.label = "DEFEND"
        elif match.name == "advance":
            outcome.distance = max(0.0, min(self.player.speed, self.map_length - self.distance))
            self.distance += outcome.distance
            outcome.label = (
                f"ADVANCE +{round(outcome.distance)} ({round(self.distance)}/{round(self.map_length)})"
            )

        logger.info("Command %s: %s", match.name, outcome.label)
        self.history.append(outcome)
        self.set_label(outcome.label, now)
        self._reset_recognizer()

    def current_label(self, now: float) -> str:
        """Label of the last command, blank once its display time ran out."""
        if self._label and now - self._label_time > self.display_ms:
            self._label = ""
        return self._label

    def set_label(self, text: str, now: float) -> None:
        self._label = text
        self._label_time = now

    def clear_label(self, now: float) -> None:
        self.set_label("", now)

    def _reset_recognizer(self) -> None:
        if self.recognizer is not None:
            self.recognizer.reset()
