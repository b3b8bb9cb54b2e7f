"""Hit evaluation — classify how close a press was to a note's arrival."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from combobeat.config import (
    GOOD_TUNING,
    GOOD_WINDOW_MS,
    MISS_TUNING,
    MISS_WINDOW_MS,
    PERFECT_TUNING,
    PERFECT_WINDOW_MS,
)
from combobeat.models import HitGrade, Judgement


@dataclass(frozen=True)
class GradeTuning:
    score: int
    recovery: float
    attack: float


def _default_tuning() -> dict[HitGrade, GradeTuning]:
    return {
        HitGrade.PERFECT: GradeTuning(*PERFECT_TUNING),
        HitGrade.GOOD: GradeTuning(*GOOD_TUNING),
        HitGrade.MISS: GradeTuning(*MISS_TUNING),
    }


@dataclass(frozen=True)
class JudgeWindows:
    """Timing thresholds (ms, inclusive) and what each grade is worth."""

    perfect_ms: float = PERFECT_WINDOW_MS
    good_ms: float = GOOD_WINDOW_MS
    # Only validated against the other thresholds; every press past good_ms
    # is a MISS. Reserved for a separate near-miss tier.
    miss_ms: float = MISS_WINDOW_MS
    # Read-only after construction; left out of the hash.
    tuning: Mapping[HitGrade, GradeTuning] = field(default_factory=_default_tuning, hash=False)

    def __post_init__(self) -> None:
        if not 0 <= self.perfect_ms < self.good_ms < self.miss_ms:
            raise ValueError(
                "judge thresholds must satisfy 0 <= perfect < good < miss, got "
                f"({self.perfect_ms}, {self.good_ms}, {self.miss_ms})"
            )
        missing = set(HitGrade) - set(self.tuning)
        if missing:
            raise ValueError(f"no tuning for grades: {sorted(g.name for g in missing)}")
        object.__setattr__(self, "tuning", MappingProxyType(dict(self.tuning)))

    def classify(self, delta_ms: float) -> HitGrade:
        abs_offset = abs(delta_ms)
        if abs_offset <= self.perfect_ms:
            return HitGrade.PERFECT
        if abs_offset <= self.good_ms:
            return HitGrade.GOOD
        return HitGrade.MISS


DEFAULT_WINDOWS = JudgeWindows()


def judge_hit(delta_ms: float, windows: JudgeWindows = DEFAULT_WINDOWS) -> Judgement:
    """Grade a press from its signed offset to the note's arrival.

    Early and late presses are graded the same way; an infinite offset
    (no note to hit) is always a MISS.
    """
    grade = windows.classify(delta_ms)
    tuning = windows.tuning[grade]
    return Judgement(
        grade=grade,
        score=tuning.score,
        recovery=tuning.recovery,
        attack=tuning.attack,
        offset_ms=delta_ms,
    )
