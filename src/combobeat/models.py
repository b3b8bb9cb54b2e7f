"""Core data models shared across the engine."""

from __future__ import annotations

import math
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum

from combobeat.config import PLAYER_ATTACK, PLAYER_HP_MAX, PLAYER_HP_REGEN, PLAYER_SPEED


def monotonic_ms() -> float:
    """Current monotonic clock reading in milliseconds."""
    return time.perf_counter() * 1000.0


class InvalidTokenError(ValueError):
    """Raised when an input payload cannot be turned into an InputToken."""


class HitGrade(Enum):
    # Ordered from the strictest timing requirement to the loosest.
    PERFECT = 0
    GOOD = 1
    MISS = 2

    @property
    def is_success(self) -> bool:
        return self is not HitGrade.MISS


@dataclass(frozen=True)
class Judgement:
    grade: HitGrade
    score: int
    recovery: float  # multiplier applied to the player's hp regen
    attack: float  # damage multiplier used by the attack command
    offset_ms: float  # negative = early, positive = late

    @property
    def name(self) -> str:
        return self.grade.name.lower()


@dataclass(frozen=True)
class InputToken:
    """A recognised key symbol with its capture time."""

    symbol: str
    timestamp: float  # milliseconds, same clock as the recognizer's "now"
    judgement: Judgement | None = None

    @classmethod
    def coerce(cls, value: object, now: float) -> InputToken:
        """Normalise a string, mapping or token into an InputToken.

        Mappings may name the symbol ``key``, ``code`` or ``value`` and the
        capture time ``t``, ``time`` or ``timestamp``; a missing time falls
        back to ``now``.
        """
        if isinstance(value, InputToken):
            _check_time(value.timestamp)
            return value
        if isinstance(value, str):
            return cls(symbol=_check_symbol(value), timestamp=float(now))
        if isinstance(value, Mapping):
            symbol = _first_present(value, ("key", "code", "value"))
            stamp = _first_present(value, ("t", "time", "timestamp"))
            judgement = _first_present(value, ("judgement", "hit"))
            if judgement is not None and not isinstance(judgement, Judgement):
                raise InvalidTokenError(f"unsupported judgement payload: {judgement!r}")
            return cls(
                symbol=_check_symbol(symbol),
                timestamp=float(now) if stamp is None else _check_time(stamp),
                judgement=judgement,
            )
        raise InvalidTokenError(f"cannot build an input token from {value!r}")


def _first_present(data: Mapping, keys: tuple[str, ...]) -> object:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _check_symbol(symbol: object) -> str:
    if isinstance(symbol, bool) or not isinstance(symbol, (str, int)):
        raise InvalidTokenError(f"token symbol must be a string, got {symbol!r}")
    text = str(symbol).strip()
    if not text:
        raise InvalidTokenError("token symbol is empty")
    return text


def _check_time(stamp: object) -> float:
    if isinstance(stamp, bool) or not isinstance(stamp, (int, float)) or not math.isfinite(stamp):
        raise InvalidTokenError(f"token timestamp must be a finite number, got {stamp!r}")
    return float(stamp)


@dataclass
class Target:
    """A note scrolling toward the trigger line."""

    x: float  # pixels
    speed: float  # pixels per second, positive = moving left
    size: float = 24.0
    consumed: bool = False

    def time_to_arrival_ms(self, trigger_x: float) -> float:
        return (self.x - trigger_x) / self.speed * 1000.0


@dataclass(frozen=True)
class CommandMatch:
    """Payload handed to a command callback."""

    name: str
    sequence: tuple[str, ...]
    buffer: tuple[InputToken, ...]  # whole buffer at match time, oldest first
    entries: tuple[InputToken, ...]  # the tokens that formed the command


CommandCallback = Callable[[CommandMatch], None]


@dataclass(frozen=True)
class CommandDefinition:
    name: str
    sequence: tuple[str, ...]
    callback: CommandCallback


@dataclass
class AttemptResult:
    judgement: Judgement
    recovery_amount: float
    target: Target | None
    forwarded: bool = False

    @property
    def category(self) -> HitGrade:
        return self.judgement.grade

    @property
    def score(self) -> int:
        return self.judgement.score


@dataclass
class ScoreState:
    score: int = 0
    combo: int = 0
    max_combo: int = 0
    perfect: int = 0
    good: int = 0
    missed: int = 0

    def apply(self, judgement: Judgement) -> None:
        self.score += judgement.score
        if judgement.grade is HitGrade.PERFECT:
            self.perfect += 1
        elif judgement.grade is HitGrade.GOOD:
            self.good += 1
        else:
            self.missed += 1

        if judgement.grade.is_success:
            self.combo += 1
            self.max_combo = max(self.max_combo, self.combo)
        else:
            self.combo = 0

    @property
    def accuracy_pct(self) -> float:
        total = self.perfect + self.good + self.missed
        return ((self.perfect + self.good) / total * 100.0) if total > 0 else 0.0


@dataclass
class Player:
    hp_max: float = PLAYER_HP_MAX
    hp: float | None = None  # starts at hp_max
    hp_regen: float = PLAYER_HP_REGEN
    attack: float = PLAYER_ATTACK
    speed: float = PLAYER_SPEED
    defending: bool = False

    def __post_init__(self) -> None:
        if self.hp is None:
            self.hp = self.hp_max

    def apply_hp_delta(self, delta: float) -> None:
        """Heal (positive) or damage (negative), clamped to [0, hp_max]."""
        if not delta:
            return
        self.hp = max(0.0, min(self.hp_max, self.hp + delta))
