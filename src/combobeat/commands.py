"""Timed command recognizer — match recent key tokens against named sequences."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from combobeat.config import COMMAND_BUFFER_CAPACITY, COMMAND_WINDOW_MS
from combobeat.models import (
    CommandCallback,
    CommandDefinition,
    CommandMatch,
    InputToken,
    InvalidTokenError,
    monotonic_ms,
)
from combobeat.ring_buffer import RingBuffer

logger = logging.getLogger(__name__)

DEFAULT_COMMANDS: list[tuple[str, tuple[str, ...]]] = [
    ("attack", ("Z", "Z", "Z", "X")),
    ("defend", ("X", "X", "Z", "X")),
    ("advance", ("Z", "Z", "X", "X")),
]


class CommandRegistrationError(ValueError):
    """Raised when a command can never be matched by the recognizer."""


class CommandRecognizer:
    """Buffers the newest key tokens and fires callbacks for known sequences.

    Every push expires tokens older than ``window_ms`` before matching.
    A full buffer is resolved as a whole: it either matches a command of
    exactly ``capacity`` steps or gets discarded. A partially filled buffer
    is matched by suffix, and only the matched suffix is removed so earlier
    tokens can still take part in a later command.
    """

    def __init__(
        self,
        capacity: int = COMMAND_BUFFER_CAPACITY,
        window_ms: float = COMMAND_WINDOW_MS,
        overwrite_on_full: bool = False,
        clock: Callable[[], float] = monotonic_ms,
    ) -> None:
        self._buffer: RingBuffer[InputToken] = RingBuffer(capacity)
        self.capacity = self._buffer.capacity
        self.window_ms = window_ms
        self.overwrite_on_full = overwrite_on_full
        self._clock = clock
        self._commands: list[CommandDefinition] = []

    def __len__(self) -> int:
        return len(self._buffer)

    @property
    def commands(self) -> tuple[CommandDefinition, ...]:
        return tuple(self._commands)

    def now(self) -> float:
        return self._clock()

    def register(self, name: str, sequence: Iterable[str], callback: CommandCallback) -> CommandDefinition:
        """Add a command. Earlier registrations win when several could match."""
        seq = tuple(str(symbol) for symbol in sequence)
        if not seq:
            raise CommandRegistrationError(f"command {name!r} has an empty sequence")
        if len(seq) > self.capacity:
            raise CommandRegistrationError(
                f"command {name!r} needs {len(seq)} steps but the buffer holds {self.capacity}"
            )
        definition = CommandDefinition(name=name, sequence=seq, callback=callback)
        self._commands.append(definition)
        return definition

    def push(self, token: object, now: float | None = None) -> CommandMatch | None:
        """Record a key token and try to recognise a command.

        ``token`` may be an InputToken, a bare symbol or a mapping (see
        ``InputToken.coerce``). Tokens must arrive in time order: one older
        than the newest buffered token raises InvalidTokenError, since expiry
        only ever trims the front. Returns the match handed to the callback,
        or None when nothing was recognised.
        """
        if now is None:
            now = self._clock()
        entry = InputToken.coerce(token, now)
        newest = self._buffer.peek_back()
        if newest is not None and entry.timestamp < newest.timestamp:
            raise InvalidTokenError(
                f"token {entry.symbol!r} at {entry.timestamp}ms is older than the newest "
                f"buffered token at {newest.timestamp}ms"
            )

        if not self._buffer.is_full or self.overwrite_on_full:
            self._buffer.push(entry)
        else:
            logger.debug("Buffer full, dropped %s", entry.symbol)

        self.expire(now)
        return self._try_match()

    def expire(self, now: float | None = None) -> int:
        """Drop tokens older than the window. Returns how many were removed."""
        if now is None:
            now = self._clock()
        removed = 0
        while (oldest := self._buffer.peek_front()) is not None:
            if now - oldest.timestamp <= self.window_ms:
                break
            self._buffer.pop_front()
            removed += 1
        if removed:
            logger.debug("Expired %d stale token(s)", removed)
        return removed

    def reset(self) -> None:
        self._buffer.clear()

    def entries(self) -> list[InputToken]:
        return self._buffer.to_list()

    def symbols(self) -> list[str]:
        return [entry.symbol for entry in self._buffer.to_list()]

    def _try_match(self) -> CommandMatch | None:
        if len(self._buffer) == 0:
            return None
        entries = self._buffer.to_list()
        symbols = tuple(entry.symbol for entry in entries)

        if self._buffer.is_full:
            for command in self._commands:
                if command.sequence == symbols:
                    return self._fire(command, entries, pop_count=None)
            logger.debug("No command for full buffer %s, clearing", " ".join(symbols))
            self._buffer.clear()
            return None

        for command in self._commands:
            length = len(command.sequence)
            if length <= len(symbols) and symbols[-length:] == command.sequence:
                return self._fire(command, entries, pop_count=length)
        return None

    def _fire(
        self,
        command: CommandDefinition,
        entries: list[InputToken],
        pop_count: int | None,
    ) -> CommandMatch:
        """Run the callback, then clear (pop_count None) or pop the matched tail."""
        match = CommandMatch(
            name=command.name,
            sequence=command.sequence,
            buffer=tuple(entries),
            entries=tuple(entries[-len(command.sequence):]),
        )
        logger.debug("Recognised command %s", command.name)
        try:
            command.callback(match)
        finally:
            if pop_count is None:
                self._buffer.clear()
            else:
                for _ in range(pop_count):
                    self._buffer.pop_back()
        return match


def format_buffer(recognizer: CommandRecognizer, placeholder: str = "?") -> str:
    """HUD label for the buffer, e.g. ``"? ? Z X [2/4]"``."""
    symbols = recognizer.symbols()
    slots = [placeholder] * (recognizer.capacity - len(symbols))
    slots.extend(symbol.upper() for symbol in symbols)
    return f"{' '.join(slots)} [{len(symbols)}/{recognizer.capacity}]"


def create_default_recognizer(
    callback: CommandCallback,
    capacity: int = COMMAND_BUFFER_CAPACITY,
    window_ms: float = COMMAND_WINDOW_MS,
    overwrite_on_full: bool = True,
    clock: Callable[[], float] = monotonic_ms,
) -> CommandRecognizer:
    """Recognizer with the stage's attack/defend/advance commands registered."""
    recognizer = CommandRecognizer(
        capacity=capacity,
        window_ms=window_ms,
        overwrite_on_full=overwrite_on_full,
        clock=clock,
    )
    for name, sequence in DEFAULT_COMMANDS:
        recognizer.register(name, sequence, callback)
    return recognizer
