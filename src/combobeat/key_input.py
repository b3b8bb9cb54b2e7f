"""Keyboard input — translate pygame key events into logical button symbols."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import pygame

from combobeat.models import monotonic_ms


@dataclass
class KeyPress:
    symbol: str
    time_ms: float


@runtime_checkable
class InputSource(Protocol):
    """Common interface for anything that produces key presses."""
    def poll(self) -> KeyPress | None: ...
    def close(self) -> None: ...


_KEY_TO_SYMBOL: dict[int, str] = {
    pygame.K_LEFT: "LEFT",
    pygame.K_RIGHT: "RIGHT",
    pygame.K_UP: "UP",
    pygame.K_DOWN: "DOWN",
    pygame.K_SPACE: "SPACE",
    pygame.K_z: "Z",
    pygame.K_x: "X",
}
DIRECTIONS = frozenset({"LEFT", "RIGHT", "UP", "DOWN"})


class KeyboardInput:
    """Queues presses of the game's buttons; direction keys are also tracked as held."""

    def __init__(self) -> None:
        self._events: list[KeyPress] = []
        self.held: set[str] = set()

    def feed_event(self, event: pygame.event.Event, now: float | None = None) -> None:
        """Call from the game loop for each pygame event."""
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return
        symbol = _KEY_TO_SYMBOL.get(event.key)
        if symbol is None:
            return
        if event.type == pygame.KEYUP:
            self.held.discard(symbol)
            return
        if symbol in DIRECTIONS:
            self.held.add(symbol)
        self._events.append(KeyPress(symbol=symbol, time_ms=monotonic_ms() if now is None else now))

    def poll(self) -> KeyPress | None:
        if self._events:
            return self._events.pop(0)
        return None

    def close(self) -> None:
        self._events.clear()
        self.held.clear()
