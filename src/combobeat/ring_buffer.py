"""Fixed-capacity ring buffer that overwrites its oldest item when full."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """Keeps the newest ``capacity`` items, ordered oldest to newest.

    Empty-buffer reads return ``None`` instead of raising.
    """

    def __init__(self, capacity: int) -> None:
        self.capacity = max(1, int(capacity))
        self._slots: list[T | None] = [None] * self.capacity
        self._start = 0  # index of the oldest item
        self._count = 0

    def __len__(self) -> int:
        return self._count

    @property
    def is_full(self) -> bool:
        return self._count == self.capacity

    def push(self, item: T) -> None:
        if self._count < self.capacity:
            self._slots[(self._start + self._count) % self.capacity] = item
            self._count += 1
        else:
            self._slots[self._start] = item
            self._start = (self._start + 1) % self.capacity

    def pop_front(self) -> T | None:
        if self._count == 0:
            return None
        item = self._slots[self._start]
        self._slots[self._start] = None
        self._start = (self._start + 1) % self.capacity
        self._count -= 1
        return item

    def pop_back(self) -> T | None:
        if self._count == 0:
            return None
        idx = (self._start + self._count - 1) % self.capacity
        item = self._slots[idx]
        self._slots[idx] = None
        self._count -= 1
        return item

    def peek_front(self) -> T | None:
        if self._count == 0:
            return None
        return self._slots[self._start]

    def peek_back(self) -> T | None:
        if self._count == 0:
            return None
        return self._slots[(self._start + self._count - 1) % self.capacity]

    def to_list(self) -> list[T]:
        """Copy of the live items, oldest first."""
        return [self._slots[(self._start + i) % self.capacity] for i in range(self._count)]

    def clear(self) -> None:
        self._slots = [None] * self.capacity
        self._start = 0
        self._count = 0
