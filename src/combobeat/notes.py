"""Note lane — spawns notes at the right edge and scrolls them toward the trigger line."""

from __future__ import annotations

from combobeat.config import NOTE_SIZE, NOTE_SPEED, SPAWN_INTERVAL_MS, WINDOW_WIDTH
from combobeat.models import Target


class NoteLane:
    """Owns the live notes of one lane. Advance it once per frame."""

    def __init__(
        self,
        width: float = WINDOW_WIDTH,
        spawn_interval_ms: float = SPAWN_INTERVAL_MS,
        note_speed: float = NOTE_SPEED,
        note_size: float = NOTE_SIZE,
    ) -> None:
        self.width = width
        self.spawn_interval_ms = spawn_interval_ms
        self.note_speed = note_speed
        self.note_size = note_size
        self.notes: list[Target] = []
        self.paused = False
        self._spawn_timer = 0.0

    def spawn(self) -> Target:
        """Add a note just past the right edge."""
        note = Target(x=self.width + self.note_size / 2, speed=self.note_speed, size=self.note_size)
        self.notes.append(note)
        return note

    def update(self, dt_ms: float) -> list[Target]:
        """Advance by dt_ms. Returns notes that scrolled off without being hit."""
        if self.paused:
            return []

        self._spawn_timer += dt_ms
        while self._spawn_timer >= self.spawn_interval_ms:
            self._spawn_timer -= self.spawn_interval_ms
            self.spawn()

        missed: list[Target] = []
        remaining: list[Target] = []
        for note in self.notes:
            note.x -= note.speed * (dt_ms / 1000.0)
            if note.x + note.size / 2 < 0:
                if not note.consumed:
                    missed.append(note)
            else:
                remaining.append(note)
        self.notes = remaining
        return missed

    def live_notes(self) -> list[Target]:
        return [n for n in self.notes if not n.consumed]

    def reset(self) -> None:
        self.notes.clear()
        self._spawn_timer = 0.0
