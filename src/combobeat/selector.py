"""Pick the live note closest to arriving at the trigger line."""

from __future__ import annotations

import math
from collections.abc import Iterable

from combobeat.models import Target


def select_nearest(
    targets: Iterable[Target],
    trigger_x: float,
) -> tuple[Target, float] | None:
    """Return ``(target, offset_ms)`` for the note nearest its arrival.

    Consumed and stationary notes are skipped. The offset is signed:
    positive while the note is still approaching, negative once it has
    passed the line. On equal distances the earlier note in ``targets`` wins.
    Returns None when no note is eligible.
    """
    best: tuple[Target, float] | None = None
    best_abs = math.inf

    for target in targets:
        if target.consumed or not target.speed:
            continue
        offset = target.time_to_arrival_ms(trigger_x)
        if abs(offset) < best_abs:
            best_abs = abs(offset)
            best = (target, offset)

    return best


def offset_for(selection: tuple[Target, float] | None) -> float:
    """Offset to judge; infinite when there was nothing to hit."""
    return selection[1] if selection is not None else math.inf
