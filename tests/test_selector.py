"""Tests for nearest-note selection."""

import math

import pytest

from combobeat.models import Target
from combobeat.selector import offset_for, select_nearest

TRIGGER = 120


def test_picks_smallest_absolute_offset():
    far = Target(x=420, speed=1000)  # 300 ms away
    near = Target(x=170, speed=1000)  # 50 ms away
    target, offset = select_nearest([far, near], TRIGGER)
    assert target is near
    assert offset == pytest.approx(50)


def test_passed_note_has_negative_offset():
    late = Target(x=90, speed=1000)
    early = Target(x=160, speed=1000)
    target, offset = select_nearest([early, late], TRIGGER)
    assert target is late
    assert offset == pytest.approx(-30)


def test_skips_consumed_and_stationary_notes():
    consumed = Target(x=120, speed=1000, consumed=True)
    stuck = Target(x=121, speed=0)
    live = Target(x=320, speed=1000)
    target, _ = select_nearest([consumed, stuck, live], TRIGGER)
    assert target is live


def test_tie_goes_to_first_note():
    first = Target(x=170, speed=1000)
    second = Target(x=70, speed=1000)
    target, _ = select_nearest([first, second], TRIGGER)
    assert target is first


def test_no_eligible_note():
    assert select_nearest([], TRIGGER) is None
    assert select_nearest([Target(x=0, speed=100, consumed=True)], TRIGGER) is None
    assert offset_for(None) == math.inf


def test_selection_does_not_mutate_notes():
    note = Target(x=170, speed=1000)
    select_nearest([note], TRIGGER)
    assert note.x == 170
    assert not note.consumed
