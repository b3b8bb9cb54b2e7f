"""Tests for the scrolling note lane."""

import pytest

from combobeat.notes import NoteLane


def make_lane():
    return NoteLane(width=200, spawn_interval_ms=1000, note_speed=100, note_size=20)


def test_spawns_on_interval_and_moves_left():
    lane = make_lane()
    assert lane.update(500) == []
    assert lane.notes == []
    lane.update(500)
    assert len(lane.notes) == 1
    assert lane.notes[0].x == pytest.approx(160)


def test_unhit_note_leaving_lane_is_reported():
    lane = make_lane()
    lane.update(1000)
    lane.update(1000)
    assert [n.x for n in lane.notes] == pytest.approx([10, 110])

    missed = lane.update(500)
    assert len(missed) == 1
    assert len(lane.notes) == 1
    assert lane.notes[0].x == pytest.approx(60)


def test_consumed_note_leaves_silently():
    lane = make_lane()
    note = lane.spawn()
    note.consumed = True
    assert lane.update(3000) == []
    assert note not in lane.notes


def test_live_notes_skip_consumed():
    lane = make_lane()
    first = lane.spawn()
    second = lane.spawn()
    first.consumed = True
    assert lane.live_notes() == [second]


def test_paused_lane_does_not_move():
    lane = make_lane()
    note = lane.spawn()
    lane.paused = True
    lane.update(1000)
    assert note.x == 210
    assert len(lane.notes) == 1


def test_reset():
    lane = make_lane()
    lane.spawn()
    lane.update(900)
    lane.reset()
    assert lane.notes == []
    lane.update(500)
    assert lane.notes == []
