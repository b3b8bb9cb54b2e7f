"""Tests for hit judgement."""

import math

import pytest

from combobeat.evaluator import DEFAULT_WINDOWS, GradeTuning, JudgeWindows, judge_hit
from combobeat.models import HitGrade

WINDOWS = JudgeWindows(perfect_ms=80, good_ms=150, miss_ms=250)


def test_boundaries_are_inclusive():
    assert judge_hit(80, WINDOWS).grade == HitGrade.PERFECT
    assert judge_hit(81, WINDOWS).grade == HitGrade.GOOD
    assert judge_hit(150, WINDOWS).grade == HitGrade.GOOD
    assert judge_hit(151, WINDOWS).grade == HitGrade.MISS


def test_early_and_late_are_judged_alike():
    assert judge_hit(-80, WINDOWS).grade == HitGrade.PERFECT
    assert judge_hit(-120, WINDOWS).grade == HitGrade.GOOD
    assert judge_hit(-200, WINDOWS).grade == HitGrade.MISS


def test_miss_band_and_beyond_are_identical():
    near = judge_hit(200, WINDOWS)
    far = judge_hit(5000, WINDOWS)
    assert (near.grade, near.score, near.recovery) == (far.grade, far.score, far.recovery)


def test_infinite_offset_is_miss():
    result = judge_hit(math.inf)
    assert result.grade == HitGrade.MISS
    assert result.score == 0
    assert result.recovery == 0


def test_default_scores():
    perfect = judge_hit(0)
    good = judge_hit(100)
    assert perfect.score == 500
    assert good.score == perfect.score // 2
    assert perfect.recovery > good.recovery > 0


def test_offset_is_kept_signed():
    assert judge_hit(-42).offset_ms == -42


def test_custom_tuning():
    windows = JudgeWindows(
        perfect_ms=10,
        good_ms=20,
        miss_ms=30,
        tuning={
            HitGrade.PERFECT: GradeTuning(10, 1.0, 1.0),
            HitGrade.GOOD: GradeTuning(5, 0.5, 1.0),
            HitGrade.MISS: GradeTuning(0, -2.0, 0.0),
        },
    )
    assert judge_hit(15, windows).score == 5
    assert judge_hit(25, windows).recovery == -2.0


def test_thresholds_must_increase():
    with pytest.raises(ValueError):
        JudgeWindows(perfect_ms=150, good_ms=80, miss_ms=250)
    with pytest.raises(ValueError):
        JudgeWindows(perfect_ms=80, good_ms=150, miss_ms=150)


def test_tuning_must_cover_every_grade():
    with pytest.raises(ValueError):
        JudgeWindows(tuning={HitGrade.PERFECT: GradeTuning(1, 1.0, 1.0)})


def test_windows_are_hashable_and_tuning_is_read_only():
    assert hash(DEFAULT_WINDOWS) == hash(JudgeWindows())
    assert DEFAULT_WINDOWS == JudgeWindows()
    with pytest.raises(TypeError):
        DEFAULT_WINDOWS.tuning[HitGrade.MISS] = GradeTuning(0, -5.0, 0.0)
    assert judge_hit(500).recovery == 0
