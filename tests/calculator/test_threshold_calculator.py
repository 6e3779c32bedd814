from fractions import Fraction

import pytest

from attendance_tracker.calculator.threshold_calculator import ThresholdCalculator, parse_threshold
from attendance_tracker.core.enums import AttendanceZone
from attendance_tracker.core.exceptions import ValidationError
from attendance_tracker.subjects.model import Subject


def _subject(attended, total):
    return Subject(name="Maths", credits=4, attended_classes=attended, total_classes=total)


def test_no_classes_is_zero_percent_and_not_safe():
    calc = ThresholdCalculator(75)
    s = _subject(0, 0)

    assert calc.percentage(s) == 0
    assert calc.is_safe(s) is False
    assert calc.classes_to_reach_threshold(s) == 0
    assert calc.classes_bunkable(s) == 0
    assert calc.zone(s) == AttendanceZone.DANGER


def test_exactly_on_threshold_is_safe_with_nothing_to_skip():
    calc = ThresholdCalculator(75)
    s = _subject(30, 40)

    assert calc.percentage(s) == 75.0
    assert calc.is_safe(s) is True
    # 30/41 would already drop below 75%.
    assert calc.classes_bunkable(s) == 0
    assert calc.classes_to_reach_threshold(s) == 0


def test_half_attendance_needs_forty_classes():
    calc = ThresholdCalculator(75)
    s = _subject(20, 40)

    assert calc.is_safe(s) is False
    assert calc.classes_to_reach_threshold(s) == 40
    assert calc.classes_bunkable(s) == 0

    caught_up = _subject(60, 80)
    one_short = _subject(59, 79)
    assert calc.is_safe(caught_up)
    assert not calc.is_safe(one_short)


def test_bunkable_is_largest_skip_that_stays_safe():
    calc = ThresholdCalculator(75)
    s = _subject(36, 40)

    m = calc.classes_bunkable(s)

    assert m == 8
    assert calc.is_safe(_subject(36, 40 + m))
    assert not calc.is_safe(_subject(36, 40 + m + 1))


def test_percentage_rounds_half_up_to_one_decimal():
    calc = ThresholdCalculator(75)

    assert calc.percentage(_subject(2, 3)) == 66.7
    assert calc.percentage(_subject(1, 8)) == 12.5
    # 1/16 = 6.25% -> 6.3 (half-up, not banker's rounding)
    assert calc.percentage(_subject(1, 16)) == 6.3


def test_comparison_uses_unrounded_value():
    calc = ThresholdCalculator(75)
    # 749/999 = 74.97...% displays as 75.0 but is below the threshold.
    s = _subject(749, 999)

    assert calc.percentage(s) == 75.0
    assert calc.is_safe(s) is False
    assert calc.classes_to_reach_threshold(s) == 1


def test_fractional_threshold_is_exact():
    calc = ThresholdCalculator("66.6")

    assert calc.threshold == pytest.approx(66.6)
    assert calc.exact_percentage(_subject(333, 500)) == Fraction(333, 5)
    assert calc.is_safe(_subject(333, 500)) is True
    assert calc.is_safe(_subject(332, 500)) is False


@pytest.mark.parametrize("value", [0, 100, -5, 150, "abc", True])
def test_invalid_threshold_rejected(value):
    with pytest.raises(ValidationError):
        parse_threshold(value)


def test_summary_carries_raw_values():
    calc = ThresholdCalculator(75)
    summary = calc.summarize(_subject(20, 40), position=3)

    assert summary.position == 3
    assert summary.zone == AttendanceZone.DANGER
    assert summary.is_safe is False
    assert summary.classes_to_attend == 40
    assert summary.to_dict()["percentage"] == 50.0
    assert summary.to_dict()["attendedClasses"] == 20
    assert summary.to_dict()["zone"] == "DANGER"


def test_percentage_rounds_exactly_for_huge_counters():
    calc = ThresholdCalculator(75)
    # 100 * a / t sits just below x.x5 at a precision beyond 28 digits.
    total = 10**40
    attended = (total * 125) // 10000 - 1

    assert calc.percentage(_subject(attended, total)) == 1.2
    assert calc.percentage(_subject(attended + 1, total)) == 1.3


@pytest.mark.parametrize("threshold", [75, "66.6", 90])
def test_required_and_bunkable_are_tight_boundaries(threshold):
    calc = ThresholdCalculator(threshold)

    for total in range(0, 61):
        for attended in range(0, total + 1):
            s = _subject(attended, total)
            n = calc.classes_to_reach_threshold(s)
            m = calc.classes_bunkable(s)

            if calc.is_safe(s):
                assert n == 0
                assert calc.is_safe(_subject(attended, total + m))
                assert not calc.is_safe(_subject(attended, total + m + 1))
            elif total == 0:
                assert (n, m) == (0, 0)
            else:
                assert m == 0
                assert n >= 1
                assert calc.is_safe(_subject(attended + n, total + n))
                assert not calc.is_safe(_subject(attended + n - 1, total + n - 1))
