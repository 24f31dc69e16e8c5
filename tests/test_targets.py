import math
from datetime import date

import pytest

from budgeting.targets import distribute, month_segments
from core.errors import InvalidRange, InvalidTarget, TargetCalcError
from core.models import Weekday

FRI_SUN = {Weekday.FRIDAY, Weekday.SUNDAY}


def test_first_quarter_excluding_fridays_and_sundays():
  result = distribute("2024-01-01", "2024-03-31", 5220, FRI_SUN)

  assert result.months == ["2024-01", "2024-02", "2024-03"]
  assert result.days_excluding_specified == [23, 21, 21]
  assert result.days_worked_excluding_specified == [23, 21, 21]
  assert result.monthly_targets == [435.0, 435.0, 435.0]
  assert result.total_target == 1305.0


def test_leap_february():
  result = distribute("2024-02-01", "2024-02-29", 2900, set())

  assert result.days_excluding_specified == [29]
  assert result.segments[0].calendar_days == 29
  assert result.monthly_targets[0] == pytest.approx(2900 / 12)
  assert result.total_target == pytest.approx(241.6666666)


def test_range_within_one_month_gives_one_entry():
  result = distribute(date(2024, 5, 10), date(2024, 5, 20), 1200, [Weekday.SATURDAY])

  assert len(result.segments) == 1
  seg = result.segments[0]
  assert (seg.first, seg.last) == (date(2024, 5, 10), date(2024, 5, 20))
  assert seg.target == 100.0


@pytest.mark.parametrize("day,expected", [
  ("2024-01-05", 0),  # Friday
  ("2024-01-04", 1),  # Thursday
])
def test_single_day_range(day, expected):
  result = distribute(day, day, 1200, [Weekday.FRIDAY])

  assert result.days_excluding_specified == [expected]
  assert result.monthly_targets == [100.0 if expected else 0.0]


def test_month_with_only_excluded_days_contributes_nothing():
  # 2024-01-06 Saturday, 2024-01-07 Sunday
  result = distribute("2024-01-06", "2024-01-07", 1200, {Weekday.SATURDAY, Weekday.SUNDAY})

  assert result.days_excluding_specified == [0]
  assert result.monthly_targets == [0.0]
  assert result.total_target == 0.0
  assert not math.isnan(result.total_target)


def test_all_weekdays_excluded_over_several_months():
  result = distribute("2024-01-15", "2024-03-10", 1200, range(7))

  assert result.days_excluding_specified == [0, 0, 0]
  assert result.total_target == 0.0


@pytest.mark.parametrize("start,end,months", [
  ("2024-01-31", "2024-02-01", 2),
  ("2023-11-15", "2024-02-03", 4),
  ("2024-01-01", "2024-12-31", 12),
  ("2023-06-30", "2025-06-01", 25),
])
def test_entry_count_matches_months_touched(start, end, months):
  result = distribute(start, end, 1000, FRI_SUN)

  assert len(result.days_excluding_specified) == len(result.monthly_targets) == len(result.segments) == months


def test_partial_months_are_clamped():
  segs = month_segments("2024-01-20", "2024-03-05", set())

  assert [(s.first, s.last) for s in segs] == [
    (date(2024, 1, 20), date(2024, 1, 31)),
    (date(2024, 2, 1), date(2024, 2, 29)),
    (date(2024, 3, 1), date(2024, 3, 5)),
  ]
  # no exclusions: counted days equal the raw calendar days
  assert [s.counted_days for s in segs] == [12, 29, 5]
  assert [s.calendar_days for s in segs] == [12, 29, 5]


def test_repeat_calls_give_identical_results():
  a = distribute("2024-01-01", "2024-05-31", 5220, [0, 5])
  b = distribute("2024-01-01", "2024-05-31", 5220, [0, 5])

  assert a == b
  assert a is not b


def test_default_exclusion_is_friday():
  # January 2024 has four Fridays
  assert distribute("2024-01-01", "2024-01-31", 1200).days_excluding_specified == [27]


def test_weighted_mode_scales_by_counted_over_calendar_days():
  result = distribute("2024-01-01", "2024-03-31", 5220, FRI_SUN, mode="weighted")

  assert result.monthly_targets == pytest.approx([435 * 23 / 31, 435 * 21 / 29, 435 * 21 / 31])
  assert result.total_target == pytest.approx(sum(result.monthly_targets))


def test_weighted_mode_zero_eligible_days():
  result = distribute("2024-01-06", "2024-01-07", 1200, {Weekday.SATURDAY, Weekday.SUNDAY}, mode="weighted")
  assert result.monthly_targets == [0.0]


@pytest.mark.parametrize("target", [0, -1200, 1e9])
def test_any_finite_target_is_accepted(target):
  result = distribute("2024-01-01", "2024-01-31", target, set())
  assert result.total_target == pytest.approx(target / 12)


def test_inverted_range_raises():
  with pytest.raises(InvalidRange) as exc:
    distribute("2024-03-01", "2024-02-01", 1200, set())
  assert exc.value.start == date(2024, 3, 1)
  assert isinstance(exc.value, TargetCalcError)


@pytest.mark.parametrize("target", [float("nan"), float("inf"), float("-inf"), "1200", None, True])
def test_non_finite_target_raises(target):
  with pytest.raises(InvalidTarget):
    distribute("2024-01-01", "2024-01-31", target, set())


def test_unknown_mode_raises():
  with pytest.raises(ValueError):
    distribute("2024-01-01", "2024-01-31", 1200, set(), mode="proportional")
