from __future__ import annotations
import math
from dataclasses import replace
from datetime import date
from numbers import Real
from typing import Iterable, List

from core.dates import count_days, iter_month_bounds, month_key, parse_date, parse_weekdays
from core.errors import InvalidRange, InvalidTarget
from core.models import (
    DISTRIBUTION_MODES,
    LITERAL,
    WEIGHTED,
    DistributionResult,
    MonthSegment,
)

def _check_target(total_target) -> float:
    if isinstance(total_target, bool) or not isinstance(total_target, Real):
        raise InvalidTarget(total_target)
    value = float(total_target)
    if not math.isfinite(value):
        raise InvalidTarget(total_target)
    return value

def month_segments(start, end, excluded_weekdays: Iterable | None = None) -> List[MonthSegment]:
    """
    One segment per calendar month touched by start..end (inclusive), each
    clamped to the range and carrying its calendar and non-excluded day counts.
    Targets are left at 0.0.
    """
    start_d: date = parse_date(start)
    end_d: date = parse_date(end)
    if start_d > end_d:
        raise InvalidRange(start_d, end_d)
    excluded = parse_weekdays(excluded_weekdays)

    segments: List[MonthSegment] = []
    for month_first, month_last in iter_month_bounds(start_d, end_d):
        first = max(month_first, start_d)
        last = min(month_last, end_d)
        calendar_days, counted = count_days(first, last, excluded)
        segments.append(MonthSegment(
            month=month_key(month_first),
            first=first,
            last=last,
            calendar_days=calendar_days,
            counted_days=counted,
        ))
    return segments

def _allocate(seg: MonthSegment, baseline: float, mode: str) -> float:
    if seg.counted_days == 0:
        # nothing eligible this month; contributes nothing instead of 0/0
        return 0.0
    if mode == WEIGHTED:
        return (seg.counted_days / seg.calendar_days) * baseline
    return (seg.worked_days / seg.counted_days) * baseline

def distribute(
    start,
    end,
    total_target,
    excluded_weekdays: Iterable | None = None,
    mode: str = LITERAL,
) -> DistributionResult:
    """
    Split an annual target across the months touched by start..end.

    Every month gets a baseline of total_target / 12. In "literal" mode that
    baseline is the allocation for any month with at least one counted day,
    and the day counts are informational. In "weighted" mode the baseline is
    scaled by counted days over calendar days in the month's clamped range.

    excluded_weekdays=None excludes Fridays; pass an empty set to exclude nothing.
    Raises InvalidRange when start > end and InvalidTarget for non-finite targets.
    """
    if mode not in DISTRIBUTION_MODES:
        raise ValueError(f"unknown distribution mode {mode!r}; expected one of {DISTRIBUTION_MODES}")
    target = _check_target(total_target)
    segments = month_segments(start, end, excluded_weekdays)

    baseline = target / 12
    allocated: List[MonthSegment] = []
    total = 0.0
    for seg in segments:
        monthly = _allocate(seg, baseline, mode)
        allocated.append(replace(seg, target=monthly))
        total += monthly
    return DistributionResult(segments=allocated, total_target=total)
