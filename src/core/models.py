from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from enum import IntEnum
from typing import FrozenSet, List

MonthKey = str  # "YYYY-MM"

class Weekday(IntEnum):
  # Sunday-first, independent of locale and of date.weekday()
  SUNDAY = 0
  MONDAY = 1
  TUESDAY = 2
  WEDNESDAY = 3
  THURSDAY = 4
  FRIDAY = 5
  SATURDAY = 6

DEFAULT_EXCLUDED: FrozenSet[Weekday] = frozenset({Weekday.FRIDAY})

LITERAL = "literal"     # flat 1/12 per month, day counts reported only
WEIGHTED = "weighted"   # counted days / calendar days * 1/12
DISTRIBUTION_MODES = (LITERAL, WEIGHTED)

@dataclass(frozen=True)
class MonthSegment:
  month: MonthKey
  first: date
  last: date
  calendar_days: int
  counted_days: int
  target: float = 0.0

  @property
  def worked_days(self) -> int:
    return self.counted_days

@dataclass(frozen=True)
class DistributionResult:
  segments: List[MonthSegment] = field(default_factory=list)
  total_target: float = 0.0

  @property
  def months(self) -> List[MonthKey]:
    return [s.month for s in self.segments]

  @property
  def days_excluding_specified(self) -> List[int]:
    return [s.counted_days for s in self.segments]

  @property
  def days_worked_excluding_specified(self) -> List[int]:
    return [s.worked_days for s in self.segments]

  @property
  def monthly_targets(self) -> List[float]:
    return [s.target for s in self.segments]

@dataclass
class TargetCfg:
  start_date: date
  end_date: date
  annual_target: float
  exclude_weekdays: FrozenSet[Weekday] = DEFAULT_EXCLUDED
  mode: str = LITERAL
