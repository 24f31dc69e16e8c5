from __future__ import annotations
import calendar
from datetime import date, datetime, timedelta
from dateutil import parser as dup
from typing import FrozenSet, Iterable, Iterator, Tuple

from core.models import DEFAULT_EXCLUDED, MonthKey, Weekday

_WEEKDAY_TOKENS = {
  "SUN": Weekday.SUNDAY, "MON": Weekday.MONDAY, "TUE": Weekday.TUESDAY,
  "WED": Weekday.WEDNESDAY, "THU": Weekday.THURSDAY, "FRI": Weekday.FRIDAY,
  "SAT": Weekday.SATURDAY,
}

def parse_date(value) -> date:
  """Calendar date from a date, datetime or date string. Raises ValueError."""
  if isinstance(value, datetime):
    return value.date()
  if isinstance(value, date):
    return value
  if not isinstance(value, str) or not value.strip():
    raise ValueError(f"not a date: {value!r}")
  # dateutil's ParserError is a ValueError
  return dup.parse(value.strip()).date()

def month_key(d) -> MonthKey:
  return f"{d.year:04d}-{d.month:02d}"

def weekday_of(d: date) -> Weekday:
  # date.weekday() is Monday=0
  return Weekday((d.weekday() + 1) % 7)

def parse_weekday(token) -> Weekday:
  if isinstance(token, Weekday):
    return token
  if isinstance(token, int) and not isinstance(token, bool):
    if not 0 <= token <= 6:
      raise ValueError(f"weekday number out of range 0..6: {token}")
    return Weekday(token)
  if isinstance(token, str):
    t = token.strip().upper()
    if t.isdigit():
      return parse_weekday(int(t))
    if t in _WEEKDAY_TOKENS:
      return _WEEKDAY_TOKENS[t]
    if t in Weekday.__members__:  # "FRIDAY"
      return Weekday[t]
  raise ValueError(f"unknown weekday: {token!r}")

def parse_weekdays(tokens: Iterable | None) -> FrozenSet[Weekday]:
  if tokens is None:
    return DEFAULT_EXCLUDED
  if isinstance(tokens, (str, int)):
    tokens = [tokens]
  return frozenset(parse_weekday(t) for t in tokens)

def month_index(d: date) -> int:
  return d.year * 12 + d.month - 1

def month_bounds(index: int) -> Tuple[date, date]:
  """First and last day of the month with the given month index."""
  y, m0 = divmod(index, 12)
  m = m0 + 1
  return date(y, m, 1), date(y, m, calendar.monthrange(y, m)[1])

def iter_month_bounds(start: date, end: date) -> Iterator[Tuple[date, date]]:
  for i in range(month_index(start), month_index(end) + 1):
    yield month_bounds(i)

def count_days(first: date, last: date, excluded: FrozenSet[Weekday]) -> Tuple[int, int]:
  """(calendar days, days whose weekday is not excluded) in first..last inclusive."""
  total = 0
  counted = 0
  d = first
  while d <= last:
    total += 1
    if weekday_of(d) not in excluded:
      counted += 1
    d += timedelta(days=1)
  return total, counted
