from __future__ import annotations


class TargetCalcError(ValueError):
  """Base for inputs the target distributor refuses."""


class InvalidRange(TargetCalcError):
  def __init__(self, start, end):
    super().__init__(f"start date {start} is after end date {end}")
    self.start = start
    self.end = end


class InvalidTarget(TargetCalcError):
  def __init__(self, value):
    super().__init__(f"target must be a finite number, got {value!r}")
    self.value = value
