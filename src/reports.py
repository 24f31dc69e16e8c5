from __future__ import annotations
import csv
from pathlib import Path
from typing import Dict

import pandas as pd

from core.models import DistributionResult

def ensure_dir(p: Path):
  p.mkdir(parents=True, exist_ok=True)

def result_frame(result: DistributionResult) -> pd.DataFrame:
  """One row per month touched by the range, chronological."""
  return pd.DataFrame(
    [
      {
        "month": s.month,
        "first": s.first.isoformat(),
        "last": s.last.isoformat(),
        "calendar_days": s.calendar_days,
        "days_excluding_specified": s.counted_days,
        "days_worked_excluding_specified": s.worked_days,
        "monthly_target": s.target,
      }
      for s in result.segments
    ],
    columns=[
      "month", "first", "last", "calendar_days",
      "days_excluding_specified", "days_worked_excluding_specified", "monthly_target",
    ],
  )

def print_distribution(result: DistributionResult) -> None:
  # counted days, worked days, targets, then the total
  frame = result_frame(result).set_index("month")
  print("Days excluding specified days:")
  print(frame[["days_excluding_specified"]].to_string())
  print("\nDays worked excluding specified days:")
  print(frame[["days_worked_excluding_specified"]].to_string())
  print("\nMonthly targets:")
  print(frame[["monthly_target"]].to_string())
  print("\nTotal target:")
  print(result.total_target)

def write_distribution_csv(out_dir: Path, result: DistributionResult) -> Path:
  ensure_dir(out_dir)
  path = out_dir / "target_distribution.csv"
  fieldnames = ["month","first","last","calendar_days","days_excluding_specified","days_worked_excluding_specified","monthly_target"]
  with path.open("w", newline="", encoding="utf-8") as f:
    w = csv.DictWriter(f, fieldnames=fieldnames)
    w.writeheader()
    for s in result.segments:
      w.writerow({
        "month": s.month,
        "first": s.first.isoformat(),
        "last": s.last.isoformat(),
        "calendar_days": s.calendar_days,
        "days_excluding_specified": s.counted_days,
        "days_worked_excluding_specified": s.worked_days,
        "monthly_target": f"{s.target:.2f}",
      })
  return path

def write_distribution_md(reports_dir: Path, result: DistributionResult, *, meta: Dict | None = None) -> Path:
  """
  Writes <reports_dir>/target_distribution.md: the inputs that produced the
  split and a per-month table.
  """
  ensure_dir(reports_dir)
  path = reports_dir / "target_distribution.md"
  meta = meta or {}

  lines = []
  lines.append("# Target distribution\n")
  if "start_date" in meta and "end_date" in meta:
    lines.append(f"- **Period:** {meta['start_date']} to {meta['end_date']}")
  if "annual_target" in meta:
    lines.append(f"- **Annual target:** {float(meta['annual_target']):,.2f}")
  if "exclude_weekdays" in meta:
    excluded = meta["exclude_weekdays"] or []
    lines.append("- **Excluded weekdays:** " + (", ".join(excluded) if excluded else "none"))
  if "mode" in meta:
    lines.append(f"- **Mode:** {meta['mode']}")
  lines.append(f"- **Total target:** {result.total_target:,.2f}")
  lines.append("")  # spacer

  lines.append("| Month | From | To | Counted days | Worked days | Target |")
  lines.append("|---|---|---|---:|---:|---:|")
  for s in result.segments:
    lines.append(
      f"| {s.month} | {s.first.isoformat()} | {s.last.isoformat()} "
      f"| {s.counted_days} | {s.worked_days} | {s.target:,.2f} |"
    )
  lines.append("")

  path.write_text("\n".join(lines), encoding="utf-8")
  return path
