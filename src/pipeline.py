from __future__ import annotations

from config.loader import UnifiedConfig
from budgeting.targets import distribute
from core.models import DistributionResult
from reports import print_distribution, write_distribution_csv, write_distribution_md

def run_pipeline(cfg: UnifiedConfig, echo: bool = True) -> DistributionResult:
  t = cfg.target
  excluded = sorted(t.exclude_weekdays)

  result = distribute(t.start_date, t.end_date, t.annual_target, t.exclude_weekdays, mode=t.mode)

  for seg in result.segments:
    if seg.counted_days == 0:
      print(f"[WARN] {seg.month} has no days outside the excluded weekdays; allocated 0")

  if echo:
    print_distribution(result)

  write_distribution_csv(cfg.paths.data_dir, result)
  write_distribution_md(
    cfg.paths.reports_dir,
    result,
    meta={
      "start_date": t.start_date.isoformat(),
      "end_date": t.end_date.isoformat(),
      "annual_target": t.annual_target,
      "exclude_weekdays": [w.name.title() for w in excluded],
      "mode": t.mode,
    },
  )

  print(f"Distributed {t.annual_target:,.2f} across {len(result.segments)} months: {', '.join(result.months)}")
  return result
