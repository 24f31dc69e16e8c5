from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from core.dates import parse_date, parse_weekdays
from core.models import DISTRIBUTION_MODES, LITERAL, TargetCfg

@dataclass
class PathsCfg:
  data_dir: Path
  reports_dir: Path
  config_dir: Path

@dataclass
class UnifiedConfig:
  target: TargetCfg
  paths: PathsCfg

def load_target_cfg(section: Dict[str, Any]) -> TargetCfg:
    for key in ["start_date", "end_date", "annual_target"]:
        if key not in section:
            raise KeyError(f"settings.yaml 'target' section is missing '{key}'")

    mode = str(section.get("mode", LITERAL)).lower()
    if mode not in DISTRIBUTION_MODES:
        raise ValueError(f"settings.yaml target.mode must be one of {DISTRIBUTION_MODES}, got {mode!r}")

    # absent key -> default exclusion (Friday); explicit [] -> exclude nothing
    return TargetCfg(
        start_date=parse_date(str(section["start_date"])),
        end_date=parse_date(str(section["end_date"])),
        annual_target=float(section["annual_target"]),
        exclude_weekdays=parse_weekdays(section.get("exclude_weekdays")),
        mode=mode,
    )

def load_unified_config(repo_root: Path) -> UnifiedConfig:
    """Load config/settings.yaml."""
    cfg_dir = repo_root / "config"
    yaml_cfg = cfg_dir / "settings.yaml"

    # Require PyYAML
    try:
        import yaml  # type: ignore
    except Exception as e:
        raise ImportError(
            "PyYAML is required to read config/settings.yaml. Install with: pip install pyyaml"
        ) from e

    if not yaml_cfg.exists():
        raise FileNotFoundError(
            f"Missing {yaml_cfg}. Create it with 'target' and 'paths' sections."
        )

    y: Dict[str, Any] = yaml.safe_load(yaml_cfg.read_text(encoding="utf-8")) or {}

    # minimal structure checks (fail fast with clear messages)
    for section in ["target", "paths"]:
        if section not in y:
            raise KeyError(f"settings.yaml is missing the '{section}' section")

    paths = y["paths"]

    return UnifiedConfig(
        target=load_target_cfg(y["target"]),
        paths=PathsCfg(
            data_dir=(repo_root / paths.get("data_dir", "data")).resolve(),
            reports_dir=(repo_root / paths.get("reports_dir", "reports")).resolve(),
            config_dir=cfg_dir.resolve(),
        ),
    )
