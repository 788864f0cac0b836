"""Config loading and normalization for PRR."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from prr.config.model import PrrConfig
from prr.constants.config import CONFIG_FILENAME, DEFAULT_STATE_FILE
from prr.exceptions import ConfigError
from prr.types import LevelThresholds, ScoringThresholds

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> PrrConfig:
    """Load and validate rating config from ``prr.yaml`` or an explicit path.

    Relative ``state_file`` paths resolve against *root*.
    """
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("No config at %s, using defaults", path)
        return PrrConfig(state_file=root / DEFAULT_STATE_FILE)

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    thresholds_raw = raw.get("thresholds", {})
    if thresholds_raw is None:
        thresholds_raw = {}
    if not isinstance(thresholds_raw, dict):
        raise ConfigError("thresholds must be a mapping")

    defaults = ScoringThresholds()
    thresholds = ScoringThresholds(
        likelihood=_build_level_thresholds(thresholds_raw.get("likelihood"), defaults.likelihood, "likelihood"),
        impact=_build_level_thresholds(thresholds_raw.get("impact"), defaults.impact, "impact"),
    )

    state_file_raw = raw.get("state_file", DEFAULT_STATE_FILE)
    if not isinstance(state_file_raw, str) or not state_file_raw.strip():
        raise ConfigError("state_file must be a non-empty string")
    state_file = Path(state_file_raw)
    if not state_file.is_absolute():
        state_file = root / state_file

    logger.debug("Loaded config from %s", path)
    return PrrConfig(thresholds=thresholds, state_file=state_file)


def _build_level_thresholds(raw: Any, default: LevelThresholds, axis: str) -> LevelThresholds:
    """Merge one axis of the ``thresholds`` block over its defaults."""
    if raw is None:
        return default
    if not isinstance(raw, dict):
        raise ConfigError(f"thresholds.{axis} must be a mapping")
    high = _ensure_number(raw.get("high", default.high), f"thresholds.{axis}.high")
    medium = _ensure_number(raw.get("medium", default.medium), f"thresholds.{axis}.medium")
    if medium < 0:
        raise ConfigError(f"thresholds.{axis}.medium must not be negative")
    if high < medium:
        raise ConfigError(f"thresholds.{axis}.high must be >= thresholds.{axis}.medium")
    return LevelThresholds(high=high, medium=medium)


def _ensure_number(value: Any, key_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{key_name} must be a number")
    return float(value)
