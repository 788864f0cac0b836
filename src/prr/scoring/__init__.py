"""Deterministic likelihood x impact scoring."""

from .engine import (
    DEFAULT_THRESHOLDS,
    applicable_attacks,
    band_for,
    critical_bias_applies,
    forced_critical_eligible,
    fundamentals_raw,
    impact_raw,
    level_for,
    mitigation_multiplier,
    privacy_raw,
    score,
    weighted_average,
)

__all__ = [
    "DEFAULT_THRESHOLDS",
    "applicable_attacks",
    "band_for",
    "critical_bias_applies",
    "forced_critical_eligible",
    "fundamentals_raw",
    "impact_raw",
    "level_for",
    "mitigation_multiplier",
    "privacy_raw",
    "score",
    "weighted_average",
]
