"""Typed configuration structures for rating settings."""

from __future__ import annotations

from dataclasses import dataclass

from prr.constants.scoring import (
    IMPACT_HIGH_THRESHOLD,
    IMPACT_MEDIUM_THRESHOLD,
    LIKELIHOOD_HIGH_THRESHOLD,
    LIKELIHOOD_MEDIUM_THRESHOLD,
)


@dataclass(frozen=True)
class LevelThresholds:
    """Lower bounds for level 3 (``high``) and level 2 (``medium``) on one axis."""

    high: float
    medium: float


@dataclass(frozen=True)
class ScoringThresholds:
    """Per-axis level thresholds."""

    likelihood: LevelThresholds = LevelThresholds(LIKELIHOOD_HIGH_THRESHOLD, LIKELIHOOD_MEDIUM_THRESHOLD)
    impact: LevelThresholds = LevelThresholds(IMPACT_HIGH_THRESHOLD, IMPACT_MEDIUM_THRESHOLD)
