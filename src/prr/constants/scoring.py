"""Scoring tables, thresholds and the likelihood x impact matrix."""

from __future__ import annotations

MAX_CIA_VALUE: int = 3

AVERAGING_INTENSITY: tuple[float, ...] = (0.0, 0.5, 1.0)
INFERENCE_INTENSITY: tuple[float, ...] = (0.0, 1.0 / 3.0, 2.0 / 3.0, 1.0)
LINKAGE_DIRECTION_WEIGHT: float = 0.5

# Severity weight per privacy attack, used for the weighted privacy average.
ATTACK_WEIGHTS: dict[str, float] = {
    "averaging": 0.20,
    "inference": 0.40,
    "singling": 0.70,
    "linkage": 0.85,
    "reid": 1.00,
}

# Factor per control level: NA, Negated, Weak, Medium, Strong.
# Negated controls are negative and increase effective ease.
PREVENTION_FACTORS: tuple[float, ...] = (0.0, -0.25, 0.20, 0.40, 0.60)
DETECTION_FACTORS: tuple[float, ...] = (0.0, -0.15, 0.10, 0.20, 0.30)
RESPONSE_FACTORS: tuple[float, ...] = (0.0, -0.10, 0.05, 0.10, 0.20)
PRIVACY_BUDGET_FACTORS: tuple[float, ...] = (0.0, -0.20, 0.15, 0.30, 0.45)

MULTIPLIER_MIN: float = 0.1
MULTIPLIER_MAX: float = 1.5

LIKELIHOOD_HIGH_THRESHOLD: float = 4.0
LIKELIHOOD_MEDIUM_THRESHOLD: float = 2.75
IMPACT_HIGH_THRESHOLD: float = 0.67
IMPACT_MEDIUM_THRESHOLD: float = 0.34

# Rows: likelihood 1..3, columns: impact 1..3 -> overall band index 0..4.
OVERALL_MATRIX: tuple[tuple[int, ...], ...] = (
    (0, 1, 2),
    (1, 2, 3),
    (2, 3, 4),
)

MIN_LEVEL: int = 1
MAX_LEVEL: int = 3
CRITICAL_BAND_INDEX: int = 4

# Escalation one band up for re-identification findings. Never enabled in any
# released format generation.
CRITICAL_BIAS_ENABLED: bool = False
CRITICAL_BIAS_MIN_LIKELIHOOD: int = 2
