"""Likelihood x impact scoring for assessment records.

The pipeline runs in a fixed order:

1. Fundamentals: worst CIA axis normalised to ``[0, 1]``.
2. Privacy: weighted average of the attacks that apply to the data type,
   replaced outright by ``1.0`` when re-identification was demonstrated.
3. Impact: fundamentals, privacy, or the max of both depending on scope.
4. Likelihood: attacker ease scaled by the mitigation multiplier.
5. Levels and band: thresholds per axis, then the overall matrix, then the
   forced-critical rule, then manual overrides.

Every stage clamps its inputs, so :func:`score` is total.
"""

from __future__ import annotations

from collections.abc import Iterable

from prr.constants.record import FIELD_DOMAINS
from prr.constants.scoring import (
    ATTACK_WEIGHTS,
    AVERAGING_INTENSITY,
    CRITICAL_BAND_INDEX,
    CRITICAL_BIAS_ENABLED,
    CRITICAL_BIAS_MIN_LIKELIHOOD,
    DETECTION_FACTORS,
    INFERENCE_INTENSITY,
    LINKAGE_DIRECTION_WEIGHT,
    MAX_CIA_VALUE,
    MAX_LEVEL,
    MIN_LEVEL,
    MULTIPLIER_MAX,
    MULTIPLIER_MIN,
    OVERALL_MATRIX,
    PREVENTION_FACTORS,
    PRIVACY_BUDGET_FACTORS,
    RESPONSE_FACTORS,
)
from prr.model import AssessmentRecord, CriticalBiasContext, ScoreFlags, Scores
from prr.record import clamp_int, clamp_record
from prr.types import DataType, LevelThresholds, Scope, ScoringThresholds

DEFAULT_THRESHOLDS: ScoringThresholds = ScoringThresholds()


def fundamentals_raw(record: AssessmentRecord) -> float:
    """Worst of confidentiality, integrity and availability in ``[0, 1]``."""
    worst = max(record.confidentiality, record.integrity, record.availability)
    return clamp_int(worst, 0, MAX_CIA_VALUE) / MAX_CIA_VALUE


def attack_intensities(record: AssessmentRecord) -> dict[str, float]:
    """Normalised intensity per privacy attack, keyed like ``ATTACK_WEIGHTS``."""
    avg_low, avg_high = FIELD_DOMAINS["avg"]
    inference_low, inference_high = FIELD_DOMAINS["inference"]
    linkage = LINKAGE_DIRECTION_WEIGHT * (
        int(bool(record.linkage_internal_to_external)) + int(bool(record.linkage_external_to_internal))
    )
    return {
        "averaging": AVERAGING_INTENSITY[clamp_int(record.avg, avg_low, avg_high)],
        "inference": INFERENCE_INTENSITY[clamp_int(record.inference, inference_low, inference_high)],
        "singling": 1.0 if record.singling else 0.0,
        "linkage": linkage,
        "reid": 1.0 if record.reid else 0.0,
    }


def applicable_attacks(data_type: DataType) -> tuple[str, ...]:
    """Attacks that can occur against the given data shape."""
    attacks: list[str] = []
    if data_type.includes_aggregated:
        attacks.extend(("averaging", "inference"))
    if data_type.includes_non_aggregated:
        attacks.append("singling")
    if data_type.includes_aggregated or data_type.includes_non_aggregated:
        attacks.extend(("linkage", "reid"))
    return tuple(attacks)


def weighted_average(pairs: Iterable[tuple[float, float]]) -> float:
    """Average of ``(weight, value)`` pairs; ``0.0`` when the total weight is zero."""
    numerator = 0.0
    denominator = 0.0
    for weight, value in pairs:
        numerator += weight * value
        denominator += weight
    if denominator == 0:
        return 0.0
    return numerator / denominator


def privacy_raw(record: AssessmentRecord) -> float:
    """Weighted privacy severity in ``[0, 1]``; re-identification dominates."""
    if record.reid:
        return 1.0
    intensities = attack_intensities(record)
    return weighted_average(
        (ATTACK_WEIGHTS[attack], intensities[attack]) for attack in applicable_attacks(_data_type(record))
    )


def impact_raw(record: AssessmentRecord) -> float:
    """Combine fundamentals and privacy severity according to scope."""
    scope = _scope(record)
    if not scope.includes_privacy:
        return fundamentals_raw(record)
    if not scope.includes_security:
        return privacy_raw(record)
    return max(fundamentals_raw(record), privacy_raw(record))


def budget_applies(record: AssessmentRecord) -> bool:
    """Privacy budget counts only for privacy-scoped aggregated data."""
    return _scope(record).includes_privacy and _data_type(record).includes_aggregated


def mitigation_multiplier(record: AssessmentRecord) -> float:
    """Ease multiplier from prevention, budget, detection and response.

    Prevention and budget combine by complement multiplication so that either
    control alone moves the combined value. The product is bounded to
    ``[MULTIPLIER_MIN, MULTIPLIER_MAX]``.
    """
    prevention = _control_factor(PREVENTION_FACTORS, record.prevention)
    budget = _control_factor(PRIVACY_BUDGET_FACTORS, record.privacy_budget) if budget_applies(record) else 0.0
    detection = _control_factor(DETECTION_FACTORS, record.detection)
    response = _control_factor(RESPONSE_FACTORS, record.response)

    combined_prevention = 1.0 - (1.0 - prevention) * (1.0 - budget)
    total = (1.0 - combined_prevention) * (1.0 - detection) * (1.0 - response)
    return max(MULTIPLIER_MIN, min(MULTIPLIER_MAX, total))


def effective_ease(record: AssessmentRecord) -> float:
    ease_low, ease_high = FIELD_DOMAINS["ease"]
    return clamp_int(record.ease, ease_low, ease_high) * mitigation_multiplier(record)


def level_for(value: float, thresholds: LevelThresholds) -> int:
    """Map a raw axis value to level 1..3."""
    if value >= thresholds.high:
        return 3
    if value >= thresholds.medium:
        return 2
    return 1


def band_for(likelihood_level: int, impact_level: int) -> int:
    """Look up the overall band index 0..4 for a pair of levels."""
    row = clamp_int(likelihood_level, MIN_LEVEL, MAX_LEVEL) - 1
    col = clamp_int(impact_level, MIN_LEVEL, MAX_LEVEL) - 1
    return OVERALL_MATRIX[row][col]


def forced_critical_eligible(record: AssessmentRecord) -> bool:
    """Re-identification on privacy-scoped aggregated data is always Critical."""
    return _scope(record).includes_privacy and _data_type(record).includes_aggregated and bool(record.reid)


def critical_bias_applies(context: CriticalBiasContext) -> bool:
    """Decide whether the band escalates one step for a re-identification finding.

    Disabled policy; kept as an explicit decision so a future format
    generation can turn it on in one place.
    """
    if not CRITICAL_BIAS_ENABLED:
        return False
    if not context.reid_true:
        return False
    return context.likelihood_level >= CRITICAL_BIAS_MIN_LIKELIHOOD or context.cia_max >= MAX_CIA_VALUE


def score(record: AssessmentRecord, *, thresholds: ScoringThresholds = DEFAULT_THRESHOLDS) -> Scores:
    """Reduce *record* to likelihood, impact and overall bands.

    Pure and total: every field is clamped before use, so out-of-range input
    never raises.
    """
    record = clamp_record(record)

    fundamentals = fundamentals_raw(record)
    privacy = privacy_raw(record)
    impact = impact_raw(record)
    multiplier = mitigation_multiplier(record)
    ease = effective_ease(record)

    base_likelihood = level_for(ease, thresholds.likelihood)
    base_impact = level_for(impact, thresholds.impact)
    base_band = band_for(base_likelihood, base_impact)

    cia_max = max(record.confidentiality, record.integrity, record.availability)
    base_band = _biased_band(base_band, CriticalBiasContext(cia_max, record.reid, base_likelihood))

    eligible = forced_critical_eligible(record)
    if eligible:
        base_band = CRITICAL_BAND_INDEX

    likelihood = record.override_likelihood or base_likelihood
    impact_level = record.override_impact or base_impact
    band = _biased_band(band_for(likelihood, impact_level), CriticalBiasContext(cia_max, record.reid, likelihood))

    lowered = False
    if record.override_overall:
        # Overall override is 1-based: 1 selects Informational.
        band = record.override_overall - 1
        lowered = eligible and band < CRITICAL_BAND_INDEX
    elif eligible:
        band = CRITICAL_BAND_INDEX

    return Scores(
        likelihood_level=likelihood,
        impact_level=impact_level,
        overall_band_index=band,
        base_likelihood_level=base_likelihood,
        base_impact_level=base_impact,
        base_overall_band_index=base_band,
        flags=ScoreFlags(
            forced_critical_eligible=eligible,
            overall_lowered_from_critical=lowered,
            reid_true=record.reid,
        ),
        fundamentals_raw=fundamentals,
        privacy_raw=privacy,
        impact_raw=impact,
        multiplier=multiplier,
        effective_ease=ease,
    )


def _biased_band(band: int, context: CriticalBiasContext) -> int:
    if critical_bias_applies(context):
        return min(CRITICAL_BAND_INDEX, band + 1)
    return band


def _control_factor(table: tuple[float, ...], level: int) -> float:
    return table[clamp_int(level, 0, len(table) - 1)]


def _scope(record: AssessmentRecord) -> Scope:
    low, high = FIELD_DOMAINS["scope"]
    return Scope(clamp_int(record.scope, low, high))


def _data_type(record: AssessmentRecord) -> DataType:
    low, high = FIELD_DOMAINS["data_type"]
    return DataType(clamp_int(record.data_type, low, high))
