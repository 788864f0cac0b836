"""Tests for the likelihood x impact scoring pipeline."""

from __future__ import annotations

import itertools
from dataclasses import replace

import pytest

from prr.constants.scoring import MULTIPLIER_MAX, MULTIPLIER_MIN, OVERALL_MATRIX
from prr.model import AssessmentRecord, CriticalBiasContext
from prr.scoring import (
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
from prr.types import ControlLevel, DataType, LevelThresholds, OverallBand, Scope, ScoringThresholds

PRIVACY_AGGREGATED = AssessmentRecord(scope=Scope.PRIVACY, data_type=DataType.AGGREGATED)


def test_security_scenario_with_no_cia_impact_is_low() -> None:
    record = AssessmentRecord(scope=Scope.SECURITY, data_type=DataType.NON_AGGREGATED, ease=3)

    scores = score(record)

    assert scores.multiplier == pytest.approx(1.0)
    assert scores.fundamentals_raw == 0.0
    assert scores.impact_level == 1
    assert scores.likelihood_level == 2
    assert scores.overall_band_index == OverallBand.LOW


def test_privacy_reid_on_aggregated_data_is_forced_critical() -> None:
    record = replace(PRIVACY_AGGREGATED, reid=True, ease=1)

    scores = score(record)

    assert scores.base_likelihood_level == 1
    assert scores.base_overall_band_index == OverallBand.CRITICAL
    assert scores.overall_band_index == OverallBand.CRITICAL
    assert scores.flags.forced_critical_eligible is True
    assert scores.flags.reid_true is True
    assert scores.flags.overall_lowered_from_critical is False


@pytest.mark.parametrize("ease", [1, 2, 3, 4, 5])
@pytest.mark.parametrize("prevention", list(ControlLevel))
def test_forced_critical_ignores_ease_and_mitigations(ease: int, prevention: ControlLevel) -> None:
    record = replace(
        PRIVACY_AGGREGATED,
        reid=True,
        ease=ease,
        prevention=prevention,
        detection=ControlLevel.STRONG,
        response=ControlLevel.STRONG,
        privacy_budget=ControlLevel.STRONG,
    )

    assert score(record).base_overall_band_index == OverallBand.CRITICAL
    assert score(record).overall_band_index == OverallBand.CRITICAL


@pytest.mark.parametrize(
    ("scope", "data_type"),
    [
        (Scope.SECURITY, DataType.AGGREGATED),
        (Scope.PRIVACY, DataType.NON_AGGREGATED),
        (Scope.BOTH, DataType.BOTH),
    ],
    ids=["security_only", "non_aggregated", "both"],
)
def test_forced_critical_eligibility(scope: Scope, data_type: DataType) -> None:
    record = AssessmentRecord(scope=scope, data_type=data_type, reid=True)

    assert forced_critical_eligible(record) is (scope.includes_privacy and data_type.includes_aggregated)


class TestOverallOverride:
    """Manual overall override against the forced-critical rule."""

    @pytest.mark.parametrize("override", [1, 2, 3, 4])
    def test_lowering_below_critical_sets_flag(self, override: int) -> None:
        record = replace(PRIVACY_AGGREGATED, reid=True, override_overall=override)

        scores = score(record)

        assert scores.overall_band_index == override - 1
        assert scores.base_overall_band_index == OverallBand.CRITICAL
        assert scores.flags.overall_lowered_from_critical is True

    def test_override_to_critical_does_not_set_flag(self) -> None:
        record = replace(PRIVACY_AGGREGATED, reid=True, override_overall=5)

        scores = score(record)

        assert scores.overall_band_index == OverallBand.CRITICAL
        assert scores.flags.overall_lowered_from_critical is False

    def test_override_without_eligibility_does_not_set_flag(self) -> None:
        record = AssessmentRecord(scope=Scope.SECURITY, override_overall=1)

        scores = score(record)

        assert scores.overall_band_index == OverallBand.INFORMATIONAL
        assert scores.flags.overall_lowered_from_critical is False


class TestLevelOverrides:
    def test_level_overrides_replace_levels_before_matrix(self) -> None:
        record = AssessmentRecord(scope=Scope.SECURITY, ease=1, override_likelihood=3, override_impact=3)

        scores = score(record)

        assert (scores.likelihood_level, scores.impact_level) == (3, 3)
        assert scores.overall_band_index == OverallBand.CRITICAL
        assert (scores.base_likelihood_level, scores.base_impact_level) == (1, 1)
        assert scores.base_overall_band_index == OverallBand.INFORMATIONAL

    def test_zero_override_means_auto(self) -> None:
        record = AssessmentRecord(scope=Scope.SECURITY, ease=5, confidentiality=3)

        scores = score(record)

        assert scores.likelihood_level == scores.base_likelihood_level == 3
        assert scores.impact_level == scores.base_impact_level == 3


def test_matrix_is_monotone_in_both_axes() -> None:
    for likelihood, impact in itertools.product((1, 2), (1, 2, 3)):
        assert band_for(likelihood + 1, impact) >= band_for(likelihood, impact)
        assert band_for(impact, likelihood + 1) >= band_for(impact, likelihood)


def test_matrix_corners() -> None:
    assert band_for(1, 1) == OverallBand.INFORMATIONAL
    assert band_for(3, 3) == OverallBand.CRITICAL
    assert [list(row) for row in OVERALL_MATRIX] == [[0, 1, 2], [1, 2, 3], [2, 3, 4]]


class TestPrivacyRaw:
    def test_reid_dominates_every_other_signal(self) -> None:
        for avg, inference, singling in itertools.product((0, 1, 2), (0, 1, 2, 3), (False, True)):
            for data_type in DataType:
                record = AssessmentRecord(
                    scope=Scope.PRIVACY,
                    data_type=data_type,
                    avg=avg,
                    inference=inference,
                    singling=singling,
                    reid=True,
                )
                assert privacy_raw(record) == 1.0

    def test_no_attacks_is_zero(self) -> None:
        assert privacy_raw(PRIVACY_AGGREGATED) == 0.0

    def test_weighted_average_over_applicable_attacks(self) -> None:
        record = replace(PRIVACY_AGGREGATED, avg=2)

        # Aggregated data: averaging, inference, linkage and reid apply.
        assert privacy_raw(record) == pytest.approx(0.20 / (0.20 + 0.40 + 0.85 + 1.00))

    def test_singling_counts_only_for_non_aggregated_data(self) -> None:
        aggregated = replace(PRIVACY_AGGREGATED, singling=True)
        non_aggregated = replace(aggregated, data_type=DataType.NON_AGGREGATED)

        assert privacy_raw(aggregated) == 0.0
        assert privacy_raw(non_aggregated) == pytest.approx(0.70 / (0.70 + 0.85 + 1.00))

    def test_averaging_and_inference_ignored_for_non_aggregated_data(self) -> None:
        record = AssessmentRecord(scope=Scope.PRIVACY, data_type=DataType.NON_AGGREGATED, avg=2, inference=3)

        assert privacy_raw(record) == 0.0

    def test_linkage_directions_each_weigh_half(self) -> None:
        one = replace(PRIVACY_AGGREGATED, linkage_internal_to_external=True)
        both = replace(one, linkage_external_to_internal=True)

        assert privacy_raw(both) == pytest.approx(2 * privacy_raw(one))

    def test_applicable_attacks_per_data_type(self) -> None:
        assert applicable_attacks(DataType.AGGREGATED) == ("averaging", "inference", "linkage", "reid")
        assert applicable_attacks(DataType.NON_AGGREGATED) == ("singling", "linkage", "reid")
        assert set(applicable_attacks(DataType.BOTH)) == {"averaging", "inference", "singling", "linkage", "reid"}


class TestImpactRaw:
    def test_security_scope_uses_fundamentals_only(self) -> None:
        record = AssessmentRecord(scope=Scope.SECURITY, integrity=2, reid=True)

        assert impact_raw(record) == pytest.approx(2 / 3)

    def test_privacy_scope_uses_privacy_only(self) -> None:
        record = replace(PRIVACY_AGGREGATED, availability=3)

        assert impact_raw(record) == 0.0

    def test_both_scope_takes_max(self) -> None:
        record = AssessmentRecord(scope=Scope.BOTH, data_type=DataType.AGGREGATED, confidentiality=1, reid=True)

        assert impact_raw(record) == 1.0
        assert fundamentals_raw(record) == pytest.approx(1 / 3)


class TestMitigationMultiplier:
    def test_no_controls_is_identity(self) -> None:
        assert mitigation_multiplier(AssessmentRecord()) == pytest.approx(1.0)

    def test_strong_prevention_reduces_likelihood(self) -> None:
        record = AssessmentRecord(scope=Scope.SECURITY, ease=3, prevention=ControlLevel.STRONG)

        scores = score(record)

        assert scores.multiplier == pytest.approx(0.4)
        assert scores.effective_ease == pytest.approx(1.2)
        assert scores.likelihood_level == 1

    def test_negated_controls_increase_ease(self) -> None:
        record = AssessmentRecord(prevention=ControlLevel.NEGATED)

        assert mitigation_multiplier(record) == pytest.approx(1.25)

    def test_all_negated_is_capped(self) -> None:
        record = replace(
            PRIVACY_AGGREGATED,
            prevention=ControlLevel.NEGATED,
            detection=ControlLevel.NEGATED,
            response=ControlLevel.NEGATED,
            privacy_budget=ControlLevel.NEGATED,
        )

        assert mitigation_multiplier(record) == MULTIPLIER_MAX

    def test_every_combination_within_bounds(self) -> None:
        for prevention, detection, response, budget in itertools.product(ControlLevel, repeat=4):
            record = replace(
                PRIVACY_AGGREGATED,
                prevention=prevention,
                detection=detection,
                response=response,
                privacy_budget=budget,
            )
            assert MULTIPLIER_MIN <= mitigation_multiplier(record) <= MULTIPLIER_MAX

    def test_budget_alone_moves_combined_prevention(self) -> None:
        record = replace(PRIVACY_AGGREGATED, privacy_budget=ControlLevel.MEDIUM)

        assert mitigation_multiplier(record) == pytest.approx(0.7)

    def test_budget_combines_with_prevention_by_complement(self) -> None:
        record = replace(PRIVACY_AGGREGATED, prevention=ControlLevel.WEAK, privacy_budget=ControlLevel.WEAK)

        assert mitigation_multiplier(record) == pytest.approx(0.8 * 0.85)

    @pytest.mark.parametrize(
        ("scope", "data_type"),
        [(Scope.SECURITY, DataType.AGGREGATED), (Scope.PRIVACY, DataType.NON_AGGREGATED)],
        ids=["security_scope", "non_aggregated"],
    )
    def test_budget_ignored_outside_privacy_aggregated(self, scope: Scope, data_type: DataType) -> None:
        record = AssessmentRecord(scope=scope, data_type=data_type, privacy_budget=ControlLevel.STRONG)

        assert mitigation_multiplier(record) == pytest.approx(1.0)


class TestLevelMapping:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.0, 1), (2.74, 1), (2.75, 2), (3.99, 2), (4.0, 3), (7.5, 3)],
    )
    def test_likelihood_thresholds(self, value: float, expected: int) -> None:
        assert level_for(value, LevelThresholds(high=4.0, medium=2.75)) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.0, 1), (0.33, 1), (0.34, 2), (0.66, 2), (0.67, 3), (1.0, 3)],
    )
    def test_impact_thresholds(self, value: float, expected: int) -> None:
        assert level_for(value, LevelThresholds(high=0.67, medium=0.34)) == expected

    def test_custom_thresholds(self) -> None:
        record = AssessmentRecord(scope=Scope.SECURITY, ease=5)
        strict = ScoringThresholds(likelihood=LevelThresholds(high=6.0, medium=2.75))

        assert score(record).likelihood_level == 3
        assert score(record, thresholds=strict).likelihood_level == 2


def test_score_clamps_out_of_range_input() -> None:
    wild = AssessmentRecord(scope=9, data_type=-1, ease=99, confidentiality=7, prevention=-4, override_overall=12)
    tame = AssessmentRecord(scope=3, data_type=1, ease=5, confidentiality=3, prevention=0, override_overall=5)

    assert score(wild) == score(tame)


def test_score_is_deterministic() -> None:
    record = replace(PRIVACY_AGGREGATED, avg=1, inference=2, linkage_external_to_internal=True, ease=4)

    assert score(record) == score(record)


def test_critical_bias_is_disabled() -> None:
    for cia_max, reid, likelihood in itertools.product(range(4), (False, True), (1, 2, 3)):
        assert critical_bias_applies(CriticalBiasContext(cia_max, reid, likelihood)) is False


@pytest.mark.parametrize(
    ("pairs", "expected"),
    [
        ([], 0.0),
        ([(0.0, 1.0), (0.0, 0.5)], 0.0),
        ([(1.0, 1.0), (3.0, 0.0)], 0.25),
    ],
    ids=["empty", "zero_weight", "weighted"],
)
def test_weighted_average(pairs: list[tuple[float, float]], expected: float) -> None:
    assert weighted_average(pairs) == pytest.approx(expected)
