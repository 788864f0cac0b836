"""Value types shared by the scoring engine and the state codec."""

from __future__ import annotations

from dataclasses import dataclass

from prr.types import DataType, Scope


@dataclass(frozen=True)
class AssessmentRecord:
    """A single finding's rating inputs.

    Bounded fields hold 1-based UI values where the UI counts from one
    (``scope``, ``data_type``, ``ease``) and 0-based values otherwise.
    Records are not clamped on construction; use
    :func:`prr.record.clamp_record` before trusting caller-supplied values.
    """

    scope: int = Scope.SECURITY
    data_type: int = DataType.AGGREGATED
    ease: int = 3
    confidentiality: int = 0
    integrity: int = 0
    availability: int = 0
    avg: int = 0
    inference: int = 0
    singling: bool = False
    linkage_internal_to_external: bool = False
    linkage_external_to_internal: bool = False
    reid: bool = False
    prevention: int = 0
    detection: int = 0
    response: int = 0
    privacy_budget: int = 0
    override_likelihood: int = 0
    override_impact: int = 0
    override_overall: int = 0
    finding_ref: str = ""


@dataclass(frozen=True)
class ScoreFlags:
    """Boolean signals derived while scoring."""

    forced_critical_eligible: bool = False
    overall_lowered_from_critical: bool = False
    reid_true: bool = False


@dataclass(frozen=True)
class Scores:
    """Scoring output. ``base_*`` values are computed before manual overrides."""

    likelihood_level: int
    impact_level: int
    overall_band_index: int
    base_likelihood_level: int
    base_impact_level: int
    base_overall_band_index: int
    flags: ScoreFlags
    fundamentals_raw: float = 0.0
    privacy_raw: float = 0.0
    impact_raw: float = 0.0
    multiplier: float = 1.0
    effective_ease: float = 0.0


@dataclass(frozen=True)
class CriticalBiasContext:
    """Inputs to the critical-bias escalation decision."""

    cia_max: int
    reid_true: bool
    likelihood_level: int
