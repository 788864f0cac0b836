"""Core data models for PRR."""

from .entities import AssessmentRecord, CriticalBiasContext, ScoreFlags, Scores

__all__ = [
    "AssessmentRecord",
    "CriticalBiasContext",
    "ScoreFlags",
    "Scores",
]
