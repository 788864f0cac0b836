"""Shared enumerations and type aliases for PRR."""

from .common import (
    CodecErrorCode,
    ControlLevel,
    DataType,
    JsonObject,
    JsonScalar,
    JsonValue,
    OverallBand,
    Scope,
)
from .config import LevelThresholds, ScoringThresholds

__all__ = [
    "CodecErrorCode",
    "ControlLevel",
    "DataType",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "LevelThresholds",
    "OverallBand",
    "Scope",
    "ScoringThresholds",
]
