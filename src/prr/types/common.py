"""Cross-module enumerations and type aliases."""

from __future__ import annotations

from enum import IntEnum
from typing import Literal, TypeAlias

CodecErrorCode: TypeAlias = Literal["InvalidLength", "UnsupportedVersion", "ChecksumMismatch"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = "JsonScalar | list[JsonValue] | dict[str, JsonValue]"
JsonObject: TypeAlias = "dict[str, JsonValue]"


class Scope(IntEnum):
    """Risk families a finding is assessed against."""

    SECURITY = 1
    PRIVACY = 2
    BOTH = 3

    @property
    def includes_privacy(self) -> bool:
        return self in (Scope.PRIVACY, Scope.BOTH)

    @property
    def includes_security(self) -> bool:
        return self in (Scope.SECURITY, Scope.BOTH)


class DataType(IntEnum):
    """Shape of the data under assessment."""

    AGGREGATED = 1
    NON_AGGREGATED = 2
    BOTH = 3

    @property
    def includes_aggregated(self) -> bool:
        return self in (DataType.AGGREGATED, DataType.BOTH)

    @property
    def includes_non_aggregated(self) -> bool:
        return self in (DataType.NON_AGGREGATED, DataType.BOTH)


class ControlLevel(IntEnum):
    """Strength of a mitigating control."""

    NA = 0
    NEGATED = 1
    WEAK = 2
    MEDIUM = 3
    STRONG = 4


class OverallBand(IntEnum):
    """Overall rating band, 0-based."""

    INFORMATIONAL = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4
