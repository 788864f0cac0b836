"""Domain clamping and label sanitization for assessment records."""

from __future__ import annotations

from dataclasses import replace

from prr.constants.record import (
    BOOL_FIELDS,
    FIELD_DOMAINS,
    FINDING_REF_DISALLOWED_PATTERN,
    FINDING_REF_MAX_LENGTH,
)
from prr.model import AssessmentRecord


def clamp_int(value: int | float | bool, low: int, high: int) -> int:
    """Coerce *value* to int and clamp it into ``[low, high]``."""
    return max(low, min(high, int(value)))


def clamp_field(name: str, value: int | float | bool) -> int:
    """Clamp a bounded record field by attribute name."""
    low, high = FIELD_DOMAINS[name]
    return clamp_int(value, low, high)


def sanitize_finding_ref(raw: str | None) -> str:
    """Drop characters outside the label charset and cap the length."""
    if not raw:
        return ""
    cleaned = FINDING_REF_DISALLOWED_PATTERN.sub("", str(raw)).strip()
    return cleaned[:FINDING_REF_MAX_LENGTH].rstrip()


def clamp_record(record: AssessmentRecord) -> AssessmentRecord:
    """Return a copy of *record* with every field forced into its domain."""
    changes: dict[str, object] = {name: clamp_field(name, getattr(record, name)) for name in FIELD_DOMAINS}
    changes.update({name: bool(getattr(record, name)) for name in BOOL_FIELDS})
    changes["finding_ref"] = sanitize_finding_ref(record.finding_ref)
    return replace(record, **changes)  # type: ignore[arg-type]


def is_clamped(record: AssessmentRecord) -> bool:
    """Whether *record* already satisfies every field domain."""
    return clamp_record(record) == record
