"""Record <-> JSON mapping used by session persistence and the CLI."""

from __future__ import annotations

from dataclasses import fields
from typing import Any

from prr.constants.record import BOOL_FIELDS, FIELD_DOMAINS, JSON_FIELD_NAMES
from prr.model import AssessmentRecord
from prr.record.clamping import clamp_record
from prr.types import JsonObject

_ATTRIBUTE_BY_JSON_KEY: dict[str, str] = {json_key: attr for attr, json_key in JSON_FIELD_NAMES.items()}


def record_to_dict(record: AssessmentRecord) -> JsonObject:
    """Serialize a clamped copy of *record* with the persisted JSON keys."""
    clamped = clamp_record(record)
    payload: JsonObject = {}
    for field in fields(clamped):
        value = getattr(clamped, field.name)
        if field.name in FIELD_DOMAINS:
            value = int(value)
        payload[JSON_FIELD_NAMES[field.name]] = value
    return payload


def record_from_dict(raw: dict[str, Any]) -> AssessmentRecord:
    """Build a clamped record from a JSON mapping.

    Accepts either the persisted JSON keys or attribute names. Unknown keys are
    ignored and missing keys keep their defaults.

    Raises:
        ValueError: A bounded field is not numeric or a flag is not a boolean.
    """
    values: dict[str, Any] = {}
    for key, value in raw.items():
        attr = _ATTRIBUTE_BY_JSON_KEY.get(key, key)
        if attr in FIELD_DOMAINS:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{key} must be a number, got {value!r}")
            values[attr] = int(value)
        elif attr in BOOL_FIELDS:
            if not isinstance(value, bool):
                raise ValueError(f"{key} must be a boolean, got {value!r}")
            values[attr] = value
        elif attr == "finding_ref":
            values[attr] = "" if value is None else str(value)
    return clamp_record(AssessmentRecord(**values))


def parse_assignment(assignment: str) -> tuple[str, int | bool | str]:
    """Parse a ``field=value`` CLI assignment into an attribute name and value.

    Raises:
        ValueError: Unknown field or value not valid for its field kind.
    """
    key, sep, raw_value = assignment.partition("=")
    key = key.strip()
    raw_value = raw_value.strip()
    if not sep or not key:
        raise ValueError(f"expected field=value, got {assignment!r}")
    attr = _ATTRIBUTE_BY_JSON_KEY.get(key, key)
    if attr in FIELD_DOMAINS:
        try:
            return attr, int(raw_value)
        except ValueError:
            raise ValueError(f"{key} must be an integer, got {raw_value!r}") from None
    if attr in BOOL_FIELDS:
        lowered = raw_value.lower()
        if lowered in ("1", "true", "yes", "on"):
            return attr, True
        if lowered in ("0", "false", "no", "off"):
            return attr, False
        raise ValueError(f"{key} must be a boolean, got {raw_value!r}")
    if attr == "finding_ref":
        return attr, raw_value
    raise ValueError(f"unknown record field {key!r}")
