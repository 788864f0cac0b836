"""JSON Schema for the persisted session record."""

from __future__ import annotations

from typing import Any

from prr.constants.record import BOOL_FIELDS, FIELD_DOMAINS, FINDING_REF_MAX_LENGTH, JSON_FIELD_NAMES

RECORD_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        **{
            JSON_FIELD_NAMES[name]: {"type": "integer", "minimum": low, "maximum": high}
            for name, (low, high) in FIELD_DOMAINS.items()
        },
        **{JSON_FIELD_NAMES[name]: {"type": "boolean"} for name in BOOL_FIELDS},
        JSON_FIELD_NAMES["finding_ref"]: {"type": "string", "maxLength": FINDING_REF_MAX_LENGTH},
    },
}

STATE_FILE_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["key", "record"],
    "properties": {
        "key": {"type": "string", "minLength": 1},
        "record": RECORD_SCHEMA,
    },
}
