"""Record clamping, sanitization and JSON mapping helpers."""

from .clamping import clamp_field, clamp_int, clamp_record, is_clamped, sanitize_finding_ref
from .serialization import parse_assignment, record_from_dict, record_to_dict

__all__ = [
    "clamp_field",
    "clamp_int",
    "clamp_record",
    "is_clamped",
    "parse_assignment",
    "record_from_dict",
    "record_to_dict",
    "sanitize_finding_ref",
]
