"""Field domains, defaults and labels for assessment records."""

from __future__ import annotations

import re

# Inclusive (low, high) domain per bounded field, keyed by attribute name.
FIELD_DOMAINS: dict[str, tuple[int, int]] = {
    "scope": (1, 3),
    "data_type": (1, 3),
    "ease": (1, 5),
    "confidentiality": (0, 3),
    "integrity": (0, 3),
    "availability": (0, 3),
    "avg": (0, 2),
    "inference": (0, 3),
    "prevention": (0, 4),
    "detection": (0, 4),
    "response": (0, 4),
    "privacy_budget": (0, 4),
    "override_likelihood": (0, 3),
    "override_impact": (0, 3),
    "override_overall": (0, 5),
}

BOOL_FIELDS: tuple[str, ...] = (
    "singling",
    "linkage_internal_to_external",
    "linkage_external_to_internal",
    "reid",
)

# Attribute name -> JSON key used by the persisted session record.
JSON_FIELD_NAMES: dict[str, str] = {
    "scope": "scope",
    "data_type": "dataType",
    "ease": "ease",
    "confidentiality": "c",
    "integrity": "i",
    "availability": "a",
    "avg": "avg",
    "inference": "inference",
    "singling": "singling",
    "linkage_internal_to_external": "linkage_internal_to_external",
    "linkage_external_to_internal": "linkage_external_to_internal",
    "reid": "reid",
    "prevention": "prevention",
    "detection": "detection",
    "response": "response",
    "privacy_budget": "privacyBudget",
    "override_likelihood": "overrideLikelihood",
    "override_impact": "overrideImpact",
    "override_overall": "overrideOverall",
    "finding_ref": "findingRef",
}

FINDING_REF_MAX_LENGTH: int = 40
FINDING_REF_DISALLOWED_PATTERN: re.Pattern[str] = re.compile(r"[^A-Za-z0-9_ ./\-]")

SCOPE_LABELS: tuple[str, ...] = ("Security", "Privacy", "Privacy & Security")
DATA_TYPE_LABELS: tuple[str, ...] = ("Aggregated", "Non-aggregated", "Both")
EASE_LABELS: tuple[str, ...] = ("Expert", "Hard", "Medium", "Easy", "Trivial")
CIA_LABELS: tuple[str, ...] = ("NA", "Low", "Medium", "High")
CONTROL_LABELS: tuple[str, ...] = ("NA", "Negated", "Weak", "Medium", "Strong")
LEVEL_LABELS: tuple[str, ...] = ("Low", "Medium", "High")
