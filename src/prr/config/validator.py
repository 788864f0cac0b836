"""Config file validation for PRR."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from prr.constants.config import CONFIG_FILENAME
from prr.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    ALLOWED_THRESHOLD_AXES,
    ALLOWED_THRESHOLD_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
)
from prr.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a prr.yaml file and return all validation errors.

    Used by ``prr validate-config`` and before every rating command. It
    never raises; all problems are returned as :class:`ValidationError`
    instances.
    """
    errors: list[ValidationError] = []
    path = config_path.resolve() if config_path else (root.resolve() / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    if "state_file" in raw:
        val = raw["state_file"]
        if not isinstance(val, str) or not val.strip():
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field="state_file",
                    message="invalid type for `state_file`",
                    hint="expected a non-empty path string",
                )
            )

    _validate_thresholds_block(raw, path_str, errors)
    return errors


def _validate_thresholds_block(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Validate the ``thresholds`` nested mapping in prr.yaml."""
    if "thresholds" not in raw:
        return
    block = raw["thresholds"]
    if block is None:
        return
    if not isinstance(block, dict):
        errors.append(
            ValidationError(code=CFG008, path=path_str, field="thresholds", message="`thresholds` must be a mapping")
        )
        return

    for axis in sorted(block.keys(), key=str):
        if axis not in ALLOWED_THRESHOLD_AXES:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=f"thresholds.{axis}",
                    message=f"unknown key `{axis}` in `thresholds`",
                    hint=_suggest_key(str(axis), ALLOWED_THRESHOLD_AXES),
                )
            )
            continue
        _validate_axis(block[axis], f"thresholds.{axis}", path_str, errors)


def _validate_axis(value: Any, field: str, path_str: str, errors: list[ValidationError]) -> None:
    """Validate one ``{high, medium}`` threshold pair."""
    if value is None:
        return
    if not isinstance(value, dict):
        errors.append(ValidationError(code=CFG008, path=path_str, field=field, message=f"`{field}` must be a mapping"))
        return

    numbers: dict[str, float] = {}
    for key in sorted(value.keys(), key=str):
        if key not in ALLOWED_THRESHOLD_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=f"{field}.{key}",
                    message=f"unknown key `{key}` in `{field}`",
                    hint=_suggest_key(str(key), ALLOWED_THRESHOLD_KEYS),
                )
            )
            continue
        number = value[key]
        if isinstance(number, bool) or not isinstance(number, (int, float)):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"{field}.{key}",
                    message=f"invalid type for `{field}.{key}`",
                    hint="expected a number",
                )
            )
            continue
        if number < 0:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field=f"{field}.{key}",
                    message=f"`{field}.{key}` must not be negative, got {number}",
                )
            )
            continue
        numbers[key] = float(number)

    if "high" in numbers and "medium" in numbers and numbers["high"] < numbers["medium"]:
        errors.append(
            ValidationError(
                code=CFG006,
                path=path_str,
                field=field,
                message=f"`{field}.high` is below `{field}.medium`",
                hint="high must be greater than or equal to medium",
            )
        )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
