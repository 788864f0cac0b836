"""Structured validation issues reported by the config validator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """One config problem, addressed by a stable code and a dotted field path."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""

    def format(self) -> str:
        """Render as ``[CODE] path field: message (hint)``."""
        location = f"{self.path} {self.field}" if self.field else self.path
        text = f"[{self.code}] {location}: {self.message}"
        return f"{text} ({self.hint})" if self.hint else text


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Order errors by code, then path and field, for stable output."""
    return sorted(errors, key=lambda e: (e.code, e.path, e.field))


def format_errors(errors: list[ValidationError]) -> str:
    return "\n".join(error.format() for error in sort_errors(errors))
