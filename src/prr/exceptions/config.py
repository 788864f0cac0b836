"""Configuration-related exceptions."""

from __future__ import annotations

from prr.exceptions.base import PrrError


class ConfigError(PrrError, ValueError):
    """Raised when rating configuration is invalid."""
