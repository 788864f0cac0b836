"""Session state exceptions."""

from __future__ import annotations

from prr.exceptions.base import PrrError


class StateError(PrrError, ValueError):
    """Raised when a persisted session record cannot be used."""
