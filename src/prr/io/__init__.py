"""Session state persistence."""

from .state import StateStore

__all__ = ["StateStore"]
