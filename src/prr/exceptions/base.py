"""Root exception type."""

from __future__ import annotations


class PrrError(Exception):
    """Base class for all PRR errors."""
