"""Shared exception hierarchy for PRR."""

from __future__ import annotations

from .base import PrrError
from .codec import ChecksumMismatchError, CodecError, InvalidLengthError, UnsupportedVersionError
from .config import ConfigError
from .state import StateError

__all__ = [
    "ChecksumMismatchError",
    "CodecError",
    "ConfigError",
    "InvalidLengthError",
    "PrrError",
    "StateError",
    "UnsupportedVersionError",
]
