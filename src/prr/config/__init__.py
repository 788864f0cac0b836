"""Configuration loading and validation for PRR.

This package facade re-exports all public names so callers can use
``from prr.config import ...``.
"""

from __future__ import annotations

from prr.config.loader import load_config
from prr.config.model import PrrConfig
from prr.config.validator import validate_config_file

__all__ = [
    "PrrConfig",
    "load_config",
    "validate_config_file",
]
