"""Config data model for PRR."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from prr.constants.config import DEFAULT_STATE_FILE
from prr.types import ScoringThresholds


@dataclass(frozen=True)
class PrrConfig:
    """Resolved rating config."""

    thresholds: ScoringThresholds = ScoringThresholds()
    state_file: Path = Path(DEFAULT_STATE_FILE)
