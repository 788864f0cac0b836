"""Configuration defaults and filenames."""

from __future__ import annotations

from prr.constants.codec import CURRENT_FORMAT_VERSION

CONFIG_FILENAME: str = "prr.yaml"
DEFAULT_STATE_FILE: str = ".prr/state.json"

STATE_KEY: str = f"prr.v{CURRENT_FORMAT_VERSION}.state"
STATE_TEMP_PREFIX: str = ".tmp-"
STATE_TEMP_SUFFIX: str = ".json"
