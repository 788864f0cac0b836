"""Session persistence for the current assessment record.

The store keeps one JSON document keyed by the format version, so a state
file written by another format generation is ignored rather than misread.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from contextlib import suppress
from pathlib import Path

import jsonschema

from prr.constants.config import STATE_KEY, STATE_TEMP_PREFIX, STATE_TEMP_SUFFIX
from prr.constants.state_schema import STATE_FILE_SCHEMA
from prr.exceptions import StateError
from prr.model import AssessmentRecord
from prr.record import record_from_dict, record_to_dict
from prr.types import JsonObject

logger = logging.getLogger(__name__)


class StateStore:
    """Save and restore an :class:`AssessmentRecord` at a fixed path."""

    def __init__(self, path: Path, *, key: str = STATE_KEY) -> None:
        self.path = path
        self.key = key

    def save(self, record: AssessmentRecord) -> None:
        """Replace the stored document in one rename.

        The envelope is checked against the state schema before anything
        touches disk, so a save never leaves a document ``load`` would reject.
        """
        document: JsonObject = {"key": self.key, "record": record_to_dict(record)}
        jsonschema.validate(document, STATE_FILE_SCHEMA)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(dir=self.path.parent, prefix=STATE_TEMP_PREFIX, suffix=STATE_TEMP_SUFFIX)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(document, handle, indent=2, sort_keys=True)
                handle.write("\n")
            os.replace(temp_name, self.path)
        except BaseException:
            with suppress(FileNotFoundError):
                os.unlink(temp_name)
            raise
        logger.debug("Saved session state to %s", self.path)

    def load(self) -> AssessmentRecord | None:
        """Return the stored record, or ``None`` when absent or from another format.

        Raises:
            StateError: The file is not valid JSON or does not match the schema.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StateError(f"State file {self.path} is not valid JSON: {exc}") from exc

        try:
            jsonschema.validate(document, STATE_FILE_SCHEMA)
        except jsonschema.ValidationError as exc:
            raise StateError(f"State file {self.path} does not match the record schema: {exc.message}") from exc

        if document["key"] != self.key:
            logger.info("Ignoring state file %s written for %s", self.path, document["key"])
            return None
        return record_from_dict(document["record"])

    def clear(self) -> bool:
        """Delete the stored document; return whether one existed."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        logger.debug("Cleared session state at %s", self.path)
        return True
