"""Versioned binary state codes for assessment records.

Wire frame: ``[version:1][payload:N][crc8:1]`` rendered as unpadded
Base64URL. The CRC covers the payload bytes only. ``findingRef`` is never
part of the frame; it travels in the share text around the code.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from prr.codec.crc import crc8
from prr.codec.layout import FormatLayout, layout_for
from prr.codec.transport import base64url_decode, base64url_encode, join_share_text, split_share_text
from prr.constants.codec import CURRENT_FORMAT_VERSION
from prr.constants.record import BOOL_FIELDS
from prr.exceptions import ChecksumMismatchError, InvalidLengthError, UnsupportedVersionError
from prr.model import AssessmentRecord
from prr.record import clamp_record, sanitize_finding_ref

logger = logging.getLogger(__name__)


class StateCodec:
    """Encode and decode records for a single format version.

    A codec only accepts codes carrying its own version byte: older and newer
    versions are both rejected.
    """

    def __init__(self, version: int = CURRENT_FORMAT_VERSION) -> None:
        """Bind the codec to a registered format version.

        Raises:
            KeyError: No layout is registered for *version*.
        """
        self._layout: FormatLayout = layout_for(version)

    @property
    def version(self) -> int:
        return self._layout.version

    @property
    def code_length(self) -> int:
        return self._layout.code_length

    def encode(self, record: AssessmentRecord) -> str:
        """Return the Base64URL code for *record*; never fails."""
        clamped = clamp_record(record)
        payload = self._layout.pack({field.name: getattr(clamped, field.name) for field in self._layout.fields})
        frame = bytes((self._layout.version, *payload, crc8(payload)))
        code = base64url_encode(frame)
        logger.debug("Encoded record as v%d code %s", self._layout.version, code)
        return code

    def decode(self, code: str) -> AssessmentRecord:
        """Parse *code* into a complete, clamped record.

        Length, version and checksum are all checked before any field is read.

        Raises:
            InvalidLengthError: The code is not valid Base64URL or decodes to
                the wrong number of bytes.
            UnsupportedVersionError: The version byte is not this codec's.
            ChecksumMismatchError: The CRC byte does not match the payload.
        """
        expected_length = self._layout.frame_length
        try:
            frame = base64url_decode(code.strip())
        except ValueError as exc:
            logger.warning("Rejected state code: %s", exc)
            raise InvalidLengthError(0, expected_length, str(exc)) from exc

        if len(frame) != expected_length:
            logger.warning("Rejected state code: %d bytes, expected %d", len(frame), expected_length)
            raise InvalidLengthError(len(frame), expected_length)

        version = frame[0]
        if version != self._layout.version:
            logger.warning("Rejected state code: version %d, expected %d", version, self._layout.version)
            raise UnsupportedVersionError(version, self._layout.version)

        payload = frame[1:-1]
        expected_crc = crc8(payload)
        if frame[-1] != expected_crc:
            logger.warning("Rejected state code: checksum mismatch")
            raise ChecksumMismatchError(frame[-1], expected_crc)

        values = self._layout.unpack(payload)
        record = AssessmentRecord(
            **{name: bool(value) if name in BOOL_FIELDS else value for name, value in values.items()}
        )
        logger.debug("Decoded v%d code %s", version, code)
        return clamp_record(record)

    def share_text(self, record: AssessmentRecord) -> str:
        """Return ``<findingRef>-<code>``, or the bare code when unlabelled."""
        return join_share_text(self.encode(record), record.finding_ref)

    def parse_share_text(self, text: str) -> AssessmentRecord:
        """Decode shared text, restoring the label carried in front of the code.

        Raises:
            CodecError: The code part fails :meth:`decode`.
        """
        finding_ref, code = split_share_text(text, self.code_length)
        record = self.decode(code)
        label = sanitize_finding_ref(finding_ref)
        if not label:
            return record
        return replace(record, finding_ref=label)
