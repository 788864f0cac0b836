"""State code decoding errors.

Each subclass carries a stable ``code`` so callers can surface the failure
kind without matching on message text.
"""

from __future__ import annotations

from prr.constants.codec import (
    ERROR_CHECKSUM_MISMATCH,
    ERROR_INVALID_LENGTH,
    ERROR_UNSUPPORTED_VERSION,
)
from prr.exceptions.base import PrrError
from prr.types import CodecErrorCode


class CodecError(PrrError, ValueError):
    """Raised when a state code cannot be decoded."""

    code: CodecErrorCode


class InvalidLengthError(CodecError):
    """Decoded byte count differs from the frame length of the format."""

    code: CodecErrorCode = ERROR_INVALID_LENGTH  # type: ignore[assignment]

    def __init__(self, actual: int, expected: int, detail: str = "") -> None:
        self.actual = actual
        self.expected = expected
        message = f"code decodes to {actual} bytes, expected {expected}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class UnsupportedVersionError(CodecError):
    """Leading version byte does not match the codec's format version."""

    code: CodecErrorCode = ERROR_UNSUPPORTED_VERSION  # type: ignore[assignment]

    def __init__(self, actual: int, expected: int) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(f"unsupported format version {actual}, expected {expected}")


class ChecksumMismatchError(CodecError):
    """Trailing CRC byte does not match the payload."""

    code: CodecErrorCode = ERROR_CHECKSUM_MISMATCH  # type: ignore[assignment]

    def __init__(self, actual: int, expected: int) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(f"checksum mismatch: code carries 0x{actual:02x}, payload hashes to 0x{expected:02x}")
