"""Constants for the binary state code format."""

from __future__ import annotations

import re

CURRENT_FORMAT_VERSION: int = 3
CURRENT_PAYLOAD_LENGTH: int = 5

# Header (version byte) + trailer (CRC byte) around the payload.
FRAME_OVERHEAD: int = 2

CRC8_POLYNOMIAL: int = 0x07
CRC8_INITIAL: int = 0x00

BASE64URL_PATTERN: re.Pattern[str] = re.compile(r"^[A-Za-z0-9_-]*$")
SHARE_SEPARATOR: str = "-"

ERROR_INVALID_LENGTH: str = "InvalidLength"
ERROR_UNSUPPORTED_VERSION: str = "UnsupportedVersion"
ERROR_CHECKSUM_MISMATCH: str = "ChecksumMismatch"
