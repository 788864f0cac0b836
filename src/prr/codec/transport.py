"""Base64URL text encoding and the ``<findingRef>-<code>`` share format."""

from __future__ import annotations

import base64
import binascii

from prr.constants.codec import BASE64URL_PATTERN, SHARE_SEPARATOR
from prr.record import sanitize_finding_ref


def base64url_encode(data: bytes) -> str:
    """Encode with the URL-safe alphabet and strip padding."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def base64url_decode(text: str) -> bytes:
    """Decode unpadded Base64URL text.

    Raises:
        ValueError: *text* has characters outside the alphabet or an
            impossible length.
    """
    if not BASE64URL_PATTERN.match(text):
        raise ValueError("code contains characters outside the Base64URL alphabet")
    padded = text + "=" * (-len(text) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except binascii.Error as exc:
        raise ValueError(f"malformed Base64URL code: {exc}") from exc


def join_share_text(code: str, finding_ref: str = "") -> str:
    """Prefix *code* with the sanitized label, if there is one."""
    label = sanitize_finding_ref(finding_ref)
    if not label:
        return code
    return f"{label}{SHARE_SEPARATOR}{code}"


def split_share_text(text: str, code_length: int) -> tuple[str, str]:
    """Split shared text into ``(finding_ref, code)``.

    The separator is the last hyphen that is followed by exactly
    *code_length* characters, so both labels and codes may contain hyphens.
    Text without such a hyphen falls back to the last hyphen overall, and
    text without any hyphen is a bare code.
    """
    text = text.strip()
    if len(text) <= code_length:
        return "", text
    split_at = len(text) - code_length - 1
    if text[split_at] == SHARE_SEPARATOR:
        return text[:split_at], text[split_at + 1 :]
    label, separator, code = text.rpartition(SHARE_SEPARATOR)
    if not separator:
        return "", text
    return label, code
