"""Shareable state codes: CRC-8 framed bitfields in Base64URL."""

from __future__ import annotations

from prr.codec.crc import crc8
from prr.codec.layout import LAYOUTS, BitField, FormatLayout, layout_for
from prr.codec.state_codec import StateCodec
from prr.codec.transport import base64url_decode, base64url_encode, join_share_text, split_share_text
from prr.model import AssessmentRecord

_DEFAULT_CODEC: StateCodec = StateCodec()


def encode_record(record: AssessmentRecord) -> str:
    """Encode *record* with the current format version."""
    return _DEFAULT_CODEC.encode(record)


def decode_code(code: str) -> AssessmentRecord:
    """Decode a bare code with the current format version."""
    return _DEFAULT_CODEC.decode(code)


def share_text(record: AssessmentRecord) -> str:
    return _DEFAULT_CODEC.share_text(record)


def parse_share_text(text: str) -> AssessmentRecord:
    return _DEFAULT_CODEC.parse_share_text(text)


__all__ = [
    "LAYOUTS",
    "BitField",
    "FormatLayout",
    "StateCodec",
    "base64url_decode",
    "base64url_encode",
    "crc8",
    "decode_code",
    "encode_record",
    "join_share_text",
    "layout_for",
    "parse_share_text",
    "share_text",
    "split_share_text",
]
