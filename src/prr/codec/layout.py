"""Table-driven bit layouts for the binary state payload.

A :class:`FormatLayout` describes one format generation: its version byte,
payload length and the fixed ``[offset, width)`` slot of every record field.
Layouts check themselves on construction, so a bad table fails at import
time rather than producing corrupt codes.
"""

from __future__ import annotations

from dataclasses import dataclass

from prr.constants.codec import CURRENT_FORMAT_VERSION, CURRENT_PAYLOAD_LENGTH, FRAME_OVERHEAD
from prr.constants.record import BOOL_FIELDS, FIELD_DOMAINS


@dataclass(frozen=True)
class BitField:
    """One record attribute stored as ``value - bias`` in ``width`` bits at ``offset``."""

    name: str
    offset: int
    width: int
    bias: int = 0

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    def stored(self, value: int) -> int:
        return (int(value) - self.bias) & self.mask

    def restored(self, raw: int) -> int:
        return raw + self.bias


@dataclass(frozen=True)
class FormatLayout:
    """Version byte, payload length and field slots of one format generation."""

    version: int
    payload_length: int
    fields: tuple[BitField, ...]

    def __post_init__(self) -> None:
        if not 0 <= self.version <= 0xFF:
            raise ValueError(f"format version {self.version} does not fit in one byte")
        total_bits = self.payload_length * 8
        used = 0
        for field in self.fields:
            if field.width <= 0 or field.offset < 0 or field.offset + field.width > total_bits:
                raise ValueError(f"field {field.name} [{field.offset}, +{field.width}) outside {total_bits}-bit payload")
            span = field.mask << field.offset
            if used & span:
                raise ValueError(f"field {field.name} overlaps another field")
            used |= span
            low, high = _domain(field.name)
            if low - field.bias < 0 or high - field.bias > field.mask:
                raise ValueError(f"field {field.name} domain {low}..{high} does not fit {field.width} bits")

    @property
    def frame_length(self) -> int:
        """Bytes on the wire: version byte, payload, CRC byte."""
        return self.payload_length + FRAME_OVERHEAD

    @property
    def code_length(self) -> int:
        """Characters in the unpadded Base64URL code."""
        return -(-self.frame_length * 4 // 3)

    def pack(self, values: dict[str, int]) -> bytes:
        """Pack field values into the payload; unused bits stay zero."""
        bits = 0
        for field in self.fields:
            bits |= field.stored(values[field.name]) << field.offset
        return bits.to_bytes(self.payload_length, "little")

    def unpack(self, payload: bytes) -> dict[str, int]:
        """Read every field back out of *payload*."""
        bits = int.from_bytes(payload, "little")
        return {field.name: field.restored((bits >> field.offset) & field.mask) for field in self.fields}


def _domain(name: str) -> tuple[int, int]:
    if name in BOOL_FIELDS:
        return 0, 1
    return FIELD_DOMAINS[name]


LAYOUT_V3: FormatLayout = FormatLayout(
    version=CURRENT_FORMAT_VERSION,
    payload_length=CURRENT_PAYLOAD_LENGTH,
    fields=(
        BitField("scope", 0, 2, bias=1),
        BitField("data_type", 2, 2, bias=1),
        BitField("ease", 4, 3, bias=1),
        BitField("confidentiality", 7, 2),
        BitField("integrity", 9, 2),
        BitField("availability", 11, 2),
        BitField("avg", 13, 2),
        BitField("inference", 15, 2),
        BitField("singling", 17, 1),
        BitField("linkage_internal_to_external", 18, 1),
        BitField("linkage_external_to_internal", 19, 1),
        BitField("reid", 20, 1),
        BitField("privacy_budget", 21, 3),
        BitField("override_likelihood", 24, 2),
        BitField("override_impact", 26, 2),
        BitField("override_overall", 28, 3),
        BitField("prevention", 31, 3),
        BitField("detection", 34, 3),
        BitField("response", 37, 3),
    ),
)

LAYOUTS: dict[int, FormatLayout] = {layout.version: layout for layout in (LAYOUT_V3,)}


def layout_for(version: int) -> FormatLayout:
    """Return the registered layout for *version*.

    Raises:
        KeyError: No layout is registered for *version*.
    """
    return LAYOUTS[version]
