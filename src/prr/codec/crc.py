"""CRC-8 checksum (polynomial 0x07, no reflection, no final XOR)."""

from __future__ import annotations

from collections.abc import Iterable

from prr.constants.codec import CRC8_INITIAL, CRC8_POLYNOMIAL


def crc8(data: Iterable[int], *, initial: int = CRC8_INITIAL, polynomial: int = CRC8_POLYNOMIAL) -> int:
    """Compute CRC-8 bit by bit, MSB first."""
    crc = initial & 0xFF
    for byte in data:
        crc ^= byte & 0xFF
        for _ in range(8):
            if crc & 0x80:
                crc = ((crc << 1) ^ polynomial) & 0xFF
            else:
                crc = (crc << 1) & 0xFF
    return crc
