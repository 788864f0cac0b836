"""Constants for stdout formatting."""

from __future__ import annotations

ANSI_RED: str = "\033[31m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_MAGENTA: str = "\033[35m"
ANSI_DIM: str = "\033[2m"
ANSI_RESET: str = "\033[0m"

OVERALL_BAND_LABELS: tuple[str, ...] = ("Informational", "Low", "Medium", "High", "Critical")

BAND_COLORS: dict[int, str] = {
    0: ANSI_DIM,
    1: ANSI_GREEN,
    2: ANSI_YELLOW,
    3: ANSI_RED,
    4: ANSI_MAGENTA,
}

LOWERED_FROM_CRITICAL_WARNING: str = (
    "Overall band was manually lowered below Critical for a re-identification finding on aggregated data"
)
