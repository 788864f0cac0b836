"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "PRR"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ PRR",
    "     // privacy & security risk rating",
)
RATING_SUMMARY_TITLE: str = "Risk rating"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} likelihood x impact rating"))
