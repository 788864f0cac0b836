"""Terminal reporting."""

from .stdout import StdoutReporter, band_label, level_label

__all__ = ["StdoutReporter", "band_label", "level_label"]
