"""Human-readable stdout report for a rated record."""

from __future__ import annotations

from collections.abc import Callable

from prr.constants.branding import ASCII_LOGO_LINES, RATING_SUMMARY_TITLE
from prr.constants.record import (
    CIA_LABELS,
    CONTROL_LABELS,
    DATA_TYPE_LABELS,
    EASE_LABELS,
    LEVEL_LABELS,
    SCOPE_LABELS,
)
from prr.constants.reporting import (
    ANSI_RED,
    ANSI_RESET,
    BAND_COLORS,
    LOWERED_FROM_CRITICAL_WARNING,
    OVERALL_BAND_LABELS,
)
from prr.model import AssessmentRecord, Scores


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def band_label(index: int) -> str:
    return OVERALL_BAND_LABELS[max(0, min(len(OVERALL_BAND_LABELS) - 1, index))]


def level_label(level: int) -> str:
    return LEVEL_LABELS[max(1, min(len(LEVEL_LABELS), level)) - 1]


class StdoutReporter:
    """Formats a record, its scores and its share text for the terminal."""

    def __init__(
        self,
        record: AssessmentRecord,
        scores: Scores,
        share_text: str,
        *,
        color: bool = True,
        verbose: bool = False,
    ) -> None:
        self._record = record
        self._scores = scores
        self._share_text = share_text
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        """Render the full report as a single string."""
        sections = [self._render_header(), self._render_inputs()]
        if self._verbose:
            sections.append(self._render_intermediates())
        warning = self._render_warning()
        if warning:
            sections.append(warning)
        return "\n".join(section for section in sections if section)

    def _render_header(self) -> str:
        s = self._scores
        sep = "  " + "─" * 38
        band = band_label(s.overall_band_index)
        if self._color:
            band = _colorize(band, BAND_COLORS.get(s.overall_band_index, ""))

        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {RATING_SUMMARY_TITLE}",
            sep,
            "",
            f"  Overall     {band}{self._base_suffix(s.overall_band_index, s.base_overall_band_index, band_label)}",
            (
                f"  Likelihood  {level_label(s.likelihood_level)}"
                f"{self._base_suffix(s.likelihood_level, s.base_likelihood_level, level_label)}"
            ),
            (
                f"  Impact      {level_label(s.impact_level)}"
                f"{self._base_suffix(s.impact_level, s.base_impact_level, level_label)}"
            ),
            f"  Code        {self._share_text}",
        ]
        return "\n".join(lines)

    def _render_inputs(self) -> str:
        r = self._record
        lines = [
            "",
            f"  Scope       {SCOPE_LABELS[r.scope - 1]} / {DATA_TYPE_LABELS[r.data_type - 1]}",
            f"  Ease        {EASE_LABELS[r.ease - 1]}",
            (
                f"  CIA         C={CIA_LABELS[r.confidentiality]} "
                f"I={CIA_LABELS[r.integrity]} A={CIA_LABELS[r.availability]}"
            ),
            (
                f"  Controls    prevention={CONTROL_LABELS[r.prevention]} "
                f"detection={CONTROL_LABELS[r.detection]} response={CONTROL_LABELS[r.response]} "
                f"budget={CONTROL_LABELS[r.privacy_budget]}"
            ),
        ]
        if self._scores.flags.reid_true:
            lines.append("  Re-identification demonstrated")
        return "\n".join(lines)

    def _render_intermediates(self) -> str:
        s = self._scores
        return "\n".join(
            [
                "",
                f"  fundamentals_raw  {s.fundamentals_raw:.3f}",
                f"  privacy_raw       {s.privacy_raw:.3f}",
                f"  impact_raw        {s.impact_raw:.3f}",
                f"  multiplier        {s.multiplier:.3f}",
                f"  effective_ease    {s.effective_ease:.3f}",
            ]
        )

    def _render_warning(self) -> str:
        if not self._scores.flags.overall_lowered_from_critical:
            return ""
        text = f"  Warning: {LOWERED_FROM_CRITICAL_WARNING}"
        return "\n" + (_colorize(text, ANSI_RED) if self._color else text)

    @staticmethod
    def _base_suffix(value: int, base: int, label: Callable[[int], str]) -> str:
        if value == base:
            return ""
        return f" (computed {label(base)})"
