"""SWR quality tiers and display helpers."""
from __future__ import annotations

from typing import Tuple

from .models import QualityTier

# Upper bounds (exclusive) of each tier.
EXCELLENT_SWR_LIMIT = 1.5
GOOD_SWR_LIMIT = 2.0
FAIR_SWR_LIMIT = 3.0

EXCELLENT = QualityTier("Excellent", "#10b981", "Near-perfect match, negligible reflected power")
GOOD = QualityTier("Good", "#84cc16", "Acceptable match for most transceivers")
FAIR = QualityTier("Fair", "#f59e0b", "Usable, but a tuner is recommended")
POOR = QualityTier("Poor", "#ef4444", "High mismatch, check the antenna and feedline")

SWR_QUALITY_TIERS: Tuple[QualityTier, ...] = (EXCELLENT, GOOD, FAIR, POOR)

# (scale, suffix, decimals), smallest unit first
_FREQUENCY_UNITS = ((1.0, "Hz", 0), (1e3, "kHz", 1), (1e6, "MHz", 3), (1e9, "GHz", 3))


def get_swr_quality(swr: float) -> QualityTier:
    if swr < EXCELLENT_SWR_LIMIT:
        return EXCELLENT
    if swr < GOOD_SWR_LIMIT:
        return GOOD
    if swr < FAIR_SWR_LIMIT:
        return FAIR
    return POOR


def format_frequency(hz: float) -> str:
    """
    Render a frequency in the largest unit that keeps it at or above 1.

    The unit is chosen on the rounded value, so 999999.9996 Hz reads
    "1.000 MHz" rather than "1000.0 kHz".
    """
    for (scale, unit, digits), (next_scale, _, _) in zip(_FREQUENCY_UNITS, _FREQUENCY_UNITS[1:]):
        if round(hz / scale, digits) < next_scale / scale:
            return f"{hz / scale:.{digits}f} {unit}"
    scale, unit, digits = _FREQUENCY_UNITS[-1]
    return f"{hz / scale:.{digits}f} {unit}"


__all__ = [
    "EXCELLENT_SWR_LIMIT",
    "GOOD_SWR_LIMIT",
    "FAIR_SWR_LIMIT",
    "SWR_QUALITY_TIERS",
    "get_swr_quality",
    "format_frequency",
]
