"""SWR derivation and related RF figures of merit."""
from __future__ import annotations

import math
from typing import List, Sequence

from .models import ParsedFile, SWRPoint, SweepSummary

# |S11| is clamped to this value before dividing, so a reflection at or past
# unity (noise, saturation, an open or short) maps to MAX_SWR instead of
# infinity or a negative ratio.
REFLECTION_CLAMP = 0.9999
MAX_SWR = (1.0 + REFLECTION_CLAMP) / (1.0 - REFLECTION_CLAMP)

MAX_DISPLAY_POINTS = 500


def reflection_to_swr(rho: float) -> float:
    rho = min(abs(rho), REFLECTION_CLAMP)
    return (1.0 + rho) / (1.0 - rho)


def calculate_swr(parsed: ParsedFile) -> List[SWRPoint]:
    """Convert every sample's S11 into an SWR point, keeping frequency order."""
    return [
        SWRPoint(frequency=sample.frequency, swr=reflection_to_swr(sample.s11.magnitude()))
        for sample in parsed.samples
    ]


def _reflection_from_swr(swr: float) -> float:
    if math.isinf(swr):
        return 1.0
    return (swr - 1.0) / (swr + 1.0)


def swr_to_return_loss(swr: float) -> float:
    """Return loss in dB; ``math.inf`` for a perfect match."""
    if swr <= 1.0:
        return math.inf
    return -20.0 * math.log10(_reflection_from_swr(swr))


def swr_to_power_reflected(swr: float) -> float:
    """Percentage of forward power reflected back to the source."""
    if swr <= 1.0:
        return 0.0
    return _reflection_from_swr(swr) ** 2 * 100.0


def swr_to_power_transmitted(swr: float) -> float:
    return 100.0 - swr_to_power_reflected(swr)


def summarize_sweep(points: Sequence[SWRPoint]) -> SweepSummary:
    if not points:
        raise ValueError("cannot summarize an empty sweep")
    best = min(points, key=lambda point: point.swr)
    values = [point.swr for point in points]
    return SweepSummary(
        start_freq=points[0].frequency,
        stop_freq=points[-1].frequency,
        min_swr=best.swr,
        max_swr=max(values),
        avg_swr=sum(values) / len(values),
        best_frequency=best.frequency,
        point_count=len(points),
    )


def decimate(points: Sequence[SWRPoint], max_points: int = MAX_DISPLAY_POINTS) -> List[SWRPoint]:
    """
    Thin a sweep for charting by keeping every n-th point.

    The step is ``ceil(len(points) / max_points)``, so the result never holds
    more than ``max_points`` points and always starts with the first one.
    """
    if max_points <= 0:
        raise ValueError("max_points must be positive")
    step = math.ceil(len(points) / max_points)
    if step <= 1:
        return list(points)
    return list(points[::step])


__all__ = [
    "REFLECTION_CLAMP",
    "MAX_SWR",
    "MAX_DISPLAY_POINTS",
    "reflection_to_swr",
    "calculate_swr",
    "swr_to_return_loss",
    "swr_to_power_reflected",
    "swr_to_power_transmitted",
    "summarize_sweep",
    "decimate",
]
