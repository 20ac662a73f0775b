"""High level facade running one file load through the whole pipeline."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from prometheus_client import Counter, Histogram

from .bands import AMATEUR_BANDS, get_band_swr_data, select_default_bands
from .models import Band, BandSWRData, ParsedFile, SWRPoint, SweepSummary
from .quality import FAIR_SWR_LIMIT
from .swr import MAX_DISPLAY_POINTS, calculate_swr, decimate, summarize_sweep
from .touchstone import FormatError, parse_sparameter_file

logger = logging.getLogger(__name__)

load_duration = Histogram(
    "pyswr_load_duration_seconds",
    "Duration of Touchstone load and SWR analysis",
    labelnames=("format",),
)
load_failures = Counter(
    "pyswr_load_failures_total",
    "Touchstone loads rejected as malformed",
)


@dataclass(frozen=True)
class AnalysisConfig:
    bands: Tuple[Band, ...] = AMATEUR_BANDS
    show_all_bands: bool = False
    good_swr_threshold: float = FAIR_SWR_LIMIT
    max_display_points: int = MAX_DISPLAY_POINTS

    def validate(self) -> None:
        if not self.bands:
            raise ValueError("analysis requires at least one band")
        for band in self.bands:
            if band.start_freq > band.end_freq:
                raise ValueError(f"band {band.name} starts above its end frequency")
        if self.max_display_points <= 0:
            raise ValueError("max_display_points must be positive")
        if self.good_swr_threshold < 1.0:
            raise ValueError("good_swr_threshold cannot be below 1.0")


@dataclass(frozen=True)
class AnalysisResult:
    parsed: ParsedFile
    swr_points: Tuple[SWRPoint, ...]
    band_data: Tuple[BandSWRData, ...]
    summary: SweepSummary
    selected_bands: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_band_data(self) -> bool:
        """False when the sweep misses every configured band."""
        return bool(self.band_data)


class SWRAnalyser:
    """Turns raw Touchstone text into SWR series and per-band summaries."""

    def __init__(self, config: Optional[AnalysisConfig] = None) -> None:
        config = config or AnalysisConfig()
        config.validate()
        self._config = config

    @property
    def config(self) -> AnalysisConfig:
        return self._config

    def load(self, text: str) -> AnalysisResult:
        start = time.perf_counter()
        try:
            parsed = parse_sparameter_file(text)
        except FormatError as exc:
            load_failures.inc()
            logger.warning("rejected Touchstone data: %s", exc)
            raise

        points = calculate_swr(parsed)
        band_data = get_band_swr_data(points, self._config.bands)
        selected = select_default_bands(
            band_data,
            show_all=self._config.show_all_bands,
            threshold=self._config.good_swr_threshold,
        )
        result = AnalysisResult(
            parsed=parsed,
            swr_points=tuple(points),
            band_data=tuple(band_data),
            summary=summarize_sweep(points),
            selected_bands=tuple(selected),
        )
        load_duration.labels(format=parsed.format).observe(time.perf_counter() - start)

        if result.has_band_data:
            logger.info(
                "loaded %s with %d points, bands: %s",
                parsed.format,
                len(points),
                ", ".join(entry.band.name for entry in band_data),
            )
        else:
            logger.info("loaded %s with %d points, no data in the configured bands", parsed.format, len(points))
        return result

    def display_points(self, result: AnalysisResult) -> List[SWRPoint]:
        return decimate(result.swr_points, self._config.max_display_points)


__all__ = ["AnalysisConfig", "AnalysisResult", "SWRAnalyser"]
