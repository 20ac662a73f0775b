"""Amateur band table and per-band SWR aggregation."""
from __future__ import annotations

from typing import List, Sequence, Tuple

from .models import Band, BandSWRData, SWRPoint
from .quality import FAIR_SWR_LIMIT

AMATEUR_BANDS: Tuple[Band, ...] = (
    Band("160m", 1_800_000, 2_000_000, "#FF6384"),
    Band("80m", 3_500_000, 4_000_000, "#36A2EB"),
    Band("40m", 7_000_000, 7_300_000, "#FFCE56"),
    Band("30m", 10_100_000, 10_150_000, "#4BC0C0"),
    Band("20m", 14_000_000, 14_350_000, "#9966FF"),
    Band("17m", 18_068_000, 18_168_000, "#FF9F40"),
    Band("15m", 21_000_000, 21_450_000, "#FF6384"),
    Band("12m", 24_890_000, 24_990_000, "#C9CBCF"),
    Band("10m", 28_000_000, 29_700_000, "#36A2EB"),
    Band("6m", 50_000_000, 54_000_000, "#FFCE56"),
    Band("2m", 144_000_000, 148_000_000, "#4BC0C0"),
    Band("70cm", 420_000_000, 450_000_000, "#9966FF"),
)


def filter_swr_by_band(points: Sequence[SWRPoint], band: Band) -> List[SWRPoint]:
    """Points whose frequency lies in the band, both edges included."""
    return [point for point in points if band.contains(point.frequency)]


def get_band_swr_data(
    points: Sequence[SWRPoint], bands: Sequence[Band] = AMATEUR_BANDS
) -> List[BandSWRData]:
    """
    Split a sweep into per-band series with min/max/average SWR.

    Bands are returned in the order given. A band with no points inside it is
    left out of the result entirely rather than reported with empty
    statistics, so an empty list means the sweep misses every band.
    """
    result: List[BandSWRData] = []
    for band in bands:
        in_band = filter_swr_by_band(points, band)
        if not in_band:
            continue
        values = [point.swr for point in in_band]
        result.append(
            BandSWRData(
                band=band,
                swr_points=tuple(in_band),
                min_swr=min(values),
                max_swr=max(values),
                avg_swr=sum(values) / len(values),
            )
        )
    return result


def bands_in_range(points: Sequence[SWRPoint], bands: Sequence[Band] = AMATEUR_BANDS) -> List[Band]:
    return [band for band in bands if any(band.contains(point.frequency) for point in points)]


def select_default_bands(
    band_data: Sequence[BandSWRData],
    show_all: bool = False,
    threshold: float = FAIR_SWR_LIMIT,
) -> List[str]:
    """
    Names of the bands to pre-select after a load.

    Unless ``show_all`` is set only bands reaching an SWR below ``threshold``
    are picked; if none do, the first band is picked so something is shown.
    """
    if not band_data:
        return []
    if show_all:
        return [entry.band.name for entry in band_data]
    usable = [entry.band.name for entry in band_data if entry.min_swr < threshold]
    return usable or [band_data[0].band.name]


__all__ = [
    "AMATEUR_BANDS",
    "filter_swr_by_band",
    "get_band_swr_data",
    "bands_in_range",
    "select_default_bands",
]
