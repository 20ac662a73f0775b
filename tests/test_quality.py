from __future__ import annotations

import pytest

from pyswr.quality import (
    EXCELLENT_SWR_LIMIT,
    FAIR_SWR_LIMIT,
    GOOD_SWR_LIMIT,
    SWR_QUALITY_TIERS,
    format_frequency,
    get_swr_quality,
)


def test_excellent_good_boundary() -> None:
    assert EXCELLENT_SWR_LIMIT == 1.5
    assert get_swr_quality(1.499999).quality == "Excellent"
    assert get_swr_quality(1.5).quality == "Good"


@pytest.mark.parametrize(
    "swr, quality",
    [
        (1.0, "Excellent"),
        (GOOD_SWR_LIMIT - 1e-9, "Good"),
        (GOOD_SWR_LIMIT, "Fair"),
        (FAIR_SWR_LIMIT - 1e-9, "Fair"),
        (FAIR_SWR_LIMIT, "Poor"),
        (19999.0, "Poor"),
        (float("inf"), "Poor"),
    ],
)
def test_quality_tiers(swr: float, quality: str) -> None:
    assert get_swr_quality(swr).quality == quality


def test_tiers_carry_display_metadata() -> None:
    assert [tier.quality for tier in SWR_QUALITY_TIERS] == ["Excellent", "Good", "Fair", "Poor"]
    for tier in SWR_QUALITY_TIERS:
        assert tier.color.startswith("#")
        assert tier.description
    assert len({tier.color for tier in SWR_QUALITY_TIERS}) == 4


@pytest.mark.parametrize(
    "hz, text",
    [
        (14_200_000, "14.200 MHz"),
        (1_800_000, "1.800 MHz"),
        (1_296_000_000, "1.296 GHz"),
        (500_000, "500.0 kHz"),
        (1_000, "1.0 kHz"),
        (50, "50 Hz"),
        (0, "0 Hz"),
        (999.6, "1.0 kHz"),
        (999_999.9996, "1.000 MHz"),
        (999_999_999.9996, "1.000 GHz"),
        (999_949.0, "999.9 kHz"),
    ],
)
def test_format_frequency(hz: float, text: str) -> None:
    assert format_frequency(hz) == text
