from __future__ import annotations

import math

import pytest

from pyswr.models import Complex, ParsedFile, Sample, SWRPoint
from pyswr.swr import (
    MAX_SWR,
    REFLECTION_CLAMP,
    calculate_swr,
    decimate,
    reflection_to_swr,
    summarize_sweep,
    swr_to_power_reflected,
    swr_to_power_transmitted,
    swr_to_return_loss,
)


def one_port(*s11: Complex) -> ParsedFile:
    samples = tuple(Sample(frequency=1e6 * (idx + 1), s11=value) for idx, value in enumerate(s11))
    return ParsedFile(samples=samples, format="s1p")


def test_perfect_match_is_exactly_one() -> None:
    points = calculate_swr(one_port(Complex(0.0, 0.0)))
    assert points[0].swr == 1.0


def test_swr_never_below_one() -> None:
    for step in range(1000):
        rho = step / 1000
        assert reflection_to_swr(rho) >= 1.0


def test_swr_from_reflection() -> None:
    points = calculate_swr(one_port(Complex(0.2, 0.0), Complex(0.0, -0.5), Complex(0.3, 0.4)))
    assert [point.swr for point in points] == pytest.approx([1.5, 3.0, 3.0])


def test_swr_keeps_frequency_order() -> None:
    parsed = one_port(Complex(0.1, 0.0), Complex(0.2, 0.0), Complex(0.3, 0.0))
    points = calculate_swr(parsed)
    assert [point.frequency for point in points] == list(parsed.frequencies)


@pytest.mark.parametrize("s11", [Complex(1.0, 0.0), Complex(-1.0, 0.0), Complex(0.9, 0.9), Complex(0.0, 1.5)])
def test_reflection_at_or_above_unity_is_clamped(s11: Complex) -> None:
    swr = calculate_swr(one_port(s11))[0].swr
    assert math.isfinite(swr)
    assert swr == pytest.approx(MAX_SWR)


def test_clamp_constant() -> None:
    assert REFLECTION_CLAMP == 0.9999
    assert MAX_SWR == pytest.approx(19999.0)
    assert reflection_to_swr(0.99995) == pytest.approx(MAX_SWR)
    assert reflection_to_swr(0.999) < MAX_SWR


def test_return_loss() -> None:
    assert swr_to_return_loss(1.0) == math.inf
    assert swr_to_return_loss(2.0) == pytest.approx(9.5424, abs=1e-4)
    assert swr_to_return_loss(1.5) == pytest.approx(13.9794, abs=1e-4)


def test_power_split() -> None:
    assert swr_to_power_reflected(1.0) == 0.0
    assert swr_to_power_reflected(2.0) == pytest.approx(100 / 9)
    assert swr_to_power_reflected(3.0) == pytest.approx(25.0)
    assert swr_to_power_reflected(math.inf) == pytest.approx(100.0)
    assert swr_to_power_transmitted(3.0) == pytest.approx(75.0)
    assert swr_to_power_transmitted(1.0) == 100.0


def test_summarize_sweep() -> None:
    points = [SWRPoint(7.0e6, 2.5), SWRPoint(7.1e6, 1.2), SWRPoint(7.2e6, 1.2), SWRPoint(7.3e6, 3.1)]
    summary = summarize_sweep(points)
    assert summary.start_freq == 7.0e6
    assert summary.stop_freq == 7.3e6
    assert summary.min_swr == 1.2
    assert summary.max_swr == 3.1
    assert summary.avg_swr == pytest.approx(2.0)
    assert summary.best_frequency == 7.1e6
    assert summary.point_count == 4


def test_summarize_empty_sweep() -> None:
    with pytest.raises(ValueError):
        summarize_sweep([])


def test_decimate() -> None:
    points = [SWRPoint(float(idx), 1.0) for idx in range(1201)]
    thinned = decimate(points, max_points=500)
    assert len(thinned) == 401
    assert thinned[0] is points[0]
    assert thinned[1] is points[3]

    short = points[:100]
    assert decimate(short, max_points=500) == short

    with pytest.raises(ValueError):
        decimate(points, max_points=0)


def test_complex_magnitude_and_conversion() -> None:
    value = Complex(3.0, -4.0)
    assert value.to_cmath() == complex(3.0, -4.0)
    assert value.magnitude() == 5.0
    assert Complex(0.0, 0.0).magnitude() == 0.0
