"""Value records shared across the pyswr modules."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

DEFAULT_REFERENCE_IMPEDANCE = 50.0


class Complex(NamedTuple):
    """
    Complex S-parameter value stored as a (real, imag) pair.

    Values are kept in rectangular form so SWR derivation never has to go
    back through trigonometry.
    """

    real: float
    imag: float

    def magnitude(self) -> float:
        return abs(self.to_cmath())

    def to_cmath(self) -> complex:
        return complex(self.real, self.imag)


@dataclass(frozen=True)
class Sample:
    frequency: float
    s11: Complex
    s21: Optional[Complex] = None
    s12: Optional[Complex] = None
    s22: Optional[Complex] = None

    @property
    def is_two_port(self) -> bool:
        return self.s21 is not None


@dataclass(frozen=True)
class ParsedFile:
    """Samples decoded from one Touchstone file, frequencies in Hz."""

    samples: Tuple[Sample, ...]
    format: str
    reference_impedance: float = DEFAULT_REFERENCE_IMPEDANCE

    @property
    def frequencies(self) -> Tuple[float, ...]:
        return tuple(sample.frequency for sample in self.samples)

    def to_touchstone(self) -> str:
        """
        Render the samples back into Touchstone text in Hz / RI form.
        """
        lines = [
            "! pyswr export",
            f"! Date: {time.strftime('%Y-%m-%d %H:%M:%S', time.gmtime())} UTC",
            f"# Hz S RI R {self.reference_impedance:g}",
        ]
        for sample in self.samples:
            params = [sample.s11]
            if self.format == "s2p":
                params.extend([sample.s21, sample.s12, sample.s22])
            values = " ".join(f"{value.real:.9f} {value.imag:.9f}" for value in params)
            lines.append(f"{sample.frequency!r} {values}")
        return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class SWRPoint:
    frequency: float
    swr: float


@dataclass(frozen=True)
class Band:
    name: str
    start_freq: float
    end_freq: float
    color: str

    def contains(self, frequency: float) -> bool:
        return self.start_freq <= frequency <= self.end_freq


@dataclass(frozen=True)
class BandSWRData:
    band: Band
    swr_points: Tuple[SWRPoint, ...]
    min_swr: float
    max_swr: float
    avg_swr: float


@dataclass(frozen=True)
class QualityTier:
    quality: str
    color: str
    description: str


@dataclass(frozen=True)
class SweepSummary:
    """Statistics over a whole sweep, independent of band boundaries."""

    start_freq: float
    stop_freq: float
    min_swr: float
    max_swr: float
    avg_swr: float
    best_frequency: float
    point_count: int


__all__ = [
    "DEFAULT_REFERENCE_IMPEDANCE",
    "Complex",
    "Sample",
    "ParsedFile",
    "SWRPoint",
    "Band",
    "BandSWRData",
    "QualityTier",
    "SweepSummary",
]
