"""Touchstone (.s1p / .s2p) parser."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, Overflow
from enum import Enum
from typing import List, Optional, Tuple, Type, TypeVar

from .models import DEFAULT_REFERENCE_IMPEDANCE, Complex, ParsedFile, Sample

logger = logging.getLogger(__name__)

ONE_PORT_COLUMNS = 2
TWO_PORT_COLUMNS = 8


class FormatError(ValueError):
    """Raised when text is not valid Touchstone data."""

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


class FrequencyUnit(str, Enum):
    HZ = "HZ"
    KHZ = "KHZ"
    MHZ = "MHZ"
    GHZ = "GHZ"

    @property
    def multiplier(self) -> Decimal:
        return _UNIT_MULTIPLIERS[self]


_UNIT_MULTIPLIERS = {
    FrequencyUnit.HZ: Decimal(1),
    FrequencyUnit.KHZ: Decimal(10) ** 3,
    FrequencyUnit.MHZ: Decimal(10) ** 6,
    FrequencyUnit.GHZ: Decimal(10) ** 9,
}


class ParameterType(str, Enum):
    S = "S"
    Y = "Y"
    Z = "Z"
    H = "H"
    G = "G"


class DataFormat(str, Enum):
    MA = "MA"
    DB = "DB"
    RI = "RI"


@dataclass(frozen=True)
class OptionLine:
    unit: FrequencyUnit = FrequencyUnit.GHZ
    parameter: ParameterType = ParameterType.S
    data_format: DataFormat = DataFormat.MA
    reference_impedance: float = DEFAULT_REFERENCE_IMPEDANCE


_E = TypeVar("_E", bound=Enum)


def _lookup(enum_cls: Type[_E], token: str) -> Optional[_E]:
    try:
        return enum_cls(token)
    except ValueError:
        return None


def _parse_float(token: str, line: Optional[int], what: str) -> float:
    try:
        value = float(token)
    except ValueError as exc:
        raise FormatError(f"invalid {what} {token!r}", line) from exc
    if not math.isfinite(value):
        raise FormatError(f"non-finite {what} {token!r}", line)
    return value


def parse_option_line(text: str, line: Optional[int] = None) -> OptionLine:
    """
    Decode a ``# <unit> <parameter> <format> R <impedance>`` line.

    Tokens may appear in any order. Missing tokens take the Touchstone 1.1
    defaults (GHz, S, MA, 50 ohm); unknown or repeated tokens are rejected.
    """
    body = text.strip()
    if not body.startswith("#"):
        raise FormatError("option line must start with '#'", line)
    tokens = body[1:].split()

    slots = {}
    impedance: Optional[float] = None
    idx = 0
    while idx < len(tokens):
        token = tokens[idx].upper()
        if token == "R":
            if impedance is not None:
                raise FormatError("reference impedance given twice", line)
            if idx + 1 >= len(tokens):
                raise FormatError("'R' must be followed by an impedance", line)
            impedance = _parse_float(tokens[idx + 1], line, "reference impedance")
            if impedance <= 0:
                raise FormatError(f"reference impedance must be positive, got {impedance:g}", line)
            idx += 2
            continue
        for slot, enum_cls in (("unit", FrequencyUnit), ("parameter", ParameterType), ("data_format", DataFormat)):
            member = _lookup(enum_cls, token)
            if member is not None:
                if slot in slots:
                    raise FormatError(f"option {slot} given twice", line)
                slots[slot] = member
                break
        else:
            raise FormatError(f"unknown option token {tokens[idx]!r}", line)
        idx += 1

    if impedance is not None:
        slots["reference_impedance"] = impedance
    options = OptionLine(**slots)
    if options.parameter is not ParameterType.S:
        raise FormatError(f"unsupported parameter type {options.parameter.value!r}, expected 'S'", line)
    return options


def _to_complex(data_format: DataFormat, first: float, second: float, line: int) -> Complex:
    if data_format is DataFormat.RI:
        return Complex(first, second)
    if data_format is DataFormat.DB:
        try:
            first = 10 ** (first / 20.0)
        except OverflowError as exc:
            raise FormatError(f"dB value {first:g} out of range", line) from exc
    angle = math.radians(second)
    return Complex(first * math.cos(angle), first * math.sin(angle))


def _parse_frequency(token: str, unit: FrequencyUnit, line: int) -> float:
    try:
        value = Decimal(token)
    except InvalidOperation as exc:
        raise FormatError(f"invalid frequency {token!r}", line) from exc
    if not value.is_finite():
        raise FormatError(f"non-finite frequency {token!r}", line)
    if value < 0:
        raise FormatError(f"negative frequency {token!r}", line)
    # Exact decimal scaling keeps 14.1 MHz and 14100000 Hz identical.
    try:
        frequency = float(value * unit.multiplier)
    except Overflow as exc:
        raise FormatError(f"frequency {token!r} out of range", line) from exc
    if not math.isfinite(frequency):
        raise FormatError(f"frequency {token!r} out of range", line)
    return frequency


def _parse_data_line(tokens: List[str], options: OptionLine, line: int) -> Tuple[float, List[Complex]]:
    frequency = _parse_frequency(tokens[0], options.unit, line)
    numbers = [_parse_float(token, line, "value") for token in tokens[1:]]
    params = [
        _to_complex(options.data_format, numbers[idx], numbers[idx + 1], line)
        for idx in range(0, len(numbers), 2)
    ]
    return frequency, params


def parse_sparameter_file(text: str) -> ParsedFile:
    """
    Parse Touchstone text into a :class:`ParsedFile`.

    The port count is taken from the number of columns on the first data
    line; the file extension plays no part. Any malformed input raises
    :class:`FormatError`, nothing is recovered partially.
    """
    options: Optional[OptionLine] = None
    columns: Optional[int] = None
    samples: List[Sample] = []

    for line_no, raw in enumerate(text.lstrip("\ufeff").splitlines(), start=1):
        line = raw.split("!", 1)[0].strip()
        if not line:
            continue
        if line.startswith("#"):
            if options is not None:
                raise FormatError("more than one option line", line_no)
            options = parse_option_line(line, line_no)
            logger.debug(
                "option line: unit=%s format=%s R=%g",
                options.unit.value,
                options.data_format.value,
                options.reference_impedance,
            )
            continue
        if options is None:
            raise FormatError("data found before the option line", line_no)

        tokens = line.split()
        count = len(tokens) - 1
        if columns is None:
            if count not in (ONE_PORT_COLUMNS, TWO_PORT_COLUMNS):
                raise FormatError(
                    f"expected {ONE_PORT_COLUMNS} or {TWO_PORT_COLUMNS} values after frequency, got {count}",
                    line_no,
                )
            columns = count
        elif count != columns:
            raise FormatError(f"expected {columns} values after frequency, got {count}", line_no)

        frequency, params = _parse_data_line(tokens, options, line_no)
        if samples and frequency <= samples[-1].frequency:
            raise FormatError(
                f"frequency {frequency:.0f} Hz does not increase (previous {samples[-1].frequency:.0f} Hz)",
                line_no,
            )
        if columns == TWO_PORT_COLUMNS:
            # Touchstone 1.x two-port order is S11 S21 S12 S22.
            samples.append(Sample(frequency, params[0], s21=params[1], s12=params[2], s22=params[3]))
        else:
            samples.append(Sample(frequency, params[0]))

    if options is None:
        raise FormatError("missing option line ('# ...')")
    if not samples:
        raise FormatError("no data lines")

    return ParsedFile(
        samples=tuple(samples),
        format="s2p" if columns == TWO_PORT_COLUMNS else "s1p",
        reference_impedance=options.reference_impedance,
    )


__all__ = [
    "FormatError",
    "FrequencyUnit",
    "ParameterType",
    "DataFormat",
    "OptionLine",
    "parse_option_line",
    "parse_sparameter_file",
]
