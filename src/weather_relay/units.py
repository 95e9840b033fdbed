"""Measurement units and conversions from the internal storage units.

Normalized weather values are stored in a fixed unit per dimension:

- temperature in degrees Celsius
- distance (visibility, ceiling) in metres
- speed (wind) in metres per second
- pressure in millibars
- duration in hours

Each enum member knows how to convert from that internal unit and how to
render the converted value as text.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Optional


def _round_half_up(value: float, decimals: int = 0) -> Decimal:
    # Go through str() so 1.005 rounds as written, not as its binary approximation.
    return Decimal(str(value)).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def format_number(value: float, decimals: int) -> str:
    """Render ``value`` with at most ``decimals`` fraction digits, rounding half up."""
    text = f"{_round_half_up(value, max(decimals, 0)):f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def format_percent(value: float) -> str:
    """Format a 0..100 value as a whole percent, e.g. ``75%``."""
    return f"{format_number(value, 0)}%"


class _MeasurementUnit(Enum):
    """Base for unit enums: ``(id, suffix, factor, decimals, offset)``."""

    def __init__(
        self,
        unit_id: str,
        suffix: str,
        factor: float,
        decimals: int,
        offset: float = 0.0,
    ) -> None:
        self.id = unit_id
        self.suffix = suffix
        self.factor = factor
        self.decimals = decimals
        self.offset = offset

    @classmethod
    def from_id(cls, unit_id: str):
        for member in cls:
            if member.id == unit_id.lower():
                return member
        raise ValueError(f"Unknown {cls.__name__} id: {unit_id!r}")

    def convert_unit(self, value: float) -> float:
        return value * self.factor + self.offset

    def get_value_text(self, value: float, decimals: Optional[int] = None) -> str:
        places = self.decimals if decimals is None else decimals
        return f"{format_number(self.convert_unit(value), places)}{self.suffix}"


class TemperatureUnit(_MeasurementUnit):
    C = ("c", "°C", 1.0, 1)
    F = ("f", "°F", 9.0 / 5.0, 1, 32.0)
    K = ("k", "K", 1.0, 1, 273.15)

    def get_short_value_text(self, value: float) -> str:
        """Rounded value with a bare degree sign, e.g. ``21°``."""
        return f"{format_number(self.convert_unit(value), 0)}°"


class DistanceUnit(_MeasurementUnit):
    M = ("m", " m", 1.0, 0)
    KM = ("km", " km", 0.001, 1)
    MI = ("mi", " mi", 1.0 / 1609.344, 1)
    NMI = ("nmi", " nmi", 1.0 / 1852.0, 1)
    FT = ("ft", " ft", 1.0 / 0.3048, 0)


class SpeedUnit(_MeasurementUnit):
    MPS = ("mps", " m/s", 1.0, 1)
    KPH = ("kph", " km/h", 3.6, 1)
    KN = ("kn", " kn", 3600.0 / 1852.0, 1)
    MPH = ("mph", " mph", 1.0 / 0.44704, 1)
    FTPS = ("ftps", " ft/s", 1.0 / 0.3048, 1)


class PressureUnit(_MeasurementUnit):
    MB = ("mb", " mb", 1.0, 1)
    HPA = ("hpa", " hPa", 1.0, 1)
    KPA = ("kpa", " kPa", 0.1, 2)
    ATM = ("atm", " atm", 1.0 / 1013.25, 3)
    MMHG = ("mmhg", " mmHg", 0.750061683, 1)
    INHG = ("inhg", " inHg", 0.0295299830714, 2)
    KGFPSQCM = ("kgfpsqcm", " kgf/cm²", 0.00101971621, 3)


class DurationUnit(_MeasurementUnit):
    H = ("h", " h", 1.0, 1)
