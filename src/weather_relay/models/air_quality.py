"""Air-quality concentrations and the pollutant index derived from them."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

AQI_THRESHOLDS: Tuple[int, ...] = (0, 20, 50, 100, 150, 250)
LEVEL_NAMES: Tuple[str, ...] = (
    "Excellent",
    "Fair",
    "Poor",
    "Unhealthy",
    "Very unhealthy",
    "Dangerous",
)
LEVEL_COLORS: Tuple[str, ...] = (
    "#00e59b",
    "#ffc302",
    "#ff712b",
    "#f62a55",
    "#c72eaa",
    "#9930ff",
)


def _last_index_at_or_below(thresholds: Tuple[int, ...], value: float) -> int:
    level = -1
    for idx, threshold in enumerate(thresholds):
        if value >= threshold:
            level = idx
    return level


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _interpolate(cp: float, bp_lo: int, bp_hi: int, in_lo: int, in_hi: int) -> int:
    return _round_half_up((in_hi - in_lo) / (bp_hi - bp_lo) * (cp - bp_lo) + in_lo)


class PollutantIndex(Enum):
    """Concentration breakpoints (µg/m³, CO in mg/m³) matching ``AQI_THRESHOLDS``."""

    PM25 = ("pm25", "PM2.5", (0, 5, 15, 30, 60, 150))
    PM10 = ("pm10", "PM10", (0, 15, 45, 80, 160, 400))
    SO2 = ("so2", "SO₂", (0, 20, 40, 270, 500, 960))
    NO2 = ("no2", "NO₂", (0, 10, 25, 200, 400, 1000))
    O3 = ("o3", "O₃", (0, 50, 100, 160, 240, 480))
    CO = ("co", "CO", (0, 2, 4, 35, 100, 230))

    def __init__(self, pollutant_id: str, label: str, thresholds: Tuple[int, ...]) -> None:
        self.id = pollutant_id
        self.label = label
        self.thresholds = thresholds

    def get_index(self, concentration: float) -> int:
        level = _last_index_at_or_below(self.thresholds, concentration)
        if level < 0:
            return 0
        if level < len(self.thresholds) - 1:
            return _interpolate(
                concentration,
                self.thresholds[level],
                self.thresholds[level + 1],
                AQI_THRESHOLDS[level],
                AQI_THRESHOLDS[level + 1],
            )
        # Keep extrapolating linearly past the top breakpoint.
        return _round_half_up(concentration * AQI_THRESHOLDS[-1] / self.thresholds[-1])


def get_level(index: Optional[int]) -> Optional[int]:
    if index is None:
        return None
    level = _last_index_at_or_below(AQI_THRESHOLDS, index)
    return level if level >= 0 else None


@dataclass
class AirQuality:
    pm25: Optional[float] = None
    pm10: Optional[float] = None
    so2: Optional[float] = None
    no2: Optional[float] = None
    o3: Optional[float] = None
    co: Optional[float] = None

    def get_concentration(self, pollutant: PollutantIndex) -> Optional[float]:
        return getattr(self, pollutant.id)

    def get_index(self, pollutant: Optional[PollutantIndex] = None) -> Optional[int]:
        """Index for one pollutant, or the worst index over all present pollutants."""
        if pollutant is not None:
            concentration = self.get_concentration(pollutant)
            return pollutant.get_index(concentration) if concentration is not None else None
        indexes: List[int] = [
            idx
            for idx in (self.get_index(p) for p in PollutantIndex)
            if idx is not None
        ]
        return max(indexes) if indexes else None

    def get_name(self, pollutant: Optional[PollutantIndex] = None) -> Optional[str]:
        level = get_level(self.get_index(pollutant))
        return LEVEL_NAMES[level] if level is not None else None

    def get_color(self, pollutant: Optional[PollutantIndex] = None) -> Optional[str]:
        level = get_level(self.get_index(pollutant))
        return LEVEL_COLORS[level] if level is not None else None

    def is_valid(self) -> bool:
        return any(self.get_concentration(p) is not None for p in PollutantIndex)
