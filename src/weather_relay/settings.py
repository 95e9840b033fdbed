"""User display preferences: which unit each measurement is shown in."""
from __future__ import annotations

import os
from dataclasses import dataclass

from weather_relay.units import DistanceUnit, PressureUnit, SpeedUnit, TemperatureUnit

DEFAULT_TEMPERATURE_UNIT = TemperatureUnit.C
DEFAULT_DISTANCE_UNIT = DistanceUnit.KM
DEFAULT_SPEED_UNIT = SpeedUnit.KPH
DEFAULT_PRESSURE_UNIT = PressureUnit.MB


@dataclass(frozen=True)
class UnitSettings:
    """Preferred units used when exporting or rendering weather data."""

    temperature_unit: TemperatureUnit = DEFAULT_TEMPERATURE_UNIT
    distance_unit: DistanceUnit = DEFAULT_DISTANCE_UNIT
    speed_unit: SpeedUnit = DEFAULT_SPEED_UNIT
    pressure_unit: PressureUnit = DEFAULT_PRESSURE_UNIT


def make_unit_settings_from_env() -> UnitSettings:
    """Build unit settings from ``WEATHER_RELAY_*_UNIT`` environment overrides."""
    return UnitSettings(
        temperature_unit=TemperatureUnit.from_id(
            os.getenv("WEATHER_RELAY_TEMPERATURE_UNIT", DEFAULT_TEMPERATURE_UNIT.id)
        ),
        distance_unit=DistanceUnit.from_id(
            os.getenv("WEATHER_RELAY_DISTANCE_UNIT", DEFAULT_DISTANCE_UNIT.id)
        ),
        speed_unit=SpeedUnit.from_id(
            os.getenv("WEATHER_RELAY_SPEED_UNIT", DEFAULT_SPEED_UNIT.id)
        ),
        pressure_unit=PressureUnit.from_id(
            os.getenv("WEATHER_RELAY_PRESSURE_UNIT", DEFAULT_PRESSURE_UNIT.id)
        ),
    )
