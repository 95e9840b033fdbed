"""Normalized weather domain models."""
from .air_quality import AirQuality, PollutantIndex
from .weather import (
    UV,
    Base,
    Current,
    Daily,
    Hourly,
    Location,
    Temperature,
    Weather,
    WeatherCode,
    Wind,
)

__all__ = [
    "AirQuality",
    "PollutantIndex",
    "UV",
    "Base",
    "Current",
    "Daily",
    "Hourly",
    "Location",
    "Temperature",
    "Weather",
    "WeatherCode",
    "Wind",
]
