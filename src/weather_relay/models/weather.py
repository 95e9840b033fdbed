"""Normalized weather domain shared by every source.

Values are stored in fixed internal units so sources are interchangeable:

- temperatures in degrees Celsius
- wind speed and gusts in metres per second
- visibility and ceiling in metres
- pressure in millibars
- relative humidity and cloud cover in percent (0..100)
- pollutant concentrations in µg/m³ (CO in mg/m³)
- sunshine duration in hours
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

from weather_relay.models.air_quality import AirQuality


class WeatherCode(Enum):
    CLEAR = "clear"
    PARTLY_CLOUDY = "partly_cloudy"
    CLOUDY = "cloudy"
    RAIN = "rain"
    SNOW = "snow"
    WIND = "wind"
    FOG = "fog"
    HAZE = "haze"
    SLEET = "sleet"
    HAIL = "hail"
    THUNDER = "thunder"
    THUNDERSTORM = "thunderstorm"

    @property
    def id(self) -> str:
        return self.value


@dataclass
class Temperature:
    temperature: Optional[float] = None
    real_feel_temperature: Optional[float] = None
    real_feel_shader_temperature: Optional[float] = None
    apparent_temperature: Optional[float] = None
    wind_chill_temperature: Optional[float] = None
    wet_bulb_temperature: Optional[float] = None


@dataclass
class Wind:
    degree: Optional[float] = None
    speed: Optional[float] = None
    gusts: Optional[float] = None


@dataclass
class UV:
    index: Optional[float] = None


@dataclass
class Current:
    weather_text: Optional[str] = None
    weather_code: Optional[WeatherCode] = None
    temperature: Optional[Temperature] = None
    wind: Optional[Wind] = None
    uv: Optional[UV] = None
    air_quality: Optional[AirQuality] = None
    relative_humidity: Optional[float] = None
    dew_point: Optional[float] = None
    pressure: Optional[float] = None
    cloud_cover: Optional[int] = None
    visibility: Optional[float] = None
    ceiling: Optional[float] = None
    daily_forecast: Optional[str] = None
    hourly_forecast: Optional[str] = None


@dataclass
class Daily:
    date: datetime
    air_quality: Optional[AirQuality] = None
    uv: Optional[UV] = None
    sunshine_duration: Optional[float] = None


@dataclass
class Hourly:
    date: datetime
    weather_text: Optional[str] = None
    weather_code: Optional[WeatherCode] = None
    temperature: Optional[Temperature] = None
    precipitation: Optional[float] = None
    wind: Optional[Wind] = None
    pressure: Optional[float] = None


@dataclass
class Base:
    refresh_time: Optional[datetime] = None


@dataclass
class Weather:
    base: Base = field(default_factory=Base)
    current: Optional[Current] = None
    daily: List[Daily] = field(default_factory=list)
    hourly: List[Hourly] = field(default_factory=list)


@dataclass
class Location:
    """A place the user follows, with the last weather fetched for it."""

    latitude: float
    longitude: float
    timezone: str
    city_id: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    province: Optional[str] = None
    province_code: Optional[str] = None
    city: Optional[str] = None
    district: Optional[str] = None
    weather: Optional[Weather] = None
