"""Pydantic schemas for the data-share broadcast payload.

Field names are serialized in camelCase and ``None`` fields are dropped, so an
absent measurement upstream is simply missing from the JSON document.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Payload(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class DataShareDoubleUnit(_Payload):
    """A measurement in its internal unit and in the user's preferred unit."""

    original_value: float
    original_unit: str
    preferred_unit_value: Optional[float] = None
    preferred_unit_unit: Optional[str] = None
    preferred_unit_formatted: Optional[str] = None
    preferred_unit_formatted_short: Optional[str] = None


class DataSharePercent(_Payload):
    value: float
    formatted: Optional[str] = None


class DataShareTemperature(_Payload):
    temperature: Optional[DataShareDoubleUnit] = None
    real_feel_temperature: Optional[DataShareDoubleUnit] = None
    real_feel_shader_temperature: Optional[DataShareDoubleUnit] = None
    apparent_temperature: Optional[DataShareDoubleUnit] = None
    wind_chill_temperature: Optional[DataShareDoubleUnit] = None
    wet_bulb_temperature: Optional[DataShareDoubleUnit] = None


class DataShareWind(_Payload):
    degree: Optional[float] = None
    speed: Optional[DataShareDoubleUnit] = None
    gusts: Optional[DataShareDoubleUnit] = None


class DataShareUV(_Payload):
    index: Optional[float] = None


class DataSharePollutant(_Payload):
    id: str
    name: Optional[str] = None
    concentration: float
    index: Optional[int] = None
    color: Optional[str] = None


class DataShareAirQuality(_Payload):
    index: Optional[int] = None
    index_color: Optional[str] = None
    pollutants: List[DataSharePollutant] = Field(default_factory=list)


class DataShareCurrent(_Payload):
    weather_text: Optional[str] = None
    weather_code: Optional[str] = None
    temperature: Optional[DataShareTemperature] = None
    wind: Optional[DataShareWind] = None
    uv: Optional[DataShareUV] = Field(default=None, alias="uV")
    air_quality: Optional[DataShareAirQuality] = None
    relative_humidity: Optional[DataSharePercent] = None
    dew_point: Optional[DataShareDoubleUnit] = None
    pressure: Optional[DataShareDoubleUnit] = None
    cloud_cover: Optional[DataSharePercent] = None
    visibility: Optional[DataShareDoubleUnit] = None
    ceiling: Optional[DataShareDoubleUnit] = None
    daily_forecast: Optional[str] = None
    hourly_forecast: Optional[str] = None


class DataShareDaily(_Payload):
    date: int
    air_quality: Optional[DataShareAirQuality] = None
    uv: Optional[DataShareUV] = Field(default=None, alias="uV")
    sunshine_duration: Optional[DataShareDoubleUnit] = None


class DataShareWeather(_Payload):
    refresh_time: Optional[int] = None
    current: Optional[DataShareCurrent] = None
    daily: Optional[List[DataShareDaily]] = None


class DataShareLocation(_Payload):
    id: str
    timezone: str
    country: Optional[str] = None
    country_code: Optional[str] = None
    province: Optional[str] = None
    province_code: Optional[str] = None
    city: Optional[str] = None
    district: Optional[str] = None
    weather: Optional[DataShareWeather] = None


class DataShareData(_Payload):
    """Top-level document handed to other applications."""

    app_version: str
    locations: List[DataShareLocation] = Field(default_factory=list)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)
