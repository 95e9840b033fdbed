"""Export normalized weather as a broadcast payload for other applications."""
from __future__ import annotations

import datetime as dt
import math
from typing import Dict, List, Optional, Sequence

from weather_relay import __version__
from weather_relay.broadcast.schemas import (
    DataShareAirQuality,
    DataShareCurrent,
    DataShareDaily,
    DataShareData,
    DataShareDoubleUnit,
    DataShareLocation,
    DataSharePercent,
    DataSharePollutant,
    DataShareTemperature,
    DataShareUV,
    DataShareWeather,
    DataShareWind,
)
from weather_relay.models import (
    UV,
    AirQuality,
    Current,
    Daily,
    Location,
    PollutantIndex,
    Temperature,
    Wind,
)
from weather_relay.settings import UnitSettings
from weather_relay.sources.base import BroadcastSource
from weather_relay.units import (
    DistanceUnit,
    DurationUnit,
    PressureUnit,
    SpeedUnit,
    TemperatureUnit,
    format_percent,
)
from weather_relay.utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="data_share")

INTENT_ACTION = "org.weatherrelay.ACTION_GENERIC_WEATHER"
EXTRAS_KEY = "WeatherJson"

# Internal storage units, see weather_relay.models.weather.
ORIGINAL_TEMPERATURE_UNIT = TemperatureUnit.C.id
ORIGINAL_DISTANCE_UNIT = DistanceUnit.M.id
ORIGINAL_SPEED_UNIT = SpeedUnit.MPS.id
ORIGINAL_PRESSURE_UNIT = PressureUnit.MB.id
ORIGINAL_DURATION_UNIT = DurationUnit.H.id


def _epoch_millis(value: Optional[dt.datetime]) -> Optional[int]:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=dt.timezone.utc)
    return int(value.timestamp() * 1000)


def _missing(value: Optional[float]) -> bool:
    """NaN and infinities are treated like absent values."""
    return value is None or not math.isfinite(value)


def get_temperature_double_unit(
    temperature: Optional[float],
    temperature_unit: TemperatureUnit,
) -> Optional[DataShareDoubleUnit]:
    if _missing(temperature):
        return None
    return DataShareDoubleUnit(
        original_value=temperature,
        original_unit=ORIGINAL_TEMPERATURE_UNIT,
        preferred_unit_value=temperature_unit.convert_unit(temperature),
        preferred_unit_unit=temperature_unit.id,
        preferred_unit_formatted=temperature_unit.get_value_text(temperature, 0),
        preferred_unit_formatted_short=temperature_unit.get_short_value_text(temperature),
    )


def get_distance_double_unit(
    distance: Optional[float],
    distance_unit: DistanceUnit,
) -> Optional[DataShareDoubleUnit]:
    if _missing(distance):
        return None
    text = distance_unit.get_value_text(distance)
    return DataShareDoubleUnit(
        original_value=distance,
        original_unit=ORIGINAL_DISTANCE_UNIT,
        preferred_unit_value=distance_unit.convert_unit(distance),
        preferred_unit_unit=distance_unit.id,
        preferred_unit_formatted=text,
        preferred_unit_formatted_short=text,
    )


def get_speed_double_unit(
    speed: Optional[float],
    speed_unit: SpeedUnit,
) -> Optional[DataShareDoubleUnit]:
    if _missing(speed):
        return None
    text = speed_unit.get_value_text(speed)
    return DataShareDoubleUnit(
        original_value=speed,
        original_unit=ORIGINAL_SPEED_UNIT,
        preferred_unit_value=speed_unit.convert_unit(speed),
        preferred_unit_unit=speed_unit.id,
        preferred_unit_formatted=text,
        preferred_unit_formatted_short=text,
    )


def get_pressure_double_unit(
    pressure: Optional[float],
    pressure_unit: PressureUnit,
) -> Optional[DataShareDoubleUnit]:
    if _missing(pressure):
        return None
    text = pressure_unit.get_value_text(pressure)
    return DataShareDoubleUnit(
        original_value=pressure,
        original_unit=ORIGINAL_PRESSURE_UNIT,
        preferred_unit_value=pressure_unit.convert_unit(pressure),
        preferred_unit_unit=pressure_unit.id,
        preferred_unit_formatted=text,
        preferred_unit_formatted_short=text,
    )


def get_percent(value: Optional[float]) -> Optional[DataSharePercent]:
    if _missing(value):
        return None
    return DataSharePercent(value=float(value), formatted=format_percent(value))


def get_uv(uv: Optional[UV]) -> Optional[DataShareUV]:
    return DataShareUV(index=uv.index) if uv is not None else None


def get_temperature(
    temperature: Optional[Temperature],
    temperature_unit: TemperatureUnit,
) -> Optional[DataShareTemperature]:
    if temperature is None:
        return None
    return DataShareTemperature(
        temperature=get_temperature_double_unit(temperature.temperature, temperature_unit),
        real_feel_temperature=get_temperature_double_unit(
            temperature.real_feel_temperature, temperature_unit
        ),
        real_feel_shader_temperature=get_temperature_double_unit(
            temperature.real_feel_shader_temperature, temperature_unit
        ),
        apparent_temperature=get_temperature_double_unit(
            temperature.apparent_temperature, temperature_unit
        ),
        wind_chill_temperature=get_temperature_double_unit(
            temperature.wind_chill_temperature, temperature_unit
        ),
        wet_bulb_temperature=get_temperature_double_unit(
            temperature.wet_bulb_temperature, temperature_unit
        ),
    )


def get_wind(wind: Optional[Wind], speed_unit: SpeedUnit) -> Optional[DataShareWind]:
    if wind is None:
        return None
    return DataShareWind(
        degree=wind.degree,
        speed=get_speed_double_unit(wind.speed, speed_unit),
        gusts=get_speed_double_unit(wind.gusts, speed_unit),
    )


def get_air_quality(air_quality: Optional[AirQuality]) -> Optional[DataShareAirQuality]:
    if air_quality is None:
        return None
    pollutants: List[DataSharePollutant] = []
    for pollutant in PollutantIndex:
        concentration = air_quality.get_concentration(pollutant)
        if concentration is None:
            continue
        pollutants.append(
            DataSharePollutant(
                id=pollutant.id,
                name=air_quality.get_name(pollutant),
                concentration=concentration,
                index=air_quality.get_index(pollutant),
                color=air_quality.get_color(pollutant),
            )
        )
    return DataShareAirQuality(
        index=air_quality.get_index(),
        index_color=air_quality.get_color(),
        pollutants=pollutants,
    )


def get_current(current: Optional[Current], settings: UnitSettings) -> Optional[DataShareCurrent]:
    if current is None:
        return None
    return DataShareCurrent(
        weather_text=current.weather_text,
        weather_code=current.weather_code.id if current.weather_code else None,
        temperature=get_temperature(current.temperature, settings.temperature_unit),
        wind=get_wind(current.wind, settings.speed_unit),
        uv=get_uv(current.uv),
        air_quality=get_air_quality(current.air_quality),
        relative_humidity=get_percent(current.relative_humidity),
        dew_point=get_temperature_double_unit(current.dew_point, settings.temperature_unit),
        pressure=get_pressure_double_unit(current.pressure, settings.pressure_unit),
        cloud_cover=get_percent(current.cloud_cover),
        visibility=get_distance_double_unit(current.visibility, settings.distance_unit),
        ceiling=get_distance_double_unit(current.ceiling, settings.distance_unit),
        daily_forecast=current.daily_forecast,
        hourly_forecast=current.hourly_forecast,
    )


def get_daily(daily: Optional[Sequence[Daily]]) -> Optional[List[DataShareDaily]]:
    if not daily:
        return None
    duration_unit = DurationUnit.H
    out: List[DataShareDaily] = []
    for day in daily:
        sunshine = None
        if day.sunshine_duration is not None:
            text = duration_unit.get_value_text(day.sunshine_duration)
            sunshine = DataShareDoubleUnit(
                original_value=day.sunshine_duration,
                original_unit=ORIGINAL_DURATION_UNIT,
                preferred_unit_value=day.sunshine_duration,
                preferred_unit_unit=duration_unit.id,
                preferred_unit_formatted=text,
                preferred_unit_formatted_short=text,
            )
        out.append(
            DataShareDaily(
                date=_epoch_millis(day.date),
                air_quality=get_air_quality(day.air_quality),
                uv=get_uv(day.uv),
                sunshine_duration=sunshine,
            )
        )
    return out


class DataShareService(BroadcastSource):
    """Serializes followed locations into the generic weather broadcast."""

    id = "datashare"
    name = "Weather data share"
    intent_action = INTENT_ACTION

    def __init__(self, app_version: str = __version__) -> None:
        self.app_version = app_version

    def get_extras(
        self,
        locations: Sequence[Location],
        settings: UnitSettings,
    ) -> Dict[str, str]:
        return {EXTRAS_KEY: self.build_payload(locations, settings).to_json()}

    def build_payload(
        self,
        locations: Sequence[Location],
        settings: UnitSettings,
    ) -> DataShareData:
        exported = [
            loc
            for loc in locations
            if loc.weather is not None and loc.weather.current is not None
        ]
        logger.info(f"Exporting {len(exported)} of {len(locations)} locations")
        return DataShareData(
            app_version=self.app_version,
            locations=[
                self.get_weather_data(position, loc, settings)
                for position, loc in enumerate(exported)
            ],
        )

    @staticmethod
    def get_weather_data(
        position: int,
        location: Location,
        settings: UnitSettings,
    ) -> DataShareLocation:
        # The city id can embed coordinates, so only a positional id is shared.
        weather = location.weather
        return DataShareLocation(
            id=str(position),
            timezone=location.timezone,
            country=location.country,
            country_code=location.country_code,
            province=location.province,
            province_code=location.province_code,
            city=location.city,
            district=location.district,
            weather=DataShareWeather(
                refresh_time=_epoch_millis(weather.base.refresh_time),
                current=get_current(weather.current, settings),
                daily=get_daily(weather.daily),
            )
            if weather is not None
            else None,
        )
