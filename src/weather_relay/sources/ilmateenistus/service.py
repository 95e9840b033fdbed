"""Ilmateenistus weather source: Estonian hourly forecasts normalized to the domain model."""
from __future__ import annotations

import datetime as dt
from typing import Callable, List, Optional
from zoneinfo import ZoneInfo

from weather_relay.models import (
    Base,
    Current,
    Hourly,
    Location,
    Temperature,
    Weather,
    WeatherCode,
    Wind,
)
from weather_relay.sources.base import (
    ConfigurableSource,
    EditTextPreference,
    Preference,
    WeatherSource,
)
from weather_relay.sources.ilmateenistus.api import (
    DEFAULT_BASE_URL,
    IlmateenistusApi,
    IlmateenistusClientConfig,
    format_coordinates,
)
from weather_relay.sources.ilmateenistus.schemas import (
    IlmateenistusForecastResult,
    IlmateenistusTime,
)
from weather_relay.utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="ilmateenistus")

SOURCE_TZ = "Europe/Tallinn"
SUPPORTED_COUNTRY_CODES = frozenset({"EE"})
INSTANCE_PREFERENCE_KEY = "instance"

# Phenomenon class names used by the meteogram.
PHENOMEN_CODES = {
    "clear": WeatherCode.CLEAR,
    "few_clouds": WeatherCode.PARTLY_CLOUDY,
    "variable_clouds": WeatherCode.PARTLY_CLOUDY,
    "cloudy_with_clear_spells": WeatherCode.PARTLY_CLOUDY,
    "cloudy": WeatherCode.CLOUDY,
    "overcast": WeatherCode.CLOUDY,
    "light_shower": WeatherCode.RAIN,
    "moderate_shower": WeatherCode.RAIN,
    "heavy_shower": WeatherCode.RAIN,
    "light_rain": WeatherCode.RAIN,
    "moderate_rain": WeatherCode.RAIN,
    "heavy_rain": WeatherCode.RAIN,
    "glaze": WeatherCode.SLEET,
    "light_sleet": WeatherCode.SLEET,
    "moderate_sleet": WeatherCode.SLEET,
    "light_snow_shower": WeatherCode.SNOW,
    "moderate_snow_shower": WeatherCode.SNOW,
    "heavy_snow_shower": WeatherCode.SNOW,
    "light_snowfall": WeatherCode.SNOW,
    "moderate_snowfall": WeatherCode.SNOW,
    "heavy_snowfall": WeatherCode.SNOW,
    "blowing_snow": WeatherCode.SNOW,
    "drifting_snow": WeatherCode.SNOW,
    "hail": WeatherCode.HAIL,
    "mist": WeatherCode.HAZE,
    "fog": WeatherCode.FOG,
    "thunder": WeatherCode.THUNDER,
    "thunderstorm": WeatherCode.THUNDERSTORM,
}


def _parse_period_start(value: Optional[str], tz_name: str = SOURCE_TZ) -> Optional[dt.datetime]:
    """Meteogram times are local Estonian time unless they carry an offset."""
    if not value:
        return None
    try:
        parsed = dt.datetime.fromisoformat(value)
    except ValueError:
        logger.warning(f"Skipping period with unreadable start time {value!r}")
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=ZoneInfo(tz_name))
    return parsed


def get_weather_code(class_name: Optional[str]) -> Optional[WeatherCode]:
    if not class_name:
        return None
    return PHENOMEN_CODES.get(class_name)


def _hourly_from_period(period: IlmateenistusTime) -> Optional[Hourly]:
    start = _parse_period_start(period.attributes.from_ if period.attributes else None)
    if start is None:
        return None

    phenomen = period.phenomen.attributes if period.phenomen else None
    wind_dir = period.wind_direction.attributes if period.wind_direction else None
    wind_speed = period.wind_speed.attributes if period.wind_speed else None
    wind = None
    if wind_dir is not None or wind_speed is not None:
        wind = Wind(
            degree=wind_dir.deg if wind_dir else None,
            speed=wind_speed.mps if wind_speed else None,
        )

    temperature = period.temperature.attributes if period.temperature else None
    precipitation = period.precipitation.attributes if period.precipitation else None
    pressure = period.pressure.attributes if period.pressure else None
    return Hourly(
        date=start,
        weather_text=phenomen.en if phenomen else None,
        weather_code=get_weather_code(phenomen.class_name if phenomen else None),
        temperature=(
            Temperature(temperature=temperature.value)
            if temperature is not None and temperature.value is not None
            else None
        ),
        precipitation=precipitation.value if precipitation else None,
        wind=wind,
        # hPa and mb are the same magnitude.
        pressure=pressure.value if pressure else None,
    )


def convert_forecast(
    result: IlmateenistusForecastResult,
    *,
    refresh_time: Optional[dt.datetime] = None,
) -> Weather:
    """Normalize a meteogram into ``Weather``; current conditions come from the first period."""
    hourly: List[Hourly] = []
    for period in result.periods:
        entry = _hourly_from_period(period)
        if entry is not None:
            hourly.append(entry)
    hourly.sort(key=lambda h: h.date)

    current = None
    if hourly:
        first = hourly[0]
        current = Current(
            weather_text=first.weather_text,
            weather_code=first.weather_code,
            temperature=first.temperature,
            wind=first.wind,
            pressure=first.pressure,
        )

    return Weather(
        base=Base(refresh_time=refresh_time or dt.datetime.now(tz=dt.timezone.utc)),
        current=current,
        hourly=hourly,
    )


class IlmateenistusService(WeatherSource, ConfigurableSource):
    """Hourly forecasts for Estonia from the Estonian Environment Agency."""

    id = "ilmateenistus"
    name = "Ilmateenistus (Estonian Environment Agency)"

    def __init__(
        self,
        api: Optional[IlmateenistusApi] = None,
        api_factory: Callable[[IlmateenistusClientConfig], IlmateenistusApi] = IlmateenistusApi,
    ) -> None:
        self._api_factory = api_factory
        self._api = api or api_factory(IlmateenistusClientConfig())

    @property
    def instance(self) -> str:
        return self._api.config.base_url

    def set_instance(self, base_url: Optional[str]) -> None:
        """Point the source at another instance; ``None`` restores the default."""
        config = IlmateenistusClientConfig(
            base_url=base_url or DEFAULT_BASE_URL,
            timeout_seconds=self._api.config.timeout_seconds,
            retries=self._api.config.retries,
            retry_backoff_seconds=self._api.config.retry_backoff_seconds,
        )
        self._api = self._api_factory(config)
        logger.info(f"Using Ilmateenistus instance {config.base_url}")

    def get_preferences(self) -> List[Preference]:
        current = self.instance
        return [
            EditTextPreference(
                key=INSTANCE_PREFERENCE_KEY,
                title="API instance",
                summary=current,
                value=None if current == DEFAULT_BASE_URL else current,
                default=DEFAULT_BASE_URL,
            )
        ]

    def is_supported(self, location: Location) -> bool:
        return (location.country_code or "").upper() in SUPPORTED_COUNTRY_CODES

    def request_weather(self, location: Location) -> Weather:
        coordinates = format_coordinates(location.latitude, location.longitude)
        result = self._api.get_hourly(coordinates)
        weather = convert_forecast(result)
        logger.info(f"Converted {len(weather.hourly)} hourly periods for {coordinates}")
        return weather
