from datetime import datetime, timezone

from weather_relay.models import WeatherCode
from weather_relay.sources.ilmateenistus.api import (
    DEFAULT_BASE_URL,
    IlmateenistusApi,
    IlmateenistusClientConfig,
)
from weather_relay.sources.ilmateenistus.schemas import IlmateenistusForecastResult
from weather_relay.sources.ilmateenistus.service import (
    IlmateenistusService,
    convert_forecast,
    get_weather_code,
)


def _period(start, class_name, temperature, mps="3", deg="90"):
    return {
        "@attributes": {"from": start},
        "phenomen": {"@attributes": {"className": class_name, "en": class_name.replace("_", " ")}},
        "precipitation": {"@attributes": {"value": "0"}},
        "windDirection": {"@attributes": {"deg": deg}},
        "windSpeed": {"@attributes": {"mps": mps}},
        "temperature": {"@attributes": {"value": temperature}},
        "pressure": {"@attributes": {"value": "1012"}},
    }


def _result():
    return IlmateenistusForecastResult.model_validate(
        {
            "forecast": {
                "tabular": {
                    "time": [
                        _period("2024-01-01T13:00:00", "overcast", "-1"),
                        _period("2024-01-01T12:00:00", "variable_clouds", "-2", mps="5"),
                        {"@attributes": {"from": "not a date"}},
                    ]
                }
            }
        }
    )


def test_convert_forecast_orders_periods_and_derives_current():
    refresh = datetime(2024, 1, 1, 10, tzinfo=timezone.utc)
    weather = convert_forecast(_result(), refresh_time=refresh)

    assert weather.base.refresh_time == refresh
    assert len(weather.hourly) == 2
    first = weather.hourly[0]
    assert first.date.isoformat() == "2024-01-01T12:00:00+02:00"
    assert first.weather_code is WeatherCode.PARTLY_CLOUDY
    assert first.temperature.temperature == -2.0
    assert first.wind.speed == 5.0
    assert first.pressure == 1012.0

    assert weather.current.temperature.temperature == -2.0
    assert weather.current.weather_text == "variable clouds"


def test_convert_empty_forecast_has_no_current():
    weather = convert_forecast(IlmateenistusForecastResult())
    assert weather.current is None
    assert weather.hourly == []
    assert weather.base.refresh_time is not None


def test_weather_code_mapping():
    assert get_weather_code("thunderstorm") is WeatherCode.THUNDERSTORM
    assert get_weather_code("mist") is WeatherCode.HAZE
    assert get_weather_code("unknown_phenomenon") is None
    assert get_weather_code(None) is None


def test_request_weather_uses_location_coordinates(session_factory, location_factory):
    session = session_factory(_result().model_dump(by_alias=True))
    service = IlmateenistusService(api=IlmateenistusApi(IlmateenistusClientConfig(), session=session))

    weather = service.request_weather(location_factory(latitude=58.38, longitude=26.72))

    assert session.calls[0]["params"] == {"coordinates": "58.38;26.72"}
    assert len(weather.hourly) == 2


def test_support_is_limited_to_estonia(location_factory):
    service = IlmateenistusService()
    assert service.is_supported(location_factory(country_code="EE"))
    assert not service.is_supported(location_factory(country_code="LV"))


def test_instance_preference_round_trip():
    built = []

    def factory(config):
        built.append(config)
        return IlmateenistusApi(config)

    service = IlmateenistusService(api_factory=factory)
    pref = service.get_preferences()[0]
    assert pref.key == "instance"
    assert pref.value is None
    assert pref.effective_value == DEFAULT_BASE_URL

    service.set_instance("https://mirror.example/")
    pref = service.get_preferences()[0]
    assert pref.value == "https://mirror.example/"
    assert built[-1].base_url == "https://mirror.example/"

    service.set_instance(None)
    assert service.instance == DEFAULT_BASE_URL
