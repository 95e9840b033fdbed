"""Shared fixtures: quiet logging plus in-memory stand-ins for HTTP and Kafka.

Classes:
    FakeResponse: Minimal ``requests.Response`` replacement.
    FakeSession: Records GET calls and replays queued responses.
    FakeProducer: Records produced Kafka messages.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest
import requests

from weather_relay.models import (
    UV,
    AirQuality,
    Base,
    Current,
    Daily,
    Location,
    Temperature,
    Weather,
    WeatherCode,
    Wind,
)


class _NullHandler(logging.Handler):
    """Configure logging so tests don't try writing to pytest's closed streams."""

    def emit(self, record):  # pragma: no cover
        pass


root_logger = logging.getLogger()
root_logger.setLevel(logging.INFO)
root_logger.handlers = [_NullHandler()]


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------


@dataclass
class FakeResponse:
    payload: Any = None
    status_code: int = 200

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")

    def json(self) -> Any:
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class FakeSession:
    """Session stub compatible with ``configure_session``."""

    def __init__(self, responses: Optional[List[FakeResponse]] = None) -> None:
        self.headers: Dict[str, str] = {}
        self.mounted: Dict[str, Any] = {}
        self.responses = list(responses or [])
        self.calls: List[Dict[str, Any]] = []

    def mount(self, prefix, adapter):
        self.mounted[prefix] = adapter

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        return self.responses.pop(0) if self.responses else FakeResponse({})

    def get(self, url, **kwargs):
        return self.request("GET", url, **kwargs)


# ---------------------------------------------------------------------------
# Kafka
# ---------------------------------------------------------------------------


@dataclass
class FakeProducer:
    messages: List[Dict[str, Any]] = field(default_factory=list)
    flushes: List[Optional[float]] = field(default_factory=list)
    pending: int = 0

    def produce(self, topic, value=None, key=None, headers=None, callback=None):
        self.messages.append(
            {"topic": topic, "value": value, "key": key, "headers": headers, "callback": callback}
        )

    def flush(self, timeout=None):
        self.flushes.append(timeout)
        return self.pending


# ---------------------------------------------------------------------------
# Domain samples
# ---------------------------------------------------------------------------


def make_location(**overrides) -> Location:
    values = dict(
        latitude=59.437,
        longitude=24.7536,
        timezone="Europe/Tallinn",
        city_id="59.437,24.7536",
        country="Estonia",
        country_code="EE",
        province="Harju",
        province_code="37",
        city="Tallinn",
        district="Kesklinn",
    )
    values.update(overrides)
    return Location(**values)


def make_weather() -> Weather:
    return Weather(
        base=Base(refresh_time=datetime(2024, 1, 1, tzinfo=timezone.utc)),
        current=Current(
            weather_text="Variable clouds",
            weather_code=WeatherCode.PARTLY_CLOUDY,
            temperature=Temperature(temperature=20.0, apparent_temperature=18.0),
            wind=Wind(degree=180, speed=10.0),
            air_quality=AirQuality(pm25=10.0, pm10=45.0),
            relative_humidity=75.4,
            dew_point=15.0,
            pressure=1013.25,
            cloud_cover=40,
            visibility=10000.0,
            hourly_forecast="Clouds clearing by evening",
        ),
        daily=[
            Daily(
                date=datetime(2024, 1, 1, tzinfo=timezone.utc),
                uv=UV(index=2.0),
                sunshine_duration=6.5,
            )
        ],
    )


@pytest.fixture
def location() -> Location:
    return make_location(weather=make_weather())


@pytest.fixture
def fake_producer() -> FakeProducer:
    return FakeProducer()


@pytest.fixture
def location_factory():
    return make_location


@pytest.fixture
def session_factory():
    """Build a FakeSession that replays one response per given payload."""

    def factory(*payloads, status_code: int = 200) -> FakeSession:
        return FakeSession([FakeResponse(p, status_code=status_code) for p in payloads])

    return factory
