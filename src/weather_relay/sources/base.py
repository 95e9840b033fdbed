"""Contracts every pluggable source implements."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Union

from weather_relay.models import Location, Weather
from weather_relay.settings import UnitSettings


@dataclass
class EditTextPreference:
    """Free-text setting, e.g. an API key or an instance URL."""

    key: str
    title: str
    summary: Optional[str] = None
    value: Optional[str] = None
    default: Optional[str] = None

    @property
    def effective_value(self) -> Optional[str]:
        return self.value or self.default


@dataclass
class ListPreference:
    """Setting restricted to a fixed set of entries."""

    key: str
    title: str
    entries: Mapping[str, str] = field(default_factory=dict)
    value: Optional[str] = None

    def __post_init__(self) -> None:
        if self.value is not None and self.value not in self.entries:
            raise ValueError(f"{self.value!r} is not one of {sorted(self.entries)}")


Preference = Union[EditTextPreference, ListPreference]


class Source(ABC):
    """A pluggable provider of weather data or export behaviour."""

    id: str
    name: str

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id!r})"


class ConfigurableSource(Source):
    """Implement this if the source needs a preference screen."""

    @abstractmethod
    def get_preferences(self) -> List[Preference]:
        ...


class WeatherSource(Source):
    """A source that fetches weather for a location and normalizes it."""

    @abstractmethod
    def is_supported(self, location: Location) -> bool:
        ...

    @abstractmethod
    def request_weather(self, location: Location) -> Weather:
        ...


class BroadcastSource(Source):
    """A source that exports normalized weather to other applications."""

    intent_action: str

    @abstractmethod
    def get_extras(
        self,
        locations: Sequence[Location],
        settings: UnitSettings,
    ) -> Dict[str, str]:
        ...
