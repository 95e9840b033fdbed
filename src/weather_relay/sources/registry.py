"""In-process registry of the sources the application knows about."""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from weather_relay.models import Location
from weather_relay.sources.base import (
    BroadcastSource,
    ConfigurableSource,
    Source,
    WeatherSource,
)
from weather_relay.utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="source_registry")


class SourceRegistry:
    def __init__(self, sources: Iterable[Source] = ()) -> None:
        self._sources: Dict[str, Source] = {}
        for source in sources:
            self.register(source)

    def register(self, source: Source) -> None:
        if source.id in self._sources:
            raise ValueError(f"Source id {source.id!r} is already registered")
        self._sources[source.id] = source
        logger.debug(f"Registered source {source.id} ({source.name})")

    def get(self, source_id: str) -> Optional[Source]:
        return self._sources.get(source_id)

    def __contains__(self, source_id: object) -> bool:
        return source_id in self._sources

    def __len__(self) -> int:
        return len(self._sources)

    @property
    def sources(self) -> List[Source]:
        return list(self._sources.values())

    @property
    def configurable_sources(self) -> List[ConfigurableSource]:
        return [s for s in self._sources.values() if isinstance(s, ConfigurableSource)]

    @property
    def broadcast_sources(self) -> List[BroadcastSource]:
        return [s for s in self._sources.values() if isinstance(s, BroadcastSource)]

    @property
    def weather_sources(self) -> List[WeatherSource]:
        return [s for s in self._sources.values() if isinstance(s, WeatherSource)]

    def weather_sources_for(self, location: Location) -> List[WeatherSource]:
        """Weather sources able to serve ``location``, in registration order."""
        return [s for s in self.weather_sources if s.is_supported(location)]


def build_default_registry() -> SourceRegistry:
    """Registry holding every built-in source."""
    from weather_relay.broadcast.service import DataShareService
    from weather_relay.sources.ilmateenistus.service import IlmateenistusService

    return SourceRegistry([IlmateenistusService(), DataShareService()])
