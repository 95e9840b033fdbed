import pytest

from weather_relay.broadcast.service import DataShareService
from weather_relay.sources.ilmateenistus.service import IlmateenistusService
from weather_relay.sources.registry import SourceRegistry, build_default_registry


def test_default_registry_holds_builtin_sources():
    registry = build_default_registry()

    assert len(registry) == 2
    assert "ilmateenistus" in registry
    assert isinstance(registry.get("datashare"), DataShareService)
    assert registry.get("missing") is None
    assert [s.id for s in registry.configurable_sources] == ["ilmateenistus"]
    assert [s.id for s in registry.broadcast_sources] == ["datashare"]
    assert [s.id for s in registry.weather_sources] == ["ilmateenistus"]


def test_register_rejects_duplicate_ids():
    registry = SourceRegistry([DataShareService()])
    with pytest.raises(ValueError):
        registry.register(DataShareService())


def test_weather_sources_for_filters_by_support(location_factory):
    registry = SourceRegistry([IlmateenistusService(), DataShareService()])

    assert registry.weather_sources_for(location_factory(country_code="ee"))
    assert registry.weather_sources_for(location_factory(country_code="FI")) == []
    assert registry.weather_sources_for(location_factory(country_code=None)) == []
