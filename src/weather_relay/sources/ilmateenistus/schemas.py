"""Pydantic schemas for the Ilmateenistus meteogram document.

The endpoint serves an XML forecast converted to JSON, so element attributes
live under an ``@attributes`` key and every number arrives as a string.
"""
from __future__ import annotations

import math
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _to_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    return result if math.isfinite(result) else None


class _Element(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class IlmateenistusPeriodAttributes(_Element):
    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None


class IlmateenistusPhenomenAttributes(_Element):
    class_name: Optional[str] = Field(default=None, alias="className")
    en: Optional[str] = None
    et: Optional[str] = None


class IlmateenistusValueAttributes(_Element):
    unit: Optional[str] = None
    value: Optional[float] = None

    @field_validator("value", mode="before")
    @classmethod
    def coerce_number(cls, value: Any) -> Optional[float]:
        return _to_float(value)


class IlmateenistusWindDirectionAttributes(_Element):
    deg: Optional[float] = None
    name: Optional[str] = None

    @field_validator("deg", mode="before")
    @classmethod
    def coerce_number(cls, value: Any) -> Optional[float]:
        return _to_float(value)


class IlmateenistusWindSpeedAttributes(_Element):
    mps: Optional[float] = None

    @field_validator("mps", mode="before")
    @classmethod
    def coerce_number(cls, value: Any) -> Optional[float]:
        return _to_float(value)


class IlmateenistusPhenomen(_Element):
    attributes: Optional[IlmateenistusPhenomenAttributes] = Field(default=None, alias="@attributes")


class IlmateenistusValue(_Element):
    attributes: Optional[IlmateenistusValueAttributes] = Field(default=None, alias="@attributes")


class IlmateenistusWindDirection(_Element):
    attributes: Optional[IlmateenistusWindDirectionAttributes] = Field(default=None, alias="@attributes")


class IlmateenistusWindSpeed(_Element):
    attributes: Optional[IlmateenistusWindSpeedAttributes] = Field(default=None, alias="@attributes")


class IlmateenistusTime(_Element):
    """One forecast period of the meteogram."""

    attributes: Optional[IlmateenistusPeriodAttributes] = Field(default=None, alias="@attributes")
    phenomen: Optional[IlmateenistusPhenomen] = None
    precipitation: Optional[IlmateenistusValue] = None
    wind_direction: Optional[IlmateenistusWindDirection] = Field(default=None, alias="windDirection")
    wind_speed: Optional[IlmateenistusWindSpeed] = Field(default=None, alias="windSpeed")
    temperature: Optional[IlmateenistusValue] = None
    pressure: Optional[IlmateenistusValue] = None


class IlmateenistusTabular(_Element):
    time: List[IlmateenistusTime] = Field(default_factory=list)

    @field_validator("time", mode="before")
    @classmethod
    def wrap_single_period(cls, value: Any) -> Any:
        # A single <time> element is converted to an object, not a list.
        if value is None:
            return []
        if isinstance(value, dict):
            return [value]
        return value


class IlmateenistusForecast(_Element):
    tabular: Optional[IlmateenistusTabular] = None


class IlmateenistusForecastResult(_Element):
    forecast: Optional[IlmateenistusForecast] = None

    @property
    def periods(self) -> List[IlmateenistusTime]:
        if self.forecast is None or self.forecast.tabular is None:
            return []
        return self.forecast.tabular.time
