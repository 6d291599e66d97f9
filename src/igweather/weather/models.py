"""Typed models for the reshaped weather result.

All models are frozen: a result is fully materialized by the transformer
and never mutated afterwards.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from igweather.common.enums import UnitSystem

# ─────────────────────────── primitives ──────────────────────────────────────


class FrozenModel(BaseModel):
    """Base for immutable result records."""

    model_config = ConfigDict(frozen=True)


class LocationInfo(FrozenModel):
    """Forecast information block: where the data is for."""

    city: str = ""
    zip: str = Field("", description="Postal code as echoed by the service")
    unit_system: str = Field(
        UnitSystem.US.value, description="Unit system tag of forecast values"
    )


class CurrentConditions(FrozenModel):
    """Current weather snapshot."""

    condition: str = ""
    temperature: int | float | None = None
    humidity: str = ""
    icon: str = ""
    wind_condition: str = ""


class ForecastDay(FrozenModel):
    """A single day of the forecast."""

    low: int | float | None = None
    high: int | float | None = None
    icon: str = ""
    condition: str = ""


# ─────────────────────────── top-level result ────────────────────────────────


class WeatherResult(FrozenModel):
    """Weather for one location, in the caller's degree unit.

    ``forecast`` is a read-only mapping keyed by the service's day-of-week
    label, in the order the service listed the days.
    """

    info: LocationInfo
    current: CurrentConditions
    forecast: Mapping[str, ForecastDay] = Field(
        default_factory=dict, validate_default=True
    )

    @field_validator("forecast", mode="after")
    @classmethod
    def freeze_forecast(cls, v: Mapping[str, ForecastDay]) -> Mapping[str, ForecastDay]:
        return MappingProxyType(dict(v))

    @field_serializer("forecast")
    def serialize_forecast(self, v: Mapping[str, ForecastDay]) -> dict[str, ForecastDay]:
        return dict(v)

    @property
    def days(self) -> list[str]:
        """Day labels in forecast order."""
        return list(self.forecast)
