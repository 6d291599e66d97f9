"""Reshape validated weather sections into a WeatherResult."""

from __future__ import annotations

import logging

from igweather.common.enums import UnitSystem
from igweather.settings import ClientSettings
from igweather.types import XmlNode

from .models import CurrentConditions, ForecastDay, LocationInfo, WeatherResult
from .utils import Temperature, UnitConverter, WeatherIcons
from .validator import ValidatedSections

logger = logging.getLogger(__name__)


def field_value(node: XmlNode, name: str) -> str:
    """Return the ``data`` attribute of child ``name``, or "" when absent."""
    child = node.find(name)
    if child is None:
        return ""
    return str(child.get("data", ""))


def _temperature(
    node: XmlNode, name: str, settings: ClientSettings, source: str
) -> Temperature | None:
    value = UnitConverter.parse_temperature(field_value(node, name))
    if value is None:
        return None
    return UnitConverter.convert_degree(value, settings.degree_unit, source)


def _info(node: XmlNode) -> LocationInfo:
    return LocationInfo(
        city=field_value(node, "city"),
        zip=field_value(node, "postal_code"),
        unit_system=field_value(node, "unit_system"),
    )


def _current(node: XmlNode, settings: ClientSettings) -> CurrentConditions:
    # temp_f is Fahrenheit whatever unit_system says
    return CurrentConditions(
        condition=field_value(node, "condition"),
        temperature=_temperature(node, "temp_f", settings, UnitSystem.US.value),
        humidity=field_value(node, "humidity"),
        icon=WeatherIcons.icon_key(field_value(node, "icon")),
        wind_condition=field_value(node, "wind_condition"),
    )


def _forecast_day(node: XmlNode, settings: ClientSettings, source: str) -> ForecastDay:
    return ForecastDay(
        low=_temperature(node, "low", settings, source),
        high=_temperature(node, "high", settings, source),
        icon=WeatherIcons.icon_key(field_value(node, "icon")),
        condition=field_value(node, "condition"),
    )


def transform(sections: ValidatedSections, settings: ClientSettings) -> WeatherResult:
    """Build the final result from validated sections.

    Current conditions are converted from Fahrenheit; forecast values are
    converted from the document's ``unit_system``. Forecast days keep the
    service's order, and a repeated day label replaces the earlier entry.

    Args:
        sections: Output of validate_document
        settings: Supplies the target degree unit

    Returns:
        Immutable WeatherResult
    """
    info = _info(sections.info)
    current = _current(sections.current, settings)

    forecast: dict[str, ForecastDay] = {}
    for node in sections.forecast:
        day = field_value(node, "day_of_week")
        if day in forecast:
            logger.debug("Duplicate forecast day %r, keeping the later entry", day)
        forecast[day] = _forecast_day(node, settings, info.unit_system)

    return WeatherResult(info=info, current=current, forecast=forecast)
