"""Weather utility classes."""

from igweather.weather.utils.icons import WeatherIcons
from igweather.weather.utils.units import Temperature, UnitConverter

__all__ = ["Temperature", "UnitConverter", "WeatherIcons"]
