"""Client for the iGoogle XML weather service."""

__version__ = "0.1.0"

from igweather.common.enums import DegreeUnit
from igweather.settings import ClientSettings
from igweather.weather import WeatherAPI, WeatherOutcome, WeatherResult

__all__ = ["ClientSettings", "DegreeUnit", "WeatherAPI", "WeatherOutcome", "WeatherResult"]
