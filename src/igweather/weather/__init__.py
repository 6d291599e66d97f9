"""Weather package - holds API client, pipeline stages, and custom errors."""

from .api import WeatherAPI
from .errors import (
    FetchError,
    HTTPStatusError,
    NetworkError,
    ParseError,
    ResponseValidationError,
    WeatherAPIError,
)
from .fetcher import LxmlParser, XmlFetcher
from .models import CurrentConditions, ForecastDay, LocationInfo, WeatherResult
from .outcome import WeatherOutcome
from .query import build_query
from .transform import transform
from .utils import UnitConverter, WeatherIcons
from .validator import ValidatedSections, validate_document

# Define what gets imported with: from igweather.weather import *
__all__ = [
    "CurrentConditions",
    "FetchError",
    "ForecastDay",
    "HTTPStatusError",
    "LocationInfo",
    "LxmlParser",
    "NetworkError",
    "ParseError",
    "ResponseValidationError",
    "UnitConverter",
    "ValidatedSections",
    "WeatherAPI",
    "WeatherAPIError",
    "WeatherIcons",
    "WeatherOutcome",
    "WeatherResult",
    "XmlFetcher",
    "build_query",
    "transform",
    "validate_document",
]
