"""Weather client for the iGoogle-style XML weather service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from igweather.common.enums import PipelineState
from igweather.settings import ClientSettings

from .errors import FetchError, ResponseValidationError
from .fetcher import XmlFetcher
from .outcome import WeatherOutcome
from .query import build_query
from .transform import transform
from .validator import validate_document

logger = logging.getLogger(__name__)


class WeatherAPI:
    """Client for the XML weather service.

    Runs one synchronous pipeline per lookup: build the query, fetch and
    parse the document, validate its sections and transform them into a
    WeatherResult. Failures never raise out of ``get_weather``; they come
    back inside the WeatherOutcome.

    The client keeps default settings and a default location. Both can be
    changed through the setters, and both can be overridden per call
    without touching the stored values. Instances are not thread-safe.
    """

    def __init__(
        self,
        settings: ClientSettings | Mapping[str, Any] | None = None,
        fetcher: XmlFetcher | None = None,
    ) -> None:
        """Initialize the weather client.

        Args:
            settings: Settings, or a mapping overriding the defaults
            fetcher: Optional custom fetcher; one honouring the settings'
                timeout is created otherwise
        """
        self.settings = ClientSettings()
        self.location = ""
        self.configure(settings)
        self.fetcher = fetcher

    def configure(self, settings: ClientSettings | Mapping[str, Any] | None) -> None:
        """Replace the default settings.

        A mapping is layered over the current settings, so
        ``configure({"degree_unit": "c"})`` keeps the language.
        """
        if settings is None:
            return
        if isinstance(settings, ClientSettings):
            self.settings = settings
        else:
            self.settings = self.settings.merged(dict(settings))

    def set_location(self, location: str) -> None:
        """Default location: a zip code, city name, coordinates, etc."""
        self.location = location

    def set_language(self, language: str) -> None:
        """Language code such as en, fr, pl or zh-CN, forwarded verbatim."""
        self.settings = self.settings.with_language(language)

    def set_degree_unit(self, unit: Any = "f") -> None:
        """Output unit; only ``c`` and ``f`` are accepted, anything else is ``f``."""
        self.settings = self.settings.with_degree_unit(unit)

    def get_weather(
        self, location: str | None = None, settings: ClientSettings | None = None
    ) -> WeatherOutcome:
        """Retrieve and reshape the weather for a location.

        Args:
            location: Location to look up; the stored location if None
            settings: Settings for this call only; the stored settings if None

        Returns:
            WeatherOutcome holding either the result or the error, with
            the stage the lookup failed at
        """
        cfg = settings or self.settings
        where = self.location if location is None else location

        url = build_query(where, cfg)
        logger.debug("%s: %s", PipelineState.QUERY_BUILT.value, url)

        fetcher = self.fetcher or XmlFetcher(timeout=cfg.timeout)
        try:
            document = fetcher.fetch(url)
        except FetchError as exc:
            logger.warning("Weather lookup for %r failed: %s", where.strip(), exc)
            return WeatherOutcome.failure(exc, PipelineState.FETCHED)

        try:
            sections = validate_document(document)
        except ResponseValidationError as exc:
            logger.warning("Weather lookup for %r failed: %s", where.strip(), exc)
            return WeatherOutcome.failure(exc, PipelineState.VALIDATED)

        result = transform(sections, cfg)
        logger.info(
            "Weather for %s: %d forecast day(s)",
            result.info.city or where.strip(),
            len(result.forecast),
        )
        return WeatherOutcome.success(result)
