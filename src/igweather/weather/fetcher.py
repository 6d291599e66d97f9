"""HTTP retrieval and XML parsing of weather documents."""

from __future__ import annotations

import logging
from typing import Final

import requests
from lxml import etree

from igweather.types import DocumentParser, XmlNode

from .errors import HTTPStatusError, NetworkError, ParseError

logger = logging.getLogger(__name__)

# Human‑readable explanations for common HTTP errors
HTTP_ERROR_MAP: Final = {
    400: "Bad request - check the location parameter",
    403: "Request refused by the weather service",
    404: "Weather endpoint not found",
    429: "Rate limit exceeded",
    500: "Weather service internal error",
    502: "Bad gateway at the weather service",
    503: "Service unavailable (maintenance)",
    504: "Gateway timeout",
}


class LxmlParser:
    """DocumentParser backed by lxml.

    External entities and network lookups are disabled; the service
    documents never need them.
    """

    def __init__(self) -> None:
        self._parser = etree.XMLParser(resolve_entities=False, no_network=True)

    def parse(self, content: bytes) -> XmlNode:
        if not content or not content.strip():
            raise ParseError("Empty response body")
        try:
            return etree.fromstring(content, parser=self._parser)
        except etree.XMLSyntaxError as exc:
            raise ParseError(f"Malformed XML response: {exc}", exc) from exc


class XmlFetcher:
    """Retrieves a weather document with a single blocking GET.

    No retries are attempted. Every failure is raised as a FetchError
    subclass so the caller can tell transport, status and parse problems
    apart.
    """

    def __init__(
        self,
        timeout: float | None = 10.0,
        session: requests.Session | None = None,
        parser: DocumentParser | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            timeout: Timeout for requests in seconds, None to wait forever
            session: Optional requests session; module-level requests.get otherwise
            parser: Optional document parser, LxmlParser by default
        """
        self.timeout = timeout
        self.session = session
        self.parser: DocumentParser = parser or LxmlParser()

    def fetch(self, url: str) -> XmlNode:
        """Download and parse the document at ``url``.

        Returns:
            Root node of the parsed document

        Raises:
            NetworkError: When the host is unreachable or the request times out
            HTTPStatusError: When the service answers with a non-2xx status
            ParseError: When the body is not well-formed XML
        """
        get = self.session.get if self.session is not None else requests.get

        try:
            resp = get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Weather service network error: %s", exc)
            raise NetworkError(f"Network error: {exc}", exc) from exc

        if not 200 <= resp.status_code < 300:
            msg = HTTP_ERROR_MAP.get(resp.status_code, resp.reason or "HTTP error")
            logger.error("Weather service error: %s - %s", resp.status_code, msg)
            raise HTTPStatusError(resp.status_code, msg)

        try:
            document = self.parser.parse(resp.content)
        except ParseError as exc:
            logger.warning("Could not parse weather response: %s", exc.message)
            raise

        logger.debug("Fetched weather document from %s", url)
        return document
