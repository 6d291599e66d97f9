"""Request URL construction for the weather service."""

from __future__ import annotations

from urllib.parse import urlencode

from igweather.settings import ClientSettings

# Input and output encodings requested from the service
CHARSET = "utf-8"


def build_query(location: str, settings: ClientSettings) -> str:
    """Build the weather service URL for ``location``.

    The result follows the format
    ``http://www.google.com/ig/api?weather=Los+Angeles&hl=en&ie=utf-8&oe=utf-8``.
    An empty location still produces a well-formed URL; the service reply
    is left to fail validation.

    Args:
        location: Zip code, city name or coordinates; surrounding
            whitespace is dropped
        settings: Supplies the endpoint and the language code

    Returns:
        Complete, form-encoded request URL
    """
    args = {
        "weather": location.strip(),
        "hl": settings.language,
        "ie": CHARSET,
        "oe": CHARSET,
    }
    return f"{settings.base_url}?{urlencode(args)}"
