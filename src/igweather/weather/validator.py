"""Structural validation of weather documents."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from igweather.types import XmlNode

from .errors import ResponseValidationError

logger = logging.getLogger(__name__)

INFO_PATH: Final = "/xml_api_reply/weather/forecast_information"
CURRENT_PATH: Final = "/xml_api_reply/weather/current_conditions"
FORECAST_PATH: Final = "/xml_api_reply/weather/forecast_conditions"
PROBLEM_PATH: Final = "/xml_api_reply/weather/problem_cause"


@dataclass(frozen=True)
class ValidatedSections:
    """The parts of a document the transformer reads.

    ``info`` and ``current`` are always present; ``forecast`` may be empty.
    """

    info: XmlNode
    current: XmlNode
    forecast: tuple[XmlNode, ...] = ()


def _present(nodes: list[XmlNode]) -> list[XmlNode]:
    # An element without children carries no fields
    return [node for node in nodes if len(node)]


def validate_document(document: XmlNode) -> ValidatedSections:
    """Pick out the forecast information, current and forecast sections.

    Args:
        document: Root of a parsed service reply

    Returns:
        The non-empty sections of the document

    Raises:
        ResponseValidationError: If the information or current conditions
            section is absent or empty
    """
    info = _present(document.xpath(INFO_PATH))
    current = _present(document.xpath(CURRENT_PATH))
    forecast = _present(document.xpath(FORECAST_PATH))

    missing = tuple(
        name
        for name, nodes in (("forecast_information", info), ("current_conditions", current))
        if not nodes
    )
    if missing:
        message = f"Response is missing {', '.join(missing)}"
        problems = document.xpath(PROBLEM_PATH)
        if problems and problems[0].get("data"):
            message = f"{message} (service reported: {problems[0].get('data')})"
        logger.warning(message)
        raise ResponseValidationError(message, missing)

    logger.debug("Validated response with %d forecast day(s)", len(forecast))
    return ValidatedSections(info=info[0], current=current[0], forecast=tuple(forecast))
