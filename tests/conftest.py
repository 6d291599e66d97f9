import pytest
from pathlib import Path
from lxml import etree

from igweather.settings import ClientSettings

DATA_DIR = Path(__file__).parent / "data"


def build_document(
    info: str | None = None,
    current: str | None = None,
    forecasts: tuple[str, ...] = (),
) -> bytes:
    """Assemble a service reply from section bodies; None omits the section."""
    parts = ["<xml_api_reply version=\"1\"><weather>"]
    if info is not None:
        parts.append(f"<forecast_information>{info}</forecast_information>")
    if current is not None:
        parts.append(f"<current_conditions>{current}</current_conditions>")
    for forecast in forecasts:
        parts.append(f"<forecast_conditions>{forecast}</forecast_conditions>")
    parts.append("</weather></xml_api_reply>")
    return "".join(parts).encode("utf-8")


def info_xml(unit_system: str = "US", city: str = "New York, NY", zip_code: str = "10001") -> str:
    return (
        f'<city data="{city}"/><postal_code data="{zip_code}"/>'
        f'<unit_system data="{unit_system}"/>'
    )


def current_xml(temp_f: str = "75") -> str:
    return (
        '<condition data="Clear"/>'
        f'<temp_f data="{temp_f}"/>'
        '<humidity data="Humidity: 40%"/>'
        '<icon data="/ig/images/weather/sunny.gif"/>'
        '<wind_condition data="Wind: N at 5 mph"/>'
    )


def forecast_xml(day: str, low: str, high: str, condition: str = "Sunny") -> str:
    return (
        f'<day_of_week data="{day}"/><low data="{low}"/><high data="{high}"/>'
        f'<icon data="/ig/images/weather/sunny.gif"/><condition data="{condition}"/>'
    )


@pytest.fixture
def sample_xml() -> bytes:
    return (DATA_DIR / "ig_weather_10001.xml").read_bytes()


@pytest.fixture
def sample_document(sample_xml: bytes) -> etree._Element:
    return etree.fromstring(sample_xml)


@pytest.fixture
def celsius() -> ClientSettings:
    return ClientSettings(degree_unit="c", language="en")


@pytest.fixture
def fahrenheit() -> ClientSettings:
    return ClientSettings(degree_unit="f", language="en")
