import pytest
from lxml import etree

from conftest import build_document, current_xml, forecast_xml, info_xml
from igweather.weather.errors import ResponseValidationError
from igweather.weather.validator import ValidatedSections, validate_document


def _parse(content: bytes) -> etree._Element:
    return etree.fromstring(content)


def test_sample_document_is_valid(sample_document: etree._Element) -> None:
    sections = validate_document(sample_document)
    assert isinstance(sections, ValidatedSections)
    assert sections.info.find("city").get("data") == "New York, NY"
    assert len(sections.forecast) == 1


def test_missing_current_conditions_fails() -> None:
    doc = _parse(build_document(info=info_xml(), forecasts=(forecast_xml("Mon", "50", "68"),)))
    with pytest.raises(ResponseValidationError) as excinfo:
        validate_document(doc)
    assert excinfo.value.missing == ("current_conditions",)


def test_missing_info_fails() -> None:
    doc = _parse(build_document(current=current_xml()))
    with pytest.raises(ResponseValidationError) as excinfo:
        validate_document(doc)
    assert excinfo.value.missing == ("forecast_information",)


def test_empty_sections_count_as_missing() -> None:
    doc = _parse(build_document(info="", current=""))
    with pytest.raises(ResponseValidationError) as excinfo:
        validate_document(doc)
    assert excinfo.value.missing == ("forecast_information", "current_conditions")


def test_empty_forecast_is_valid() -> None:
    doc = _parse(build_document(info=info_xml(), current=current_xml()))
    sections = validate_document(doc)
    assert sections.forecast == ()


def test_empty_forecast_entries_are_dropped() -> None:
    doc = _parse(
        build_document(
            info=info_xml(), current=current_xml(), forecasts=("", forecast_xml("Tue", "1", "2"))
        )
    )
    assert len(validate_document(doc).forecast) == 1


def test_unexpected_root_fails() -> None:
    with pytest.raises(ResponseValidationError):
        validate_document(_parse(b"<html><body>nope</body></html>"))


def test_problem_cause_is_reported() -> None:
    doc = _parse(
        b'<xml_api_reply version="1"><weather>'
        b'<problem_cause data="Unknown location"/></weather></xml_api_reply>'
    )
    with pytest.raises(ResponseValidationError) as excinfo:
        validate_document(doc)
    assert "Unknown location" in str(excinfo.value)
