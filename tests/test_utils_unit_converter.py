from decimal import Decimal
from fractions import Fraction

import pytest

from igweather.common.enums import DegreeUnit, UnitSystem
from igweather.weather.utils.units import UnitConverter

C = DegreeUnit.CELSIUS
F = DegreeUnit.FAHRENHEIT


@pytest.mark.parametrize(
    "value, target, source, expected",
    [
        ("32", C, "US", 0),
        ("0", F, "SI", 32),
        ("100", F, "SI", 212),
        ("212", C, "US", 100),
        ("75", C, "US", 24),  # 23.89
        ("50", C, "US", 10),
        ("68", C, "US", 20),
        ("-40", C, "US", -40),
        ("21", C, "SI", 21),  # already Celsius
        ("75", F, "US", 75),  # already Fahrenheit
    ],
)
def test_convert_degree(value: str, target: DegreeUnit, source: str, expected: int) -> None:
    assert UnitConverter.convert_degree(Decimal(value), target, source) == expected


def test_unknown_unit_system_counts_as_celsius_source() -> None:
    assert UnitConverter.convert_degree(Decimal("0"), F, "") == 32
    assert UnitConverter.convert_degree(Decimal("10"), C, "") == 10


def test_unchanged_values_keep_their_precision() -> None:
    result = UnitConverter.convert_degree(Decimal("21.5"), C, "SI")
    assert result == 21.5
    assert isinstance(UnitConverter.convert_degree(Decimal("21"), C, "SI"), int)


@pytest.mark.parametrize(
    "value, expected",
    [
        (Fraction(1, 2), 1),
        (Fraction(-1, 2), -1),
        (Fraction(5, 2), 3),
        (Fraction(7, 3), 2),
        (Fraction(-7, 3), -2),
        (Fraction(0), 0),
    ],
)
def test_round_half_away(value: Fraction, expected: int) -> None:
    assert UnitConverter.round_half_away(value) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("75", Decimal("75")),
        (" -3 ", Decimal("-3")),
        ("+21.5", Decimal("21.5")),
        ("", None),
        ("N/A", None),
        (None, None),
        ("1e5000", None),
        ("1e20000000", None),
        ("7_5", None),
        ("75.", None),
        (".5", None),
        ("12345678901", None),
    ],
)
def test_parse_temperature(text: str | None, expected: Decimal | None) -> None:
    assert UnitConverter.parse_temperature(text) == expected


def test_parse_temperature_rejects_non_finite() -> None:
    assert UnitConverter.parse_temperature("NaN") is None
    assert UnitConverter.parse_temperature("Infinity") is None


@pytest.mark.parametrize("tag, expected", [("US", True), ("SI", False), ("", False), ("us", False)])
def test_unit_system_is_fahrenheit(tag: str, expected: bool) -> None:
    assert UnitSystem.is_fahrenheit(tag) is expected
