"""Weather unit conversion utilities."""

from __future__ import annotations

import math
import re
from decimal import Decimal
from fractions import Fraction

from igweather.common.enums import DegreeUnit, UnitSystem

Temperature = int | float

# Plain decimal text of bounded length; no exponents or digit separators
_TEMPERATURE_RE = re.compile(r"[+-]?\d{1,10}(\.\d{1,10})?", re.ASCII)


class UnitConverter:
    """Temperature conversion between the service's unit systems.

    The service reports temperatures as text in either the ``US``
    (Fahrenheit) or ``SI`` (Celsius) system. Conversions use exact
    arithmetic and round half away from zero, so 23.5 becomes 24 and
    -0.5 becomes -1.
    """

    @staticmethod
    def parse_temperature(text: str | None) -> Decimal | None:
        """Parse a temperature field, or None when it is empty or not numeric."""
        if text is None:
            return None
        text = text.strip()
        if not _TEMPERATURE_RE.fullmatch(text):
            return None
        return Decimal(text)

    @staticmethod
    def round_half_away(value: Fraction) -> int:
        """Round to the nearest integer, ties away from zero."""
        magnitude = math.floor(abs(value) + Fraction(1, 2))
        return -magnitude if value < 0 else magnitude

    @classmethod
    def convert_degree(
        cls,
        value: Decimal,
        target: DegreeUnit,
        source: str = UnitSystem.US.value,
    ) -> Temperature:
        """Convert a temperature into the ``target`` unit.

        Args:
            value: Temperature as reported by the service
            target: Unit the caller wants
            source: Unit system tag of ``value``; only ``US`` is Fahrenheit

        Returns:
            The converted, rounded value, or ``value`` itself (as int when
            integral) when it is already in the target unit
        """
        is_fahrenheit = UnitSystem.is_fahrenheit(source)
        exact = Fraction(value)

        if target is DegreeUnit.CELSIUS and is_fahrenheit:
            return cls.round_half_away(Fraction(5, 9) * (exact - 32))
        if target is DegreeUnit.FAHRENHEIT and not is_fahrenheit:
            return cls.round_half_away(exact * Fraction(9, 5) + 32)

        if exact.denominator == 1:
            return int(exact)
        return float(value)
