"""Enumerations shared across igweather."""

from .enums import DegreeUnit, PipelineState, UnitSystem

__all__ = ["DegreeUnit", "PipelineState", "UnitSystem"]
