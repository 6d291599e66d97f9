"""Client settings management.

This package provides:
- ClientSettings: degree unit, language and endpoint, loadable from config.yaml
- normalize_degree_unit: the rule mapping raw unit input to a DegreeUnit
"""

from .user import DEFAULT_BASE_URL, ClientSettings, normalize_degree_unit

__all__ = ["DEFAULT_BASE_URL", "ClientSettings", "normalize_degree_unit"]
