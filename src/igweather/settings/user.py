"""User-configurable client settings loaded from config.yaml."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any, ClassVar

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from igweather.common.enums import DegreeUnit

# Load environment variables from .env file(s)
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://www.google.com/ig/api"


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


def normalize_degree_unit(value: Any) -> DegreeUnit:
    """Map caller input onto a degree unit.

    Only the exact strings ``"c"`` and ``"f"`` (or a ``DegreeUnit``) are
    recognized. Anything else, including ``None`` and ``"C"``, becomes
    Fahrenheit; no error is raised.

    Args:
        value: Raw unit as supplied by the caller or a config file

    Returns:
        The normalized DegreeUnit
    """
    if isinstance(value, DegreeUnit):
        return value
    if isinstance(value, str) and value in ("c", "f"):
        return DegreeUnit(value)
    if value is not None:
        logger.debug("Unrecognized degree unit %r, using Fahrenheit", value)
    return DegreeUnit.FAHRENHEIT


class ClientSettings(BaseModel):
    """Settings for a weather lookup.

    Instances are immutable; use ``model_copy(update=...)`` or the client
    setters to derive a changed copy. Values can be overridden by user
    settings in config.yaml.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("config.yaml"),
        Path("~/.config/igweather/config.yaml").expanduser(),
        Path("/etc/igweather/config.yaml"),
    ]

    model_config = ConfigDict(frozen=True)

    degree_unit: DegreeUnit = Field(
        DegreeUnit.FAHRENHEIT, description="Output temperature unit (c or f)"
    )
    language: str = Field("en", description="Language code forwarded as hl=")
    base_url: str = Field(DEFAULT_BASE_URL, description="Weather service endpoint")
    timeout: float | None = Field(
        10.0, gt=0, description="Request timeout in seconds (null to disable)"
    )

    # ---- validators ----
    @field_validator("degree_unit", mode="before")
    @classmethod
    def validate_degree_unit(cls, v: Any) -> DegreeUnit:
        return normalize_degree_unit(v)

    # ---- convenience methods ----
    @property
    def is_celsius(self) -> bool:
        """Whether results should be reported in Celsius."""
        return self.degree_unit is DegreeUnit.CELSIUS

    def with_language(self, language: str) -> ClientSettings:
        """Return a copy using ``language`` verbatim."""
        return self.model_copy(update={"language": language})

    def with_degree_unit(self, unit: Any = None) -> ClientSettings:
        """Return a copy using the normalized ``unit``."""
        return self.model_copy(update={"degree_unit": normalize_degree_unit(unit)})

    def merged(self, overrides: dict[str, Any]) -> ClientSettings:
        """Return new settings with ``overrides`` layered over these values.

        Raises:
            pydantic.ValidationError: If an override has the wrong type
        """
        data = self.model_dump()
        data.update(overrides)
        return type(self).model_validate(data)

    @classmethod
    def load(cls, path: Path | None = None) -> ClientSettings:
        """Load settings from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated ClientSettings object

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        if path is None:
            # Check environment variable first
            env_path = os.environ.get("IGWEATHER_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(
                        f"Config file from IGWEATHER_CONFIG not found: {path}"
                    )
            else:
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    raise FileNotFoundError(
                        "No configuration file found. Create config.yaml or set IGWEATHER_CONFIG."
                    )

        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw) or {}
        except Exception as exc:  # pragma: no cover
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        if not isinstance(data, dict):
            raise RuntimeError(f"Invalid configuration: expected a mapping in {path}")

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
