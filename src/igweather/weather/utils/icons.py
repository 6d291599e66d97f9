"""Weather icon utilities."""

from __future__ import annotations

from typing import ClassVar


class WeatherIcons:
    """Derives short icon keys from the service's icon paths.

    The service reports icons as paths such as
    ``/ig/images/weather/mostly_sunny.gif``; callers only need the file
    name, which doubles as the icon key.
    """

    ICON_PREFIXES: ClassVar[tuple[str, ...]] = (
        "/ig/images/weather/",
        "ig/images/weather/",
    )

    @classmethod
    def icon_key(cls, path: str) -> str:
        """Strip the fixed icon directory from ``path``.

        Args:
            path: Icon path from a ``icon`` field, possibly empty

        Returns:
            The icon key, or ``path`` unchanged when it has no known prefix
        """
        for prefix in cls.ICON_PREFIXES:
            if path.startswith(prefix):
                return path[len(prefix) :]
        return path
