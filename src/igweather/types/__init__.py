"""Type definitions for igweather."""

from .document import DocumentParser, XmlNode

__all__ = ["DocumentParser", "XmlNode"]
