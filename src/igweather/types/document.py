"""Document-related type definitions."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class XmlNode(Protocol):
    """Duck-type for a parsed XML element (lxml ``_Element`` satisfies it)."""

    def find(self, path: str) -> XmlNode | None: ...
    def get(self, key: str, default: Any = None) -> Any: ...
    def xpath(self, path: str) -> Any: ...
    def __len__(self) -> int: ...


@runtime_checkable
class DocumentParser(Protocol):
    """Turns a raw response body into a queryable XML tree."""

    def parse(self, content: bytes) -> XmlNode:
        """Parse ``content``.

        Raises:
            ParseError: If the body is not well-formed XML
        """
        ...


