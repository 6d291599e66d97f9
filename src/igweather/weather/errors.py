"""Exception classes for weather service interactions.

This module defines a hierarchy of exception classes for the failure
modes of a lookup: transport and parse problems while fetching, and
documents that lack the sections the transformer needs.
"""

from __future__ import annotations

from typing import Optional


class WeatherAPIError(Exception):
    """Error during a weather service request or response handling.

    Every failure of a lookup is reported as a subclass of this error so
    callers can catch the whole family or react to a specific stage.
    """

    def __init__(self, code: int, message: str) -> None:
        """Initialize the exception.

        Args:
            code: HTTP status code, or 0 when no response was received
            message: Human-readable error message
        """
        super().__init__(f"[{code}] {message}")
        self.code: int = code
        self.message: str = message

    @property
    def is_client_error(self) -> bool:
        """Check if this is a client-side error (4xx).

        Returns:
            True for 400-499 status codes
        """
        return 400 <= self.code < 500

    @property
    def is_server_error(self) -> bool:
        """Check if this is a server-side error (5xx).

        Returns:
            True for 500-599 status codes
        """
        return self.code >= 500


class FetchError(WeatherAPIError):
    """Raised when the weather document could not be retrieved or parsed."""

    def __init__(
        self, code: int, message: str, original_error: Optional[Exception] = None
    ) -> None:
        """Initialize with fetch error details.

        Args:
            code: HTTP status code, or 0 when no response was received
            message: Description of the failure
            original_error: The original exception that was caught
        """
        super().__init__(code, message)
        self.original_error = original_error


class NetworkError(FetchError):
    """Raised when a network issue or timeout prevents communication."""

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        super().__init__(0, message, original_error)


class HTTPStatusError(FetchError):
    """Raised when the service answers with a non-2xx status."""

    pass


class ParseError(FetchError):
    """Raised when the response body is not a well-formed XML document."""

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        super().__init__(0, message, original_error)


class ResponseValidationError(WeatherAPIError):
    """Raised when a parsed document lacks required sections."""

    def __init__(self, message: str, missing: tuple[str, ...] = ()) -> None:
        """Initialize with the names of the absent sections.

        Args:
            message: Description of the validation failure
            missing: Section names that were absent or empty
        """
        super().__init__(0, message)
        self.missing: tuple[str, ...] = missing
