"""Tagged result of a weather lookup."""

from __future__ import annotations

from dataclasses import dataclass

from igweather.common.enums import PipelineState

from .errors import FetchError, ResponseValidationError, WeatherAPIError
from .models import WeatherResult


@dataclass(frozen=True)
class WeatherOutcome:
    """Either a WeatherResult or the error that stopped the lookup.

    Truthiness mirrors success, so ``if client.get_weather("10001"):``
    keeps working for callers that only care whether data came back.
    """

    result: WeatherResult | None = None
    error: WeatherAPIError | None = None
    failed_at: PipelineState | None = None

    @classmethod
    def success(cls, result: WeatherResult) -> WeatherOutcome:
        return cls(result=result)

    @classmethod
    def failure(cls, error: WeatherAPIError, failed_at: PipelineState) -> WeatherOutcome:
        return cls(error=error, failed_at=failed_at)

    @property
    def ok(self) -> bool:
        """Whether the lookup produced a result."""
        return self.result is not None

    @property
    def state(self) -> PipelineState:
        """Terminal state of the lookup."""
        return PipelineState.TRANSFORMED if self.ok else PipelineState.FAILED

    @property
    def is_fetch_error(self) -> bool:
        """Whether retrieval failed (transport, status or parse)."""
        return isinstance(self.error, FetchError)

    @property
    def is_validation_error(self) -> bool:
        """Whether the document lacked required sections."""
        return isinstance(self.error, ResponseValidationError)

    def unwrap(self) -> WeatherResult:
        """Return the result or raise the stored error."""
        if self.result is None:
            raise self.error or WeatherAPIError(0, "No weather data available")
        return self.result

    def __bool__(self) -> bool:
        return self.ok
