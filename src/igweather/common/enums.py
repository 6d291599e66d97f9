from enum import Enum


class DegreeUnit(str, Enum):
    """Temperature unit the caller wants results in."""

    CELSIUS = "c"
    FAHRENHEIT = "f"


class UnitSystem(str, Enum):
    """Measurement system tag reported in the forecast information block.

    Only ``US`` means Fahrenheit; the service uses ``SI`` for Celsius.
    """

    US = "US"
    SI = "SI"

    @classmethod
    def is_fahrenheit(cls, tag: str) -> bool:
        """Whether values tagged ``tag`` are in Fahrenheit; only ``US`` is."""
        return tag == cls.US.value


class PipelineState(Enum):
    """Stages a single weather lookup moves through."""

    IDLE = "idle"
    QUERY_BUILT = "query_built"
    FETCHED = "fetched"
    VALIDATED = "validated"
    TRANSFORMED = "transformed"
    FAILED = "failed"
