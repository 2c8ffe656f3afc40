"""Exception hierarchy for the NWS rounding engine."""


class RoundingError(Exception):
    """Base class for all rounding engine errors."""


class TemperatureDomainError(RoundingError, ValueError):
    """
    Input outside the supported operating range.

    Raised by the public entry points before any computation: out-of-range
    or non-whole display values, NaN/infinite readings, inverted intervals.
    """


class RoundingConsistencyError(RoundingError):
    """The inversion produced no consistent intermediate value."""


class UnreachableDisplayError(RoundingConsistencyError):
    """
    No intermediate whole-degree value produces the requested display.

    ASOS maps whole Celsius values to Fahrenheit in steps of 1.8°F, so some
    whole-degree Fahrenheit displays (71°F, for one) can never appear.
    """

    def __init__(self, displayed_value: int, pipeline: str):
        self.displayed_value = displayed_value
        self.pipeline = pipeline
        super().__init__(
            f"{displayed_value}°F cannot be displayed by the {pipeline.upper()} pipeline"
        )
