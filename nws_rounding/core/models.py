"""
Core data models for the NWS rounding engine.

All temperatures are plain floats tagged by a TemperatureUnit. Every model
is immutable and lives only for the duration of one engine call.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union


# =============================================================================
# ENUMS
# =============================================================================

class TemperatureUnit(Enum):
    """Temperature scale."""
    FAHRENHEIT = "F"
    CELSIUS = "C"

    @classmethod
    def parse(cls, value: Union["TemperatureUnit", str]) -> "TemperatureUnit":
        """Accept a member or a case-insensitive "f"/"c" string."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"Unknown temperature unit: {value!r}") from None


class Pipeline(Enum):
    """NWS reporting pipeline a displayed temperature went through."""
    ASOS = "asos"     # 5-minute automated report: F -> C -> F
    METAR = "metar"   # Hourly aviation report: C -> F

    @classmethod
    def parse(cls, value: Union["Pipeline", str]) -> "Pipeline":
        """Accept a member or a case-insensitive "asos"/"metar" string."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown pipeline: {value!r}") from None


# =============================================================================
# PIPELINE STEPS
# =============================================================================

@dataclass(frozen=True)
class RoundStep:
    """Round to a whole degree in `unit` (half up)."""
    unit: TemperatureUnit


@dataclass(frozen=True)
class ConvertStep:
    """Exact unit conversion."""
    from_unit: TemperatureUnit
    to_unit: TemperatureUnit


Step = Union[RoundStep, ConvertStep]

_F = TemperatureUnit.FAHRENHEIT
_C = TemperatureUnit.CELSIUS

PIPELINE_STEPS: Mapping[Pipeline, Tuple[Step, ...]] = MappingProxyType({
    Pipeline.ASOS: (
        RoundStep(_F),          # OMO whole °F
        ConvertStep(_F, _C),
        RoundStep(_C),          # reported whole °C
        ConvertStep(_C, _F),    # NWS graph value
        RoundStep(_F),          # NWS list value
    ),
    Pipeline.METAR: (
        RoundStep(_C),
        ConvertStep(_C, _F),
        RoundStep(_F),
    ),
})

# A precise Fahrenheit reading printed as a whole degree (climate report)
SETTLEMENT_STEPS: Tuple[Step, ...] = (RoundStep(_F),)

# Unit each pipeline's true (unrounded) reading is measured in
TRUE_UNITS: Mapping[Pipeline, TemperatureUnit] = MappingProxyType({
    Pipeline.ASOS: _F,
    Pipeline.METAR: _C,
})


# =============================================================================
# FORWARD SIMULATION TRACES
# =============================================================================

@dataclass(frozen=True)
class ASOSSteps:
    """Every intermediate value of the ASOS F -> C -> F chain."""
    original: float            # True reading in °F
    rounded_f: int             # Whole °F (one-minute observation)
    celsius_exact: float       # (rounded_f - 32) * 5/9
    rounded_c: int             # Whole °C
    fahrenheit_exact: float    # rounded_c * 9/5 + 32 (graph value)
    displayed_f: int           # Whole °F (list value)


@dataclass(frozen=True)
class METARSteps:
    """Every intermediate value of the METAR C -> F chain."""
    original: float            # True reading in °C
    rounded_c: int             # Whole °C
    fahrenheit_exact: float    # rounded_c * 9/5 + 32
    displayed_f: int           # Whole °F


# =============================================================================
# UNCERTAINTY RANGE
# =============================================================================

@dataclass(frozen=True)
class UncertaintyRange:
    """
    Half-open interval [min_true, max_true) of true readings consistent
    with a displayed value.

    The interval is expressed in `true_unit`, the unit of the pipeline's
    unrounded reading (°F for ASOS, °C for METAR and Celsius displays).
    `intermediate_value` is the whole-°C value every consistent reading
    passes through; it is None when more than one intermediate survived,
    in which case all of them are listed in `intermediate_values`.
    """
    pipeline: Optional[Pipeline]
    min_true: float
    max_true: float
    true_unit: TemperatureUnit
    displayed_value: int
    displayed_unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT
    intermediate_value: Optional[int] = None
    intermediate_values: Tuple[int, ...] = ()

    @property
    def width(self) -> float:
        """Interval length in the true unit."""
        return self.max_true - self.min_true

    @property
    def uncertainty(self) -> float:
        """Half-width (the ± value) in the true unit."""
        return self.width / 2

    @property
    def is_ambiguous(self) -> bool:
        """True when more than one intermediate value maps to the display."""
        return len(self.intermediate_values) > 1

    @property
    def min_f(self) -> float:
        return self._as(TemperatureUnit.FAHRENHEIT, self.min_true)

    @property
    def max_f(self) -> float:
        return self._as(TemperatureUnit.FAHRENHEIT, self.max_true)

    @property
    def uncertainty_f(self) -> float:
        return (self.max_f - self.min_f) / 2

    @property
    def min_c(self) -> float:
        return self._as(TemperatureUnit.CELSIUS, self.min_true)

    @property
    def max_c(self) -> float:
        return self._as(TemperatureUnit.CELSIUS, self.max_true)

    def contains(self, value: float) -> bool:
        """Check whether a true-unit reading lies in [min_true, max_true)."""
        return self.min_true <= value < self.max_true

    def _as(self, unit: TemperatureUnit, value: float) -> float:
        # utils.numeric imports this module
        from nws_rounding.utils.numeric import convert, to_fraction
        return float(convert(to_fraction(value), self.true_unit, unit))


# =============================================================================
# PRINTED OUTCOMES
# =============================================================================

@dataclass(frozen=True)
class PrintedOutcome:
    """A possible displayed value and its share (0-100) of the interval."""
    value: int
    probability_percent: int


@dataclass(frozen=True)
class PrintedDistribution:
    """
    Discrete outcomes an uncertainty interval can print as.

    Outcomes are sorted ascending by value and their percentages sum to
    exactly 100.
    """
    outcomes: Tuple[PrintedOutcome, ...]
    is_split: bool
    outcome_count: int

    @property
    def values(self) -> Tuple[int, ...]:
        """Possible displayed values, ascending."""
        return tuple(o.value for o in self.outcomes)

    def probability_of(self, value: int) -> int:
        """Percentage for a displayed value (0 if it cannot print)."""
        for outcome in self.outcomes:
            if outcome.value == value:
                return outcome.probability_percent
        return 0
