"""
Exact numeric helpers shared by the rounding engine.

All engine arithmetic runs on fractions.Fraction so that conversion
constants (5/9, 9/5) are exact and ties at n + 0.5 land exactly on the
boundary. Floats are read through their shortest decimal repr, so 69.5
and 70.45 mean exactly what they print as.
"""

import math
from decimal import Decimal
from fractions import Fraction
from numbers import Rational
from typing import List, Sequence, Union

from nws_rounding.config import DISPLAY_DECIMALS
from nws_rounding.core.exceptions import TemperatureDomainError
from nws_rounding.core.models import TemperatureUnit

Number = Union[int, float, Fraction, Decimal]

FIVE_NINTHS = Fraction(5, 9)
NINE_FIFTHS = Fraction(9, 5)
FREEZING_F = 32
HALF = Fraction(1, 2)


def to_fraction(value: Number) -> Fraction:
    """
    Convert a numeric input to an exact Fraction.

    Raises:
        TemperatureDomainError: For NaN, infinities, booleans and non-numbers.
    """
    if isinstance(value, bool):
        raise TemperatureDomainError(f"Not a temperature: {value!r}")
    if isinstance(value, Rational):
        return Fraction(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise TemperatureDomainError(f"Temperature must be finite, got {value}")
        return Fraction(repr(value))
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise TemperatureDomainError(f"Temperature must be finite, got {value}")
        return Fraction(value)
    raise TemperatureDomainError(f"Not a temperature: {value!r}")


def round_half_up(value: Fraction) -> int:
    """Round to the nearest integer, ties toward +inf (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + HALF)


def fahrenheit_to_celsius(temp_f: Fraction) -> Fraction:
    return (temp_f - FREEZING_F) * FIVE_NINTHS


def celsius_to_fahrenheit(temp_c: Fraction) -> Fraction:
    return temp_c * NINE_FIFTHS + FREEZING_F


def convert(value: Fraction, from_unit: TemperatureUnit, to_unit: TemperatureUnit) -> Fraction:
    """Exact conversion between temperature units."""
    if from_unit == to_unit:
        return value
    if from_unit == TemperatureUnit.FAHRENHEIT:
        return fahrenheit_to_celsius(value)
    return celsius_to_fahrenheit(value)


def require_whole(value: Number, label: str = "Displayed temperature") -> int:
    """
    Return `value` as an int if it is a whole number.

    Raises:
        TemperatureDomainError: If `value` has a fractional part.
    """
    exact = to_fraction(value)
    if exact.denominator != 1:
        raise TemperatureDomainError(f"{label} must be a whole degree, got {value}")
    return exact.numerator


def require_within(
    value: Fraction,
    low: Union[int, Fraction],
    high: Union[int, Fraction],
    unit: TemperatureUnit,
) -> None:
    """
    Raises:
        TemperatureDomainError: If `value` is outside [low, high].
    """
    if not low <= value <= high:
        symbol = f"°{unit.value}"
        raise TemperatureDomainError(
            f"Temperature {float(value):g}{symbol} is out of range "
            f"({float(low):g}{symbol} to {float(high):g}{symbol})"
        )


def allocate_percentages(weights: Sequence[Fraction]) -> List[int]:
    """
    Turn non-negative weights into whole percentages summing to 100.

    Each share is rounded half up; the residual goes to the largest bucket
    (the first one on ties).
    """
    total = sum(weights, Fraction(0))
    if total <= 0:
        raise ValueError("Weights must have a positive total")

    percentages = [round_half_up(w * 100 / total) for w in weights]
    largest = max(range(len(weights)), key=lambda i: (weights[i], -i))
    percentages[largest] += 100 - sum(percentages)
    return percentages


def format_range(min_temp: float, max_temp: float, decimals: int = DISPLAY_DECIMALS) -> str:
    """Format a temperature range for display, e.g. "68.5° – 70.5°"."""
    return f"{min_temp:.{decimals}f}° – {max_temp:.{decimals}f}°"
