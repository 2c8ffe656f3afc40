"""
Rounding Pipeline

Forward simulation of the two NWS reporting chains.

ASOS 5-minute (F -> C -> F double conversion):
1. Precise °F -> round to whole °F (one-minute observation)
2. Convert to °C: (F - 32) * 5/9
3. Round to whole °C
4. Convert back to °F: C * 9/5 + 32 (NWS graph value)
5. Round to whole °F (NWS list value)

METAR hourly (C -> F single conversion):
1. Precise °C -> round to whole °C
2. Convert to °F: C * 9/5 + 32
3. Round to whole °F

Every rounding is half up (n + 0.5 -> n + 1). The range finder and the
printed-outcome calculator both depend on that convention.
"""

import logging
from fractions import Fraction
from typing import Sequence, Tuple, Union

from nws_rounding.config import MIN_DISPLAY_F, MAX_DISPLAY_F
from nws_rounding.core import (
    ASOSSteps,
    ConvertStep,
    METARSteps,
    PIPELINE_STEPS,
    Pipeline,
    RoundStep,
    Step,
    TemperatureDomainError,
    TemperatureUnit,
)
from nws_rounding.utils.numeric import (
    Number,
    convert,
    fahrenheit_to_celsius,
    require_within,
    round_half_up,
    to_fraction,
)

logger = logging.getLogger(__name__)


# =============================================================================
# DOMAIN CHECKS
# =============================================================================

def check_reading(value: Number, unit: TemperatureUnit) -> Fraction:
    """
    Validate a true reading against the operating range.

    The range is configured in whole °F; Celsius readings are checked
    against its exact Celsius equivalent.

    Returns:
        The reading as an exact Fraction.

    Raises:
        TemperatureDomainError: If the reading is not finite or out of range.
    """
    exact = to_fraction(value)
    if unit == TemperatureUnit.FAHRENHEIT:
        require_within(exact, MIN_DISPLAY_F, MAX_DISPLAY_F, unit)
    else:
        low = fahrenheit_to_celsius(Fraction(MIN_DISPLAY_F))
        high = fahrenheit_to_celsius(Fraction(MAX_DISPLAY_F))
        require_within(exact, low, high, unit)
    return exact


# =============================================================================
# STEP EXECUTION
# =============================================================================

def apply_step(value: Fraction, step: Step) -> Fraction:
    """Apply one pipeline step to an exact value."""
    if isinstance(step, RoundStep):
        return Fraction(round_half_up(value))
    if isinstance(step, ConvertStep):
        return convert(value, step.from_unit, step.to_unit)
    raise TypeError(f"Unknown pipeline step: {step!r}")


def trace_steps(value: Fraction, steps: Sequence[Step]) -> Tuple[Fraction, ...]:
    """Return the value after each step, in order."""
    trace = []
    for step in steps:
        value = apply_step(value, step)
        trace.append(value)
    return tuple(trace)


def run_steps(value: Union[Number, Fraction], steps: Sequence[Step]) -> int:
    """
    Run a value through a step chain that ends in a rounding step.

    Returns:
        The final whole-degree value.
    """
    if not steps or not isinstance(steps[-1], RoundStep):
        raise ValueError("Step chain must end with a rounding step")
    return int(trace_steps(to_fraction(value), steps)[-1])


# =============================================================================
# SIMULATORS
# =============================================================================

def simulate_asos(true_f: Number) -> ASOSSteps:
    """
    Simulate the ASOS 5-step forward rounding process.

    Args:
        true_f: True sensor reading in Fahrenheit.

    Returns:
        ASOSSteps with every intermediate value.

    Raises:
        TemperatureDomainError: If the reading is outside the operating range.
    """
    exact = check_reading(true_f, TemperatureUnit.FAHRENHEIT)
    rounded_f, celsius_exact, rounded_c, fahrenheit_exact, displayed_f = trace_steps(
        exact, PIPELINE_STEPS[Pipeline.ASOS]
    )
    logger.debug(
        "ASOS %s°F -> %s°F -> %s°C -> %s°C -> %s°F -> %s°F",
        float(exact), rounded_f, float(celsius_exact), rounded_c,
        float(fahrenheit_exact), displayed_f,
    )
    return ASOSSteps(
        original=float(exact),
        rounded_f=int(rounded_f),
        celsius_exact=float(celsius_exact),
        rounded_c=int(rounded_c),
        fahrenheit_exact=float(fahrenheit_exact),
        displayed_f=int(displayed_f),
    )


def simulate_metar(true_c: Number) -> METARSteps:
    """
    Simulate the METAR 3-step forward rounding process.

    Args:
        true_c: True sensor reading in Celsius.

    Returns:
        METARSteps with every intermediate value.

    Raises:
        TemperatureDomainError: If the reading is outside the operating range.
    """
    exact = check_reading(true_c, TemperatureUnit.CELSIUS)
    rounded_c, fahrenheit_exact, displayed_f = trace_steps(
        exact, PIPELINE_STEPS[Pipeline.METAR]
    )
    logger.debug(
        "METAR %s°C -> %s°C -> %s°F -> %s°F",
        float(exact), rounded_c, float(fahrenheit_exact), displayed_f,
    )
    return METARSteps(
        original=float(exact),
        rounded_c=int(rounded_c),
        fahrenheit_exact=float(fahrenheit_exact),
        displayed_f=int(displayed_f),
    )


def simulate(true_value: Number, pipeline: Union[Pipeline, str]) -> int:
    """
    Final displayed °F for a true reading.

    The reading is in °F for ASOS and in °C for METAR.
    """
    pipeline = parse_pipeline(pipeline)
    if pipeline == Pipeline.METAR:
        return simulate_metar(true_value).displayed_f
    return simulate_asos(true_value).displayed_f


def parse_pipeline(pipeline: Union[Pipeline, str]) -> Pipeline:
    """Parse a pipeline name, reporting bad names as domain errors."""
    try:
        return Pipeline.parse(pipeline)
    except ValueError as e:
        raise TemperatureDomainError(str(e)) from None
