"""
Rounding calculator.

Ties the range finder and the printed-outcome calculator together for a
displayed value, driven by a plain settings object (data type, unit and
stepper offset) instead of any UI state.
"""

import logging
from dataclasses import dataclass, replace
from typing import List, Union

from nws_rounding.config import DEFAULT_PIPELINE
from nws_rounding.core import (
    Pipeline,
    PrintedDistribution,
    TemperatureUnit,
    UncertaintyRange,
)
from nws_rounding.engine.pipeline import parse_pipeline
from nws_rounding.engine.printed import printed_for_range
from nws_rounding.engine.range_finder import find_celsius_range, find_range
from nws_rounding.utils.numeric import Number, format_range, require_whole, round_half_up, to_fraction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculatorSettings:
    """Calculator toggles: data type, input unit and stepper offset."""
    mode: Pipeline = Pipeline.ASOS
    unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT
    offset: int = 0

    def with_mode(self, mode: Union[Pipeline, str]) -> "CalculatorSettings":
        return replace(self, mode=parse_pipeline(mode))

    def with_unit(self, unit: Union[TemperatureUnit, str]) -> "CalculatorSettings":
        return replace(self, unit=TemperatureUnit.parse(unit))

    def step(self, delta: int = 1) -> "CalculatorSettings":
        """Move the stepper offset by `delta` whole degrees."""
        return replace(self, offset=self.offset + delta)


@dataclass(frozen=True)
class CalculatorResult:
    """Range and printed distribution for one calculator input."""
    settings: CalculatorSettings
    input_value: int
    range: UncertaintyRange
    distribution: PrintedDistribution

    def explanation(self) -> List[str]:
        """Plain-text lines describing how the range was derived."""
        rng = self.range
        if self.settings.unit == TemperatureUnit.CELSIUS:
            return [
                f"Displayed {rng.displayed_value}°C came from rounding",
                f"Original was {format_range(rng.min_c, rng.max_c)}C",
                f"In Fahrenheit: {format_range(rng.min_f, rng.max_f)}F",
            ]

        if rng.intermediate_value is not None:
            via = f"{rng.intermediate_value}°C"
        else:
            via = " or ".join(f"{c}°C" for c in rng.intermediate_values)

        lines = [f"Displayed {rng.displayed_value}°F came from rounding"]
        if rng.pipeline == Pipeline.ASOS:
            lines += [
                f"Intermediate Celsius: {via}",
                f"Original °F rounded to values that convert to {via}",
                f"Combined original range: {format_range(rng.min_f, rng.max_f)}F",
            ]
        else:
            lines += [
                f"Came from {via} (rounded)",
                f"Original was {format_range(rng.min_c, rng.max_c)}C",
                f"In Fahrenheit: {format_range(rng.min_f, rng.max_f)}F",
            ]
        return lines


def calculate(value: Number, settings: CalculatorSettings = CalculatorSettings()) -> CalculatorResult:
    """
    Run the calculator for a displayed whole-degree value.

    The stepper offset is added to `value` before the lookup. Celsius input
    is treated as a native whole-°C display; Fahrenheit input goes through
    the selected pipeline. The printed distribution is always the
    whole-°F settlement view of the resulting range.

    Raises:
        TemperatureDomainError: Value not whole or outside the operating range.
        UnreachableDisplayError: The pipeline never displays this value.
    """
    displayed = require_whole(value) + settings.offset

    if settings.unit == TemperatureUnit.CELSIUS:
        rng = find_celsius_range(displayed)
    else:
        rng = find_range(displayed, settings.mode)

    distribution = printed_for_range(rng)
    logger.debug(
        "Calculator %s %d°%s -> %s, prints as %s",
        settings.mode.name, displayed, settings.unit.value,
        format_range(rng.min_true, rng.max_true), distribution.values,
    )
    return CalculatorResult(
        settings=settings,
        input_value=displayed,
        range=rng,
        distribution=distribution,
    )


def analyze_reading(
    current_temp: Number,
    observation_type: Union[Pipeline, str] = DEFAULT_PIPELINE,
) -> CalculatorResult:
    """
    Range and printed outcomes for a live °F reading.

    The reading is rounded half up to the whole degree a station would
    display, then looked up through the station's observation type.
    """
    displayed = round_half_up(to_fraction(current_temp))
    settings = CalculatorSettings(mode=parse_pipeline(observation_type))
    return calculate(displayed, settings)
