"""
Range Finder

Inverts the rounding pipelines: given a displayed whole-degree value,
find the half-open interval of true readings that produce it.

Every rounding step's preimage is [n - 0.5, n + 0.5) in the unit of that
step, and conversions are exact, so the only ambiguity is which whole
intermediate values the chain passed through. The search enumerates
integer candidates in a small window and keeps every one that maps
forward to the display.
"""

import logging
import math
from fractions import Fraction
from typing import List, Union

from nws_rounding.config import (
    CANDIDATE_WINDOW,
    DEFAULT_PIPELINE,
    MAX_DISPLAY_C,
    MAX_DISPLAY_F,
    MIN_DISPLAY_C,
    MIN_DISPLAY_F,
)
from nws_rounding.core import (
    Pipeline,
    RoundingConsistencyError,
    TemperatureUnit,
    UncertaintyRange,
    UnreachableDisplayError,
)
from nws_rounding.engine.pipeline import parse_pipeline
from nws_rounding.utils.numeric import (
    HALF,
    Number,
    celsius_to_fahrenheit,
    fahrenheit_to_celsius,
    require_whole,
    require_within,
    round_half_up,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CANDIDATE SEARCH
# =============================================================================

def _window(center: Fraction) -> range:
    """Whole values within CANDIDATE_WINDOW of `center`."""
    return range(math.floor(center) - CANDIDATE_WINDOW, math.ceil(center) + CANDIDATE_WINDOW + 1)


def celsius_candidates(displayed_f: int) -> List[int]:
    """
    Whole °C values whose Fahrenheit conversion rounds to `displayed_f`.

    All matches are kept; more than one means adjacent Celsius values
    collapse onto the same display.
    """
    return [
        c for c in _window(fahrenheit_to_celsius(Fraction(displayed_f)))
        if round_half_up(celsius_to_fahrenheit(Fraction(c))) == displayed_f
    ]


def fahrenheit_feeders(rounded_c: int) -> List[int]:
    """Whole °F values whose Celsius conversion rounds to `rounded_c`."""
    return [
        f for f in _window(celsius_to_fahrenheit(Fraction(rounded_c)))
        if round_half_up(fahrenheit_to_celsius(Fraction(f))) == rounded_c
    ]


def _check_display_f(displayed_f: Number) -> int:
    value = require_whole(displayed_f)
    require_within(Fraction(value), MIN_DISPLAY_F, MAX_DISPLAY_F, TemperatureUnit.FAHRENHEIT)
    return value


def _check_display_c(displayed_c: Number) -> int:
    value = require_whole(displayed_c)
    require_within(Fraction(value), MIN_DISPLAY_C, MAX_DISPLAY_C, TemperatureUnit.CELSIUS)
    return value


def _surviving_celsius(displayed_f: int, pipeline: Pipeline) -> List[int]:
    candidates = celsius_candidates(displayed_f)
    logger.debug(
        "%s %d°F: intermediate candidates %s", pipeline.name, displayed_f, candidates
    )
    if not candidates:
        raise UnreachableDisplayError(displayed_f, pipeline.value)
    if len(candidates) > 1:
        logger.warning(
            "%s %d°F is reachable from %d whole-Celsius values %s; "
            "reporting their combined range",
            pipeline.name, displayed_f, len(candidates), candidates,
        )
    return candidates


def _asos_range(candidates: List[int], displayed_f: int) -> UncertaintyRange:
    feeders: List[int] = []
    for rounded_c in candidates:
        found = fahrenheit_feeders(rounded_c)
        if not found:
            raise RoundingConsistencyError(
                f"No whole °F value rounds to {rounded_c}°C; candidate window too small?"
            )
        feeders.extend(found)

    return UncertaintyRange(
        pipeline=Pipeline.ASOS,
        min_true=float(min(feeders) - HALF),
        max_true=float(max(feeders) + HALF),
        true_unit=TemperatureUnit.FAHRENHEIT,
        displayed_value=displayed_f,
        intermediate_value=candidates[0] if len(candidates) == 1 else None,
        intermediate_values=tuple(candidates),
    )


def _metar_range(candidates: List[int], displayed_f: int) -> UncertaintyRange:
    return UncertaintyRange(
        pipeline=Pipeline.METAR,
        min_true=float(min(candidates) - HALF),
        max_true=float(max(candidates) + HALF),
        true_unit=TemperatureUnit.CELSIUS,
        displayed_value=displayed_f,
        intermediate_value=candidates[0] if len(candidates) == 1 else None,
        intermediate_values=tuple(candidates),
    )


# =============================================================================
# PUBLIC ENTRY POINTS
# =============================================================================

def find_asos_range(displayed_f: Number) -> UncertaintyRange:
    """
    Find the range of true °F readings behind an ASOS 5-minute display.

    Works backwards through the 5-step process: display -> whole °C
    candidates -> whole °F values rounding to them -> their half-degree
    preimages.

    Args:
        displayed_f: Displayed whole-degree Fahrenheit (NWS list value).

    Returns:
        UncertaintyRange in °F.

    Raises:
        TemperatureDomainError: Display not whole or out of range.
        UnreachableDisplayError: ASOS can never display this value.
    """
    displayed_f = _check_display_f(displayed_f)
    candidates = _surviving_celsius(displayed_f, Pipeline.ASOS)
    return _asos_range(candidates, displayed_f)


def find_metar_range(displayed_f: Number) -> UncertaintyRange:
    """
    Find the range of true °C readings behind a METAR hourly display.

    The range is authoritative in Celsius; use `min_f`/`max_f` for the
    Fahrenheit view.
    """
    displayed_f = _check_display_f(displayed_f)
    candidates = _surviving_celsius(displayed_f, Pipeline.METAR)
    return _metar_range(candidates, displayed_f)


def find_range(
    displayed_f: Number,
    pipeline: Union[Pipeline, str] = DEFAULT_PIPELINE,
) -> UncertaintyRange:
    """Get the range for a displayed °F based on observation type."""
    if parse_pipeline(pipeline) == Pipeline.METAR:
        return find_metar_range(displayed_f)
    return find_asos_range(displayed_f)


def find_range_from_celsius(
    displayed_c: Number,
    pipeline: Union[Pipeline, str] = DEFAULT_PIPELINE,
) -> UncertaintyRange:
    """
    Range of true readings that pass through a chosen whole-°C intermediate.

    Answers "what if the reported Celsius value were N": the returned
    range's `displayed_value` is the °F display that intermediate produces.
    """
    rounded_c = _check_display_c(displayed_c)
    pipeline = parse_pipeline(pipeline)
    displayed_f = round_half_up(celsius_to_fahrenheit(Fraction(rounded_c)))
    if pipeline == Pipeline.METAR:
        return _metar_range([rounded_c], displayed_f)
    return _asos_range([rounded_c], displayed_f)


def find_celsius_range(displayed_c: Number) -> UncertaintyRange:
    """
    Find the range for a displayed whole-°C value.

    Celsius is the native measurement, so the true reading was simply in
    [displayed_c - 0.5, displayed_c + 0.5).
    """
    displayed_c = _check_display_c(displayed_c)
    return UncertaintyRange(
        pipeline=None,
        min_true=float(displayed_c - HALF),
        max_true=float(displayed_c + HALF),
        true_unit=TemperatureUnit.CELSIUS,
        displayed_value=displayed_c,
        displayed_unit=TemperatureUnit.CELSIUS,
    )
