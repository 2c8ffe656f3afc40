"""
Printed Outcome Calculator

Given a continuous interval of true readings, find every whole-degree
value it can print as and the share of the interval behind each one,
assuming the true value is uniform across the interval.

The forward chain is a non-decreasing step function, and after its first
rounding step the value is constant. The interval is therefore cut only
where that first rounding crosses an n + 0.5 boundary. Conversions before
the first rounding are increasing affine maps, so length ratios are the
same in the unit of the first rounding as in the input unit.
"""

import logging
from collections import defaultdict
from fractions import Fraction
from typing import Dict, List, Optional, Sequence, Tuple, Union

from nws_rounding.core import (
    PIPELINE_STEPS,
    ConvertStep,
    Pipeline,
    PrintedDistribution,
    PrintedOutcome,
    RoundStep,
    SETTLEMENT_STEPS,
    Step,
    TemperatureDomainError,
    TemperatureUnit,
    UncertaintyRange,
)
from nws_rounding.engine.pipeline import check_reading, parse_pipeline, run_steps
from nws_rounding.utils.numeric import (
    HALF,
    Number,
    allocate_percentages,
    convert,
    round_half_up,
)

logger = logging.getLogger(__name__)


# =============================================================================
# PARTITIONING
# =============================================================================

def _split_at_first_round(steps: Sequence[Step]) -> Tuple[Tuple[Step, ...], Tuple[Step, ...]]:
    """Split a chain into (conversions before the first rounding, the rest)."""
    for i, step in enumerate(steps):
        if isinstance(step, RoundStep):
            return tuple(steps[:i]), tuple(steps[i:])
    raise ValueError("Step chain has no rounding step")


def _resolve_steps(pipeline: Optional[Union[Pipeline, str]]) -> Tuple[Step, ...]:
    if pipeline is None:
        return SETTLEMENT_STEPS
    return PIPELINE_STEPS[parse_pipeline(pipeline)]


def _input_unit(steps: Sequence[Step]) -> TemperatureUnit:
    first = steps[0]
    if isinstance(first, ConvertStep):
        return first.from_unit
    return first.unit


def _check_interval(
    min_true: Number,
    max_true: Number,
    steps: Sequence[Step],
) -> Tuple[Fraction, Fraction]:
    """Validate both ends against the operating range in the chain's input unit."""
    unit = _input_unit(steps)
    low = check_reading(min_true, unit)
    high = check_reading(max_true, unit)
    if low > high:
        raise TemperatureDomainError(
            f"Interval minimum {min_true} is above its maximum {max_true}"
        )
    return low, high


def _to_rounding_unit(value: Fraction, leading: Sequence[Step]) -> Fraction:
    for step in leading:
        value = convert(value, step.from_unit, step.to_unit)
    return value


def _cut_points(low: Fraction, high: Fraction) -> List[Fraction]:
    """n + 0.5 boundaries strictly inside (low, high), in the rounding unit."""
    return [
        n + HALF
        for n in range(round_half_up(low), round_half_up(high))
        if low < n + HALF < high
    ]


def find_breakpoints(
    min_true: Number,
    max_true: Number,
    steps: Sequence[Step] = SETTLEMENT_STEPS,
) -> List[float]:
    """
    Points strictly inside (min_true, max_true) where the printed value can change.

    Returned in the input unit of `steps`, ascending.
    """
    low, high = _check_interval(min_true, max_true, steps)
    leading, _ = _split_at_first_round(steps)

    points = []
    for boundary in _cut_points(_to_rounding_unit(low, leading), _to_rounding_unit(high, leading)):
        # Undo the leading conversions, last one first
        for step in reversed(leading):
            boundary = convert(boundary, step.to_unit, step.from_unit)
        points.append(float(boundary))
    return points


def partition(
    min_true: Number,
    max_true: Number,
    steps: Sequence[Step] = SETTLEMENT_STEPS,
) -> Dict[int, Fraction]:
    """
    Map each printed value to the length of the sub-intervals producing it.

    The interval is cut at its breakpoints; every piece rounds to a single
    whole value at the first rounding step, which the rest of the chain
    carries to the printed value. Lengths are measured in the unit of that
    first rounding step. A zero-length interval yields an empty mapping.
    """
    low, high = _check_interval(min_true, max_true, steps)
    leading, rest = _split_at_first_round(steps)
    low = _to_rounding_unit(low, leading)
    high = _to_rounding_unit(high, leading)

    edges = [low] + _cut_points(low, high) + [high]
    lengths: Dict[int, Fraction] = defaultdict(Fraction)
    for start, end in zip(edges, edges[1:]):
        if end <= start:
            continue
        n = round_half_up(start)
        printed = run_steps(Fraction(n), rest[1:]) if len(rest) > 1 else n
        lengths[printed] += end - start
    return dict(lengths)


# =============================================================================
# PUBLIC ENTRY POINTS
# =============================================================================

def get_printed_range(
    min_true: Number,
    max_true: Number,
    pipeline: Optional[Union[Pipeline, str]] = None,
) -> PrintedDistribution:
    """
    Calculate which whole degrees an interval of true readings can print as.

    Args:
        min_true: Interval start (inclusive).
        max_true: Interval end (exclusive).
        pipeline: None to print a precise °F reading as a whole °F (the
                  climate-report value); Pipeline.ASOS or Pipeline.METAR to
                  re-propagate through that chain, with the interval in its
                  true unit (°F for ASOS, °C for METAR).

    Returns:
        PrintedDistribution with outcomes sorted ascending and
        percentages summing to exactly 100. A zero-length interval prints
        as its single point at 100%. A value reached by less than half a
        percent of the interval is still listed, at 0%, and still counts
        towards `is_split`.

    Raises:
        TemperatureDomainError: For non-finite bounds, bounds outside the
            operating range in the chain's input unit, or min_true > max_true.
    """
    steps = _resolve_steps(pipeline)
    low, high = _check_interval(min_true, max_true, steps)

    if low == high:
        value = run_steps(low, steps)
        logger.debug("Zero-length interval at %s prints as %d", min_true, value)
        return _distribution([PrintedOutcome(value=value, probability_percent=100)])

    lengths = partition(low, high, steps)
    values = sorted(lengths)
    percentages = allocate_percentages([lengths[v] for v in values])
    logger.debug("Interval [%s, %s) prints as %s", min_true, max_true, dict(zip(values, percentages)))

    return _distribution([
        PrintedOutcome(value=v, probability_percent=p)
        for v, p in zip(values, percentages)
    ])


def printed_for_range(rng: UncertaintyRange, reprint: bool = False) -> PrintedDistribution:
    """
    Printed distribution for an UncertaintyRange.

    By default the range's Fahrenheit view is printed as a whole °F. With
    `reprint=True` the range is pushed back through its own pipeline in its
    true unit, which always returns its displayed value at 100%.
    """
    if reprint and rng.pipeline is not None:
        return get_printed_range(rng.min_true, rng.max_true, rng.pipeline)
    return get_printed_range(rng.min_f, rng.max_f)


def _distribution(outcomes: List[PrintedOutcome]) -> PrintedDistribution:
    return PrintedDistribution(
        outcomes=tuple(outcomes),
        is_split=len(outcomes) > 1,
        outcome_count=len(outcomes),
    )
