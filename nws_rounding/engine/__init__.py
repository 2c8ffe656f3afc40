"""
Rounding engine for NWS temperature reports.

Contains the forward pipelines, the range finder that inverts them, and
the printed-outcome calculator.
"""

from nws_rounding.engine.pipeline import (
    # Forward simulation
    simulate_asos,
    simulate_metar,
    simulate,
    run_steps,
    trace_steps,
    check_reading,
    parse_pipeline,
)

from nws_rounding.engine.range_finder import (
    # Inversion
    find_range,
    find_asos_range,
    find_metar_range,
    find_range_from_celsius,
    find_celsius_range,
    celsius_candidates,
    fahrenheit_feeders,
)

from nws_rounding.engine.printed import (
    # Printed outcomes
    get_printed_range,
    printed_for_range,
    find_breakpoints,
    partition,
)

from nws_rounding.engine.calculator import (
    # Calculator
    CalculatorSettings,
    CalculatorResult,
    calculate,
    analyze_reading,
)

__all__ = [
    "simulate_asos",
    "simulate_metar",
    "simulate",
    "run_steps",
    "trace_steps",
    "check_reading",
    "parse_pipeline",
    "find_range",
    "find_asos_range",
    "find_metar_range",
    "find_range_from_celsius",
    "find_celsius_range",
    "celsius_candidates",
    "fahrenheit_feeders",
    "get_printed_range",
    "printed_for_range",
    "find_breakpoints",
    "partition",
    "CalculatorSettings",
    "CalculatorResult",
    "calculate",
    "analyze_reading",
]
