"""
NWS Rounding - temperature-rounding uncertainty engine.

Simulates the ASOS and METAR reporting pipelines, inverts a displayed
whole-degree temperature into the range of true readings behind it, and
works out which whole degrees such a range can print as.
"""

__version__ = "0.1.0"

from nws_rounding.core import (
    # Enums
    TemperatureUnit,
    Pipeline,
    # Data classes
    ASOSSteps,
    METARSteps,
    UncertaintyRange,
    PrintedOutcome,
    PrintedDistribution,
    # Errors
    RoundingError,
    TemperatureDomainError,
    RoundingConsistencyError,
    UnreachableDisplayError,
)

from nws_rounding.config import (
    CityConfig,
    get_city,
    list_cities,
)

from nws_rounding.engine import (
    simulate_asos,
    simulate_metar,
    find_range,
    find_range_from_celsius,
    find_celsius_range,
    get_printed_range,
    CalculatorSettings,
    calculate,
    analyze_reading,
)

from nws_rounding.utils import format_range

__all__ = [
    # Version
    "__version__",
    # Enums
    "TemperatureUnit",
    "Pipeline",
    # Data classes
    "ASOSSteps",
    "METARSteps",
    "UncertaintyRange",
    "PrintedOutcome",
    "PrintedDistribution",
    # Errors
    "RoundingError",
    "TemperatureDomainError",
    "RoundingConsistencyError",
    "UnreachableDisplayError",
    # Config
    "CityConfig",
    "get_city",
    "list_cities",
    # Engine
    "simulate_asos",
    "simulate_metar",
    "find_range",
    "find_range_from_celsius",
    "find_celsius_range",
    "get_printed_range",
    "CalculatorSettings",
    "calculate",
    "analyze_reading",
    "format_range",
]
