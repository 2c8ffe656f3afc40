"""Configuration module for the NWS rounding engine."""

from nws_rounding.config.cities import (
    CityConfig,
    NYC,
    CITIES,
    DEFAULT_CITY,
    get_city,
    list_cities,
)

from nws_rounding.config.settings import (
    # Operating range
    MIN_DISPLAY_F,
    MAX_DISPLAY_F,
    MIN_DISPLAY_C,
    MAX_DISPLAY_C,
    # Engine parameters
    CANDIDATE_WINDOW,
    DEFAULT_PIPELINE,
    # Display Settings
    DISPLAY_DECIMALS,
    # Logging
    LOG_LEVEL,
    LOG_FORMAT,
)

__all__ = [
    # Cities
    "CityConfig",
    "NYC",
    "CITIES",
    "DEFAULT_CITY",
    "get_city",
    "list_cities",
    # Operating range
    "MIN_DISPLAY_F",
    "MAX_DISPLAY_F",
    "MIN_DISPLAY_C",
    "MAX_DISPLAY_C",
    # Engine parameters
    "CANDIDATE_WINDOW",
    "DEFAULT_PIPELINE",
    # Display Settings
    "DISPLAY_DECIMALS",
    # Logging
    "LOG_LEVEL",
    "LOG_FORMAT",
]
