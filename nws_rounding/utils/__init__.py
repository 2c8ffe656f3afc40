"""Utility modules for the NWS rounding engine."""

from nws_rounding.utils.logging import setup_logging, get_logger
from nws_rounding.utils.numeric import format_range, round_half_up

__all__ = ["setup_logging", "get_logger", "format_range", "round_half_up"]
