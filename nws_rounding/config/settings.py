"""
Global settings and constants for the NWS rounding engine.

Operating bounds, search windows, display precision and logging.
"""

import math
import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


# =============================================================================
# OPERATING RANGE
# =============================================================================

# Whole-degree Fahrenheit displays the engine accepts
MIN_DISPLAY_F = int(os.getenv("MIN_DISPLAY_F", "-50"))
MAX_DISPLAY_F = int(os.getenv("MAX_DISPLAY_F", "150"))

# Whole-degree Celsius values that lie inside the Fahrenheit range
MIN_DISPLAY_C = math.ceil((MIN_DISPLAY_F - 32) * 5 / 9)   # -45 by default
MAX_DISPLAY_C = math.floor((MAX_DISPLAY_F - 32) * 5 / 9)  # 65 by default


# =============================================================================
# ENGINE PARAMETERS
# =============================================================================

# Half-width (whole degrees) of the intermediate-value candidate search
CANDIDATE_WINDOW = int(os.getenv("CANDIDATE_WINDOW", "2"))

# Pipeline used when a caller does not name one
DEFAULT_PIPELINE = os.getenv("DEFAULT_PIPELINE", "asos")


# =============================================================================
# DISPLAY SETTINGS
# =============================================================================

DISPLAY_DECIMALS = int(os.getenv("DISPLAY_DECIMALS", "1"))


# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
