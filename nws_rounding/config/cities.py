"""
City configurations for the NWS rounding engine.

Each city maps to the NWS station whose report settles its temperature
market, and to the observation type that station publishes.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class CityConfig:
    """Configuration for a supported city."""
    name: str              # Full city name
    code: str              # Short code (e.g., "NYC")
    station_id: str        # NWS station ID (e.g., "KNYC")
    timezone: str          # Timezone string
    observation_type: str = "asos"  # "asos" (5-minute) or "metar" (hourly)
    # NWS Weather Forecast Office for climate reports
    wfo: str = ""          # e.g., "okx" for NYC


# =============================================================================
# CITY DEFINITIONS
# =============================================================================

NYC = CityConfig(
    name="New York City",
    code="NYC",
    station_id="KNYC",
    timezone="America/New_York",
    # Central Park is read through the hourly METAR chain
    observation_type="metar",
    wfo="okx",
)

CHI = CityConfig(
    name="Chicago",
    code="CHI",
    station_id="KMDW",
    timezone="America/Chicago",
    wfo="lot",
)

LAX = CityConfig(
    name="Los Angeles",
    code="LAX",
    station_id="KLAX",
    timezone="America/Los_Angeles",
    wfo="lox",
)

MIA = CityConfig(
    name="Miami",
    code="MIA",
    station_id="KMIA",
    timezone="America/New_York",
    wfo="mfl",
)

DEN = CityConfig(
    name="Denver",
    code="DEN",
    station_id="KDEN",
    timezone="America/Denver",
    wfo="bou",
)

AUS = CityConfig(
    name="Austin",
    code="AUS",
    station_id="KAUS",
    timezone="America/Chicago",
    wfo="ewx",
)

PHI = CityConfig(
    name="Philadelphia",
    code="PHI",
    station_id="KPHL",
    timezone="America/New_York",
    wfo="phi",
)

# =============================================================================
# CITY REGISTRY
# =============================================================================

CITIES: Dict[str, CityConfig] = {
    "NYC": NYC,
    "CHI": CHI,
    "LAX": LAX,
    "MIA": MIA,
    "DEN": DEN,
    "AUS": AUS,
    "PHI": PHI,
}

DEFAULT_CITY = NYC


def get_city(code: str) -> CityConfig:
    """
    Get city configuration by code.

    Args:
        code: City code (e.g., "NYC")

    Returns:
        CityConfig for the requested city

    Raises:
        KeyError: If city code is not found
    """
    code = code.upper()
    if code not in CITIES:
        available = ", ".join(CITIES.keys())
        raise KeyError(f"City '{code}' not found. Available: {available}")
    return CITIES[code]


def list_cities() -> list[str]:
    """Return list of available city codes."""
    return list(CITIES.keys())
