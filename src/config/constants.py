"""
Application constants and algorithm configuration.

These are values that don't change based on environment but may need
to be tuned or referenced across the codebase.
"""

from dataclasses import dataclass


# =============================================================================
# Weather Classification
# =============================================================================

@dataclass(frozen=True)
class WeatherConfig:
    """Temperature buckets and provider thresholds for weather classification."""

    # Anything strictly below this is cold
    COLD_BELOW_C: float = 15.0

    # Anything at or above this is warm (mild sits in between)
    WARM_FROM_C: float = 25.0

    # Open-Meteo WMO weather codes from drizzle (51) upwards mean precipitation
    PRECIPITATION_WEATHERCODE_MIN: int = 51


# Default weather config instance
WEATHER_CONFIG = WeatherConfig()


# =============================================================================
# Outfit Selection
# =============================================================================

@dataclass(frozen=True)
class SelectionConfig:
    """Configuration for seeded outfit selection."""

    # Joins location, weather, reroll counter and category into a seed key.
    # Changing it changes every recommendation ever shown.
    SEED_SEPARATOR: str = "|"


# Default selection config instance
SELECTION_CONFIG = SelectionConfig()
