"""
Weather bucketing.

``classify_weather`` turns an observation into one of four buckets;
``allowed_weather`` says which item tags are wearable for a bucket.
``observation_from_open_meteo`` adapts the provider's ``current_weather``
block so callers never hand the classifier a half-formed observation.
"""

import math
from numbers import Real
from typing import Any, Dict, FrozenSet, Mapping, Optional

from config.constants import WEATHER_CONFIG
from outfind.models import WeatherKind, WeatherObservation

# Cold and rainy requests admit cooler layering items; warm-only items never
# qualify for them. Mild and warm requests do not admit rainy-tagged items;
# changing that is a product call.
ALLOWED_WEATHER: Dict[WeatherKind, FrozenSet[WeatherKind]] = {
    WeatherKind.MILD: frozenset({WeatherKind.MILD}),
    WeatherKind.WARM: frozenset({WeatherKind.WARM}),
    WeatherKind.COLD: frozenset({WeatherKind.COLD, WeatherKind.MILD}),
    WeatherKind.RAINY: frozenset({WeatherKind.RAINY, WeatherKind.COLD, WeatherKind.MILD}),
}


def classify_weather(observation: WeatherObservation) -> WeatherKind:
    """
    Bucket an observation.

    Precipitation wins over temperature. Otherwise below 15C is cold,
    15C up to (not including) 25C is mild, and 25C or more is warm.
    """
    if observation.precipitation:
        return WeatherKind.RAINY
    if observation.temperature_c < WEATHER_CONFIG.COLD_BELOW_C:
        return WeatherKind.COLD
    if observation.temperature_c < WEATHER_CONFIG.WARM_FROM_C:
        return WeatherKind.MILD
    return WeatherKind.WARM


def allowed_weather(target: WeatherKind) -> FrozenSet[WeatherKind]:
    """Item tags that are wearable when the target weather is ``target``."""
    return ALLOWED_WEATHER[target]


def _finite_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    value = float(value)
    return value if math.isfinite(value) else None


def observation_from_open_meteo(current_weather: Optional[Mapping[str, Any]]) -> WeatherObservation:
    """
    Build an observation from an Open-Meteo ``current_weather`` block.

    A missing or non-numeric temperature reads as 0C. WMO weather codes of
    51 (drizzle) and above count as precipitation; a missing code is clear.
    """
    block = current_weather if isinstance(current_weather, Mapping) else {}

    temperature = _finite_number(block.get("temperature"))
    code = _finite_number(block.get("weathercode"))

    return WeatherObservation(
        temperature_c=temperature if temperature is not None else 0.0,
        precipitation=(code or 0) >= WEATHER_CONFIG.PRECIPITATION_WEATHERCODE_MIN,
    )
