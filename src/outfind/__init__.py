"""
Weather-aware outfit recommendation core.

Pure, synchronous building blocks: weather bucketing, vision-output
normalization and seeded outfit selection. Networking, image handling,
storage and rendering live with the caller.

Quick start::

    from outfind import (
        OutfitSelector, RerollState, WeatherObservation,
        build_item, classify_weather,
    )

    wardrobe = [build_item("1", "file:///boots.jpg", {"category": "shoes", "shoeType": "boot"})]
    weather = classify_weather(WeatherObservation(temperature_c=11.0, precipitation=True))

    rerolls = RerollState().add("ist")
    outfit = OutfitSelector().select(wardrobe, weather, "ist", rerolls.counter_for("ist"))

    # User taps "shuffle"
    rerolls = rerolls.reroll("ist")
"""

from outfind.models import (
    SHOE_WEATHER_TAGS,
    Category,
    ClothingItem,
    ItemClassification,
    Outfit,
    ShoeType,
    WeatherKind,
    WeatherObservation,
)
from outfind.normalizer import (
    ClassifierResponseError,
    extract_json_object,
    normalize_classification,
    parse_classifier_response,
)
from outfind.reroll import RerollState
from outfind.seeded_random import Mulberry32, derive_index, fnv1a_32
from outfind.selector import OutfitSelector, select_outfit
from outfind.wardrobe import (
    add_item,
    badge_weather,
    build_item,
    count_by_category,
    filter_by_category,
    item_from_record,
    item_to_record,
    remove_item,
    wardrobe_from_records,
    wardrobe_to_records,
)
from outfind.weather import allowed_weather, classify_weather, observation_from_open_meteo

__all__ = [
    "Category",
    "ClothingItem",
    "ItemClassification",
    "Outfit",
    "ShoeType",
    "SHOE_WEATHER_TAGS",
    "WeatherKind",
    "WeatherObservation",
    "ClassifierResponseError",
    "extract_json_object",
    "normalize_classification",
    "parse_classifier_response",
    "RerollState",
    "Mulberry32",
    "derive_index",
    "fnv1a_32",
    "OutfitSelector",
    "select_outfit",
    "add_item",
    "badge_weather",
    "build_item",
    "count_by_category",
    "filter_by_category",
    "item_from_record",
    "item_to_record",
    "remove_item",
    "wardrobe_from_records",
    "wardrobe_to_records",
    "allowed_weather",
    "classify_weather",
    "observation_from_open_meteo",
]
