"""
Wardrobe and weather types for outfit recommendation.

Closed enums replace the free-form strings a vision model or a stored
record may carry. All string coercion happens once, in
``outfind.normalizer``; everything past that boundary works on these types.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional


class WeatherKind(Enum):
    """Weather buckets used for filtering and seeding."""
    COLD = "cold"
    MILD = "mild"
    WARM = "warm"
    RAINY = "rainy"


class Category(Enum):
    """Outfit slots, one item each."""
    TOP = "top"
    BOTTOM = "bottom"
    OUTER = "outer"
    SHOES = "shoes"


class ShoeType(Enum):
    SNEAKER = "sneaker"
    BOOT = "boot"
    SANDAL = "sandal"
    RAIN_BOOT = "rain_boot"


# Fixed weather tags per shoe type. Whatever the vision model guessed for
# shoes is discarded in favour of this table.
SHOE_WEATHER_TAGS: Dict[ShoeType, FrozenSet[WeatherKind]] = {
    ShoeType.SNEAKER: frozenset({WeatherKind.COLD, WeatherKind.MILD, WeatherKind.WARM}),
    ShoeType.BOOT: frozenset({WeatherKind.COLD, WeatherKind.MILD, WeatherKind.RAINY}),
    ShoeType.SANDAL: frozenset({WeatherKind.WARM}),
    ShoeType.RAIN_BOOT: frozenset({WeatherKind.RAINY}),
}


@dataclass(frozen=True)
class WeatherObservation:
    """Current weather at a location, already resolved from provider data."""
    temperature_c: float
    precipitation: bool = False


@dataclass(frozen=True)
class ItemClassification:
    """Canonical classification of one clothing image."""
    category: Category
    weather_tags: FrozenSet[WeatherKind]
    shoe_type: Optional[ShoeType] = None


@dataclass(frozen=True)
class ClothingItem:
    """
    One normalized wardrobe item.

    ``id`` and ``image_ref`` are opaque to the core; the persistence and
    rendering collaborators give them meaning.

    Raises ``ValueError`` on construction when the shoe/tag invariants do
    not hold, so a badly built item never reaches the selector.
    """
    id: str
    image_ref: str
    category: Category
    weather_tags: FrozenSet[WeatherKind]
    shoe_type: Optional[ShoeType] = None

    def __post_init__(self) -> None:
        if not self.weather_tags:
            raise ValueError(f"Item {self.id!r} has no weather tags")
        if self.category is Category.SHOES:
            if self.shoe_type is None:
                raise ValueError(f"Shoes item {self.id!r} has no shoe type")
            expected = SHOE_WEATHER_TAGS[self.shoe_type]
            if frozenset(self.weather_tags) != expected:
                raise ValueError(
                    f"Shoes item {self.id!r} ({self.shoe_type.value}) must be tagged "
                    f"{sorted(k.value for k in expected)}"
                )
        elif self.shoe_type is not None:
            raise ValueError(
                f"Item {self.id!r} is {self.category.value}, shoe type must be empty"
            )

    @classmethod
    def from_classification(
        cls,
        item_id: str,
        image_ref: str,
        classification: ItemClassification,
    ) -> "ClothingItem":
        return cls(
            id=item_id,
            image_ref=image_ref,
            category=classification.category,
            weather_tags=classification.weather_tags,
            shoe_type=classification.shoe_type,
        )


@dataclass(frozen=True)
class Outfit:
    """
    One pick per slot for a location and weather.

    Only TOP and BOTTOM can show up in ``missing_slots``; an outfit without
    outerwear or shoes is still considered wearable.
    """
    top: Optional[ClothingItem] = None
    bottom: Optional[ClothingItem] = None
    outer: Optional[ClothingItem] = None
    shoes: Optional[ClothingItem] = None
    missing_slots: FrozenSet[Category] = field(default_factory=frozenset)

    def slot(self, category: Category) -> Optional[ClothingItem]:
        return getattr(self, category.value)

    @property
    def is_complete(self) -> bool:
        return not self.missing_slots

    def to_dict(self) -> Dict[str, Any]:
        """Plain-JSON view: item id per slot plus sorted missing slot names."""
        view: Dict[str, Any] = {}
        for category in Category:
            item = self.slot(category)
            view[category.value] = item.id if item else None
        view["missing_slots"] = sorted(c.value for c in self.missing_slots)
        return view
