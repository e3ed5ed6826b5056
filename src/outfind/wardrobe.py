"""
Wardrobe collection helpers.

The wardrobe itself is stored by an outside collaborator as an ordered list
of plain records::

    {"id": "1718000000000", "image": "file:///...jpg", "category": "shoes",
     "weatherTags": ["cold", "mild", "rainy"], "shoeType": "boot"}

Loading a record re-runs the normalizer, so records written by an older
client (or edited by hand) still produce valid items. All list operations
return new lists; nothing here mutates its input.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from core.logging import get_logger
from outfind.models import Category, ClothingItem, WeatherKind
from outfind.normalizer import normalize_classification

logger = get_logger(__name__)

# Precedence for the single weather badge shown on an item card
BADGE_PRECEDENCE = (
    WeatherKind.RAINY,
    WeatherKind.WARM,
    WeatherKind.COLD,
    WeatherKind.MILD,
)


def build_item(item_id: str, image_ref: str, raw: Optional[Mapping[str, Any]]) -> ClothingItem:
    """Normalize raw classifier output and wrap it into a wardrobe item."""
    return ClothingItem.from_classification(item_id, image_ref, normalize_classification(raw))


def add_item(wardrobe: Sequence[ClothingItem], item: ClothingItem) -> List[ClothingItem]:
    """Newest items go first."""
    return [item, *wardrobe]


def remove_item(wardrobe: Sequence[ClothingItem], item_id: str) -> List[ClothingItem]:
    return [item for item in wardrobe if item.id != item_id]


def filter_by_category(
    wardrobe: Sequence[ClothingItem],
    category: Optional[Category],
) -> List[ClothingItem]:
    """Items of one category in wardrobe order; ``None`` keeps everything."""
    if category is None:
        return list(wardrobe)
    return [item for item in wardrobe if item.category is category]


def count_by_category(wardrobe: Sequence[ClothingItem]) -> Dict[str, int]:
    counts = {"all": len(wardrobe)}
    counts.update({c.value: 0 for c in Category})
    for item in wardrobe:
        counts[item.category.value] += 1
    return counts


def badge_weather(item: ClothingItem) -> WeatherKind:
    for kind in BADGE_PRECEDENCE:
        if kind in item.weather_tags:
            return kind
    return WeatherKind.MILD


# ── Persistence records ───────────────────────────────────────────

def item_to_record(item: ClothingItem) -> Dict[str, Any]:
    return {
        "id": item.id,
        "image": item.image_ref,
        "category": item.category.value,
        "weatherTags": sorted(tag.value for tag in item.weather_tags),
        "shoeType": item.shoe_type.value if item.shoe_type else None,
    }


def item_from_record(record: Mapping[str, Any]) -> ClothingItem:
    """
    Load one stored record.

    Raises:
        ValueError: If the record has no id.
    """
    item_id = record.get("id")
    if item_id is None or str(item_id) == "":
        raise ValueError("Wardrobe record has no id")
    image_ref = record.get("image")
    return build_item(str(item_id), "" if image_ref is None else str(image_ref), record)


def wardrobe_from_records(records: Iterable[Any]) -> List[ClothingItem]:
    """Load stored records in order, skipping entries without an id."""
    wardrobe: List[ClothingItem] = []
    for record in records:
        if not isinstance(record, Mapping):
            logger.warning("wardrobe_record_skipped", reason="not_a_mapping")
            continue
        try:
            wardrobe.append(item_from_record(record))
        except ValueError as exc:
            logger.warning("wardrobe_record_skipped", reason=str(exc))
    return wardrobe


def wardrobe_to_records(wardrobe: Sequence[ClothingItem]) -> List[Dict[str, Any]]:
    return [item_to_record(item) for item in wardrobe]
