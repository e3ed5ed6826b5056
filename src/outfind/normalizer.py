"""
Vision classifier output -> canonical item classification.

The vision model is told which categories, tags and shoe types exist, but
its answers are advisory: fields go missing, casing drifts, values get
invented, and shoe tags are often wrong. ``normalize_classification`` is the
trust boundary. It never raises and always returns a classification that
``ClothingItem`` accepts.

Rules, applied in order:

1. ``category`` is case-folded and must be one of top/bottom/outer/shoes,
   otherwise it falls back to top.
2. ``weatherTags`` falls back to ``{mild}`` when it is missing or not a list.
3. For shoes the tags always come from the shoe type table
   (``SHOE_WEATHER_TAGS``); an unknown shoe type becomes a sneaker.
4. Tags are case-folded and de-duplicated. Unknown tags are dropped and an
   empty result falls back to ``{mild}``.
"""

import json
import re
from typing import Any, Dict, FrozenSet, Mapping, Optional

from core.utils import normalize_string_set, normalize_token
from outfind.models import (
    SHOE_WEATHER_TAGS,
    Category,
    ItemClassification,
    ShoeType,
    WeatherKind,
)

DEFAULT_CATEGORY = Category.TOP
DEFAULT_WEATHER_TAGS: FrozenSet[WeatherKind] = frozenset({WeatherKind.MILD})
DEFAULT_SHOE_TYPE = ShoeType.SNEAKER

_CATEGORIES: Dict[str, Category] = {c.value: c for c in Category}
_WEATHER_KINDS: Dict[str, WeatherKind] = {w.value: w for w in WeatherKind}
_SHOE_TYPES: Dict[str, ShoeType] = {s.value: s for s in ShoeType}
_SHOE_TYPE_ALIASES: Dict[str, ShoeType] = {
    "rainboot": ShoeType.RAIN_BOOT,
}

_TAG_CONTAINERS = (list, tuple, set, frozenset)
_CODE_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)


class ClassifierResponseError(ValueError):
    """Raised when the vision model's reply holds no JSON object."""


# ── Field coercion ─────────────────────────────────────────────────

def _coerce_category(value: Any) -> Category:
    token = normalize_token(value)
    category = _CATEGORIES.get(token) if token else None
    if category is None:
        return DEFAULT_CATEGORY
    return category


def _coerce_shoe_type(value: Any) -> ShoeType:
    token = normalize_token(value)
    if token:
        token = token.replace("-", "_").replace(" ", "_")
        shoe_type = _SHOE_TYPES.get(token) or _SHOE_TYPE_ALIASES.get(token)
        if shoe_type is not None:
            return shoe_type
    return DEFAULT_SHOE_TYPE


def _coerce_weather_tags(value: Any) -> FrozenSet[WeatherKind]:
    if not isinstance(value, _TAG_CONTAINERS):
        return DEFAULT_WEATHER_TAGS

    tags = frozenset(
        _WEATHER_KINDS[token]
        for token in normalize_string_set(value)
        if token in _WEATHER_KINDS
    )
    if not tags:
        return DEFAULT_WEATHER_TAGS
    return tags


# ── Public API ─────────────────────────────────────────────────────

def normalize_classification(raw: Optional[Mapping[str, Any]]) -> ItemClassification:
    """
    Reconcile a raw ``{category?, weatherTags?, shoeType?}`` record.

    Accepts anything; a non-mapping is treated as an empty record.
    """
    record = raw if isinstance(raw, Mapping) else {}

    category = _coerce_category(record.get("category"))

    if category is Category.SHOES:
        shoe_type = _coerce_shoe_type(record.get("shoeType"))
        return ItemClassification(
            category=category,
            weather_tags=SHOE_WEATHER_TAGS[shoe_type],
            shoe_type=shoe_type,
        )

    return ItemClassification(
        category=category,
        weather_tags=_coerce_weather_tags(record.get("weatherTags")),
        shoe_type=None,
    )


def extract_json_object(text: Optional[str]) -> Optional[Dict[str, Any]]:
    """
    Pull the JSON object out of a model reply.

    Strips Markdown code fences and parses everything between the first
    ``{`` and the last ``}``. Returns ``None`` when there is nothing that
    parses to a JSON object.
    """
    if not text or not isinstance(text, str):
        return None

    cleaned = _CODE_FENCE.sub("", text).strip()
    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start == -1 or end == -1 or end < start:
        return None

    try:
        parsed = json.loads(cleaned[start:end + 1])
    except json.JSONDecodeError:
        return None
    return parsed if isinstance(parsed, dict) else None


def parse_classifier_response(text: Optional[str]) -> ItemClassification:
    """
    Parse and normalize a vision model's text reply.

    Raises:
        ClassifierResponseError: If the reply holds no JSON object.
    """
    parsed = extract_json_object(text)
    if parsed is None:
        raise ClassifierResponseError("Vision classifier did not answer with a JSON object")
    return normalize_classification(parsed)
