"""
OutfitSelector -- seeded, reproducible outfit picks.

Usage::

    from outfind.selector import OutfitSelector

    selector = OutfitSelector()
    outfit = selector.select(wardrobe, WeatherKind.RAINY, "ist", reroll_state.counter_for("ist"))

Each slot is seeded separately with
``location|weather|reroll_counter|category`` so that a reroll can swap the
top and keep the shoes. The same wardrobe, weather, location and counter
always give the same outfit; the caller bumps the counter to get another.
"""

from typing import Dict, List, Optional, Sequence

from config.constants import SELECTION_CONFIG
from outfind.models import Category, ClothingItem, Outfit, WeatherKind
from outfind.seeded_random import derive_index
from outfind.weather import allowed_weather

# Slots whose absence is reported back to the user
ESSENTIAL_SLOTS = (Category.TOP, Category.BOTTOM)


def seed_key(
    location_id: str,
    target_weather: WeatherKind,
    reroll_counter: int,
    category: Category,
) -> str:
    sep = SELECTION_CONFIG.SEED_SEPARATOR
    return sep.join((str(location_id), target_weather.value, str(reroll_counter), category.value))


class OutfitSelector:
    """
    Picks one item per slot from the weather-eligible part of a wardrobe.

    Stateless -- safe to share across threads / reuse across requests.
    """

    def pools(
        self,
        wardrobe: Sequence[ClothingItem],
        target_weather: WeatherKind,
    ) -> Dict[Category, List[ClothingItem]]:
        """Weather-eligible items per category, in wardrobe order."""
        allowed = allowed_weather(target_weather)
        pools: Dict[Category, List[ClothingItem]] = {c: [] for c in Category}
        for item in wardrobe:
            if item.weather_tags & allowed:
                pools[item.category].append(item)
        return pools

    def _pick(
        self,
        pool: List[ClothingItem],
        key: str,
    ) -> Optional[ClothingItem]:
        if not pool:
            return None
        return pool[derive_index(key, len(pool))]

    def select(
        self,
        wardrobe: Sequence[ClothingItem],
        target_weather: WeatherKind,
        location_id: str,
        reroll_counter: int = 0,
    ) -> Outfit:
        """
        Build the outfit for one location.

        Total for any wardrobe: empty pools leave their slot empty, and
        only an empty TOP or BOTTOM is flagged in ``missing_slots``.
        """
        pools = self.pools(wardrobe, target_weather)
        picks = {
            category: self._pick(
                pools[category],
                seed_key(location_id, target_weather, reroll_counter, category),
            )
            for category in Category
        }
        missing = frozenset(c for c in ESSENTIAL_SLOTS if picks[c] is None)

        return Outfit(
            top=picks[Category.TOP],
            bottom=picks[Category.BOTTOM],
            outer=picks[Category.OUTER],
            shoes=picks[Category.SHOES],
            missing_slots=missing,
        )

    def explain(
        self,
        wardrobe: Sequence[ClothingItem],
        target_weather: WeatherKind,
        location_id: str,
        reroll_counter: int = 0,
    ) -> dict:
        """
        Return a breakdown of a selection for debugging / admin views.
        """
        pools = self.pools(wardrobe, target_weather)
        breakdown: dict = {
            "weather": target_weather.value,
            "allowed_weather": sorted(w.value for w in allowed_weather(target_weather)),
            "reroll_counter": reroll_counter,
            "slots": {},
        }
        for category in Category:
            pool = pools[category]
            key = seed_key(location_id, target_weather, reroll_counter, category)
            picked = self._pick(pool, key)
            breakdown["slots"][category.value] = {
                "pool_size": len(pool),
                "seed_key": key,
                "picked_id": picked.id if picked else None,
            }
        return breakdown


_DEFAULT_SELECTOR = OutfitSelector()


def select_outfit(
    wardrobe: Sequence[ClothingItem],
    target_weather: WeatherKind,
    location_id: str,
    reroll_counter: int = 0,
) -> Outfit:
    """Module-level shortcut for :meth:`OutfitSelector.select`."""
    return _DEFAULT_SELECTOR.select(wardrobe, target_weather, location_id, reroll_counter)
