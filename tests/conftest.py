"""
Pytest configuration and shared fixtures for the outfit recommender tests.
"""
import os
import sys
from typing import Callable, List, Optional

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(__file__)), "src"))

from outfind.models import ClothingItem  # noqa: E402
from outfind.wardrobe import build_item  # noqa: E402


# ============================================================================
# Fixtures: Test Data Factories
# ============================================================================

@pytest.fixture
def make_item() -> Callable[..., ClothingItem]:
    """Factory building normalized items from vision-style fields."""
    def _make(
        item_id: str,
        category: str,
        tags: Optional[List[str]] = None,
        shoe_type: Optional[str] = None,
    ) -> ClothingItem:
        raw = {"category": category}
        if tags is not None:
            raw["weatherTags"] = tags
        if shoe_type is not None:
            raw["shoeType"] = shoe_type
        return build_item(item_id, f"file:///closet/{item_id}.jpg", raw)
    return _make


@pytest.fixture
def sample_wardrobe(make_item) -> List[ClothingItem]:
    """Mixed wardrobe covering every category and weather bucket."""
    return [
        make_item("hoodie", "top", ["cold", "mild"]),
        make_item("tshirt", "top", ["warm"]),
        make_item("linen-shirt", "top", ["mild"]),
        make_item("jeans", "bottom", ["cold", "mild"]),
        make_item("shorts", "bottom", ["warm"]),
        make_item("coat", "outer", ["cold", "rainy"]),
        make_item("raincoat", "outer", ["rainy"]),
        make_item("sneakers", "shoes", shoe_type="sneaker"),
        make_item("boots", "shoes", shoe_type="boot"),
        make_item("sandals", "shoes", shoe_type="sandal"),
        make_item("wellies", "shoes", shoe_type="rain_boot"),
    ]


@pytest.fixture
def sample_records() -> List[dict]:
    """Stored wardrobe records as the persistence layer hands them over."""
    return [
        {
            "id": "1718000000002",
            "image": "file:///closet/boots.jpg",
            "category": "shoes",
            "weatherTags": ["warm"],
            "shoeType": "boot",
        },
        {
            "id": "1718000000001",
            "image": "file:///closet/jeans.jpg",
            "category": "Bottom",
            "weatherTags": ["Cold", "mild", "MILD"],
            "shoeType": None,
        },
    ]
