"""
Keyword-based garment classification.

Membership is tested per category, so one label can belong to several
categories at once (e.g. "hooded jacket top" is both top and outerwear).
"""
from __future__ import annotations

from typing import Dict, Optional, Set, Tuple

TOP = "top"
BOTTOM = "bottom"
OUTERWEAR = "outerwear"
FOOTWEAR = "footwear"
ACCESSORY = "accessory"

CATEGORY_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    TOP: ("shirt", "t-shirt", "blouse", "sweater", "hoodie", "top"),
    BOTTOM: ("pants", "jeans", "trousers", "shorts", "skirt", "bottom"),
    OUTERWEAR: ("jacket", "coat", "blazer", "cardigan", "outerwear"),
    FOOTWEAR: ("shoes", "sneakers", "boots", "sandals", "heels", "footwear"),
    ACCESSORY: ("accessory", "hat", "scarf", "belt", "bag", "watch", "jewelry"),
}

CATEGORIES: Tuple[str, ...] = tuple(CATEGORY_KEYWORDS)


def in_category(cloth_type: Optional[str], category: str) -> bool:
    """True if the garment label contains any keyword of `category` (case-insensitive)."""
    label = (cloth_type or "").lower()
    return any(keyword in label for keyword in CATEGORY_KEYWORDS[category])


def categories_for(cloth_type: Optional[str]) -> Set[str]:
    """All categories the label belongs to; empty when nothing matches."""
    return {category for category in CATEGORIES if in_category(cloth_type, category)}
