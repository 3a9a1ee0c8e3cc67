from __future__ import annotations

from functools import cmp_to_key
from typing import Dict, List, Optional, Sequence

from ..models import WardrobeItem
from ..schemas.recommendation import OutfitRecommendation, OutfitRecommendationRequest
from .classifier import ACCESSORY, BOTTOM, CATEGORIES, FOOTWEAR, OUTERWEAR, TOP, in_category

CONDITION_RANK: Dict[str, int] = {
    "excellent": 3,
    "good": 2,
    "fair": 1,
    "poor": 0,
}
# Missing or unrecognized conditions rank like "fair"
DEFAULT_CONDITION_RANK = CONDITION_RANK["fair"]

MAX_ACCESSORIES = 3

# Category order used for the reasoning text
REASONING_LABELS = (
    (TOP, "Top"),
    (BOTTOM, "Bottom"),
    (OUTERWEAR, "Outerwear"),
    (FOOTWEAR, "Footwear"),
)


def condition_rank(condition: Optional[str]) -> int:
    return CONDITION_RANK.get((condition or "").lower(), DEFAULT_CONDITION_RANK)


def _loosely_matches(tag: Optional[str], wanted: str) -> bool:
    """Untagged items match anything; otherwise either side may contain the other."""
    if not tag:
        return True
    tag, wanted = tag.lower(), wanted.lower()
    return wanted in tag or tag in wanted


def is_suitable(item: WardrobeItem, request: OutfitRecommendationRequest) -> bool:
    if not _loosely_matches(item.occasion, request.occasion):
        return False
    if not _loosely_matches(item.location, request.location):
        return False
    if request.season and item.season:
        return item.season.lower() == request.season.lower()
    return True


def _compare(a: WardrobeItem, b: WardrobeItem) -> int:
    """Better condition first, then newer. Items without a timestamp tie on recency."""
    a_rank, b_rank = condition_rank(a.condition), condition_rank(b.condition)
    if a_rank != b_rank:
        return b_rank - a_rank
    if a.created_at and b.created_at and a.created_at != b.created_at:
        return -1 if a.created_at > b.created_at else 1
    return 0


def select_best(candidates: Sequence[WardrobeItem]) -> Optional[WardrobeItem]:
    """Best candidate or None. sorted() is stable, so full ties keep store order."""
    if not candidates:
        return None
    return sorted(candidates, key=cmp_to_key(_compare))[0]


def recommend_outfit(
    items: Sequence[WardrobeItem], request: OutfitRecommendationRequest
) -> OutfitRecommendation:
    """Pick one item per category from `items` (store order, newest first).

    Occasion and location must already be present on `request`.
    """
    suitable = [item for item in items if is_suitable(item, request)]
    partitions: Dict[str, List[WardrobeItem]] = {
        category: [item for item in suitable if in_category(item.cloth_type, category)]
        for category in CATEGORIES
    }

    chosen = {category: select_best(partitions[category]) for category, _ in REASONING_LABELS}
    accessories = [
        item.id for item in partitions[ACCESSORY][:MAX_ACCESSORIES] if item.id is not None
    ]

    reasoning = f"Recommended outfit for {request.occasion} at {request.location}."
    for category, label in REASONING_LABELS:
        if chosen[category] is not None:
            reasoning += f" {label}: {chosen[category].name}."
    if accessories:
        reasoning += " Accessories included."

    ids = {category: item.id if item is not None else None for category, item in chosen.items()}
    return OutfitRecommendation(
        top=ids[TOP],
        bottom=ids[BOTTOM],
        outerwear=ids[OUTERWEAR],
        footwear=ids[FOOTWEAR],
        accessories=accessories,
        reasoning=reasoning,
    )
