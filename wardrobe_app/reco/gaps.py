"""
Wardrobe gap analysis driving purchase recommendations.

Three independent passes (essentials, seasonal coverage, worn-out items)
each append candidates; the result is ordered by priority and capped.
"""
from __future__ import annotations

from typing import Dict, List, NamedTuple, Sequence

from ..models import WardrobeItem
from ..schemas.recommendation import Priority, PurchaseRecommendation, SuggestedDetails


class Essential(NamedTuple):
    keyword: str
    category: str
    priority: Priority


ESSENTIALS: Sequence[Essential] = (
    Essential("t-shirt", "tops", "high"),
    Essential("shirt", "tops", "high"),
    Essential("pants", "bottoms", "high"),
    Essential("jeans", "bottoms", "high"),
    Essential("jacket", "outerwear", "medium"),
    Essential("shoes", "footwear", "high"),
)
MIN_ESSENTIAL_COUNT = 2

SEASONS = ("spring", "summer", "fall", "winter")
MIN_SEASONAL_COUNT = 3

PRIORITY_RANK: Dict[str, int] = {"high": 3, "medium": 2, "low": 1}
MAX_RECOMMENDATIONS = 10

ESSENTIAL_DETAILS = SuggestedDetails(
    color="neutral colors (black, white, navy, beige)",
    fabric="cotton or cotton blend",
    season="all-season",
)


def _essentials_pass(items: Sequence[WardrobeItem]) -> List[PurchaseRecommendation]:
    labels = [item.cloth_type.lower() for item in items]
    out = []
    for essential in ESSENTIALS:
        count = sum(1 for label in labels if essential.keyword in label)
        if count < MIN_ESSENTIAL_COUNT:
            out.append(PurchaseRecommendation(
                category=essential.category,
                item_type=essential.keyword,
                reason=f"You have {count} {essential.keyword}(s). Consider adding more for variety.",
                priority=essential.priority,
                suggested_details=ESSENTIAL_DETAILS.model_copy(),
            ))
    return out


def _seasonal_pass(items: Sequence[WardrobeItem]) -> List[PurchaseRecommendation]:
    out = []
    for season in SEASONS:
        count = sum(1 for item in items if item.season and item.season.lower() == season)
        if count < MIN_SEASONAL_COUNT:
            out.append(PurchaseRecommendation(
                category="seasonal",
                item_type=f"{season} clothing",
                reason=f"Limited {season} wardrobe. Consider adding {season}-appropriate items.",
                priority="medium",
                suggested_details=SuggestedDetails(season=season),
            ))
    return out


def _condition_pass(items: Sequence[WardrobeItem]) -> List[PurchaseRecommendation]:
    # dict keeps first-seen order while de-duplicating labels
    worn_types = dict.fromkeys(
        item.cloth_type for item in items if (item.condition or "").lower() == "poor"
    )
    return [
        PurchaseRecommendation(
            category="replacement",
            item_type=cloth_type,
            reason=f"Some {cloth_type} items are in poor condition and may need replacement.",
            priority="low",
        )
        for cloth_type in worn_types
    ]


def recommend_purchases(items: Sequence[WardrobeItem]) -> List[PurchaseRecommendation]:
    """Ranked purchase suggestions (at most MAX_RECOMMENDATIONS) for the given wardrobe."""
    recommendations = _essentials_pass(items) + _seasonal_pass(items) + _condition_pass(items)
    recommendations.sort(key=lambda r: PRIORITY_RANK[r.priority], reverse=True)
    return recommendations[:MAX_RECOMMENDATIONS]
