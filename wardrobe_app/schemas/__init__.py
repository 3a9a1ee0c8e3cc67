"""
Pydantic schemas for the wardrobe API.

Import all schemas here for easy access.
"""
from .common import ApiResponse, HealthResponse, MessageResponse
from .wardrobe import WardrobeItem, WardrobeItemBase, WardrobeItemCreate, WardrobeItemUpdate
from .collection import Collection, CollectionCreate, CollectionUpdate
from .recommendation import (
    OutfitRecommendation,
    OutfitRecommendationRequest,
    Priority,
    PurchaseRecommendation,
    SuggestedDetails,
)

__all__ = [
    # Common
    "ApiResponse",
    "HealthResponse",
    "MessageResponse",
    # Wardrobe
    "WardrobeItem",
    "WardrobeItemBase",
    "WardrobeItemCreate",
    "WardrobeItemUpdate",
    # Collections
    "Collection",
    "CollectionCreate",
    "CollectionUpdate",
    # Recommendations
    "OutfitRecommendation",
    "OutfitRecommendationRequest",
    "Priority",
    "PurchaseRecommendation",
    "SuggestedDetails",
]
