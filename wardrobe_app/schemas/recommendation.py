"""
Outfit and purchase recommendation schemas.
"""
from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, Field

Priority = Literal["high", "medium", "low"]


class OutfitRecommendationRequest(BaseModel):
    """Input for outfit recommendation (occasion and location are checked by the facade)"""
    occasion: Optional[str] = Field(None, description="e.g. casual, work party, wedding")
    location: Optional[str] = Field(None, description="e.g. city, office, beach")
    weather: Optional[str] = None
    season: Optional[str] = Field(None, description="Restricts items tagged with a different season")
    color_preference: Optional[str] = Field(
        None, validation_alias=AliasChoices("color_preference", "colorPreference")
    )


class OutfitRecommendation(BaseModel):
    """One item id per category; a missing id means nothing suitable was found"""
    top: Optional[int] = None
    bottom: Optional[int] = None
    outerwear: Optional[int] = None
    footwear: Optional[int] = None
    accessories: List[int] = Field(default_factory=list, description="Up to 3 accessory ids")
    reasoning: str


class SuggestedDetails(BaseModel):
    color: Optional[str] = None
    fabric: Optional[str] = None
    season: Optional[str] = None


class PurchaseRecommendation(BaseModel):
    """A detected wardrobe gap and what to buy about it"""
    category: str
    item_type: str
    reason: str
    priority: Priority
    suggested_details: Optional[SuggestedDetails] = None
