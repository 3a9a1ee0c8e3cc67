"""
Wardrobe item schemas.

Request bodies accept both snake_case and camelCase for the multi-word
fields so older clients keep working.
"""
from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class WardrobeItemBase(BaseModel):
    """Fields shared by create/update payloads and responses"""
    name: Optional[str] = Field(None, description="Display name, e.g. 'Blue Oxford Shirt'")
    cloth_type: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("cloth_type", "clothType"),
        description="Free-text garment type (e.g. shirt, jeans, sneakers)",
    )
    gsm: Optional[int] = Field(None, description="Fabric weight in grams per square metre")
    fabric: Optional[str] = None
    color: Optional[str] = None
    size: Optional[str] = None
    brand: Optional[str] = None
    purchase_date: Optional[str] = Field(
        None, validation_alias=AliasChoices("purchase_date", "purchaseDate")
    )
    purchase_price: Optional[float] = Field(
        None, validation_alias=AliasChoices("purchase_price", "purchasePrice")
    )
    condition: Optional[str] = Field(None, description="excellent, good, fair or poor")
    season: Optional[str] = Field(None, description="spring, summer, fall or winter")
    occasion: Optional[str] = Field(None, description="Occasion tag, e.g. casual, work, party")
    location: Optional[str] = Field(None, description="Location tag, e.g. city, office, beach")
    notes: Optional[str] = None


class WardrobeItemCreate(WardrobeItemBase):
    """Schema for creating a new wardrobe item (name and cloth_type are checked by the router)"""
    pass


class WardrobeItemUpdate(WardrobeItemBase):
    """Schema for partially updating a wardrobe item; only fields sent are applied"""
    pass


class WardrobeItem(BaseModel):
    """Wardrobe item as returned by the API"""
    id: int = Field(..., description="Unique identifier for the item")
    name: str
    cloth_type: str
    gsm: Optional[int] = None
    fabric: Optional[str] = None
    color: Optional[str] = None
    size: Optional[str] = None
    brand: Optional[str] = None
    purchase_date: Optional[str] = None
    purchase_price: Optional[float] = None
    condition: Optional[str] = None
    season: Optional[str] = None
    occasion: Optional[str] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "name": "Blue Jeans",
                "cloth_type": "jeans",
                "color": "blue",
                "condition": "good",
                "occasion": "casual",
                "location": "city",
                "created_at": "2025-01-01T12:00:00",
                "updated_at": "2025-01-01T12:00:00",
            }
        }
