"""
Wardrobe collection schemas.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator


def _split_ids(value: str) -> List[int]:
    """Parse the '1,2,3' form; any non-integer part is rejected."""
    ids = []
    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            ids.append(int(part))
        except ValueError:
            raise ValueError(f"item_ids must be integers, got {part!r}")
    return ids


class CollectionCreate(BaseModel):
    """Schema for creating a collection (name is checked by the router)"""
    name: Optional[str] = None
    description: Optional[str] = None
    item_ids: Optional[List[int]] = Field(
        None,
        validation_alias=AliasChoices("item_ids", "itemIds"),
        description="Item ids as a list or a comma-separated string",
    )

    @field_validator("item_ids", mode="before")
    @classmethod
    def parse_item_ids(cls, v):
        if isinstance(v, str):
            return _split_ids(v)
        return v


class CollectionUpdate(CollectionCreate):
    """Schema for partially updating a collection"""
    pass


class Collection(BaseModel):
    """Collection as returned by the API"""
    id: int
    name: str
    description: Optional[str] = None
    item_ids: List[int] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

    @field_validator("item_ids", mode="before")
    @classmethod
    def split_item_ids(cls, v):
        """The store keeps ids as '1,2,3'; expose them as a list."""
        if v is None:
            return []
        if isinstance(v, str):
            return _split_ids(v)
        return v
