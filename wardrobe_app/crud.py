"""
Item store: read/write helpers for wardrobe items and collections.

Listing helpers return newest-created items first; the recommender relies
on this order for tie-breaks and accessory truncation.
"""
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from .models import WardrobeCollection, WardrobeItem


def _newest_first(query):
    return query.order_by(WardrobeItem.created_at.desc(), WardrobeItem.id.desc())


def _blank_to_none(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: (None if v == "" else v) for k, v in data.items()}


# =============================================================================
# Wardrobe items
# =============================================================================

def get_item(db: Session, item_id: int) -> Optional[WardrobeItem]:
    return db.get(WardrobeItem, item_id)


def get_all_items(db: Session) -> List[WardrobeItem]:
    """Every wardrobe item, newest first."""
    return _newest_first(db.query(WardrobeItem)).all()


def get_items_by_type(db: Session, cloth_type: str) -> List[WardrobeItem]:
    return _newest_first(
        db.query(WardrobeItem).filter(WardrobeItem.cloth_type == cloth_type)
    ).all()


def get_items_by_occasion(db: Session, occasion: str) -> List[WardrobeItem]:
    """Items whose occasion equals or contains `occasion`, ignoring case."""
    needle = occasion.lower()
    lowered = func.lower(WardrobeItem.occasion)
    return _newest_first(
        db.query(WardrobeItem).filter(
            or_(lowered == needle, lowered.contains(needle, autoescape=True))
        )
    ).all()


def create_item(db: Session, data: Dict[str, Any]) -> WardrobeItem:
    item = WardrobeItem(**_blank_to_none(data))
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def update_item(db: Session, item: WardrobeItem, changes: Dict[str, Any]) -> WardrobeItem:
    for field, value in _blank_to_none(changes).items():
        setattr(item, field, value)
    db.commit()
    db.refresh(item)
    return item


def delete_item(db: Session, item: WardrobeItem) -> None:
    db.delete(item)
    db.commit()


# =============================================================================
# Collections
# =============================================================================

def join_item_ids(item_ids: Optional[Sequence[int]]) -> Optional[str]:
    """Store a list of ids in the '1,2,3' form."""
    if item_ids is None:
        return None
    return ",".join(str(i) for i in item_ids) or None


def get_collection(db: Session, collection_id: int) -> Optional[WardrobeCollection]:
    return db.get(WardrobeCollection, collection_id)


def get_all_collections(db: Session) -> List[WardrobeCollection]:
    return db.query(WardrobeCollection).order_by(
        WardrobeCollection.created_at.desc(), WardrobeCollection.id.desc()
    ).all()


def create_collection(db: Session, data: Dict[str, Any]) -> WardrobeCollection:
    collection = WardrobeCollection(
        name=data["name"],
        description=data.get("description") or None,
        item_ids=join_item_ids(data.get("item_ids")),
    )
    db.add(collection)
    db.commit()
    db.refresh(collection)
    return collection


def update_collection(db: Session, collection: WardrobeCollection, changes: Dict[str, Any]) -> WardrobeCollection:
    for field, value in changes.items():
        if field == "item_ids":
            value = join_item_ids(value)
        setattr(collection, field, value)
    db.commit()
    db.refresh(collection)
    return collection


def delete_collection(db: Session, collection: WardrobeCollection) -> None:
    db.delete(collection)
    db.commit()
