from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from .. import crud
from ..core.exceptions import NotFoundError, ValidationError
from ..database import get_db
from ..schemas import (
    ApiResponse,
    MessageResponse,
    WardrobeItem,
    WardrobeItemCreate,
    WardrobeItemUpdate,
)

router = APIRouter()


def _get_or_404(db: Session, item_id: int):
    item = crud.get_item(db, item_id)
    if item is None:
        raise NotFoundError("Item", item_id)
    return item


@router.get("", response_model=ApiResponse[List[WardrobeItem]])
def get_wardrobe_items(
    db: Session = Depends(get_db),
    cloth_type: Optional[str] = Query(None, description="Filter by garment type (exact match)"),
    occasion: Optional[str] = Query(None, description="Filter by occasion (case-insensitive, partial match)"),
):
    """
    Get wardrobe items, newest first.
    """
    if cloth_type:
        items = crud.get_items_by_type(db, cloth_type)
    elif occasion:
        items = crud.get_items_by_occasion(db, occasion)
    else:
        items = crud.get_all_items(db)
    return {"data": items}


@router.get("/{item_id}", response_model=ApiResponse[WardrobeItem])
def get_wardrobe_item(item_id: int, db: Session = Depends(get_db)):
    """
    Get a specific wardrobe item by ID
    """
    return {"data": _get_or_404(db, item_id)}


@router.post("", response_model=ApiResponse[WardrobeItem], status_code=201)
def create_wardrobe_item(payload: WardrobeItemCreate, db: Session = Depends(get_db)):
    """
    Add a new item to the wardrobe
    """
    if not payload.name or not payload.cloth_type:
        raise ValidationError("Name and cloth_type are required")
    item = crud.create_item(db, payload.model_dump())
    return {"data": item}


@router.put("/{item_id}", response_model=ApiResponse[WardrobeItem])
def update_wardrobe_item(item_id: int, payload: WardrobeItemUpdate, db: Session = Depends(get_db)):
    """
    Update a wardrobe item by ID. Only fields present in the body change.
    """
    item = _get_or_404(db, item_id)
    changes = payload.model_dump(exclude_unset=True)
    for required in ("name", "cloth_type"):
        if required in changes and not changes[required]:
            raise ValidationError(f"{required} cannot be empty", field=required)
    return {"data": crud.update_item(db, item, changes)}


@router.delete("/{item_id}", response_model=MessageResponse)
def delete_wardrobe_item(item_id: int, db: Session = Depends(get_db)):
    """
    Delete a wardrobe item by ID
    """
    crud.delete_item(db, _get_or_404(db, item_id))
    return {"message": "Item deleted successfully"}
