from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from .. import crud
from ..core.exceptions import NotFoundError, ValidationError
from ..database import get_db
from ..schemas import ApiResponse, Collection, CollectionCreate, CollectionUpdate, MessageResponse

router = APIRouter()


def _get_or_404(db: Session, collection_id: int):
    collection = crud.get_collection(db, collection_id)
    if collection is None:
        raise NotFoundError("Collection", collection_id)
    return collection


@router.get("", response_model=ApiResponse[List[Collection]])
def get_collections(db: Session = Depends(get_db)):
    return {"data": crud.get_all_collections(db)}


@router.get("/{collection_id}", response_model=ApiResponse[Collection])
def get_collection(collection_id: int, db: Session = Depends(get_db)):
    return {"data": _get_or_404(db, collection_id)}


@router.post("", response_model=ApiResponse[Collection], status_code=201)
def create_collection(payload: CollectionCreate, db: Session = Depends(get_db)):
    """Create a collection; item_ids may be a list or a comma-separated string."""
    if not payload.name:
        raise ValidationError("Name is required", field="name")
    return {"data": crud.create_collection(db, payload.model_dump())}


@router.put("/{collection_id}", response_model=ApiResponse[Collection])
def update_collection(collection_id: int, payload: CollectionUpdate, db: Session = Depends(get_db)):
    collection = _get_or_404(db, collection_id)
    changes = payload.model_dump(exclude_unset=True)
    if "name" in changes and not changes["name"]:
        raise ValidationError("Name cannot be empty", field="name")
    return {"data": crud.update_collection(db, collection, changes)}


@router.delete("/{collection_id}", response_model=MessageResponse)
def delete_collection(collection_id: int, db: Session = Depends(get_db)):
    crud.delete_collection(db, _get_or_404(db, collection_id))
    return {"message": "Collection deleted successfully"}
