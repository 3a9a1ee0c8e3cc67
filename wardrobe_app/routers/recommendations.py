from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..reco import service
from ..schemas import (
    ApiResponse,
    OutfitRecommendation,
    OutfitRecommendationRequest,
    PurchaseRecommendation,
)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


@router.post("/outfit", response_model=ApiResponse[OutfitRecommendation])
def recommend_outfit(req: OutfitRecommendationRequest, db: Session = Depends(get_db)):
    """Pick a top, bottom, outerwear, footwear and up to 3 accessories for an occasion and location."""
    return {"data": service.recommend_outfit(db, req)}


@router.get("/purchase", response_model=ApiResponse[List[PurchaseRecommendation]])
def recommend_purchases(db: Session = Depends(get_db)):
    """Up to 10 purchase suggestions, highest priority first."""
    return {"data": service.recommend_purchases(db)}
