"""
Recommendation facade: validates input, reads the wardrobe once and hands
it to the pure selector/analyzer functions.
"""
from __future__ import annotations

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import crud
from ..core.exceptions import RecommendationError, ValidationError
from ..schemas.recommendation import (
    OutfitRecommendation,
    OutfitRecommendationRequest,
    PurchaseRecommendation,
)
from . import gaps, selector

logger = logging.getLogger(__name__)


def recommend_outfit(db: Session, request: OutfitRecommendationRequest) -> OutfitRecommendation:
    if not request.occasion or not request.location:
        raise ValidationError("Occasion and location are required")

    try:
        items = crud.get_all_items(db)
    except SQLAlchemyError as e:
        logger.error(f"Error generating outfit recommendation: {e}", exc_info=True)
        raise RecommendationError("Failed to generate outfit recommendation") from e

    recommendation = selector.recommend_outfit(items, request)
    logger.info(
        f"Outfit for occasion={request.occasion!r} location={request.location!r} "
        f"season={request.season!r}: {len(items)} items considered, "
        f"{len(recommendation.accessories)} accessories"
    )
    return recommendation


def recommend_purchases(db: Session) -> List[PurchaseRecommendation]:
    try:
        items = crud.get_all_items(db)
    except SQLAlchemyError as e:
        logger.error(f"Error generating purchase recommendations: {e}", exc_info=True)
        raise RecommendationError("Failed to generate purchase recommendations") from e

    recommendations = gaps.recommend_purchases(items)
    logger.info(f"{len(recommendations)} purchase recommendations from {len(items)} items")
    return recommendations
