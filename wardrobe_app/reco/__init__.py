"""
Rule-based outfit and purchase recommendation.
"""
from .classifier import CATEGORIES, categories_for, in_category
from .gaps import recommend_purchases
from .selector import recommend_outfit

__all__ = ["CATEGORIES", "categories_for", "in_category", "recommend_outfit", "recommend_purchases"]
