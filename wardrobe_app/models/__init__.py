"""
Database models for the wardrobe backend.

Import all models here for easy access and to ensure they are registered with SQLAlchemy.
"""
from ..database import Base
from .wardrobe import WardrobeItem
from .collection import WardrobeCollection

__all__ = ["Base", "WardrobeItem", "WardrobeCollection"]
