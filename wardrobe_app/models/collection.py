"""
Wardrobe collection model.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String, Text

from ..database import Base


class WardrobeCollection(Base):
    """Named group of wardrobe items"""
    __tablename__ = "wardrobe_collections"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    item_ids = Column(Text, nullable=True)  # Comma-separated wardrobe item ids
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
