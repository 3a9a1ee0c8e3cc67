"""
Wardrobe item model.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, Float, Integer, String, Text

from ..database import Base


class WardrobeItem(Base):
    """Wardrobe item model"""
    __tablename__ = "wardrobe_items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    cloth_type = Column(String(100), nullable=False, index=True)  # Free text, e.g. "denim jacket"
    gsm = Column(Integer, nullable=True)  # Fabric weight in grams per square metre
    fabric = Column(String(100), nullable=True)
    color = Column(String(100), nullable=True)
    size = Column(String(50), nullable=True)
    brand = Column(String(100), nullable=True)
    purchase_date = Column(String(50), nullable=True)
    purchase_price = Column(Float, nullable=True)
    condition = Column(String(50), nullable=True)  # excellent / good / fair / poor
    season = Column(String(50), nullable=True, index=True)
    occasion = Column(String(100), nullable=True, index=True)
    location = Column(String(100), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<WardrobeItem id={self.id} name={self.name!r} cloth_type={self.cloth_type!r}>"
