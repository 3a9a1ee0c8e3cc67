"""Wardrobe management API with rule-based recommendations and a room chat relay."""

__version__ = "1.0.0"
