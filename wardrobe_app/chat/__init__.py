"""
Room-based WebSocket chat relay.
"""
from .rooms import RoomRegistry
from .router import router

__all__ = ["RoomRegistry", "router"]
