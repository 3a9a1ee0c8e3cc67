"""
Standalone chat relay server.

    uvicorn wardrobe_app.chat.app:chat_app --port 3001

Serves the relay at both "/" and "/ws/chat".
"""
import logging

from fastapi import FastAPI

from .rooms import RoomRegistry
from .router import chat_endpoint, router

logger = logging.getLogger(__name__)

chat_app = FastAPI(
    title="Chat Relay",
    description="Room-based WebSocket chat relay",
    version="1.0.0",
)
chat_app.state.chat_rooms = RoomRegistry()

chat_app.add_api_websocket_route("/", chat_endpoint)
chat_app.include_router(router)


@chat_app.get("/rooms")
async def list_rooms():
    """Room name -> number of connected clients"""
    return {"success": True, "data": await chat_app.state.chat_rooms.rooms()}
