"""
WebSocket endpoint for the room chat relay.

Frames are JSON, sent as text or as UTF-8 encoded binary:
    -> {"type": "join", "room": "lobby"}
    -> {"type": "chat", "message": "hi"}
    <- {"type": "system" | "error", "message": "..."}
    <- {"type": "chat", "room": "lobby", "message": "hi"}
"""
import logging
from typing import Literal, Optional

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import BaseModel, ValidationError

from .rooms import RoomRegistry

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


class InboundMessage(BaseModel):
    type: str
    room: Optional[str] = None
    message: Optional[str] = None


class OutboundMessage(BaseModel):
    type: Literal["system", "error", "chat"]
    message: str
    room: Optional[str] = None

    def encode(self) -> str:
        return self.model_dump_json(exclude_none=True)


def get_registry(websocket: WebSocket) -> RoomRegistry:
    return websocket.app.state.chat_rooms


async def _reply(websocket: WebSocket, kind: str, message: str) -> None:
    await websocket.send_text(OutboundMessage(type=kind, message=message).encode())


def _frame_text(frame: dict) -> Optional[str]:
    """Text payload of a received frame; binary frames must decode as UTF-8."""
    if frame.get("text") is not None:
        return frame["text"]
    data = frame.get("bytes")
    if data is None:
        return None
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


async def _handle(websocket: WebSocket, registry: RoomRegistry, raw: Optional[str]) -> None:
    if raw is None:
        await _reply(websocket, "error", "Invalid message format")
        return
    try:
        msg = InboundMessage.model_validate_json(raw)
    except ValidationError:
        await _reply(websocket, "error", "Invalid message format")
        return

    if msg.type == "join":
        if not msg.room:
            await _reply(websocket, "error", "Invalid message format")
            return
        await registry.join(websocket, msg.room)
        await _reply(websocket, "system", f"Joined room: {msg.room}")
    elif msg.type == "chat":
        if msg.message is None:
            await _reply(websocket, "error", "Invalid message format")
            return
        room = await registry.room_of(websocket)
        if room is None:
            await _reply(websocket, "error", "Join a room before sending messages")
            return
        payload = OutboundMessage(type="chat", room=room, message=msg.message).encode()
        await registry.broadcast(room, payload)
    else:
        logger.debug(f"Ignoring chat frame with unknown type {msg.type!r}")


@router.websocket("/ws/chat")
async def chat_endpoint(websocket: WebSocket):
    registry = get_registry(websocket)
    await websocket.accept()
    try:
        while True:
            frame = await websocket.receive()
            if frame["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(frame.get("code", 1000))
            await _handle(websocket, registry, _frame_text(frame))
    except WebSocketDisconnect:
        logger.debug("Chat client disconnected")
    finally:
        await registry.leave(websocket)
