"""
Room registry for the chat relay.

The registry owns the room -> connections mapping. Every mutation and every
membership check happens under one asyncio.Lock, so join/leave are atomic
with respect to broadcasts: a connection that leaves while a broadcast is in
flight is skipped for the rest of that broadcast.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Optional, Protocol, Set

logger = logging.getLogger(__name__)


class Connection(Protocol):
    async def send_text(self, data: str) -> None: ...


class RoomRegistry:
    def __init__(self) -> None:
        self._rooms: Dict[str, Set[Connection]] = {}
        self._current: Dict[Connection, str] = {}
        self._lock = asyncio.Lock()

    async def join(self, conn: Connection, room: str) -> Optional[str]:
        """Move `conn` into `room`. Returns the room it left, if any."""
        async with self._lock:
            previous = self._detach(conn)
            self._rooms.setdefault(room, set()).add(conn)
            self._current[conn] = room
        logger.info(f"Connection joined room {room!r} (left {previous!r})")
        return previous

    async def leave(self, conn: Connection) -> Optional[str]:
        """Remove `conn` from its room; empty rooms are dropped."""
        async with self._lock:
            room = self._detach(conn)
        if room is not None:
            logger.info(f"Connection left room {room!r}")
        return room

    async def room_of(self, conn: Connection) -> Optional[str]:
        async with self._lock:
            return self._current.get(conn)

    async def members(self, room: str) -> List[Connection]:
        async with self._lock:
            return list(self._rooms.get(room, ()))

    async def rooms(self) -> Dict[str, int]:
        """Room name -> member count snapshot."""
        async with self._lock:
            return {name: len(conns) for name, conns in self._rooms.items()}

    async def broadcast(self, room: str, payload: str) -> int:
        """Send `payload` to every current member of `room`; returns deliveries.

        A member whose send fails is removed from the registry.
        """
        delivered = 0
        for conn in await self.members(room):
            async with self._lock:
                if conn not in self._rooms.get(room, ()):
                    continue
            try:
                await conn.send_text(payload)
                delivered += 1
            except Exception as e:
                logger.warning(f"Dropping connection from room {room!r} after failed send: {e}")
                await self.leave(conn)
        return delivered

    def _detach(self, conn: Connection) -> Optional[str]:
        # caller holds the lock
        room = self._current.pop(conn, None)
        if room is None:
            return None
        members = self._rooms.get(room)
        if members is not None:
            members.discard(conn)
            if not members:
                del self._rooms[room]
        return room
