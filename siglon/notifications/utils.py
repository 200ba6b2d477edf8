import asyncio
import logging
from typing import Dict, Set
from fastapi import WebSocket

logger = logging.getLogger(__name__)


class ConnectionManager:
    """In-memory WebSocket connections grouped by topic."""
    def __init__(self) -> None:
        self._topic_to_connections: Dict[str, Set[WebSocket]] = {}
        self._lock = asyncio.Lock()

    async def connect(self, websocket: WebSocket, topic: str) -> None:
        await websocket.accept()
        async with self._lock:
            self._topic_to_connections.setdefault(topic, set()).add(websocket)

    async def disconnect(self, websocket: WebSocket, topic: str) -> None:
        async with self._lock:
            conns = self._topic_to_connections.get(topic)
            if conns and websocket in conns:
                conns.remove(websocket)
                if not conns:
                    self._topic_to_connections.pop(topic, None)

    def subscriber_count(self, topic: str) -> int:
        return len(self._topic_to_connections.get(topic, ()))

    async def broadcast(self, topic: str, message: dict) -> None:
        # Copy; disconnect() mutates the set
        connections = list(self._topic_to_connections.get(topic, set()))
        for ws in connections:
            try:
                await ws.send_json(message)
            except Exception as e:
                logger.warning(f"Dropping broken connection on {topic}: {e}")
                await self.disconnect(ws, topic)


manager = ConnectionManager()

def topic_for_admin() -> str:
    return "admin"

def topic_broadcast_all() -> str:
    return "broadcast:all"
