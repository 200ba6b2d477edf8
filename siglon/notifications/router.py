from fastapi import APIRouter, WebSocket, WebSocketDisconnect, Query
from .utils import manager, topic_for_admin, topic_broadcast_all
from siglon.auth.manager import is_admin_token
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.websocket("/ws")
async def ws_notifications(websocket: WebSocket):
    topic = topic_broadcast_all()
    await manager.connect(websocket, topic)
    try:
        while True:
            # Keep connection alive; messages from client are ignored
            await websocket.receive_text()
    except WebSocketDisconnect:
        await manager.disconnect(websocket, topic)


@router.websocket("/ws/admin")
async def ws_notifications_admin(websocket: WebSocket, token: str = Query(...)):
    if not is_admin_token(token, websocket.app.state.settings):
        logger.warning("Rejected admin notification socket with invalid token")
        await websocket.close(code=4001, reason="Invalid token")
        return
    topic = topic_for_admin()
    await manager.connect(websocket, topic)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        await manager.disconnect(websocket, topic)
