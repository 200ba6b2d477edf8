from typing import Dict
from .utils import manager, topic_for_admin, topic_broadcast_all
from siglon.shared.response import serialize_data
import logging

logger = logging.getLogger(__name__)


async def notify_broadcast(event: str, data: Dict) -> None:
    topic = topic_broadcast_all()
    logger.info(f"Broadcasting {event} to {manager.subscriber_count(topic)} subscribers")
    await manager.broadcast(topic, {"event": event, "data": serialize_data(data)})


async def notify_admin(event: str, data: Dict) -> None:
    topic = topic_for_admin()
    logger.info(f"Sending {event} to {manager.subscriber_count(topic)} admin subscribers")
    await manager.broadcast(topic, {"event": event, "data": serialize_data(data)})
