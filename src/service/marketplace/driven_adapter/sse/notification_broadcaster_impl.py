"""
Notification Broadcaster Implementation

Maps domain notifications onto broadcaster channels:
- user:{profile_id}      personal feed (request/booking/message notifications)
- chat:{show_request_id} new messages of one accepted request
- event:{event_id}       inventory changes of one event

Payloads are converted to JSON-safe dicts here so SSE endpoints can dump
them without knowing entity types.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from anyio.streams.memory import MemoryObjectReceiveStream
import orjson

from src.platform.event.i_in_memory_broadcaster import IInMemoryEventBroadcaster
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.domain.enum.notification_type import NotificationType


def user_channel(user_id: int) -> str:
    return f'user:{user_id}'


def chat_channel(request_id: int) -> str:
    return f'chat:{request_id}'


def event_channel(event_id: int) -> str:
    return f'event:{event_id}'


def to_json_safe(payload: Dict[str, Any]) -> Dict[str, Any]:
    # uuid_utils.UUID and enums fall back to str
    return orjson.loads(orjson.dumps(payload, default=str))


class NotificationBroadcasterImpl:
    def __init__(self, *, event_broadcaster: IInMemoryEventBroadcaster) -> None:
        self.event_broadcaster = event_broadcaster

    async def _publish(self, *, channel: str, event_type: str, payload: Dict[str, Any]) -> int:
        event_data = {
            **to_json_safe(payload),
            'event_type': str(event_type),
            'published_at': datetime.now(timezone.utc).isoformat(),
        }
        return await self.event_broadcaster.broadcast(channel=channel, event_data=event_data)

    async def notify_user(self, *, user_id: int, event_type: str, payload: Dict[str, Any]) -> None:
        delivered = await self._publish(
            channel=user_channel(user_id), event_type=event_type, payload=payload
        )
        Logger.base.debug(f'🔔 [NOTIFY] {event_type} -> user {user_id} (delivered={delivered})')

    async def publish_chat_message(self, *, request_id: int, payload: Dict[str, Any]) -> None:
        await self._publish(
            channel=chat_channel(request_id),
            event_type=NotificationType.MESSAGE_SENT,
            payload=payload,
        )

    async def publish_inventory(self, *, event_id: int, payload: Dict[str, Any]) -> None:
        await self._publish(
            channel=event_channel(event_id),
            event_type=NotificationType.INVENTORY_CHANGED,
            payload=payload,
        )

    async def subscribe(self, *, channel: str) -> MemoryObjectReceiveStream[dict]:
        return await self.event_broadcaster.subscribe(channel=channel)

    async def unsubscribe(self, *, channel: str, stream: MemoryObjectReceiveStream[dict]) -> None:
        await self.event_broadcaster.unsubscribe(channel=channel, stream=stream)
