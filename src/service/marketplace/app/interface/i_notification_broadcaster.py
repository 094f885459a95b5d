"""
Notification Broadcaster Interface

Use cases publish here after their state change is committed; the
realtime feed (SSE) delivers to whoever is subscribed at that moment.
"""

from typing import Any, Dict, Protocol

from anyio.streams.memory import MemoryObjectReceiveStream


class INotificationBroadcaster(Protocol):
    async def notify_user(self, *, user_id: int, event_type: str, payload: Dict[str, Any]) -> None:
        """Publish on the user's personal channel"""
        ...

    async def publish_chat_message(self, *, request_id: int, payload: Dict[str, Any]) -> None:
        """Publish a new message on the request's chat channel"""
        ...

    async def publish_inventory(self, *, event_id: int, payload: Dict[str, Any]) -> None:
        """Publish a remaining-count change on the event's channel"""
        ...

    async def subscribe(self, *, channel: str) -> MemoryObjectReceiveStream[dict]: ...

    async def unsubscribe(
        self, *, channel: str, stream: MemoryObjectReceiveStream[dict]
    ) -> None: ...
