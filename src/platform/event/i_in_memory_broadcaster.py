"""
In-memory Event Broadcaster Interface

Process-local publish/subscribe used as the realtime feed: use cases
publish after a committed state change, SSE endpoints subscribe.
"""

from typing import Protocol

from anyio.streams.memory import MemoryObjectReceiveStream


class IInMemoryEventBroadcaster(Protocol):
    async def subscribe(self, *, channel: str) -> MemoryObjectReceiveStream[dict]:
        """
        Register a new subscriber on a channel

        Returns:
            MemoryObjectReceiveStream that will receive event dictionaries
        """
        ...

    async def broadcast(self, *, channel: str, event_data: dict) -> int:
        """
        Deliver event to every current subscriber of the channel

        Returns:
            Number of subscribers the event was delivered to

        Note:
            - Never blocks: a subscriber whose buffer is full misses the event
            - No subscribers is not an error
        """
        ...

    async def unsubscribe(self, *, channel: str, stream: MemoryObjectReceiveStream[dict]) -> None:
        """Remove the subscriber and close its streams (safe to repeat)"""
        ...

    def subscriber_count(self, *, channel: str) -> int: ...
