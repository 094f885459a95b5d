"""
In-memory Event Broadcaster Implementation

Singleton broadcaster distributing notifications (request transitions,
bookings, chat messages, inventory changes) to SSE endpoints.
"""

from typing import Dict, List

from anyio import BrokenResourceError, WouldBlock, create_memory_object_stream
from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream

from src.platform.logging.loguru_io import Logger
from src.platform.metrics.marketplace_metrics import metrics


class InMemoryEventBroadcasterImpl:
    """
    Channel → list of (send_stream, receive_stream) tuples

    Memory Management:
    - Each subscriber stream buffers at most `max_buffer_size` events
    - Drop policy: a full subscriber misses the event (send_nowait raises WouldBlock)
    - Empty channel lists are removed on unsubscribe
    """

    def __init__(self, *, max_buffer_size: int = 10) -> None:
        self._max_buffer_size = max_buffer_size
        self._subscribers: Dict[
            str, List[tuple[MemoryObjectSendStream[dict], MemoryObjectReceiveStream[dict]]]
        ] = {}

    async def subscribe(self, *, channel: str) -> MemoryObjectReceiveStream[dict]:
        send_stream, receive_stream = create_memory_object_stream[dict](
            max_buffer_size=self._max_buffer_size
        )
        self._subscribers.setdefault(channel, []).append((send_stream, receive_stream))

        Logger.base.debug(
            f'📡 [BROADCASTER] Subscribed to {channel} '
            f'(total subscribers: {len(self._subscribers[channel])})'
        )
        return receive_stream

    async def broadcast(self, *, channel: str, event_data: dict) -> int:
        subscribers = self._subscribers.get(channel)
        if not subscribers:
            Logger.base.debug(f'📡 [BROADCASTER] No subscribers for {channel}')
            return 0

        delivered = 0
        dropped = 0
        for send_stream, _ in list(subscribers):
            try:
                send_stream.send_nowait(event_data)
                delivered += 1
            except WouldBlock:
                dropped += 1
                metrics.broadcast_dropped.labels(event_type=event_data.get('event_type', '')).inc()
                Logger.base.warning(
                    f'⚠️ [BROADCASTER] Stream full on {channel}, '
                    f'dropping event (type={event_data.get("event_type")})'
                )
            except BrokenResourceError:
                # Receiver closed without unsubscribing
                dropped += 1

        Logger.base.info(
            f'📡 [BROADCASTER] Broadcast to {channel}: delivered={delivered}, dropped={dropped}'
        )
        return delivered

    async def unsubscribe(self, *, channel: str, stream: MemoryObjectReceiveStream[dict]) -> None:
        subscribers = self._subscribers.get(channel)
        if subscribers is None:
            return

        for i, (send_stream, receive_stream) in enumerate(subscribers):
            if receive_stream is stream:
                await send_stream.aclose()
                await receive_stream.aclose()
                subscribers.pop(i)
                Logger.base.debug(
                    f'📡 [BROADCASTER] Unsubscribed from {channel} (remaining: {len(subscribers)})'
                )
                break

        if not subscribers:
            del self._subscribers[channel]

    def subscriber_count(self, *, channel: str) -> int:
        return len(self._subscribers.get(channel, []))
