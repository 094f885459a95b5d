from collections.abc import AsyncIterator

import anyio
import orjson
from sse_starlette.sse import EventSourceResponse

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_notification_broadcaster import (
    INotificationBroadcaster,
)


def channel_event_source(
    *, broadcaster: INotificationBroadcaster, channel: str
) -> EventSourceResponse:
    """
    SSE response relaying every event published on `channel` while connected

    The subscription lives exactly as long as the connection: events
    published before the `connected` frame are not delivered, and there is
    no replay on reconnect.
    """

    async def event_generator() -> AsyncIterator[dict[str, str]]:
        stream = await broadcaster.subscribe(channel=channel)
        Logger.base.info(f'📡 [SSE] Client subscribed to {channel}')
        try:
            yield {'event': 'connected', 'data': orjson.dumps({'channel': channel}).decode()}
            async for event_data in stream:
                yield {
                    'event': event_data.get('event_type', 'message'),
                    'data': orjson.dumps(event_data).decode(),
                }
        except anyio.get_cancelled_exc_class():
            Logger.base.info(f'🔌 [SSE] Client disconnected from {channel}')
            raise
        finally:
            with anyio.CancelScope(shield=True):
                await broadcaster.unsubscribe(channel=channel, stream=stream)

    return EventSourceResponse(event_generator())
