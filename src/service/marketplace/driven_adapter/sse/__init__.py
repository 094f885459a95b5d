"""SSE Driven Adapters"""

from src.service.marketplace.driven_adapter.sse.notification_broadcaster_impl import (
    NotificationBroadcasterImpl,
    chat_channel,
    event_channel,
    user_channel,
)

__all__ = ['NotificationBroadcasterImpl', 'chat_channel', 'event_channel', 'user_channel']
