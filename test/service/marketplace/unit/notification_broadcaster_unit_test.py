"""
Unit tests for NotificationBroadcasterImpl

Channel naming, JSON-safe payloads and the SSE relay over a real
in-memory broadcaster.
"""

from datetime import datetime, timezone

from anyio import fail_after, move_on_after
import pytest
import uuid_utils

from src.platform.event.in_memory_broadcaster import InMemoryEventBroadcasterImpl
from src.service.marketplace.domain.enum.notification_type import NotificationType
from src.service.marketplace.driven_adapter.sse.notification_broadcaster_impl import (
    NotificationBroadcasterImpl,
    chat_channel,
    event_channel,
    to_json_safe,
    user_channel,
)


@pytest.mark.unit
class TestChannels:
    def test_channel_names(self) -> None:
        assert user_channel(7) == 'user:7'
        assert chat_channel(3) == 'chat:3'
        assert event_channel(11) == 'event:11'

    def test_payload_made_json_safe(self) -> None:
        booking_id = uuid_utils.uuid7()
        created_at = datetime(2026, 10, 1, 20, 0, tzinfo=timezone.utc)

        safe = to_json_safe(
            {'id': booking_id, 'status': NotificationType.BOOKING_CREATED, 'created_at': created_at}
        )

        assert safe == {
            'id': str(booking_id),
            'status': 'booking_created',
            'created_at': '2026-10-01T20:00:00+00:00',
        }


@pytest.mark.unit
class TestNotificationBroadcaster:
    async def test_notify_user_reaches_only_that_user(
        self,
        notification_broadcaster: NotificationBroadcasterImpl,
    ) -> None:
        mine = await notification_broadcaster.subscribe(channel=user_channel(1))
        other = await notification_broadcaster.subscribe(channel=user_channel(2))

        await notification_broadcaster.notify_user(
            user_id=1, event_type=NotificationType.REQUEST_CREATED, payload={'id': 40}
        )

        with fail_after(1.0):
            received = await mine.receive()
        assert received['event_type'] == 'request_created'
        assert received['id'] == 40
        assert 'published_at' in received

        leaked = None
        with move_on_after(0.1):
            leaked = await other.receive()
        assert leaked is None

    async def test_inventory_feed(self, notification_broadcaster: NotificationBroadcasterImpl) -> None:
        stream = await notification_broadcaster.subscribe(channel=event_channel(20))

        await notification_broadcaster.publish_inventory(
            event_id=20, payload={'ticket_id': 30, 'quantity_remaining': 4}
        )

        with fail_after(1.0):
            received = await stream.receive()
        assert received['event_type'] == 'inventory_changed'
        assert received['quantity_remaining'] == 4

    async def test_no_subscriber_is_not_an_error(
        self, notification_broadcaster: NotificationBroadcasterImpl
    ) -> None:
        await notification_broadcaster.publish_chat_message(request_id=1, payload={'content': 'hi'})

    async def test_unsubscribe_releases_channel(
        self,
        notification_broadcaster: NotificationBroadcasterImpl,
        event_broadcaster: InMemoryEventBroadcasterImpl,
    ) -> None:
        stream = await notification_broadcaster.subscribe(channel=chat_channel(5))
        assert event_broadcaster.subscriber_count(channel=chat_channel(5)) == 1

        await notification_broadcaster.unsubscribe(channel=chat_channel(5), stream=stream)

        assert event_broadcaster.subscriber_count(channel=chat_channel(5)) == 0
