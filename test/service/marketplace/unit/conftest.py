"""
Unit test configuration for the marketplace service.

Everything here runs without PostgreSQL: repositories are AsyncMocks or
in-memory fakes, and the realtime feed is a real in-process broadcaster.
"""

import pytest

from src.platform.event.in_memory_broadcaster import InMemoryEventBroadcasterImpl
from src.service.marketplace.driven_adapter.sse.notification_broadcaster_impl import (
    NotificationBroadcasterImpl,
)
from test.service.marketplace.unit.test_helpers import RepositoryMocks


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if '/unit/' in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def mocks() -> RepositoryMocks:
    return RepositoryMocks()


@pytest.fixture
def event_broadcaster() -> InMemoryEventBroadcasterImpl:
    return InMemoryEventBroadcasterImpl(max_buffer_size=10)


@pytest.fixture
def notification_broadcaster(
    event_broadcaster: InMemoryEventBroadcasterImpl,
) -> NotificationBroadcasterImpl:
    return NotificationBroadcasterImpl(event_broadcaster=event_broadcaster)
