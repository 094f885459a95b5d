"""
Unit tests for InMemoryEventBroadcasterImpl

Fan-out per channel, bounded buffers with drop-on-full, and cleanup.
"""

from anyio import fail_after, move_on_after
from anyio.streams.memory import ClosedResourceError
import pytest

from src.platform.event.in_memory_broadcaster import InMemoryEventBroadcasterImpl


@pytest.mark.unit
class TestInMemoryBroadcaster:
    @pytest.fixture
    def broadcaster(self) -> InMemoryEventBroadcasterImpl:
        return InMemoryEventBroadcasterImpl(max_buffer_size=2)

    async def test_broadcast_to_multiple_subscribers(
        self, broadcaster: InMemoryEventBroadcasterImpl
    ) -> None:
        stream1 = await broadcaster.subscribe(channel='event:1')
        stream2 = await broadcaster.subscribe(channel='event:1')

        delivered = await broadcaster.broadcast(channel='event:1', event_data={'n': 1})

        assert delivered == 2
        with fail_after(1.0):
            assert await stream1.receive() == {'n': 1}
            assert await stream2.receive() == {'n': 1}

    async def test_broadcast_to_other_channel(
        self, broadcaster: InMemoryEventBroadcasterImpl
    ) -> None:
        stream = await broadcaster.subscribe(channel='user:1')

        assert await broadcaster.broadcast(channel='user:2', event_data={'n': 1}) == 0

        received = None
        with move_on_after(0.1):
            received = await stream.receive()
        assert received is None

    async def test_full_subscriber_misses_events_without_blocking(
        self, broadcaster: InMemoryEventBroadcasterImpl
    ) -> None:
        """
        Given: a subscriber with a buffer of 2 that is not reading
        When: 3 events are broadcast
        Then: the third is dropped for it and broadcast still returns
        """
        slow = await broadcaster.subscribe(channel='chat:1')

        for n in range(3):
            await broadcaster.broadcast(channel='chat:1', event_data={'n': n})

        with fail_after(1.0):
            assert await slow.receive() == {'n': 0}
            assert await slow.receive() == {'n': 1}
        missed = None
        with move_on_after(0.1):
            missed = await slow.receive()
        assert missed is None

    async def test_unsubscribe_closes_stream(
        self, broadcaster: InMemoryEventBroadcasterImpl
    ) -> None:
        stream = await broadcaster.subscribe(channel='user:1')

        await broadcaster.unsubscribe(channel='user:1', stream=stream)
        await broadcaster.unsubscribe(channel='user:1', stream=stream)

        assert broadcaster.subscriber_count(channel='user:1') == 0
        with pytest.raises(ClosedResourceError):
            await stream.receive()
