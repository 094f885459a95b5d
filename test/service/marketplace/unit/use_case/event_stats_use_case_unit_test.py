import pytest

from src.platform.exception.exceptions import ForbiddenError
from src.service.marketplace.app.query.booking_report_use_case import GetEventStatsUseCase
from test.service.marketplace.unit.test_helpers import (
    EVENT_ID,
    OUTSIDER_ID,
    VENUE_OWNER_ID,
    RepositoryMocks,
    make_event,
    make_venue,
)


@pytest.fixture
def use_case(mocks: RepositoryMocks) -> GetEventStatsUseCase:
    mocks.event_query_repo.get_by_id.return_value = make_event()
    mocks.venue_query_repo.get_by_id.return_value = make_venue()
    mocks.booking_query_repo.get_ticket_stats.return_value = [
        {
            'ticket_id': 1,
            'ticket_type': 'General',
            'price': 2500,
            'quantity_total': 100,
            'quantity_remaining': 60,
            'quantity_booked': 40,
            'revenue': 100000,
            'booking_count': 12,
        },
        {
            'ticket_id': 2,
            'ticket_type': 'VIP',
            'price': 9000,
            'quantity_total': 10,
            'quantity_remaining': 10,
            'quantity_booked': 0,
            'revenue': 0,
            'booking_count': 0,
        },
    ]
    return GetEventStatsUseCase(
        event_query_repo=mocks.event_query_repo,
        venue_query_repo=mocks.venue_query_repo,
        booking_query_repo=mocks.booking_query_repo,
    )


@pytest.mark.unit
class TestEventStats:
    async def test_totals_are_sums_over_ticket_types(self, use_case: GetEventStatsUseCase) -> None:
        stats = await use_case.get_event_stats(event_id=EVENT_ID, owner_id=VENUE_OWNER_ID)

        assert stats['quantity_total'] == 110
        assert stats['quantity_remaining'] == 70
        assert stats['quantity_booked'] == 40
        assert stats['revenue'] == 100000
        assert stats['status'] == 'published'

    async def test_stats_are_owner_only(self, use_case: GetEventStatsUseCase) -> None:
        with pytest.raises(ForbiddenError):
            await use_case.get_event_stats(event_id=EVENT_ID, owner_id=OUTSIDER_ID)
