"""
Unit tests for ReserveTicketsUseCase

Covers validation ahead of the repository, error propagation from the
atomic reservation, notifications after success, and the no-oversell
property under concurrency against an in-memory repository.
"""

import asyncio
from typing import Any

import attrs
import pytest

from src.platform.exception.exceptions import (
    DomainError,
    InsufficientInventoryError,
    NotFoundError,
    SoldOutError,
)
from src.service.marketplace.app.command.reserve_tickets_use_case import ReserveTicketsUseCase
from src.service.marketplace.domain.entity.booking_entity import Booking
from src.service.marketplace.domain.enum.event_status import EventStatus
from src.service.marketplace.domain.enum.notification_type import NotificationType
from test.service.marketplace.unit.test_helpers import (
    BUYER_ID,
    EVENT_ID,
    TICKET_ID,
    RepositoryMocks,
    make_event,
    make_ticket,
)


class InMemoryBookingRepo:
    """
    Reservation fake: the asyncio.Lock plays the role of the ticket row lock

    The sleep inside the critical section forces interleaving so a
    check-then-act bug would show up as overselling.
    """

    def __init__(self, *, remaining: int) -> None:
        self.remaining = remaining
        self.bookings: list[Booking] = []
        self._lock = asyncio.Lock()

    async def reserve(self, *, booking: Booking) -> tuple[Booking, int]:
        async with self._lock:
            await asyncio.sleep(0)
            if self.remaining < booking.quantity:
                if self.remaining == 0:
                    raise SoldOutError()
                raise InsufficientInventoryError(f'Only {self.remaining} tickets remaining')
            self.remaining -= booking.quantity
            self.bookings.append(booking)
            return booking, self.remaining


@pytest.fixture
def use_case(mocks: RepositoryMocks) -> ReserveTicketsUseCase:
    mocks.event_query_repo.get_ticket.return_value = make_ticket(price=2500, remaining=10)
    mocks.event_query_repo.get_by_id.return_value = make_event()

    async def _reserve(*, booking: Booking) -> tuple[Booking, int]:
        return booking, 10 - booking.quantity

    mocks.booking_command_repo.reserve.side_effect = _reserve
    return ReserveTicketsUseCase(
        event_query_repo=mocks.event_query_repo,
        booking_command_repo=mocks.booking_command_repo,
        notification_broadcaster=mocks.notification_broadcaster,
    )


@pytest.mark.unit
class TestReserveTickets:
    async def test_reserve_success(
        self, use_case: ReserveTicketsUseCase, mocks: RepositoryMocks
    ) -> None:
        """
        Given: a published event with 10 tickets at 2500
        When: a buyer reserves 3
        Then: a confirmed booking of 7500 is returned and both feeds are told
        """
        booking = await use_case.reserve(ticket_id=TICKET_ID, buyer_id=BUYER_ID, quantity=3)

        assert booking.quantity == 3
        assert booking.total_amount == 7500
        assert booking.user_id == BUYER_ID

        assert mocks.notified_users() == [(BUYER_ID, NotificationType.BOOKING_CREATED)]
        mocks.notification_broadcaster.publish_inventory.assert_awaited_once_with(
            event_id=EVENT_ID, payload={'ticket_id': TICKET_ID, 'quantity_remaining': 7}
        )

    @pytest.mark.parametrize('quantity', [0, -1, 2.5, '3', True])
    async def test_invalid_quantity_never_reaches_repo(
        self, use_case: ReserveTicketsUseCase, mocks: RepositoryMocks, quantity: Any
    ) -> None:
        with pytest.raises(DomainError, match='quantity'):
            await use_case.reserve(ticket_id=TICKET_ID, buyer_id=BUYER_ID, quantity=quantity)

        mocks.booking_command_repo.reserve.assert_not_awaited()
        mocks.notification_broadcaster.notify_user.assert_not_awaited()

    async def test_unknown_ticket(
        self, use_case: ReserveTicketsUseCase, mocks: RepositoryMocks
    ) -> None:
        mocks.event_query_repo.get_ticket.return_value = None

        with pytest.raises(NotFoundError, match='Ticket not found'):
            await use_case.reserve(ticket_id=404, buyer_id=BUYER_ID, quantity=1)

    @pytest.mark.parametrize(
        'status', [EventStatus.SCHEDULED, EventStatus.CANCELED, EventStatus.COMPLETED]
    )
    async def test_event_must_be_published(
        self, use_case: ReserveTicketsUseCase, mocks: RepositoryMocks, status: EventStatus
    ) -> None:
        mocks.event_query_repo.get_by_id.return_value = make_event(status=status)

        with pytest.raises(DomainError, match='not open for booking'):
            await use_case.reserve(ticket_id=TICKET_ID, buyer_id=BUYER_ID, quantity=1)
        mocks.booking_command_repo.reserve.assert_not_awaited()

    @pytest.mark.parametrize(
        'error', [SoldOutError(), InsufficientInventoryError('Only 2 tickets remaining')]
    )
    async def test_inventory_errors_propagate_without_notifications(
        self, use_case: ReserveTicketsUseCase, mocks: RepositoryMocks, error: Exception
    ) -> None:
        mocks.booking_command_repo.reserve.side_effect = error

        with pytest.raises(type(error)):
            await use_case.reserve(ticket_id=TICKET_ID, buyer_id=BUYER_ID, quantity=5)

        mocks.notification_broadcaster.notify_user.assert_not_awaited()
        mocks.notification_broadcaster.publish_inventory.assert_not_awaited()

    async def test_booking_payload_is_the_stored_booking(
        self, use_case: ReserveTicketsUseCase, mocks: RepositoryMocks
    ) -> None:
        booking = await use_case.reserve(ticket_id=TICKET_ID, buyer_id=BUYER_ID, quantity=1)

        payload = mocks.notification_broadcaster.notify_user.await_args.kwargs['payload']
        assert payload == {**attrs.asdict(booking), 'event_id': EVENT_ID}


@pytest.mark.unit
class TestReserveConcurrency:
    @pytest.mark.parametrize('remaining, buyers', [(5, 20), (1, 10), (10, 10)])
    async def test_concurrent_single_reservations_never_oversell(
        self, mocks: RepositoryMocks, remaining: int, buyers: int
    ) -> None:
        """
        Given: R tickets remaining
        When: N buyers each reserve 1 at the same time
        Then: exactly min(N, R) succeed, the rest get an inventory error
        """
        mocks.event_query_repo.get_ticket.return_value = make_ticket(
            total=remaining, remaining=remaining
        )
        mocks.event_query_repo.get_by_id.return_value = make_event()
        repo = InMemoryBookingRepo(remaining=remaining)
        use_case = ReserveTicketsUseCase(
            event_query_repo=mocks.event_query_repo,
            booking_command_repo=repo,  # type: ignore[arg-type]
            notification_broadcaster=mocks.notification_broadcaster,
        )

        results = await asyncio.gather(
            *(
                use_case.reserve(ticket_id=TICKET_ID, buyer_id=buyer, quantity=1)
                for buyer in range(100, 100 + buyers)
            ),
            return_exceptions=True,
        )

        succeeded = [r for r in results if isinstance(r, Booking)]
        failed = [r for r in results if isinstance(r, InsufficientInventoryError)]
        assert len(succeeded) == min(buyers, remaining)
        assert len(failed) == buyers - len(succeeded)
        assert repo.remaining == remaining - len(succeeded)
        assert sum(b.quantity for b in repo.bookings) == len(succeeded)

    async def test_partial_request_fails_whole(self, mocks: RepositoryMocks) -> None:
        mocks.event_query_repo.get_ticket.return_value = make_ticket(total=10, remaining=2)
        mocks.event_query_repo.get_by_id.return_value = make_event()
        repo = InMemoryBookingRepo(remaining=2)
        use_case = ReserveTicketsUseCase(
            event_query_repo=mocks.event_query_repo,
            booking_command_repo=repo,  # type: ignore[arg-type]
            notification_broadcaster=mocks.notification_broadcaster,
        )

        with pytest.raises(InsufficientInventoryError, match='Only 2'):
            await use_case.reserve(ticket_id=TICKET_ID, buyer_id=BUYER_ID, quantity=3)
        assert repo.remaining == 2
        assert repo.bookings == []
