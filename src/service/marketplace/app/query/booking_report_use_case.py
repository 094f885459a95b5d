"""
Booking reporting

Derived sums (booked quantity, revenue) are computed only here, from the
stored bookings; the reservation path never reads or maintains them.
"""

from typing import Any, Dict, List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.marketplace.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.marketplace.app.interface.i_venue_query_repo import IVenueQueryRepo


class ListMyBookingsUseCase:
    def __init__(self, *, booking_query_repo: IBookingQueryRepo) -> None:
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo)

    @Logger.io
    async def list_my_bookings(self, *, user_id: int) -> List[Dict[str, Any]]:
        return await self.booking_query_repo.list_by_user(user_id=user_id)


class GetEventStatsUseCase:
    def __init__(
        self,
        *,
        event_query_repo: IEventQueryRepo,
        venue_query_repo: IVenueQueryRepo,
        booking_query_repo: IBookingQueryRepo,
    ) -> None:
        self.event_query_repo = event_query_repo
        self.venue_query_repo = venue_query_repo
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
        venue_query_repo: IVenueQueryRepo = Depends(Provide[Container.venue_query_repo]),
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(
            event_query_repo=event_query_repo,
            venue_query_repo=venue_query_repo,
            booking_query_repo=booking_query_repo,
        )

    @Logger.io
    async def get_event_stats(self, *, event_id: int, owner_id: int) -> Dict[str, Any]:
        event = await self.event_query_repo.get_by_id(event_id=event_id)
        if not event:
            raise NotFoundError('Event not found')

        venue = await self.venue_query_repo.get_by_id(venue_id=event.venue_id)
        if not venue:
            raise NotFoundError('Venue not found')
        venue.ensure_owned_by(owner_id)

        tickets = await self.booking_query_repo.get_ticket_stats(event_id=event_id)
        return {
            'event_id': event_id,
            'event_name': event.name,
            'status': event.status.value,
            'tickets': tickets,
            'quantity_total': sum(t['quantity_total'] for t in tickets),
            'quantity_remaining': sum(t['quantity_remaining'] for t in tickets),
            'quantity_booked': sum(t['quantity_booked'] for t in tickets),
            'revenue': sum(t['revenue'] for t in tickets),
        }
