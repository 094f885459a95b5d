"""
Reserve Tickets Use Case

Flow:
1. Validate quantity (integer >= 1)
2. Ticket must exist and its event must be published
3. Atomic decrement + booking insert in the repository (one statement)
4. After commit: booking_created to the buyer, inventory_changed to the event feed

No retry: every failure is terminal and surfaces as one error.
"""

import time
from typing import Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import (
    CustomBaseError,
    InsufficientInventoryError,
    NotFoundError,
    SoldOutError,
)
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.marketplace_metrics import metrics
from src.service.marketplace.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.marketplace.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.marketplace.app.interface.i_notification_broadcaster import (
    INotificationBroadcaster,
)
from src.service.marketplace.domain.entity.booking_entity import Booking
from src.service.marketplace.domain.enum.notification_type import NotificationType


def _reservation_result(error: CustomBaseError) -> str:
    if isinstance(error, SoldOutError):
        return 'sold_out'
    if isinstance(error, InsufficientInventoryError):
        return 'insufficient'
    if isinstance(error, NotFoundError):
        return 'not_found'
    return 'invalid'


class ReserveTicketsUseCase:
    def __init__(
        self,
        *,
        event_query_repo: IEventQueryRepo,
        booking_command_repo: IBookingCommandRepo,
        notification_broadcaster: INotificationBroadcaster,
    ) -> None:
        self.event_query_repo = event_query_repo
        self.booking_command_repo = booking_command_repo
        self.notification_broadcaster = notification_broadcaster
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
        booking_command_repo: IBookingCommandRepo = Depends(
            Provide[Container.booking_command_repo]
        ),
        notification_broadcaster: INotificationBroadcaster = Depends(
            Provide[Container.notification_broadcaster]
        ),
    ) -> Self:
        return cls(
            event_query_repo=event_query_repo,
            booking_command_repo=booking_command_repo,
            notification_broadcaster=notification_broadcaster,
        )

    @Logger.io
    async def reserve(self, *, ticket_id: int, buyer_id: int, quantity: int) -> Booking:
        start = time.perf_counter()
        with self.tracer.start_as_current_span(
            'use_case.reserve_tickets',
            attributes={'ticket.id': ticket_id, 'buyer.id': buyer_id, 'quantity': str(quantity)},
        ) as span:
            try:
                booking, remaining, event_id = await self._reserve(
                    ticket_id=ticket_id, buyer_id=buyer_id, quantity=quantity
                )
            except CustomBaseError as e:
                metrics.record_reservation(
                    result=_reservation_result(e), duration=time.perf_counter() - start
                )
                span.set_attribute('reservation.result', _reservation_result(e))
                raise

            metrics.record_reservation(
                result='success', duration=time.perf_counter() - start, quantity=booking.quantity
            )
            span.set_attribute('booking.id', str(booking.id))
            span.set_attribute('ticket.quantity_remaining', remaining)

        Logger.base.info(
            f'✅ [RESERVE] Buyer {buyer_id} booked {booking.quantity} x ticket {ticket_id} '
            f'(total={booking.total_amount}, remaining={remaining})'
        )

        await self.notification_broadcaster.notify_user(
            user_id=buyer_id,
            event_type=NotificationType.BOOKING_CREATED,
            payload={**attrs.asdict(booking), 'event_id': event_id},
        )
        await self.notification_broadcaster.publish_inventory(
            event_id=event_id,
            payload={'ticket_id': ticket_id, 'quantity_remaining': remaining},
        )
        return booking

    async def _reserve(
        self, *, ticket_id: int, buyer_id: int, quantity: int
    ) -> tuple[Booking, int, int]:
        Booking.validate_quantity(quantity)

        ticket = await self.event_query_repo.get_ticket(ticket_id=ticket_id)
        if not ticket:
            raise NotFoundError('Ticket not found')

        event = await self.event_query_repo.get_by_id(event_id=ticket.event_id)
        if not event:
            raise NotFoundError('Event not found')
        event.ensure_bookable()

        booking = Booking.create(
            ticket_id=ticket_id, user_id=buyer_id, quantity=quantity, unit_price=ticket.price
        )
        stored, remaining = await self.booking_command_repo.reserve(booking=booking)
        return stored, remaining, event.id or ticket.event_id
