"""
Booking Command Repository Implementation

Reservation is one statement: the ticket row is decremented only when
enough units remain, and the booking is inserted from the decremented row
in the same CTE. Two buyers racing for the last units serialize on the
ticket row lock, so the loser sees `quantity_remaining >= :quantity` fail
and nothing is inserted for them.
"""

from typing import AsyncContextManager, Callable
import uuid

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_utils import UUID

from src.platform.exception.exceptions import (
    InsufficientInventoryError,
    NotFoundError,
    SoldOutError,
)
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.marketplace.domain.entity.booking_entity import Booking, BookingStatus


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def reserve(self, *, booking: Booking) -> tuple[Booking, int]:
        async with self.session_factory() as session:
            result = await session.execute(
                text(
                    """
                    WITH decremented AS (
                        UPDATE ticket
                        SET quantity_remaining = quantity_remaining - :quantity
                        WHERE id = :ticket_id
                          AND quantity_remaining >= :quantity
                        RETURNING id, price, quantity_remaining
                    ),
                    inserted AS (
                        INSERT INTO booking (id, ticket_id, user_id, quantity, total_amount, status)
                        SELECT CAST(:booking_id AS uuid), d.id, CAST(:user_id AS integer),
                               CAST(:quantity AS integer), d.price * CAST(:quantity AS integer),
                               CAST(:status AS varchar)
                        FROM decremented d
                        RETURNING id, ticket_id, user_id, quantity, total_amount, status, created_at
                    )
                    SELECT i.id, i.ticket_id, i.user_id, i.quantity, i.total_amount,
                           i.status, i.created_at, d.quantity_remaining
                    FROM inserted i
                    JOIN decremented d ON d.id = i.ticket_id
                    """
                ),
                {
                    'booking_id': uuid.UUID(str(booking.id)),
                    'ticket_id': booking.ticket_id,
                    'user_id': booking.user_id,
                    'quantity': booking.quantity,
                    'status': booking.status.value,
                },
            )
            row = result.mappings().one_or_none()

            if row is None:
                await session.rollback()
                remaining = await session.scalar(
                    text('SELECT quantity_remaining FROM ticket WHERE id = :ticket_id'),
                    {'ticket_id': booking.ticket_id},
                )
                if remaining is None:
                    raise NotFoundError('Ticket not found')
                if remaining == 0:
                    raise SoldOutError()
                raise InsufficientInventoryError(
                    f'Only {remaining} tickets remaining, requested {booking.quantity}'
                )

            await session.commit()

            Logger.base.info(
                f'🎟️ [RESERVE] Booking {row["id"]}: {row["quantity"]} x ticket {row["ticket_id"]} '
                f'({row["quantity_remaining"]} remaining)'
            )
            return (
                Booking(
                    id=UUID(str(row['id'])),
                    ticket_id=row['ticket_id'],
                    user_id=row['user_id'],
                    quantity=row['quantity'],
                    total_amount=row['total_amount'],
                    status=BookingStatus(row['status']),
                    created_at=row['created_at'],
                ),
                row['quantity_remaining'],
            )
