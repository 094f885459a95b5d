from typing import Any, AsyncContextManager, Callable, Dict, List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_utils import UUID

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.marketplace.driven_adapter.model.booking_model import BookingModel
from src.service.marketplace.driven_adapter.model.event_model import EventModel
from src.service.marketplace.driven_adapter.model.ticket_model import TicketModel


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def list_by_user(self, *, user_id: int) -> List[Dict[str, Any]]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(
                    BookingModel,
                    TicketModel.ticket_type,
                    TicketModel.price,
                    EventModel.id.label('event_id'),
                    EventModel.name.label('event_name'),
                    EventModel.event_date,
                )
                .join(TicketModel, TicketModel.id == BookingModel.ticket_id)
                .join(EventModel, EventModel.id == TicketModel.event_id)
                .where(BookingModel.user_id == user_id)
                .order_by(BookingModel.created_at.desc(), BookingModel.id.desc())
            )

            return [
                {
                    'id': UUID(str(row.BookingModel.id)),
                    'ticket_id': row.BookingModel.ticket_id,
                    'quantity': row.BookingModel.quantity,
                    'total_amount': row.BookingModel.total_amount,
                    'status': row.BookingModel.status,
                    'created_at': row.BookingModel.created_at,
                    'ticket_type': row.ticket_type,
                    'unit_price': row.price,
                    'event_id': row.event_id,
                    'event_name': row.event_name,
                    'event_date': row.event_date,
                }
                for row in result.all()
            ]

    @Logger.io
    async def get_ticket_stats(self, *, event_id: int) -> List[Dict[str, Any]]:
        async with self.session_factory() as session:
            booked = func.coalesce(func.sum(BookingModel.quantity), 0)
            revenue = func.coalesce(func.sum(BookingModel.total_amount), 0)
            result = await session.execute(
                select(
                    TicketModel.id,
                    TicketModel.ticket_type,
                    TicketModel.price,
                    TicketModel.quantity_total,
                    TicketModel.quantity_remaining,
                    booked.label('quantity_booked'),
                    revenue.label('revenue'),
                    func.count(BookingModel.id).label('booking_count'),
                )
                .outerjoin(BookingModel, BookingModel.ticket_id == TicketModel.id)
                .where(TicketModel.event_id == event_id)
                .group_by(TicketModel.id)
                .order_by(TicketModel.price, TicketModel.id)
            )

            return [
                {
                    'ticket_id': row.id,
                    'ticket_type': row.ticket_type,
                    'price': row.price,
                    'quantity_total': row.quantity_total,
                    'quantity_remaining': row.quantity_remaining,
                    'quantity_booked': int(row.quantity_booked),
                    'revenue': int(row.revenue),
                    'booking_count': row.booking_count,
                }
                for row in result.all()
            ]
