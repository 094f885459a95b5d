from datetime import datetime, timezone
from enum import StrEnum
from typing import Optional

import attrs
import uuid_utils
from uuid_utils import UUID

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger


class BookingStatus(StrEnum):
    CONFIRMED = 'confirmed'


@attrs.define
class Booking:
    """A buyer's purchase of `quantity` units of one Ticket. Immutable once stored."""

    id: UUID
    ticket_id: int
    user_id: int
    quantity: int
    total_amount: int
    status: BookingStatus = BookingStatus.CONFIRMED
    created_at: Optional[datetime] = None

    @staticmethod
    def validate_quantity(quantity: object) -> int:
        # bool is an int subclass; reject it along with floats and strings
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise DomainError('quantity must be an integer')
        if quantity < 1:
            raise DomainError('quantity must be at least 1')
        return quantity

    @classmethod
    @Logger.io
    def create(cls, *, ticket_id: int, user_id: int, quantity: int, unit_price: int) -> 'Booking':
        cls.validate_quantity(quantity)
        return cls(
            id=uuid_utils.uuid7(),
            ticket_id=ticket_id,
            user_id=user_id,
            quantity=quantity,
            total_amount=quantity * unit_price,
            status=BookingStatus.CONFIRMED,
            created_at=datetime.now(timezone.utc),
        )
