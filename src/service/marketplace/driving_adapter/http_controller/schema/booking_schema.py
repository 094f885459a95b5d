from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from src.platform.types import UtilsUUID7


class BookingCreateRequest(BaseModel):
    model_config = ConfigDict(json_schema_extra={'example': {'ticket_id': 1, 'quantity': 2}})

    ticket_id: int
    # Validated by the use case so a non-integer surfaces as InvalidQuantity
    quantity: Any


class BookingResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            'example': {
                'id': '01234567-89ab-7def-0123-456789abcdef',
                'ticket_id': 1,
                'user_id': 3,
                'quantity': 2,
                'total_amount': 5000,
                'status': 'confirmed',
                'created_at': '2026-10-19T10:30:00Z',
            }
        },
    )

    id: UtilsUUID7
    ticket_id: int
    user_id: int
    quantity: int
    total_amount: int
    status: str
    created_at: datetime


class BookingWithDetailsResponse(BaseModel):
    id: UtilsUUID7
    ticket_id: int
    quantity: int
    total_amount: int
    status: str
    created_at: datetime
    ticket_type: str
    unit_price: int
    event_id: int
    event_name: str
    event_date: datetime
