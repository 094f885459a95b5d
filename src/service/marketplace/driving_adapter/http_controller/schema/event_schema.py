from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.service.marketplace.domain.enum.event_status import EventStatus


class TicketTypeRequest(BaseModel):
    ticket_type: str = Field(..., min_length=1, max_length=100)
    price: int = Field(..., ge=0, description='Price in minor currency units')
    quantity_total: int = Field(..., gt=0)


class EventCreateRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'venue_id': 1,
                'artist_id': 2,
                'name': 'Friday Night Live',
                'description': 'Indie showcase',
                'event_date': '2026-11-20T20:00:00Z',
                'duration': 150,
                'tickets': [
                    {'ticket_type': 'General Admission', 'price': 2500, 'quantity_total': 200},
                    {'ticket_type': 'VIP', 'price': 6000, 'quantity_total': 50},
                ],
                'show_request_id': 7,
            }
        }
    )

    venue_id: int
    artist_id: int
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ''
    event_date: datetime
    duration: int = Field(120, gt=0, description='Minutes')
    tickets: List[TicketTypeRequest] = []
    show_request_id: Optional[int] = None


class EventUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    event_date: Optional[datetime] = None
    duration: Optional[int] = Field(None, gt=0)


class EventStatusUpdateRequest(BaseModel):
    model_config = ConfigDict(json_schema_extra={'example': {'status': 'published'}})

    status: EventStatus


class TicketResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    event_id: int
    ticket_type: str
    price: int
    quantity_total: int
    quantity_remaining: int


class EventResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    venue_id: int
    artist_id: int
    name: str
    description: str
    event_date: datetime
    duration: int
    status: EventStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EventWithTicketsResponse(EventResponse):
    tickets: List[TicketResponse] = []


class TicketStatsResponse(BaseModel):
    ticket_id: int
    ticket_type: str
    price: int
    quantity_total: int
    quantity_remaining: int
    quantity_booked: int
    revenue: int
    booking_count: int


class EventStatsResponse(BaseModel):
    event_id: int
    event_name: str
    status: EventStatus
    tickets: List[TicketStatsResponse]
    quantity_total: int
    quantity_remaining: int
    quantity_booked: int
    revenue: int
