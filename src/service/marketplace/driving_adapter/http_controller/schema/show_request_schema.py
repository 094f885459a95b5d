from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.platform.types import UtilsUUID7
from src.service.marketplace.domain.entity.message_entity import MAX_MESSAGE_LENGTH
from src.service.marketplace.domain.entity.show_request_entity import (
    RequestInitiator,
    ShowRequestStatus,
)


class ShowRequestCreateRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'artist_id': 2,
                'venue_id': 1,
                'proposed_date': '2026-11-20T20:00:00Z',
                'message': 'We would love to play a Friday set.',
                'initiator': 'artist',
            }
        }
    )

    artist_id: Optional[int] = Field(
        None, description='Defaults to the caller when the artist initiates'
    )
    venue_id: int
    proposed_date: datetime
    message: str = Field('', max_length=MAX_MESSAGE_LENGTH)
    initiator: RequestInitiator = RequestInitiator.ARTIST


class ShowRequestRespondRequest(BaseModel):
    model_config = ConfigDict(json_schema_extra={'example': {'status': 'accepted'}})

    status: ShowRequestStatus


class ShowRequestResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    artist_id: int
    venue_id: int
    proposed_date: datetime
    initiator: RequestInitiator
    message: str
    status: ShowRequestStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MessageCreateRequest(BaseModel):
    model_config = ConfigDict(json_schema_extra={'example': {'content': 'See you at soundcheck!'}})

    # Length and blank checks happen in the domain so they map to InvalidInput
    content: str


class MessageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UtilsUUID7
    show_request_id: int
    sender_id: int
    receiver_id: int
    content: str
    read: bool
    created_at: Optional[datetime] = None


class UnreadCountResponse(BaseModel):
    unread: int
