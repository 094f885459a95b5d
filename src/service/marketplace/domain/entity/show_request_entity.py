from datetime import datetime, timezone
from enum import StrEnum
from typing import Optional

import attrs

from src.platform.exception.exceptions import ConflictError, DomainError, ForbiddenError
from src.platform.logging.loguru_io import Logger


class ShowRequestStatus(StrEnum):
    PENDING = 'pending'
    ACCEPTED = 'accepted'
    REJECTED = 'rejected'


class RequestInitiator(StrEnum):
    ARTIST = 'artist'
    VENUE = 'venue'


RESPONSE_STATUSES = (ShowRequestStatus.ACCEPTED, ShowRequestStatus.REJECTED)


@attrs.define
class ShowRequest:
    """
    Performance request between one Artist and one Venue

    pending -> accepted | rejected, both terminal. Only the counterpart of
    the initiator responds; `accepted` opens the chat for the artist and
    the venue owner.
    """

    artist_id: int
    venue_id: int
    proposed_date: datetime
    initiator: RequestInitiator = RequestInitiator.ARTIST
    message: str = ''
    status: ShowRequestStatus = ShowRequestStatus.PENDING
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        artist_id: int,
        venue_id: int,
        proposed_date: datetime,
        message: str = '',
        initiator: RequestInitiator = RequestInitiator.ARTIST,
    ) -> 'ShowRequest':
        if proposed_date.tzinfo is None:
            proposed_date = proposed_date.replace(tzinfo=timezone.utc)
        return cls(
            artist_id=artist_id,
            venue_id=venue_id,
            proposed_date=proposed_date,
            initiator=RequestInitiator(initiator),
            message=message.strip(),
            status=ShowRequestStatus.PENDING,
            created_at=datetime.now(timezone.utc),
        )

    @property
    def is_terminal(self) -> bool:
        return self.status != ShowRequestStatus.PENDING

    @property
    def is_accepted(self) -> bool:
        return self.status == ShowRequestStatus.ACCEPTED

    def participant_ids(self, *, venue_owner_id: int) -> tuple[int, int]:
        return (self.artist_id, venue_owner_id)

    def counterpart_of(self, *, participant_id: int, venue_owner_id: int) -> int:
        if participant_id == self.artist_id:
            return venue_owner_id
        if participant_id == venue_owner_id:
            return self.artist_id
        raise ForbiddenError('Only the participants of this request can access it')

    def ensure_can_respond(self, *, responder_id: int, venue_owner_id: int) -> None:
        """The responder must be the non-initiating party"""
        responder = (
            venue_owner_id if self.initiator == RequestInitiator.ARTIST else self.artist_id
        )
        if responder_id != responder:
            raise ForbiddenError('Only the counterpart of the initiator can respond to this request')

    def respond(self, *, new_status: ShowRequestStatus) -> 'ShowRequest':
        if new_status not in RESPONSE_STATUSES:
            raise DomainError('status must be either "accepted" or "rejected"')
        if self.is_terminal:
            raise ConflictError(f'Request is already {self.status.value}')
        return attrs.evolve(self, status=new_status, updated_at=datetime.now(timezone.utc))
