from datetime import datetime
from typing import Optional

import attrs

from src.platform.exception.exceptions import ConflictError, DomainError
from src.service.marketplace.domain.enum.event_status import (
    EDITABLE_EVENT_STATUSES,
    EVENT_STATUS_TRANSITIONS,
    EventStatus,
)


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f'Event {attribute.name} cannot be empty')


def _validate_duration(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise ValueError('Event duration must be a positive number of minutes')


@attrs.define
class Event:
    venue_id: int
    artist_id: int
    name: str = attrs.field(validator=_validate_non_empty_string)
    event_date: datetime
    duration: int = attrs.field(default=120, validator=_validate_duration)  # minutes
    description: str = ''
    status: EventStatus = EventStatus.SCHEDULED
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_bookable(self) -> bool:
        return self.status == EventStatus.PUBLISHED

    def ensure_bookable(self) -> None:
        if not self.is_bookable:
            raise DomainError(f'Event is not open for booking (status: {self.status.value})')

    def update_details(
        self,
        *,
        name: Optional[str] = None,
        description: Optional[str] = None,
        event_date: Optional[datetime] = None,
        duration: Optional[int] = None,
    ) -> 'Event':
        if self.status not in EDITABLE_EVENT_STATUSES:
            raise ConflictError(f'Cannot update a {self.status.value} event')
        changes = {
            key: value
            for key, value in {
                'name': name,
                'description': description,
                'event_date': event_date,
                'duration': duration,
            }.items()
            if value is not None
        }
        return attrs.evolve(self, **changes)

    def change_status(self, *, new_status: EventStatus) -> 'Event':
        if new_status not in EVENT_STATUS_TRANSITIONS[self.status]:
            raise ConflictError(
                f'Cannot change event status from {self.status.value} to {new_status.value}'
            )
        return attrs.evolve(self, status=new_status)
