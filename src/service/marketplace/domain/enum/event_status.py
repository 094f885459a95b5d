"""
Event Status Enum - Domain Value Object

`published` is the only bookable status. `scheduled` is the state an event
is created in, before its owner opens ticket sales.
"""

from enum import StrEnum


class EventStatus(StrEnum):
    SCHEDULED = 'scheduled'
    PUBLISHED = 'published'
    CANCELED = 'canceled'
    COMPLETED = 'completed'


# Allowed owner-driven transitions
EVENT_STATUS_TRANSITIONS: dict[EventStatus, frozenset[EventStatus]] = {
    EventStatus.SCHEDULED: frozenset({EventStatus.PUBLISHED, EventStatus.CANCELED}),
    EventStatus.PUBLISHED: frozenset({EventStatus.CANCELED, EventStatus.COMPLETED}),
    EventStatus.CANCELED: frozenset(),
    EventStatus.COMPLETED: frozenset(),
}

# Statuses whose details may still be edited
EDITABLE_EVENT_STATUSES: frozenset[EventStatus] = frozenset(
    {EventStatus.SCHEDULED, EventStatus.PUBLISHED}
)
