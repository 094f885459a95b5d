import pytest

from src.platform.exception.exceptions import ConflictError, DomainError
from src.service.marketplace.domain.entity.event_entity import Event
from src.service.marketplace.domain.entity.ticket_entity import Ticket
from src.service.marketplace.domain.enum.event_status import EventStatus
from test.service.marketplace.unit.test_helpers import (
    ARTIST_ID,
    NEXT_MONTH,
    VENUE_ID,
    make_event,
    make_ticket,
)


@pytest.mark.unit
class TestEventStatus:
    def test_only_published_event_is_bookable(self) -> None:
        assert make_event(status=EventStatus.PUBLISHED).is_bookable
        for status in (EventStatus.SCHEDULED, EventStatus.CANCELED, EventStatus.COMPLETED):
            event = make_event(status=status)
            assert not event.is_bookable
            with pytest.raises(DomainError, match='not open for booking'):
                event.ensure_bookable()

    @pytest.mark.parametrize(
        'current, target',
        [
            (EventStatus.SCHEDULED, EventStatus.PUBLISHED),
            (EventStatus.SCHEDULED, EventStatus.CANCELED),
            (EventStatus.PUBLISHED, EventStatus.CANCELED),
            (EventStatus.PUBLISHED, EventStatus.COMPLETED),
        ],
    )
    def test_allowed_transitions(self, current: EventStatus, target: EventStatus) -> None:
        assert make_event(status=current).change_status(new_status=target).status == target

    @pytest.mark.parametrize(
        'current, target',
        [
            (EventStatus.CANCELED, EventStatus.PUBLISHED),
            (EventStatus.COMPLETED, EventStatus.PUBLISHED),
            (EventStatus.SCHEDULED, EventStatus.COMPLETED),
            (EventStatus.PUBLISHED, EventStatus.SCHEDULED),
        ],
    )
    def test_rejected_transitions(self, current: EventStatus, target: EventStatus) -> None:
        with pytest.raises(ConflictError, match='Cannot change event status'):
            make_event(status=current).change_status(new_status=target)

    def test_details_of_finished_event_are_frozen(self) -> None:
        with pytest.raises(ConflictError):
            make_event(status=EventStatus.CANCELED).update_details(name='Renamed')

    def test_update_details_ignores_unset_fields(self) -> None:
        event = make_event().update_details(name='Saturday Live')

        assert event.name == 'Saturday Live'
        assert event.duration == 120


@pytest.mark.unit
class TestEventValidation:
    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError, match='name cannot be empty'):
            Event(venue_id=VENUE_ID, artist_id=ARTIST_ID, name='  ', event_date=NEXT_MONTH)

    def test_non_positive_duration_rejected(self) -> None:
        with pytest.raises(ValueError, match='duration'):
            Event(
                venue_id=VENUE_ID,
                artist_id=ARTIST_ID,
                name='Show',
                event_date=NEXT_MONTH,
                duration=0,
            )


@pytest.mark.unit
class TestTicket:
    def test_create_starts_with_full_inventory(self) -> None:
        ticket = Ticket.create(event_id=1, ticket_type=' VIP ', price=9000, quantity_total=50)

        assert ticket.ticket_type == 'VIP'
        assert ticket.quantity_remaining == 50
        assert not ticket.is_sold_out

    def test_remaining_cannot_exceed_total(self) -> None:
        with pytest.raises(ValueError, match='cannot exceed'):
            make_ticket(total=10, remaining=11)

    @pytest.mark.parametrize(
        'kwargs',
        [
            {'price': -1, 'quantity_total': 10},
            {'price': 100, 'quantity_total': 0},
        ],
    )
    def test_invalid_price_or_quantity(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            Ticket.create(event_id=1, ticket_type='General', **kwargs)

    def test_sold_out(self) -> None:
        assert make_ticket(remaining=0).is_sold_out
