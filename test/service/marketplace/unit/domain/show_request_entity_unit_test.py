from datetime import datetime

import pytest

from src.platform.exception.exceptions import ConflictError, DomainError, ForbiddenError
from src.service.marketplace.domain.entity.show_request_entity import (
    RequestInitiator,
    ShowRequest,
    ShowRequestStatus,
)
from test.service.marketplace.unit.test_helpers import (
    ARTIST_ID,
    OUTSIDER_ID,
    VENUE_ID,
    VENUE_OWNER_ID,
    make_show_request,
)


@pytest.mark.unit
class TestShowRequestCreate:
    def test_new_request_is_pending(self) -> None:
        """
        Given: an artist proposing a date at a venue
        When: the request is created
        Then: it starts pending with a trimmed message
        """
        request = ShowRequest.create(
            artist_id=ARTIST_ID,
            venue_id=VENUE_ID,
            proposed_date=datetime(2026, 12, 5, 20, 0),
            message='  Can we play?  ',
        )

        assert request.status == ShowRequestStatus.PENDING
        assert request.message == 'Can we play?'
        assert request.proposed_date.tzinfo is not None
        assert not request.is_terminal


@pytest.mark.unit
class TestShowRequestRespond:
    @pytest.mark.parametrize('decision', [ShowRequestStatus.ACCEPTED, ShowRequestStatus.REJECTED])
    def test_pending_request_accepts_decision(self, decision: ShowRequestStatus) -> None:
        request = make_show_request()

        decided = request.respond(new_status=decision)

        assert decided.status == decision
        assert decided.is_terminal
        assert request.status == ShowRequestStatus.PENDING

    @pytest.mark.parametrize('terminal', [ShowRequestStatus.ACCEPTED, ShowRequestStatus.REJECTED])
    def test_terminal_request_cannot_change(self, terminal: ShowRequestStatus) -> None:
        """
        Given: a request that was already decided
        When: any further decision arrives
        Then: Conflict, the stored status stays as it was
        """
        request = make_show_request(status=terminal)

        with pytest.raises(ConflictError, match='already'):
            request.respond(new_status=ShowRequestStatus.ACCEPTED)
        assert request.status == terminal

    def test_pending_is_not_a_valid_decision(self) -> None:
        with pytest.raises(DomainError, match='accepted'):
            make_show_request().respond(new_status=ShowRequestStatus.PENDING)


@pytest.mark.unit
class TestShowRequestParticipants:
    def test_venue_owner_responds_to_artist_initiated_request(self) -> None:
        request = make_show_request(initiator=RequestInitiator.ARTIST)

        request.ensure_can_respond(responder_id=VENUE_OWNER_ID, venue_owner_id=VENUE_OWNER_ID)

        with pytest.raises(ForbiddenError):
            request.ensure_can_respond(responder_id=ARTIST_ID, venue_owner_id=VENUE_OWNER_ID)

    def test_artist_responds_to_venue_initiated_request(self) -> None:
        request = make_show_request(initiator=RequestInitiator.VENUE)

        request.ensure_can_respond(responder_id=ARTIST_ID, venue_owner_id=VENUE_OWNER_ID)

        with pytest.raises(ForbiddenError):
            request.ensure_can_respond(responder_id=VENUE_OWNER_ID, venue_owner_id=VENUE_OWNER_ID)

    def test_counterpart_of_each_participant(self) -> None:
        request = make_show_request()

        assert request.counterpart_of(participant_id=ARTIST_ID, venue_owner_id=VENUE_OWNER_ID) == (
            VENUE_OWNER_ID
        )
        assert request.counterpart_of(
            participant_id=VENUE_OWNER_ID, venue_owner_id=VENUE_OWNER_ID
        ) == ARTIST_ID

    def test_outsider_has_no_counterpart(self) -> None:
        with pytest.raises(ForbiddenError, match='participants'):
            make_show_request().counterpart_of(
                participant_id=OUTSIDER_ID, venue_owner_id=VENUE_OWNER_ID
            )
