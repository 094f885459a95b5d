import pytest

from src.platform.exception.exceptions import ConflictError, DomainError
from src.service.marketplace.domain.entity.booking_entity import Booking, BookingStatus
from src.service.marketplace.domain.entity.message_entity import MAX_MESSAGE_LENGTH, Message
from src.service.marketplace.domain.entity.profile_entity import (
    Profile,
    ProfileRole,
    VerificationStatus,
)
from src.service.marketplace.domain.entity.venue_entity import Venue
from test.service.marketplace.unit.test_helpers import BUYER_ID, TICKET_ID, make_profile


@pytest.mark.unit
class TestProfile:
    def test_venue_owner_starts_pending(self) -> None:
        profile = Profile.create(
            email='owner@example.com', full_name='Owner', role=ProfileRole.VENUE_OWNER
        )

        assert profile.verification_status == VerificationStatus.PENDING
        assert not profile.is_verified_venue_owner

    @pytest.mark.parametrize('role', [ProfileRole.ARTIST, ProfileRole.AUDIENCE])
    def test_other_roles_are_never_reviewed(self, role: ProfileRole) -> None:
        profile = Profile.create(email='a@example.com', full_name='Someone', role=role)

        assert profile.verification_status == VerificationStatus.NONE

    def test_invalid_role_rejected(self) -> None:
        with pytest.raises(DomainError, match='Invalid role'):
            Profile.create(email='a@example.com', full_name='Someone', role='admin')  # type: ignore

    def test_review_decides_pending_owner(self) -> None:
        reviewed = make_profile().review(decision=VerificationStatus.APPROVED)

        assert reviewed.is_verified_venue_owner

    def test_review_is_one_shot(self) -> None:
        """
        Given: a venue owner already approved
        When: reviewed again
        Then: Conflict
        """
        approved = make_profile(verification_status=VerificationStatus.APPROVED)

        with pytest.raises(ConflictError, match='already decided'):
            approved.review(decision=VerificationStatus.REJECTED)

    def test_review_of_non_owner_rejected(self) -> None:
        artist = make_profile(role=ProfileRole.ARTIST, verification_status=VerificationStatus.NONE)

        with pytest.raises(ConflictError, match='Only venue owner'):
            artist.review(decision=VerificationStatus.APPROVED)


@pytest.mark.unit
class TestBooking:
    def test_total_is_quantity_times_unit_price(self) -> None:
        booking = Booking.create(ticket_id=TICKET_ID, user_id=BUYER_ID, quantity=3, unit_price=2500)

        assert booking.total_amount == 7500
        assert booking.status == BookingStatus.CONFIRMED
        assert str(booking.id)[14] == '7'  # UUID7

    @pytest.mark.parametrize('quantity', [0, -2, 1.5, '2', True, None])
    def test_invalid_quantity(self, quantity: object) -> None:
        with pytest.raises(DomainError, match='quantity'):
            Booking.validate_quantity(quantity)


@pytest.mark.unit
class TestMessage:
    def test_blank_content_rejected(self) -> None:
        with pytest.raises(DomainError, match='empty'):
            Message.create(show_request_id=1, sender_id=1, receiver_id=2, content='   ')

    def test_content_length_limit(self) -> None:
        Message.create(
            show_request_id=1, sender_id=1, receiver_id=2, content='x' * MAX_MESSAGE_LENGTH
        )
        with pytest.raises(DomainError, match='exceed'):
            Message.create(
                show_request_id=1,
                sender_id=1,
                receiver_id=2,
                content='x' * (MAX_MESSAGE_LENGTH + 1),
            )


@pytest.mark.unit
class TestVenue:
    def test_amenities_are_trimmed_and_deduplicated(self) -> None:
        venue = Venue(
            owner_id=1, name='Hall', address='Main St', capacity=10, amenities=[' bar', 'bar', '']
        )

        assert venue.amenities == ['bar']

    def test_capacity_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match='capacity'):
            Venue(owner_id=1, name='Hall', address='Main St', capacity=0)
