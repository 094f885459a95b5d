"""
Unit tests for the catalog

Venue create/update/list, artist profile edits and listings, event listings.
"""

from typing import Any

from fastapi.testclient import TestClient
import pytest

from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.service.marketplace.app.command.create_venue_use_case import CreateVenueUseCase
from src.service.marketplace.app.command.update_artist_profile_use_case import (
    UpdateArtistProfileUseCase,
)
from src.service.marketplace.app.command.update_venue_use_case import UpdateVenueUseCase
from src.service.marketplace.app.query.catalog_query_use_case import (
    ListArtistsUseCase,
    ListEventsUseCase,
    ListVenuesUseCase,
)
from src.service.marketplace.domain.entity.artist_entity import Artist
from src.service.marketplace.domain.entity.venue_entity import Venue
from src.service.marketplace.domain.enum.event_status import EventStatus
from src.service.marketplace.domain.value_object.session import Session
from src.service.marketplace.driving_adapter.http_controller.auth.role_auth import (
    get_current_session,
)
from test.service.marketplace.unit.test_helpers import (
    ARTIST_ID,
    EVENT_ID,
    OUTSIDER_ID,
    VENUE_ID,
    VENUE_OWNER_ID,
    RepositoryMocks,
    artist_session,
    make_artist,
    make_event,
    make_session,
    make_ticket,
    make_venue,
    owner_session,
)


async def _echo_venue(*, venue: Venue) -> Venue:
    return venue


@pytest.mark.unit
class TestCreateVenue:
    @pytest.fixture
    def use_case(self, mocks: RepositoryMocks) -> CreateVenueUseCase:
        async def _create(*, venue: Venue) -> Venue:
            venue.id = VENUE_ID
            return venue

        mocks.venue_command_repo.create.side_effect = _create
        return CreateVenueUseCase(venue_command_repo=mocks.venue_command_repo)

    async def test_create_venue_for_owner(self, use_case: CreateVenueUseCase) -> None:
        venue = await use_case.create(
            owner_id=VENUE_OWNER_ID,
            name='The Blue Room',
            address='1 Harbour St',
            capacity=300,
            amenities=[' bar', 'stage', 'bar'],
        )

        assert venue.id == VENUE_ID
        assert venue.owner_id == VENUE_OWNER_ID
        assert venue.amenities == ['bar', 'stage']
        assert venue.images == []

    @pytest.mark.parametrize('capacity', [0, -10])
    async def test_capacity_must_be_positive(
        self, use_case: CreateVenueUseCase, mocks: RepositoryMocks, capacity: int
    ) -> None:
        with pytest.raises(ValueError, match='capacity'):
            await use_case.create(
                owner_id=VENUE_OWNER_ID,
                name='The Blue Room',
                address='1 Harbour St',
                capacity=capacity,
            )
        mocks.venue_command_repo.create.assert_not_awaited()


@pytest.mark.unit
class TestUpdateVenue:
    @pytest.fixture
    def use_case(self, mocks: RepositoryMocks) -> UpdateVenueUseCase:
        mocks.venue_query_repo.get_by_id.return_value = make_venue()
        mocks.venue_command_repo.update.side_effect = _echo_venue
        return UpdateVenueUseCase(
            venue_query_repo=mocks.venue_query_repo,
            venue_command_repo=mocks.venue_command_repo,
        )

    async def test_partial_update_keeps_unsent_fields(self, use_case: UpdateVenueUseCase) -> None:
        """
        Given: a venue with a name, address, capacity and amenities
        When: the owner sends only a new capacity
        Then: every other field is kept as stored
        """
        venue = await use_case.update(venue_id=VENUE_ID, owner_id=VENUE_OWNER_ID, capacity=450)

        assert venue.capacity == 450
        assert venue.name == 'The Blue Room'
        assert venue.address == '1 Harbour St'
        assert venue.amenities == ['bar', 'stage']

    async def test_only_owner_may_update(
        self, use_case: UpdateVenueUseCase, mocks: RepositoryMocks
    ) -> None:
        with pytest.raises(ForbiddenError):
            await use_case.update(venue_id=VENUE_ID, owner_id=OUTSIDER_ID, name='Taken Over')
        mocks.venue_command_repo.update.assert_not_awaited()

    async def test_update_cannot_zero_capacity(
        self, use_case: UpdateVenueUseCase, mocks: RepositoryMocks
    ) -> None:
        with pytest.raises(ValueError, match='capacity'):
            await use_case.update(venue_id=VENUE_ID, owner_id=VENUE_OWNER_ID, capacity=0)
        mocks.venue_command_repo.update.assert_not_awaited()

    async def test_unknown_venue(
        self, use_case: UpdateVenueUseCase, mocks: RepositoryMocks
    ) -> None:
        mocks.venue_query_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await use_case.update(venue_id=404, owner_id=VENUE_OWNER_ID, name='Nowhere')


@pytest.mark.unit
class TestListVenues:
    @pytest.fixture
    def use_case(self, mocks: RepositoryMocks) -> ListVenuesUseCase:
        mocks.venue_query_repo.list_venues.return_value = [make_venue()]
        return ListVenuesUseCase(venue_query_repo=mocks.venue_query_repo)

    async def test_filters_are_trimmed_and_forwarded(
        self, use_case: ListVenuesUseCase, mocks: RepositoryMocks
    ) -> None:
        venues = await use_case.list_venues(search='  blue ', min_capacity=100, amenity=' bar ')

        assert [v.id for v in venues] == [VENUE_ID]
        mocks.venue_query_repo.list_venues.assert_awaited_once_with(
            search='blue', min_capacity=100, amenity='bar', owner_id=None
        )

    async def test_my_venues_filter_by_owner(
        self, use_case: ListVenuesUseCase, mocks: RepositoryMocks
    ) -> None:
        await use_case.list_venues(owner_id=VENUE_OWNER_ID)

        mocks.venue_query_repo.list_venues.assert_awaited_once_with(
            search=None, min_capacity=None, amenity=None, owner_id=VENUE_OWNER_ID
        )

    async def test_get_unknown_venue(
        self, use_case: ListVenuesUseCase, mocks: RepositoryMocks
    ) -> None:
        mocks.venue_query_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await use_case.get_venue(venue_id=404)


@pytest.mark.unit
class TestUpdateArtistProfile:
    @pytest.fixture
    def use_case(self, mocks: RepositoryMocks) -> UpdateArtistProfileUseCase:
        mocks.artist_repo.get_by_id.return_value = make_artist(
            description='Four-piece indie band', genres=['indie']
        )

        async def _update(*, artist: Artist) -> Artist:
            return artist

        mocks.artist_repo.update.side_effect = _update
        return UpdateArtistProfileUseCase(artist_repo=mocks.artist_repo)

    async def test_genres_normalized_and_description_kept(
        self, use_case: UpdateArtistProfileUseCase
    ) -> None:
        artist = await use_case.update(artist_id=ARTIST_ID, genres=[' Rock', 'indie', 'ROCK', ' '])

        assert artist.genres == ['indie', 'rock']
        assert artist.description == 'Four-piece indie band'

    async def test_empty_video_url_clears_it(self, use_case: UpdateArtistProfileUseCase) -> None:
        artist = await use_case.update(artist_id=ARTIST_ID, introduction_video_url='')

        assert artist.introduction_video_url is None

    async def test_missing_artist_record(
        self, use_case: UpdateArtistProfileUseCase, mocks: RepositoryMocks
    ) -> None:
        mocks.artist_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await use_case.update(artist_id=ARTIST_ID, description='New bio')
        mocks.artist_repo.update.assert_not_awaited()


@pytest.mark.unit
class TestListArtists:
    @pytest.fixture
    def use_case(self, mocks: RepositoryMocks) -> ListArtistsUseCase:
        mocks.artist_repo.list_artists.return_value = [make_artist(genres=['jazz'])]
        return ListArtistsUseCase(artist_repo=mocks.artist_repo)

    async def test_genre_filter_is_normalized(
        self, use_case: ListArtistsUseCase, mocks: RepositoryMocks
    ) -> None:
        artists = await use_case.list_artists(genre=' Jazz ')

        assert [a.id for a in artists] == [ARTIST_ID]
        mocks.artist_repo.list_artists.assert_awaited_once_with(genre='jazz')

    async def test_get_unknown_artist(
        self, use_case: ListArtistsUseCase, mocks: RepositoryMocks
    ) -> None:
        mocks.artist_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await use_case.get_artist(artist_id=404)


@pytest.mark.unit
class TestListEvents:
    @pytest.fixture
    def use_case(self, mocks: RepositoryMocks) -> ListEventsUseCase:
        return ListEventsUseCase(event_query_repo=mocks.event_query_repo)

    async def test_filters_forwarded(
        self, use_case: ListEventsUseCase, mocks: RepositoryMocks
    ) -> None:
        mocks.event_query_repo.list_events.return_value = [make_event()]

        events = await use_case.list_events(status=EventStatus.PUBLISHED, venue_id=VENUE_ID)

        assert [e.id for e in events] == [EVENT_ID]
        mocks.event_query_repo.list_events.assert_awaited_once_with(
            status=EventStatus.PUBLISHED, venue_id=VENUE_ID, artist_id=None
        )

    async def test_event_with_tickets(
        self, use_case: ListEventsUseCase, mocks: RepositoryMocks
    ) -> None:
        mocks.event_query_repo.get_by_id.return_value = make_event()
        mocks.event_query_repo.list_tickets.return_value = [make_ticket(remaining=42)]

        event, tickets = await use_case.get_event_with_tickets(event_id=EVENT_ID)

        assert event.id == EVENT_ID
        assert [t.quantity_remaining for t in tickets] == [42]

    async def test_unknown_event(
        self, use_case: ListEventsUseCase, mocks: RepositoryMocks
    ) -> None:
        mocks.event_query_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await use_case.get_event_with_tickets(event_id=404)
        mocks.event_query_repo.list_tickets.assert_not_awaited()


class TestCatalogRoleGates:
    def _login_as(self, client: TestClient, session: Session) -> None:
        client.app.dependency_overrides[get_current_session] = lambda: session  # type: ignore[attr-defined]

    @pytest.mark.parametrize(
        'session', [make_session(), owner_session()], ids=['audience', 'venue_owner']
    )
    def test_only_artists_update_artist_profile(
        self, client: TestClient, mocks: RepositoryMocks, session: Session
    ) -> None:
        self._login_as(client, session)
        client.app.dependency_overrides[UpdateArtistProfileUseCase.depends] = (  # type: ignore[attr-defined]
            lambda: UpdateArtistProfileUseCase(artist_repo=mocks.artist_repo)
        )

        response = client.patch('/api/artist/me', json={'description': 'Not an artist'})

        assert response.status_code == 403
        mocks.artist_repo.update.assert_not_awaited()

    def test_artist_updates_own_record(self, client: TestClient, mocks: RepositoryMocks) -> None:
        self._login_as(client, artist_session())
        mocks.artist_repo.get_by_id.return_value = make_artist()

        async def _update(*, artist: Artist) -> Artist:
            return artist

        mocks.artist_repo.update.side_effect = _update
        client.app.dependency_overrides[UpdateArtistProfileUseCase.depends] = (  # type: ignore[attr-defined]
            lambda: UpdateArtistProfileUseCase(artist_repo=mocks.artist_repo)
        )

        response = client.patch('/api/artist/me', json={'genres': ['Soul']})

        assert response.status_code == 200
        assert response.json()['genres'] == ['soul']
        mocks.artist_repo.get_by_id.assert_awaited_once_with(artist_id=ARTIST_ID)

    def test_outsider_cannot_patch_venue(self, client: TestClient, mocks: RepositoryMocks) -> None:
        self._login_as(client, owner_session(principal_id=OUTSIDER_ID))
        mocks.venue_query_repo.get_by_id.return_value = make_venue()
        client.app.dependency_overrides[UpdateVenueUseCase.depends] = lambda: UpdateVenueUseCase(  # type: ignore[attr-defined]
            venue_query_repo=mocks.venue_query_repo,
            venue_command_repo=mocks.venue_command_repo,
        )

        response = client.patch(f'/api/venue/{VENUE_ID}', json={'name': 'Taken Over'})

        assert response.status_code == 403
        mocks.venue_command_repo.update.assert_not_awaited()

    @pytest.mark.parametrize('body', [{'capacity': 0}, {'capacity': -5}])
    def test_venue_capacity_rejected_at_the_edge(
        self, client: TestClient, mocks: RepositoryMocks, body: dict[str, Any]
    ) -> None:
        self._login_as(client, owner_session())
        client.app.dependency_overrides[CreateVenueUseCase.depends] = lambda: CreateVenueUseCase(  # type: ignore[attr-defined]
            venue_command_repo=mocks.venue_command_repo
        )

        response = client.post(
            '/api/venue', json={'name': 'The Blue Room', 'address': '1 Harbour St', **body}
        )

        assert response.status_code == 400
        mocks.venue_command_repo.create.assert_not_awaited()
