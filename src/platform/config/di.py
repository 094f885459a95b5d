"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import settings
from src.platform.database.db_setting import Database
from src.platform.event.in_memory_broadcaster import InMemoryEventBroadcasterImpl
from src.service.marketplace.driven_adapter.repo.artist_repo_impl import ArtistRepoImpl
from src.service.marketplace.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.event_command_repo_impl import (
    EventCommandRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.event_query_repo_impl import EventQueryRepoImpl
from src.service.marketplace.driven_adapter.repo.message_command_repo_impl import (
    MessageCommandRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.message_query_repo_impl import (
    MessageQueryRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.profile_command_repo_impl import (
    ProfileCommandRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.profile_query_repo_impl import (
    ProfileQueryRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.show_request_command_repo_impl import (
    ShowRequestCommandRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.show_request_query_repo_impl import (
    ShowRequestQueryRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.venue_command_repo_impl import (
    VenueCommandRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.venue_query_repo_impl import VenueQueryRepoImpl
from src.service.marketplace.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.marketplace.driven_adapter.sse.notification_broadcaster_impl import (
    NotificationBroadcasterImpl,
)
from src.service.marketplace.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Database (engines are created lazily per event loop)
    database = providers.Singleton(Database, read_only=False)
    read_database = providers.Singleton(Database, read_only=True)

    # Security
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    jwt_auth = providers.Singleton(JwtAuth)

    # Repositories (stateless - use session_factory per-request)
    profile_command_repo = providers.Singleton(
        ProfileCommandRepoImpl, session_factory=database.provided.session
    )
    profile_query_repo = providers.Singleton(
        ProfileQueryRepoImpl,
        session_factory=database.provided.session,
        password_hasher=password_hasher,
    )
    artist_repo = providers.Singleton(ArtistRepoImpl, session_factory=database.provided.session)
    venue_command_repo = providers.Singleton(
        VenueCommandRepoImpl, session_factory=database.provided.session
    )
    venue_query_repo = providers.Singleton(
        VenueQueryRepoImpl, session_factory=read_database.provided.session
    )
    event_command_repo = providers.Singleton(
        EventCommandRepoImpl, session_factory=database.provided.session
    )
    event_query_repo = providers.Singleton(
        EventQueryRepoImpl, session_factory=database.provided.session
    )
    booking_command_repo = providers.Singleton(
        BookingCommandRepoImpl, session_factory=database.provided.session
    )
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=read_database.provided.session
    )
    show_request_command_repo = providers.Singleton(
        ShowRequestCommandRepoImpl, session_factory=database.provided.session
    )
    show_request_query_repo = providers.Singleton(
        ShowRequestQueryRepoImpl, session_factory=database.provided.session
    )
    message_command_repo = providers.Singleton(
        MessageCommandRepoImpl, session_factory=database.provided.session
    )
    message_query_repo = providers.Singleton(
        MessageQueryRepoImpl, session_factory=database.provided.session
    )

    # Realtime feed (process-local)
    event_broadcaster = providers.Singleton(
        InMemoryEventBroadcasterImpl, max_buffer_size=settings.BROADCAST_BUFFER_SIZE
    )
    notification_broadcaster = providers.Singleton(
        NotificationBroadcasterImpl, event_broadcaster=event_broadcaster
    )


container = Container()
