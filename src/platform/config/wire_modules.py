"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.marketplace.app.command import (
    create_event_with_tickets_use_case,
    create_show_request_use_case,
    create_venue_use_case,
    ensure_artist_profile_use_case,
    reserve_tickets_use_case,
    respond_to_show_request_use_case,
    review_venue_owner_use_case,
    send_message_use_case,
    sign_up_use_case,
    update_artist_profile_use_case,
    update_event_use_case,
    update_profile_use_case,
    update_venue_use_case,
)
from src.service.marketplace.app.query import (
    booking_report_use_case,
    catalog_query_use_case,
    get_chat_thread_use_case,
    list_show_requests_use_case,
    list_venue_owners_use_case,
    resolve_session_use_case,
)
from src.service.marketplace.driving_adapter.http_controller import (
    event_controller,
    notification_controller,
    show_request_controller,
    user_controller,
)
from src.service.marketplace.driving_adapter.http_controller.auth import role_auth


WIRE_MODULES: list[ModuleType] = [
    sign_up_use_case,
    update_profile_use_case,
    review_venue_owner_use_case,
    ensure_artist_profile_use_case,
    update_artist_profile_use_case,
    create_venue_use_case,
    update_venue_use_case,
    create_event_with_tickets_use_case,
    update_event_use_case,
    reserve_tickets_use_case,
    create_show_request_use_case,
    respond_to_show_request_use_case,
    send_message_use_case,
    booking_report_use_case,
    catalog_query_use_case,
    get_chat_thread_use_case,
    list_show_requests_use_case,
    list_venue_owners_use_case,
    resolve_session_use_case,
    role_auth,
    user_controller,
    event_controller,
    show_request_controller,
    notification_controller,
]
