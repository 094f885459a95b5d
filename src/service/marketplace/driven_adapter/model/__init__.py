"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.marketplace.driven_adapter.model.artist_model import ArtistModel
from src.service.marketplace.driven_adapter.model.booking_model import BookingModel
from src.service.marketplace.driven_adapter.model.event_model import EventModel
from src.service.marketplace.driven_adapter.model.message_model import MessageModel
from src.service.marketplace.driven_adapter.model.profile_model import ProfileModel
from src.service.marketplace.driven_adapter.model.show_request_model import ShowRequestModel
from src.service.marketplace.driven_adapter.model.ticket_model import TicketModel
from src.service.marketplace.driven_adapter.model.venue_model import VenueModel

__all__ = [
    'ArtistModel',
    'BookingModel',
    'EventModel',
    'MessageModel',
    'ProfileModel',
    'ShowRequestModel',
    'TicketModel',
    'VenueModel',
]
