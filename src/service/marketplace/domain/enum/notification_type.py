"""
Notification Type Enum - Domain Value Object

Event types published on the realtime feed after a committed state change.
"""

from enum import StrEnum


class NotificationType(StrEnum):
    REQUEST_CREATED = 'request_created'
    REQUEST_STATUS_CHANGED = 'request_status_changed'
    BOOKING_CREATED = 'booking_created'
    INVENTORY_CHANGED = 'inventory_changed'
    MESSAGE_SENT = 'message_sent'
