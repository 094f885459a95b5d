"""Marketplace Domain Enums"""

from src.service.marketplace.domain.enum.event_status import EVENT_STATUS_TRANSITIONS, EventStatus
from src.service.marketplace.domain.enum.notification_type import NotificationType

__all__ = ['EVENT_STATUS_TRANSITIONS', 'EventStatus', 'NotificationType']
