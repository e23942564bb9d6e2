"""
Notification Types

Architectural Intent:
- Closed set of notification type tags understood by subscribers
- The enum value is the literal written into the envelope and used as the
  channel-map key, so both always agree

Design Decisions:
- StrEnum so members compare equal to their wire strings
- REQUIRED_NOTIFICATION_TYPES fixes the order in which the channel map is
  validated
"""

from enum import StrEnum


class NotificationType(StrEnum):
    INVALID_EVENTS_FOUND = "invalidEventsFound"
    EVENT_WRITTEN = "eventWritten"


REQUIRED_NOTIFICATION_TYPES: tuple[NotificationType, ...] = (
    NotificationType.INVALID_EVENTS_FOUND,
    NotificationType.EVENT_WRITTEN,
)
