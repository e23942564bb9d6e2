"""
Notification Dispatcher

Architectural Intent:
- Republishes typed domain notifications to one external channel per type
- Thin routing layer over PublishTransportPort: validate, route, wrap, forward
- Implements NotificationHandlerPort; any handler object, this one or a
  replacement, can be checked with
  hebo_notifications.application.validation.validate_notification_handler

Design Decisions:
- All preconditions are checked in __init__; a dispatcher either exists fully
  configured or not at all
- publish() is a plain method returning the transport's awaitable, so an
  unknown notification type fails before any asynchronous work starts while
  transport failures only surface when the caller awaits
- No retry, no wrapping of transport errors, no buffering
- The transport is borrowed; its lifecycle belongs to the caller
- Bound methods carry the instance, so invalid_events_found and event_written
  can be handed out as standalone callbacks
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Awaitable, Union

from hebo_notifications.domain.channel_map import ChannelMap
from hebo_notifications.domain.envelope import Envelope
from hebo_notifications.domain.errors import ConfigurationError
from hebo_notifications.domain.notification_types import NotificationType
from hebo_notifications.domain.ports.transport_port import PublishTransportPort

logger = logging.getLogger(__name__)

_OWNER = "NotificationDispatcher"


class NotificationDispatcher:
    """Routes notifications to channels through a publish transport."""

    def __init__(
        self,
        transport: PublishTransportPort,
        channel_map: Union[ChannelMap, Mapping[str, str]],
    ) -> None:
        if transport is None:
            raise ConfigurationError(f"{_OWNER}: transport required")
        if not callable(getattr(transport, "publish", None)):
            raise ConfigurationError(f"{_OWNER}: transport must provide publish()")

        if not isinstance(channel_map, ChannelMap):
            channel_map = ChannelMap(channel_map, owner=_OWNER)

        self._transport = transport
        self._channel_map = channel_map

    @property
    def transport(self) -> PublishTransportPort:
        return self._transport

    @property
    def channel_map(self) -> ChannelMap:
        return self._channel_map

    def publish(self, notification_type: str, notification: Any) -> Awaitable[Any]:
        """Publish a notification to the channel configured for its type.

        Args:
            notification_type: Key into the channel map
            notification: JSON-serializable notification body

        Returns:
            The transport's awaitable, unmodified

        Raises:
            RoutingError: If no channel is configured for notification_type
            EnvelopeEncodingError: If the notification cannot be serialized
        """
        channel_id = self._channel_map.channel_for(notification_type)
        payload = Envelope(notification_type, notification).to_json()
        logger.debug(
            "Publishing %s to %s",
            notification_type,
            channel_id,
            extra={"notification_type": notification_type, "channel_id": channel_id},
        )
        return self._transport.publish(channel_id, payload)

    def invalid_events_found(self, notification: Any) -> Awaitable[Any]:
        return self.publish(NotificationType.INVALID_EVENTS_FOUND, notification)

    def event_written(self, notification: Any) -> Awaitable[Any]:
        return self.publish(NotificationType.EVENT_WRITTEN, notification)
