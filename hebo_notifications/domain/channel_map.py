"""
Channel Map

Architectural Intent:
- Immutable routing table from notification type to channel identifier
- Validates the shape of caller-supplied configuration at the boundary so the
  dispatcher can trust it afterwards

Design Decisions:
- Accepts any Mapping but copies it into a read-only MappingProxyType
- Every required notification type must map to a non-empty string
- Extra keys are kept; they stay publishable through the generic publish()
- Validation messages are stable, tests match on them
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from hebo_notifications.domain.errors import ConfigurationError, RoutingError
from hebo_notifications.domain.notification_types import REQUIRED_NOTIFICATION_TYPES


class ChannelMap(Mapping):
    """Read-only mapping of notification type to channel id."""

    def __init__(self, channels: Any, owner: str = "ChannelMap") -> None:
        self._channels = MappingProxyType(
            dict(self.validate(channels, owner=owner))
        )

    @staticmethod
    def validate(channels: Any, owner: str = "ChannelMap") -> Mapping:
        """Check a caller-supplied channel mapping.

        Args:
            channels: Mapping of notification type to channel id
            owner: Prefix used in error messages

        Returns:
            The mapping, unchanged

        Raises:
            ConfigurationError: On the first violated precondition
        """
        if channels is None:
            raise ConfigurationError(f"{owner}: channel_map required")
        if not isinstance(channels, Mapping):
            raise ConfigurationError(f"{owner}: channel_map must be a mapping")

        for notification_type in REQUIRED_NOTIFICATION_TYPES:
            channel_id = channels.get(str(notification_type))
            if not isinstance(channel_id, str) or not channel_id:
                raise ConfigurationError(
                    f"{owner}: no {notification_type} channel"
                )
        return channels

    def channel_for(self, notification_type: str) -> str:
        channel_id = self._channels.get(notification_type)
        if not isinstance(channel_id, str) or not channel_id:
            raise RoutingError(notification_type)
        return channel_id

    def to_dict(self) -> dict[str, str]:
        return dict(self._channels)

    def __getitem__(self, notification_type: str) -> str:
        return self._channels[notification_type]

    def __iter__(self) -> Iterator[str]:
        return iter(self._channels)

    def __len__(self) -> int:
        return len(self._channels)

    def __repr__(self) -> str:
        return f"ChannelMap({self.to_dict()!r})"
