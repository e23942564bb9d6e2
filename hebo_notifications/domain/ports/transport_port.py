"""
Publish Transport Port

Architectural Intent:
- The only capability the dispatcher needs from a broadcast transport
- Implementations can be SNS, an in-memory broker, or a test double

Design Decisions:
- Uses Protocol for structural typing (no inheritance needed)
- publish returns an awaitable; success and failure both travel through it
- channel_id is opaque to the caller (an SNS topic ARN, a queue name, ...)
"""

from typing import Any, Awaitable, Protocol, runtime_checkable


@runtime_checkable
class PublishTransportPort(Protocol):
    """Port for publishing a serialized payload to a named channel."""

    def publish(self, channel_id: str, payload: str) -> Awaitable[Any]:
        """Publish a payload to a channel.

        Args:
            channel_id: Transport-specific channel identifier
            payload: Serialized envelope text

        Returns:
            Awaitable resolving to the transport acknowledgment
        """
        ...
