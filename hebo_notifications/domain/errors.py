"""
Notification Errors

Architectural Intent:
- Single error taxonomy shared by the dispatcher and the bundled transports
- Callers can catch NotificationError for everything raised by this package
- Each concrete error also derives from the closest builtin so generic
  handlers (ValueError, LookupError) keep working

Design Decisions:
- ConfigurationError is raised eagerly at construction time only
- RoutingError is raised synchronously before any transport interaction
- TransportError is never raised by the dispatcher itself; it is the base for
  failures reported by the bundled in-memory and SNS transports
"""


class NotificationError(Exception):
    """Base class for all notification errors."""


class ConfigurationError(NotificationError, ValueError):
    """A construction precondition does not hold."""


class RoutingError(NotificationError, LookupError):
    """No channel is configured for the requested notification type."""

    def __init__(self, notification_type: str) -> None:
        super().__init__(f"no channel for {notification_type}")
        self.notification_type = notification_type


class EnvelopeError(NotificationError, ValueError):
    """Base class for wire payload errors."""


class EnvelopeEncodingError(EnvelopeError):
    """The notification cannot be serialized to JSON."""


class EnvelopeDecodingError(EnvelopeError):
    """A payload is not a valid notification envelope."""


class TransportError(NotificationError):
    """Failure reported by a publish transport."""


class UnknownChannelError(TransportError):
    """Publish or subscribe against a channel the transport does not know."""


class UnknownQueueError(TransportError):
    """Operation against a queue that does not exist."""


class UnknownReceiptHandleError(TransportError):
    """Delete with a receipt handle that was never issued or already used."""
