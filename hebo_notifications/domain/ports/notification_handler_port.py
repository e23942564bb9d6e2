"""
Notification Handler Port

Architectural Intent:
- Interface the event store calls when it has something to announce
- Lets producers depend on the typed operations only, not on a transport

Design Decisions:
- One method per notification type
- Methods return the transport's awaitable unchanged
"""

from typing import Any, Awaitable, Protocol, runtime_checkable


@runtime_checkable
class NotificationHandlerPort(Protocol):
    def invalid_events_found(self, notification: Any) -> Awaitable[Any]: ...

    def event_written(self, notification: Any) -> Awaitable[Any]: ...
