"""
Domain Ports Package

Architectural Intent:
- Contains port interfaces (abstract contracts) for external dependencies
- Ports define what the domain needs, adapters implement how
- Follows Hexagonal Architecture principles
"""

from hebo_notifications.domain.ports.transport_port import PublishTransportPort
from hebo_notifications.domain.ports.notification_handler_port import (
    NotificationHandlerPort,
)

__all__ = [
    "PublishTransportPort",
    "NotificationHandlerPort",
]
