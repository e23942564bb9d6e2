"""
Transport Adapters Package

Architectural Intent:
- Concrete PublishTransportPort implementations
"""

from hebo_notifications.infrastructure.adapters.in_memory_broker import (
    InMemorySnsBroker,
    InMemorySqs,
    extract_envelope,
)
from hebo_notifications.infrastructure.adapters.sns_client_adapter import (
    SnsClientTransport,
)

__all__ = [
    "InMemorySnsBroker",
    "InMemorySqs",
    "SnsClientTransport",
    "extract_envelope",
]
