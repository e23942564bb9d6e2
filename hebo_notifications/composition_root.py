"""
Composition Root

Architectural Intent:
- Single place where configuration, transport and dispatcher are wired
- Services embedding the dispatcher either pass a ready transport, or pass
  an SNS client factory (boto3.client) that is called with the [sns]
  config section; local runs and tests get the in-memory broker

Design Decisions:
- Uses a simple dataclass container instead of a DI framework
- The dispatcher is built (and therefore validated) during wiring, so a bad
  channel map fails at startup rather than on the first publish
- When the in-memory broker is used, the configured channels are created as
  topics in it so publishes succeed
- The AWS SDK is never imported here; the caller owns the client factory
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from hebo_notifications.application.notification_dispatcher import NotificationDispatcher
from hebo_notifications.domain.ports.transport_port import PublishTransportPort
from hebo_notifications.infrastructure.adapters.in_memory_broker import InMemorySnsBroker
from hebo_notifications.infrastructure.adapters.sns_client_adapter import SnsClientTransport
from hebo_notifications.infrastructure.config import HeboConfig, load_config

logger = logging.getLogger(__name__)


@dataclass
class NotificationsContainer:
    """DI container holding all wired dependencies."""

    config: HeboConfig
    transport: PublishTransportPort
    dispatcher: NotificationDispatcher


def _in_memory_transport(config: HeboConfig) -> InMemorySnsBroker:
    broker = InMemorySnsBroker()
    for channel_id in config.notifications.channel_map().values():
        if isinstance(channel_id, str) and channel_id:
            broker.register_topic(channel_id)
    return broker


def create_container(
    config: Optional[HeboConfig] = None,
    transport: Optional[PublishTransportPort] = None,
    sns_client_factory: Optional[Callable[..., Any]] = None,
) -> NotificationsContainer:
    """Create and wire all dependencies.

    Args:
        config: Loaded configuration, load_config() when omitted
        transport: Ready-made transport; takes precedence over the factory
        sns_client_factory: Called as factory("sns", **config.sns.client_kwargs()),
            e.g. boto3.client

    Raises:
        ConfigurationError: If the configured channel map is incomplete
    """
    config = config or load_config()
    if transport is None and sns_client_factory is not None:
        logger.info("Using SNS client transport (region=%s)", config.sns.region)
        client = sns_client_factory("sns", **config.sns.client_kwargs())
        transport = SnsClientTransport(client)
    elif transport is None:
        logger.info("No transport supplied, using in-memory SNS broker")
        transport = _in_memory_transport(config)

    dispatcher = NotificationDispatcher(
        transport, config.notifications.channel_map()
    )
    return NotificationsContainer(
        config=config,
        transport=transport,
        dispatcher=dispatcher,
    )
