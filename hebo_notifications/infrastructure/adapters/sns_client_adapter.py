"""
SNS Client Transport

Architectural Intent:
- Implements PublishTransportPort on top of a boto3-shaped SNS client
- Keeps the dispatcher free of any AWS SDK knowledge

Design Decisions:
- The client is injected; anything with publish(TopicArn=..., Message=...)
  works, e.g. boto3.client("sns") or a moto-backed client in tests
- The blocking client call runs in a worker thread via asyncio.to_thread so
  the event loop stays free
- Client exceptions propagate unchanged; retries are the client's business

The real call looks like:
    sns = boto3.client("sns", region_name=region)
    response = sns.publish(TopicArn=topic_arn, Message=message)
"""

import asyncio
import logging
from typing import Any

from hebo_notifications.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


class SnsClientTransport:
    """Publishes payloads through an SNS client."""

    def __init__(self, client: Any) -> None:
        """Initialize the transport.

        Args:
            client: SNS client exposing publish(TopicArn=..., Message=...)
        """
        if client is None:
            raise ConfigurationError("SnsClientTransport: client required")
        if not callable(getattr(client, "publish", None)):
            raise ConfigurationError("SnsClientTransport: client must provide publish()")
        self._client = client

    async def publish(self, channel_id: str, payload: str) -> dict[str, Any]:
        """Publish a payload to an SNS topic.

        Args:
            channel_id: Topic ARN
            payload: Message text

        Returns:
            The client's publish response
        """
        logger.debug("SNS publish to %s (%d bytes)", channel_id, len(payload))
        response = await asyncio.to_thread(
            self._client.publish, TopicArn=channel_id, Message=payload
        )
        logger.info(
            "SNS publish: %s -> %s", response.get("MessageId", ""), channel_id
        )
        return response
