"""
In-Memory SNS/SQS Broker

Architectural Intent:
- Implements PublishTransportPort with SNS-style topics fanning out to
  SQS-style queues, entirely in memory
- Lets the dispatcher be exercised end to end without AWS credentials
- Mirrors the boto3 response shapes so tests read like live SNS/SQS code

Design Decisions:
- Topic and queue ARNs follow the "mocklocal" pseudo-region
- publish() wraps the payload in an SNS notification body before delivering
  it to each subscribed queue, exactly as SNS does for SQS subscriptions
- Received messages stay in the queue until deleted by receipt handle
- Errors are raised inside the publish coroutine so they surface on await,
  like a failed network call would
"""

from __future__ import annotations

import json
import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Optional

from hebo_notifications.domain.envelope import Envelope
from hebo_notifications.domain.errors import (
    TransportError,
    UnknownChannelError,
    UnknownQueueError,
    UnknownReceiptHandleError,
)

logger = logging.getLogger(__name__)

ACCOUNT_ID = "123456789012"
REGION = "mocklocal"


@dataclass
class _Queue:
    arn: str
    message_ids: list[str] = field(default_factory=list)
    bodies: dict[str, str] = field(default_factory=dict)
    receipt_handles: dict[str, str] = field(default_factory=dict)


class InMemorySqs:
    """In-memory SQS queue registry."""

    def __init__(self) -> None:
        self._queues: dict[str, _Queue] = {}

    def create_queue(self, name: str) -> str:
        """Create a queue (idempotent) and return its URL."""
        url = f"https://mock.amazonaws.com/{ACCOUNT_ID}/{name}"
        if url not in self._queues:
            self._queues[url] = _Queue(arn=f"arn:aws:sqs:{REGION}:{ACCOUNT_ID}:{name}")
            logger.debug("Created queue %s", url)
        return url

    def delete_queue(self, url: str) -> None:
        self._queues.pop(url, None)

    def queue_arn(self, url: str) -> str:
        return self._get(url).arn

    def arn_to_url(self, arn: str) -> Optional[str]:
        for url, queue in self._queues.items():
            if queue.arn == arn:
                return url
        return None

    def send_message(self, url: str, body: str) -> str:
        if not body:
            raise TransportError("send_message: missing body")
        queue = self._get(url)
        message_id = str(uuid.uuid4())
        queue.message_ids.append(message_id)
        queue.bodies[message_id] = body
        return message_id

    def receive_messages(self, url: str, max_messages: int = 1) -> list[dict[str, str]]:
        """Return up to max_messages messages, oldest first.

        Each message gets a fresh receipt handle; it stays in the queue until
        delete_message is called with that handle.
        """
        queue = self._get(url)
        messages = []
        for message_id in queue.message_ids[:max_messages]:
            receipt_handle = str(uuid.uuid4())
            queue.receipt_handles[receipt_handle] = message_id
            messages.append(
                {
                    "MessageId": message_id,
                    "ReceiptHandle": receipt_handle,
                    "Body": queue.bodies[message_id],
                }
            )
        return messages

    def delete_message(self, url: str, receipt_handle: str) -> None:
        queue = self._get(url)
        message_id = queue.receipt_handles.pop(receipt_handle, None)
        if message_id is None:
            raise UnknownReceiptHandleError(
                f"delete_message: unknown receipt handle {receipt_handle}"
            )
        if message_id in queue.bodies:
            queue.message_ids.remove(message_id)
            del queue.bodies[message_id]
        queue.receipt_handles = {
            handle: mid
            for handle, mid in queue.receipt_handles.items()
            if mid != message_id
        }

    def _get(self, url: str) -> _Queue:
        queue = self._queues.get(url)
        if queue is None:
            raise UnknownQueueError(f"unknown queue {url}")
        return queue


class InMemorySnsBroker:
    """In-memory SNS topics implementing PublishTransportPort."""

    def __init__(self, sqs: Optional[InMemorySqs] = None) -> None:
        """Initialize the broker.

        Args:
            sqs: Queue registry that receives fan-out deliveries
        """
        self.sqs = sqs or InMemorySqs()
        # topic ARN -> subscription ARN -> queue ARN
        self._topics: dict[str, dict[str, str]] = {}

    @property
    def topic_arns(self) -> list[str]:
        return list(self._topics)

    def create_topic(self, name: str) -> str:
        """Create a topic (idempotent) and return its ARN."""
        return self.register_topic(f"arn:aws:sns:{REGION}:{ACCOUNT_ID}:{name}")

    def register_topic(self, topic_arn: str) -> str:
        """Create a topic under an existing ARN (idempotent)."""
        self._topics.setdefault(topic_arn, {})
        logger.debug("Created topic %s", topic_arn)
        return topic_arn

    def delete_topic(self, topic_arn: str) -> None:
        self._topics.pop(topic_arn, None)

    def subscribe(self, topic_arn: str, queue_arn: str) -> str:
        """Subscribe a queue to a topic and return the subscription ARN."""
        if topic_arn not in self._topics:
            raise UnknownChannelError(f"subscribe: unknown topic {topic_arn}")
        subscription_arn = f"{topic_arn}:{uuid.uuid4()}"
        self._topics[topic_arn][subscription_arn] = queue_arn
        return subscription_arn

    async def publish(self, channel_id: str, payload: str) -> dict[str, Any]:
        """Publish a payload to a topic.

        Args:
            channel_id: Topic ARN
            payload: Message text

        Returns:
            Response dict with the MessageId

        Raises:
            UnknownChannelError: If the topic does not exist
            TransportError: If the payload is empty or not a string
        """
        subscribers = self._topics.get(channel_id)
        if subscribers is None:
            raise UnknownChannelError(f"publish: unknown topic {channel_id}")
        if not payload:
            raise TransportError("publish: no message")
        if not isinstance(payload, str):
            raise TransportError("publish: message must be a string")

        message_id = str(uuid.uuid4())
        body = json.dumps(
            {
                "Type": "Notification",
                "MessageId": message_id,
                "TopicArn": channel_id,
                "Message": payload,
            }
        )
        for queue_arn in subscribers.values():
            url = self.sqs.arn_to_url(queue_arn)
            if url is None:
                logger.warning("Dropping delivery to missing queue %s", queue_arn)
                continue
            self.sqs.send_message(url, body)

        logger.info(
            "SNS publish (in-memory): %s -> %s [subscribers=%d]",
            message_id,
            channel_id,
            len(subscribers),
            extra={"message_id": message_id, "channel_id": channel_id},
        )
        return {"MessageId": message_id}


def extract_envelope(sqs_body: str) -> Envelope:
    """Unwrap the envelope from an SNS notification delivered to SQS."""
    return Envelope.from_json(json.loads(sqs_body)["Message"])
