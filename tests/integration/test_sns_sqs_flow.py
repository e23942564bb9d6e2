"""End-to-end publish flow: dispatcher -> SNS topics -> subscribed SQS queue."""

import json
import uuid
import pytest

from hebo_notifications.application.notification_dispatcher import NotificationDispatcher
from hebo_notifications.application.validation import validate_notification_handler
from hebo_notifications.infrastructure.adapters import (
    InMemorySnsBroker,
    InMemorySqs,
    extract_envelope,
)


def _name():
    return f"hebotest-{uuid.uuid4().hex[:8]}"


@pytest.fixture
def flow():
    sqs = InMemorySqs()
    sns = InMemorySnsBroker(sqs=sqs)
    invalid_events_found_arn = sns.create_topic(_name())
    event_written_arn = sns.create_topic(_name())

    queue_url = sqs.create_queue(_name())
    for topic_arn in (invalid_events_found_arn, event_written_arn):
        sns.subscribe(topic_arn, sqs.queue_arn(queue_url))

    dispatcher = NotificationDispatcher(
        sns,
        {
            "invalidEventsFound": invalid_events_found_arn,
            "eventWritten": event_written_arn,
        },
    )
    yield dispatcher, sqs, queue_url

    sns.delete_topic(invalid_events_found_arn)
    sns.delete_topic(event_written_arn)
    sqs.delete_queue(queue_url)


def _drain(sqs, queue_url, expected):
    found = []
    for _ in range(10):
        if len(found) == expected:
            break
        for message in sqs.receive_messages(queue_url):
            sqs.delete_message(queue_url, message["ReceiptHandle"])
            found.append(extract_envelope(message["Body"]).to_dict())
    return found


def _sorted(messages):
    return sorted(messages, key=lambda m: m["notification"]["aggregateId"])


class TestPublishFlow:
    def test_passes_validator(self, flow):
        dispatcher, _, _ = flow
        assert validate_notification_handler(dispatcher).error is None

    @pytest.mark.asyncio
    async def test_invalid_events_found(self, flow):
        dispatcher, sqs, queue_url = flow
        notification1 = {
            "aggregateName": "library",
            "aggregateId": uuid.uuid4().hex,
            "eventIds": [uuid.uuid4().hex],
        }
        notification2 = {
            "aggregateName": "author",
            "aggregateId": uuid.uuid4().hex,
            "eventIds": [uuid.uuid4().hex, uuid.uuid4().hex],
        }

        await dispatcher.invalid_events_found(notification1)
        await dispatcher.invalid_events_found(notification2)

        messages = _drain(sqs, queue_url, expected=2)
        assert _sorted(messages) == _sorted([
            {"notificationType": "invalidEventsFound", "notification": notification1},
            {"notificationType": "invalidEventsFound", "notification": notification2},
        ])

    @pytest.mark.asyncio
    async def test_event_written(self, flow):
        dispatcher, sqs, queue_url = flow
        notification1 = {
            "aggregateName": "library",
            "aggregateId": uuid.uuid4().hex,
            "eventType": "CREATED",
        }
        notification2 = {
            "aggregateName": "author",
            "aggregateId": uuid.uuid4().hex,
            "eventType": "NAME_SET",
        }

        await dispatcher.event_written(notification1)
        await dispatcher.event_written(notification2)

        messages = _drain(sqs, queue_url, expected=2)
        assert _sorted(messages) == _sorted([
            {"notificationType": "eventWritten", "notification": notification1},
            {"notificationType": "eventWritten", "notification": notification2},
        ])


class TestRecordingTransportScenario:
    @pytest.mark.asyncio
    async def test_event_written_routes_to_topic_b(self, transport):
        dispatcher = NotificationDispatcher(
            transport, {"invalidEventsFound": "topicA", "eventWritten": "topicB"}
        )

        await dispatcher.event_written({"aggregateId": "x", "eventType": "CREATED"})

        assert len(transport.calls) == 1
        channel_id, payload = transport.calls[0]
        assert channel_id == "topicB"
        assert json.loads(payload) == {
            "notificationType": "eventWritten",
            "notification": {"aggregateId": "x", "eventType": "CREATED"},
        }
