"""Tests for NotificationDispatcher construction."""

import re
import pytest
from unittest.mock import MagicMock

from hebo_notifications.application.notification_dispatcher import NotificationDispatcher
from hebo_notifications.domain.channel_map import ChannelMap
from hebo_notifications.domain.errors import ConfigurationError

ARN1 = "arn:aws:sns:testing:123456789012:topic1"
ARN2 = "arn:aws:sns:testing:123456789012:topic2"

MESSAGES = [
    "transport required",
    "transport must provide publish()",
    "channel_map required",
    "channel_map must be a mapping",
    "no invalidEventsFound channel",
    "no eventWritten channel",
]


def _publish(channel_id, payload):
    return None


class _Transport:
    publish = staticmethod(_publish)


def _assert_only_message(exc_info, expected):
    message = str(exc_info.value)
    assert expected in message
    for other in MESSAGES:
        if other != expected:
            assert other not in message


class TestConstructorTransport:
    def test_no_params(self):
        with pytest.raises(TypeError):
            NotificationDispatcher()

    def test_transport_required(self, channel_map):
        with pytest.raises(ConfigurationError) as exc:
            NotificationDispatcher(None, channel_map)
        _assert_only_message(exc, "transport required")

    def test_transport_must_provide_publish(self, channel_map):
        with pytest.raises(ConfigurationError) as exc:
            NotificationDispatcher(object(), channel_map)
        _assert_only_message(exc, "transport must provide publish()")

    def test_publish_must_be_callable(self, channel_map):
        transport = MagicMock()
        transport.publish = "not callable"
        with pytest.raises(
            ConfigurationError, match=re.escape("transport must provide publish()")
        ):
            NotificationDispatcher(transport, channel_map)

    def test_transport_checked_before_channel_map(self):
        with pytest.raises(ConfigurationError, match="transport required"):
            NotificationDispatcher(None, None)

    def test_valid_params(self, channel_map):
        dispatcher = NotificationDispatcher(_Transport(), channel_map)
        assert dispatcher.channel_map == channel_map


class TestConstructorChannelMap:
    def test_channel_map_required(self, transport):
        with pytest.raises(ConfigurationError) as exc:
            NotificationDispatcher(transport, None)
        _assert_only_message(exc, "channel_map required")

    def test_channel_map_type(self, transport):
        with pytest.raises(ConfigurationError) as exc:
            NotificationDispatcher(transport, [])
        _assert_only_message(exc, "channel_map must be a mapping")

    def test_invalid_events_found_required(self, transport):
        with pytest.raises(ConfigurationError) as exc:
            NotificationDispatcher(transport, {"eventWritten": ARN2})
        _assert_only_message(exc, "no invalidEventsFound channel")

    def test_event_written_required(self, transport):
        with pytest.raises(ConfigurationError) as exc:
            NotificationDispatcher(transport, {"invalidEventsFound": ARN1})
        _assert_only_message(exc, "no eventWritten channel")

    def test_message_names_dispatcher(self, transport):
        with pytest.raises(ConfigurationError, match="^NotificationDispatcher: "):
            NotificationDispatcher(transport, {})

    def test_configuration_error_is_value_error(self, transport):
        with pytest.raises(ValueError):
            NotificationDispatcher(transport, {})

    def test_valid_params(self, transport):
        dispatcher = NotificationDispatcher(
            transport, {"invalidEventsFound": ARN1, "eventWritten": ARN2}
        )
        assert dispatcher.transport is transport
        assert dispatcher.channel_map["eventWritten"] == ARN2

    def test_accepts_channel_map_instance(self, transport, channel_map):
        channels = ChannelMap(channel_map)
        dispatcher = NotificationDispatcher(transport, channels)
        assert dispatcher.channel_map is channels

    def test_does_not_publish(self, transport, channel_map):
        NotificationDispatcher(transport, channel_map)
        assert transport.calls == []
