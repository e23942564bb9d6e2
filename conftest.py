"""Global test configuration.

Shared fixtures for dispatcher tests: a recording transport double and a
valid channel map.
"""

import pytest

INVALID_EVENTS_FOUND_ARN = "arn:aws:sns:testing:123456789012:topic1"
EVENT_WRITTEN_ARN = "arn:aws:sns:testing:123456789012:topic2"


class RecordingTransport:
    """Transport double that records every publish call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    async def publish(self, channel_id: str, payload: str) -> dict:
        self.calls.append((channel_id, payload))
        return {"MessageId": f"msg-{len(self.calls)}"}


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def channel_map():
    return {
        "invalidEventsFound": INVALID_EVENTS_FOUND_ARN,
        "eventWritten": EVENT_WRITTEN_ARN,
    }
