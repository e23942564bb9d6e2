"""
Notification Envelope

Architectural Intent:
- Value object for the payload sent to a channel
- Owns the wire format shared with every existing subscriber

Design Decisions:
- Exactly two fields, notificationType then notification; no version or
  timestamp field may be added without breaking subscribers
- Compact separators and raw non-ASCII so the text has the same shape and
  key order as JavaScript's JSON.stringify output (number formatting may
  differ, e.g. 1.0 vs 1)
- Serialization errors are raised as EnvelopeEncodingError before anything
  reaches the transport
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from hebo_notifications.domain.errors import (
    EnvelopeDecodingError,
    EnvelopeEncodingError,
)

NOTIFICATION_TYPE_FIELD = "notificationType"
NOTIFICATION_FIELD = "notification"


@dataclass(frozen=True)
class Envelope:
    notification_type: str
    notification: Any

    def to_dict(self) -> dict[str, Any]:
        return {
            NOTIFICATION_TYPE_FIELD: str(self.notification_type),
            NOTIFICATION_FIELD: self.notification,
        }

    def to_json(self) -> str:
        """Serialize to the wire payload.

        Raises:
            EnvelopeEncodingError: If the notification is not JSON-serializable.
        """
        try:
            return json.dumps(
                self.to_dict(),
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
            )
        except (TypeError, ValueError) as e:
            raise EnvelopeEncodingError(
                f"cannot serialize {self.notification_type} notification: {e}"
            ) from e

    @classmethod
    def from_json(cls, payload: str | bytes) -> Envelope:
        """Decode a wire payload produced by to_json().

        Raises:
            EnvelopeDecodingError: If the payload is not a two-field envelope.
        """
        try:
            data = json.loads(payload)
        except (TypeError, ValueError) as e:
            raise EnvelopeDecodingError(f"payload is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise EnvelopeDecodingError("payload must be a JSON object")
        if set(data) != {NOTIFICATION_TYPE_FIELD, NOTIFICATION_FIELD}:
            raise EnvelopeDecodingError(
                f"payload must have exactly the fields "
                f"{NOTIFICATION_TYPE_FIELD} and {NOTIFICATION_FIELD}, "
                f"got {sorted(data)}"
            )
        if not isinstance(data[NOTIFICATION_TYPE_FIELD], str):
            raise EnvelopeDecodingError(f"{NOTIFICATION_TYPE_FIELD} must be a string")

        return cls(
            notification_type=data[NOTIFICATION_TYPE_FIELD],
            notification=data[NOTIFICATION_FIELD],
        )
