"""
Notification Handler Validation

Architectural Intent:
- Lets an event store check a handler object before wiring it in
- Works on any object, not only NotificationDispatcher

Design Decisions:
- Reports the first missing operation instead of raising, so callers can
  decide how to surface it
"""

from dataclasses import dataclass
from typing import Any, Optional

REQUIRED_HANDLER_METHODS: tuple[str, ...] = ("invalid_events_found", "event_written")


@dataclass(frozen=True)
class ValidationResult:
    error: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None


def validate_notification_handler(handler: Any) -> ValidationResult:
    """Check that handler exposes every notification operation.

    Args:
        handler: Candidate notification handler

    Returns:
        ValidationResult with error None when the handler is usable
    """
    if handler is None:
        return ValidationResult(error="notification handler required")
    for method_name in REQUIRED_HANDLER_METHODS:
        if not callable(getattr(handler, method_name, None)):
            return ValidationResult(
                error=f"notification handler must provide {method_name}()"
            )
    return ValidationResult()
