# File: billable_hours/models/errors.py
"""
Error types raised while turning raw calendar data into report input.
"""

from dataclasses import dataclass
from typing import Optional


class MalformedEventError(ValueError):
    """Raised when an event lacks the fields needed to bill it."""

    def __init__(self, message: str, event_id: Optional[str] = None):
        super().__init__(message)
        self.event_id = event_id


class MissingSelfAttendeeError(MalformedEventError):
    """Raised when no attendee on an event is flagged as the viewer."""


@dataclass
class SkippedEvent:
    """An event dropped from the report because it was malformed."""
    event_id: Optional[str]
    reason: str
    summary: Optional[str] = None

    def __str__(self) -> str:
        """String representation of the skip."""
        label = self.summary or self.event_id or "<unknown event>"
        return f"{label}: {self.reason}"
