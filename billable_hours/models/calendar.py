# File: billable_hours/models/calendar.py

from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from typing import List, Optional, Union

from .enums import ResponseStatus, Weekday
from .errors import MalformedEventError, MissingSelfAttendeeError


@dataclass(frozen=True)
class TimedInstant:
    """A 'dateTime' start or end, carrying the offset the API returned."""
    value: datetime

    def as_datetime(self) -> datetime:
        return self.value

    @property
    def weekday(self) -> Weekday:
        return Weekday(self.value.weekday())

    @property
    def is_all_day(self) -> bool:
        return False


@dataclass(frozen=True)
class DateOnly:
    """An all-day 'date' start or end; resolves to midnight UTC."""
    value: date

    def as_datetime(self) -> datetime:
        return datetime.combine(self.value, time.min).replace(tzinfo=timezone.utc)

    @property
    def weekday(self) -> Weekday:
        return Weekday(self.value.weekday())

    @property
    def is_all_day(self) -> bool:
        return True


EventTime = Union[TimedInstant, DateOnly]


@dataclass
class Attendee:
    """One attendee record on an event."""
    email: Optional[str] = None
    is_self: bool = False
    response_status: ResponseStatus = ResponseStatus.NEEDS_ACTION
    comment: Optional[str] = None

    def __post_init__(self):
        """Convert string status to enum."""
        if not isinstance(self.response_status, ResponseStatus):
            self.response_status = ResponseStatus.parse(self.response_status)


@dataclass
class CalendarEvent:
    """Represents a calendar event as fetched for the report."""
    summary: str
    start: EventTime
    end: EventTime
    event_id: Optional[str] = None
    attendees: List[Attendee] = field(default_factory=list)

    def __post_init__(self):
        """Validate event data."""
        if isinstance(self.start, TimedInstant) and isinstance(self.end, TimedInstant):
            if self.end.value < self.start.value:
                raise MalformedEventError(
                    f"Event end time must not precede start time: {self.summary}",
                    event_id=self.event_id,
                )

    @property
    def is_all_day(self) -> bool:
        return self.start.is_all_day

    @property
    def weekday(self) -> Weekday:
        return self.start.weekday

    def self_attendee(self) -> Attendee:
        """Return the viewer's own attendee record."""
        for attendee in self.attendees:
            if attendee.is_self:
                return attendee
        raise MissingSelfAttendeeError(
            f"No self attendee on event: {self.summary}",
            event_id=self.event_id,
        )

    def duration_hours(self) -> float:
        """Event duration in hours, unrounded."""
        delta = self.end.as_datetime() - self.start.as_datetime()
        return delta.total_seconds() / 3600
