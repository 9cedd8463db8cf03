from .enums import ResponseStatus, Weekday
from .common import parse_iso_datetime, parse_iso_date
from .errors import MalformedEventError, MissingSelfAttendeeError, SkippedEvent
from .calendar import Attendee, CalendarEvent, DateOnly, EventTime, TimedInstant
from .report import AggregationResult, TaggedEvent
from .config import ReportConfig, DEFAULT_BUSY_MARKERS, DEFAULT_SCOPES, parse_flag
from .utils import attendee_from_dict, event_from_dict, event_time_from_dict

__all__ = [
    "ResponseStatus",
    "Weekday",
    "parse_iso_datetime",
    "parse_iso_date",
    "MalformedEventError",
    "MissingSelfAttendeeError",
    "SkippedEvent",
    "Attendee",
    "CalendarEvent",
    "DateOnly",
    "EventTime",
    "TimedInstant",
    "AggregationResult",
    "TaggedEvent",
    "ReportConfig",
    "DEFAULT_BUSY_MARKERS",
    "DEFAULT_SCOPES",
    "parse_flag",
    "attendee_from_dict",
    "event_from_dict",
    "event_time_from_dict",
]
