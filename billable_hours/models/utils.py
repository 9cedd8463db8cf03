# File: billable_hours/models/utils.py
"""
Utility functions turning raw Calendar API payloads into typed models.
"""

from datetime import timezone
from typing import Optional

from .calendar import Attendee, CalendarEvent, DateOnly, EventTime, TimedInstant
from .common import parse_iso_date, parse_iso_datetime
from .enums import ResponseStatus
from .errors import MalformedEventError


def event_time_from_dict(data: Optional[dict]) -> Optional[EventTime]:
    """Prefer the timed 'dateTime' field, fall back to the all-day 'date'."""
    if not data:
        return None

    timed = parse_iso_datetime(data.get('dateTime'))
    if timed is not None:
        if timed.tzinfo is None:
            timed = timed.replace(tzinfo=timezone.utc)
        return TimedInstant(timed)

    day = parse_iso_date(data.get('date'))
    if day is not None:
        return DateOnly(day)

    return None


def attendee_from_dict(data: dict) -> Attendee:
    """Create Attendee from an API attendee record."""
    return Attendee(
        email=data.get('email'),
        is_self=bool(data.get('self', False)),
        response_status=ResponseStatus.parse(data.get('responseStatus')),
        comment=data.get('comment'),
    )


def event_from_dict(data: dict) -> CalendarEvent:
    """Create CalendarEvent from an API event record.

    Raises:
        MalformedEventError: if the start or end cannot be resolved
    """
    event_id = data.get('id')
    summary = data.get('summary', '')

    start = event_time_from_dict(data.get('start'))
    if start is None:
        raise MalformedEventError(f"Event has no usable start: {summary}", event_id=event_id)

    end = event_time_from_dict(data.get('end'))
    if end is None:
        raise MalformedEventError(f"Event has no usable end: {summary}", event_id=event_id)

    return CalendarEvent(
        summary=summary,
        start=start,
        end=end,
        event_id=event_id,
        attendees=[attendee_from_dict(a) for a in data.get('attendees', [])],
    )
