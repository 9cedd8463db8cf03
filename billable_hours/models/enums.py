# File: billable_hours/models/enums.py

from enum import Enum


class ResponseStatus(Enum):
    """Attendee response status as reported by the Calendar API."""
    ACCEPTED = "accepted"
    DECLINED = "declined"
    TENTATIVE = "tentative"
    NEEDS_ACTION = "needsAction"

    @classmethod
    def parse(cls, raw) -> "ResponseStatus":
        """Map a raw API value to a status, defaulting to NEEDS_ACTION."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw))
        except ValueError:
            return cls.NEEDS_ACTION


class Weekday(Enum):
    """Day buckets, indexed the way datetime.weekday() counts."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def label(self) -> str:
        return self.name.capitalize()
