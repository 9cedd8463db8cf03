# File: billable_hours/models/report.py

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .calendar import CalendarEvent
from .errors import SkippedEvent


@dataclass(frozen=True)
class TaggedEvent:
    """An accepted event paired with the tag it is billed under."""
    event: CalendarEvent
    tag: Optional[str]

    @property
    def day(self) -> str:
        return self.event.weekday.label

    def duration_hours(self) -> float:
        return self.event.duration_hours()


@dataclass
class AggregationResult:
    """Hours grouped by day, then by tag, against a weekly cap."""
    days: Dict[str, Dict[Optional[str], float]] = field(default_factory=dict)
    total_hours: float = 0.0
    max_billable_hours: float = 40.0
    event_count: int = 0
    skipped: List[SkippedEvent] = field(default_factory=list)

    @property
    def remaining_hours(self) -> float:
        """Hours left under the cap; negative once the cap is exceeded."""
        return self.max_billable_hours - self.total_hours

    def add(self, day: str, tag: Optional[str], hours: float) -> None:
        """Accumulate hours into a (day, tag) group, keeping first-seen order."""
        tags = self.days.setdefault(day, {})
        tags[tag] = tags.get(tag, 0.0) + hours

    def group_total(self) -> float:
        """Sum over every (day, tag) group."""
        return sum(hours for tags in self.days.values() for hours in tags.values())

    def hours_for_day(self, day: str) -> float:
        return sum(self.days.get(day, {}).values())

    def to_dict(self) -> dict:
        """Convert to dictionary for logging or JSON output."""
        return {
            'days': {day: dict(tags) for day, tags in self.days.items()},
            'total_hours': self.total_hours,
            'max_billable_hours': self.max_billable_hours,
            'remaining_hours': self.remaining_hours,
            'event_count': self.event_count,
            'skipped': [str(s) for s in self.skipped],
        }
