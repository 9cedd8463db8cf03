# File: billable_hours/services/data_collector.py

import datetime
from typing import List, Optional

from billable_hours.models import CalendarEvent, MalformedEventError, SkippedEvent, event_from_dict
from billable_hours.utils.logger import setup_logger

from billable_hours.services.calendar_service import GoogleCalendarService


class CollectedEvents:
    """Typed events for the window plus any that had to be dropped."""

    def __init__(self, events: List[CalendarEvent], skipped: Optional[List[SkippedEvent]] = None):
        self.events = events
        self.skipped = skipped or []

    def __len__(self) -> int:
        return len(self.events)


class EventCollector:
    """Collects raw calendar events and converts them to typed models."""

    def __init__(self, calendar_service: GoogleCalendarService, skip_malformed: bool = False):
        """
        Initialize event collector.

        Args:
            calendar_service: Calendar service instance (returns raw dicts)
            skip_malformed: Drop and record unparseable events instead of raising
        """
        self.calendar = calendar_service
        self.skip_malformed = skip_malformed
        self.logger = setup_logger(__name__)

    def collect(
        self,
        time_min: datetime.datetime,
        time_max: datetime.datetime
    ) -> CollectedEvents:
        """
        Fetch the window and convert every raw event.

        Raises:
            MalformedEventError: on an unparseable event unless skip_malformed is set
        """
        self.logger.info("Collecting calendar events for the report window")

        raw_events = self.calendar.fetch_events(time_min, time_max)
        events: List[CalendarEvent] = []
        skipped: List[SkippedEvent] = []

        for raw_event in raw_events:
            try:
                events.append(event_from_dict(raw_event))
            except MalformedEventError as e:
                if not self.skip_malformed:
                    raise
                self.logger.warning(f"Skipping malformed event {raw_event.get('id')}: {e}")
                skipped.append(SkippedEvent(
                    event_id=raw_event.get('id'),
                    reason=str(e),
                    summary=raw_event.get('summary'),
                ))

        self.logger.info(
            f"Collection successful: {len(events)} events, {len(skipped)} skipped"
        )
        return CollectedEvents(events, skipped)
