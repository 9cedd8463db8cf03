# File: billable_hours/processors/event_filter.py
"""
Event filtering module for Billable Hours.
Keeps only the events the viewer has accepted.
"""

from typing import List, Tuple

from billable_hours.models import (
    CalendarEvent,
    MissingSelfAttendeeError,
    ResponseStatus,
    SkippedEvent,
)
from billable_hours.utils.logger import setup_logger

logger = setup_logger(__name__)


class EventFilter:
    """Selects accepted events, preserving input order."""

    def __init__(
        self,
        accepted_status: ResponseStatus = ResponseStatus.ACCEPTED,
        skip_malformed: bool = False
    ):
        self.accepted_status = accepted_status
        self.skip_malformed = skip_malformed

    def is_accepted(self, event: CalendarEvent) -> bool:
        """
        Check the viewer's own response on an event.

        Raises:
            MissingSelfAttendeeError: if no attendee is flagged as self
        """
        return event.self_attendee().response_status == self.accepted_status

    def filter_events(
        self,
        events: List[CalendarEvent]
    ) -> Tuple[List[CalendarEvent], List[SkippedEvent]]:
        """
        Filter events down to the accepted ones.

        Args:
            events: Typed events in fetch order

        Returns:
            Tuple of (accepted events, skipped malformed events)

        Raises:
            MissingSelfAttendeeError: unless skip_malformed is set

        Example:
            >>> accepted, skipped = EventFilter().filter_events(events)
        """
        logger.debug(f"Filtering {len(events)} events for status '{self.accepted_status.value}'")

        accepted: List[CalendarEvent] = []
        skipped: List[SkippedEvent] = []

        for event in events:
            try:
                keep = self.is_accepted(event)
            except MissingSelfAttendeeError as e:
                if not self.skip_malformed:
                    raise
                logger.warning(f"Skipping event without self attendee: {event.summary}")
                skipped.append(SkippedEvent(event_id=event.event_id, reason=str(e), summary=event.summary))
                continue

            if keep:
                accepted.append(event)
            else:
                logger.debug(f"Dropping non-accepted event: {event.summary}")

        logger.info(
            f"Filtered events: {len(accepted)} accepted, "
            f"{len(events) - len(accepted) - len(skipped)} not accepted, "
            f"{len(skipped)} skipped"
        )
        return accepted, skipped
