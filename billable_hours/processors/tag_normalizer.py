# File: billable_hours/processors/tag_normalizer.py
from typing import Iterable, List, Optional

from billable_hours.models import CalendarEvent, TaggedEvent, DEFAULT_BUSY_MARKERS
from billable_hours.utils.logger import setup_logger

logger = setup_logger(__name__)


class TagNormalizer:
    """Derives the billing tag for each event without touching the event."""

    def __init__(
        self,
        busy_markers: Iterable[str] = DEFAULT_BUSY_MARKERS,
        focus_time_tag: str = "FOCUS_TIME"
    ):
        self.busy_markers = list(busy_markers)
        self.focus_time_tag = focus_time_tag

    def is_busy(self, title: Optional[str]) -> bool:
        if not title:
            return False
        return any(marker in title for marker in self.busy_markers)

    def tag_for(self, event: CalendarEvent) -> Optional[str]:
        """Focus tag for busy blocks, otherwise the viewer's own comment."""
        if self.is_busy(event.summary):
            return self.focus_time_tag
        return event.self_attendee().comment

    def normalize(self, events: List[CalendarEvent]) -> List[TaggedEvent]:
        tagged = [TaggedEvent(event=event, tag=self.tag_for(event)) for event in events]
        normalized = sum(1 for t in tagged if t.tag == self.focus_time_tag)
        logger.debug(f"Tagged {len(tagged)} events ({normalized} as {self.focus_time_tag})")
        return tagged
