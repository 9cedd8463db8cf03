# File: billable_hours/processors/aggregator.py
"""
Hours aggregation module.
Groups tagged events by weekday, then by tag, and sums their durations.
"""

from collections import defaultdict
from typing import Dict, List, Optional

from billable_hours.models import AggregationResult, TaggedEvent
from billable_hours.utils.logger import setup_logger


class HoursAggregator:
    """Builds the day -> tag -> hours breakdown for a report."""

    def __init__(self, max_billable_hours: float = 40.0):
        """
        Initialize aggregator.

        Args:
            max_billable_hours: Weekly cap the total is compared against
        """
        self.max_billable_hours = max_billable_hours
        self.logger = setup_logger(__name__)

    @staticmethod
    def group_by_day(tagged_events: List[TaggedEvent]) -> Dict[str, List[TaggedEvent]]:
        """Group events by weekday label in first-occurrence order."""
        groups: Dict[str, List[TaggedEvent]] = defaultdict(list)
        for tagged in tagged_events:
            groups[tagged.day].append(tagged)
        return dict(groups)

    @staticmethod
    def group_by_tag(tagged_events: List[TaggedEvent]) -> Dict[Optional[str], List[TaggedEvent]]:
        """Group events by tag in first-occurrence order; None is its own group."""
        groups: Dict[Optional[str], List[TaggedEvent]] = defaultdict(list)
        for tagged in tagged_events:
            groups[tagged.tag].append(tagged)
        return dict(groups)

    def aggregate(self, tagged_events: List[TaggedEvent]) -> AggregationResult:
        """
        Sum hours per (day, tag) and overall.

        Args:
            tagged_events: Accepted events with their billing tags

        Returns:
            AggregationResult with insertion-ordered groups
        """
        self.logger.info(f"Aggregating {len(tagged_events)} accepted events")

        result = AggregationResult(
            max_billable_hours=self.max_billable_hours,
            event_count=len(tagged_events),
        )
        result.total_hours = sum(t.duration_hours() for t in tagged_events)

        for day, day_events in self.group_by_day(tagged_events).items():
            for tag, tag_events in self.group_by_tag(day_events).items():
                result.add(day, tag, sum(t.duration_hours() for t in tag_events))

        self.logger.info(
            f"Aggregated {result.total_hours} hours across {len(result.days)} days "
            f"({result.remaining_hours} remaining of {self.max_billable_hours})"
        )
        return result
