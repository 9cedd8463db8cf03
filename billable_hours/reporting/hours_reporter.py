# File: billable_hours/reporting/hours_reporter.py
"""
Console report for aggregated billable hours.
"""

from typing import List, Optional

from billable_hours.models import AggregationResult
from billable_hours.utils.logger import LoggerMixin


def format_hours(hours: float) -> str:
    """Render hours unrounded, dropping a trailing '.0' on whole numbers."""
    if float(hours).is_integer():
        return str(int(hours))
    return repr(float(hours))


class HoursReporter(LoggerMixin):
    """Prints the day/tag breakdown and the remaining-hours figure."""

    def __init__(self, untagged_label: str = "Untagged"):
        self.untagged_label = untagged_label

    def tag_label(self, tag: Optional[str]) -> str:
        return self.untagged_label if tag is None else tag

    def format_report(self, result: AggregationResult) -> List[str]:
        """
        Build the report lines in aggregator order.

        Returns:
            One header per day, one line per tag, then the two totals
        """
        lines: List[str] = []
        for day, tags in result.days.items():
            lines.append(f"{day}:")
            for tag, hours in tags.items():
                lines.append(f"{self.tag_label(tag)} => {format_hours(hours)}")

        lines.append(f"Total hours accounted for: {format_hours(result.total_hours)}")
        lines.append(f"Total unaccounted hours: {format_hours(result.remaining_hours)}")
        return lines

    def print_report(self, result: AggregationResult) -> None:
        self.logger.debug(f"Printing report for {result.event_count} events")
        for line in self.format_report(result):
            print(line)

        if result.skipped:
            self.logger.warning(f"{len(result.skipped)} malformed events were left out of the report")
            for skipped in result.skipped:
                self.logger.warning(f"  - {skipped}")
