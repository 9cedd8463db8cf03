# File: billable_hours/core/orchestrator.py
"""
Main orchestrator module for Billable Hours.
Coordinates all components to produce the weekly billable-hours report.

Each step is delegated to a focused service or processor class; the
orchestrator only wires them together and owns the single pass.
"""

import datetime
from typing import Optional

from googleapiclient.discovery import Resource

from billable_hours.core.config_manager import Config
from billable_hours.utils.logger import setup_logger
from billable_hours.auth.google_auth import get_calendar_service
from billable_hours.services.service_factory import ServiceFactory
from billable_hours.processors.event_filter import EventFilter
from billable_hours.processors.tag_normalizer import TagNormalizer
from billable_hours.processors.aggregator import HoursAggregator
from billable_hours.reporting.hours_reporter import HoursReporter
from billable_hours.models import AggregationResult, ReportConfig

logger = setup_logger(__name__)


class ReportOrchestrator:
    """
    Main orchestrator for the billable-hours report.

    Coordinates authentication, fetching, filtering, tagging,
    aggregation, and printing.
    """

    def __init__(self, config: ReportConfig, calendar_resource: Optional[Resource] = None):
        """
        Initialize the orchestrator.

        Args:
            config: Report configuration
            calendar_resource: Pre-built Calendar API resource; authenticates when omitted

        Raises:
            ConnectionError: if Google authentication fails
        """
        logger.info("Initializing Report Orchestrator")
        self.config = config

        # 1. Authenticate with Google
        if calendar_resource is None:
            logger.info("Authenticating with Google Calendar API")
            calendar_resource = get_calendar_service(config)
            if calendar_resource is None:
                raise ConnectionError(
                    "Google authentication failed. Run 'python scripts/authorize.py' first."
                )

        # 2. Create Service Layer
        self.calendar_service = ServiceFactory.create_calendar_service(calendar_resource, config)
        self.event_collector = ServiceFactory.create_event_collector(self.calendar_service, config)
        logger.debug("Service layer initialized")

        # 3. Create Helper Components
        self.event_filter = EventFilter(
            accepted_status=config.accepted_status,
            skip_malformed=config.skip_malformed_events,
        )
        self.tag_normalizer = TagNormalizer(
            busy_markers=config.busy_markers,
            focus_time_tag=config.focus_time_tag,
        )
        self.aggregator = HoursAggregator(max_billable_hours=config.max_billable_hours)
        self.reporter = HoursReporter(untagged_label=config.untagged_label)

        logger.info("Report Orchestrator initialized successfully")

    def build_report(
        self,
        time_min: datetime.datetime,
        time_max: datetime.datetime
    ) -> Optional[AggregationResult]:
        """
        Fetch, filter, tag and aggregate the window without printing.

        Returns:
            AggregationResult, or None when the calendar returned no events
        """
        # Step 1: Gather Data
        logger.info("STEP 1: Gathering Events")
        collected = self.event_collector.collect(time_min, time_max)
        if not collected.events and not collected.skipped:
            logger.info("No events in report window")
            return None

        # Step 2: Filter
        logger.info("STEP 2: Filtering Accepted Events")
        accepted, skipped = self.event_filter.filter_events(collected.events)

        # Step 3: Tag
        logger.info("STEP 3: Normalizing Tags")
        tagged = self.tag_normalizer.normalize(accepted)

        # Step 4: Aggregate
        logger.info("STEP 4: Aggregating Hours")
        result = self.aggregator.aggregate(tagged)
        result.skipped = collected.skipped + skipped
        return result

    def run_report(
        self,
        time_min: datetime.datetime,
        time_max: datetime.datetime
    ) -> Optional[AggregationResult]:
        """
        Execute the full report pipeline and print it.

        Returns:
            AggregationResult, or None when there was nothing to report

        Pipeline Steps:
            1. Fetch events for the window
            2. Keep accepted events
            3. Derive tags
            4. Aggregate by day and tag
            5. Print the report
        """
        logger.info("=" * 60)
        logger.info("Starting Billable Hours Report")
        logger.info("=" * 60)

        result = self.build_report(time_min, time_max)
        if result is None:
            print(Config.NO_EVENTS_MESSAGE)
            return None

        # Step 5: Report
        logger.info("STEP 5: Printing Report")
        self.reporter.print_report(result)

        logger.info("=" * 60)
        logger.info(f"SUCCESS: Reported {result.total_hours} hours from {result.event_count} events")
        logger.info("=" * 60)
        return result


class OrchestratorFactory:
    """Factory for creating ReportOrchestrator instances with dependency injection."""

    @staticmethod
    def create(config: Optional[ReportConfig] = None) -> ReportOrchestrator:
        """
        Create a fully initialized ReportOrchestrator instance.

        Returns:
            ReportOrchestrator instance ready to run

        Raises:
            ValueError: If configuration is invalid
            ConnectionError: If authentication fails
        """
        logger.info("Creating Report Orchestrator via factory")

        config = config or Config.report_config()

        # Validate configuration first
        if not Config.validate(config):
            raise ValueError(
                "Configuration validation failed. "
                "Please check your .env and config/config.json."
            )

        return ReportOrchestrator(config)
