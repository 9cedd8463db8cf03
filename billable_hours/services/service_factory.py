# File: billable_hours/services/service_factory.py

from googleapiclient.discovery import Resource

from billable_hours.models import ReportConfig
from billable_hours.services.calendar_service import GoogleCalendarService
from billable_hours.services.data_collector import EventCollector


class ServiceFactory:
    """Factory for creating service instances."""

    @staticmethod
    def create_calendar_service(calendar_service: Resource, config: ReportConfig) -> GoogleCalendarService:
        """
        Wrap the authenticated calendar API resource.

        Args:
            calendar_service: Authenticated calendar API resource
            config: Report configuration

        Returns:
            GoogleCalendarService instance
        """
        return GoogleCalendarService(calendar_service, config)

    @staticmethod
    def create_event_collector(calendar_service: GoogleCalendarService, config: ReportConfig) -> EventCollector:
        """
        Create event collector instance.

        Args:
            calendar_service: Calendar service instance
            config: Report configuration

        Returns:
            EventCollector instance
        """
        return EventCollector(calendar_service, skip_malformed=config.skip_malformed_events)
