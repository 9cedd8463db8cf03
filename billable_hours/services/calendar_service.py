# File: billable_hours/services/calendar_service.py

import datetime
from typing import Any, Dict, List
from googleapiclient.discovery import Resource
from googleapiclient.errors import HttpError

from billable_hours.models import ReportConfig
from billable_hours.utils.logger import setup_logger

logger = setup_logger(__name__)


class GoogleCalendarService:
    """Reads events from Google Calendar for the report window."""

    def __init__(self, calendar_service: Resource, config: ReportConfig):
        """
        Initialize calendar service.

        Args:
            calendar_service: Authenticated Google Calendar API resource
            config: Report configuration (calendar id, result cap)
        """
        self.service = calendar_service
        self.calendar_id = config.calendar_id
        self.max_results = config.max_results

    def fetch_events(
        self,
        time_min: datetime.datetime,
        time_max: datetime.datetime
    ) -> List[Dict[str, Any]]:
        """
        Fetch raw events in [time_min, time_max), recurring events expanded.

        Args:
            time_min: Window start (timezone-aware)
            time_max: Window end (timezone-aware, exclusive)

        Returns:
            List of raw event dicts; empty when the calendar has none

        Raises:
            HttpError: if the API call fails
        """
        logger.info(
            f"Fetching events from '{self.calendar_id}' "
            f"between {time_min.isoformat()} and {time_max.isoformat()}"
        )

        try:
            events_result = self.service.events().list(
                calendarId=self.calendar_id,
                timeMin=time_min.isoformat(),
                timeMax=time_max.isoformat(),
                maxResults=self.max_results,
                singleEvents=True,
                orderBy='startTime'
            ).execute()
        except HttpError as e:
            logger.error(f"Error fetching calendar events: {e}", exc_info=True)
            raise

        events = (events_result or {}).get('items') or []

        if events_result and events_result.get('nextPageToken'):
            logger.warning(
                f"More than {self.max_results} events in window; "
                f"only the first page is reported"
            )

        logger.info(f"Found {len(events)} calendar events")
        return events
