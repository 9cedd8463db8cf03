# File: billable_hours/core/config_manager.py
"""
Centralized configuration management for Billable Hours.
Loads settings from environment variables and config files.
"""

import os
import json
from datetime import date, datetime
from pathlib import Path
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv

from billable_hours.models import ReportConfig, DEFAULT_BUSY_MARKERS, DEFAULT_SCOPES

# Load environment variables
load_dotenv()


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from billable_hours/core/

    # Subdirectories
    CONFIG_DIR = BASE_DIR / "config"
    LOGS_DIR = BASE_DIR / "logs"

    # Files
    CONFIG_FILE = CONFIG_DIR / "config.json"
    TOKEN_FILE = Path(os.getenv("BILLABLE_HOURS_TOKEN_FILE", BASE_DIR / "token.json"))
    CREDENTIALS_FILE = Path(os.getenv("BILLABLE_HOURS_CREDENTIALS_FILE", BASE_DIR / "credentials.json"))
    ENV_FILE = BASE_DIR / ".env"

    # Google Services
    GOOGLE_SCOPES: List[str] = list(DEFAULT_SCOPES)
    CALENDAR_ID = os.getenv("BILLABLE_HOURS_CALENDAR_ID", "primary")
    MAX_RESULTS = int(os.getenv("BILLABLE_HOURS_MAX_RESULTS", "200"))

    # Report Settings
    TARGET_TIMEZONE = os.getenv("BILLABLE_HOURS_TIMEZONE", "UTC")
    MAX_BILLABLE_HOURS = float(os.getenv("BILLABLE_HOURS_MAX_HOURS", "40"))
    ACCEPTED_STATUS = "accepted"
    BUSY_MARKERS: List[str] = list(DEFAULT_BUSY_MARKERS)
    FOCUS_TIME_TAG = "FOCUS_TIME"
    UNTAGGED_LABEL = "Untagged"
    SKIP_MALFORMED_EVENTS = os.getenv("BILLABLE_HOURS_SKIP_MALFORMED", "false")

    # Report window: empty start date means "this business week"
    REPORT_START_DATE = os.getenv("BILLABLE_HOURS_START_DATE", "")
    REPORT_DAYS = int(os.getenv("BILLABLE_HOURS_DAYS", "5"))
    # Day groups are keyed by weekday name, so a window may not wrap a week
    MAX_REPORT_DAYS = 7

    NO_EVENTS_MESSAGE = "No upcoming events found."

    @classmethod
    def load_file_overrides(cls) -> Dict[str, Any]:
        """Load optional overrides from config/config.json."""
        if not cls.CONFIG_FILE.exists():
            return {}

        with open(cls.CONFIG_FILE, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a JSON object: {cls.CONFIG_FILE}")
        return data

    @classmethod
    def report_config(cls) -> ReportConfig:
        """Build the ReportConfig handed to the pipeline."""
        defaults = ReportConfig(
            scopes=list(cls.GOOGLE_SCOPES),
            token_path=cls.TOKEN_FILE,
            credentials_path=cls.CREDENTIALS_FILE,
            accepted_status=cls.ACCEPTED_STATUS,
            max_billable_hours=cls.MAX_BILLABLE_HOURS,
            busy_markers=list(cls.BUSY_MARKERS),
            focus_time_tag=cls.FOCUS_TIME_TAG,
            untagged_label=cls.UNTAGGED_LABEL,
            calendar_id=cls.CALENDAR_ID,
            max_results=cls.MAX_RESULTS,
            timezone=cls.TARGET_TIMEZONE,
            skip_malformed_events=cls.SKIP_MALFORMED_EVENTS,
        )
        return ReportConfig.from_dict(cls.load_file_overrides(), base=defaults)

    @classmethod
    def report_start_date(cls) -> Optional[date]:
        """Parse BILLABLE_HOURS_START_DATE, or None when unset."""
        if not cls.REPORT_START_DATE:
            return None
        return datetime.strptime(cls.REPORT_START_DATE, "%Y-%m-%d").date()

    @classmethod
    def validate(cls, config: Optional[ReportConfig] = None) -> bool:
        """Validate the configuration a report would run with.

        Checks the given ReportConfig, or the one built from env and
        config/config.json when none is passed.
        """
        errors = []

        if config is None:
            try:
                config = cls.report_config()
            except ValueError as e:
                errors.append(str(e))

        if config is not None:
            if not config.token_path.exists() and not config.credentials_path.exists():
                errors.append(
                    f"Neither token.json ({config.token_path}) nor credentials.json "
                    f"({config.credentials_path}) found"
                )

            if config.max_billable_hours < 0:
                errors.append(f"max_billable_hours must not be negative: {config.max_billable_hours}")

        if not 0 < cls.REPORT_DAYS <= cls.MAX_REPORT_DAYS:
            errors.append(
                f"BILLABLE_HOURS_DAYS must be between 1 and {cls.MAX_REPORT_DAYS}: {cls.REPORT_DAYS}"
            )

        try:
            cls.report_start_date()
        except ValueError:
            errors.append(f"BILLABLE_HOURS_START_DATE is not YYYY-MM-DD: {cls.REPORT_START_DATE}")

        if errors:
            for error in errors:
                print(f"Configuration Error: {error}")
            return False

        return True
