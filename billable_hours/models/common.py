# File: billable_hours/models/common.py

from datetime import date, datetime
from typing import Optional


def parse_iso_datetime(date_str: Optional[str]) -> Optional[datetime]:
    """Robustly parse ISO date-time strings with 'Z' or offsets."""
    if not date_str:
        return None
    try:
        # fromisoformat only accepts 'Z' natively from Python 3.11
        clean_str = date_str.replace('Z', '+00:00')
        return datetime.fromisoformat(clean_str)
    except ValueError:
        return None


def parse_iso_date(date_str: Optional[str]) -> Optional[date]:
    """Parse an all-day 'YYYY-MM-DD' value."""
    if not date_str:
        return None
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        return None
