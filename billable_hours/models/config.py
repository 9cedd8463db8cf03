# File: billable_hours/models/config.py
"""
Data models for Billable Hours configuration.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .enums import ResponseStatus

DEFAULT_SCOPES = ['https://www.googleapis.com/auth/calendar.readonly']
DEFAULT_BUSY_MARKERS = ['Busy', 'Focus time']

TRUTHY = ('1', 'true', 'yes', 'on')
FALSY = ('0', 'false', 'no', 'off', '')


def parse_flag(value) -> bool:
    """Read a boolean from JSON or env text; reject anything ambiguous."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in TRUTHY:
            return True
        if text in FALSY:
            return False
    raise ValueError(f"Expected a boolean flag, got {value!r}")


@dataclass
class ReportConfig:
    """Everything the report pipeline needs, passed in at construction."""
    scopes: List[str] = field(default_factory=lambda: list(DEFAULT_SCOPES))
    token_path: Path = Path("token.json")
    credentials_path: Path = Path("credentials.json")
    accepted_status: ResponseStatus = ResponseStatus.ACCEPTED
    max_billable_hours: float = 40.0
    busy_markers: List[str] = field(default_factory=lambda: list(DEFAULT_BUSY_MARKERS))
    focus_time_tag: str = "FOCUS_TIME"
    untagged_label: str = "Untagged"
    calendar_id: str = "primary"
    max_results: int = 200
    timezone: str = "UTC"
    skip_malformed_events: bool = False

    def __post_init__(self):
        """Coerce loosely typed values (e.g. from JSON or env)."""
        self.token_path = Path(self.token_path)
        self.credentials_path = Path(self.credentials_path)
        if not isinstance(self.accepted_status, ResponseStatus):
            self.accepted_status = ResponseStatus(self.accepted_status)
        self.max_billable_hours = float(self.max_billable_hours)
        if self.max_billable_hours < 0:
            raise ValueError(f"max_billable_hours must not be negative, got {self.max_billable_hours}")
        self.skip_malformed_events = parse_flag(self.skip_malformed_events)
        self.max_results = int(self.max_results)
        if self.max_results <= 0:
            raise ValueError(f"max_results must be positive, got {self.max_results}")

    @classmethod
    def from_dict(cls, data: dict, base: Optional['ReportConfig'] = None) -> 'ReportConfig':
        """Create ReportConfig from dictionary (e.g., loaded from JSON).

        Keys missing from ``data`` fall back to ``base`` (or the defaults).
        Unknown keys are ignored.
        """
        base = base or cls()
        return cls(
            scopes=list(data.get('scopes', base.scopes)),
            token_path=data.get('token_path', base.token_path),
            credentials_path=data.get('credentials_path', base.credentials_path),
            accepted_status=data.get('accepted_status', base.accepted_status),
            max_billable_hours=data.get('max_billable_hours', base.max_billable_hours),
            busy_markers=list(data.get('busy_markers', base.busy_markers)),
            focus_time_tag=data.get('focus_time_tag', base.focus_time_tag),
            untagged_label=data.get('untagged_label', base.untagged_label),
            calendar_id=data.get('calendar_id', base.calendar_id),
            max_results=data.get('max_results', base.max_results),
            timezone=data.get('timezone', base.timezone),
            skip_malformed_events=data.get('skip_malformed_events', base.skip_malformed_events),
        )
