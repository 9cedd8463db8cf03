# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable raw Calendar API payloads and mocks for all tests.
"""

import pytest
from pathlib import Path
from unittest.mock import Mock
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from billable_hours.models import ReportConfig


# ==================== Raw Event Fixtures ====================

@pytest.fixture
def make_raw_event():
    """Factory fixture for raw Calendar API event dicts."""
    counter = {'n': 0}

    def _make(
        summary: str = "Team Sync",
        start: str = "2026-10-12T09:00:00+02:00",
        end: str = "2026-10-12T11:00:00+02:00",
        status: str = "accepted",
        comment=None,
        all_day: bool = False,
        with_self: bool = True,
    ) -> dict:
        counter['n'] += 1
        key = 'date' if all_day else 'dateTime'
        me = {'email': 'me@example.com', 'self': True, 'responseStatus': status}
        if comment is not None:
            me['comment'] = comment
        attendees = [{'email': 'organizer@example.com', 'responseStatus': 'accepted'}]
        if with_self:
            attendees.append(me)
        return {
            'id': f"evt_{counter['n']}",
            'summary': summary,
            'start': {key: start},
            'end': {key: end},
            'attendees': attendees,
        }

    return _make


@pytest.fixture
def scenario_events(make_raw_event):
    """Two accepted events on one Monday plus a declined one."""
    return [
        make_raw_event("Team Sync", comment="ProjectA"),
        make_raw_event(
            "Focus time block",
            start="2026-10-12T13:00:00+02:00",
            end="2026-10-12T14:30:00+02:00",
            comment="ProjectB",
        ),
        make_raw_event(
            "Vendor call",
            start="2026-10-12T15:00:00+02:00",
            end="2026-10-12T16:00:00+02:00",
            status="declined",
            comment="ProjectA",
        ),
    ]


# ==================== Configuration Fixtures ====================

@pytest.fixture
def report_config(tmp_path):
    """Report configuration with token files under tmp_path."""
    return ReportConfig(
        token_path=tmp_path / "token.json",
        credentials_path=tmp_path / "credentials.json",
    )


# ==================== Mock Service Fixtures ====================

@pytest.fixture
def mock_calendar_resource():
    """Mock Google Calendar API resource returning no events."""
    mock = Mock()
    mock.events().list().execute.return_value = {'items': []}
    return mock


@pytest.fixture
def calendar_resource_with(mock_calendar_resource):
    """Factory fixture: mock resource returning the given raw events."""
    def _with(items):
        mock_calendar_resource.events().list().execute.return_value = {'items': items}
        return mock_calendar_resource

    return _with


# ==================== Pytest Markers ====================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
