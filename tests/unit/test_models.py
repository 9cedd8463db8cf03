# File: tests/unit/test_models.py
"""
Unit tests for data models.
Tests the event records, their parsing from API payloads, and report results.
"""

import pytest
from datetime import date, datetime, timedelta, timezone

from billable_hours.models import (
    AggregationResult,
    Attendee,
    CalendarEvent,
    DateOnly,
    MalformedEventError,
    MissingSelfAttendeeError,
    ReportConfig,
    ResponseStatus,
    SkippedEvent,
    TimedInstant,
    Weekday,
    event_from_dict,
    event_time_from_dict,
    parse_flag,
    parse_iso_datetime,
)


# ==================== Parsing Tests ====================

class TestParsing:
    """Tests for raw payload parsing helpers."""

    def test_parse_iso_datetime_with_z(self):
        parsed = parse_iso_datetime("2026-10-12T09:00:00Z")
        assert parsed == datetime(2026, 10, 12, 9, 0, tzinfo=timezone.utc)

    def test_parse_iso_datetime_invalid(self):
        assert parse_iso_datetime("not a date") is None
        assert parse_iso_datetime(None) is None

    def test_event_time_prefers_date_time(self):
        parsed = event_time_from_dict({'dateTime': "2026-10-12T09:00:00+02:00", 'date': "2026-10-13"})
        assert isinstance(parsed, TimedInstant)
        assert parsed.weekday == Weekday.MONDAY

    def test_event_time_falls_back_to_date(self):
        parsed = event_time_from_dict({'date': "2026-10-13"})
        assert isinstance(parsed, DateOnly)
        assert parsed.as_datetime() == datetime(2026, 10, 13, tzinfo=timezone.utc)
        assert parsed.weekday == Weekday.TUESDAY

    def test_event_time_missing(self):
        assert event_time_from_dict({}) is None
        assert event_time_from_dict(None) is None

    def test_event_from_dict(self, make_raw_event):
        event = event_from_dict(make_raw_event("Team Sync", comment="ProjectA"))

        assert event.summary == "Team Sync"
        assert event.event_id.startswith("evt_")
        assert len(event.attendees) == 2
        me = event.self_attendee()
        assert me.response_status == ResponseStatus.ACCEPTED
        assert me.comment == "ProjectA"

    def test_event_from_dict_without_start_raises(self):
        with pytest.raises(MalformedEventError, match="no usable start"):
            event_from_dict({'id': 'x', 'summary': 'Broken', 'end': {'date': '2026-10-12'}})

    def test_event_from_dict_without_end_raises(self):
        with pytest.raises(MalformedEventError, match="no usable end"):
            event_from_dict({'id': 'x', 'summary': 'Broken', 'start': {'date': '2026-10-12'}})

    def test_event_from_dict_without_attendees(self):
        event = event_from_dict({
            'id': 'solo',
            'summary': 'Solo',
            'start': {'dateTime': '2026-10-12T09:00:00Z'},
            'end': {'dateTime': '2026-10-12T10:00:00Z'},
        })
        assert event.attendees == []


# ==================== CalendarEvent Tests ====================

class TestCalendarEvent:
    """Tests for CalendarEvent dataclass."""

    def _timed(self, hour_start, hour_end, **kwargs):
        day = datetime(2026, 10, 14, tzinfo=timezone.utc)
        return CalendarEvent(
            summary=kwargs.pop('summary', "Meeting"),
            start=TimedInstant(day + timedelta(hours=hour_start)),
            end=TimedInstant(day + timedelta(hours=hour_end)),
            **kwargs
        )

    def test_duration_hours_unrounded(self):
        event = self._timed(9, 9 + 1 / 3)
        assert event.duration_hours() == pytest.approx(1 / 3)

    def test_duration_hours_all_day(self):
        event = CalendarEvent(
            summary="Offsite",
            start=DateOnly(date(2026, 10, 12)),
            end=DateOnly(date(2026, 10, 14)),
        )
        assert event.duration_hours() == 48.0
        assert event.is_all_day is True

    def test_end_before_start_raises(self):
        with pytest.raises(MalformedEventError, match="must not precede"):
            self._timed(10, 9)

    def test_zero_length_event_allowed(self):
        assert self._timed(10, 10).duration_hours() == 0.0

    def test_weekday(self):
        assert self._timed(9, 10).weekday == Weekday.WEDNESDAY
        assert Weekday.WEDNESDAY.label == "Wednesday"

    def test_self_attendee_missing_raises(self):
        event = self._timed(9, 10, attendees=[Attendee(email="other@example.com")])
        with pytest.raises(MissingSelfAttendeeError):
            event.self_attendee()

    def test_attendee_status_from_string(self):
        attendee = Attendee(is_self=True, response_status="tentative")
        assert attendee.response_status == ResponseStatus.TENTATIVE

    def test_unknown_status_defaults_to_needs_action(self):
        assert ResponseStatus.parse("maybe") == ResponseStatus.NEEDS_ACTION
        assert ResponseStatus.parse(None) == ResponseStatus.NEEDS_ACTION


# ==================== AggregationResult Tests ====================

class TestAggregationResult:
    """Tests for AggregationResult dataclass."""

    def test_add_keeps_insertion_order(self):
        result = AggregationResult()
        result.add("Wednesday", "B", 1.0)
        result.add("Monday", "A", 2.0)
        result.add("Wednesday", "B", 0.5)

        assert list(result.days) == ["Wednesday", "Monday"]
        assert result.days["Wednesday"]["B"] == 1.5
        assert result.hours_for_day("Monday") == 2.0

    def test_remaining_hours_can_go_negative(self):
        result = AggregationResult(total_hours=42.5, max_billable_hours=40)
        assert result.remaining_hours == -2.5

    def test_to_dict(self):
        result = AggregationResult(total_hours=3.0, event_count=2)
        result.add("Monday", None, 3.0)
        result.skipped.append(SkippedEvent(event_id="x", reason="no start", summary="Broken"))

        data = result.to_dict()

        assert data['days'] == {"Monday": {None: 3.0}}
        assert data['remaining_hours'] == 37.0
        assert data['skipped'] == ["Broken: no start"]


# ==================== ReportConfig Tests ====================

class TestReportConfig:
    """Tests for ReportConfig dataclass."""

    def test_defaults(self):
        config = ReportConfig()

        assert config.scopes == ['https://www.googleapis.com/auth/calendar.readonly']
        assert config.accepted_status == ResponseStatus.ACCEPTED
        assert config.max_billable_hours == 40.0
        assert config.busy_markers == ['Busy', 'Focus time']
        assert config.calendar_id == "primary"

    def test_from_dict_overrides(self):
        config = ReportConfig.from_dict({
            'max_billable_hours': "32",
            'busy_markers': ["Heads down"],
            'accepted_status': "tentative",
            'token_path': "/tmp/tok.json",
            'unknown_key': 1,
        })

        assert config.max_billable_hours == 32.0
        assert config.busy_markers == ["Heads down"]
        assert config.accepted_status == ResponseStatus.TENTATIVE
        assert str(config.token_path) == "/tmp/tok.json"

    def test_from_dict_uses_base(self):
        base = ReportConfig(calendar_id="work@example.com")
        config = ReportConfig.from_dict({'timezone': "Europe/Amsterdam"}, base=base)

        assert config.calendar_id == "work@example.com"
        assert config.timezone == "Europe/Amsterdam"

    def test_invalid_max_results(self):
        with pytest.raises(ValueError, match="max_results"):
            ReportConfig(max_results=0)

    def test_negative_max_billable_hours_rejected(self):
        with pytest.raises(ValueError, match="max_billable_hours"):
            ReportConfig(max_billable_hours=-1)

    def test_from_dict_reads_flag_strings(self):
        assert ReportConfig.from_dict({'skip_malformed_events': "false"}).skip_malformed_events is False
        assert ReportConfig.from_dict({'skip_malformed_events': "0"}).skip_malformed_events is False
        assert ReportConfig.from_dict({'skip_malformed_events': "Yes"}).skip_malformed_events is True
        assert ReportConfig.from_dict({'skip_malformed_events': True}).skip_malformed_events is True

    def test_from_dict_rejects_ambiguous_flag(self):
        with pytest.raises(ValueError, match="boolean flag"):
            ReportConfig.from_dict({'skip_malformed_events': "sometimes"})


class TestParseFlag:
    """Tests for boolean flag parsing."""

    @pytest.mark.parametrize("value,expected", [
        (True, True), (False, False), (1, True), (0, False),
        ("true", True), ("ON", True), (" off ", False), ("", False),
    ])
    def test_accepted_values(self, value, expected):
        assert parse_flag(value) is expected

    @pytest.mark.parametrize("value", ["maybe", 2, None, 1.5])
    def test_rejected_values(self, value):
        with pytest.raises(ValueError):
            parse_flag(value)
