"""
Unit tests for bache_monitor.utils.datetime_utils
"""
from datetime import datetime, timedelta, timezone

from bache_monitor.utils.datetime_utils import ensure_utc, now_iso, parse_iso, to_iso, utc_now


class TestEnsureUtc:
    """Tests for ensure_utc"""

    def test_none_returns_none(self):
        assert ensure_utc(None) is None

    def test_naive_assumed_utc(self):
        dt = datetime(2025, 1, 15, 12, 0, 0)
        result = ensure_utc(dt)
        assert result.tzinfo == timezone.utc
        assert result.hour == 12

    def test_aware_converted_to_utc(self):
        # UTC+5:30
        dt = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        result = ensure_utc(dt)
        assert result.tzinfo == timezone.utc
        assert result.hour == 6  # 12 - 5.5 = 6:30
        assert result.minute == 30


class TestParseIso:
    """Tests for parse_iso"""

    def test_none_empty_returns_none(self):
        assert parse_iso(None) is None
        assert parse_iso("") is None

    def test_parse_utc_z_suffix(self):
        dt = parse_iso("2024-05-12T15:04:22Z")
        assert dt == datetime(2024, 5, 12, 15, 4, 22, tzinfo=timezone.utc)

    def test_parse_with_milliseconds(self):
        dt = parse_iso("2024-05-12T15:04:22.123Z")
        assert dt.microsecond == 123000

    def test_parse_with_offset(self):
        dt = parse_iso("2024-05-12T10:00:00-05:00")
        assert dt.hour == 15
        assert dt.tzinfo == timezone.utc

    def test_parse_bare_date_is_midnight_utc(self):
        assert parse_iso("2024-05-12") == datetime(2024, 5, 12, tzinfo=timezone.utc)

    def test_invalid_returns_none(self):
        assert parse_iso("not-a-date") is None
        assert parse_iso("2025-13-45T99:99:99") is None


class TestToIso:
    """Tests for to_iso / now_iso"""

    def test_none_returns_none(self):
        assert to_iso(None) is None

    def test_milliseconds_and_z_suffix(self):
        dt = datetime(2024, 5, 12, 15, 4, 22, tzinfo=timezone.utc)
        assert to_iso(dt) == "2024-05-12T15:04:22.000Z"

    def test_naive_treated_as_utc(self):
        assert to_iso(datetime(2024, 5, 12, 15, 4, 22)) == "2024-05-12T15:04:22.000Z"

    def test_now_iso_round_trips(self):
        before = utc_now()
        parsed = parse_iso(now_iso())
        assert parsed.tzinfo == timezone.utc
        assert abs((parsed - before).total_seconds()) < 1
