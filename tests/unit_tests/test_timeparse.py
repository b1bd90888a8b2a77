"""Tests for slot time and report date parsing."""

from datetime import date, datetime, time

import pytest

from turf_admin.errors import TimeFormatError
from turf_admin.services.timeparse import (
    combine_window,
    format_display_time,
    normalize_slot_time,
    parse_booking_window,
    parse_display_time,
    parse_report_date,
    parse_slot_range,
    parse_slot_time,
)


class TestParseSlotTime:
    def test_twelve_hour(self):
        assert parse_slot_time("07:00 AM") == time(7, 0)
        assert parse_slot_time("12:30 PM") == time(12, 30)
        assert parse_slot_time("12:00 AM") == time(0, 0)

    def test_twelve_hour_with_seconds_and_lowercase(self):
        assert parse_slot_time("09:15:00 pm") == time(21, 15)

    def test_twenty_four_hour(self):
        assert parse_slot_time("18:30:00") == time(18, 30)
        assert parse_slot_time("06:05") == time(6, 5)

    def test_explicit_format(self):
        assert parse_slot_time("07:00 AM", "12h") == time(7, 0)
        assert parse_slot_time("19:00:00", "24h") == time(19, 0)

    def test_explicit_format_mismatch_raises(self):
        with pytest.raises(TimeFormatError):
            parse_slot_time("19:00:00", "12h")

    @pytest.mark.parametrize("raw", ["", "7 o'clock", "25:00", "13:00 PM", "ab:cd"])
    def test_garbage_raises(self, raw):
        with pytest.raises(TimeFormatError):
            parse_slot_time(raw)

    def test_time_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_slot_time("nope")


class TestDisplayFormat:
    def test_normalize_twenty_four_hour_to_display(self):
        assert normalize_slot_time("18:30:00") == "06:30 PM"

    def test_normalize_keeps_display_format(self):
        assert normalize_slot_time("07:00 AM") == "07:00 AM"

    @pytest.mark.parametrize("value", [time(0, 0), time(7, 30), time(12, 0), time(23, 45)])
    def test_format_then_parse_is_identity(self, value):
        assert parse_display_time(format_display_time(value)) == value


class TestParseReportDate:
    def test_us_style_with_time(self):
        assert parse_report_date("5/1/2025 12:00:00 AM") == datetime(2025, 5, 1, 0, 0)

    def test_us_style_padded_afternoon(self):
        assert parse_report_date("12/31/2024 03:45:10 PM") == datetime(2024, 12, 31, 15, 45, 10)

    def test_us_style_date_only(self):
        assert parse_report_date("5/1/2025") == datetime(2025, 5, 1)

    def test_iso_date(self):
        assert parse_report_date("2025-05-03") == datetime(2025, 5, 3)

    def test_iso_with_offset_keeps_wall_clock(self):
        parsed = parse_report_date("2025-05-03T10:30:00+05:30")
        assert parsed == datetime(2025, 5, 3, 10, 30)
        assert parsed.tzinfo is None

    @pytest.mark.parametrize("raw", ["", "   ", "31/31/2025", "yesterday"])
    def test_invalid_raises(self, raw):
        with pytest.raises(TimeFormatError):
            parse_report_date(raw)


class TestSlotRange:
    def test_parse(self):
        assert parse_slot_range("07:00-08:30") == (time(7, 0), time(8, 30))

    def test_tolerates_spaces(self):
        assert parse_slot_range("07:00 - 08:30") == (time(7, 0), time(8, 30))

    @pytest.mark.parametrize("raw", ["", "07:00", "07:00-08:00-09:00", "7am-8am"])
    def test_invalid_raises(self, raw):
        with pytest.raises(TimeFormatError):
            parse_slot_range(raw)

    def test_window_crossing_midnight_ends_next_day(self):
        start, end = combine_window(date(2025, 5, 3), time(23, 0), time(0, 30))
        assert start == datetime(2025, 5, 3, 23, 0)
        assert end == datetime(2025, 5, 4, 0, 30)


class TestBookingWindow:
    def test_report_date_and_slots_combine(self):
        window = parse_booking_window("5/1/2025 12:00:00 AM", "07:00-08:30")
        assert window.start == datetime(2025, 5, 1, 7, 0)
        assert window.end == datetime(2025, 5, 1, 8, 30)
        assert window.booked_at == datetime(2025, 5, 1, 0, 0)

    def test_bad_date_raises(self):
        with pytest.raises(TimeFormatError):
            parse_booking_window("not a date", "07:00-08:30")
