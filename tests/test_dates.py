"""
Tests for booking date rules.
"""

from datetime import date, timedelta

import pytest

from garage_portal.utils.date import (
    BOOKING_TIME_SLOTS,
    BOOKING_WINDOW_DAYS,
    BookingCalendar,
    candidate_dates,
)


def test_friday_start_skips_following_weekend():
    friday = date(2026, 1, 16)
    dates = candidate_dates(friday)

    assert friday not in dates
    assert date(2026, 1, 17) not in dates
    assert date(2026, 1, 18) not in dates
    assert dates[0] == date(2026, 1, 19)
    assert dates[-1] == date(2026, 1, 30)


@pytest.mark.parametrize("offset", range(7))
def test_window_has_no_weekends_and_fixed_length(offset):
    start = date(2026, 3, 2) + timedelta(days=offset)
    dates = candidate_dates(start)

    weekend_days = [
        start + timedelta(days=i)
        for i in range(1, BOOKING_WINDOW_DAYS + 1)
        if (start + timedelta(days=i)).weekday() >= 5
    ]
    assert all(d.weekday() < 5 for d in dates)
    assert len(dates) == BOOKING_WINDOW_DAYS - len(weekend_days)
    assert all(start < d <= start + timedelta(days=BOOKING_WINDOW_DAYS) for d in dates)


def test_calendar_formats_dates_as_iso():
    calendar = BookingCalendar("America/Sao_Paulo")
    assert calendar.available_dates(date(2026, 1, 16))[:2] == ["2026-01-19", "2026-01-20"]


def test_time_slots_are_fixed():
    calendar = BookingCalendar("America/Sao_Paulo")
    assert calendar.available_times() == BOOKING_TIME_SLOTS
    assert BOOKING_TIME_SLOTS == ["08:00", "09:00", "10:00", "11:00",
                                  "14:00", "15:00", "16:00", "17:00"]


def test_relative_label():
    calendar = BookingCalendar("America/Sao_Paulo")
    today = date(2026, 1, 19)

    assert calendar.relative_label("2026-01-19", today) == "today"
    assert calendar.relative_label("2026-01-20", today) == "tomorrow"
    assert calendar.relative_label("2026-01-21", today) is None
    assert calendar.relative_label("not-a-date", today) is None


def test_format_validators():
    calendar = BookingCalendar("America/Sao_Paulo")

    assert calendar.is_valid_iso_date("2026-01-19")
    assert not calendar.is_valid_iso_date("19/01/2026")
    assert calendar.is_valid_time_format("09:00")
    assert not calendar.is_valid_time_format("9h")
    assert calendar.format_for_display("bad") == "bad"


def test_calendar_uses_configured_timezone(monkeypatch):
    monkeypatch.setenv("TIMEZONE", "Asia/Tokyo")
    calendar = BookingCalendar()
    assert calendar.tz.zone == "Asia/Tokyo"
