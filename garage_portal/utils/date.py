"""
Date and time utilities for booking.
"""

from datetime import date, datetime, timedelta
from typing import List, Optional
import pytz

from ..config import get_settings


BOOKING_WINDOW_DAYS = 14
BOOKING_TIME_SLOTS = [
    "08:00", "09:00", "10:00", "11:00",
    "14:00", "15:00", "16:00", "17:00",
]
# date.weekday(): Saturday=5, Sunday=6
_WEEKEND_DAYS = {5, 6}


def candidate_dates(start: date, days: int = BOOKING_WINDOW_DAYS) -> List[date]:
    """
    Return the bookable dates in the window after ``start``.

    The window covers the ``days`` calendar days following ``start``
    (``start`` itself is not included) and drops Saturdays and Sundays.
    """
    result = []
    for offset in range(1, days + 1):
        day = start + timedelta(days=offset)
        if day.weekday() not in _WEEKEND_DAYS:
            result.append(day)
    return result


class BookingCalendar:
    """Calendar rules for the booking wizard, anchored to the shop timezone."""

    def __init__(self, tz_name: Optional[str] = None):
        if tz_name is None:
            tz_name = get_settings().timezone
        self.tz = pytz.timezone(tz_name)

    def today(self) -> date:
        """Get today's date in the shop timezone."""
        return datetime.now(self.tz).date()

    def available_dates(self, start: Optional[date] = None) -> List[str]:
        """
        Get selectable dates in YYYY-MM-DD format.

        Args:
            start: Anchor date; defaults to today in the shop timezone

        Returns:
            Weekday dates in the next 14 days
        """
        anchor = start or self.today()
        return [d.strftime("%Y-%m-%d") for d in candidate_dates(anchor)]

    def available_times(self) -> List[str]:
        """Get the fixed daily time slots."""
        return list(BOOKING_TIME_SLOTS)

    def is_valid_iso_date(self, date_str: str) -> bool:
        """Check if string is a valid ISO date (YYYY-MM-DD)."""
        try:
            datetime.strptime(date_str, "%Y-%m-%d")
            return True
        except (TypeError, ValueError):
            return False

    def is_valid_time_format(self, time_str: str) -> bool:
        """Check if string is a valid time format (HH:MM)."""
        try:
            datetime.strptime(time_str, "%H:%M")
            return True
        except (TypeError, ValueError):
            return False

    def relative_label(self, date_str: str, today: Optional[date] = None) -> Optional[str]:
        """Return "today" or "tomorrow" when ``date_str`` is one of them."""
        if not self.is_valid_iso_date(date_str):
            return None
        anchor = today or self.today()
        day = datetime.strptime(date_str, "%Y-%m-%d").date()
        if day == anchor:
            return "today"
        if day == anchor + timedelta(days=1):
            return "tomorrow"
        return None

    def format_for_display(self, date_str: str) -> str:
        """Format date string for display purposes."""
        if not self.is_valid_iso_date(date_str):
            return date_str
        return datetime.strptime(date_str, "%Y-%m-%d").strftime("%A, %d %B")
