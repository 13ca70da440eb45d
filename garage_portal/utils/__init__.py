"""
Utility modules for the Garage Portal.
"""

from .date import BookingCalendar, BOOKING_TIME_SLOTS, BOOKING_WINDOW_DAYS, candidate_dates
from .validation import ValidationUtils

__all__ = [
    "BookingCalendar",
    "BOOKING_TIME_SLOTS",
    "BOOKING_WINDOW_DAYS",
    "candidate_dates",
    "ValidationUtils",
]
