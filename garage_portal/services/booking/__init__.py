"""
Booking service module.
"""

from .repository import BookingRepository, InMemoryBookingRepository
from .service import BOOKING_SUCCESS_ROUTE, BookingService
from .wizard import BookingWizard

__all__ = [
    "BOOKING_SUCCESS_ROUTE",
    "BookingRepository",
    "BookingService",
    "BookingWizard",
    "InMemoryBookingRepository",
]
