"""
Booking service for starting and confirming appointment bookings.
"""

from datetime import date
from typing import Dict, List, Optional

from ...core.models import Appointment
from ...core.logging import get_logger
from ...utils.date import BookingCalendar
from ..shop.data import ShopDataProvider
from .repository import BookingRepository, InMemoryBookingRepository
from .wizard import BookingWizard


logger = get_logger("garage.booking")

BOOKING_SUCCESS_ROUTE = "/booking/success"


class BookingService:
    """Service for handling appointment bookings.

    Keeps one open wizard per user; starting a new one replaces the old.
    """

    def __init__(
        self,
        data: ShopDataProvider,
        repository: Optional[BookingRepository] = None,
        calendar: Optional[BookingCalendar] = None,
    ):
        self.data = data
        self.repository = repository or InMemoryBookingRepository(data)
        self.calendar = calendar or BookingCalendar()
        self._wizards: Dict[str, BookingWizard] = {}

    def get_available_dates(self, start: Optional[date] = None) -> List[str]:
        """Get bookable dates starting after ``start`` (default: today)."""
        return self.calendar.available_dates(start)

    def get_available_times(self) -> List[str]:
        return self.calendar.available_times()

    def get_available_slots(self, start: Optional[date] = None) -> Dict[str, List[str]]:
        return {
            "dates": self.get_available_dates(start),
            "times": self.get_available_times(),
        }

    def start_wizard(
        self,
        user_id: str,
        preselected_service_id: Optional[str] = None,
        start: Optional[date] = None,
    ) -> BookingWizard:
        """
        Open a wizard for ``user_id`` over their own vehicles.

        Args:
            user_id: Caller's user id
            preselected_service_id: Service id from a deep link, if any
            start: Anchor date for the date window; defaults to today

        Returns:
            A fresh BookingWizard, now the user's open wizard
        """
        wizard = BookingWizard(
            vehicles=self.data.get_vehicles_by_user_id(user_id),
            services=self.data.list_services(active_only=True),
            available_dates=self.get_available_dates(start),
            time_slots=self.get_available_times(),
            preselected_service_id=preselected_service_id,
        )
        logger.info(
            f"wizard started for {user_id} at step {wizard.step.value}"
            + (f" with service {preselected_service_id}" if preselected_service_id else "")
        )
        self._wizards[user_id] = wizard
        return wizard

    def current_wizard(self, user_id: Optional[str]) -> Optional[BookingWizard]:
        return self._wizards.get(user_id)

    def discard_wizard(self, user_id: Optional[str]) -> bool:
        """Drop the user's open wizard, if any."""
        wizard = self._wizards.pop(user_id, None)
        if wizard is not None:
            logger.info(f"wizard discarded for {user_id} at step {wizard.step.value}")
        return wizard is not None

    async def confirm(self, wizard: BookingWizard, user_id: str) -> Appointment:
        appointment = await wizard.confirm(self.repository, user_id)
        if self._wizards.get(user_id) is wizard:
            del self._wizards[user_id]
        return appointment
