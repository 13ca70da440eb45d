"""
Booking persistence collaborators.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import AppointmentStatus
from ...core.exceptions import BookingSubmitError
from ...core.models import Appointment, BookingDraft
from ..shop.data import ShopDataProvider


class BookingRepository(ABC):
    """Accepts a completed draft and creates the appointment."""

    @abstractmethod
    async def create(self, draft: BookingDraft, user_id: str) -> Appointment:
        """Create the appointment; raises BookingSubmitError on failure."""
        raise NotImplementedError


class InMemoryBookingRepository(BookingRepository):
    """Stores new appointments next to the fixture appointments."""

    def __init__(self, data: ShopDataProvider):
        self.data = data

    async def create(self, draft: BookingDraft, user_id: str) -> Appointment:
        if not draft.has_required_booking_info():
            raise BookingSubmitError("Draft is incomplete")

        appointment = Appointment(
            id=self.data.next_appointment_id(),
            user_id=user_id,
            vehicle_id=draft.vehicle.id,
            service_id=draft.service.id,
            scheduled_date=draft.date,
            scheduled_time=draft.time,
            status=AppointmentStatus.PENDING,
            notes=draft.note or None,
        )
        return self.data.add_appointment(appointment)
