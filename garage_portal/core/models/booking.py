"""
Booking-related data models.
"""

from dataclasses import dataclass
from typing import Optional
from pydantic import BaseModel, ConfigDict

from ..enums import AppointmentStatus, BookingStep


class Vehicle(BaseModel):
    """A customer's vehicle on file."""

    model_config = ConfigDict(extra="forbid")

    id: str
    user_id: str
    brand: str
    model: str
    year: int
    plate: str
    color: Optional[str] = None
    mileage: Optional[int] = None

    def label(self) -> str:
        return f"{self.brand} {self.model}"


class Service(BaseModel):
    """Catalog service offered by the shop."""

    model_config = ConfigDict(extra="forbid")

    id: str
    name: str
    description: Optional[str] = None
    category: str
    price: float
    duration_minutes: int
    is_active: bool = True


class Appointment(BaseModel):
    """A scheduled visit."""

    model_config = ConfigDict(extra="forbid")

    id: str
    user_id: str
    vehicle_id: str
    service_id: str
    scheduled_date: str  # YYYY-MM-DD format
    scheduled_time: str  # HH:MM format
    status: AppointmentStatus = AppointmentStatus.PENDING
    notes: Optional[str] = None


@dataclass
class BookingDraft:
    """In-progress appointment accumulated by the booking wizard."""

    vehicle: Optional[Vehicle] = None
    service: Optional[Service] = None
    date: Optional[str] = None  # YYYY-MM-DD format
    time: Optional[str] = None  # HH:MM format
    note: str = ""
    step: BookingStep = BookingStep.VEHICLE

    def has_required_booking_info(self) -> bool:
        """Check if every selection needed to confirm is present."""
        return all([self.vehicle, self.service, self.date, self.time])

    def to_dict(self) -> dict:
        return {
            "step": self.step.value,
            "vehicle": self.vehicle.model_dump() if self.vehicle else None,
            "service": self.service.model_dump() if self.service else None,
            "date": self.date,
            "time": self.time,
            "note": self.note,
        }
