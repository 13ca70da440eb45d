"""
Booking and shop-floor enums.
"""

from enum import Enum


class BookingStep(str, Enum):
    """Enumeration of the booking wizard steps, in order."""

    VEHICLE = "vehicle"
    SERVICE = "service"
    DATETIME = "datetime"
    CONFIRM = "confirm"


class AppointmentStatus(str, Enum):
    """Appointment status enumeration."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ServiceOrderStatus(str, Enum):
    """Service order status enumeration."""

    OPEN = "open"
    IN_PROGRESS = "in_progress"
    WAITING_APPROVAL = "waiting_approval"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PatioStatus(str, Enum):
    """Where a vehicle sits on the patio kanban board."""

    WAITING = "waiting"
    IN_SERVICE = "in_service"
    READY = "ready"
    DELIVERED = "delivered"


class AlertType(str, Enum):
    """Customer alert categories."""

    REMINDER = "reminder"
    MAINTENANCE = "maintenance"
    PROMO = "promo"
    INFO = "info"
