"""
Enums for the Garage Portal.
"""

from .auth import Role, STAFF_ROLES, SessionState, AuthMode, AuthEventType
from .booking import (
    BookingStep,
    AppointmentStatus,
    ServiceOrderStatus,
    PatioStatus,
    AlertType,
)

__all__ = [
    "Role",
    "STAFF_ROLES",
    "SessionState",
    "AuthMode",
    "AuthEventType",
    "BookingStep",
    "AppointmentStatus",
    "ServiceOrderStatus",
    "PatioStatus",
    "AlertType",
]
