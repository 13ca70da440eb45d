"""
Core data models for the Garage Portal.
"""

from .booking import Vehicle, Service, Appointment, BookingDraft
from .shop import ServiceOrder, PatioEntry, Alert
from .user import SessionIdentity, Profile, AuthEvent

__all__ = [
    "Vehicle",
    "Service",
    "Appointment",
    "BookingDraft",
    "ServiceOrder",
    "PatioEntry",
    "Alert",
    "SessionIdentity",
    "Profile",
    "AuthEvent",
]
