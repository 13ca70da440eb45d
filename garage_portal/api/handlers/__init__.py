"""
HTTP handlers.
"""

from .admin import AdminHandler
from .auth import AuthHandler
from .booking import BookingHandler
from .health import HealthHandler
from .shop import CustomerHandler

__all__ = [
    "AdminHandler",
    "AuthHandler",
    "BookingHandler",
    "CustomerHandler",
    "HealthHandler",
]
