"""
Service layer for the Garage Portal.
"""

from .auth import SessionProvider, create_session_provider
from .booking import BookingService, BookingWizard
from .external import IdentityServiceClient
from .shop import ShopDataProvider, ShopService

__all__ = [
    "SessionProvider",
    "create_session_provider",
    "BookingService",
    "BookingWizard",
    "IdentityServiceClient",
    "ShopDataProvider",
    "ShopService",
]
