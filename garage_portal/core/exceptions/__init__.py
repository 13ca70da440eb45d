"""
Custom exceptions for the Garage Portal.
"""

from .auth import AuthError, ProfileFetchError, ProfileNotFoundError
from .booking import BookingFlowError, BookingValidationError, BookingSubmitError
from .external import ExternalAPIError, IdentityServiceError

__all__ = [
    "AuthError",
    "ProfileFetchError",
    "ProfileNotFoundError",
    "BookingFlowError",
    "BookingValidationError",
    "BookingSubmitError",
    "ExternalAPIError",
    "IdentityServiceError",
]
