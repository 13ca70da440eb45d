"""
Booking-related exceptions.
"""


class BookingFlowError(Exception):
    """Base exception for booking flow errors."""
    pass


class BookingValidationError(BookingFlowError):
    """Exception raised when a wizard move is not allowed from the current state."""
    pass


class BookingSubmitError(BookingFlowError):
    """Exception raised when the booking collaborator fails to create the appointment."""
    pass
