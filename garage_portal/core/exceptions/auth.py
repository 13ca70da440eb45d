"""
Authentication-related exceptions.
"""


class AuthError(Exception):
    """Exception raised when sign-in, sign-up or sign-out is rejected."""
    pass


class ProfileFetchError(Exception):
    """Exception raised when the profile for an identity cannot be loaded."""
    pass


class ProfileNotFoundError(ProfileFetchError):
    """Exception raised when no profile row exists for an identity."""
    pass
