"""
Authentication and session enums.
"""

from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Profile roles."""

    CUSTOMER = "customer"
    MANAGEMENT = "management"
    ADMIN = "admin"
    DEVELOPER = "developer"

    @classmethod
    def from_string(cls, value: Optional[str]) -> "Role":
        """Convert a stored role to Role, accepting legacy spellings."""
        if not value:
            return cls.CUSTOMER

        value = value.strip().lower()

        # Legacy values from the profiles table
        if value in ["user", "cliente"]:
            return cls.CUSTOMER
        if value in ["gestao", "gestão"]:
            return cls.MANAGEMENT
        if value == "dev":
            return cls.DEVELOPER

        try:
            return cls(value)
        except ValueError:
            # No elevated role unless one is explicitly recognised
            return cls.CUSTOMER


STAFF_ROLES = frozenset({Role.MANAGEMENT, Role.ADMIN, Role.DEVELOPER})


class SessionState(str, Enum):
    """Session provider lifecycle states."""

    LOADING = "loading"
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


class AuthMode(str, Enum):
    """Which identity backend the provider runs against."""

    LOCAL = "local"
    REMOTE = "remote"


class AuthEventType(str, Enum):
    """Auth-state change notifications published by identity backends."""

    INITIAL_SESSION = "initial_session"
    SIGNED_IN = "signed_in"
    SIGNED_OUT = "signed_out"
