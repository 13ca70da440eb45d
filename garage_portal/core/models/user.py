"""
User, identity and profile models.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator

from ..enums import Role, AuthEventType


def _now_iso() -> str:
    """Get current UTC datetime in ISO format."""
    return datetime.now(timezone.utc).isoformat()


class SessionIdentity(BaseModel):
    """The signed-in principal."""

    model_config = ConfigDict(extra="forbid")

    id: str
    email: str = ""


class Profile(BaseModel):
    """Extended user record attached to an identity."""

    # Remote rows may carry columns this portal does not use
    model_config = ConfigDict(extra="ignore")

    id: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    phone: Optional[str] = None
    avatar_url: Optional[str] = None
    role: Role = Role.CUSTOMER
    created_at: str = ""
    updated_at: str = ""

    @field_validator("role", mode="before")
    @classmethod
    def _normalize_role(cls, value):
        if isinstance(value, Role):
            return value
        return Role.from_string(value)

    @classmethod
    def new_customer(cls, user_id: str, email: str, full_name: str) -> "Profile":
        """Create a freshly signed-up customer profile."""
        now = _now_iso()
        return cls(
            id=user_id,
            email=email,
            full_name=full_name,
            phone=None,
            avatar_url=None,
            role=Role.CUSTOMER,
            created_at=now,
            updated_at=now,
        )

    def identity(self) -> SessionIdentity:
        """Get the session identity this profile belongs to."""
        return SessionIdentity(id=self.id, email=self.email or "")

    def first_name(self) -> Optional[str]:
        if not self.full_name:
            return None
        return self.full_name.split(" ")[0]


@dataclass(frozen=True)
class AuthEvent:
    """Auth-state change published by an identity backend."""

    type: AuthEventType
    identity: Optional[SessionIdentity] = None
    profile: Optional[Profile] = None
