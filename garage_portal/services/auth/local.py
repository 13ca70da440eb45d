"""
Local identity backend used when no identity service is configured.
"""

from __future__ import annotations

from typing import Optional
from uuid import uuid4

from pydantic import ValidationError

from ...core.enums import AuthEventType, AuthMode, Role
from ...core.exceptions import AuthError, ProfileNotFoundError
from ...core.logging import get_logger
from ...core.models import AuthEvent, Profile
from ..shop.data import ShopDataProvider
from .backend import IdentityBackend
from .store import LocalSessionStore


logger = get_logger("garage.auth.local")


class LocalBackend(IdentityBackend):
    """Fixture-backed sessions persisted as a single local record.

    Any e-mail that does not belong to a fixture user signs in as the default
    customer. That is a demo affordance and performs no credential check.
    """

    mode = AuthMode.LOCAL

    def __init__(
        self,
        data: ShopDataProvider,
        store: LocalSessionStore,
        session_key: str = "mock_user",
    ):
        super().__init__()
        self.data = data
        self.store = store
        self.session_key = session_key

    def _load_persisted(self) -> Optional[Profile]:
        raw = self.store.read(self.session_key)
        if raw is None:
            return None
        try:
            return Profile.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"local: dropping unreadable session record: {e}")
            self.store.remove(self.session_key)
            return None

    async def get_session(self) -> Optional[AuthEvent]:
        profile = self._load_persisted()
        if profile is None:
            return None
        return AuthEvent(AuthEventType.INITIAL_SESSION, profile.identity(), profile)

    async def _sign_in(self, profile: Profile) -> None:
        self.store.write(self.session_key, profile.model_dump_json())
        logger.info(f"local: signed in {profile.id} as {profile.role.value}")
        await self._emit(AuthEvent(AuthEventType.SIGNED_IN, profile.identity(), profile))

    async def sign_in_with_email(self, email: str, password: str) -> None:
        user = self.data.find_user_by_email(email)
        if user is not None:
            await self._sign_in(user)
            return
        logger.info("local: unknown e-mail, falling back to demo customer")
        await self.login_as_demo(Role.CUSTOMER)

    async def sign_in_with_oauth(self) -> Optional[str]:
        await self.login_as_demo(Role.CUSTOMER)
        return None

    async def sign_up(self, email: str, password: str, full_name: str) -> None:
        profile = Profile.new_customer(str(uuid4()), email, full_name)
        await self._sign_in(profile)

    async def sign_out(self) -> None:
        self.store.remove(self.session_key)
        await self._emit(AuthEvent(AuthEventType.SIGNED_OUT))

    async def login_as_demo(self, role: Role) -> None:
        user = self.data.find_user_by_role(role) or self.data.default_user()
        if user is None:
            raise AuthError("No demo users available")
        await self._sign_in(user)

    async def fetch_profile(self, user_id: str) -> Profile:
        persisted = self._load_persisted()
        if persisted is not None and persisted.id == user_id:
            return persisted
        for user in self.data.list_users():
            if user.id == user_id:
                return user
        raise ProfileNotFoundError(f"Profile not found for {user_id}")
