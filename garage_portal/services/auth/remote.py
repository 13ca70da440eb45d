"""
Remote identity backend backed by the hosted identity service.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import ValidationError

from ...core.enums import AuthEventType, AuthMode, Role
from ...core.exceptions import (
    AuthError,
    IdentityServiceError,
    ProfileFetchError,
)
from ...core.logging import get_logger
from ...core.models import AuthEvent, Profile, SessionIdentity
from ..external import IdentityServiceClient
from .backend import IdentityBackend
from .store import LocalSessionStore


logger = get_logger("garage.auth.remote")


def _identity_from_user(user: Dict[str, Any]) -> SessionIdentity:
    if not isinstance(user, dict) or not user.get("id"):
        raise IdentityServiceError("Identity service returned a user without id")
    return SessionIdentity(id=str(user["id"]), email=user.get("email") or "")


class RemoteBackend(IdentityBackend):
    """Sessions issued by the identity service; the access token is kept locally."""

    mode = AuthMode.REMOTE

    def __init__(
        self,
        client: IdentityServiceClient,
        store: LocalSessionStore,
        token_key: str = "remote_session",
    ):
        super().__init__()
        self.client = client
        self.store = store
        self.token_key = token_key
        self._access_token: Optional[str] = None

    async def get_session(self) -> Optional[AuthEvent]:
        token = self.store.read(self.token_key)
        if not token:
            return None
        try:
            user = await self.client.get_user(token)
        except AuthError:
            logger.info("remote: stored session expired")
            self.store.remove(self.token_key)
            return None
        except IdentityServiceError as e:
            if e.status_code != 404:
                raise
            # The token outlived its user
            logger.info("remote: stored session belongs to a deleted user")
            self.store.remove(self.token_key)
            return None
        self._access_token = token
        return AuthEvent(AuthEventType.INITIAL_SESSION, _identity_from_user(user))

    async def _start_session(self, session: Dict[str, Any]) -> None:
        token = session.get("access_token") if isinstance(session, dict) else None
        if not token:
            raise IdentityServiceError("Identity service returned a session without token")
        identity = _identity_from_user(session.get("user"))
        self._access_token = token
        self.store.write(self.token_key, token)
        logger.info(f"remote: signed in {identity.id}")
        await self._emit(AuthEvent(AuthEventType.SIGNED_IN, identity))

    async def sign_in_with_email(self, email: str, password: str) -> None:
        session = await self.client.sign_in_with_password(email, password)
        await self._start_session(session)

    async def sign_in_with_oauth(self) -> Optional[str]:
        return self.client.get_oauth_url()

    async def sign_up(self, email: str, password: str, full_name: str) -> None:
        result = await self.client.sign_up(email, password, {"full_name": full_name})
        if isinstance(result, dict) and result.get("access_token"):
            await self._start_session(result)
            return
        # The service holds the account until the e-mail is confirmed
        logger.info(f"remote: sign-up for {email} awaiting confirmation")

    async def sign_out(self) -> None:
        token = self._access_token
        self._access_token = None
        self.store.remove(self.token_key)
        if token:
            try:
                await self.client.sign_out(token)
            except (AuthError, IdentityServiceError) as e:
                logger.warning(f"remote: token revocation failed: {e}")
        await self._emit(AuthEvent(AuthEventType.SIGNED_OUT))

    async def login_as_demo(self, role: Role) -> None:
        raise AuthError("Demo login is only available in local mode")

    async def fetch_profile(self, user_id: str) -> Profile:
        try:
            data = await self.client.get_profile_by_id(user_id, self._access_token)
            return Profile.model_validate(data)
        except ProfileFetchError:
            raise
        except (AuthError, IdentityServiceError, ValidationError) as e:
            raise ProfileFetchError(f"Failed to fetch profile {user_id}: {e}") from e
