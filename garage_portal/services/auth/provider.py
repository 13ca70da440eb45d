"""
Session provider: the single source of truth for who is signed in.
"""

from __future__ import annotations

from typing import Optional

from ...core.enums import AuthEventType, AuthMode, Role, SessionState
from ...core.exceptions import AuthError, ExternalAPIError, ProfileFetchError
from ...core.logging import get_logger
from ...core.models import AuthEvent, Profile, SessionIdentity
from .backend import IdentityBackend, Subscription


logger = get_logger("garage.auth")


class SessionProvider:
    """Own the current identity and profile and expose the auth operations.

    The backend is fixed at construction. Every operation is forwarded to it
    and the resulting state arrives through the backend's auth-state
    notifications, which the provider subscribes to in :meth:`initialize`.
    Calls are not serialized; callers are expected to avoid double submits.
    """

    def __init__(self, backend: IdentityBackend):
        self._backend = backend
        self.identity: Optional[SessionIdentity] = None
        self.profile: Optional[Profile] = None
        self._loading = True
        self._subscription: Optional[Subscription] = None

    @property
    def mode(self) -> AuthMode:
        return self._backend.mode

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None

    @property
    def state(self) -> SessionState:
        if self._loading:
            return SessionState.LOADING
        if self.identity is None:
            return SessionState.ANONYMOUS
        return SessionState.AUTHENTICATED

    @property
    def role(self) -> Optional[Role]:
        return self.profile.role if self.profile else None

    @property
    def user_id(self) -> Optional[str]:
        """Id of the signed-in user, falling back to the identity when no profile loaded."""
        if self.profile is not None:
            return self.profile.id
        if self.identity is not None:
            return self.identity.id
        return None

    # Lifecycle

    async def initialize(self) -> None:
        """Subscribe to auth changes and restore any previous session."""
        if self._subscription is None:
            self._subscription = self._backend.on_auth_state_change(self._handle_auth_event)
        try:
            event = await self._backend.get_session()
            if event is not None:
                await self._apply(event)
        except (AuthError, ExternalAPIError, ProfileFetchError) as e:
            logger.error(f"session check failed: {e}")
        finally:
            self._loading = False
        logger.info(f"session ready: mode={self.mode.value} state={self.state.value}")

    async def teardown(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    # Operations

    async def sign_in_with_email(self, email: str, password: str) -> None:
        await self._backend.sign_in_with_email(email, password)

    async def sign_in_with_oauth(self) -> Optional[str]:
        return await self._backend.sign_in_with_oauth()

    async def sign_up(self, email: str, password: str, full_name: str) -> None:
        await self._backend.sign_up(email, password, full_name)

    async def sign_out(self) -> None:
        await self._backend.sign_out()
        self._clear()

    async def login_as_demo(self, role: Role) -> None:
        await self._backend.login_as_demo(role)

    # State

    async def _handle_auth_event(self, event: AuthEvent) -> None:
        if event.type == AuthEventType.SIGNED_OUT or event.identity is None:
            self._clear()
            return
        await self._apply(event)

    async def _apply(self, event: AuthEvent) -> None:
        identity = event.identity
        if identity is None:
            self._clear()
            return

        self.identity = identity
        profile = event.profile
        if profile is None:
            profile = await self._load_profile(identity.id)

        if profile is not None and profile.id != identity.id:
            logger.warning(f"discarding profile {profile.id} for identity {identity.id}")
            profile = None

        self.profile = profile

    async def _load_profile(self, user_id: str) -> Optional[Profile]:
        try:
            return await self._backend.fetch_profile(user_id)
        except ProfileFetchError as e:
            logger.error(f"profile fetch failed for {user_id}: {e}")
            return None

    def _clear(self) -> None:
        self.identity = None
        self.profile = None
