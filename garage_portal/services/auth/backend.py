"""
Identity backend interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, List, Optional

from ...core.enums import AuthMode, Role
from ...core.models import AuthEvent, Profile


AuthListener = Callable[[AuthEvent], Awaitable[None]]


class Subscription:
    """Handle returned by :meth:`IdentityBackend.on_auth_state_change`."""

    def __init__(self, backend: "IdentityBackend", listener: AuthListener):
        self._backend = backend
        self._listener = listener
        self.active = True

    def unsubscribe(self) -> None:
        if not self.active:
            return
        self._backend._remove_listener(self._listener)
        self.active = False


class IdentityBackend(ABC):
    """Strategy Pattern: where sessions and profiles come from."""

    mode: AuthMode

    def __init__(self) -> None:
        self._listeners: List[AuthListener] = []

    def on_auth_state_change(self, listener: AuthListener) -> Subscription:
        """Register ``listener`` for sign-in and sign-out notifications."""
        self._listeners.append(listener)
        return Subscription(self, listener)

    def _remove_listener(self, listener: AuthListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    async def _emit(self, event: AuthEvent) -> None:
        for listener in list(self._listeners):
            await listener(event)

    @abstractmethod
    async def get_session(self) -> Optional[AuthEvent]:
        """Return the session that survived the last process, if any."""
        raise NotImplementedError

    @abstractmethod
    async def sign_in_with_email(self, email: str, password: str) -> None:
        raise NotImplementedError

    @abstractmethod
    async def sign_in_with_oauth(self) -> Optional[str]:
        """Start OAuth; returns the URL to redirect to, or None when already signed in."""
        raise NotImplementedError

    @abstractmethod
    async def sign_up(self, email: str, password: str, full_name: str) -> None:
        raise NotImplementedError

    @abstractmethod
    async def sign_out(self) -> None:
        raise NotImplementedError

    @abstractmethod
    async def login_as_demo(self, role: Role) -> None:
        raise NotImplementedError

    @abstractmethod
    async def fetch_profile(self, user_id: str) -> Profile:
        """Load the profile for ``user_id``; raises ProfileFetchError on failure."""
        raise NotImplementedError
