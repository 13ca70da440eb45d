"""
Authentication handler: sign-in, sign-up, demo login and sign-out.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict

from ...core.enums import Role, SessionState
from ...core.logging import get_logger
from ...services.auth import SessionProvider
from ...services.booking import BookingService
from ...services.navigation import LOGIN_ROUTE, landing_route, menu_for
from ...utils.validation import ValidationUtils
from ..dependencies import get_booking_service, get_session_provider, require_authenticated


logger = get_logger("garage.api.auth")


class LoginRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: str
    password: str


class SignUpRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: str
    password: str
    full_name: str


def session_payload(provider: SessionProvider, redirect_to: Optional[str] = None) -> Dict[str, Any]:
    """Current session as returned by every auth endpoint."""
    payload = {
        "state": provider.state.value,
        "mode": provider.mode.value,
        "user_id": provider.user_id,
        "email": provider.identity.email if provider.identity else None,
        "role": provider.role.value if provider.role else None,
        "profile": provider.profile.model_dump() if provider.profile else None,
    }
    if redirect_to is None and provider.state == SessionState.AUTHENTICATED:
        redirect_to = landing_route(provider.role)
    payload["redirect_to"] = redirect_to
    return payload


def _reject(message: Optional[str]) -> None:
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


class AuthHandler:
    """Handler for session endpoints."""

    def __init__(self):
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        """Setup auth routes."""

        @self.router.get("/session")
        async def get_session(provider: SessionProvider = Depends(get_session_provider)):
            """Current session; never gated so clients can poll while loading."""
            return session_payload(provider)

        @self.router.post("/login")
        async def login(
            body: LoginRequest,
            provider: SessionProvider = Depends(get_session_provider),
        ):
            valid, error = ValidationUtils.validate_email(body.email)
            if not valid:
                _reject(error)
            if not body.password:
                _reject("Senha é obrigatória")

            await provider.sign_in_with_email(body.email.strip(), body.password)
            logger.info(f"login: {body.email.strip()} -> {provider.state.value}")
            return session_payload(provider)

        @self.router.post("/signup")
        async def signup(
            body: SignUpRequest,
            provider: SessionProvider = Depends(get_session_provider),
        ):
            for valid, error in (
                ValidationUtils.validate_email(body.email),
                ValidationUtils.validate_password(body.password),
                ValidationUtils.validate_name(body.full_name),
            ):
                if not valid:
                    _reject(error)

            await provider.sign_up(body.email.strip(), body.password, body.full_name.strip())

            if not provider.is_authenticated:
                # Identity service wants the e-mail confirmed before issuing a session
                payload = session_payload(provider, redirect_to=LOGIN_ROUTE)
                payload["confirmation_required"] = True
                return payload
            return session_payload(provider)

        @self.router.post("/oauth")
        async def oauth(provider: SessionProvider = Depends(get_session_provider)):
            """Start the OAuth flow; remote mode answers with the URL to visit."""
            url = await provider.sign_in_with_oauth()
            payload = session_payload(provider, redirect_to=url)
            payload["authorization_url"] = url
            return payload

        @self.router.post("/demo/{role}")
        async def demo_login(role: str, provider: SessionProvider = Depends(get_session_provider)):
            await provider.login_as_demo(Role.from_string(role))
            return session_payload(provider)

        @self.router.post("/logout")
        async def logout(
            provider: SessionProvider = Depends(get_session_provider),
            booking: BookingService = Depends(get_booking_service),
        ):
            booking.discard_wizard(provider.user_id)
            await provider.sign_out()
            return session_payload(provider, redirect_to=LOGIN_ROUTE)

        @self.router.get("/menu")
        async def menu(provider: SessionProvider = Depends(require_authenticated)):
            """Navigation entries the signed-in role may see."""
            return menu_for(provider.role)
