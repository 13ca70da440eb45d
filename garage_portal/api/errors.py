"""
Exception handlers mapping domain errors to HTTP responses.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ..core.exceptions import (
    AuthError,
    BookingSubmitError,
    BookingValidationError,
    ExternalAPIError,
    ProfileFetchError,
)
from ..core.logging import get_logger


logger = get_logger("garage.api")

# Substrings of identity-service messages and their user-facing translation
_AUTH_MESSAGES = [
    ("invalid login credentials", "Email ou senha inválidos"),
    ("invalid credentials", "Email ou senha inválidos"),
    ("already registered", "Este email já está cadastrado"),
    ("email not confirmed", "Confirme seu email antes de entrar"),
    ("password should be", "Senha muito fraca"),
    ("demo login", "Login de demonstração disponível apenas no modo local"),
]


def localize_auth_error(message: str) -> str:
    """Translate an identity-service message to Portuguese."""
    lowered = (message or "").lower()
    for needle, translated in _AUTH_MESSAGES:
        if needle in lowered:
            return translated
    return "Não foi possível autenticar. Tente novamente."


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AuthError)
    async def handle_auth_error(request: Request, exc: AuthError):
        logger.warning(f"auth error on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": localize_auth_error(str(exc))},
        )

    @app.exception_handler(BookingValidationError)
    async def handle_booking_validation(request: Request, exc: BookingValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc)},
        )

    @app.exception_handler(BookingSubmitError)
    async def handle_booking_submit(request: Request, exc: BookingSubmitError):
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "Não foi possível confirmar o agendamento. Tente novamente."},
        )

    @app.exception_handler(ExternalAPIError)
    async def handle_external_error(request: Request, exc: ExternalAPIError):
        logger.error(f"external service error on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "Serviço de autenticação indisponível"},
        )

    @app.exception_handler(ProfileFetchError)
    async def handle_profile_error(request: Request, exc: ProfileFetchError):
        logger.error(f"profile error on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "Serviço de autenticação indisponível"},
        )
