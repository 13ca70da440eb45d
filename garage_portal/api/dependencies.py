"""
FastAPI dependencies resolving the process-wide services.
"""

from fastapi import Depends, HTTPException, Request, status

from ..core.enums import STAFF_ROLES
from ..services.auth import SessionProvider
from ..services.booking import BookingService
from ..services.shop import ShopService


def get_session_provider(request: Request) -> SessionProvider:
    return request.app.state.session_provider


def get_shop_service(request: Request) -> ShopService:
    return request.app.state.shop_service


def get_booking_service(request: Request) -> BookingService:
    return request.app.state.booking_service


async def require_authenticated(
    provider: SessionProvider = Depends(get_session_provider),
) -> SessionProvider:
    """Reject requests while the session is loading or nobody is signed in."""
    if provider.is_loading:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Sessão ainda carregando",
        )
    if not provider.is_authenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Faça login para continuar",
        )
    return provider


async def require_staff(
    provider: SessionProvider = Depends(require_authenticated),
) -> SessionProvider:
    if provider.role not in STAFF_ROLES:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Acesso restrito à gestão",
        )
    return provider
