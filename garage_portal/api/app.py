"""
FastAPI application factory and configuration.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import Settings, get_settings
from ..core.logging import configure_logging, get_logger
from ..services.auth import SessionProvider, create_session_provider
from ..services.booking import BookingRepository, BookingService
from ..services.shop import ShopDataProvider, ShopService
from ..utils.date import BookingCalendar
from .errors import register_exception_handlers
from .handlers import (
    AdminHandler,
    AuthHandler,
    BookingHandler,
    CustomerHandler,
    HealthHandler,
)
from .middleware import SecurityHeaders, LoggingMiddleware


logger = get_logger("garage.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Restore the session on startup and drop the subscription on shutdown."""
    provider: SessionProvider = app.state.session_provider
    await provider.initialize()
    yield
    await provider.teardown()
    logger.info("session provider torn down")


def create_app(
    settings: Optional[Settings] = None,
    *,
    data: Optional[ShopDataProvider] = None,
    session_provider: Optional[SessionProvider] = None,
    booking_repository: Optional[BookingRepository] = None,
) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Customer and management portal for the repair shop",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    data = data or ShopDataProvider()
    app.state.settings = settings
    app.state.data = data
    app.state.session_provider = session_provider or create_session_provider(settings, data=data)
    app.state.shop_service = ShopService(data)
    app.state.booking_service = BookingService(
        data, booking_repository, calendar=BookingCalendar(settings.timezone)
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add custom middleware
    app.add_middleware(SecurityHeaders)
    app.add_middleware(LoggingMiddleware)

    register_exception_handlers(app)

    # Initialize handlers
    health_handler = HealthHandler()
    auth_handler = AuthHandler()
    booking_handler = BookingHandler()
    customer_handler = CustomerHandler()
    admin_handler = AdminHandler()

    # Register routes
    app.include_router(health_handler.router, prefix="/health", tags=["health"])
    app.include_router(auth_handler.router, prefix="/auth", tags=["auth"])
    app.include_router(booking_handler.router, prefix="/booking", tags=["booking"])
    app.include_router(customer_handler.router, tags=["customer"])
    app.include_router(admin_handler.router, prefix="/management", tags=["management"])

    return app
