"""
Health check handler.
"""

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from datetime import datetime

from ...services.auth import SessionProvider
from ..dependencies import get_session_provider


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    timestamp: str
    version: str
    uptime: float
    auth_mode: str


class HealthHandler:
    """Handler for health check endpoints."""

    def __init__(self):
        self.start_time = datetime.now()
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        """Setup health check routes."""

        @self.router.get("/", response_model=HealthResponse)
        async def health_check(
            request: Request,
            provider: SessionProvider = Depends(get_session_provider),
        ):
            """Basic health check endpoint."""
            uptime = (datetime.now() - self.start_time).total_seconds()
            return HealthResponse(
                status="healthy",
                timestamp=datetime.now().isoformat(),
                version=request.app.state.settings.app_version,
                uptime=uptime,
                auth_mode=provider.mode.value,
            )

        @self.router.get("/ready")
        async def readiness_check(provider: SessionProvider = Depends(get_session_provider)):
            """Ready once the session check has finished."""
            if provider.is_loading:
                return {"status": "loading"}
            return {"status": "ready"}

        @self.router.get("/live")
        async def liveness_check():
            """Liveness check for container orchestration."""
            return {"status": "alive"}
