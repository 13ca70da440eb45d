"""
Customer screens: home, agenda and alerts.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...core.enums import AppointmentStatus
from ...services.auth import SessionProvider
from ...services.shop import ShopService
from ..dependencies import get_shop_service, require_authenticated


class CustomerHandler:
    """Handler for the customer-facing screen queries."""

    def __init__(self):
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        """Setup customer routes."""

        @self.router.get("/home")
        async def home(
            provider: SessionProvider = Depends(require_authenticated),
            shop: ShopService = Depends(get_shop_service),
        ):
            data = shop.home(provider.user_id)
            data["first_name"] = provider.profile.first_name() if provider.profile else None
            data["unread_alerts"] = shop.unread_count(provider.user_id)
            return data

        @self.router.get("/agenda")
        async def agenda(
            status_filter: Optional[AppointmentStatus] = Query(None, alias="status"),
            provider: SessionProvider = Depends(require_authenticated),
            shop: ShopService = Depends(get_shop_service),
        ):
            grouped = shop.agenda(provider.user_id, provider.role, status_filter)
            return {
                "days": [
                    {"date": day, "appointments": appointments}
                    for day, appointments in grouped.items()
                ]
            }

        @self.router.get("/alerts")
        async def alerts(
            unread_only: bool = False,
            provider: SessionProvider = Depends(require_authenticated),
            shop: ShopService = Depends(get_shop_service),
        ):
            return {
                "alerts": [a.model_dump(mode="json") for a in shop.list_alerts(provider.user_id, unread_only)],
                "unread_count": shop.unread_count(provider.user_id),
            }

        @self.router.post("/alerts/read-all")
        async def mark_all_read(
            provider: SessionProvider = Depends(require_authenticated),
            shop: ShopService = Depends(get_shop_service),
        ):
            marked = shop.mark_all_alerts_read(provider.user_id)
            return {"marked": marked, "unread_count": 0}

        @self.router.post("/alerts/{alert_id}/read")
        async def mark_read(
            alert_id: str,
            provider: SessionProvider = Depends(require_authenticated),
            shop: ShopService = Depends(get_shop_service),
        ):
            if not shop.mark_alert_read(provider.user_id, alert_id):
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail="Alerta não encontrado",
                )
            return {"id": alert_id, "unread_count": shop.unread_count(provider.user_id)}
