"""
Management screens restricted to staff roles.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ...core.enums import AppointmentStatus
from ...services.auth import SessionProvider
from ...services.booking import BookingService
from ...services.shop import ShopService
from ...services.shop.service import ALL_CATEGORIES
from ..dependencies import get_booking_service, get_shop_service, require_staff


class AdminHandler:
    """Handler for the management dashboard and registers."""

    def __init__(self):
        self.router = APIRouter(dependencies=[Depends(require_staff)])
        self._setup_routes()

    def _setup_routes(self):
        """Setup management routes."""

        @self.router.get("/dashboard")
        async def dashboard(
            shop: ShopService = Depends(get_shop_service),
            booking: BookingService = Depends(get_booking_service),
        ):
            return shop.dashboard(booking.calendar.today())

        @self.router.get("/patio")
        async def patio(search: str = "", shop: ShopService = Depends(get_shop_service)):
            return {"columns": shop.patio_board(search)}

        @self.router.get("/clients")
        async def clients(search: str = "", shop: ShopService = Depends(get_shop_service)):
            return {"clients": shop.search_clients(search)}

        @self.router.get("/services")
        async def services(
            search: str = "",
            category: str = ALL_CATEGORIES,
            shop: ShopService = Depends(get_shop_service),
        ):
            return shop.service_catalog(search, category)

        @self.router.get("/appointments")
        async def appointments(
            status_filter: Optional[AppointmentStatus] = Query(None, alias="status"),
            provider: SessionProvider = Depends(require_staff),
            shop: ShopService = Depends(get_shop_service),
        ):
            grouped = shop.agenda(provider.user_id, provider.role, status_filter)
            return {
                "days": [
                    {"date": day, "appointments": items}
                    for day, items in grouped.items()
                ]
            }
