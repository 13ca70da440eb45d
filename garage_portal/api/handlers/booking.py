"""
Booking wizard handler.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict

from ...services.auth import SessionProvider
from ...services.booking import BOOKING_SUCCESS_ROUTE, BookingService, BookingWizard
from ..dependencies import get_booking_service, require_authenticated


class StartWizardRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    service_id: Optional[str] = None


class VehicleSelection(BaseModel):
    model_config = ConfigDict(extra="forbid")

    vehicle_id: str


class ServiceSelection(BaseModel):
    model_config = ConfigDict(extra="forbid")

    service_id: str


class DateSelection(BaseModel):
    model_config = ConfigDict(extra="forbid")

    date: str


class TimeSelection(BaseModel):
    model_config = ConfigDict(extra="forbid")

    time: str


class NoteUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    note: str = ""


class BookingHandler:
    """Handler for the booking wizard endpoints.

    Open wizards live in the BookingService, one per user id.
    """

    def __init__(self):
        self.router = APIRouter()
        self._setup_routes()

    def _wizard_for(self, provider: SessionProvider, booking: BookingService) -> BookingWizard:
        wizard = booking.current_wizard(provider.user_id)
        if wizard is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Nenhum agendamento em andamento",
            )
        return wizard

    def _setup_routes(self):
        """Setup booking routes."""

        @self.router.get("/slots")
        async def get_slots(
            provider: SessionProvider = Depends(require_authenticated),
            booking: BookingService = Depends(get_booking_service),
        ):
            return booking.get_available_slots()

        @self.router.post("/wizard")
        async def start_wizard(
            body: Optional[StartWizardRequest] = None,
            provider: SessionProvider = Depends(require_authenticated),
            booking: BookingService = Depends(get_booking_service),
        ):
            service_id = body.service_id if body else None
            wizard = booking.start_wizard(provider.user_id, preselected_service_id=service_id)
            return wizard.snapshot()

        @self.router.get("/wizard")
        async def get_wizard(
            provider: SessionProvider = Depends(require_authenticated),
            booking: BookingService = Depends(get_booking_service),
        ):
            return self._wizard_for(provider, booking).snapshot()

        @self.router.delete("/wizard")
        async def discard_wizard(
            provider: SessionProvider = Depends(require_authenticated),
            booking: BookingService = Depends(get_booking_service),
        ):
            booking.discard_wizard(provider.user_id)
            return {"status": "discarded"}

        @self.router.post("/wizard/vehicle")
        async def select_vehicle(
            body: VehicleSelection,
            provider: SessionProvider = Depends(require_authenticated),
            booking: BookingService = Depends(get_booking_service),
        ):
            wizard = self._wizard_for(provider, booking)
            wizard.select_vehicle(body.vehicle_id)
            return wizard.snapshot()

        @self.router.post("/wizard/service")
        async def select_service(
            body: ServiceSelection,
            provider: SessionProvider = Depends(require_authenticated),
            booking: BookingService = Depends(get_booking_service),
        ):
            wizard = self._wizard_for(provider, booking)
            wizard.select_service(body.service_id)
            return wizard.snapshot()

        @self.router.post("/wizard/date")
        async def select_date(
            body: DateSelection,
            provider: SessionProvider = Depends(require_authenticated),
            booking: BookingService = Depends(get_booking_service),
        ):
            wizard = self._wizard_for(provider, booking)
            wizard.select_date(body.date)
            return wizard.snapshot()

        @self.router.post("/wizard/time")
        async def select_time(
            body: TimeSelection,
            provider: SessionProvider = Depends(require_authenticated),
            booking: BookingService = Depends(get_booking_service),
        ):
            wizard = self._wizard_for(provider, booking)
            wizard.select_time(body.time)
            return wizard.snapshot()

        @self.router.post("/wizard/note")
        async def set_note(
            body: NoteUpdate,
            provider: SessionProvider = Depends(require_authenticated),
            booking: BookingService = Depends(get_booking_service),
        ):
            wizard = self._wizard_for(provider, booking)
            wizard.set_note(body.note)
            return wizard.snapshot()

        @self.router.post("/wizard/advance")
        async def advance(
            provider: SessionProvider = Depends(require_authenticated),
            booking: BookingService = Depends(get_booking_service),
        ):
            wizard = self._wizard_for(provider, booking)
            wizard.advance()
            return wizard.snapshot()

        @self.router.post("/wizard/back")
        async def back(
            provider: SessionProvider = Depends(require_authenticated),
            booking: BookingService = Depends(get_booking_service),
        ):
            wizard = self._wizard_for(provider, booking)
            wizard.back()
            return wizard.snapshot()

        @self.router.post("/wizard/confirm")
        async def confirm(
            provider: SessionProvider = Depends(require_authenticated),
            booking: BookingService = Depends(get_booking_service),
        ):
            wizard = self._wizard_for(provider, booking)
            appointment = await booking.confirm(wizard, provider.user_id)
            return {
                "appointment": appointment.model_dump(mode="json"),
                "redirect_to": BOOKING_SUCCESS_ROUTE,
            }
