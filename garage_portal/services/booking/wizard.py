"""
Booking wizard managing the vehicle → service → datetime → confirm flow.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional, Sequence

from ...core.enums import BookingStep
from ...core.exceptions import BookingSubmitError, BookingValidationError
from ...core.logging import get_logger
from ...core.models import Appointment, BookingDraft, Service, Vehicle
from ...utils.date import BOOKING_TIME_SLOTS
from ...utils.validation import MAX_NOTE_LENGTH, ValidationUtils

if TYPE_CHECKING:
    from .repository import BookingRepository


logger = get_logger("garage.booking")


class BookingWizard:
    """Manage transitions and selections on a BookingDraft."""

    _STEP_ORDER = [
        BookingStep.VEHICLE,
        BookingStep.SERVICE,
        BookingStep.DATETIME,
        BookingStep.CONFIRM,
    ]

    # Draft fields that must be filled before moving forward from each step
    _EXIT_REQUIREMENTS: Dict[BookingStep, List[str]] = {
        BookingStep.VEHICLE: ["vehicle"],
        BookingStep.SERVICE: ["service"],
        BookingStep.DATETIME: ["date", "time"],
        BookingStep.CONFIRM: [],
    }

    def __init__(
        self,
        vehicles: Sequence[Vehicle],
        services: Sequence[Service],
        available_dates: Sequence[str],
        *,
        time_slots: Sequence[str] = BOOKING_TIME_SLOTS,
        preselected_service_id: Optional[str] = None,
    ) -> None:
        self.vehicles = list(vehicles)
        self.services = [s for s in services if s.is_active]
        self.available_dates = list(available_dates)
        self.time_slots = list(time_slots)
        self.draft = BookingDraft()
        self.closed = False

        if len(self.vehicles) == 1:
            self.draft.vehicle = self.vehicles[0]
            self.draft.step = BookingStep.SERVICE

        # A deep-linked service is only a default; the service step still shows
        if preselected_service_id:
            self.draft.service = self._find_service(preselected_service_id)

    @property
    def step(self) -> BookingStep:
        return self.draft.step

    @property
    def step_number(self) -> int:
        """1-based position of the current step."""
        return self._STEP_ORDER.index(self.draft.step) + 1

    def _find_service(self, service_id: str) -> Optional[Service]:
        for service in self.services:
            if service.id == service_id:
                return service
        return None

    def _find_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        for vehicle in self.vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        return None

    def _require_open(self) -> None:
        if self.closed:
            raise BookingValidationError("Booking already confirmed")

    def _require_step(self, step: BookingStep) -> None:
        self._require_open()
        if self.draft.step != step:
            raise BookingValidationError(
                f"Cannot select {step.value} while on step '{self.draft.step.value}'"
            )

    def _missing_for_exit(self) -> List[str]:
        return [
            name
            for name in self._EXIT_REQUIREMENTS[self.draft.step]
            if not getattr(self.draft, name)
        ]

    def _move(self, to_step: BookingStep) -> None:
        prev_step = self.draft.step
        self.draft.step = to_step
        if prev_step != to_step:
            self._log_step_transition(prev_step, to_step)

    def can_advance(self) -> bool:
        """Return True if the current step may move forward."""
        if self.closed or self.draft.step == BookingStep.CONFIRM:
            return False
        return not self._missing_for_exit()

    def advance(self) -> BookingStep:
        """Move to the next step once the current step's selection is made."""
        self._require_open()
        if self.draft.step == BookingStep.CONFIRM:
            raise BookingValidationError("Already at the confirmation step")

        missing = self._missing_for_exit()
        if missing:
            raise BookingValidationError(
                f"Cannot leave '{self.draft.step.value}' before '{missing[0]}' is provided"
            )

        index = self._STEP_ORDER.index(self.draft.step)
        self._move(self._STEP_ORDER[index + 1])
        return self.draft.step

    def back(self) -> BookingStep:
        """Move one step back; selections are kept and the first step stays put."""
        self._require_open()
        index = self._STEP_ORDER.index(self.draft.step)
        if index > 0:
            self._move(self._STEP_ORDER[index - 1])
        return self.draft.step

    def select_vehicle(self, vehicle_id: str) -> BookingStep:
        self._require_step(BookingStep.VEHICLE)
        vehicle = self._find_vehicle(vehicle_id)
        if vehicle is None:
            raise BookingValidationError(f"Unknown vehicle '{vehicle_id}'")
        self.draft.vehicle = vehicle
        return self.advance()

    def select_service(self, service_id: str) -> BookingStep:
        self._require_step(BookingStep.SERVICE)
        service = self._find_service(service_id)
        if service is None:
            raise BookingValidationError(f"Unknown or inactive service '{service_id}'")
        self.draft.service = service
        return self.advance()

    def select_date(self, date: str) -> None:
        self._require_step(BookingStep.DATETIME)
        if date not in self.available_dates:
            raise BookingValidationError(f"Date '{date}' is not bookable")
        self.draft.date = date

    def select_time(self, time: str) -> None:
        self._require_step(BookingStep.DATETIME)
        if time not in self.time_slots:
            raise BookingValidationError(f"Time '{time}' is not a booking slot")
        self.draft.time = time

    def set_note(self, note: str) -> None:
        self._require_open()
        note = ValidationUtils.sanitize_text(note or "")
        if len(note) > MAX_NOTE_LENGTH:
            raise BookingValidationError("Note is too long")
        self.draft.note = note

    async def confirm(self, repository: "BookingRepository", user_id: str) -> Appointment:
        """
        Submit the draft through ``repository``.

        On failure the draft and step are left untouched so the caller can
        retry; on success the wizard closes.
        """
        self._require_step(BookingStep.CONFIRM)
        errors = ValidationUtils.validate_booking_draft(self.draft)
        if errors:
            raise BookingValidationError("; ".join(errors))

        try:
            appointment = await repository.create(self.draft, user_id)
        except BookingSubmitError as e:
            logger.error(f"booking submit failed for {user_id}: {e}")
            raise

        self.closed = True
        logger.info(f"booking {appointment.id} created for {user_id}")
        return appointment

    def snapshot(self) -> Dict:
        """Serializable view of the wizard for API responses."""
        data = self.draft.to_dict()
        data.update(
            {
                "step_number": self.step_number,
                "can_advance": self.can_advance(),
                "closed": self.closed,
                "vehicles": [v.model_dump() for v in self.vehicles],
                "services": [s.model_dump() for s in self.services],
                "available_dates": list(self.available_dates),
                "available_times": list(self.time_slots),
            }
        )
        return data

    def _log_step_transition(self, from_step: BookingStep, to_step: BookingStep) -> None:
        logger.debug(f"wizard step {from_step.value} -> {to_step.value}")
