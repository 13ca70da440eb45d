"""
Tests for the booking wizard and booking service.
"""

from datetime import date

import pytest

from garage_portal.core.enums import AppointmentStatus, BookingStep
from garage_portal.core.exceptions import BookingSubmitError, BookingValidationError
from garage_portal.services.booking import (
    BookingRepository,
    BookingService,
    BookingWizard,
    InMemoryBookingRepository,
)
from garage_portal.utils.date import BookingCalendar


# A Friday; the following weekend falls inside the booking window
BOOKING_START = date(2026, 1, 16)


class FailingRepository(BookingRepository):
    def __init__(self):
        self.calls = 0

    async def create(self, draft, user_id):
        self.calls += 1
        raise BookingSubmitError("storage unavailable")


@pytest.fixture
def booking_service(shop_data):
    return BookingService(shop_data, calendar=BookingCalendar("America/Sao_Paulo"))


def start(booking_service, user_id, **kwargs):
    return booking_service.start_wizard(user_id, start=BOOKING_START, **kwargs)


def fill_until_confirm(wizard, vehicle_id=None):
    if wizard.step == BookingStep.VEHICLE:
        wizard.select_vehicle(vehicle_id)
    wizard.select_service("s1")
    wizard.select_date("2026-01-19")
    wizard.select_time("09:00")
    wizard.advance()


class TestInitialStep:
    """Where the wizard starts depends on the caller's vehicles."""

    def test_single_vehicle_starts_at_service(self, booking_service):
        wizard = start(booking_service, "3")
        assert wizard.step == BookingStep.SERVICE
        assert wizard.draft.vehicle.id == "v3"
        assert wizard.step_number == 2

    def test_several_vehicles_start_at_vehicle(self, booking_service):
        wizard = start(booking_service, "2")
        assert wizard.step == BookingStep.VEHICLE
        assert wizard.draft.vehicle is None
        assert [v.id for v in wizard.vehicles] == ["v1", "v2", "v4"]

    def test_no_vehicles_start_at_vehicle_and_cannot_advance(self, booking_service):
        wizard = start(booking_service, "6")
        assert wizard.step == BookingStep.VEHICLE
        assert not wizard.can_advance()
        with pytest.raises(BookingValidationError):
            wizard.advance()

    def test_preselected_service_does_not_skip_service_step(self, booking_service):
        wizard = start(booking_service, "3", preselected_service_id="s2")
        assert wizard.step == BookingStep.SERVICE
        assert wizard.draft.service.id == "s2"
        assert wizard.can_advance()

    def test_unknown_or_inactive_preselection_is_ignored(self, booking_service):
        assert start(booking_service, "3", preselected_service_id="nope").draft.service is None
        assert start(booking_service, "3", preselected_service_id="s6").draft.service is None


class TestTransitions:
    """Forward and backward movement through the steps."""

    def test_selecting_vehicle_and_service_auto_advances(self, booking_service):
        wizard = start(booking_service, "2")
        assert wizard.select_vehicle("v2") == BookingStep.SERVICE
        assert wizard.select_service("s4") == BookingStep.DATETIME

    def test_date_only_cannot_advance(self, booking_service):
        wizard = start(booking_service, "3")
        wizard.select_service("s1")
        wizard.select_date("2026-01-19")

        assert not wizard.can_advance()
        with pytest.raises(BookingValidationError):
            wizard.advance()
        assert wizard.step == BookingStep.DATETIME

    def test_date_and_time_advance_to_confirm(self, booking_service):
        wizard = start(booking_service, "3")
        wizard.select_service("s1")
        wizard.select_date("2026-01-19")
        wizard.select_time("14:00")

        assert wizard.step == BookingStep.DATETIME
        assert wizard.advance() == BookingStep.CONFIRM

    def test_back_keeps_selections(self, booking_service):
        wizard = start(booking_service, "3")
        fill_until_confirm(wizard)

        assert wizard.back() == BookingStep.DATETIME
        assert wizard.back() == BookingStep.SERVICE
        assert wizard.draft.service.id == "s1"
        assert wizard.draft.date == "2026-01-19"
        assert wizard.draft.time == "09:00"

    def test_back_on_first_step_is_noop(self, booking_service):
        wizard = start(booking_service, "2")
        assert wizard.back() == BookingStep.VEHICLE

    def test_back_from_service_reaches_vehicle_for_single_vehicle(self, booking_service):
        wizard = start(booking_service, "3")
        assert wizard.back() == BookingStep.VEHICLE
        assert wizard.draft.vehicle.id == "v3"

    def test_cannot_advance_past_confirm(self, booking_service):
        wizard = start(booking_service, "3")
        fill_until_confirm(wizard)
        with pytest.raises(BookingValidationError):
            wizard.advance()


class TestSelections:
    """Only the caller's vehicles, active services and offered slots are accepted."""

    def test_other_users_vehicle_rejected(self, booking_service):
        wizard = start(booking_service, "2")
        with pytest.raises(BookingValidationError):
            wizard.select_vehicle("v3")
        assert wizard.step == BookingStep.VEHICLE

    def test_inactive_service_rejected(self, booking_service):
        wizard = start(booking_service, "3")
        with pytest.raises(BookingValidationError):
            wizard.select_service("s6")

    def test_weekend_date_rejected(self, booking_service):
        wizard = start(booking_service, "3")
        wizard.select_service("s1")
        with pytest.raises(BookingValidationError):
            wizard.select_date("2026-01-17")

    def test_date_outside_window_rejected(self, booking_service):
        wizard = start(booking_service, "3")
        wizard.select_service("s1")
        with pytest.raises(BookingValidationError):
            wizard.select_date("2026-02-02")

    def test_unknown_time_rejected(self, booking_service):
        wizard = start(booking_service, "3")
        wizard.select_service("s1")
        with pytest.raises(BookingValidationError):
            wizard.select_time("12:00")

    def test_selection_on_wrong_step_rejected(self, booking_service):
        wizard = start(booking_service, "3")
        with pytest.raises(BookingValidationError):
            wizard.select_date("2026-01-19")

    def test_note_is_sanitized(self, booking_service):
        wizard = start(booking_service, "3")
        wizard.set_note("  barulho \x07 no   freio ")
        assert wizard.draft.note == "barulho no freio"

    def test_note_too_long_rejected(self, booking_service):
        wizard = start(booking_service, "3")
        with pytest.raises(BookingValidationError):
            wizard.set_note("x" * 501)


class TestConfirm:
    """Submitting the draft."""

    @pytest.mark.asyncio
    async def test_confirm_creates_pending_appointment(self, booking_service, shop_data):
        wizard = start(booking_service, "3")
        fill_until_confirm(wizard)
        wizard.set_note("Trocar filtro também")

        appointment = await booking_service.confirm(wizard, "3")

        assert appointment.status == AppointmentStatus.PENDING
        assert appointment.user_id == "3"
        assert appointment.vehicle_id == "v3"
        assert appointment.service_id == "s1"
        assert appointment.scheduled_date == "2026-01-19"
        assert appointment.scheduled_time == "09:00"
        assert appointment.notes == "Trocar filtro também"
        assert appointment in shop_data.get_appointments_by_user_id("3")
        assert wizard.closed

    @pytest.mark.asyncio
    async def test_confirm_outside_confirm_step_rejected(self, booking_service):
        wizard = start(booking_service, "3")
        with pytest.raises(BookingValidationError):
            await booking_service.confirm(wizard, "3")

    @pytest.mark.asyncio
    async def test_closed_wizard_rejects_changes(self, booking_service):
        wizard = start(booking_service, "3")
        fill_until_confirm(wizard)
        await booking_service.confirm(wizard, "3")

        with pytest.raises(BookingValidationError):
            wizard.back()
        with pytest.raises(BookingValidationError):
            await booking_service.confirm(wizard, "3")

    @pytest.mark.asyncio
    async def test_submit_failure_preserves_draft(self, shop_data):
        failing = FailingRepository()
        service = BookingService(shop_data, repository=failing)
        wizard = service.start_wizard("2", start=BOOKING_START)
        fill_until_confirm(wizard, vehicle_id="v1")
        before = len(shop_data.list_appointments())

        with pytest.raises(BookingSubmitError):
            await service.confirm(wizard, "2")

        assert failing.calls == 1
        assert wizard.step == BookingStep.CONFIRM
        assert not wizard.closed
        assert wizard.draft.vehicle.id == "v1"
        assert wizard.draft.service.id == "s1"
        assert (wizard.draft.date, wizard.draft.time) == ("2026-01-19", "09:00")
        assert len(shop_data.list_appointments()) == before

        # Retry with a working collaborator succeeds from the same draft
        appointment = await wizard.confirm(InMemoryBookingRepository(shop_data), "2")
        assert appointment.vehicle_id == "v1"


def test_snapshot_lists_choices(booking_service):
    wizard = start(booking_service, "3", preselected_service_id="s2")
    snapshot = wizard.snapshot()

    assert snapshot["step"] == "service"
    assert snapshot["service"]["id"] == "s2"
    assert "s6" not in [s["id"] for s in snapshot["services"]]
    assert snapshot["available_dates"][0] == "2026-01-19"
    assert snapshot["available_times"] == ["08:00", "09:00", "10:00", "11:00",
                                           "14:00", "15:00", "16:00", "17:00"]


def test_wizard_built_directly_filters_inactive_services(shop_data):
    wizard = BookingWizard(
        vehicles=shop_data.get_vehicles_by_user_id("2"),
        services=shop_data.list_services(),
        available_dates=["2026-01-19"],
    )
    assert all(s.is_active for s in wizard.services)


class TestOpenWizards:
    """The service tracks one open wizard per user."""

    def test_start_replaces_previous_wizard(self, booking_service):
        first = start(booking_service, "3")
        second = start(booking_service, "3", preselected_service_id="s2")

        assert booking_service.current_wizard("3") is second
        assert booking_service.current_wizard("3") is not first
        assert booking_service.current_wizard("2") is None

    def test_discard_removes_only_that_user(self, booking_service):
        start(booking_service, "3")
        other = start(booking_service, "2")

        assert booking_service.discard_wizard("3")
        assert not booking_service.discard_wizard("3")
        assert booking_service.current_wizard("3") is None
        assert booking_service.current_wizard("2") is other

    @pytest.mark.asyncio
    async def test_confirm_closes_open_wizard(self, booking_service):
        wizard = start(booking_service, "3")
        fill_until_confirm(wizard)

        await booking_service.confirm(wizard, "3")

        assert booking_service.current_wizard("3") is None

    @pytest.mark.asyncio
    async def test_failed_confirm_keeps_open_wizard(self, shop_data):
        service = BookingService(shop_data, repository=FailingRepository())
        wizard = service.start_wizard("3", start=BOOKING_START)
        fill_until_confirm(wizard)

        with pytest.raises(BookingSubmitError):
            await service.confirm(wizard, "3")

        assert service.current_wizard("3") is wizard
