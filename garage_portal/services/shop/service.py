"""
Read models behind the customer and management screens.
"""

from collections import OrderedDict
from datetime import date
from typing import Any, Dict, List, Optional

from ...core.enums import (
    STAFF_ROLES,
    AppointmentStatus,
    PatioStatus,
    Role,
    ServiceOrderStatus,
)
from ...core.logging import get_logger
from ...core.models import Alert, Appointment, Vehicle
from .data import ShopDataProvider


logger = get_logger("garage.shop")

_UPCOMING_STATUSES = {AppointmentStatus.PENDING, AppointmentStatus.CONFIRMED}
_CLOSED_ORDER_STATUSES = {ServiceOrderStatus.COMPLETED, ServiceOrderStatus.CANCELLED}
HOME_UPCOMING_LIMIT = 2
HOME_SERVICES_LIMIT = 4
DASHBOARD_RECENT_ORDERS = 4
ALL_CATEGORIES = "all"


def _matches(value: Optional[str], term: str) -> bool:
    return bool(value) and term in value.lower()


class ShopService:
    """Filters over shop data for home, agenda, alerts and admin screens."""

    def __init__(self, data: ShopDataProvider):
        self.data = data

    def describe_appointment(self, appointment: Appointment) -> Dict[str, Any]:
        """Appointment joined with its vehicle and service."""
        vehicle = self.data.get_vehicle_by_id(appointment.vehicle_id)
        service = self.data.get_service_by_id(appointment.service_id)
        result = appointment.model_dump(mode="json")
        result["vehicle"] = vehicle.model_dump() if vehicle else None
        result["service"] = service.model_dump() if service else None
        return result

    # Customer screens

    def home(self, user_id: str) -> Dict[str, Any]:
        upcoming = [
            a for a in self.data.get_appointments_by_user_id(user_id)
            if a.status in _UPCOMING_STATUSES
        ]
        upcoming.sort(key=lambda a: (a.scheduled_date, a.scheduled_time))
        return {
            "vehicles": [v.model_dump() for v in self.data.get_vehicles_by_user_id(user_id)],
            "upcoming_appointments": [
                self.describe_appointment(a) for a in upcoming[:HOME_UPCOMING_LIMIT]
            ],
            "services": [
                s.model_dump() for s in self.data.list_services(active_only=True)[:HOME_SERVICES_LIMIT]
            ],
        }

    def agenda(
        self,
        user_id: str,
        role: Optional[Role] = None,
        status: Optional[AppointmentStatus] = None,
    ) -> "OrderedDict[str, List[Dict[str, Any]]]":
        """
        Group appointments by scheduled date.

        Args:
            user_id: Caller's user id
            role: Caller's role; staff roles see every appointment
            status: Optional status filter

        Returns:
            Mapping of date to appointments, dates ascending
        """
        if role in STAFF_ROLES:
            appointments = self.data.list_appointments()
        else:
            appointments = self.data.get_appointments_by_user_id(user_id)

        if status is not None:
            appointments = [a for a in appointments if a.status == status]

        grouped: "OrderedDict[str, List[Dict[str, Any]]]" = OrderedDict()
        for appointment in sorted(appointments, key=lambda a: (a.scheduled_date, a.scheduled_time)):
            grouped.setdefault(appointment.scheduled_date, []).append(
                self.describe_appointment(appointment)
            )
        return grouped

    def list_alerts(self, user_id: str, unread_only: bool = False) -> List[Alert]:
        alerts = self.data.get_alerts_by_user_id(user_id)
        if unread_only:
            alerts = [a for a in alerts if not a.read]
        return alerts

    def unread_count(self, user_id: str) -> int:
        return len(self.list_alerts(user_id, unread_only=True))

    def mark_alert_read(self, user_id: str, alert_id: str) -> bool:
        """Mark one of the caller's alerts as read; False if it is not theirs."""
        for alert in self.data.get_alerts_by_user_id(user_id):
            if alert.id == alert_id:
                alert.read = True
                return True
        return False

    def mark_all_alerts_read(self, user_id: str) -> int:
        count = 0
        for alert in self.list_alerts(user_id, unread_only=True):
            alert.read = True
            count += 1
        logger.debug(f"marked {count} alerts read for {user_id}")
        return count

    # Management screens

    def dashboard(self, today: date) -> Dict[str, Any]:
        today_str = today.strftime("%Y-%m-%d")
        orders = self.data.list_service_orders()
        patio = self.data.list_patio_entries()

        return {
            "today_appointments": len(
                [a for a in self.data.list_appointments() if a.scheduled_date == today_str]
            ),
            "open_orders": len([o for o in orders if o.status not in _CLOSED_ORDER_STATUSES]),
            "vehicles_in_patio": len([p for p in patio if p.status != PatioStatus.DELIVERED]),
            "revenue": sum(o.total for o in orders if o.status == ServiceOrderStatus.COMPLETED),
            "recent_orders": [
                o.model_dump(mode="json") for o in orders[:DASHBOARD_RECENT_ORDERS]
            ],
            "patio": [p.model_dump(mode="json") for p in patio],
        }

    def patio_board(self, search: str = "") -> Dict[str, List[Dict[str, Any]]]:
        """Patio entries by status column, filtered on brand, model or plate."""
        term = search.strip().lower()
        board: Dict[str, List[Dict[str, Any]]] = {status.value: [] for status in PatioStatus}

        for entry in self.data.list_patio_entries():
            vehicle = self.data.get_vehicle_by_id(entry.vehicle_id)
            if vehicle is None:
                continue
            if term and not self._vehicle_matches(vehicle, term):
                continue
            item = entry.model_dump(mode="json")
            item["vehicle"] = vehicle.model_dump()
            board[entry.status.value].append(item)
        return board

    @staticmethod
    def _vehicle_matches(vehicle: Vehicle, term: str) -> bool:
        return any(_matches(value, term) for value in (vehicle.brand, vehicle.model, vehicle.plate))

    def search_clients(self, search: str = "") -> List[Dict[str, Any]]:
        term = search.strip()
        lowered = term.lower()
        results = []
        for customer in self.data.list_customers():
            if term and not (
                _matches(customer.full_name, lowered)
                or _matches(customer.email, lowered)
                or (customer.phone is not None and term in customer.phone)
            ):
                continue
            item = customer.model_dump()
            item["vehicle_count"] = len(self.data.get_vehicles_by_user_id(customer.id))
            item["appointment_count"] = len(self.data.get_appointments_by_user_id(customer.id))
            results.append(item)
        return results

    def service_catalog(self, search: str = "", category: str = ALL_CATEGORIES) -> Dict[str, Any]:
        term = search.strip().lower()
        services = self.data.list_services()
        categories = sorted({s.category for s in services})

        if category and category != ALL_CATEGORIES:
            services = [s for s in services if s.category == category]
        if term:
            services = [s for s in services if _matches(s.name, term) or _matches(s.description, term)]

        return {
            "services": [s.model_dump() for s in services],
            "categories": categories,
        }
