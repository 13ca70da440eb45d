"""
In-memory shop data provider.
"""

from copy import deepcopy
from typing import Dict, List, Optional

from ...core.enums import Role
from ...core.models import (
    Alert,
    Appointment,
    PatioEntry,
    Profile,
    Service,
    ServiceOrder,
    Vehicle,
)


class ShopDataProvider:
    """Provides users, vehicles, catalog and shop-floor records."""

    # The first user is the fallback for demo logins with no matching role
    USERS = [
        {
            "id": "1",
            "email": "gestao@oficina.com",
            "full_name": "Carlos Mendes",
            "phone": "11987654321",
            "avatar_url": None,
            "role": "management",
            "created_at": "2025-01-01T10:00:00Z",
            "updated_at": "2025-01-01T10:00:00Z",
        },
        {
            "id": "2",
            "email": "joao@email.com",
            "full_name": "João Silva",
            "phone": "11912345678",
            "avatar_url": None,
            "role": "customer",
            "created_at": "2025-01-05T14:30:00Z",
            "updated_at": "2025-01-05T14:30:00Z",
        },
        {
            "id": "3",
            "email": "maria@email.com",
            "full_name": "Maria Santos",
            "phone": "11998765432",
            "avatar_url": None,
            "role": "customer",
            "created_at": "2025-02-10T09:15:00Z",
            "updated_at": "2025-02-10T09:15:00Z",
        },
        {
            "id": "4",
            "email": "admin@oficina.com",
            "full_name": "Ana Costa",
            "phone": None,
            "avatar_url": None,
            "role": "admin",
            "created_at": "2025-01-01T10:00:00Z",
            "updated_at": "2025-01-01T10:00:00Z",
        },
        {
            "id": "5",
            "email": "dev@oficina.com",
            "full_name": "Pedro Almeida",
            "phone": None,
            "avatar_url": None,
            "role": "developer",
            "created_at": "2025-01-01T10:00:00Z",
            "updated_at": "2025-01-01T10:00:00Z",
        },
        {
            "id": "6",
            "email": "lucas@email.com",
            "full_name": "Lucas Oliveira",
            "phone": "21991234567",
            "avatar_url": None,
            "role": "customer",
            "created_at": "2025-03-02T11:00:00Z",
            "updated_at": "2025-03-02T11:00:00Z",
        },
    ]

    VEHICLES = [
        {"id": "v1", "user_id": "2", "brand": "Honda", "model": "Civic", "year": 2020,
         "plate": "ABC1D23", "color": "Prata", "mileage": 38500},
        {"id": "v2", "user_id": "2", "brand": "Toyota", "model": "Corolla", "year": 2019,
         "plate": "DEF4G56", "color": "Preto", "mileage": 52000},
        {"id": "v3", "user_id": "3", "brand": "Volkswagen", "model": "Gol", "year": 2018,
         "plate": "GHI7J89", "color": "Branco", "mileage": 71000},
        {"id": "v4", "user_id": "2", "brand": "Fiat", "model": "Strada", "year": 2021,
         "plate": "JKL0M12", "color": "Vermelho", "mileage": 24000},
    ]

    SERVICES = [
        {"id": "s1", "name": "Troca de Óleo", "description": "Troca de óleo do motor e filtro",
         "category": "Manutenção", "price": 150.0, "duration_minutes": 45, "is_active": True},
        {"id": "s2", "name": "Alinhamento e Balanceamento", "description": "Alinhamento de direção e balanceamento das quatro rodas",
         "category": "Suspensão", "price": 120.0, "duration_minutes": 60, "is_active": True},
        {"id": "s3", "name": "Revisão Completa", "description": "Revisão preventiva de todos os sistemas",
         "category": "Manutenção", "price": 450.0, "duration_minutes": 180, "is_active": True},
        {"id": "s4", "name": "Troca de Pastilhas de Freio", "description": "Substituição das pastilhas dianteiras",
         "category": "Freios", "price": 280.0, "duration_minutes": 90, "is_active": True},
        {"id": "s5", "name": "Diagnóstico Eletrônico", "description": "Leitura de falhas com scanner",
         "category": "Elétrica", "price": 100.0, "duration_minutes": 30, "is_active": True},
        {"id": "s6", "name": "Higienização do Ar-Condicionado", "description": "Limpeza do sistema e troca do filtro de cabine",
         "category": "Ar-Condicionado", "price": 90.0, "duration_minutes": 40, "is_active": False},
    ]

    APPOINTMENTS = [
        {"id": "a1", "user_id": "2", "vehicle_id": "v1", "service_id": "s1",
         "scheduled_date": "2026-01-20", "scheduled_time": "09:00", "status": "confirmed",
         "notes": "Verificar barulho no motor"},
        {"id": "a2", "user_id": "2", "vehicle_id": "v2", "service_id": "s4",
         "scheduled_date": "2026-01-22", "scheduled_time": "14:00", "status": "pending", "notes": None},
        {"id": "a3", "user_id": "3", "vehicle_id": "v3", "service_id": "s2",
         "scheduled_date": "2026-01-20", "scheduled_time": "10:00", "status": "pending", "notes": None},
        {"id": "a4", "user_id": "2", "vehicle_id": "v1", "service_id": "s3",
         "scheduled_date": "2025-12-10", "scheduled_time": "08:00", "status": "completed", "notes": None},
        {"id": "a5", "user_id": "3", "vehicle_id": "v3", "service_id": "s5",
         "scheduled_date": "2026-01-15", "scheduled_time": "15:00", "status": "cancelled", "notes": None},
    ]

    SERVICE_ORDERS = [
        {"id": "o1", "order_number": "OS-2026-001", "vehicle_id": "v1", "status": "in_progress", "total": 650.0},
        {"id": "o2", "order_number": "OS-2026-002", "vehicle_id": "v2", "status": "waiting_approval", "total": 280.0},
        {"id": "o3", "order_number": "OS-2026-003", "vehicle_id": "v3", "status": "completed", "total": 120.0},
        {"id": "o4", "order_number": "OS-2025-098", "vehicle_id": "v4", "status": "completed", "total": 450.0},
        {"id": "o5", "order_number": "OS-2025-097", "vehicle_id": "v3", "status": "cancelled", "total": 90.0},
    ]

    PATIO = [
        {"id": "p1", "vehicle_id": "v1", "order_id": "o1", "status": "in_service", "bay_number": 2},
        {"id": "p2", "vehicle_id": "v2", "order_id": "o2", "status": "waiting", "bay_number": None},
        {"id": "p3", "vehicle_id": "v3", "order_id": "o3", "status": "ready", "bay_number": 1},
        {"id": "p4", "vehicle_id": "v4", "order_id": "o4", "status": "delivered", "bay_number": None},
    ]

    ALERTS = [
        {"id": "1", "user_id": "2", "type": "reminder", "title": "Lembrete de Agendamento",
         "message": "Seu agendamento de Troca de Óleo é amanhã às 09:00.",
         "date": "2026-01-19T10:00:00Z", "read": False,
         "action_url": "/agenda", "action_label": "Ver Agenda"},
        {"id": "2", "user_id": "2", "type": "maintenance", "title": "Revisão Programada",
         "message": "Seu Honda Civic está próximo da quilometragem para revisão (40.000 km).",
         "date": "2026-01-18T14:00:00Z", "read": False,
         "action_url": "/booking/new", "action_label": "Agendar"},
        {"id": "3", "user_id": "2", "type": "promo", "title": "Promoção Especial",
         "message": "Alinhamento + Balanceamento com 20% de desconto! Válido até 31/01.",
         "date": "2026-01-15T09:00:00Z", "read": True,
         "action_url": "/booking/new?service=s2", "action_label": "Aproveitar"},
        {"id": "4", "user_id": "2", "type": "info", "title": "Serviço Concluído",
         "message": "A troca de pastilhas de freio do seu Toyota Corolla foi concluída.",
         "date": "2026-01-14T16:30:00Z", "read": True},
        {"id": "5", "user_id": "3", "type": "reminder", "title": "Lembrete de Agendamento",
         "message": "Seu agendamento de Alinhamento e Balanceamento é dia 20/01 às 10:00.",
         "date": "2026-01-18T08:00:00Z", "read": False,
         "action_url": "/agenda", "action_label": "Ver Agenda"},
    ]

    def __init__(
        self,
        users: Optional[List[Dict]] = None,
        vehicles: Optional[List[Dict]] = None,
        services: Optional[List[Dict]] = None,
        appointments: Optional[List[Dict]] = None,
        service_orders: Optional[List[Dict]] = None,
        patio: Optional[List[Dict]] = None,
        alerts: Optional[List[Dict]] = None,
    ):
        # Each instance owns its records so in-memory writes never leak between apps
        self._users = [Profile(**u) for u in deepcopy(self.USERS if users is None else users)]
        self._vehicles = [Vehicle(**v) for v in deepcopy(self.VEHICLES if vehicles is None else vehicles)]
        self._services = [Service(**s) for s in deepcopy(self.SERVICES if services is None else services)]
        self._appointments = [
            Appointment(**a) for a in deepcopy(self.APPOINTMENTS if appointments is None else appointments)
        ]
        self._service_orders = [
            ServiceOrder(**o) for o in deepcopy(self.SERVICE_ORDERS if service_orders is None else service_orders)
        ]
        self._patio = [PatioEntry(**p) for p in deepcopy(self.PATIO if patio is None else patio)]
        self._alerts = [Alert(**a) for a in deepcopy(self.ALERTS if alerts is None else alerts)]

    # Users

    def list_users(self) -> List[Profile]:
        return list(self._users)

    def list_customers(self) -> List[Profile]:
        return [u for u in self._users if u.role == Role.CUSTOMER]

    def find_user_by_email(self, email: str) -> Optional[Profile]:
        """Find a user by exact e-mail."""
        for user in self._users:
            if user.email == email:
                return user
        return None

    def find_user_by_role(self, role: Role) -> Optional[Profile]:
        """Find the first user holding ``role``."""
        for user in self._users:
            if user.role == role:
                return user
        return None

    def default_user(self) -> Optional[Profile]:
        return self._users[0] if self._users else None

    # Vehicles

    def get_vehicles_by_user_id(self, user_id: str) -> List[Vehicle]:
        return [v for v in self._vehicles if v.user_id == user_id]

    def get_vehicle_by_id(self, vehicle_id: str) -> Optional[Vehicle]:
        for vehicle in self._vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        return None

    # Catalog

    def list_services(self, active_only: bool = False) -> List[Service]:
        """Return the catalog, optionally only the bookable services."""
        if active_only:
            return [s for s in self._services if s.is_active]
        return list(self._services)

    def get_service_by_id(self, service_id: str) -> Optional[Service]:
        for service in self._services:
            if service.id == service_id:
                return service
        return None

    # Appointments

    def list_appointments(self) -> List[Appointment]:
        return list(self._appointments)

    def get_appointments_by_user_id(self, user_id: str) -> List[Appointment]:
        return [a for a in self._appointments if a.user_id == user_id]

    def add_appointment(self, appointment: Appointment) -> Appointment:
        self._appointments.append(appointment)
        return appointment

    def next_appointment_id(self) -> str:
        return f"a{len(self._appointments) + 1}"

    # Shop floor

    def list_service_orders(self) -> List[ServiceOrder]:
        return list(self._service_orders)

    def get_service_order_by_id(self, order_id: str) -> Optional[ServiceOrder]:
        for order in self._service_orders:
            if order.id == order_id:
                return order
        return None

    def list_patio_entries(self) -> List[PatioEntry]:
        return list(self._patio)

    # Alerts

    def get_alerts_by_user_id(self, user_id: str) -> List[Alert]:
        return [a for a in self._alerts if a.user_id == user_id]
