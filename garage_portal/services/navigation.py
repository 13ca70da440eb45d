"""
Role-based navigation: sidebar menu, bottom navigation and landing routes.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..core.enums import STAFF_ROLES, Role


MANAGEMENT_HOME_ROUTE = "/management"
CUSTOMER_HOME_ROUTE = "/"
LOGIN_ROUTE = "/login"


@dataclass(frozen=True)
class MenuItem:
    route: str
    label: str
    required_role: Optional[Role] = None
    exact: bool = False

    def to_dict(self) -> Dict:
        return {"route": self.route, "label": self.label, "exact": self.exact}


@dataclass(frozen=True)
class MenuSection:
    title: str
    items: Tuple[MenuItem, ...] = field(default_factory=tuple)


def is_authorized(role: Optional[Role], required_role: Optional[Role]) -> bool:
    """
    Decide whether ``role`` may see an item gated on ``required_role``.

    Items without a requirement are visible to every signed-in user; the
    developer role is authorized for everything.
    """
    if required_role is None:
        return True
    if role is None:
        return False
    return role == required_role or role == Role.DEVELOPER


SIDEBAR_SECTIONS: Tuple[MenuSection, ...] = (
    MenuSection("Operacional", (
        MenuItem(MANAGEMENT_HOME_ROUTE, "Dashboard", exact=True),
        MenuItem("/management/service-orders", "Ordens de Serviço"),
        MenuItem("/management/patio", "Pátio"),
        MenuItem("/management/appointments", "Agendamentos"),
    )),
    MenuSection("Cadastros", (
        MenuItem("/management/clients", "Clientes"),
        MenuItem("/management/services", "Serviços"),
    )),
    MenuSection("Financeiro", (
        MenuItem("/management/finance", "Financeiro", required_role=Role.MANAGEMENT),
    )),
    MenuSection("Equipe", (
        MenuItem("/management/mechanic-analytics", "Analytics", required_role=Role.MANAGEMENT),
        MenuItem("/management/mechanic-feedback", "Feedback", required_role=Role.MANAGEMENT),
    )),
    MenuSection("Sistema", (
        MenuItem("/management/settings", "Configurações"),
    )),
)

BOTTOM_NAVIGATION: Tuple[MenuItem, ...] = (
    MenuItem(CUSTOMER_HOME_ROUTE, "Início", exact=True),
    MenuItem("/agenda", "Agenda"),
    MenuItem("/alerts", "Alertas"),
    MenuItem("/profile", "Perfil"),
)


def visible_sections(role: Optional[Role]) -> List[Dict]:
    """Sidebar sections with the items ``role`` may see; empty sections are dropped."""
    sections = []
    for section in SIDEBAR_SECTIONS:
        items = [item for item in section.items if is_authorized(role, item.required_role)]
        if items:
            sections.append({"title": section.title, "items": [item.to_dict() for item in items]})
    return sections


def bottom_navigation() -> List[Dict]:
    return [item.to_dict() for item in BOTTOM_NAVIGATION]


def landing_route(role: Optional[Role]) -> str:
    """Where a user lands after signing in."""
    if role in STAFF_ROLES:
        return MANAGEMENT_HOME_ROUTE
    return CUSTOMER_HOME_ROUTE


def menu_for(role: Optional[Role]) -> Dict:
    """Navigation payload for the signed-in user's shell."""
    if role in STAFF_ROLES:
        return {"layout": "management", "sections": visible_sections(role)}
    return {"layout": "customer", "items": bottom_navigation()}
