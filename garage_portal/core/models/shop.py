"""
Shop-floor and customer notification models.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict

from ..enums import AlertType, PatioStatus, ServiceOrderStatus


class ServiceOrder(BaseModel):
    """Work order opened for a vehicle."""

    model_config = ConfigDict(extra="forbid")

    id: str
    order_number: str
    vehicle_id: str
    status: ServiceOrderStatus = ServiceOrderStatus.OPEN
    total: float = 0.0


class PatioEntry(BaseModel):
    """A vehicle physically in the shop yard."""

    model_config = ConfigDict(extra="forbid")

    id: str
    vehicle_id: str
    order_id: Optional[str] = None
    status: PatioStatus = PatioStatus.WAITING
    bay_number: Optional[int] = None


class Alert(BaseModel):
    """Notification shown on the customer alerts screen."""

    model_config = ConfigDict(extra="forbid")

    id: str
    user_id: str
    type: AlertType
    title: str
    message: str
    date: str
    read: bool = False
    action_url: Optional[str] = None
    action_label: Optional[str] = None
