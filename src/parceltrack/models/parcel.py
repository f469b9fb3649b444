from datetime import date, datetime, timezone
from typing import Literal, get_args
from uuid import uuid4

from pydantic import AwareDatetime, BaseModel, Field
from pydantic.alias_generators import to_camel

ParcelStatus = Literal["pending", "in_transit", "out_for_delivery", "delivered", "delayed", "cancelled"]
Priority = Literal["low", "medium", "high"]
ServiceType = Literal["standard", "express", "overnight"]

PARCEL_STATUSES: tuple[str, ...] = get_args(ParcelStatus)
PRIORITIES: tuple[str, ...] = get_args(Priority)
SERVICE_TYPES: tuple[str, ...] = get_args(ServiceType)
TERMINAL_STATUSES = frozenset({"delivered", "cancelled"})

CAMEL_CONFIG = {"alias_generator": to_camel, "populate_by_name": True}


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StatusEvent(BaseModel):
    status: ParcelStatus
    location: str
    timestamp: AwareDatetime
    notes: str | None = None

    model_config = {**CAMEL_CONFIG, "frozen": True}


class Recipient(BaseModel):
    name: str = Field(min_length=1)
    address: str = Field(min_length=1)
    phone: str = ""
    email: str = ""

    model_config = {**CAMEL_CONFIG, "str_strip_whitespace": True}


class Sender(BaseModel):
    name: str = Field(min_length=1)
    address: str = Field(min_length=1)

    model_config = {**CAMEL_CONFIG, "str_strip_whitespace": True}


class Parcel(BaseModel):
    id: str = Field(default_factory=lambda: f"parcel_{uuid4().hex[:12]}")
    tracking_number: str
    status: ParcelStatus = "pending"
    current_location: str
    estimated_delivery: date
    actual_delivery: date | None = None
    recipient: Recipient
    sender: Sender
    weight: float = Field(gt=0)
    dimensions: str = ""
    priority: Priority = "medium"
    service_type: ServiceType = "standard"
    created_at: AwareDatetime = Field(default_factory=utcnow)
    updated_at: AwareDatetime = Field(default_factory=utcnow)
    status_history: list[StatusEvent] = Field(default_factory=list)

    model_config = CAMEL_CONFIG

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    @property
    def last_event(self) -> StatusEvent | None:
        return self.status_history[-1] if self.status_history else None


class ParcelCreate(BaseModel):
    """Fields a caller supplies to create a parcel; identity and history are assigned."""

    status: ParcelStatus = "pending"
    current_location: str = Field(min_length=1)
    estimated_delivery: date
    recipient: Recipient
    sender: Sender
    weight: float = Field(gt=0)
    dimensions: str = ""
    priority: Priority = "medium"
    service_type: ServiceType = "standard"

    model_config = {**CAMEL_CONFIG, "str_strip_whitespace": True}


class ParcelUpdate(BaseModel):
    """Partial edit. `notes` only applies when the edit changes the status."""

    status: ParcelStatus | None = None
    current_location: str | None = Field(default=None, min_length=1)
    estimated_delivery: date | None = None
    priority: Priority | None = None
    service_type: ServiceType | None = None
    weight: float | None = Field(default=None, gt=0)
    dimensions: str | None = None
    notes: str | None = None

    model_config = {**CAMEL_CONFIG, "extra": "forbid", "str_strip_whitespace": True}


class StatusChange(BaseModel):
    status: ParcelStatus
    location: str | None = None
    notes: str | None = None

    model_config = {**CAMEL_CONFIG, "str_strip_whitespace": True}
