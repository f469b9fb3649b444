from typing import Literal

from pydantic import BaseModel, Field

from parceltrack.models.parcel import CAMEL_CONFIG, ParcelStatus, Priority, ServiceType

SortField = Literal["tracking_number", "status", "estimated_delivery", "created_at", "priority"]
SortDirection = Literal["asc", "desc"]
DateRange = Literal["all", "today", "week", "month"]


class ParcelFilters(BaseModel):
    status: ParcelStatus | Literal["all"] = "all"
    priority: Priority | Literal["all"] = "all"
    service_type: ServiceType | Literal["all"] = "all"
    date_range: DateRange = "all"

    model_config = CAMEL_CONFIG


class ServiceTypeStats(BaseModel):
    parcels: int = 0
    delivered: int = 0
    delivery_rate: int = 0

    model_config = CAMEL_CONFIG


class DailyTrend(BaseModel):
    date: str
    created: int = 0
    delivered: int = 0


class ParcelStats(BaseModel):
    total: int = 0
    per_status: dict[str, int] = Field(default_factory=dict)
    per_priority: dict[str, int] = Field(default_factory=dict)
    per_service_type: dict[str, ServiceTypeStats] = Field(default_factory=dict)
    average_delivery_days: float = 0.0
    delivery_trend: list[DailyTrend] = Field(default_factory=list)

    model_config = CAMEL_CONFIG
