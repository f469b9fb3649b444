from collections import Counter
from datetime import datetime, timedelta
from typing import Sequence

from parceltrack.models.parcel import PARCEL_STATUSES, PRIORITIES, SERVICE_TYPES, Parcel, utcnow
from parceltrack.models.query import DailyTrend, ParcelStats, ServiceTypeStats

TREND_DAYS = 7


def compute_stats(parcels: Sequence[Parcel], now: datetime | None = None) -> ParcelStats:
    """Summary counts over the whole store. Recomputed on every call."""
    now = now or utcnow()
    statuses = Counter(p.status for p in parcels)
    priorities = Counter(p.priority for p in parcels)

    per_service_type = {}
    for service_type in SERVICE_TYPES:
        matching = [p for p in parcels if p.service_type == service_type]
        delivered = sum(1 for p in matching if p.status == "delivered")
        per_service_type[service_type] = ServiceTypeStats(
            parcels=len(matching),
            delivered=delivered,
            delivery_rate=round(delivered / len(matching) * 100) if matching else 0,
        )

    return ParcelStats(
        total=len(parcels),
        per_status={status: statuses.get(status, 0) for status in PARCEL_STATUSES},
        per_priority={priority: priorities.get(priority, 0) for priority in PRIORITIES},
        per_service_type=per_service_type,
        average_delivery_days=average_delivery_days(parcels),
        delivery_trend=delivery_trend(parcels, now),
    )


def average_delivery_days(parcels: Sequence[Parcel]) -> float:
    durations = [
        (p.actual_delivery - p.created_at.date()).days
        for p in parcels
        if p.status == "delivered" and p.actual_delivery
    ]
    if not durations:
        return 0.0
    return round(sum(durations) / len(durations), 1)


def delivery_trend(parcels: Sequence[Parcel], now: datetime) -> list[DailyTrend]:
    """Created and delivered counts for each of the last seven days, oldest first."""
    today = now.date()
    trend = []
    for offset in range(TREND_DAYS - 1, -1, -1):
        day = today - timedelta(days=offset)
        trend.append(
            DailyTrend(
                date=day.isoformat(),
                created=sum(1 for p in parcels if p.created_at.date() == day),
                delivered=sum(1 for p in parcels if p.actual_delivery == day),
            )
        )
    return trend
