from datetime import datetime
from typing import Any, Callable, Sequence

from parceltrack.models.parcel import Parcel, utcnow
from parceltrack.models.query import DateRange, ParcelFilters, SortDirection, SortField

PRIORITY_RANK = {"low": 1, "medium": 2, "high": 3}

SORT_KEYS: dict[str, Callable[[Parcel], Any]] = {
    "tracking_number": lambda p: p.tracking_number,
    "status": lambda p: p.status,
    "estimated_delivery": lambda p: p.estimated_delivery,
    "created_at": lambda p: p.created_at,
    "priority": lambda p: PRIORITY_RANK[p.priority],
}


def matches_search(parcel: Parcel, term: str) -> bool:
    if not term:
        return True
    term = term.lower()
    return (
        term in parcel.tracking_number.lower()
        or term in parcel.recipient.name.lower()
        or term in parcel.current_location.lower()
    )


def days_since(moment: datetime, now: datetime) -> int:
    """Whole days elapsed, floored like the dashboard's day buckets."""
    return int((now - moment).total_seconds() // 86400)


def matches_date_range(parcel: Parcel, date_range: DateRange, now: datetime) -> bool:
    if date_range == "all":
        return True
    age = days_since(parcel.created_at, now)
    match date_range:
        case "today":
            return age == 0
        case "week":
            return age <= 7
        case "month":
            return age <= 30
        case _:
            return True


def matches_filters(parcel: Parcel, filters: ParcelFilters, now: datetime) -> bool:
    return (
        (filters.status == "all" or parcel.status == filters.status)
        and (filters.priority == "all" or parcel.priority == filters.priority)
        and (filters.service_type == "all" or parcel.service_type == filters.service_type)
        and matches_date_range(parcel, filters.date_range, now)
    )


def query(
    parcels: Sequence[Parcel],
    search_term: str = "",
    filters: ParcelFilters | None = None,
    sort_field: SortField = "created_at",
    sort_direction: SortDirection = "desc",
    now: datetime | None = None,
) -> list[Parcel]:
    """Return the parcels matching `search_term` and `filters`, sorted."""
    filters = filters or ParcelFilters()
    now = now or utcnow()
    term = search_term.strip()

    selected = [
        p for p in parcels if matches_search(p, term) and matches_filters(p, filters, now)
    ]
    return sorted(selected, key=SORT_KEYS[sort_field], reverse=sort_direction == "desc")
