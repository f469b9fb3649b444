from datetime import datetime

from parceltrack.errors import InvalidTransition
from parceltrack.models.parcel import Parcel, ParcelStatus, StatusEvent, utcnow


def transition(
    parcel: Parcel,
    new_status: ParcelStatus,
    location: str,
    notes: str | None = None,
    now: datetime | None = None,
) -> Parcel:
    """Move a parcel to `new_status` at `location`, recording the event."""
    if parcel.is_terminal:
        raise InvalidTransition(parcel.id, parcel.status, new_status)

    if new_status == parcel.status:
        last = parcel.last_event
        if last is not None and last.location == location and last.notes == notes:
            return parcel

    now = now or utcnow()
    event = StatusEvent(status=new_status, location=location, timestamp=now, notes=notes)
    changes = {
        "status": new_status,
        "current_location": location,
        "updated_at": now,
        "status_history": [*parcel.status_history, event],
    }
    if new_status == "delivered":
        changes["actual_delivery"] = now.date()

    return parcel.model_copy(update=changes)


def edit_fields(parcel: Parcel, fields: dict, now: datetime | None = None) -> Parcel:
    """Apply non-status field edits. History is left untouched."""
    if not fields:
        return parcel
    return parcel.model_copy(update={**fields, "updated_at": now or utcnow()})
