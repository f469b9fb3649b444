import logging
import threading
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Callable, Iterator, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from parceltrack.errors import NotFound, ValidationError, error_list
from parceltrack.models.parcel import (
    Parcel,
    ParcelCreate,
    ParcelStatus,
    ParcelUpdate,
    StatusEvent,
    utcnow,
)
from parceltrack.services.state_machine import edit_fields, transition
from parceltrack.services.tracking import generate_tracking_number

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

Persist = Callable[[list[Parcel]], None]


def parse_input(model_class: type[T], data: T | dict[str, Any]) -> T:
    """Validate raw command input, raising the engine's ValidationError."""
    if isinstance(data, model_class):
        return data
    try:
        return model_class.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid {model_class.__name__}", error_list(e.errors())) from e


class ParcelStore:
    def __init__(self, persist: Persist | None = None, clock: Callable[[], datetime] = utcnow):
        self._parcels: dict[str, Parcel] = {}
        self._issued: set[str] = set()
        self._lock = threading.RLock()
        self._persist = persist
        self.clock = clock

    def load(self, parcels: list[Parcel]) -> None:
        """Replace the contents without persisting (used at startup)."""
        with self._lock:
            self._parcels = {p.id: p for p in parcels}
            self._issued.update(p.tracking_number for p in parcels)

    def get(self, parcel_id: str) -> Parcel:
        parcel = self._parcels.get(parcel_id)
        if parcel is None:
            raise NotFound("Parcel", parcel_id)
        return parcel

    def list(self) -> list[Parcel]:
        """Snapshot of all parcels in insertion order."""
        return list(self._parcels.values())

    def __len__(self) -> int:
        return len(self._parcels)

    def create(self, spec: ParcelCreate | dict[str, Any]) -> Parcel:
        spec = parse_input(ParcelCreate, spec)
        with self._lock:
            now = self.clock()
            first_event = StatusEvent(
                status=spec.status,
                location=spec.current_location,
                timestamp=now,
                notes="Parcel created",
            )
            parcel = Parcel(
                **spec.model_dump(),
                tracking_number=generate_tracking_number(self._issued, now),
                actual_delivery=now.date() if spec.status == "delivered" else None,
                created_at=now,
                updated_at=now,
                status_history=[first_event],
            )
            self._commit({**self._parcels, parcel.id: parcel})
            self._issued.add(parcel.tracking_number)
            logger.info(f"Created parcel {parcel.tracking_number} ({parcel.status})")
            return parcel

    def update(self, parcel_id: str, patch: ParcelUpdate | dict[str, Any]) -> Parcel:
        """Merge a partial edit; status changes go through the state machine."""
        patch = parse_input(ParcelUpdate, patch)
        with self._lock:
            parcel = self.get(parcel_id)
            now = self.clock()
            changes = patch.model_dump(exclude_unset=True, exclude_none=True, exclude={"status", "notes"})

            if patch.status is not None and patch.status != parcel.status:
                location = changes.pop("current_location", parcel.current_location)
                notes = patch.notes or f"Status updated to {patch.status}"
                parcel = transition(parcel, patch.status, location, notes, now)

            updated = edit_fields(parcel, changes, now)
            if updated is not self._parcels[parcel_id]:
                self._commit({**self._parcels, parcel_id: updated})
            return updated

    def transition(
        self,
        parcel_id: str,
        status: ParcelStatus,
        location: str | None = None,
        notes: str | None = None,
    ) -> Parcel:
        """Explicit status change; location defaults to the current one."""
        with self._lock:
            parcel = self.get(parcel_id)
            updated = transition(parcel, status, location or parcel.current_location, notes, self.clock())
            if updated is not parcel:
                self._commit({**self._parcels, parcel_id: updated})
                logger.info(f"Parcel {parcel.tracking_number}: {parcel.status} -> {status}")
            return updated

    def delete(self, parcel_id: str) -> bool:
        with self._lock:
            if parcel_id not in self._parcels:
                return False
            remaining = {pid: p for pid, p in self._parcels.items() if pid != parcel_id}
            self._commit(remaining)
            return True

    @contextmanager
    def batch(self) -> Iterator[dict[str, Parcel]]:
        """Exclusive read-modify-write over a working copy of the store.

        Changes made to the yielded mapping are committed as one snapshot
        replace when the block exits cleanly and discarded otherwise.
        """
        with self._lock:
            working = dict(self._parcels)
            yield working
            if working != self._parcels:
                self._commit(working)

    def _commit(self, parcels: dict[str, Parcel]) -> None:
        if self._persist is not None:
            self._persist(list(parcels.values()))
        self._parcels = parcels
