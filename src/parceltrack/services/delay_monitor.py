import logging
from datetime import date, datetime

from parceltrack.models.parcel import Parcel
from parceltrack.services.notifications import NotificationCenter
from parceltrack.services.state_machine import transition
from parceltrack.storage.store import ParcelStore

logger = logging.getLogger(__name__)

DELAY_NOTE = "Automatically marked as delayed due to exceeded delivery date"
SKIPPED_STATUSES = frozenset({"delivered", "cancelled", "delayed"})


def is_overdue(parcel: Parcel, today: date) -> bool:
    return parcel.status not in SKIPPED_STATUSES and parcel.estimated_delivery < today


class DelayMonitor:
    def __init__(self, store: ParcelStore, notifications: NotificationCenter):
        self.store = store
        self.notifications = notifications

    def run_once(self, now: datetime | None = None) -> list[Parcel]:
        """Escalate every overdue parcel and return the escalated parcels."""
        escalated: list[Parcel] = []

        with self.store.batch() as parcels:
            now = now or self.store.clock()
            today = now.date()
            for parcel in [p for p in parcels.values() if is_overdue(p, today)]:
                try:
                    delayed = transition(parcel, "delayed", parcel.current_location, DELAY_NOTE, now)
                except Exception:
                    logger.exception(f"Could not escalate parcel {parcel.tracking_number}")
                    continue
                parcels[parcel.id] = delayed
                escalated.append(delayed)
                logger.info(
                    f"Parcel {parcel.tracking_number} overdue since {parcel.estimated_delivery}, marked delayed"
                )

        for parcel in escalated:
            self.notifications.notify_delayed(parcel)

        return escalated
