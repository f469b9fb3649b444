import logging
import threading
from typing import Callable

from parceltrack.errors import NotFound
from parceltrack.models.notification import Notification
from parceltrack.models.parcel import Parcel

logger = logging.getLogger(__name__)

Listener = Callable[[Notification], None]


def delay_message(parcel: Parcel) -> str:
    return f"Parcel {parcel.tracking_number} is delayed beyond estimated delivery date"


class NotificationCenter:
    """Delay alerts kept until an operator dismisses them."""

    def __init__(self):
        self._notifications: list[Notification] = []
        self._listeners: list[Listener] = []
        self._lock = threading.Lock()

    def subscribe(self, listener: Listener) -> None:
        """Register a callback invoked for every new delay alert."""
        self._listeners.append(listener)

    def list(self) -> list[Notification]:
        with self._lock:
            return list(self._notifications)

    def notify_delayed(self, parcel: Parcel) -> Notification | None:
        """Record a delay alert unless one is already pending for this parcel."""
        with self._lock:
            if any(n.parcel_id == parcel.id for n in self._notifications):
                return None
            notification = Notification(
                parcel_id=parcel.id,
                tracking_number=parcel.tracking_number,
                message=delay_message(parcel),
            )
            self._notifications.append(notification)

        for listener in self._listeners:
            try:
                listener(notification)
            except Exception:
                logger.exception(f"Notification listener failed for {parcel.tracking_number}")
        return notification

    def dismiss(self, index: int) -> Notification:
        with self._lock:
            if not 0 <= index < len(self._notifications):
                raise NotFound("Notification", index)
            return self._notifications.pop(index)
