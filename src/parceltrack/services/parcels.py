import logging
from datetime import datetime
from typing import Any, Callable

from parceltrack.config import settings
from parceltrack.errors import NotFound, SerializationError
from parceltrack.models.notification import Notification
from parceltrack.models.parcel import Parcel, ParcelCreate, ParcelStatus, ParcelUpdate, utcnow
from parceltrack.models.query import ParcelFilters, ParcelStats, SortDirection, SortField
from parceltrack.services import stats
from parceltrack.services.delay_monitor import DelayMonitor
from parceltrack.services.export import parcels_to_csv
from parceltrack.services.notifications import NotificationCenter
from parceltrack.services.query import query
from parceltrack.storage import codec, database
from parceltrack.storage.seed import sample_parcels
from parceltrack.storage.store import ParcelStore

logger = logging.getLogger(__name__)


class ParcelService:
    def __init__(self, store: ParcelStore, notifications: NotificationCenter | None = None):
        self.store = store
        self.notifications = notifications or NotificationCenter()
        self.monitor = DelayMonitor(store, self.notifications)

    # Commands

    def create_parcel(self, spec: ParcelCreate | dict[str, Any]) -> Parcel:
        return self.store.create(spec)

    def update_parcel(self, parcel_id: str, patch: ParcelUpdate | dict[str, Any]) -> Parcel:
        return self.store.update(parcel_id, patch)

    def transition_parcel(
        self,
        parcel_id: str,
        status: ParcelStatus,
        location: str | None = None,
        notes: str | None = None,
    ) -> Parcel:
        return self.store.transition(parcel_id, status, location, notes)

    def delete_parcel(self, parcel_id: str) -> None:
        if not self.store.delete(parcel_id):
            raise NotFound("Parcel", parcel_id)
        logger.info(f"Deleted parcel {parcel_id}")

    def get_parcel(self, parcel_id: str) -> Parcel:
        return self.store.get(parcel_id)

    def check_delays(self) -> list[Parcel]:
        return self.monitor.run_once()

    # Queries

    def list_parcels(
        self,
        search_term: str = "",
        filters: ParcelFilters | None = None,
        sort_field: SortField = "created_at",
        sort_direction: SortDirection = "desc",
    ) -> list[Parcel]:
        return query(
            self.store.list(),
            search_term,
            filters,
            sort_field,
            sort_direction,
            now=self.store.clock(),
        )

    def get_stats(self) -> ParcelStats:
        return stats.compute_stats(self.store.list(), now=self.store.clock())

    def export_csv(self, **query_args) -> str:
        """CSV of the current query result, not of the whole store."""
        return parcels_to_csv(self.list_parcels(**query_args))

    def export_json(self) -> str:
        return codec.dump_parcels(self.store.list())

    # Notifications

    def list_notifications(self) -> list[Notification]:
        return self.notifications.list()

    def dismiss_notification(self, index: int) -> Notification:
        return self.notifications.dismiss(index)


def load_parcels() -> list[Parcel]:
    """Read persisted parcels, falling back to the sample dataset."""
    try:
        parcels = database.load_all()
    except SerializationError as e:
        logger.warning(f"Stored parcels unreadable ({e.message}), replacing with sample data")
        parcels = sample_parcels() if settings.seed_sample_data else []
        database.replace_all(parcels)
        return parcels

    if not parcels and settings.seed_sample_data:
        logger.info("No stored parcels, seeding sample data")
        parcels = sample_parcels()
        database.replace_all(parcels)
    return parcels


def build_service(clock: Callable[[], datetime] = utcnow) -> ParcelService:
    """Create a service backed by the SQLite snapshot in settings.data_dir."""
    database.init_db()
    store = ParcelStore(persist=database.replace_all, clock=clock)
    store.load(load_parcels())
    logger.info(f"Loaded {len(store)} parcels")
    return ParcelService(store)
