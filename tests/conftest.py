from datetime import datetime, timedelta, timezone

import pytest

from parceltrack.config import settings
from parceltrack.services.parcels import ParcelService
from parceltrack.storage.store import ParcelStore

START = datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, now: datetime = START):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


def parcel_spec(**overrides) -> dict:
    spec = {
        "status": "pending",
        "currentLocation": "Warehouse - Newark",
        "estimatedDelivery": (START + timedelta(days=3)).date().isoformat(),
        "recipient": {
            "name": "John Smith",
            "address": "123 Main St, Boston, MA 02101",
            "phone": "+1-555-0123",
            "email": "john.smith@email.com",
        },
        "sender": {"name": "ABC Electronics", "address": "456 Industrial Blvd, Newark, NJ 07102"},
        "weight": 2.5,
        "dimensions": "12x8x6 inches",
        "priority": "medium",
        "serviceType": "standard",
    }
    spec.update(overrides)
    return spec


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock) -> ParcelStore:
    return ParcelStore(clock=clock)


@pytest.fixture
def service(store) -> ParcelService:
    return ParcelService(store)


@pytest.fixture
def data_dir(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "data_dir", str(tmp_path))
    monkeypatch.setattr(settings, "scheduler_enabled", False)
    monkeypatch.setattr(settings, "seed_sample_data", False)
    return tmp_path


@pytest.fixture
def make_spec():
    return parcel_spec
