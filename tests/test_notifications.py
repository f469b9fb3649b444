import pytest

from parceltrack.errors import NotFound
from parceltrack.services.notifications import NotificationCenter


@pytest.fixture
def center():
    return NotificationCenter()


def test_duplicate_alerts_for_a_parcel_are_dropped(center, store, make_spec):
    parcel = store.create(make_spec())

    first = center.notify_delayed(parcel)
    second = center.notify_delayed(parcel)

    assert first is not None
    assert second is None
    assert len(center.list()) == 1


def test_dismiss_removes_by_index(center, store, make_spec):
    first = store.create(make_spec())
    second = store.create(make_spec())
    center.notify_delayed(first)
    center.notify_delayed(second)

    dismissed = center.dismiss(0)

    assert dismissed.parcel_id == first.id
    assert [n.parcel_id for n in center.list()] == [second.id]


def test_dismissed_parcel_can_alert_again(center, store, make_spec):
    parcel = store.create(make_spec())
    center.notify_delayed(parcel)
    center.dismiss(0)

    assert center.notify_delayed(parcel) is not None


@pytest.mark.parametrize("index", [-1, 0, 3])
def test_dismiss_unknown_index_raises(center, index):
    with pytest.raises(NotFound):
        center.dismiss(index)


def test_listeners_receive_alerts_and_failures_are_contained(center, store, make_spec):
    parcel = store.create(make_spec())
    received = []

    def broken(notification):
        raise RuntimeError("listener down")

    center.subscribe(broken)
    center.subscribe(received.append)

    center.notify_delayed(parcel)

    assert [n.tracking_number for n in received] == [parcel.tracking_number]
