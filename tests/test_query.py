from datetime import timedelta

import pytest

from parceltrack.models.query import ParcelFilters
from parceltrack.services.query import days_since, query


@pytest.fixture
def parcels(store, make_spec, clock):
    """Four parcels created a day apart, newest last."""
    specs = [
        make_spec(
            currentLocation="Hub - Denver",
            priority="low",
            serviceType="express",
            estimatedDelivery="2026-03-20",
            recipient={"name": "Sarah Johnson", "address": "789 Oak Ave"},
        ),
        make_spec(
            currentLocation="Sorting Facility - Dallas",
            priority="high",
            estimatedDelivery="2026-03-15",
            recipient={"name": "Mike Wilson", "address": "456 Pine St"},
        ),
        make_spec(
            currentLocation="Local Facility - Miami",
            priority="medium",
            serviceType="overnight",
            estimatedDelivery="2026-03-18",
            recipient={"name": "Lisa Brown", "address": "789 Beach Blvd"},
        ),
        make_spec(
            currentLocation="Warehouse - Seattle",
            priority="high",
            estimatedDelivery="2026-03-12",
            recipient={"name": "David Kim", "address": "456 Tech Ave"},
        ),
    ]
    created = []
    for spec in specs:
        created.append(store.create(spec))
        clock.advance(days=1)
    return created


def test_empty_query_returns_everything_newest_first(parcels, clock):
    assert query(parcels, now=clock.now) == list(reversed(parcels))


@pytest.mark.parametrize(
    "term, expected",
    [
        ("sarah", [0]),
        ("DALLAS", [1]),
        ("facility", [1, 2]),
        ("zzz", []),
    ],
)
def test_search_matches_any_field_case_insensitively(parcels, clock, term, expected):
    result = query(parcels, term, sort_field="created_at", sort_direction="asc", now=clock.now)

    assert result == [parcels[i] for i in expected]


def test_search_matches_tracking_number(parcels, clock):
    target = parcels[2]

    result = query(parcels, target.tracking_number.lower(), now=clock.now)

    assert result == [target]


def test_filters_combine_with_and(parcels, clock):
    filters = ParcelFilters(priority="high", service_type="standard")

    result = query(parcels, "", filters, "created_at", "asc", now=clock.now)

    assert result == [parcels[1], parcels[3]]


def test_search_and_status_filter_combine_with_and(store, parcels, clock):
    store.update(parcels[1].id, {"status": "in_transit"})
    current = store.list()

    result = query(current, "Sarah", ParcelFilters(status="in_transit"), now=clock.now)

    assert result == []


@pytest.mark.parametrize(
    "date_range, expected",
    [
        ("today", []),
        ("week", [0, 1, 2, 3]),
        ("month", [0, 1, 2, 3]),
        ("all", [0, 1, 2, 3]),
    ],
)
def test_date_range_buckets(parcels, clock, date_range, expected):
    result = query(parcels, "", ParcelFilters(date_range=date_range), "created_at", "asc", now=clock.now)

    assert result == [parcels[i] for i in expected]


def test_date_range_today_uses_whole_days(parcels, clock):
    now = parcels[3].created_at + timedelta(hours=23)

    result = query(parcels, "", ParcelFilters(date_range="today"), now=now)

    assert result == [parcels[3]]


def test_date_range_week_excludes_older_parcels(parcels):
    now = parcels[0].created_at + timedelta(days=8, hours=1)

    result = query(parcels, "", ParcelFilters(date_range="week"), "created_at", "asc", now=now)

    assert result == parcels[1:]


def test_days_since_floors_partial_days(clock):
    assert days_since(clock.now - timedelta(hours=47), clock.now) == 1
    assert days_since(clock.now, clock.now) == 0


def test_priority_descending_puts_high_first(store, make_spec, clock):
    p1 = store.create(make_spec(priority="high"))
    p2 = store.create(make_spec(priority="low"))

    assert query([p2, p1], sort_field="priority", sort_direction="desc", now=clock.now) == [p1, p2]


@pytest.mark.parametrize(
    "field, expected",
    [
        ("estimated_delivery", [3, 1, 2, 0]),
        ("priority", [0, 2, 1, 3]),
        ("status", [0, 1, 2, 3]),
    ],
)
def test_sort_ascending(parcels, clock, field, expected):
    assert query(parcels, sort_field=field, sort_direction="asc", now=clock.now) == [parcels[i] for i in expected]


def test_sort_is_stable_in_both_directions(parcels, clock):
    ascending = query(parcels, sort_field="priority", sort_direction="asc", now=clock.now)
    descending = query(parcels, sort_field="priority", sort_direction="desc", now=clock.now)

    # parcels 1 and 3 tie on "high" and keep input order either way
    assert ascending == [parcels[0], parcels[2], parcels[1], parcels[3]]
    assert descending == [parcels[1], parcels[3], parcels[2], parcels[0]]


def test_distinct_keys_reverse_exactly(parcels, clock):
    ascending = query(parcels, sort_field="tracking_number", sort_direction="asc", now=clock.now)
    descending = query(parcels, sort_field="tracking_number", sort_direction="desc", now=clock.now)

    assert descending == list(reversed(ascending))


def test_query_is_repeatable_and_pure(parcels, clock):
    original = list(parcels)

    first = query(parcels, "a", sort_field="priority", now=clock.now)
    second = query(parcels, "a", sort_field="priority", now=clock.now)

    assert first == second
    assert first is not parcels
    assert parcels == original
