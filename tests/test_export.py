import csv
import io

from parceltrack.models.query import ParcelFilters
from parceltrack.services.export import CSV_COLUMNS, parcels_to_csv


def test_csv_has_fixed_columns_and_quotes_commas(store, make_spec):
    parcel = store.create(make_spec())

    rows = list(csv.reader(io.StringIO(parcels_to_csv([parcel]))))

    assert rows[0] == CSV_COLUMNS
    assert rows[1] == [
        parcel.tracking_number,
        "pending",
        "Warehouse - Newark",
        parcel.estimated_delivery.isoformat(),
        "John Smith",
        "123 Main St, Boston, MA 02101",
        "medium",
        "standard",
    ]


def test_export_follows_the_current_query(service, make_spec):
    service.create_parcel(make_spec(priority="low"))
    wanted = service.create_parcel(make_spec(priority="high"))

    exported = service.export_csv(filters=ParcelFilters(priority="high"))

    rows = list(csv.reader(io.StringIO(exported)))
    assert len(rows) == 2
    assert rows[1][0] == wanted.tracking_number
