import csv
import io
from typing import Sequence

from parceltrack.models.parcel import Parcel

CSV_COLUMNS = [
    "Tracking Number",
    "Status",
    "Current Location",
    "Estimated Delivery",
    "Recipient Name",
    "Recipient Address",
    "Priority",
    "Service Type",
]


def parcels_to_csv(parcels: Sequence[Parcel]) -> str:
    """Render one row per parcel, in the order given."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_COLUMNS)
    for parcel in parcels:
        writer.writerow(
            [
                parcel.tracking_number,
                parcel.status,
                parcel.current_location,
                parcel.estimated_delivery.isoformat(),
                parcel.recipient.name,
                parcel.recipient.address,
                parcel.priority,
                parcel.service_type,
            ]
        )
    return buffer.getvalue()
