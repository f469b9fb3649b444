from datetime import datetime
from typing import Container

from parceltrack.models.parcel import utcnow

TRACKING_PREFIX = "TRK"


def generate_tracking_number(taken: Container[str], now: datetime | None = None) -> str:
    """Build a tracking number from the millisecond clock.

    Numbers created within the same millisecond (or wrapping the 9 digit
    window) get a numeric suffix until they are free.
    """
    now = now or utcnow()
    millis = int(now.timestamp() * 1000)
    base = f"{TRACKING_PREFIX}{millis % 10**9:09d}"

    candidate = base
    suffix = 1
    while candidate in taken:
        candidate = f"{base}-{suffix}"
        suffix += 1
    return candidate
