
from pydantic import AwareDatetime, BaseModel, Field

from parceltrack.models.parcel import CAMEL_CONFIG, utcnow


class Notification(BaseModel):
    parcel_id: str
    tracking_number: str
    message: str
    created_at: AwareDatetime = Field(default_factory=utcnow)

    model_config = CAMEL_CONFIG
