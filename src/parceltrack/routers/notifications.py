from fastapi import APIRouter, Depends

from parceltrack.models.notification import Notification
from parceltrack.routers.parcels import get_service
from parceltrack.services.parcels import ParcelService

router = APIRouter()


@router.get("", response_model=list[Notification])
async def list_notifications(service: ParcelService = Depends(get_service)):
    """Pending delay alerts, oldest first."""
    return service.list_notifications()


@router.delete("/{index}", response_model=Notification)
async def dismiss_notification(index: int, service: ParcelService = Depends(get_service)):
    return service.dismiss_notification(index)
