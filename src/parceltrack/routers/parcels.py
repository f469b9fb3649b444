from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import PlainTextResponse

from parceltrack.models.parcel import Parcel, ParcelCreate, ParcelStatus, ParcelUpdate, Priority, ServiceType, StatusChange
from parceltrack.models.query import DateRange, ParcelFilters, ParcelStats, SortDirection, SortField
from parceltrack.services.parcels import ParcelService

router = APIRouter()


def get_service(request: Request) -> ParcelService:
    return request.app.state.parcel_service


def list_query(
    search: str = "",
    status: ParcelStatus | None = None,
    priority: Priority | None = None,
    service_type: ServiceType | None = None,
    date_range: DateRange = "all",
    sort_field: SortField = "created_at",
    sort_direction: SortDirection = "desc",
) -> dict:
    """Shared query parameters for listing and exporting."""
    return {
        "search_term": search,
        "filters": ParcelFilters(
            status=status or "all",
            priority=priority or "all",
            service_type=service_type or "all",
            date_range=date_range,
        ),
        "sort_field": sort_field,
        "sort_direction": sort_direction,
    }


@router.get("", response_model=list[Parcel])
async def list_parcels(
    query_args: dict = Depends(list_query),
    service: ParcelService = Depends(get_service),
):
    """Search, filter and sort parcels."""
    return service.list_parcels(**query_args)


@router.post("", response_model=Parcel, status_code=status.HTTP_201_CREATED)
def create_parcel(spec: ParcelCreate, service: ParcelService = Depends(get_service)):
    return service.create_parcel(spec)


@router.post("/delay-check", response_model=list[Parcel])
def run_delay_check(service: ParcelService = Depends(get_service)):
    """Run the overdue sweep now instead of waiting for the next tick."""
    return service.check_delays()


@router.get("/stats", response_model=ParcelStats)
async def get_stats(service: ParcelService = Depends(get_service)):
    return service.get_stats()


@router.get("/export.csv", response_class=PlainTextResponse)
async def export_csv(
    query_args: dict = Depends(list_query),
    service: ParcelService = Depends(get_service),
):
    """Export the current query result as CSV."""
    return PlainTextResponse(
        service.export_csv(**query_args),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="parcels.csv"'},
    )


@router.get("/export.json")
async def export_json(service: ParcelService = Depends(get_service)):
    """Export every parcel in the persisted JSON layout."""
    return Response(service.export_json(), media_type="application/json")


@router.get("/{parcel_id}", response_model=Parcel)
async def get_parcel(parcel_id: str, service: ParcelService = Depends(get_service)):
    return service.get_parcel(parcel_id)


@router.patch("/{parcel_id}", response_model=Parcel)
def update_parcel(parcel_id: str, patch: ParcelUpdate, service: ParcelService = Depends(get_service)):
    return service.update_parcel(parcel_id, patch)


@router.post("/{parcel_id}/status", response_model=Parcel)
def change_status(parcel_id: str, change: StatusChange, service: ParcelService = Depends(get_service)):
    """Explicit status transition, recorded in the parcel's history."""
    return service.transition_parcel(parcel_id, change.status, change.location, change.notes)


@router.delete("/{parcel_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_parcel(parcel_id: str, service: ParcelService = Depends(get_service)):
    service.delete_parcel(parcel_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
