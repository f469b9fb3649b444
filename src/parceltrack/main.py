import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from parceltrack.config import settings
from parceltrack.errors import ParcelError, ValidationError, error_list
from parceltrack.routers import health, notifications, parcels
from parceltrack.services.parcels import build_service
from parceltrack.tasks.scheduler import shutdown_scheduler, start_scheduler

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting Parcel Tracker")
    service = build_service()
    app.state.parcel_service = service
    if settings.scheduler_enabled:
        start_scheduler(service.monitor)
    yield
    # Shutdown
    shutdown_scheduler()
    logger.info("Parcel Tracker shutdown")


app = FastAPI(title="Parcel Tracker", lifespan=lifespan)


@app.exception_handler(ParcelError)
async def parcel_error_handler(request: Request, exc: ParcelError) -> JSONResponse:
    """Render engine errors as {error_code, message, details}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": exc.error_code,
            "message": exc.message,
            "details": exc.details,
        },
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies and parameters use the same error shape."""
    return await parcel_error_handler(request, ValidationError("Validation error", error_list(exc.errors())))


# Include routers
app.include_router(health.router)
app.include_router(parcels.router, prefix="/parcels")
app.include_router(notifications.router, prefix="/notifications")
