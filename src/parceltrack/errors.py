from typing import Any


class ParcelError(Exception):
    """Base parcel engine exception."""

    error_code = "ERR_PARCEL"
    status_code = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFound(ParcelError):
    """Raised when a parcel id (or notification index) does not exist."""

    error_code = "ERR_NOT_FOUND"
    status_code = 404

    def __init__(self, resource: str, resource_id: Any = None):
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with ID {resource_id} not found"
        super().__init__(message, {"resource": resource, "id": resource_id})


class InvalidTransition(ParcelError):
    """Raised when a status change is attempted on a terminal parcel."""

    error_code = "ERR_INVALID_TRANSITION"
    status_code = 409

    def __init__(self, parcel_id: str, current: str, target: str):
        super().__init__(
            f"Parcel {parcel_id} is {current} and cannot move to {target}",
            {"id": parcel_id, "current": current, "target": target},
        )


class ValidationError(ParcelError):
    """Raised for malformed create/update input, before anything is written."""

    error_code = "ERR_VALIDATION"
    status_code = 422

    def __init__(self, message: str = "Validation error", errors: list | None = None):
        super().__init__(message, {"errors": errors or []})


class SerializationError(ParcelError):
    """Raised when persisted parcel state cannot be decoded."""

    error_code = "ERR_SERIALIZATION"
    status_code = 500


def error_list(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Trim pydantic error dicts to JSON-safe loc/msg/type entries."""
    return [{"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]} for err in errors]
