from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from parceltrack.errors import SerializationError
from parceltrack.models.parcel import Parcel

_parcel_list = TypeAdapter(list[Parcel])


def dump_parcel(parcel: Parcel) -> str:
    return parcel.model_dump_json(by_alias=True)


def load_parcel(data: str | bytes) -> Parcel:
    try:
        return Parcel.model_validate_json(data)
    except PydanticValidationError as e:
        raise SerializationError(f"Corrupt parcel record: {e.error_count()} error(s)") from e


def dump_parcels(parcels: list[Parcel]) -> str:
    return _parcel_list.dump_json(parcels, by_alias=True, indent=2).decode()


def load_parcels(data: str | bytes) -> list[Parcel]:
    try:
        return _parcel_list.validate_json(data)
    except PydanticValidationError as e:
        raise SerializationError(f"Corrupt parcel list: {e.error_count()} error(s)") from e
