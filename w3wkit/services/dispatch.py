from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..core.errors import DecodeError
from ..data.options import OutputFormat
from ..schemas import Address, AddressGeoJson

M = TypeVar("M", bound=BaseModel)

def decode_as(model: Type[M], payload: Any) -> M:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(
            f"payload does not match {model.__name__}: {exc.error_count()} error(s)",
            details={"errors": exc.errors(include_url=False)},
        ) from exc

def decode_result(
    payload: Any,
    output_format: OutputFormat,
    plain: Type[BaseModel] = Address,
    geojson: Type[BaseModel] = AddressGeoJson,
) -> BaseModel:
    """
    Decode ``payload`` into the model picked by ``output_format``.

    The shape is never guessed from the payload: a plain body decoded as
    GeoJSON (or the other way round) raises DecodeError.
    """
    model = geojson if OutputFormat(output_format) is OutputFormat.GEOJSON else plain
    return decode_as(model, payload)
