from fastapi import APIRouter, Depends, HTTPException, Query
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_502_BAD_GATEWAY,
    HTTP_503_SERVICE_UNAVAILABLE,
)
from ..core.errors import ApiError, DecodeError, W3WError
from ..data.base import Coordinates
from ..data.options import OutputFormat, RequestOptions
from ..recognizer import did_you_mean, find_possible_3wa, is_possible_3wa
from ..schemas import Autosuggest, ScanRequest, ScanResponse
from ..services.geocoding_service import GeocodingClient

router = APIRouter()

def client_dep() -> GeocodingClient:
    # Built per request from settings; tests override this dependency.
    return GeocodingClient()

def _http_error(exc: W3WError) -> HTTPException:
    if isinstance(exc, ApiError):
        return HTTPException(status_code=HTTP_400_BAD_REQUEST, detail={"code": exc.code, "message": exc.message})
    if isinstance(exc, DecodeError):
        return HTTPException(status_code=HTTP_502_BAD_GATEWAY, detail=str(exc))
    return HTTPException(status_code=HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))

def _options(output_format: OutputFormat, language: str | None) -> RequestOptions:
    options = RequestOptions().output_format(output_format)
    if language:
        options = options.language(language)
    return options

@router.post("/scan", response_model=ScanResponse)
def scan_text(body: ScanRequest):
    """Offline: which parts of the text look like three-word addresses."""
    return ScanResponse(
        is_possible_3wa=is_possible_3wa(body.text),
        did_you_mean=did_you_mean(body.text),
        possible_3wa=find_possible_3wa(body.text),
    )

@router.get("/convert-to-3wa")
async def convert_to_3wa(
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    language: str | None = None,
    format: OutputFormat = OutputFormat.PLAIN,
    client: GeocodingClient = Depends(client_dep),
):
    try:
        result = await client.convert_to_3wa(Coordinates(lat, lng), _options(format, language))
    except W3WError as exc:
        raise _http_error(exc) from exc
    return result.model_dump(by_alias=True)

@router.get("/convert-to-coordinates")
async def convert_to_coordinates(
    words: str = Query(..., min_length=5),
    format: OutputFormat = OutputFormat.PLAIN,
    client: GeocodingClient = Depends(client_dep),
):
    try:
        result = await client.convert_to_coordinates(words, _options(format, None))
    except W3WError as exc:
        raise _http_error(exc) from exc
    return result.model_dump(by_alias=True)

@router.get("/autosuggest", response_model=Autosuggest)
async def autosuggest(
    input: str = Query(..., min_length=1),
    focus_lat: float | None = None,
    focus_lng: float | None = None,
    clip_to_country: str | None = None,
    n_result: int | None = Query(default=None, ge=1, le=100),
    client: GeocodingClient = Depends(client_dep),
):
    options = RequestOptions()
    if focus_lat is not None and focus_lng is not None:
        options = options.focus(Coordinates(focus_lat, focus_lng))
    if clip_to_country:
        options = options.clip_to_country(clip_to_country)
    if n_result is not None:
        options = options.n_result(n_result)
    try:
        return await client.autosuggest(input, options)
    except W3WError as exc:
        raise _http_error(exc) from exc
