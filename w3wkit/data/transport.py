import logging
import time
from typing import Any, Mapping, Optional

import httpx
from pydantic import ValidationError

from .base import Transport
from ..core.config import settings
from ..core.errors import ApiError, DecodeError, HttpError, NetworkError, UnknownError
from ..core.logging import REQUEST_ID_HEADER, current_request_id, new_request_id
from ..core.metrics import observe_call
from ..schemas import ErrorResponse

log = logging.getLogger("w3wkit.transport")

def _endpoint(url: httpx.URL) -> str:
    return url.path.rstrip("/").rsplit("/", 1)[-1] or "/"

async def _stamp_request(request: httpx.Request) -> None:
    # Reuse the id of the request being served, else mint one for this call
    request.headers.setdefault(REQUEST_ID_HEADER, current_request_id() or new_request_id())
    request.extensions["w3wkit_started"] = time.perf_counter()

async def _record_response(response: httpx.Response) -> None:
    request = response.request
    started = request.extensions.get("w3wkit_started", time.perf_counter())
    endpoint = _endpoint(request.url)
    observe_call(endpoint, str(response.status_code), time.perf_counter() - started)
    log.info(
        "%s %s -> %s", request.method, endpoint, response.status_code,
        extra={"request_id": request.headers.get(REQUEST_ID_HEADER), "endpoint": endpoint},
    )

class HttpTransport(Transport):
    """
    httpx-backed transport. One AsyncClient per call keeps the transport
    free of shared connection state.

    ``mock`` accepts any httpx transport (e.g. ``httpx.MockTransport``) and is
    how tests stand in for the remote service.
    """
    def __init__(self, timeout: Optional[float] = None, mock: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = timeout if timeout is not None else settings.W3W_TIMEOUT_SECONDS
        self.mock = mock

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.mock,
            event_hooks={"request": [_stamp_request], "response": [_record_response]},
        )

    async def get(self, url: str, params: Optional[Mapping[str, str]], headers: Mapping[str, str]) -> Any:
        try:
            async with self._client() as client:
                r = await client.get(url, params=params, headers=dict(headers))
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            log.warning("geocoding service unreachable: %s", exc)
            raise NetworkError(str(exc)) from exc
        except httpx.RequestError as exc:
            raise HttpError(str(exc)) from exc
        except httpx.HTTPError as exc:
            raise UnknownError(str(exc)) from exc

        if r.is_error:
            raise self._error_from(r)
        if not r.content:
            # e.g. autosuggest-selection answers 200 with no body
            return None
        try:
            return r.json()
        except ValueError as exc:
            raise DecodeError(f"response body is not JSON: {exc}") from exc

    @staticmethod
    def _error_from(r: httpx.Response) -> Exception:
        try:
            body = ErrorResponse.model_validate(r.json())
        except (ValueError, ValidationError):
            return HttpError(f"HTTP {r.status_code}: {r.text[:120]}", status_code=r.status_code)
        log.info("service error %s: %s", body.error.code, body.error.message)
        return ApiError(body.error.code, body.error.message, status_code=r.status_code)

def default_transport() -> Transport:
    """
    Factory used when the caller does not bring its own transport.
    """
    return HttpTransport(settings.W3W_TIMEOUT_SECONDS)
