import logging
import json
import uuid
from contextvars import ContextVar
from typing import Callable, Optional
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from .config import settings

REQUEST_ID_HEADER = "X-Request-Id"

# Correlation id of the inbound request being served, if any
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

def current_request_id() -> Optional[str]:
    return request_id_var.get()

# Simple JSON formatter for line-oriented logs
class JsonFormatter(logging.Formatter):
    def format(self, record):
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        # Explicit request id wins over the one of the request being served
        rid = getattr(record, "request_id", None) or current_request_id()
        if rid:
            payload["request_id"] = rid
        endpoint = getattr(record, "endpoint", None)
        if endpoint:
            payload["endpoint"] = endpoint
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload)

def configure_logging(level: str | None = None):
    """
    Route every logger through one JSON handler so the library's outbound
    calls and the demo service share a structured log stream.
    """
    root = logging.getLogger()
    root.setLevel((level or settings.LOG_LEVEL).upper())
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root.handlers = [handler]

def new_request_id() -> str:
    return str(uuid.uuid4())

class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """
    Ensures every request has an X-Request-Id header and attaches it to the
    response. While the request is served the id sits in ``request_id_var``,
    so log records and outbound service calls carry the same id.
    """
    async def dispatch(self, request: Request, call_next: Callable):
        request_id = request.headers.get("x-request-id") or new_request_id()
        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        try:
            response: Response = await call_next(request)
        finally:
            request_id_var.reset(token)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
