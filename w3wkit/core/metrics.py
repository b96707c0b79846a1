import time
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

# Define metrics (names follow Prometheus conventions)
REQ_COUNT = Counter("http_requests_total", "Total HTTP requests", ["path","method","code"])
REQ_LATENCY = Histogram("http_request_duration_seconds", "Request latency", ["path","method"])

# Outbound calls to the geocoding service, labelled by endpoint name
W3W_CALLS = Counter("w3w_api_requests_total", "Requests sent to the geocoding service", ["endpoint","code"])
W3W_LATENCY = Histogram("w3w_api_request_duration_seconds", "Geocoding service latency", ["endpoint"])

def observe_call(endpoint: str, code: str, elapsed: float) -> None:
    W3W_CALLS.labels(endpoint=endpoint, code=code).inc()
    W3W_LATENCY.labels(endpoint=endpoint).observe(elapsed)

class PromMiddleware(BaseHTTPMiddleware):
    """
    Measures latency and counts requests for the demo service.
    """
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed = time.perf_counter() - start

        path = request.url.path
        method = request.method
        code = str(response.status_code)

        REQ_COUNT.labels(path=path, method=method, code=code).inc()
        REQ_LATENCY.labels(path=path, method=method).observe(elapsed)
        return response

async def metrics_endpoint(request: Request):
    """
    GET /v1/metrics, scraped by Prometheus.
    """
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
