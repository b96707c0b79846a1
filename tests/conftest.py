import json

import httpx
import pytest

from w3wkit.data.transport import HttpTransport
from w3wkit.services.geocoding_service import GeocodingClient

HOST = "https://w3w.test/v3"

ADDRESS_JSON = {
    "country": "GB",
    "square": {
        "southwest": {"lng": -0.203607, "lat": 51.521241},
        "northeast": {"lng": -0.203575, "lat": 51.521261},
    },
    "nearestPlace": "Bayswater, London",
    "coordinates": {"lng": -0.203586, "lat": 51.521251},
    "words": "filled.count.soap",
    "language": "en",
    "map": "https://w3w.co/filled.count.soap",
}

ADDRESS_GEOJSON = {
    "type": "FeatureCollection",
    "features": [
        {
            "type": "Feature",
            "bbox": [-0.203607, 51.521241, -0.203575, 51.521261],
            "geometry": {"type": "Point", "coordinates": [-0.203586, 51.521251]},
            "properties": {
                "country": "GB",
                "nearestPlace": "Bayswater, London",
                "words": "filled.count.soap",
                "language": "en",
                "map": "https://w3w.co/filled.count.soap",
            },
        }
    ],
}

SUGGESTIONS = {
    "suggestions": [
        {
            "country": "GB",
            "nearestPlace": "Bayswater, London",
            "words": "filled.count.soap",
            "rank": 1,
            "language": "en",
        }
    ]
}


class Recorder:
    """Canned responses keyed by endpoint name; remembers every request."""

    def __init__(self, routes):
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path.rsplit("/", 1)[-1]
        status, body = self.routes[endpoint]
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, content=json.dumps(body).encode(), headers={"content-type": "application/json"})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture()
def make_client():
    """Build a GeocodingClient whose transport answers from ``routes``."""
    def _make(routes):
        recorder = Recorder(routes)
        transport = HttpTransport(timeout=5, mock=httpx.MockTransport(recorder))
        return GeocodingClient(api_key="TEST_API_KEY", host=HOST, transport=transport), recorder
    return _make
