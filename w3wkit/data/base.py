from typing import Any, Mapping, Optional, Protocol, Tuple
from dataclasses import dataclass

from ..core.utils import join_csv

# ----- Data shapes (thin & explicit) -----

@dataclass(frozen=True)
class Coordinates:
    lat: float   # degrees, -90..90
    lng: float   # degrees, -180..180

    def to_param(self) -> str:
        return join_csv((self.lat, self.lng))

@dataclass(frozen=True)
class BoundingBox:
    southwest: Coordinates
    northeast: Coordinates

    @classmethod
    def from_corners(cls, sw_lat: float, sw_lng: float, ne_lat: float, ne_lng: float) -> "BoundingBox":
        return cls(southwest=Coordinates(sw_lat, sw_lng), northeast=Coordinates(ne_lat, ne_lng))

    def to_param(self) -> str:
        return join_csv((self.southwest.lat, self.southwest.lng, self.northeast.lat, self.northeast.lng))

@dataclass(frozen=True)
class Circle:
    center: Coordinates
    radius_meters: float

    def to_param(self) -> str:
        return join_csv((self.center.lat, self.center.lng, self.radius_meters))

@dataclass(frozen=True)
class Polygon:
    points: Tuple[Coordinates, ...]   # at least 3; closure is implicit

    def to_param(self) -> str:
        # The service wants an explicitly closed ring
        ring = list(self.points)
        if ring and ring[0] != ring[-1]:
            ring.append(ring[0])
        flat = []
        for p in ring:
            flat.extend((p.lat, p.lng))
        return join_csv(flat)

# ----- Protocols (interfaces) -----

class Transport(Protocol):
    async def get(
        self, url: str, params: Optional[Mapping[str, str]], headers: Mapping[str, str]
    ) -> Any:
        """
        Issue one GET and return the decoded JSON body (None for an empty
        2xx body). Raises a W3WError subclass on any failure.
        """
        ...
