"""
Request options for the geocoding endpoints.

RequestOptions is an immutable value: every builder method returns a new
instance and leaves the receiver untouched, so one options value can be
shared between callers and reused across requests.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple

from .base import BoundingBox, Circle, Coordinates, Polygon


class OutputFormat(str, Enum):
    PLAIN = "json"
    GEOJSON = "geojson"


@dataclass(frozen=True)
class ClipPolicy:
    """
    Geographic filters for suggestions. The four dimensions are independent;
    setting one never clears another, and how the service combines them is
    up to the service.
    """
    countries: Optional[Tuple[str, ...]] = None
    bounding_box: Optional[BoundingBox] = None
    circle: Optional[Circle] = None
    polygon: Optional[Polygon] = None

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.countries is not None:
            params["clip-to-country"] = ",".join(self.countries)
        if self.bounding_box is not None:
            params["clip-to-bounding-box"] = self.bounding_box.to_param()
        if self.circle is not None:
            params["clip-to-circle"] = self.circle.to_param()
        if self.polygon is not None:
            params["clip-to-polygon"] = self.polygon.to_param()
        return params


@dataclass(frozen=True)
class RequestOptions:
    focus_point: Optional[Coordinates] = None
    clip: ClipPolicy = field(default_factory=ClipPolicy)
    language_code: Optional[str] = None
    locale_code: Optional[str] = None
    format: Optional[OutputFormat] = None
    # autosuggest tuning
    n_results: Optional[int] = None
    n_focus_results: Optional[int] = None
    input_kind: Optional[str] = None
    land_preferred: Optional[bool] = None

    # ----- builder -----

    def focus(self, coordinates: Coordinates) -> "RequestOptions":
        return replace(self, focus_point=coordinates)

    def language(self, code: str) -> "RequestOptions":
        return replace(self, language_code=code)

    def locale(self, code: str) -> "RequestOptions":
        return replace(self, locale_code=code)

    def clip_to_country(self, countries: Iterable[str] | str) -> "RequestOptions":
        if isinstance(countries, str):
            countries = [c for c in countries.split(",") if c]
        # an empty list means no country filter, not "clip-to-country="
        return replace(self, clip=replace(self.clip, countries=tuple(countries) or None))

    def clip_to_bounding_box(self, bounding_box: BoundingBox) -> "RequestOptions":
        return replace(self, clip=replace(self.clip, bounding_box=bounding_box))

    def clip_to_circle(self, circle: Circle) -> "RequestOptions":
        return replace(self, clip=replace(self.clip, circle=circle))

    def clip_to_polygon(self, polygon: Polygon | Iterable[Coordinates]) -> "RequestOptions":
        if not isinstance(polygon, Polygon):
            polygon = Polygon(points=tuple(polygon))
        return replace(self, clip=replace(self.clip, polygon=polygon))

    def output_format(self, fmt: OutputFormat | str) -> "RequestOptions":
        return replace(self, format=OutputFormat(fmt))

    def n_result(self, n: int) -> "RequestOptions":
        return replace(self, n_results=n)

    def n_focus_result(self, n: int) -> "RequestOptions":
        return replace(self, n_focus_results=n)

    def input_type(self, kind: str) -> "RequestOptions":
        return replace(self, input_kind=kind)

    def prefer_land(self, prefer: bool) -> "RequestOptions":
        return replace(self, land_preferred=prefer)

    # ----- wire format -----

    def to_params(self) -> Dict[str, str]:
        """Query parameters for the set options only, in a fixed key order."""
        params: Dict[str, str] = {}
        if self.n_results is not None:
            params["n-result"] = str(self.n_results)
        if self.focus_point is not None:
            params["focus"] = self.focus_point.to_param()
        if self.n_focus_results is not None:
            params["n-focus-result"] = str(self.n_focus_results)
        params.update(self.clip.to_params())
        if self.input_kind is not None:
            params["input-type"] = self.input_kind
        if self.language_code is not None:
            params["language"] = self.language_code
        if self.locale_code is not None:
            params["locale"] = self.locale_code
        if self.land_preferred is not None:
            params["prefer-land"] = "true" if self.land_preferred else "false"
        if self.format is not None:
            params["format"] = self.format.value
        return params
