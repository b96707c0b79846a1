from typing import Any, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from .data.base import BoundingBox, Coordinates

class _Wire(BaseModel):
    # camelCase on the wire, snake_case in Python; both accepted on input
    model_config = ConfigDict(populate_by_name=True, frozen=True)

# ----- convert-to-3wa / convert-to-coordinates -----

class Address(_Wire):
    country: str
    square: BoundingBox
    nearest_place: str = Field(alias="nearestPlace")
    coordinates: Coordinates
    words: str
    language: str
    map_url: str = Field(alias="map")
    locale: Optional[str] = None

class AddressProperties(_Wire):
    country: str
    nearest_place: str = Field(alias="nearestPlace")
    words: str
    language: str
    map_url: str = Field(alias="map")
    locale: Optional[str] = None

class PointGeometry(_Wire):
    type: Literal["Point"]
    coordinates: list[float] = Field(min_length=2)   # [lng, lat]

class AddressFeature(_Wire):
    type: Literal["Feature"]
    bbox: list[float] = Field(min_length=4, max_length=4)   # [swLng, swLat, neLng, neLat]
    geometry: PointGeometry
    properties: AddressProperties

class AddressGeoJson(_Wire):
    """
    GeoJSON rendition of an Address. The accessors below expose the same
    fields as Address, read from the first feature.
    """
    type: Literal["FeatureCollection"]
    features: list[AddressFeature] = Field(min_length=1)

    @property
    def first_feature(self) -> AddressFeature:
        return self.features[0]

    @property
    def words(self) -> str:
        return self.first_feature.properties.words

    @property
    def coordinates(self) -> Coordinates:
        lng, lat = self.first_feature.geometry.coordinates[:2]
        return Coordinates(lat=lat, lng=lng)

    @property
    def square(self) -> BoundingBox:
        sw_lng, sw_lat, ne_lng, ne_lat = self.first_feature.bbox
        return BoundingBox.from_corners(sw_lat, sw_lng, ne_lat, ne_lng)

    @property
    def country(self) -> str:
        return self.first_feature.properties.country

    @property
    def nearest_place(self) -> str:
        return self.first_feature.properties.nearest_place

    @property
    def language(self) -> str:
        return self.first_feature.properties.language

    @property
    def map_url(self) -> str:
        return self.first_feature.properties.map_url

GeocodeResult = Union[Address, AddressGeoJson]

# ----- grid-section -----

class Line(_Wire):
    start: Coordinates
    end: Coordinates

class GridSection(_Wire):
    lines: list[Line]

class MultiLineGeometry(_Wire):
    type: Literal["MultiLineString"]
    coordinates: list[list[list[float]]]

class GridFeature(_Wire):
    type: Literal["Feature"]
    geometry: MultiLineGeometry
    properties: dict[str, Any] = Field(default_factory=dict)

class GridSectionGeoJson(_Wire):
    type: Literal["FeatureCollection"]
    features: list[GridFeature]

# ----- autosuggest -----

class Suggestion(_Wire):
    country: str
    nearest_place: str = Field(alias="nearestPlace")
    words: str
    rank: int
    language: str
    distance_to_focus_km: Optional[float] = Field(default=None, alias="distanceToFocusKm")
    square: Optional[BoundingBox] = None
    coordinates: Optional[Coordinates] = None
    map_url: Optional[str] = Field(default=None, alias="map")
    locale: Optional[str] = None

class Autosuggest(_Wire):
    suggestions: list[Suggestion]

# ----- available-languages -----

class Language(_Wire):
    native_name: str = Field(alias="nativeName")
    code: str
    name: str
    locales: Optional[list["Language"]] = None

class AvailableLanguages(_Wire):
    languages: list[Language]

# ----- errors -----

class ErrorDetail(_Wire):
    code: str
    message: str

class ErrorResponse(_Wire):
    error: ErrorDetail

# ----- demo service -----

class ScanRequest(BaseModel):
    text: str

class ScanResponse(BaseModel):
    is_possible_3wa: bool
    did_you_mean: bool
    possible_3wa: list[str]
