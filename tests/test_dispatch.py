"""Tests for format-directed response decoding."""

import pytest

from conftest import ADDRESS_GEOJSON, ADDRESS_JSON
from w3wkit.core.errors import DecodeError
from w3wkit.data.base import Coordinates
from w3wkit.data.options import OutputFormat
from w3wkit.schemas import Address, AddressGeoJson, GridSection, GridSectionGeoJson
from w3wkit.services.dispatch import decode_result


def test_plain_payload_decodes_to_address():
    result = decode_result(ADDRESS_JSON, OutputFormat.PLAIN)

    assert isinstance(result, Address)
    assert result.words == "filled.count.soap"
    assert result.nearest_place == "Bayswater, London"
    assert result.map_url == "https://w3w.co/filled.count.soap"
    assert result.coordinates == Coordinates(lat=51.521251, lng=-0.203586)
    assert result.square.southwest == Coordinates(lat=51.521241, lng=-0.203607)


def test_geojson_payload_decodes_to_feature_collection():
    result = decode_result(ADDRESS_GEOJSON, OutputFormat.GEOJSON)

    assert isinstance(result, AddressGeoJson)
    assert result.type == "FeatureCollection"
    assert result.features[0].geometry.type == "Point"


def test_both_shapes_expose_the_same_content():
    plain = decode_result(ADDRESS_JSON, OutputFormat.PLAIN)
    geo = decode_result(ADDRESS_GEOJSON, OutputFormat.GEOJSON)

    for attr in ("words", "country", "nearest_place", "language", "map_url", "coordinates", "square"):
        assert getattr(plain, attr) == getattr(geo, attr), attr


def test_plain_payload_requested_as_geojson_fails():
    with pytest.raises(DecodeError):
        decode_result(ADDRESS_JSON, OutputFormat.GEOJSON)


def test_geojson_payload_requested_as_plain_fails():
    with pytest.raises(DecodeError):
        decode_result(ADDRESS_GEOJSON, OutputFormat.PLAIN)


@pytest.mark.parametrize("payload", [None, [], "filled.count.soap", {"words": "filled.count.soap"}])
def test_malformed_payload_is_never_defaulted(payload):
    with pytest.raises(DecodeError) as err:
        decode_result(payload, OutputFormat.PLAIN)
    assert err.value.details["errors"]


def test_grid_section_models_are_selected_by_format():
    lines = {"lines": [{"start": {"lng": 0.116126, "lat": 52.207988}, "end": {"lng": 0.11754, "lat": 52.208867}}]}
    geo = {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "geometry": {"type": "MultiLineString", "coordinates": [[[0.116126, 52.207988], [0.11754, 52.208867]]]},
                "properties": {},
            }
        ],
    }

    assert isinstance(decode_result(lines, "json", plain=GridSection, geojson=GridSectionGeoJson), GridSection)
    assert isinstance(decode_result(geo, "geojson", plain=GridSection, geojson=GridSectionGeoJson), GridSectionGeoJson)
    with pytest.raises(DecodeError):
        decode_result(geo, "json", plain=GridSection, geojson=GridSectionGeoJson)


def test_decode_result_return_type_follows_format():
    assert isinstance(decode_result(ADDRESS_JSON, "json"), Address)
    assert isinstance(decode_result(ADDRESS_GEOJSON, "geojson"), AddressGeoJson)
