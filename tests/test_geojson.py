# -*- coding: utf-8 -*-
"""Tests for GeoJSON export functionality."""

import json

import pytest

from locate_along_line.geojson import dump_geojson
from locate_along_line.geojson import locate_to_geojson
from locate_along_line.geojson import point_to_feature
from locate_along_line.geojson import route_to_feature
from locate_along_line.models import LocateRequest
from locate_along_line.models import Point


class TestRouteToFeature:
    """Tests for route_to_feature function."""

    def test_measured_route(self, measured_equator_route):
        feature = route_to_feature(measured_equator_route)
        assert feature["geometry"]["type"] == "MultiLineString"
        assert feature["geometry"]["coordinates"] == [
            [[0.0, 0.0, 0.0], [1.0, 0.0, 111320.0]]
        ]
        assert feature["properties"]["hasM"] is True
        assert feature["properties"]["segmentCount"] == 1

    def test_unmeasured_route(self, multi_path_route):
        feature = route_to_feature(multi_path_route)
        coordinates = feature["geometry"]["coordinates"]
        assert len(coordinates) == 2
        assert coordinates[1] == [[1.0, 0.0], [1.0, 1.0]]
        assert feature["properties"]["hasM"] is False

    def test_short_paths_are_skipped(self, make_route):
        feature = route_to_feature(make_route([(0, 0), (1, 1)], [(5, 5)]))
        assert len(feature["geometry"]["coordinates"]) == 1

    def test_coordinates_are_rounded(self, make_route):
        feature = route_to_feature(make_route([(0.123456789, 1.0), (2.0, 3.0)]))
        assert feature["geometry"]["coordinates"][0][0][0] == pytest.approx(0.1234568)

    def test_measures_are_rounded(self, make_route):
        feature = route_to_feature(make_route([(0, 0, 0.12345), (1, 0, 10.0)]))
        assert feature["geometry"]["coordinates"][0][0] == [0.0, 0.0, 0.123]

    def test_property_keys_are_camel_case(self, measured_equator_route):
        properties = route_to_feature(measured_equator_route)["properties"]
        assert set(properties) == {"type", "hasM", "segmentCount"}


class TestPointToFeature:
    """Tests for point_to_feature function."""

    def test_point(self):
        feature = point_to_feature(Point(x=10.0, y=20.0), 42.0)
        assert feature["geometry"]["type"] == "Point"
        assert feature["geometry"]["coordinates"] == [10.0, 20.0]
        assert feature["properties"]["measure"] == 42.0


class TestLocateToGeoJSON:
    """Tests for locate_to_geojson and dump_geojson."""

    def test_found(self, request_body):
        request = LocateRequest.model_validate(request_body)
        collection = locate_to_geojson(request, Point(x=0.5, y=0.0))
        assert collection["type"] == "FeatureCollection"
        assert len(collection["features"]) == 2
        assert collection["properties"] == {"measure": 55660.0, "found": True}

    def test_not_found(self, request_body):
        request = LocateRequest.model_validate(request_body)
        collection = locate_to_geojson(request, None)
        assert len(collection["features"]) == 1
        assert collection["properties"]["found"] is False

    def test_dump(self, tmp_path, request_body):
        request = LocateRequest.model_validate(request_body)
        output = tmp_path / "located.geojson"
        json_str = dump_geojson(locate_to_geojson(request, None), output)
        assert json.loads(json_str)["type"] == "FeatureCollection"
        assert json.loads(output.read_text(encoding="utf-8")) == json.loads(json_str)

    def test_dump_minified(self, request_body):
        request = LocateRequest.model_validate(request_body)
        json_str = dump_geojson(locate_to_geojson(request, None), minify=True)
        assert "\n" not in json_str
