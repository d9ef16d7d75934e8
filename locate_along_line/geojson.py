# -*- coding: utf-8 -*-
"""GeoJSON export for routes and located points.

GeoJSON output uses WGS84 coordinates in ``(longitude, latitude)`` order
(RFC 7946). Route vertices that carry a measure are written as
``[x, y, m]``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from typing import Any

import orjson
from geojson import Feature
from geojson import FeatureCollection
from geojson import MultiLineString
from geojson import Point as GeoJSONPoint

from locate_along_line.constants import GEOJSON_COORDINATE_PRECISION
from locate_along_line.constants import GEOJSON_MEASURE_PRECISION
from locate_along_line.constants import JSON_ENCODING

if TYPE_CHECKING:
    from pathlib import Path

    from locate_along_line.models import Line
    from locate_along_line.models import LocateRequest
    from locate_along_line.models import Point

logger = logging.getLogger(__name__)


def _coordinates(point: Point) -> tuple[float, ...]:
    x, y, *m = point.as_tuple()
    coords = (
        round(x, GEOJSON_COORDINATE_PRECISION),
        round(y, GEOJSON_COORDINATE_PRECISION),
    )
    return (*coords, *(round(value, GEOJSON_MEASURE_PRECISION) for value in m))


def route_to_feature(route: Line) -> Feature:
    """Convert a route to a GeoJSON MultiLineString Feature.

    Paths with fewer than two points cannot form a line string and are
    left out of the geometry.
    """
    lines = [
        [_coordinates(point) for point in path.points]
        for path in route.paths
        if len(path.points) >= 2
    ]
    skipped = len(route.paths) - len(lines)
    if skipped:
        logger.debug("Skipped %d path(s) with fewer than two points", skipped)

    return Feature(
        geometry=MultiLineString(lines, precision=GEOJSON_COORDINATE_PRECISION),
        properties={
            "type": "route",
            "hasM": route.has_m,
            "segmentCount": route.segment_count,
        },
    )


def point_to_feature(point: Point, measure: float) -> Feature:
    """Convert a located point to a GeoJSON Point Feature."""
    return Feature(
        geometry=GeoJSONPoint(
            _coordinates(point), precision=GEOJSON_COORDINATE_PRECISION
        ),
        properties={
            "type": "located_point",
            "measure": measure,
        },
    )


def locate_to_geojson(request: LocateRequest, point: Point | None) -> FeatureCollection:
    """Build a FeatureCollection with the route and the located point.

    Args:
        request: The locate request
        point: The located point, or None when the measure was not found

    Returns:
        GeoJSON FeatureCollection
    """
    features = [route_to_feature(request.route)]
    if point is not None:
        features.append(point_to_feature(point, request.measure))

    properties: dict[str, Any] = {
        "measure": request.measure,
        "found": point is not None,
    }
    return FeatureCollection(features, properties=properties)


def dump_geojson(
    collection: FeatureCollection,
    output_path: Path | None = None,
    *,
    minify: bool = False,
) -> str:
    """Serialize a FeatureCollection, optionally writing it to ``output_path``.

    Returns:
        GeoJSON string
    """
    opts = 0 if minify else orjson.OPT_INDENT_2
    json_str = orjson.dumps(collection, option=opts).decode(JSON_ENCODING)

    if output_path:
        output_path.write_text(json_str, encoding=JSON_ENCODING)

    return json_str
