# -*- coding: utf-8 -*-
"""Locate Along Line.

A Python library for linear referencing on great-circle routes: given a
route (optionally carrying a measure on every vertex) and a target
measure, find the longitude/latitude located at that measure.

Usage:
    from locate_along_line import LinearLocator, LocateRequest

    request = LocateRequest.model_validate(
        {
            "route": {
                "paths": [
                    {"points": [{"x": 0, "y": 0, "m": 0}, {"x": 1, "y": 0, "m": 111320}]}
                ]
            },
            "measure": 55660,
        }
    )
    point = LinearLocator().locate(request.route, request.measure)
    if point is not None:
        print(point.x, point.y)

    # Or process a raw HTTP body
    from locate_along_line import LinearReferencingInterface
    response = LinearReferencingInterface.handle(body)
"""

__version__ = "0.1.0"

from locate_along_line.cancellation import CancellationToken
from locate_along_line.config import LocatorConfig

# Constants
from locate_along_line.constants import EARTH_RADIUS_KM
from locate_along_line.constants import JSON_ENCODING
from locate_along_line.constants import KILOMETERS_TO_METERS

# Enums
from locate_along_line.enums import DistanceUnit
from locate_along_line.enums import FileFormat

# Errors
from locate_along_line.errors import InvalidRequestError
from locate_along_line.errors import LocateAlongLineError
from locate_along_line.errors import OperationCancelledError
from locate_along_line.errors import UnknownUnitError

# Geodesy
from locate_along_line.geo_utils import calculate_bearing_to
from locate_along_line.geo_utils import calculate_destination
from locate_along_line.geo_utils import convert_length
from locate_along_line.geo_utils import degrees_to_radians
from locate_along_line.geo_utils import geodesic_length
from locate_along_line.geo_utils import radians_to_degrees
from locate_along_line.interface import LinearReferencingInterface
from locate_along_line.locator import LinearLocator
from locate_along_line.locator import RouteSegment
from locate_along_line.locator import locate_point_along_route
from locate_along_line.models import Line
from locate_along_line.models import LocateRequest
from locate_along_line.models import Path
from locate_along_line.models import Point
from locate_along_line.walker import RouteWalker

__all__ = [
    # Constants
    "EARTH_RADIUS_KM",
    "JSON_ENCODING",
    "KILOMETERS_TO_METERS",
    # Cancellation
    "CancellationToken",
    # Enums
    "DistanceUnit",
    "FileFormat",
    # Errors
    "InvalidRequestError",
    # Models
    "Line",
    # Locating
    "LinearLocator",
    "LinearReferencingInterface",
    "LocateAlongLineError",
    "LocateRequest",
    "LocatorConfig",
    "OperationCancelledError",
    "Path",
    "Point",
    "RouteSegment",
    "RouteWalker",
    "UnknownUnitError",
    # Geodesy
    "calculate_bearing_to",
    "calculate_destination",
    "convert_length",
    "degrees_to_radians",
    "geodesic_length",
    "locate_point_along_route",
    "radians_to_degrees",
]
