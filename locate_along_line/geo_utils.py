# -*- coding: utf-8 -*-
"""Great-circle helpers on a spherical Earth.

All angles are in decimal degrees at the public boundary and all distances
are in meters unless stated otherwise. The formulas are the classical
spherical-trigonometry ones (haversine, initial bearing, direct problem)
with a mean Earth radius of 6371 km.

Degenerate input (e.g. coincident points) is not special-cased: whatever
the formulas produce, including NaN, is returned as is.
"""

from __future__ import annotations

import math

from locate_along_line.constants import EARTH_RADIUS_KM
from locate_along_line.constants import KILOMETERS_TO_METERS
from locate_along_line.enums import DistanceUnit


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def radians_to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi


def convert_length(meters: float, unit: DistanceUnit | str) -> float:
    """Convert a length in meters to ``unit``.

    Raises:
        UnknownUnitError: If the unit is not recognized
    """
    return DistanceUnit.normalize(unit).from_meters(meters)


def geodesic_length(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    unit: DistanceUnit | str = DistanceUnit.METERS,
) -> float:
    """Haversine great-circle distance between two points.

    Args:
        lat1: Latitude of the first point
        lon1: Longitude of the first point
        lat2: Latitude of the second point
        lon2: Longitude of the second point
        unit: Unit of the result (default: meters)

    Returns:
        Distance in ``unit``

    Raises:
        UnknownUnitError: If the unit is not recognized
    """
    unit = DistanceUnit.normalize(unit)

    lat1_rad = degrees_to_radians(lat1)
    lon1_rad = degrees_to_radians(lon1)
    lat2_rad = degrees_to_radians(lat2)
    lon2_rad = degrees_to_radians(lon2)

    dlat = lat2_rad - lat1_rad
    dlon = lon2_rad - lon1_rad

    a = math.sin(dlat / 2) * math.sin(dlat / 2) + (
        math.cos(lat1_rad)
        * math.cos(lat2_rad)
        * math.sin(dlon / 2)
        * math.sin(dlon / 2)
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return unit.from_meters(EARTH_RADIUS_KM * c * KILOMETERS_TO_METERS)


def calculate_bearing_to(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Initial bearing from point 1 to point 2 along the great circle.

    Returns:
        Bearing in degrees, clockwise from north, in ``[0, 360)``
    """
    lat1_rad = degrees_to_radians(lat1)
    lat2_rad = degrees_to_radians(lat2)
    dlon = degrees_to_radians(lon2) - degrees_to_radians(lon1)

    y = math.sin(dlon) * math.cos(lat2_rad)
    x = math.cos(lat1_rad) * math.sin(lat2_rad) - (
        math.sin(lat1_rad) * math.cos(lat2_rad) * math.cos(dlon)
    )

    bearing = radians_to_degrees(math.atan2(y, x))
    return (bearing + 360) % 360


def calculate_destination(
    lat: float,
    lon: float,
    bearing: float,
    distance: float,
) -> tuple[float, float]:
    """Point reached from ``(lat, lon)`` after ``distance`` meters on ``bearing``.

    Args:
        lat: Start latitude in degrees
        lon: Start longitude in degrees
        bearing: Initial bearing in degrees, clockwise from north
        distance: Distance to travel in meters

    Returns:
        ``(lat, lon)`` of the destination in degrees, longitude
        normalized to the ``[-180, 180]`` range
    """
    # Angular distance in radians
    delta = distance / KILOMETERS_TO_METERS / EARTH_RADIUS_KM

    lat_rad = degrees_to_radians(lat)
    lon_rad = degrees_to_radians(lon)
    bearing_rad = degrees_to_radians(bearing)

    lat2_rad = math.asin(
        math.sin(lat_rad) * math.cos(delta)
        + math.cos(lat_rad) * math.sin(delta) * math.cos(bearing_rad)
    )
    lon2_rad = lon_rad + math.atan2(
        math.sin(bearing_rad) * math.sin(delta) * math.cos(lat_rad),
        math.cos(delta) - math.sin(lat_rad) * math.sin(lat2_rad),
    )

    lon2_rad = (lon2_rad + 3 * math.pi) % (2 * math.pi) - math.pi

    return radians_to_degrees(lat2_rad), radians_to_degrees(lon2_rad)
