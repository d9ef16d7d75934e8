# -*- coding: utf-8 -*-
"""Enumerations for linear referencing.

This module contains the distance units understood by the geodesic helpers
and the output formats produced by the command line interface.
"""

from enum import Enum

from locate_along_line.constants import METERS_TO_KILOMETERS
from locate_along_line.errors import UnknownUnitError


class DistanceUnit(str, Enum):
    """Unit for geodesic lengths.

    Attributes:
        KILOMETERS: Kilometers
        METERS: Meters (the unit of route measures)
    """

    KILOMETERS = "kilometers"
    METERS = "meters"

    @classmethod
    def normalize(cls, value: "str | DistanceUnit") -> "DistanceUnit":
        """Normalize a unit name to a DistanceUnit.

        Args:
            value: Unit as string (case-insensitive) or DistanceUnit

        Returns:
            DistanceUnit enum value

        Raises:
            UnknownUnitError: If the unit is not recognized
        """
        if isinstance(value, DistanceUnit):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownUnitError(value) from None

    def from_meters(self, meters: float) -> float:
        """Convert a length in meters to this unit."""
        if self is DistanceUnit.KILOMETERS:
            return meters * METERS_TO_KILOMETERS
        return meters


class FileFormat(str, Enum):
    """Output formats for located points.

    Attributes:
        JSON: Point serialized following the HTTP JSON contract
        GEOJSON: FeatureCollection with the route and the located point
    """

    JSON = "json"
    GEOJSON = "geojson"


class FileExtension(str, Enum):
    """File extensions for the output formats (with dot)."""

    JSON = ".json"
    GEOJSON = ".geojson"

    @classmethod
    def to_format(cls, ext: str) -> FileFormat | None:
        """Get the output format from a file extension.

        Args:
            ext: File extension (with or without dot, case-insensitive)

        Returns:
            FileFormat or None if not recognized
        """
        ext_lower = ext.lower().lstrip(".")
        mapping = {
            "json": FileFormat.JSON,
            "geojson": FileFormat.GEOJSON,
        }
        return mapping.get(ext_lower)
