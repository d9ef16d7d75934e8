# -*- coding: utf-8 -*-
"""Constants used throughout the locate_along_line library.

This module centralizes all constant values to ensure consistency
and avoid magic numbers/strings scattered across the codebase.
"""

# -----------------------------------------------------------------------------
# Spherical Earth Model
# -----------------------------------------------------------------------------

#: Mean radius of the Earth in kilometers (spherical model)
EARTH_RADIUS_KM: float = 6371.0

#: Conversion factor from kilometers to meters
KILOMETERS_TO_METERS: float = 1000.0

#: Conversion factor from meters to kilometers
METERS_TO_KILOMETERS: float = 1.0 / KILOMETERS_TO_METERS

# -----------------------------------------------------------------------------
# Encodings
# -----------------------------------------------------------------------------

#: Encoding used for JSON files and HTTP bodies
JSON_ENCODING = "utf-8"

# -----------------------------------------------------------------------------
# Formatting Constants
# -----------------------------------------------------------------------------

#: Decimal precision for GeoJSON coordinates (WGS84)
GEOJSON_COORDINATE_PRECISION: int = 7

#: Decimal precision for measure values in GeoJSON
GEOJSON_MEASURE_PRECISION: int = 3

# -----------------------------------------------------------------------------
# HTTP Contract
# -----------------------------------------------------------------------------

#: Route under which a web layer mounts the locate operation
LINEAR_REFERENCING_ROUTE: str = "/api/linearreferencing"
