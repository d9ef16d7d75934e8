# -*- coding: utf-8 -*-
"""Pytest configuration and fixtures.

Routes used across the test-suite are built here from plain coordinate
tuples so that each test only states what is specific to it.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from collections.abc import Sequence

import pytest

from locate_along_line.constants import EARTH_RADIUS_KM
from locate_along_line.constants import KILOMETERS_TO_METERS
from locate_along_line.models import Line

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

#: Length of one degree of arc on the spherical Earth, in meters
ONE_DEGREE_METERS = EARTH_RADIUS_KM * KILOMETERS_TO_METERS * math.pi / 180.0

Vertex = Sequence[float]
RouteFactory = Callable[..., Line]


def build_route(*paths: Sequence[Vertex]) -> Line:
    """Build a route from paths of ``(x, y)`` or ``(x, y, m)`` tuples."""
    return Line.model_validate(
        {
            "paths": [
                {
                    "points": [
                        dict(zip(("x", "y", "m"), vertex, strict=False))
                        for vertex in path
                    ]
                }
                for path in paths
            ]
        }
    )


# =============================================================================
# Route Fixtures
# =============================================================================


@pytest.fixture
def make_route() -> RouteFactory:
    """Return the route factory."""
    return build_route


@pytest.fixture
def one_degree() -> float:
    """Return the length of one degree of arc in meters."""
    return ONE_DEGREE_METERS


@pytest.fixture
def measured_equator_route() -> Line:
    """One path along the equator, one degree long, measured in meters."""
    return build_route([(0.0, 0.0, 0.0), (1.0, 0.0, 111_320.0)])


@pytest.fixture
def unmeasured_equator_route() -> Line:
    """One path along the equator from 0 to 2 degrees east, no measures."""
    return build_route([(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)])


@pytest.fixture
def multi_path_route() -> Line:
    """Two paths walked as if concatenated: east along the equator, then north."""
    return build_route(
        [(0.0, 0.0), (1.0, 0.0)],
        [(1.0, 0.0), (1.0, 1.0)],
    )


@pytest.fixture
def request_body() -> dict:
    """Return the body of a locate request halfway along a measured route."""
    return {
        "route": {
            "paths": [
                {
                    "points": [
                        {"x": 0.0, "y": 0.0, "m": 0.0},
                        {"x": 1.0, "y": 0.0, "m": 111320.0},
                    ]
                }
            ]
        },
        "measure": 55660.0,
    }
