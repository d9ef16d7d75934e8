# -*- coding: utf-8 -*-
"""Locate a point along a route from a linear measure.

The route is walked path by path, segment by segment, in order. A
:class:`~locate_along_line.walker.RouteWalker` accumulates the distance
covered so far:

- If every vertex of the route carries a measure (``Line.has_m``), the
  cumulative distance at the end of a segment is the measure of its end
  vertex.
- Otherwise the haversine length of each segment (meters) is added up.

The first segment whose cumulative distance reaches the target measure
contains the answer. The point is obtained by walking from the segment
start, on the initial bearing toward the segment end, for the remaining
distance.

Example::

    from locate_along_line import Line, LinearLocator

    route = Line.model_validate(
        {"paths": [{"points": [{"x": 0, "y": 0}, {"x": 1, "y": 0}]}]}
    )
    point = LinearLocator().locate(route, 5_000.0)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from locate_along_line.cancellation import CancellationToken
from locate_along_line.enums import DistanceUnit
from locate_along_line.geo_utils import calculate_bearing_to
from locate_along_line.geo_utils import calculate_destination
from locate_along_line.geo_utils import geodesic_length
from locate_along_line.models import Line
from locate_along_line.models import Point
from locate_along_line.walker import RouteWalker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteSegment:
    """A consumed segment and the walker state right after consuming it.

    Attributes:
        path_index: Index of the path within the route
        index: Index of the segment within its path
        start: Segment start vertex
        end: Segment end vertex
        length: Haversine length of the segment in meters
        walker: Cumulative progress at the end of this segment
    """

    path_index: int
    index: int
    start: Point
    end: Point
    length: float
    walker: RouteWalker


def _check(cancellation: CancellationToken | None) -> None:
    if cancellation is not None:
        cancellation.raise_if_cancelled()


class LinearLocator:
    """Linear referencing on great-circle routes.

    Instances hold no per-call state and can be shared between threads.

    Args:
        log: Logger used for traversal diagnostics (default: module logger)
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logger

    def walk(
        self,
        route: Line,
        *,
        cancellation: CancellationToken | None = None,
    ) -> Iterator[RouteSegment]:
        """Traverse ``route`` and yield every segment in order.

        Args:
            route: The route to traverse
            cancellation: Optional token polled before every path and segment

        Yields:
            RouteSegment for each consecutive pair of vertices

        Raises:
            OperationCancelledError: If cancellation was requested
        """
        has_m = route.has_m
        walker = RouteWalker()

        for path_index, path in enumerate(route.paths):
            _check(cancellation)

            for index, (start, end) in enumerate(path.segments()):
                _check(cancellation)

                length = geodesic_length(
                    start.y, start.x, end.y, end.x, DistanceUnit.METERS
                )
                walker = walker.advance(length, end.m if has_m else None)

                self._logger.debug(
                    "Path %d segment %d: length=%.3f, distance=%.3f",
                    path_index,
                    index,
                    length,
                    walker.distance,
                )

                yield RouteSegment(
                    path_index=path_index,
                    index=index,
                    start=start,
                    end=end,
                    length=length,
                    walker=walker,
                )

    def locate(
        self,
        route: Line,
        measure: float,
        *,
        cancellation: CancellationToken | None = None,
    ) -> Point | None:
        """Locate the point at ``measure`` along ``route``.

        Args:
            route: The route to walk
            measure: Target measure, in the unit of the route measures or
                in meters when the route is not measured
            cancellation: Optional cancellation token

        Returns:
            The located point (without measure), or None if the route has
            no segment or the measure lies beyond its end

        Raises:
            OperationCancelledError: If cancellation was requested
        """
        for segment in self.walk(route, cancellation=cancellation):
            if not segment.walker.contains(measure):
                continue

            start, end = segment.start, segment.end
            distance = segment.walker.segment_distance(measure)
            bearing = calculate_bearing_to(start.y, start.x, end.y, end.x)
            lat, lon = calculate_destination(start.y, start.x, bearing, distance)

            self._logger.info(
                "Measure %s located on path %d segment %d at (%.7f, %.7f)",
                measure,
                segment.path_index,
                segment.index,
                lon,
                lat,
            )
            return Point(x=lon, y=lat)

        self._logger.info("Measure %s not found along route", measure)
        return None

    def route_length(
        self,
        route: Line,
        *,
        cancellation: CancellationToken | None = None,
    ) -> float:
        """Cumulative distance at the end of the route.

        This is the measure of the last vertex for measured routes and the
        total haversine length in meters otherwise. A route without any
        segment has a length of ``0.0``.
        """
        walker = RouteWalker()
        for segment in self.walk(route, cancellation=cancellation):
            walker = segment.walker
        return walker.distance


def locate_point_along_route(
    route: Line,
    measure: float,
    *,
    cancellation: CancellationToken | None = None,
) -> Point | None:
    """Locate the point at ``measure`` along ``route``.

    Convenience wrapper around :meth:`LinearLocator.locate`.
    """
    return LinearLocator().locate(route, measure, cancellation=cancellation)
