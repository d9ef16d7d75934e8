# -*- coding: utf-8 -*-
"""Traversal progress along a route.

A :class:`RouteWalker` is an immutable snapshot of how far a traversal has
progressed: ``distance`` is the cumulative measure (or geodesic length) up
to the end of the last consumed segment and ``pre_distance`` is the same
value before that segment. Each call to :meth:`RouteWalker.advance` returns
a new snapshot, so a traversal threads its walker explicitly through the
loop and no state is shared between calls.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RouteWalker:
    """Cumulative progress of a single route traversal.

    Attributes:
        distance: Cumulative distance at the end of the current segment
        pre_distance: Cumulative distance at the start of the current segment
    """

    distance: float = 0.0
    pre_distance: float = 0.0

    def advance(self, length: float, end_measure: float | None = None) -> RouteWalker:
        """Consume one segment.

        Args:
            length: Geodesic length of the segment (meters)
            end_measure: Explicit measure of the segment end point, used
                instead of ``length`` when the route is measured

        Returns:
            The walker positioned at the end of the segment
        """
        if end_measure is not None:
            return RouteWalker(distance=end_measure, pre_distance=self.distance)
        return RouteWalker(distance=self.distance + length, pre_distance=self.distance)

    def contains(self, measure: float) -> bool:
        """Whether ``measure`` falls at or before the end of the current segment."""
        return measure <= self.distance

    def segment_distance(self, measure: float) -> float:
        """Distance to walk from the start of the current segment.

        While nothing has been accumulated yet (``pre_distance`` exactly
        zero) the raw measure is walked; this also applies to a segment
        that follows zero-length segments at the start of the route.
        """
        if self.pre_distance == 0:
            return measure
        return measure - self.pre_distance
