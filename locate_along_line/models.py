# -*- coding: utf-8 -*-
"""Route data models for linear referencing.

This module contains the Pydantic models exchanged with callers:
- Point: A longitude/latitude pair with an optional measure
- Path: An ordered chain of points
- Line: A route made of one or more paths walked in order
- LocateRequest: A route and the measure to locate on it

Field names are camelCase on the wire. Incoming keys are matched
case-insensitively, so ``{"X": 1}``, ``{"x": 1}`` and ``{"MEASURE": 1}``
style keys all reach their field.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @classmethod
    def _field_lookup(cls) -> dict[str, str]:
        lookup: dict[str, str] = {}
        for name, field in cls.model_fields.items():
            lookup[name.casefold()] = name
            if field.alias:
                lookup[field.alias.casefold()] = name
        return lookup

    @model_validator(mode="before")
    @classmethod
    def normalize_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        lookup = cls._field_lookup()
        return {
            lookup.get(key.casefold(), key) if isinstance(key, str) else key: value
            for key, value in data.items()
        }


class Point(_WireModel):
    """A route vertex or a located position.

    Attributes:
        x: Longitude in decimal degrees
        y: Latitude in decimal degrees
        m: Measure (distance along the route) or None when not measured.
           Zero is a valid measure.
    """

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    m: float | None = None

    @property
    def is_measured(self) -> bool:
        return self.m is not None and self.m >= 0

    def as_tuple(self) -> tuple[float, ...]:
        """Return ``(x, y)`` or ``(x, y, m)`` when measured."""
        if self.m is None:
            return (self.x, self.y)
        return (self.x, self.y, self.m)


class Path(_WireModel):
    """An ordered chain of points. Order defines the direction of travel."""

    points: list[Point] = Field(default_factory=list)

    def segments(self) -> Iterator[tuple[Point, Point]]:
        """Yield consecutive ``(start, end)`` point pairs."""
        for i in range(1, len(self.points)):
            yield self.points[i - 1], self.points[i]


class Line(_WireModel):
    """A route: an ordered sequence of paths walked as if concatenated."""

    paths: list[Path] = Field(default_factory=list)

    @property
    def points(self) -> Iterator[Point]:
        for path in self.paths:
            yield from path.points

    @property
    def has_m(self) -> bool:
        """True when every point of every path carries a non-negative measure.

        A single unmeasured point switches the whole route to geodesic
        length accumulation.
        """
        return all(point.is_measured for point in self.points)

    @property
    def segment_count(self) -> int:
        return sum(max(len(path.points) - 1, 0) for path in self.paths)


class LocateRequest(_WireModel):
    """Body of a locate request: a route and a target measure."""

    route: Line = Field(default_factory=Line)
    measure: float = 0.0
