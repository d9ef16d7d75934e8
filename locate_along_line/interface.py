# -*- coding: utf-8 -*-
"""JSON interface for linear referencing.

This module implements the body contract of ``POST /api/linearreferencing``
without tying it to a web framework:

1. The request body is decoded with orjson and fed to
   ``LocateRequest.model_validate()``
2. The route is walked by :class:`~locate_along_line.locator.LinearLocator`
3. The located point is serialized via ``model_dump()`` (camelCase keys,
   ``None`` fields omitted) and encoded with orjson

A measure that cannot be located produces the JSON literal ``null``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import orjson
from pydantic import ValidationError

from locate_along_line.cancellation import CancellationToken
from locate_along_line.constants import JSON_ENCODING
from locate_along_line.constants import LINEAR_REFERENCING_ROUTE
from locate_along_line.errors import InvalidRequestError
from locate_along_line.locator import LinearLocator
from locate_along_line.models import LocateRequest
from locate_along_line.models import Point

logger = logging.getLogger(__name__)


class LinearReferencingInterface:
    """Unified interface for the locate operation.

    Example:
        body = b'{"route": {"paths": [{"points": [...]}]}, "measure": 120.5}'
        response = LinearReferencingInterface.handle(body)
    """

    #: Path under which a web layer mounts :meth:`handle` (POST)
    ROUTE: str = LINEAR_REFERENCING_ROUTE

    # -------------------------------------------------------------------------
    # Decoding
    # -------------------------------------------------------------------------

    @classmethod
    def parse_request(cls, data: bytes | str | dict[str, Any]) -> LocateRequest:
        """Decode and validate a locate request.

        Args:
            data: Raw JSON body or an already decoded dictionary

        Returns:
            Validated LocateRequest

        Raises:
            InvalidRequestError: If the body is not valid JSON or does not
                match the request schema
        """
        if isinstance(data, (bytes, str)):
            try:
                data = orjson.loads(data)
            except orjson.JSONDecodeError as e:
                raise InvalidRequestError(f"Malformed JSON body: {e}") from e

        if not isinstance(data, dict):
            raise InvalidRequestError(
                f"Request body must be a JSON object, got `{type(data).__name__}`"
            )

        try:
            return LocateRequest.model_validate(data)
        except ValidationError as e:
            raise InvalidRequestError(f"Invalid locate request: {e}") from e

    @classmethod
    def load_request(cls, path: Path) -> LocateRequest:
        """Load a locate request from a JSON file."""
        return cls.parse_request(path.read_bytes())

    # -------------------------------------------------------------------------
    # Locating
    # -------------------------------------------------------------------------

    @classmethod
    def locate(
        cls,
        request: LocateRequest,
        *,
        cancellation: CancellationToken | None = None,
    ) -> Point | None:
        """Locate the request measure along the request route.

        Raises:
            OperationCancelledError: If cancellation was requested
        """
        logger.info("Locate point along route.")
        return LinearLocator().locate(
            request.route, request.measure, cancellation=cancellation
        )

    # -------------------------------------------------------------------------
    # Encoding
    # -------------------------------------------------------------------------

    @classmethod
    def point_to_dict(cls, point: Point | None) -> dict[str, Any] | None:
        if point is None:
            return None
        return point.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def dump_point(cls, point: Point | None, *, indent: bool = True) -> bytes:
        """Serialize a located point as a JSON response body.

        Args:
            point: The located point, or None when nothing was found
            indent: Pretty-print with two-space indentation

        Returns:
            UTF-8 encoded JSON
        """
        opts = orjson.OPT_INDENT_2 if indent else 0
        return orjson.dumps(cls.point_to_dict(point), option=opts)

    @classmethod
    def save_json(cls, point: Point | None, path: Path, *, indent: bool = True) -> None:
        """Write a located point to a JSON file."""
        path.write_text(
            cls.dump_point(point, indent=indent).decode(JSON_ENCODING),
            encoding=JSON_ENCODING,
        )

    # -------------------------------------------------------------------------
    # Request / Response
    # -------------------------------------------------------------------------

    @classmethod
    def handle(
        cls,
        body: bytes | str,
        *,
        cancellation: CancellationToken | None = None,
        indent: bool = True,
    ) -> bytes:
        """Process a raw request body and return the raw response body.

        Raises:
            InvalidRequestError: If the body is malformed
            OperationCancelledError: If cancellation was requested
        """
        request = cls.parse_request(body)
        point = cls.locate(request, cancellation=cancellation)
        return cls.dump_point(point, indent=indent)
