# -*- coding: utf-8 -*-
"""Runtime configuration for the command line interface.

Settings are read from an optional JSON file and then overridden by
command line flags::

    {
        "log_level": "DEBUG",
        "indent": false,
        "timeout": 2.5,
        "output_format": "geojson"
    }
"""

from __future__ import annotations

import logging
from pathlib import Path  # noqa: TC003
from typing import Annotated
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

from locate_along_line.constants import JSON_ENCODING
from locate_along_line.enums import FileFormat


class LocatorConfig(BaseModel):
    """Settings for a locate run.

    Attributes:
        log_level: Name of the logging level (e.g. ``"INFO"``)
        indent: Pretty-print JSON output
        timeout: Optional traversal deadline in seconds
        output_format: ``json`` for the point only, ``geojson`` for a
            FeatureCollection with the route and the point
    """

    model_config = ConfigDict(extra="forbid")

    log_level: str = "INFO"
    indent: bool = True
    timeout: Annotated[float, Field(gt=0)] | None = None
    output_format: FileFormat = FileFormat.JSON

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: `{value}`")
        return level

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def load(cls, path: Path) -> LocatorConfig:
        """Load settings from a JSON file."""
        return cls.model_validate_json(path.read_text(encoding=JSON_ENCODING))

    def merged(self, **overrides: Any) -> LocatorConfig:
        """Return a copy with every non-None override applied and validated."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        if not updates:
            return self
        return type(self).model_validate({**self.model_dump(), **updates})
