# -*- coding: utf-8 -*-
"""Locate command.

Reads a locate request (the JSON body of ``POST /api/linearreferencing``)
from a file or stdin and prints the located point, either as the JSON
response body or as a GeoJSON FeatureCollection.
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from locate_along_line.cancellation import CancellationToken
from locate_along_line.config import LocatorConfig
from locate_along_line.constants import JSON_ENCODING
from locate_along_line.enums import FileExtension
from locate_along_line.enums import FileFormat
from locate_along_line.errors import InvalidRequestError
from locate_along_line.errors import OperationCancelledError
from locate_along_line.geojson import dump_geojson
from locate_along_line.geojson import locate_to_geojson
from locate_along_line.interface import LinearReferencingInterface

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_CANCELLED = 2


def _build_config(parsed_args: argparse.Namespace) -> LocatorConfig:
    config = (
        LocatorConfig.load(parsed_args.config)
        if parsed_args.config is not None
        else LocatorConfig()
    )

    output_format = parsed_args.target_format
    if output_format is None and parsed_args.output_file is not None:
        output_format = FileExtension.to_format(parsed_args.output_file.suffix)

    return config.merged(
        log_level="DEBUG" if parsed_args.verbose else None,
        indent=False if parsed_args.compact else None,
        timeout=parsed_args.timeout,
        output_format=output_format,
    )


def _read_body(input_file: Path | None) -> bytes:
    if input_file is None:
        return sys.stdin.buffer.read()
    return input_file.read_bytes()


def locate(args: list[str]) -> int:
    """Entry point for the locate command."""
    parser = argparse.ArgumentParser(
        prog="locate_along_line",
        description="Locate the point at a given measure along a route",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  locate_along_line -i request.json                 # Output to stdout
  locate_along_line -i request.json -m 1500         # Override measure
  locate_along_line -i request.json -o out.geojson  # GeoJSON file
  cat request.json | locate_along_line --compact    # Read from stdin

Request format:
  {"route": {"paths": [{"points": [{"x": 0, "y": 0, "m": 0}, ...]}]},
   "measure": 1500}

Notes:
  - x is the longitude, y the latitude, m the optional measure
  - If any point has no measure, geodesic lengths (meters) are used
  - A measure beyond the end of the route prints `null`
""",
    )

    parser.add_argument(
        "-i",
        "--input-file",
        type=Path,
        default=None,
        help="Request JSON file path (reads stdin if not specified)",
    )
    parser.add_argument(
        "-o",
        "--output-file",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    parser.add_argument(
        "-m",
        "--measure",
        type=float,
        default=None,
        help="Measure to locate (overrides the request measure)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=[FileFormat.JSON.value, FileFormat.GEOJSON.value],
        default=None,
        dest="target_format",
        help="Output format (auto-detected from the output extension)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="JSON settings file",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Abort the traversal after this many seconds",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Do not indent the JSON output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every traversed segment",
    )

    parsed_args = parser.parse_args(args)

    try:
        config = _build_config(parsed_args)
    except (OSError, ValidationError):
        logger.exception("Invalid configuration")
        return EXIT_INVALID

    logging.basicConfig(level=config.level, stream=sys.stderr)

    try:
        request = LinearReferencingInterface.parse_request(
            _read_body(parsed_args.input_file)
        )
    except FileNotFoundError:
        logger.error("Error: Input file not found: %s", parsed_args.input_file)  # noqa: TRY400
        return EXIT_INVALID
    except InvalidRequestError:
        logger.exception("Invalid request")
        return EXIT_INVALID

    if parsed_args.measure is not None:
        request = request.model_copy(update={"measure": parsed_args.measure})

    cancellation = CancellationToken(timeout=config.timeout)

    try:
        point = LinearReferencingInterface.locate(request, cancellation=cancellation)
    except OperationCancelledError as e:
        logger.warning("Locate aborted: %s", e.reason)
        return EXIT_CANCELLED

    if config.output_format == FileFormat.GEOJSON:
        result = dump_geojson(
            locate_to_geojson(request, point), minify=not config.indent
        )
    else:
        result = LinearReferencingInterface.dump_point(
            point, indent=config.indent
        ).decode(JSON_ENCODING)

    if parsed_args.output_file is None:
        print(result)  # noqa: T201
    else:
        parsed_args.output_file.write_text(result, encoding=JSON_ENCODING)
        logger.info("Located measure %s -> %s", request.measure, parsed_args.output_file)

    return EXIT_OK


def main() -> None:
    """Console script entry point."""
    sys.exit(locate(sys.argv[1:]))
