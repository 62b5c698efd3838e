"""
GeoView GeoJSON
===============

Bounded Context: Geometry text interchange.

This package converts shapes from geoview_geometry into GeoJSON geometry
text, and parses Well Known Text into shapes.

Public API
----------
Formatting:
    GeometryFormatter: Shape -> GeoJSON geometry text
    FormatOptions: Per-call options (pretty, line_prefix)
    FormatterConfig: Indent, non-finite policy, defaults (YAML loadable)

Parsing:
    WKTGeometryParser: WKT text -> Point / PointZM / Polygon

Errors:
    GeoJSONError, UnrecognizedGeometryError, NonFiniteCoordinateError,
    UnrecognizedWKTGeometryError

Example:
    >>> from geoview_geometry import Polygon
    >>> from geoview_geojson import GeometryFormatter
    >>> formatter = GeometryFormatter(indent=2)
    >>> print(formatter.format(Polygon([[0, 0], [1, 0], [1, 1]]), True, ""), end="")
    {
      "type": "Polygon",
      "coordinates": [
        [ [0, 0], [1, 0], [1, 1] ]
      ]
    }
"""

from .config import FormatOptions, FormatterConfig, COMPACT, PRETTY
from .errors import (
    GeoJSONError,
    UnrecognizedGeometryError,
    NonFiniteCoordinateError,
    UnrecognizedWKTGeometryError,
)
from .formatter import GeometryFormatter, VERTICES_PER_LINE
from .wkt import WKTGeometryParser
from .logging import LogEvent, StructuredLogger, attach_stream_handler, create_logger

__all__ = [
    # Formatting
    'GeometryFormatter',
    'FormatOptions',
    'FormatterConfig',
    'COMPACT',
    'PRETTY',
    'VERTICES_PER_LINE',
    # Parsing
    'WKTGeometryParser',
    # Errors
    'GeoJSONError',
    'UnrecognizedGeometryError',
    'NonFiniteCoordinateError',
    'UnrecognizedWKTGeometryError',
    # Logging
    'LogEvent',
    'StructuredLogger',
    'create_logger',
    'attach_stream_handler',
]

__version__ = "1.0.0"
