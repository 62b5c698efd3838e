"""
GeoJSON Geometry Formatter
==========================

Bounded Context: Shape -> GeoJSON geometry text.

Design:
- One entry point (format / format_with) dispatching on shape type
- One emitter per geometry kind, total over its input once dispatched
- Type check and non-finite check run before any text is built, so a
  failed call never yields partial output
- Call-local text buffer; the only instance state is read-only
  configuration, so one formatter can be shared across threads

Output (pretty, line_prefix="", indent=2):

    {
      "type": "Polygon",
      "coordinates": [
        [ [0, 0], [1, 0], [1, 1] ]
      ]
    }

Adding a geometry kind means one shape class, one emitter method and one
entry in GeometryFormatter.EMITTERS.
"""

import math
from typing import List, Optional, Tuple

import numpy as np

from geoview_geometry import Point, Polygon
from geoview_geojson.config import FormatOptions, FormatterConfig
from geoview_geojson.errors import NonFiniteCoordinateError, UnrecognizedGeometryError
from geoview_geojson.logging import LogEvent, StructuredLogger, create_logger

VERTICES_PER_LINE = 10
"""In pretty mode a ring line breaks after every vertex index divisible by this."""


class GeometryFormatter:
    """
    Formats shapes as GeoJSON geometry objects.

    Attributes:
        config: Immutable formatter configuration
        indent: Literal whitespace for one nesting level
        logger: Structured logger

    Example:
        >>> formatter = GeometryFormatter(indent=2)
        >>> formatter.format(Point(-105.0, 39.5))
        '{"type": "Point","coordinates": [-105.0, 39.5]}'

    Thread Safety:
        Thread-safe. No state is written after construction.
    """

    EMITTERS: Tuple[Tuple[type, str], ...] = (
        (Point, "_format_point"),
        (Polygon, "_format_polygon"),
    )

    def __init__(
        self,
        indent: int = 2,
        allow_non_finite: bool = True,
        default_options: Optional[FormatOptions] = None,
        logger: Optional[StructuredLogger] = None
    ):
        """
        Initialize formatter.

        Args:
            indent: Number of spaces per nesting level in pretty mode
            allow_non_finite: If False, NaN/inf coordinates raise
                NonFiniteCoordinateError instead of rendering as nan/inf
            default_options: Options used by format_with() when none given
            logger: Structured logger (default: "formatter" component)

        Raises:
            ValueError: If indent is outside the allowed range
        """
        self.config = FormatterConfig(
            indent=indent,
            allow_non_finite=allow_non_finite,
            default_options=default_options or FormatOptions(),
        )
        self.indent = self.config.indent_unit
        self.logger = logger or create_logger("formatter")

    @classmethod
    def from_config(
        cls,
        config: FormatterConfig,
        logger: Optional[StructuredLogger] = None
    ) -> "GeometryFormatter":
        """Create a formatter from a loaded FormatterConfig."""
        return cls(
            indent=config.indent,
            allow_non_finite=config.allow_non_finite,
            default_options=config.default_options,
            logger=logger,
        )

    def format(
        self,
        shape,
        nice_format: bool = False,
        line_start: Optional[str] = None
    ) -> str:
        """
        Format a shape as GeoJSON geometry text.

        Args:
            shape: Point or Polygon
            nice_format: Emit newlines and indentation
            line_start: Prefix for every line in nice format (None = no
                prefix and no indentation)

        Returns:
            GeoJSON geometry object text; ends with a newline in nice format

        Raises:
            UnrecognizedGeometryError: If shape is not a Point or Polygon
            NonFiniteCoordinateError: If non-finite values are rejected and
                the shape has one
        """
        return self.format_with(shape, FormatOptions(pretty=nice_format, line_prefix=line_start))

    def format_with(self, shape, options: Optional[FormatOptions] = None) -> str:
        """
        Format a shape using an explicit FormatOptions value.

        Args:
            shape: Point or Polygon
            options: Format options (default: config.default_options)

        Returns:
            GeoJSON geometry object text
        """
        if options is None:
            options = self.config.default_options
        emitter = self._resolve_emitter(shape)
        if not self.config.allow_non_finite:
            self._check_finite(shape)

        text = emitter(shape, options)

        self.logger.debug(
            event=LogEvent.FORMAT_COMPLETED,
            message=f"Formatted {type(shape).__name__} as GeoJSON",
            metadata={
                'shape_type': type(shape).__name__,
                'pretty': options.pretty,
                'chars': len(text),
            }
        )
        return text

    def _resolve_emitter(self, shape):
        for shape_type, emitter_name in self.EMITTERS:
            if isinstance(shape, shape_type):
                return getattr(self, emitter_name)

        error = UnrecognizedGeometryError(type(shape).__name__)
        self.logger.error(
            event=LogEvent.UNRECOGNIZED_GEOMETRY,
            message="Cannot format shape as GeoJSON",
            metadata={'shape_type': error.type_name},
            exc_info=error
        )
        raise error

    def _check_finite(self, shape) -> None:
        if isinstance(shape, Polygon):
            finite = np.isfinite(shape.vertices)
            if finite.all():
                return
            row, col = np.argwhere(~finite)[0]
            bad_index, bad_value = int(row), shape.coordinates[row][col]
        elif math.isfinite(shape.x) and math.isfinite(shape.y):
            return
        else:
            bad_index = 0
            bad_value = shape.x if not math.isfinite(shape.x) else shape.y

        error = NonFiniteCoordinateError(type(shape).__name__, bad_index, bad_value)
        self.logger.error(
            event=LogEvent.NON_FINITE_COORDINATE,
            message="Rejected non-finite coordinate",
            metadata={'shape_type': type(shape).__name__, 'index': bad_index},
            exc_info=error
        )
        raise error

    def _prefixes(self, options: FormatOptions, depth: int) -> List[str]:
        """Line prefixes for nesting levels 0..depth."""
        if not options.pretty or options.line_prefix is None:
            return [""] * (depth + 1)
        return [options.line_prefix + self.indent * level for level in range(depth + 1)]

    @staticmethod
    def _format_pair(x, y) -> str:
        return f"[{x!s}, {y!s}]"

    def _format_point(self, point: Point, options: FormatOptions) -> str:
        nl = "\n" if options.pretty else ""
        prefix0, prefix1 = self._prefixes(options, 1)

        return "".join([
            "{", nl,
            prefix1, '"type": "Point",', nl,
            prefix1, '"coordinates": ', self._format_pair(point.x, point.y), nl,
            prefix0, "}", nl,
        ])

    def _format_polygon(self, polygon: Polygon, options: FormatOptions) -> str:
        nl = "\n" if options.pretty else ""
        prefix0, prefix1, prefix2 = self._prefixes(options, 2)

        b = [
            "{", nl,
            prefix1, '"type": "Polygon",', nl,
            prefix1, '"coordinates": [', nl,
            prefix2,
        ]

        last = polygon.npts - 1
        if last < 0:
            # Zero vertices: empty ring
            b.append("[ ]")
        else:
            b.append("[ ")
            for i, (x, y) in enumerate(polygon.coordinates):
                b.append(self._format_pair(x, y))
                if i == last:
                    break
                b.append(", ")
                if options.pretty and i != 0 and i % VERTICES_PER_LINE == 0:
                    b.append(nl)
                    b.append(prefix2)
            b.append(" ]")

        b.extend([nl, prefix1, "]", nl, prefix0, "}", nl])
        return "".join(b)
