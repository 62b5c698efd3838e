"""
WKT Geometry Parser
===================

Bounded Context: Well Known Text -> shape model.

Recognized input:
- EMPTY, POINT EMPTY, POLYGON EMPTY      -> None
- POINT (X Y)                            -> Point
- POINT Z (X Y Z), POINT M (X Y M),
  POINT ZM (X Y Z M)                     -> PointZM
- POLYGON ((X Y, X Y, ...))              -> Polygon (outer ring only)
- POLYGON (X Y, X Y, ...)                -> Polygon

Z and M values of polygon vertices are parsed and dropped. Holes are
ignored. Anything else raises UnrecognizedWKTGeometryError.
"""

import re
from typing import List, Optional, Sequence

from geoview_geometry import Point, PointZM, Polygon, Shape
from geoview_geojson.errors import UnrecognizedWKTGeometryError
from geoview_geojson.logging import LogEvent, StructuredLogger, create_logger

_DIMENSIONS = {"": 2, "Z": 3, "M": 3, "ZM": 4, "MZ": 4}

_EMPTY = re.compile(r"^(?:(?:POINT|POLYGON)(?:\s+(?:ZM|MZ|Z|M))?\s+)?EMPTY$")

# First innermost (...) group: the outer ring of a polygon
_FIRST_GROUP = re.compile(r"\(([^()]*)\)")


class WKTGeometryParser:
    """
    Parses WKT geometry text into shapes.

    Stateless; safe to share across threads.

    Example:
        >>> parser = WKTGeometryParser()
        >>> parser.parse("POINT (-105 39.5)")
        Point(x=-105.0, y=39.5)
    """

    def __init__(self, logger: Optional[StructuredLogger] = None):
        self.logger = logger or create_logger("wkt")

    def parse(self, wkt: str) -> Optional[Shape]:
        """
        Parse a WKT string.

        Args:
            wkt: WKT text, keyword case-insensitive

        Returns:
            Point, PointZM or Polygon; None for EMPTY geometries

        Raises:
            UnrecognizedWKTGeometryError: If the geometry type is not
                supported or the text is malformed
        """
        try:
            shape = self._parse(wkt)
        except UnrecognizedWKTGeometryError as e:
            self.logger.error(
                event=LogEvent.WKT_PARSE_ERROR,
                message="Failed to parse WKT",
                metadata={'wkt': wkt[:80] if isinstance(wkt, str) else repr(wkt)},
                exc_info=e
            )
            raise

        self.logger.debug(
            event=LogEvent.WKT_PARSED,
            message="Parsed WKT geometry",
            metadata={
                'shape_type': type(shape).__name__ if shape is not None else None,
                'npts': shape.npts if isinstance(shape, Polygon) else None,
            }
        )
        return shape

    def _parse(self, wkt: str) -> Optional[Shape]:
        if not isinstance(wkt, str):
            raise UnrecognizedWKTGeometryError(
                f"WKT must be a string, got {type(wkt).__name__}"
            )

        text = wkt.strip()
        paren = text.find("(")
        if paren < 0:
            if _EMPTY.match(" ".join(text.upper().split())):
                return None
            raise UnrecognizedWKTGeometryError(f'Unrecognized geometry "{wkt}"')

        header = text[:paren].upper().split()
        if not header or len(header) > 2:
            raise UnrecognizedWKTGeometryError(f'Unrecognized geometry "{wkt}"')

        geometry = header[0]
        dims = header[1] if len(header) == 2 else ""
        if dims not in _DIMENSIONS:
            raise UnrecognizedWKTGeometryError(
                f'Unrecognized dimension "{dims}" in geometry "{wkt}"'
            )

        body = text[paren:]
        if not body.endswith(")"):
            raise UnrecognizedWKTGeometryError(f'Unbalanced parentheses in "{wkt}"')

        if geometry == "POINT":
            return self._parse_point(body, dims, wkt)
        elif geometry == "POLYGON":
            return self._parse_polygon(body, dims, wkt)
        else:
            raise UnrecognizedWKTGeometryError(
                f'Unrecognized geometry starting with "{geometry}"'
            )

    def _parse_point(self, body: str, dims: str, wkt: str) -> Point:
        match = _FIRST_GROUP.fullmatch(body)
        if match is None:
            raise UnrecognizedWKTGeometryError(f'Malformed POINT "{wkt}"')

        coords = _parse_coordinates(match.group(1), _DIMENSIONS[dims], wkt)
        if len(coords) != 1:
            raise UnrecognizedWKTGeometryError(
                f'POINT must have exactly one coordinate, got {len(coords)} in "{wkt}"'
            )

        values = coords[0]
        if dims == "":
            return Point(values[0], values[1])
        elif dims == "Z":
            return PointZM(values[0], values[1], z=values[2])
        elif dims == "M":
            return PointZM(values[0], values[1], m=values[2])
        else:
            return PointZM(values[0], values[1], z=values[2], m=values[3])

    def _parse_polygon(self, body: str, dims: str, wkt: str) -> Polygon:
        match = _FIRST_GROUP.search(body)
        if match is None:
            raise UnrecognizedWKTGeometryError(f'Malformed POLYGON "{wkt}"')

        coords = _parse_coordinates(match.group(1), _DIMENSIONS[dims], wkt)
        return Polygon(vertices=[[values[0], values[1]] for values in coords])


def _parse_coordinates(text: str, ndims: int, wkt: str) -> List[Sequence[float]]:
    """
    Parse "X Y, X Y, ..." into a list of float tuples of length ndims.

    Raises:
        UnrecognizedWKTGeometryError: On wrong arity or non-numeric values
    """
    coords = []
    for position, chunk in enumerate(text.split(",")):
        parts = chunk.split()
        if len(parts) != ndims:
            raise UnrecognizedWKTGeometryError(
                f"Expected {ndims} values for coordinate {position}, "
                f'got {len(parts)} in "{wkt}"'
            )
        try:
            coords.append(tuple(float(part) for part in parts))
        except ValueError as e:
            raise UnrecognizedWKTGeometryError(
                f'Invalid number in coordinate {position} of "{wkt}"'
            ) from e
    return coords
