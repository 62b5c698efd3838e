"""
GeoJSON Error Types
===================

Bounded Context: Error taxonomy for formatting and parsing.

Hierarchy:
    GeoJSONError
    ├── UnrecognizedGeometryError   (also TypeError)
    ├── NonFiniteCoordinateError    (also ValueError)
    └── UnrecognizedWKTGeometryError (also ValueError)

None of these are retried; they signal caller errors and propagate to the
immediate caller.
"""


class GeoJSONError(Exception):
    """Base class for geoview_geojson errors."""


class UnrecognizedGeometryError(GeoJSONError, TypeError):
    """
    Shape type has no GeoJSON emitter.

    Attributes:
        type_name: Name of the offending shape type
    """

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(
            f"Unrecognized geometry type {type_name} - don't know how to format GeoJSON"
        )


class NonFiniteCoordinateError(GeoJSONError, ValueError):
    """
    Coordinate is NaN or infinite and the formatter rejects such values.

    Attributes:
        type_name: Shape type being formatted
        index: Vertex index (0 for points)
    """

    def __init__(self, type_name: str, index: int, value: float):
        self.type_name = type_name
        self.index = index
        self.value = value
        super().__init__(
            f"Non-finite coordinate {value} at vertex {index} of {type_name}"
        )


class UnrecognizedWKTGeometryError(GeoJSONError, ValueError):
    """WKT text is not a recognized or well-formed geometry."""
