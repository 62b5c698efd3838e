"""
Geometric Shapes Module
========================

Pure geometric representations - NO state, NO side effects.

Design:
- Immutable shapes (frozen dataclass pattern)
- Vertex arrays stored as read-only Nx2 numpy arrays
- Coordinates kept with the numeric type they were given (int stays int)
- Thread-safe by design (immutability)
"""

import numbers

import numpy as np
from dataclasses import dataclass, field
from typing import Iterator, Sequence, Tuple, Union

VertexInput = Union[np.ndarray, Sequence[Sequence[float]]]
Coordinates = Tuple[Tuple[float, float], ...]


def _normalize_vertices(vertices: VertexInput, kind: str) -> Tuple[np.ndarray, Coordinates]:
    """
    Validate vertex input.

    Returns:
        Tuple of:
        - read-only Nx2 numeric array for numeric work (mixed int/float
          rows are upcast, ints beyond int64 become float64)
        - the caller's values as (x, y) pairs, unconverted, for output

    An empty input becomes a (0, 2) array so that empty shapes keep
    the same shape contract as populated ones.
    """
    if isinstance(vertices, np.ndarray):
        raw = vertices
    else:
        # object dtype keeps each element as given (int stays int)
        raw = np.array(vertices, dtype=object)
    if raw.size == 0:
        raw = np.empty((0, 2), dtype=float)

    if raw.ndim != 2 or raw.shape[1] != 2:
        raise ValueError(f"{kind} vertices must be Nx2 array, got shape {raw.shape}")

    if raw.dtype == object:
        for value in raw.flat:
            if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
                raise TypeError(f"{kind} vertices must be real numbers, got {value!r}")
        coordinates = tuple((x, y) for x, y in raw)
        try:
            array = np.array(coordinates)
        except OverflowError:
            array = np.array(coordinates, dtype=float)
        if array.dtype == object:
            array = array.astype(float)
    else:
        if not np.issubdtype(raw.dtype, np.number) or np.issubdtype(raw.dtype, np.complexfloating):
            raise TypeError(f"{kind} vertices must be real numbers, got dtype {raw.dtype}")
        coordinates = tuple((x, y) for x, y in raw)
        array = raw.copy()

    array.flags.writeable = False
    return array, coordinates


class Shape:
    """
    Base class for all geometry kinds.

    Carries no data of its own; consumers (formatters, parsers) dispatch on
    the concrete subclass.
    """

    __slots__ = ()

    @property
    def type_name(self) -> str:
        """Concrete shape type name (e.g. "Polygon")."""
        return type(self).__name__


@dataclass(frozen=True)
class Point(Shape):
    """
    Immutable 2D point.

    Attributes:
        x: Easting / longitude
        y: Northing / latitude
    """

    x: float
    y: float

    @property
    def coordinates(self) -> Tuple[float, float]:
        """(x, y) pair."""
        return (self.x, self.y)


@dataclass(frozen=True)
class PointZM(Point):
    """
    Point with elevation (z) and measure (m) values.

    Only x and y take part in 2D output; z and m are carried for callers
    that need them.
    """

    z: float = 0.0
    m: float = 0.0


@dataclass(frozen=True, eq=False)
class Polygon(Shape):
    """
    Immutable polygon ring.

    Vertices are kept in the order supplied. No closure is assumed: a ring
    that repeats its first vertex at the end keeps the duplicate, and an
    open ring stays open.

    Attributes:
        vertices: Nx2 array of (x, y) ring vertices (N may be 0)
        coordinates: The same vertices as given by the caller, unconverted
    """

    vertices: np.ndarray
    coordinates: Coordinates = field(init=False, repr=False)

    def __post_init__(self):
        array, coordinates = _normalize_vertices(self.vertices, "Polygon")
        object.__setattr__(self, 'vertices', array)
        object.__setattr__(self, 'coordinates', coordinates)

    @property
    def npts(self) -> int:
        """Number of vertices in the ring."""
        return int(self.vertices.shape[0])

    def __len__(self) -> int:
        return self.npts

    def __iter__(self) -> Iterator[Point]:
        for x, y in self.coordinates:
            yield Point(x, y)

    def get_point(self, index: int) -> Point:
        """
        Get vertex as a Point.

        Raises:
            IndexError: If index is outside [0, npts)
        """
        if not 0 <= index < self.npts:
            raise IndexError(f"Polygon vertex index {index} out of range for {self.npts} vertices")
        x, y = self.coordinates[index]
        return Point(x, y)

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> 'Polygon':
        """Build a polygon from a sequence of Points."""
        return cls(vertices=[[p.x, p.y] for p in points])

    @classmethod
    def from_polyline(cls, polyline: 'Polyline') -> 'Polygon':
        """
        Close a polyline into a polygon.

        The first vertex is appended at the end of the ring.
        """
        return cls(vertices=polyline.coordinates + polyline.coordinates[:1])

    def __eq__(self, other) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return np.array_equal(self.vertices, other.vertices)


@dataclass(frozen=True, eq=False)
class Polyline(Shape):
    """
    Immutable open line through an ordered list of vertices.

    Attributes:
        vertices: Nx2 array of (x, y) vertices
        coordinates: The same vertices as given by the caller, unconverted
    """

    vertices: np.ndarray
    coordinates: Coordinates = field(init=False, repr=False)

    def __post_init__(self):
        array, coordinates = _normalize_vertices(self.vertices, "Polyline")
        object.__setattr__(self, 'vertices', array)
        object.__setattr__(self, 'coordinates', coordinates)

    @property
    def npts(self) -> int:
        """Number of vertices in the line."""
        return int(self.vertices.shape[0])

    def __len__(self) -> int:
        return self.npts

    def __eq__(self, other) -> bool:
        if not isinstance(other, Polyline):
            return NotImplemented
        return np.array_equal(self.vertices, other.vertices)
