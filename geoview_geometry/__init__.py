"""
Geometry Layer
==============

Bounded Context: In-memory shape model.

Responsibilities:
- Shape representation (immutable)
- Vertex access in caller order
- NO formatting, NO parsing, NO I/O

Design Philosophy:
- Immutable data structures
- Fail-fast validation
- Zero side effects
"""

from geoview_geometry.shapes import Shape, Point, PointZM, Polygon, Polyline

__all__ = [
    "Shape",
    "Point",
    "PointZM",
    "Polygon",
    "Polyline",
]

__version__ = "1.0.0"
