"""Geointersect - Planar point and polyline intersections.

Geointersect answers two questions about a pair of planar geometries: do they
share any point, and if so, what is the shared geometry? Supported operands are
points and line strings (polylines), over any real coordinate type that
supports subtraction, multiplication and ordered comparison.

Example:
    >>> from geointersect import LineString, Point, intersect
    >>> intersect(LineString.from_coords([(1, 1), (3, 3)]), Point(2, 2))
    Point(x=2, y=2)
"""

from geointersect.core.intersection import intersect, intersection_parts, intersects
from geointersect.domain import Geometry, LineString, Point

__version__ = "0.1.0"

__all__ = [
    "Geometry",
    "LineString",
    "Point",
    "__version__",
    "intersect",
    "intersection_parts",
    "intersects",
]
