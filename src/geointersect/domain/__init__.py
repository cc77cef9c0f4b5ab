"""Domain models for geointersect.

This module contains the geometry value types consumed and produced by the
intersection engine. All models are:

- Immutable (frozen dataclasses) with exact structural equality
- Serializable for inter-process communication (batch processing)
- Generic over the coordinate type

Key classes:
- Point: A 2D point
- Segment: A consecutive vertex pair of a line string
- LineString: An ordered polyline of at least two points
- Geometry: The Point | LineString result union
"""

from geointersect.domain.geometry import Geometry, geometry_from_dict
from geointersect.domain.line_string import LineString, Segment
from geointersect.domain.point import Coordinate, Point, SupportsCoordinateOps

__all__: list[str] = [
    # Typing
    "Coordinate",
    "SupportsCoordinateOps",
    # Core types
    "Geometry",
    "LineString",
    "Point",
    "Segment",
    # Serialization
    "geometry_from_dict",
]
