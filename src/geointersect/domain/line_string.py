"""Polyline types.

This module defines:
- Segment: One consecutive vertex pair of a line string
- LineString: An ordered sequence of at least two points
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic

from geointersect.domain.point import Coordinate, Point
from geointersect.exceptions import InvalidGeometryError


@dataclass(frozen=True, slots=True)
class Segment(Generic[Coordinate]):
    """A bounded straight line between two vertices.

    Attributes:
        start: First vertex
        end: Second vertex
    """

    start: Point[Coordinate]
    end: Point[Coordinate]


@dataclass(frozen=True, init=False)
class LineString(Generic[Coordinate]):
    """A polyline of consecutive straight segments.

    Vertices are stored as a tuple, so a LineString is immutable and hashable.
    No closure or self-intersection invariant is enforced; repeated vertices
    are allowed.

    Attributes:
        points: Vertices in traversal order (at least two)
    """

    points: tuple[Point[Coordinate], ...]

    def __init__(self, points: Iterable[Point[Coordinate]]) -> None:
        vertices = tuple(points)
        if len(vertices) < 2:
            raise InvalidGeometryError(
                "LineString", f"needs at least 2 points, got {len(vertices)}"
            )
        for vertex in vertices:
            if not isinstance(vertex, Point):
                raise InvalidGeometryError(
                    "LineString", f"vertex {vertex!r} is not a Point"
                )
        object.__setattr__(self, "points", vertices)

    @classmethod
    def from_coords(cls, coords: Iterable[tuple[Any, Any]]) -> "LineString[Any]":
        """Build a line string from (x, y) pairs.

        Args:
            coords: Iterable of coordinate pairs

        Returns:
            LineString instance

        Examples:
            >>> LineString.from_coords([(1, 1), (3, 3)]).end
            Point(x=3, y=3)
        """
        return cls(Point(x, y) for x, y in coords)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point[Coordinate]]:
        return iter(self.points)

    @property
    def start(self) -> Point[Coordinate]:
        """First vertex."""
        return self.points[0]

    @property
    def end(self) -> Point[Coordinate]:
        """Last vertex."""
        return self.points[-1]

    def segments(self) -> Iterator[Segment[Coordinate]]:
        """Iterate over consecutive vertex pairs from first to last.

        Returns:
            Iterator of len(self) - 1 segments
        """
        for start, end in zip(self.points, self.points[1:]):
            yield Segment(start, end)

    def reversed(self) -> "LineString[Coordinate]":
        """Return the same polyline traversed from last vertex to first."""
        return LineString(reversed(self.points))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with type tag and coordinate pairs
        """
        return {
            "type": "LineString",
            "coordinates": [list(p.to_tuple()) for p in self.points],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LineString[Any]":
        """Deserialize from dictionary.

        Args:
            data: Dictionary produced by to_dict()

        Returns:
            LineString instance
        """
        return cls.from_coords((x, y) for x, y in data["coordinates"])
