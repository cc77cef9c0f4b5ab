"""Point type and the coordinate capability set.

This module defines:
- SupportsCoordinateOps: Protocol for coordinate values the engine accepts
- Point: An immutable 2D point with exact structural equality
"""

from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar


class SupportsCoordinateOps(Protocol):
    """Operations a coordinate value must support.

    float is the default instantiation. fractions.Fraction and decimal.Decimal
    also qualify and give exact results. Computing a crossing point between two
    segments additionally needs true division.
    """

    def __sub__(self, other: Any, /) -> Any: ...

    def __mul__(self, other: Any, /) -> Any: ...

    def __lt__(self, other: Any, /) -> bool: ...

    def __le__(self, other: Any, /) -> bool: ...


Coordinate = TypeVar("Coordinate", bound=SupportsCoordinateOps)


@dataclass(frozen=True, slots=True)
class Point(Generic[Coordinate]):
    """A point in the plane.

    Immutable and hashable. Two points are equal only when both coordinates
    compare exactly equal; there is no tolerance.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: Coordinate
    y: Coordinate

    def to_tuple(self) -> tuple[Coordinate, Coordinate]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with type tag and coordinates
        """
        return {
            "type": "Point",
            "coordinates": list(self.to_tuple()),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point[Any]":
        """Deserialize from dictionary.

        Args:
            data: Dictionary produced by to_dict()

        Returns:
            Point instance
        """
        x, y = data["coordinates"]
        return cls(x=x, y=y)
