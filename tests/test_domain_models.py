"""Tests for domain models to verify they work correctly."""

from fractions import Fraction

import pytest

from geointersect.domain import (
    LineString,
    Point,
    Segment,
    geometry_from_dict,
)
from geointersect.exceptions import GeometryError, InvalidGeometryError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        p = Point(100.0, 200.0)
        assert p.to_tuple() == (100.0, 200.0)

    def test_point_equality_is_exact(self) -> None:
        """Test that points compare by exact coordinate equality."""
        assert Point(1.0, 2.0) == Point(1.0, 2.0)
        assert Point(1.0, 2.0) != Point(1.0, 2.0000001)
        assert Point(0.1 + 0.2, 0.0) != Point(0.3, 0.0)

    def test_point_hashable(self) -> None:
        """Test that equal points hash alike."""
        assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_point_fraction_coordinates(self) -> None:
        """Test that points accept exact rational coordinates."""
        p = Point(Fraction(1, 3), Fraction(2, 3))
        assert p == Point(Fraction(2, 6), Fraction(4, 6))

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.0, 200.0)
        data = p1.to_dict()
        assert data == {"type": "Point", "coordinates": [100.0, 200.0]}
        assert Point.from_dict(data) == p1


class TestLineString:
    """Tests for LineString class."""

    def test_line_string_creation(self) -> None:
        """Test basic line string creation."""
        line = LineString([Point(0, 0), Point(1, 1), Point(2, 0)])
        assert len(line) == 3
        assert line.start == Point(0, 0)
        assert line.end == Point(2, 0)

    def test_from_coords(self) -> None:
        """Test building from coordinate pairs."""
        line = LineString.from_coords([(1, 1), (3, 3)])
        assert line.points == (Point(1, 1), Point(3, 3))

    def test_accepts_generator(self) -> None:
        """Test that any iterable of points is accepted and stored as a tuple."""
        line = LineString(Point(i, 0) for i in range(3))
        assert isinstance(line.points, tuple)
        assert len(line) == 3

    def test_too_few_points(self) -> None:
        """Test that fewer than two points is rejected."""
        with pytest.raises(InvalidGeometryError, match="at least 2 points"):
            LineString([Point(0, 0)])
        with pytest.raises(InvalidGeometryError):
            LineString([])

    def test_non_point_vertex(self) -> None:
        """Test that vertices must be points."""
        with pytest.raises(InvalidGeometryError, match="not a Point"):
            LineString([Point(0, 0), (1, 1)])  # type: ignore[list-item]

    def test_invalid_geometry_is_geometry_error(self) -> None:
        """Test exception hierarchy."""
        with pytest.raises(GeometryError):
            LineString([Point(0, 0)])

    def test_structural_equality(self) -> None:
        """Test that line strings compare by vertex sequence."""
        a = LineString.from_coords([(1, 1), (3, 3)])
        b = LineString.from_coords([(1, 1), (3, 3)])
        assert a == b
        assert hash(a) == hash(b)
        assert a != a.reversed()

    def test_immutable(self) -> None:
        """Test that line string is immutable."""
        line = LineString.from_coords([(0, 0), (1, 1)])
        with pytest.raises(AttributeError):
            line.points = ()  # type: ignore

    def test_segments(self) -> None:
        """Test iteration over consecutive vertex pairs."""
        line = LineString.from_coords([(0, 0), (1, 0), (1, 1)])
        segments = list(line.segments())
        assert segments == [
            Segment(Point(0, 0), Point(1, 0)),
            Segment(Point(1, 0), Point(1, 1)),
        ]

    def test_repeated_vertex_segment(self) -> None:
        """Test that a repeated vertex yields a zero-length segment."""
        line = LineString.from_coords([(0, 0), (0, 0), (1, 1)])
        first, second = line.segments()
        assert first == Segment(Point(0, 0), Point(0, 0))
        assert second == Segment(Point(0, 0), Point(1, 1))

    def test_reversed(self) -> None:
        """Test reversing traversal order."""
        line = LineString.from_coords([(0, 0), (1, 0), (1, 1)])
        assert line.reversed().points == (Point(1, 1), Point(1, 0), Point(0, 0))
        assert line.reversed().reversed() == line

    def test_serialization(self) -> None:
        """Test line string serialization and deserialization."""
        line = LineString.from_coords([(0.0, 0.0), (1.5, 2.5)])
        data = line.to_dict()
        assert data == {"type": "LineString", "coordinates": [[0.0, 0.0], [1.5, 2.5]]}
        assert LineString.from_dict(data) == line


class TestGeometryFromDict:
    """Tests for decoding the tagged geometry union."""

    def test_decodes_point(self) -> None:
        """Test decoding a point."""
        assert geometry_from_dict({"type": "Point", "coordinates": [1, 2]}) == Point(1, 2)

    def test_decodes_line_string(self) -> None:
        """Test decoding a line string."""
        data = {"type": "LineString", "coordinates": [[1, 1], [3, 3]]}
        assert geometry_from_dict(data) == LineString.from_coords([(1, 1), (3, 3)])

    def test_unknown_type(self) -> None:
        """Test that an unknown tag is rejected."""
        with pytest.raises(InvalidGeometryError, match="unknown type tag"):
            geometry_from_dict({"type": "Polygon", "coordinates": []})

    def test_malformed_coordinates(self) -> None:
        """Test that malformed coordinates are rejected."""
        with pytest.raises(InvalidGeometryError, match="malformed"):
            geometry_from_dict({"type": "Point", "coordinates": [1, 2, 3]})
        with pytest.raises(InvalidGeometryError, match="malformed"):
            geometry_from_dict({"type": "Point"})

    def test_short_line_string(self) -> None:
        """Test that a one-vertex line string is rejected on decode."""
        with pytest.raises(InvalidGeometryError):
            geometry_from_dict({"type": "LineString", "coordinates": [[1, 1]]})
