"""Geometric predicates for the intersection engine.

This module provides the exact (tolerance-free) building blocks:
- Cross product of two direction vectors
- Orientation sign of a point relative to a directed line
- Dominant-axis selection for collinear interval tests
- Segment containment of a point (collinear and within bounds)

Comparisons against zero are exact. With float coordinates, points that are
collinear in theory but not after rounding are reported as not collinear.
Pass fractions.Fraction coordinates where exact answers matter.
"""

from typing import Any

from geointersect.domain import Point


def cross_product(dx1: Any, dy1: Any, dx2: Any, dy2: Any) -> Any:
    """Calculate the 2D cross product of vectors (dx1, dy1) and (dx2, dy2).

    Args:
        dx1: X component of the first vector
        dy1: Y component of the first vector
        dx2: X component of the second vector
        dy2: Y component of the second vector

    Returns:
        dx1 * dy2 - dy1 * dx2

    Examples:
        >>> cross_product(1, 0, 0, 1)
        1
    """
    return dx1 * dy2 - dy1 * dx2


def orientation(origin: Point, target: Point, point: Point) -> int:
    """Determine which side of the directed line origin->target a point lies on.

    Args:
        origin: Start of the directed line
        target: A second point on the line
        point: The point to classify

    Returns:
        1 if point is to the left (counter-clockwise), -1 if to the right,
        0 if the three points are collinear

    Examples:
        >>> orientation(Point(0, 0), Point(2, 0), Point(1, 1))
        1
        >>> orientation(Point(0, 0), Point(2, 0), Point(3, 0))
        0
    """
    cross = cross_product(
        target.x - origin.x,
        target.y - origin.y,
        point.x - origin.x,
        point.y - origin.y,
    )
    if cross > 0:
        return 1
    if cross < 0:
        return -1
    return 0


def dominant_axis(start: Point, end: Point) -> int:
    """Choose the axis used to order points along a segment.

    Vertical segments are ordered by y, everything else by x.

    Returns:
        1 for the y axis, 0 for the x axis
    """
    return 1 if end.x - start.x == 0 else 0


def axis_value(point: Point, axis: int) -> Any:
    """Get a point's coordinate on the given axis (0 = x, 1 = y)."""
    return point.y if axis else point.x


def segment_contains(start: Point, end: Point, point: Point) -> bool:
    """Test whether a point lies on the closed segment start->end.

    The point must be exactly collinear with the segment (zero cross product)
    and fall between the endpoints on the segment's dominant axis. Both
    endpoints count as contained.

    Args:
        start: First endpoint of the segment
        end: Second endpoint of the segment
        point: The point to test

    Returns:
        True if the point is on the segment, False otherwise

    Examples:
        >>> segment_contains(Point(1, 1), Point(3, 3), Point(2, 2))
        True
        >>> segment_contains(Point(1, 1), Point(3, 3), Point(4, 4))
        False
    """
    # A repeated vertex has no direction; the vertical branch below would
    # accept the whole horizontal line y == start.y.
    if start == end:
        return point == start

    dx_point = point.x - start.x
    dy_point = point.y - start.y
    dx_line = end.x - start.x
    dy_line = end.y - start.y

    if cross_product(dx_point, dy_point, dx_line, dy_line) != 0:
        return False

    axis = dominant_axis(start, end)
    lower_bound = min(axis_value(start, axis), axis_value(end, axis))
    upper_bound = max(axis_value(start, axis), axis_value(end, axis))
    return lower_bound <= axis_value(point, axis) <= upper_bound
