"""Pairwise intersection algorithms and operand dispatch.

This module provides:
- intersect_points: Point x Point (exact equality)
- intersect_line_string_point: LineString x Point (segment containment)
- intersect_segments: Segment x Segment (crossing, touching, collinear overlap)
- intersection_parts: Every intersection component of two line strings
- intersect_line_strings: LineString x LineString (first component wins)
- intersect: Dispatch on the operand type pair
- intersects: Existence-only test with early exit

All functions are pure and never mutate their operands. Results are either
one of the operands or new values assembled from input vertices; only a
proper crossing computes a new point.
"""

from collections.abc import Iterator
from typing import Any

from geointersect.core.predicates import (
    axis_value,
    cross_product,
    dominant_axis,
    orientation,
    segment_contains,
)
from geointersect.domain import Geometry, LineString, Point, Segment
from geointersect.exceptions import UnsupportedGeometryError


def intersect_points(p1: Point, p2: Point) -> Point | None:
    """Intersect two points.

    Args:
        p1: First point
        p2: Second point

    Returns:
        p1 if both coordinates are exactly equal, None otherwise

    Examples:
        >>> intersect_points(Point(1.0, 2.0), Point(1.0, 2.0))
        Point(x=1.0, y=2.0)
        >>> intersect_points(Point(1.0, 2.0), Point(2.0, 2.0)) is None
        True
    """
    if p1 == p2:
        return p1
    return None


def intersect_line_string_point(line: LineString, point: Point) -> Point | None:
    """Intersect a line string with a point.

    Segments are tested from the first vertex to the last and the search
    stops at the first segment containing the point. A vertex shared by two
    segments matches through either one.

    Args:
        line: Polyline to test against
        point: The point to locate

    Returns:
        The point if it lies on any segment, None otherwise
    """
    for segment in line.segments():
        if segment_contains(segment.start, segment.end, point):
            return point
    return None


def _collinear_overlap(a0: Point, a1: Point, b0: Point, b1: Point) -> Geometry | None:
    """Overlap of two collinear, non-degenerate segments.

    Both segments are ordered on the dominant axis of segment A and the
    intersection of their closed intervals is taken. Bounds are always input
    vertices; on ties the vertex from A is used. A multi-point overlap is
    oriented in A's direction.
    """
    axis = dominant_axis(a0, a1)

    def key(p: Point) -> Any:
        return axis_value(p, axis)

    ascending = key(a0) <= key(a1)
    a_lo, a_hi = (a0, a1) if ascending else (a1, a0)
    b_lo, b_hi = (b0, b1) if key(b0) <= key(b1) else (b1, b0)

    lo = a_lo if key(a_lo) >= key(b_lo) else b_lo
    hi = a_hi if key(a_hi) <= key(b_hi) else b_hi

    if key(lo) > key(hi):
        return None
    if key(lo) == key(hi):
        return lo
    return LineString([lo, hi] if ascending else [hi, lo])


def _crossing_point(a0: Point, a1: Point, b0: Point, b1: Point) -> Point | None:
    """Solve the parametric equations of two non-parallel segments."""
    rx, ry = a1.x - a0.x, a1.y - a0.y
    sx, sy = b1.x - b0.x, b1.y - b0.y
    qx, qy = b0.x - a0.x, b0.y - a0.y

    denom = cross_product(rx, ry, sx, sy)
    t = cross_product(qx, qy, sx, sy) / denom
    u = cross_product(qx, qy, rx, ry) / denom

    # Rounding can push a crossing detected by orientation just outside
    if not (0 <= t <= 1 and 0 <= u <= 1):
        return None
    return Point(a0.x + t * rx, a0.y + t * ry)


def intersect_segments(a0: Point, a1: Point, b0: Point, b1: Point) -> Geometry | None:
    """Intersect segment a0->a1 with segment b0->b1.

    Uses the standard orientation test:
    - All four orientations zero: collinear, compute the interval overlap
    - Endpoints of each strictly on opposite sides of the other: proper
      crossing, solve for the crossing point
    - Otherwise an endpoint may touch the other segment; endpoints are
      checked in the order a0, a1, b0, b1

    Args:
        a0: First endpoint of segment A
        a1: Second endpoint of segment A
        b0: First endpoint of segment B
        b1: Second endpoint of segment B

    Returns:
        A Point for a crossing or touch, a two-vertex LineString for a
        collinear overlap, or None if the segments are disjoint

    Examples:
        >>> intersect_segments(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
        Point(x=1.0, y=1.0)
    """
    if a0 == a1:
        return a0 if segment_contains(b0, b1, a0) else None
    if b0 == b1:
        return b0 if segment_contains(a0, a1, b0) else None

    o1 = orientation(a0, a1, b0)
    o2 = orientation(a0, a1, b1)
    o3 = orientation(b0, b1, a0)
    o4 = orientation(b0, b1, a1)

    if o1 == o2 == o3 == o4 == 0:
        return _collinear_overlap(a0, a1, b0, b1)

    if o1 * o2 < 0 and o3 * o4 < 0:
        return _crossing_point(a0, a1, b0, b1)

    for point, start, end in ((a0, b0, b1), (a1, b0, b1), (b0, a0, a1), (b1, a0, a1)):
        if segment_contains(start, end, point):
            return point

    return None


def _chain_covers(chain: list[Point], piece: LineString) -> bool:
    """Whether a straight run of the chain already spans the whole piece."""
    segments = list(zip(chain, chain[1:]))
    starts = [i for i, (s, e) in enumerate(segments) if segment_contains(s, e, piece.start)]
    ends = [j for j, (s, e) in enumerate(segments) if segment_contains(s, e, piece.end)]
    for i in starts:
        for j in ends:
            run = chain[min(i, j) : max(i, j) + 2]
            if all(orientation(piece.start, piece.end, vertex) == 0 for vertex in run):
                return True
    return False


def _extend_chains(chains: list[list[Point]], piece: LineString) -> None:
    """Merge one overlap piece into the running list of chains.

    Only the most recent chain is extended. A piece continues the chain when
    it starts at the chain's last vertex, or starts on the last segment and
    runs along the same line. A piece already spanned by a straight run of
    the chain adds nothing.
    """
    if chains:
        chain = chains[-1]
        if chain[-1] == piece.start:
            chain.append(piece.end)
            return
        if _chain_covers(chain, piece):
            return
        last_start, last_end = chain[-2], chain[-1]
        if segment_contains(last_start, last_end, piece.start) and (
            orientation(last_start, last_end, piece.end) == 0
        ):
            chain.append(piece.end)
            return
    chains.append([piece.start, piece.end])


def _iter_components(
    line_a: LineString, line_b: LineString
) -> Iterator[tuple[Segment, list[Geometry]]]:
    """Yield each segment of A with its intersections against every segment of B."""
    for seg_a in line_a.segments():
        found: list[Geometry] = []
        for seg_b in line_b.segments():
            result = intersect_segments(seg_a.start, seg_a.end, seg_b.start, seg_b.end)
            if result is not None:
                found.append(result)
        yield seg_a, found


def intersection_parts(line_a: LineString, line_b: LineString) -> list[Geometry]:
    """Collect every intersection component of two line strings.

    Segments of A are visited in order, each against every segment of B in
    order. Collinear overlaps are chained into line strings where one piece
    ends at the vertex the next one starts from. Crossing and touching points
    are de-duplicated and dropped when they lie on an overlap chain.

    Args:
        line_a: First polyline (its traversal order drives the result order)
        line_b: Second polyline

    Returns:
        Overlap chains in discovery order, followed by the remaining points
        in the order they lie along A. Empty if the line strings are disjoint.
        Equal line strings give a single component, the line string itself,
        repeated vertices included.
    """
    if line_a == line_b:
        return [line_a]

    chains: list[list[Point]] = []
    points: list[Point] = []

    for seg_a, found in _iter_components(line_a, line_b):
        axis = dominant_axis(seg_a.start, seg_a.end)
        ascending = axis_value(seg_a.start, axis) <= axis_value(seg_a.end, axis)

        pieces = [r for r in found if isinstance(r, LineString)]
        if pieces:
            # Earlier start first; longer piece first on equal starts
            pieces.sort(key=lambda p: axis_value(p.end, axis), reverse=ascending)
            pieces.sort(key=lambda p: axis_value(p.start, axis), reverse=not ascending)
            for piece in pieces:
                _extend_chains(chains, piece)

        found_points = [r for r in found if isinstance(r, Point)]
        found_points.sort(key=lambda p: axis_value(p, axis), reverse=not ascending)
        for point in found_points:
            if point not in points:
                points.append(point)

    overlaps = [LineString(chain) for chain in chains]
    loose_points = [
        p
        for p in points
        if not any(
            intersect_line_string_point(overlap, p) is not None for overlap in overlaps
        )
    ]
    return [*overlaps, *loose_points]


def intersect_line_strings(line_a: LineString, line_b: LineString) -> Geometry | None:
    """Intersect two line strings.

    When the polylines share several disjoint components, the first overlap
    chain in A's traversal order is returned; if there is no overlap, the
    first crossing or touching point is. Use intersection_parts() to get all
    components.

    Args:
        line_a: First polyline
        line_b: Second polyline

    Returns:
        A LineString if any collinear overlap exists, else a Point if the
        polylines cross or touch, else None

    Examples:
        >>> line = LineString.from_coords([(1, 1), (3, 3)])
        >>> intersect_line_strings(line, line) == line
        True
    """
    parts = intersection_parts(line_a, line_b)
    if not parts:
        return None
    return parts[0]


def intersect(a: Geometry, b: Geometry) -> Geometry | None:
    """Intersect two geometries, dispatching on the pair of operand types.

    Supported pairs are Point x Point, LineString x Point, Point x LineString
    and LineString x LineString.

    Args:
        a: First geometry
        b: Second geometry

    Returns:
        The shared geometry, or None if the operands are disjoint

    Raises:
        UnsupportedGeometryError: If either operand is not a Point or LineString
    """
    match (a, b):
        case (Point(), Point()):
            return intersect_points(a, b)
        case (LineString(), Point()):
            return intersect_line_string_point(a, b)
        case (Point(), LineString()):
            return intersect_line_string_point(b, a)
        case (LineString(), LineString()):
            return intersect_line_strings(a, b)
    raise UnsupportedGeometryError(a, b)


def intersects(a: Geometry, b: Geometry) -> bool:
    """Check whether two geometries share any point.

    Stops at the first intersecting segment pair instead of building the
    full result.

    Raises:
        UnsupportedGeometryError: If either operand is not a Point or LineString
    """
    if isinstance(a, LineString) and isinstance(b, LineString):
        return any(
            intersect_segments(seg_a.start, seg_a.end, seg_b.start, seg_b.end) is not None
            for seg_a in a.segments()
            for seg_b in b.segments()
        )
    return intersect(a, b) is not None
