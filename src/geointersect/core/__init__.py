"""Core intersection algorithms for geointersect.

This module contains:

- Geometric predicates (cross product, orientation, segment containment)
- Pairwise intersection algorithms and operand dispatch
- Batch evaluation of many pairs across worker processes

The predicates and intersection functions are:
- Stateless (safe for use in worker processes)
- Pure (no side effects, operands are never mutated)
- Exact (no epsilon tolerance)

Key functions:
- intersect: Intersect two geometries, dispatching on the operand types
- intersects: Check whether two geometries share any point
- intersection_parts: All intersection components of two line strings
- intersect_points: Point x Point
- intersect_line_string_point: LineString x Point
- intersect_line_strings: LineString x LineString
- intersect_segments: Segment x Segment
- segment_contains: Point-on-segment test
- orientation: Side of a directed line a point lies on

Key classes:
- BatchIntersector: Intersects many pairs, optionally in parallel
"""

from geointersect.core.batch import BatchIntersector, BatchResult, process_pair
from geointersect.core.intersection import (
    intersect,
    intersect_line_string_point,
    intersect_line_strings,
    intersect_points,
    intersect_segments,
    intersection_parts,
    intersects,
)
from geointersect.core.predicates import cross_product, orientation, segment_contains

__all__ = [
    # Batch classes
    "BatchIntersector",
    "BatchResult",
    # Predicates
    "cross_product",
    # Intersection functions
    "intersect",
    "intersect_line_string_point",
    "intersect_line_strings",
    "intersect_points",
    "intersect_segments",
    "intersection_parts",
    "intersects",
    "orientation",
    "process_pair",
    "segment_contains",
]
