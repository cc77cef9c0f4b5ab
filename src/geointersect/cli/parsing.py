"""Parsing of geometry operands given on the command line.

An operand is a whitespace-separated list of "x,y" pairs. A single pair is a
Point; two or more pairs form a LineString:

    "2,2"           -> Point(2.0, 2.0)
    "1,1 3,3"       -> LineString([Point(1.0, 1.0), Point(3.0, 3.0)])

Batch runs read their pairs from a JSON file instead (see load_pairs).
"""

import json
from fractions import Fraction
from pathlib import Path
from typing import Any

from geointersect.domain import Geometry, LineString, Point, geometry_from_dict
from geointersect.exceptions import CoordinateParseError, InvalidGeometryError, PairsFileError


def _parse_number(token: str, exact: bool) -> Any:
    if exact:
        return Fraction(token)
    return float(token)


def parse_geometry(text: str, exact: bool = False) -> Geometry:
    """Parse a CLI operand into a Point or LineString.

    Args:
        text: Whitespace-separated "x,y" pairs
        exact: Parse coordinates as fractions.Fraction instead of float,
            so that collinearity tests are exact (accepts "1/3" and "0.1")

    Returns:
        Point for one pair, LineString for two or more

    Raises:
        CoordinateParseError: If the text is empty or a pair is malformed
    """
    pairs = text.split()
    if not pairs:
        raise CoordinateParseError(text, "no coordinates given")

    points: list[Point] = []
    for pair in pairs:
        parts = pair.split(",")
        if len(parts) != 2:
            raise CoordinateParseError(text, f"expected 'x,y', got '{pair}'")
        try:
            x, y = (_parse_number(part, exact) for part in parts)
        except (ValueError, ZeroDivisionError) as e:
            raise CoordinateParseError(text, f"bad number in '{pair}'") from e
        points.append(Point(x, y))

    if len(points) == 1:
        return points[0]
    return LineString(points)


def load_pairs(path: Path) -> list[tuple[Geometry, Geometry]]:
    """Read geometry pairs for a batch run from a JSON file.

    The file holds a list of objects, each with "left" and "right" geometries
    in their to_dict() form:

        [{"left": {"type": "LineString", "coordinates": [[1, 1], [3, 3]]},
          "right": {"type": "Point", "coordinates": [2, 2]}}]

    Args:
        path: JSON file to read

    Returns:
        (left, right) pairs in file order

    Raises:
        PairsFileError: If the file is missing, is not JSON of that shape, or
            holds an invalid geometry
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise PairsFileError(path, e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise PairsFileError(path, f"invalid JSON ({e.msg}, line {e.lineno})") from e

    if not isinstance(data, list):
        raise PairsFileError(path, "expected a JSON list of pairs")

    pairs: list[tuple[Geometry, Geometry]] = []
    for index, item in enumerate(data):
        if not (
            isinstance(item, dict)
            and isinstance(item.get("left"), dict)
            and isinstance(item.get("right"), dict)
        ):
            raise PairsFileError(path, f"pair {index} needs 'left' and 'right' geometries")
        try:
            pairs.append((geometry_from_dict(item["left"]), geometry_from_dict(item["right"])))
        except InvalidGeometryError as e:
            raise PairsFileError(path, f"pair {index}: {e}") from e
    return pairs
