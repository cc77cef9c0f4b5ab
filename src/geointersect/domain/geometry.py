"""The tagged geometry union returned by intersections.

An intersection result is either a Point or a LineString. The class of the
value is its tag, so callers pattern match on it:

    match intersect(a, b):
        case Point():
            ...
        case LineString():
            ...
        case None:
            ...
"""

from typing import Any, TypeAlias

from geointersect.domain.line_string import LineString
from geointersect.domain.point import Point
from geointersect.exceptions import InvalidGeometryError

Geometry: TypeAlias = Point[Any] | LineString[Any]

_DECODERS = {
    "Point": Point.from_dict,
    "LineString": LineString.from_dict,
}


def geometry_from_dict(data: dict[str, Any]) -> Geometry:
    """Deserialize either geometry variant from its to_dict() form.

    Args:
        data: Dictionary with a "type" tag and "coordinates"

    Returns:
        Point or LineString instance

    Raises:
        InvalidGeometryError: If the tag is unknown or the coordinates are malformed
    """
    kind = data.get("type")
    decoder = _DECODERS.get(kind)  # type: ignore[arg-type]
    if decoder is None:
        raise InvalidGeometryError("geometry", f"unknown type tag {kind!r}")
    try:
        return decoder(data)
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidGeometryError(str(kind), f"malformed coordinates: {e}") from e
