"""Exception hierarchy for Geointersect."""


class GeointersectError(Exception):
    """Base exception for all Geointersect errors."""

    pass


class GeometryError(GeointersectError):
    """Errors related to geometry values or operands."""

    pass


class InvalidGeometryError(GeometryError):
    """Geometry value violates its construction invariants."""

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f"Invalid {kind}: {reason}")


class UnsupportedGeometryError(GeometryError, TypeError):
    """No intersection algorithm exists for the given operand types."""

    def __init__(self, left: object, right: object) -> None:
        self.left_type = type(left).__name__
        self.right_type = type(right).__name__
        super().__init__(
            f"Cannot intersect {self.left_type} with {self.right_type}"
        )


class CoordinateParseError(GeointersectError, ValueError):
    """Could not parse a coordinate list from text."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse geometry '{text}': {reason}")


class PairsFileError(GeointersectError):
    """Could not read a batch of geometry pairs from a file."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read pairs from {path}: {reason}")
