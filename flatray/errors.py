class GeometryError(Exception):
    """Base class for errors raised by the geometry kernel."""


class InvalidArgumentError(GeometryError, TypeError):
    """Constructor received arguments of the wrong kind."""


class DegenerateGeometryError(GeometryError, ValueError):
    """Operation is undefined for the given geometry (zero vectors, empty boxes)."""


class UnsupportedShapeError(GeometryError, TypeError):
    """Shape does not know how to intersect with the requested primitive."""
