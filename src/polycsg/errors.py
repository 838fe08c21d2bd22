"""Exceptions raised by polycsg for violated geometric preconditions.

These signal caller or programmer error (bad input to a constructor,
a malformed intermediate solid, an area that does not close) and are
never retried or silently tolerated.  Numeric degeneracies that have a
well-defined fallback (parallel planes, zero-length edges) are handled
by returning a value instead.
"""


class GeometryError(ValueError):
    """Base class for polycsg precondition violations."""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.details = details or {}


class DegenerateGeometryError(GeometryError):
    """Too few points, zero area, or a zero-length normal."""


class SelfIntersectionError(GeometryError):
    """A polygon outline crosses itself."""


class ConvexityError(GeometryError):
    """A polygon vertex loop is not convex (debug assertions only)."""


class FakeSolidError(GeometryError):
    """A wall polygon could not be lowered back to a 2D side."""


class OpenOutlineError(GeometryError):
    """Outline reconstruction reached a vertex with no outgoing side."""


class PathError(GeometryError):
    """An open-path operation was applied to a closed path, or vice versa."""


__all__ = [
    'ConvexityError',
    'DegenerateGeometryError',
    'FakeSolidError',
    'GeometryError',
    'OpenOutlineError',
    'PathError',
    'SelfIntersectionError',
]
