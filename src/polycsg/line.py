"""Infinite lines in 2D (normal form) and 3D (point + direction)."""

from __future__ import annotations

import logging
from typing import Optional

from polycsg.vector import Vector2, Vector3, solve_2_linear

logger = logging.getLogger(__name__)


class Line2D:
    """directional 2D line ``normal.dot(p) == w``

    ``normal`` is a unit vector rotated 90 degrees counter-clockwise
    from the line direction; the line passes through ``normal * w``.
    """

    __slots__ = ('normal', 'w')

    def __init__(self, normal, w):
        n = Vector2.parse(normal)
        length = n.length()
        self.normal = n.divided_by(length)
        self.w = w / length

    def __repr__(self):
        return 'Line2D(normal={!r}, w={!r})'.format(self.normal, self.w)

    @classmethod
    def from_points(cls, p1, p2) -> "Line2D":
        p1 = Vector2.parse(p1)
        direction = Vector2.parse(p2).minus(p1)
        normal = direction.normal().negated().unit()
        return cls(normal, p1.dot(normal))

    def reverse(self) -> "Line2D":
        """same line, opposite direction"""
        return Line2D(self.normal.negated(), -self.w)

    def equals(self, other: "Line2D") -> bool:
        return other.normal.equals(self.normal) and other.w == self.w

    def origin(self) -> Vector2:
        return self.normal.times(self.w)

    def direction(self) -> Vector2:
        return self.normal.normal()

    def x_at_y(self, y: float) -> float:
        return (self.w - self.normal.y * y) / self.normal.x

    def abs_distance_to_point(self, point) -> float:
        return abs(Vector2.parse(point).dot(self.normal) - self.w)

    def intersect_with_line(self, line: "Line2D") -> Optional[Vector2]:
        """intersection point, or None for parallel lines"""
        if abs(self.normal.cross(line.normal)) < 1e-12:
            return None
        return Vector2(*solve_2_linear(self.normal.x, self.normal.y,
                                       line.normal.x, line.normal.y,
                                       self.w, line.w))

    def transform(self, matrix) -> "Line2D":
        a = self.origin()
        b = a.plus(self.direction())
        return Line2D.from_points(a.transform(matrix), b.transform(matrix))


class Line3D:
    """3D line through ``point`` along unit vector ``direction``"""

    __slots__ = ('point', 'direction')

    def __init__(self, point, direction):
        self.point = Vector3.parse(point)
        self.direction = Vector3.parse(direction).unit()

    def __repr__(self):
        return 'Line3D(point={!r}, direction={!r})'.format(self.point, self.direction)

    @classmethod
    def from_points(cls, p1, p2) -> "Line3D":
        p1 = Vector3.parse(p1)
        return cls(p1, Vector3.parse(p2).minus(p1))

    @classmethod
    def intersection_of_planes(cls, p1, p2) -> Optional["Line3D"]:
        """line where two planes meet, or None if they are parallel"""
        direction = p1.normal.cross(p2.normal)
        length = direction.length()
        if length < 1e-10:
            logger.debug('no intersection line for parallel planes %r, %r', p1, p2)
            return None
        direction = direction.times(1.0 / length)
        mabsx = abs(direction.x)
        mabsy = abs(direction.y)
        mabsz = abs(direction.z)
        if mabsx >= mabsy and mabsx >= mabsz:
            # direction mostly along x: find the point with x == 0
            r = solve_2_linear(p1.normal.y, p1.normal.z, p2.normal.y, p2.normal.z, p1.w, p2.w)
            origin = Vector3(0.0, r[0], r[1])
        elif mabsy >= mabsx and mabsy >= mabsz:
            r = solve_2_linear(p1.normal.x, p1.normal.z, p2.normal.x, p2.normal.z, p1.w, p2.w)
            origin = Vector3(r[0], 0.0, r[1])
        else:
            r = solve_2_linear(p1.normal.x, p1.normal.y, p2.normal.x, p2.normal.y, p1.w, p2.w)
            origin = Vector3(r[0], r[1], 0.0)
        return cls(origin, direction)

    def intersect_with_plane(self, plane) -> Optional[Vector3]:
        """point where the line pierces the plane, None if parallel"""
        den = plane.normal.dot(self.direction)
        if den == 0.0:
            return None
        labda = (plane.w - plane.normal.dot(self.point)) / den
        return self.point.plus(self.direction.times(labda))

    def reverse(self) -> "Line3D":
        return Line3D(self.point, self.direction.negated())

    def transform(self, matrix) -> "Line3D":
        newpoint = self.point.transform(matrix)
        newend = self.point.plus(self.direction).transform(matrix)
        return Line3D(newpoint, newend.minus(newpoint))

    def closest_point_on_line(self, point) -> Vector3:
        point = Vector3.parse(point)
        t = point.minus(self.point).dot(self.direction) / self.direction.dot(self.direction)
        return self.point.plus(self.direction.times(t))

    def distance_to_point(self, point) -> float:
        point = Vector3.parse(point)
        return point.minus(self.closest_point_on_line(point)).length()

    def equals(self, other: "Line3D") -> bool:
        if not self.direction.equals(other.direction):
            return False
        return self.distance_to_point(other.point) < 1e-8


__all__ = ['Line2D', 'Line3D']
