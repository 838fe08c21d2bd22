"""Projection between a 3D plane and a 2D coordinate frame.

An ``OrthoNormalBasis`` is the frame ``(u, v, normal)`` attached to a
plane, with ``v = normal x right`` and ``u = v x normal``.  Points on
the plane map to 2D as ``(u.p, v.p)`` and back as
``origin + u*x + v*y`` where ``origin = normal * w``.
"""

from __future__ import annotations

from polycsg.line import Line2D, Line3D
from polycsg.plane import Plane
from polycsg.vector import Vector2, Vector3
from polycsg.xform import Matrix


class OrthoNormalBasis:

    __slots__ = ('plane', 'u', 'v', 'plane_origin')

    def __init__(self, plane: Plane, right_vector=None):
        if right_vector is None:
            right_vector = plane.normal.random_non_parallel_vector()
        self.plane = plane
        self.plane_origin = plane.normal.times(plane.w)
        self.v = plane.normal.cross(Vector3.parse(right_vector)).unit()
        self.u = self.v.cross(plane.normal)

    def __repr__(self):
        return 'OrthoNormalBasis(u={!r}, v={!r}, plane={!r})'.format(self.u, self.v, self.plane)

    @classmethod
    def z0_plane(cls) -> "OrthoNormalBasis":
        plane = Plane(Vector3(0.0, 0.0, 1.0), 0.0)
        return cls(plane, Vector3(1.0, 0.0, 0.0))

    def projection_matrix(self) -> Matrix:
        """matrix taking 3D points into the frame; z becomes height above the plane"""
        n = self.plane.normal
        return Matrix([[self.u.x, self.u.y, self.u.z, 0.0],
                       [self.v.x, self.v.y, self.v.z, 0.0],
                       [n.x, n.y, n.z, -self.plane.w],
                       [0.0, 0.0, 0.0, 1.0]])

    def inverse_projection_matrix(self) -> Matrix:
        n = self.plane.normal
        p = self.plane_origin
        return Matrix([[self.u.x, self.v.x, n.x, p.x],
                       [self.u.y, self.v.y, n.y, p.y],
                       [self.u.z, self.v.z, n.z, p.z],
                       [0.0, 0.0, 0.0, 1.0]])

    def to_2d(self, point) -> Vector2:
        point = Vector3.parse(point)
        return Vector2(point.dot(self.u), point.dot(self.v))

    def to_3d(self, point) -> Vector3:
        point = Vector2.parse(point)
        return self.plane_origin.plus(self.u.times(point.x)).plus(self.v.times(point.y))

    def line_3d_to_2d(self, line: Line3D) -> Line2D:
        a = line.point
        b = line.direction.plus(a)
        return Line2D.from_points(self.to_2d(a), self.to_2d(b))

    def line_2d_to_3d(self, line: Line2D) -> Line3D:
        a = line.origin()
        b = line.direction().plus(a)
        return Line3D.from_points(self.to_3d(a), self.to_3d(b))

    def transform(self, matrix) -> "OrthoNormalBasis":
        # rebuilt from the transformed plane and right vector; transforming
        # u and v directly does not stay orthonormal under mirroring
        newplane = self.plane.transform(matrix)
        rightpoint = self.u.transform(matrix)
        origin = Vector3(0.0, 0.0, 0.0).transform(matrix)
        return OrthoNormalBasis(newplane, rightpoint.minus(origin))


__all__ = ['OrthoNormalBasis']
