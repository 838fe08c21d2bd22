## oriented planes and half-space polygon clipping for polycsg

## Copyright (c) 2026 polycsg contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""oriented planes for **polycsg**

A ``Plane`` is the set of points ``p`` with ``normal.dot(p) == w``,
where ``normal`` always has unit length.  The plane is oriented: its
front half-space is ``normal.dot(p) >= w``.

Polygon clipping
================

``Plane.split_polygon()`` is the primitive every solid boolean
operation is built from.  Each vertex of a convex polygon is
classified by its signed distance ``d = normal.dot(pos) - w``:
``d > epsilon`` is in front, ``d < -epsilon`` is behind, anything in
between is coplanar.  The result is a ``SplitResult`` whose ``type``
is one of

* ``COPLANAR_FRONT`` / ``COPLANAR_BACK``: every vertex is coplanar;
  the two cases are told apart by comparing the plane normals.
* ``FRONT`` / ``BACK``: the polygon lies entirely on one side
  (coplanar vertices allowed) and is kept unsplit.
* ``SPANNING``: the polygon is cut in two.  ``front`` and ``back``
  hold the pieces, either of which is ``None`` if fewer than three
  distinct vertices survive.

Pieces keep the parent polygon plane and ``shared`` handle.  The
plane is never recomputed from the cut vertices, so repeated splits do
not accumulate drift.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from polycsg.config import resolve
from polycsg.errors import DegenerateGeometryError
from polycsg.vector import Vector3


class SplitType(Enum):
    COPLANAR_FRONT = 'coplanar_front'
    COPLANAR_BACK = 'coplanar_back'
    FRONT = 'front'
    BACK = 'back'
    SPANNING = 'spanning'


@dataclass(frozen=True)
class SplitResult:
    type: SplitType
    front: Optional[object] = None
    back: Optional[object] = None


class Plane:
    """oriented plane with unit ``normal`` and offset ``w``"""

    __slots__ = ('normal', 'w', 'tag')

    def __init__(self, normal, w, tag=None, config=None):
        n = Vector3.parse(normal)
        length = n.length()
        if not length > 0.0:
            raise DegenerateGeometryError('zero-length plane normal')
        if length != 1.0:
            n = n.divided_by(length)
            w = w / length
        self.normal = n
        self.w = float(w)
        self.tag = resolve(config).next_tag() if tag is None else tag

    def __repr__(self):
        return 'Plane(normal={!r}, w={!r})'.format(self.normal, self.w)

    @classmethod
    def from_points(cls, a, b, c) -> "Plane":
        """plane through three points, oriented by their right-hand winding"""
        a = Vector3.parse(a)
        n = Vector3.parse(b).minus(a).cross(Vector3.parse(c).minus(a))
        if n.length() == 0.0:
            raise DegenerateGeometryError('collinear points passed to Plane.from_points',
                                          {'points': (a, b, c)})
        n = n.unit()
        return cls(n, n.dot(a))

    @classmethod
    def any_plane_from_points(cls, a, b, c, config=None) -> "Plane":
        """like ``from_points`` but tolerates coincident or collinear points"""
        eps = resolve(config).epsilon
        a = Vector3.parse(a)
        v1 = Vector3.parse(b).minus(a)
        v2 = Vector3.parse(c).minus(a)
        if v1.length() < eps:
            v1 = v2.random_non_parallel_vector()
        if v2.length() < eps:
            v2 = v1.random_non_parallel_vector()
        normal = v1.cross(v2)
        if normal.length() < eps:
            # it's a line: pick any plane containing it
            v2 = v1.random_non_parallel_vector()
            normal = v1.cross(v2)
        normal = normal.unit()
        return cls(normal, normal.dot(a))

    @classmethod
    def from_normal_and_point(cls, normal, point) -> "Plane":
        n = Vector3.parse(normal).unit()
        return cls(n, Vector3.parse(point).dot(n))

    def flipped(self) -> "Plane":
        return Plane(self.normal.negated(), -self.w)

    def equals(self, other: "Plane") -> bool:
        return self is other or (self.normal.equals(other.normal) and self.w == other.w)

    def transform(self, matrix) -> "Plane":
        """transform by a 4x4 matrix, keeping the front side in front"""
        ismirror = matrix.is_mirroring()
        # two vectors in the plane
        r = self.normal.random_non_parallel_vector()
        u = self.normal.cross(r)
        v = self.normal.cross(u)
        # three points in the plane
        point1 = self.normal.times(self.w)
        point2 = point1.plus(u)
        point3 = point1.plus(v)
        newplane = Plane.from_points(point1.transform(matrix),
                                     point2.transform(matrix),
                                     point3.transform(matrix))
        if ismirror:
            return newplane.flipped()
        return newplane

    def signed_distance_to_point(self, point) -> float:
        return self.normal.dot(point) - self.w

    def mirror_point(self, point) -> Vector3:
        distance = self.signed_distance_to_point(point)
        return point.minus(self.normal.times(distance * 2.0))

    def split_line_between_points(self, point1: Vector3, point2: Vector3) -> Vector3:
        """point where the segment crosses the plane

        Works even when the segment is parallel to the plane or has
        zero length: the parameter is clamped to [0, 1] and a NaN
        parameter is taken as 0.
        """
        direction = point2.minus(point1)
        num = self.w - self.normal.dot(point1)
        den = self.normal.dot(direction)
        try:
            labda = num / den
        except ZeroDivisionError:
            labda = math.nan if num == 0.0 else math.copysign(math.inf, num)
        if math.isnan(labda):
            labda = 0.0
        elif labda > 1.0:
            labda = 1.0
        elif labda < 0.0:
            labda = 0.0
        return point1.plus(direction.times(labda))

    def intersect_with_line(self, line):
        return line.intersect_with_plane(self)

    def intersect_with_plane(self, plane):
        """line of intersection with another plane, or None if parallel"""
        from polycsg.line import Line3D
        return Line3D.intersection_of_planes(self, plane)

    def split_polygon(self, polygon, config=None) -> SplitResult:
        """classify and, if needed, cut a convex polygon by this plane"""
        if polygon.plane.equals(self):
            return SplitResult(SplitType.COPLANAR_FRONT)

        eps = resolve(config).epsilon
        vertices = polygon.vertices
        hasfront = False
        hasback = False
        isback = []
        for vertex in vertices:
            t = self.normal.dot(vertex.pos) - self.w
            isback.append(t < 0.0)
            if t > eps:
                hasfront = True
            elif t < -eps:
                hasback = True

        if not hasfront and not hasback:
            # all points coplanar
            t = self.normal.dot(polygon.plane.normal)
            if t >= 0.0:
                return SplitResult(SplitType.COPLANAR_FRONT)
            return SplitResult(SplitType.COPLANAR_BACK)
        elif not hasback:
            return SplitResult(SplitType.FRONT)
        elif not hasfront:
            return SplitResult(SplitType.BACK)

        from polycsg.vertex import Vertex

        frontvertices = []
        backvertices = []
        count = len(vertices)
        for idx in range(count):
            vertex = vertices[idx]
            nextidx = (idx + 1) % count
            back = isback[idx]
            if back:
                backvertices.append(vertex)
            else:
                frontvertices.append(vertex)
            if back != isback[nextidx]:
                # segment crosses the plane
                crossing = Vertex(self.split_line_between_points(
                    vertex.pos, vertices[nextidx].pos))
                frontvertices.append(crossing)
                backvertices.append(crossing)

        frontvertices = _remove_duplicate_points(frontvertices, eps)
        backvertices = _remove_duplicate_points(backvertices, eps)
        front = None
        back = None
        if len(frontvertices) >= 3:
            front = polygon.with_vertices(frontvertices)
        if len(backvertices) >= 3:
            back = polygon.with_vertices(backvertices)
        return SplitResult(SplitType.SPANNING, front, back)


def _remove_duplicate_points(vertices, eps):
    """drop vertices closer than eps to their (cyclic) predecessor"""
    if len(vertices) < 3:
        return vertices
    epssq = eps * eps
    result = []
    prev = vertices[-1]
    for vertex in vertices:
        if vertex.pos.distance_to_squared(prev.pos) >= epssq:
            result.append(vertex)
        prev = vertex
    return result


__all__ = ['Plane', 'SplitResult', 'SplitType']
