## convex planar polygons for polycsg solids

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

"""convex polygons for **polycsg**

A ``Polygon`` is an ordered loop of at least three ``Vertex``
instances, all in ``plane`` and forming a convex loop whose
right-hand winding follows ``plane.normal``.  The plane is computed
from the first three vertices unless it is passed in, which is what
the clipping code does so that cut pieces keep their parent's plane.

shared properties
=================

Every polygon carries a ``shared`` handle, a ``SharedProperties``
instance holding per-surface data such as color.  The handle is passed
along *by identity* to every polygon derived from it (split, flipped,
transformed), so metadata survives boolean operations: ::

    red = SharedProperties(color=(1.0, 0.0, 0.0, 1.0))
    poly = Polygon.create_from_points(points, shared=red)
    assert poly.flipped().shared is red

Two handles with equal contents are still different surfaces.
"""

from __future__ import annotations

from typing import Sequence

from polycsg.checks import polygon_convex
from polycsg.config import resolve
from polycsg.errors import ConvexityError, DegenerateGeometryError
from polycsg.plane import Plane
from polycsg.transformable import Transformable
from polycsg.vector import Vector3
from polycsg.vertex import Vertex
from polycsg.xform import Translation


class SharedProperties:
    """per-surface metadata shared by identity between related polygons"""

    __slots__ = ('color', 'values')

    def __init__(self, color=(1.0, 1.0, 1.0, 1.0), values=None):
        if len(color) == 3:
            color = tuple(color) + (1.0,)
        self.color = tuple(float(c) for c in color)
        self.values = dict(values or {})

    def __repr__(self):
        return 'SharedProperties(color={!r})'.format(self.color)

    @classmethod
    def default(cls) -> "SharedProperties":
        return _DEFAULT_SHARED


_DEFAULT_SHARED = SharedProperties()


class Polygon(Transformable):

    def __init__(self, vertices: Sequence[Vertex], shared=None, plane=None, config=None):
        vertices = tuple(vertices)
        if len(vertices) < 3:
            raise DegenerateGeometryError(
                'polygon needs at least 3 vertices, got {}'.format(len(vertices)))
        if plane is None:
            plane = Plane.from_points(vertices[0].pos, vertices[1].pos, vertices[2].pos)
        self.vertices = vertices
        self.plane = plane
        self.shared = _DEFAULT_SHARED if shared is None else shared
        self._bbox = None
        self._bsphere = None

        cfg = resolve(config)
        if cfg.debug and not self.vertices_convex(cfg.epsilon):
            raise ConvexityError('polygon not convex',
                                 {'vertices': [v.pos for v in vertices]})

    def __repr__(self):
        return 'Polygon({} vertices, plane={!r})'.format(len(self.vertices), self.plane)

    def __str__(self):
        lines = ['Polygon plane: {}'.format(self.plane)]
        lines.extend(' {}'.format(v) for v in self.vertices)
        return '\n'.join(lines)

    @classmethod
    def create_from_points(cls, points, shared=None, plane=None) -> "Polygon":
        return cls([Vertex(p) for p in points], shared, plane)

    def with_vertices(self, vertices) -> "Polygon":
        """new polygon on the same plane with the same shared handle"""
        return Polygon(vertices, self.shared, self.plane)

    def with_shared(self, shared) -> "Polygon":
        return Polygon(self.vertices, shared, self.plane)

    def with_color(self, red, green, blue, alpha=1.0) -> "Polygon":
        return self.with_shared(SharedProperties((red, green, blue, alpha)))

    def vertices_convex(self, tol: float = 0.0) -> bool:
        return polygon_convex([v.pos for v in self.vertices], self.plane.normal, tol * tol)

    def flipped(self) -> "Polygon":
        vertices = [v.flipped() for v in reversed(self.vertices)]
        return Polygon(vertices, self.shared, self.plane.flipped())

    def transform(self, matrix) -> "Polygon":
        """affine transform; vertex order is reversed for mirroring transforms"""
        vertices = [v.transform(matrix) for v in self.vertices]
        plane = self.plane.transform(matrix)
        if matrix.is_mirroring():
            # keep the inside/outside orientation
            vertices.reverse()
        return Polygon(vertices, self.shared, plane)

    def bounding_box(self):
        """``(minpoint, maxpoint)`` of the vertices"""
        if self._bbox is None:
            lo = hi = self.vertices[0].pos
            for v in self.vertices[1:]:
                lo = lo.min(v.pos)
                hi = hi.max(v.pos)
            self._bbox = (lo, hi)
        return self._bbox

    def bounding_sphere(self):
        """``(center, radius)`` of a sphere around the bounding box"""
        if self._bsphere is None:
            lo, hi = self.bounding_box()
            center = lo.plus(hi).times(0.5)
            self._bsphere = (center, hi.minus(center).length())
        return self._bsphere

    def extrude(self, offset):
        """sweep the polygon along ``offset`` into a closed solid"""
        from polycsg.csg import CSG

        offset = Vector3.parse(offset)
        direction = self.plane.normal.dot(offset)
        start = self.flipped() if direction > 0 else self
        end = start.transform(Translation(offset))
        polygons = [start]
        count = len(self.vertices)
        for i in range(count):
            nexti = (i + 1) % count
            points = [start.vertices[i].pos, end.vertices[i].pos,
                      end.vertices[nexti].pos, start.vertices[nexti].pos]
            polygons.append(Polygon.create_from_points(points, self.shared))
        polygons.append(end.flipped())
        return CSG(polygons)

    def to_stl_string(self) -> str:
        """ASCII STL facets, fan-triangulated from the first vertex"""
        normal = self.plane.normal.stl_string()
        first = self.vertices[0].to_stl_string()
        second = self.vertices[1].to_stl_string()
        result = []
        for vertex in self.vertices[2:]:
            third = vertex.to_stl_string()
            result.append('facet normal {}\nouter loop\n'.format(normal))
            result.append(first)
            result.append(second)
            result.append(third)
            result.append('endloop\nendfacet\n')
            second = third
        return ''.join(result)

    def project_to_orthonormal_basis(self, basis):
        """2D outline of the polygon in ``basis``, counter-clockwise

        A polygon perpendicular to the basis plane projects to an empty
        area.
        """
        from polycsg.cag import CAG

        points = [basis.to_2d(v.pos) for v in self.vertices]
        result = CAG.from_points_no_check(points)
        area = result.area()
        if abs(area) < 1e-5:
            return CAG()
        elif area < 0:
            return result.flipped()
        return result


__all__ = ['Polygon', 'SharedProperties']
