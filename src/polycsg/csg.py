## constructive solid geometry: solids as sets of convex polygons

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

"""solids for **polycsg**

A ``CSG`` is a closed boundary made of convex ``Polygon`` instances.
It is an immutable container: booleans, transforms and cleanup passes
all return new solids.

Booleans come in two flavours.  ``union``, ``subtract`` and
``intersect`` take one solid or a list of them and return a cleaned
up (retesselated and canonicalized) result.  The ``*_sub`` variants
combine exactly two solids and leave cleanup to the caller, which is
what chained operations want.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from polycsg import bsp
from polycsg.config import resolve
from polycsg.fuzzy import FuzzyCSGFactory
from polycsg.plane import Plane
from polycsg.polygon import Polygon, SharedProperties
from polycsg.retesselate import retesselate
from polycsg.transformable import Transformable
from polycsg.vector import Vector3
from polycsg.vertex import Vertex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Triangle:
    """Immutable triangle representation in XYZ space."""

    normal: Vector3
    v0: Vector3
    v1: Vector3
    v2: Vector3


class CSG(Transformable):
    """a solid bounded by convex polygons"""

    def __init__(self, polygons=(), canonical=False, retesselated=False):
        self.polygons = tuple(polygons)
        self.is_canonical = canonical
        self.is_retesselated = retesselated

    def __repr__(self):
        return 'CSG({} polygons)'.format(len(self.polygons))

    ## construction

    @classmethod
    def cube(cls, center=(0.0, 0.0, 0.0), radius=1.0) -> "CSG":
        """axis aligned box; ``radius`` is a number or per-axis half extents"""
        c = Vector3.parse(center)
        r = Vector3.parse(radius)
        faces = [
            ((0, 4, 6, 2), Vector3(-1.0, 0.0, 0.0)),
            ((1, 3, 7, 5), Vector3(1.0, 0.0, 0.0)),
            ((0, 1, 5, 4), Vector3(0.0, -1.0, 0.0)),
            ((2, 6, 7, 3), Vector3(0.0, 1.0, 0.0)),
            ((0, 2, 3, 1), Vector3(0.0, 0.0, -1.0)),
            ((4, 5, 7, 6), Vector3(0.0, 0.0, 1.0)),
        ]
        corners = []
        for i in range(8):
            corners.append(Vertex(Vector3(
                c.x + r.x * (1.0 if i & 1 else -1.0),
                c.y + r.y * (1.0 if i & 2 else -1.0),
                c.z + r.z * (1.0 if i & 4 else -1.0))))
        polygons = []
        for indices, normal in faces:
            vertices = [corners[i] for i in indices]
            plane = Plane.from_normal_and_point(normal, vertices[0].pos)
            polygons.append(Polygon(vertices, None, plane))
        return cls(polygons)

    @classmethod
    def cylinder(cls, start=(0.0, -1.0, 0.0), end=(0.0, 1.0, 0.0), radius=1.0,
                 resolution=None) -> "CSG":
        """circular cylinder between ``start`` and ``end``

        ``resolution`` is the number of slices around the axis and
        defaults to the configured 3D resolution.
        """
        if resolution is None:
            resolution = resolve().resolution3d
        slices = max(int(resolution), 3)
        s = Vector3.parse(start)
        e = Vector3.parse(end)
        ray = e.minus(s)
        axisz = ray.unit()
        isy = abs(axisz.y) > 0.5
        axisx = Vector3(1.0 if isy else 0.0, 0.0 if isy else 1.0, 0.0).cross(axisz).unit()
        axisy = axisx.cross(axisz).unit()
        startvertex = Vertex(s)
        endvertex = Vertex(e)

        ring0 = []
        ring1 = []
        for i in range(slices):
            angle = 2.0 * math.pi * i / slices
            out = axisx.times(math.cos(angle)).plus(axisy.times(math.sin(angle)))
            ring0.append(Vertex(s.plus(out.times(radius))))
            ring1.append(Vertex(s.plus(ray).plus(out.times(radius))))

        polygons = []
        for i in range(slices):
            j = (i + 1) % slices
            polygons.append(Polygon([startvertex, ring0[i], ring0[j]]))
            polygons.append(Polygon([ring0[j], ring0[i], ring1[i], ring1[j]]))
            polygons.append(Polygon([endvertex, ring1[j], ring1[i]]))
        return cls(polygons)

    ## booleans

    def union(self, csg) -> "CSG":
        """union with one solid or a list of solids"""
        csgs = csg if isinstance(csg, (list, tuple)) else [csg]
        result = self
        for other in csgs:
            result = result.union_sub(other, False, False)
        return result.retesselated().canonicalized()

    def union_sub(self, csg, retesselate=False, canonicalize=False) -> "CSG":
        if not self.may_overlap(csg):
            result = CSG(self.polygons + csg.polygons)
        else:
            result = CSG(bsp.union(self.polygons, csg.polygons))
        return result._cleanup(retesselate, canonicalize)

    def subtract(self, csg) -> "CSG":
        """this solid with one solid or a list of solids removed"""
        csgs = csg if isinstance(csg, (list, tuple)) else [csg]
        result = self
        for other in csgs:
            result = result.subtract_sub(other, False, False)
        return result.retesselated().canonicalized()

    def subtract_sub(self, csg, retesselate=False, canonicalize=False) -> "CSG":
        result = CSG(bsp.subtract(self.polygons, csg.polygons))
        return result._cleanup(retesselate, canonicalize)

    def intersect(self, csg) -> "CSG":
        """intersection with one solid or a list of solids"""
        csgs = csg if isinstance(csg, (list, tuple)) else [csg]
        result = self
        for other in csgs:
            result = result.intersect_sub(other, False, False)
        return result.retesselated().canonicalized()

    def intersect_sub(self, csg, retesselate=False, canonicalize=False) -> "CSG":
        result = CSG(bsp.intersect(self.polygons, csg.polygons))
        return result._cleanup(retesselate, canonicalize)

    def _cleanup(self, retesselate, canonicalize):
        result = self
        if retesselate:
            result = result.retesselated()
        if canonicalize:
            result = result.canonicalized()
        return result

    def inverse(self) -> "CSG":
        """solid with inside and outside swapped"""
        return CSG([p.flipped() for p in self.polygons])

    ## cleanup

    def canonicalized(self) -> "CSG":
        if self.is_canonical:
            return self
        return FuzzyCSGFactory().get_csg(self)

    def retesselated(self) -> "CSG":
        if self.is_retesselated:
            return self
        csg = self.canonicalized()
        return CSG(retesselate(csg.polygons), False, True)

    ## queries

    def get_bounds(self):
        """``(minpoint, maxpoint)`` of the solid"""
        if not self.polygons:
            origin = Vector3(0.0, 0.0, 0.0)
            return (origin, origin)
        lo, hi = self.polygons[0].bounding_box()
        for polygon in self.polygons[1:]:
            plo, phi = polygon.bounding_box()
            lo = lo.min(plo)
            hi = hi.max(phi)
        return (lo, hi)

    def may_overlap(self, csg) -> bool:
        """``False`` if the bounding boxes are disjoint"""
        if not self.polygons or not csg.polygons:
            return False
        mylo, myhi = self.get_bounds()
        otherlo, otherhi = csg.get_bounds()
        if mylo.x > otherhi.x or myhi.x < otherlo.x:
            return False
        if mylo.y > otherhi.y or myhi.y < otherlo.y:
            return False
        if mylo.z > otherhi.z or myhi.z < otherlo.z:
            return False
        return True

    ## transformation

    def transform(self, matrix) -> "CSG":
        return CSG([p.transform(matrix) for p in self.polygons])

    def with_color(self, red, green, blue, alpha=1.0) -> "CSG":
        shared = SharedProperties((red, green, blue, alpha))
        return CSG([p.with_shared(shared) for p in self.polygons],
                   self.is_canonical, self.is_retesselated)

    ## export

    def to_triangles(self):
        """list of ``Triangle`` records, each polygon fanned from its first vertex"""
        triangles = []
        for polygon in self.polygons:
            normal = polygon.plane.normal
            first = polygon.vertices[0].pos
            for i in range(1, len(polygon.vertices) - 1):
                triangles.append(Triangle(normal, first,
                                          polygon.vertices[i].pos,
                                          polygon.vertices[i + 1].pos))
        return triangles

    def to_stl_string(self, name='polycsg') -> str:
        result = ['solid {}\n'.format(name)]
        result.extend(p.to_stl_string() for p in self.polygons)
        result.append('endsolid {}\n'.format(name))
        return ''.join(result)

    def to_amf_string(self) -> str:
        """AMF document with one volume per surface"""
        from polycsg.io.amf import amf_string
        return amf_string(self)


__all__ = ['CSG', 'Triangle']
