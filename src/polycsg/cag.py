## constructive area geometry: 2D areas as sets of directed sides

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

"""2D areas for **polycsg**

A ``CAG`` is a set of directed ``Side`` instances.  The area lies to
the left of every side, so outer boundaries run counter-clockwise and
holes run clockwise.  A valid area is made of closed loops that do not
cross themselves or each other.

2D booleans
===========

There is no 2D boolean engine.  Instead each area is lifted to a
"fake" solid: ``to_csg(-1, 1)`` turns every side into a vertical wall
quad between ``z = -1`` and ``z = 1``.  The 3D booleans run on the
walls, the result is retesselated and canonicalized, and
``from_fake_csg`` lowers each surviving wall back to a side.

Offsetting
==========

``expanded_shell(r)`` builds the band of width ``2r`` around the
outline: a rectangle along every side and a circular wedge (or a full
circle) at every vertex, all unioned together.  ``expand(r)`` is the
area unioned with its shell, ``contract(r)`` the area with its shell
removed.
"""

from __future__ import annotations

import logging
import math

from polycsg.checks import check_cag
from polycsg.config import resolve
from polycsg.csg import CSG
from polycsg.errors import (DegenerateGeometryError, OpenOutlineError,
                            SelfIntersectionError)
from polycsg.fuzzy import FuzzyCAGFactory
from polycsg.path2d import Path2D
from polycsg.polygon import Polygon
from polycsg.side import Side
from polycsg.transformable import Transformable
from polycsg.vector import Vector2, Vector3, solve_2_linear
from polycsg.vertex import Vertex, Vertex2

logger = logging.getLogger(__name__)


class CAG(Transformable):
    """a 2D area bounded by directed sides"""

    def __init__(self, sides=(), canonical=False):
        self.sides = tuple(sides)
        self.is_canonical = canonical

    def __repr__(self):
        return 'CAG({} sides)'.format(len(self.sides))

    def __str__(self):
        lines = ['CAG ({} sides):'.format(len(self.sides))]
        lines.extend(' {}'.format(side) for side in self.sides)
        return '\n'.join(lines)

    ## construction

    @classmethod
    def from_sides(cls, sides) -> "CAG":
        return cls(sides)

    @classmethod
    def from_points(cls, points) -> "CAG":
        """area enclosed by a simple polygon, in either winding

        The polygon may be concave but must not cross itself.
        """
        points = [Vector2.parse(p) for p in points]
        if len(points) < 3:
            raise DegenerateGeometryError(
                'CAG.from_points needs at least 3 points, got {}'.format(len(points)))
        result = cls.from_points_no_check(points)
        if result.is_self_intersecting():
            raise SelfIntersectionError('CAG.from_points: polygon is self intersecting',
                                        {'points': points})
        area = result.area()
        if abs(area) <= 1e-5:
            raise DegenerateGeometryError('CAG.from_points: degenerate polygon',
                                          {'points': points, 'area': area})
        if area < 0.0:
            result = result.flipped()
        return result.canonicalized()

    @classmethod
    def from_points_no_check(cls, points) -> "CAG":
        """like ``from_points`` without any validation; points should run counter-clockwise"""
        vertices = [Vertex2(p) for p in points]
        if not vertices:
            return cls()
        sides = []
        prev = vertices[-1]
        for vertex in vertices:
            sides.append(Side(prev, vertex))
            prev = vertex
        return cls(sides)

    @classmethod
    def from_fake_csg(cls, csg) -> "CAG":
        """lower a solid made of ``to_csg(-1, 1)`` walls back to an area"""
        return cls([Side.from_fake_polygon(p) for p in csg.polygons])

    @classmethod
    def circle(cls, center=(0.0, 0.0), radius=1.0, resolution=None) -> "CAG":
        """regular polygon with ``resolution`` corners on the circle"""
        if resolution is None:
            resolution = resolve().resolution2d
        center = Vector2.parse(center)
        vertices = []
        for i in range(resolution):
            radians = 2.0 * math.pi * i / resolution
            point = Vector2.from_angle_radians(radians).times(radius).plus(center)
            vertices.append(Vertex2(point))
        sides = []
        prev = vertices[-1]
        for vertex in vertices:
            sides.append(Side(prev, vertex))
            prev = vertex
        return cls(sides)

    @classmethod
    def rectangle(cls, center=(0.0, 0.0), radius=(1.0, 1.0)) -> "CAG":
        """axis aligned rectangle given by its center and half extents"""
        c = Vector2.parse(center)
        r = Vector2.parse(radius)
        rswap = Vector2(r.x, -r.y)
        return cls.from_points([c.plus(r), c.plus(rswap), c.minus(r), c.minus(rswap)])

    @classmethod
    def rounded_rectangle(cls, center=(0.0, 0.0), radius=(1.0, 1.0), round_radius=0.2,
                          resolution=None) -> "CAG":
        if resolution is None:
            resolution = resolve().resolution2d
        r = Vector2.parse(radius)
        maxroundradius = min(r.x, r.y) - 0.1
        roundradius = max(min(round_radius, maxroundradius), 0.0)
        rect = cls.rectangle(center, Vector2(r.x - roundradius, r.y - roundradius))
        if roundradius > 0.0:
            return rect.expand(roundradius, resolution)
        return rect

    ## conversion to and from solids

    def to_csg(self, z0: float, z1: float) -> CSG:
        """the sides as vertical walls between ``z0`` and ``z1``, without caps"""
        return CSG([side.to_polygon_3d(z0, z1) for side in self.sides])

    def _combine(self, cags, operation) -> "CAG":
        if isinstance(cags, CAG):
            cags = [cags]
        result = self.to_csg(-1.0, 1.0)
        for cag in cags:
            result = operation(result, cag.to_csg(-1.0, 1.0))
        result = result.retesselated().canonicalized()
        return CAG.from_fake_csg(result).canonicalized()

    def union(self, cags) -> "CAG":
        """union with one area or a list of areas"""
        return self._combine(cags, lambda a, b: a.union_sub(b, False, False))

    def subtract(self, cags) -> "CAG":
        return self._combine(cags, lambda a, b: a.subtract_sub(b, False, False))

    def intersect(self, cags) -> "CAG":
        return self._combine(cags, lambda a, b: a.intersect_sub(b, False, False))

    ## queries

    def area(self) -> float:
        """signed area, positive for counter-clockwise outlines"""
        total = 0.0
        for side in self.sides:
            total += side.vertex0.pos.cross(side.vertex1.pos)
        return total * 0.5

    def get_bounds(self):
        """``(minpoint, maxpoint)`` of the area"""
        if not self.sides:
            origin = Vector2(0.0, 0.0)
            return (origin, origin)
        lo = hi = self.sides[0].vertex0.pos
        for side in self.sides:
            lo = lo.min(side.vertex0.pos).min(side.vertex1.pos)
            hi = hi.max(side.vertex0.pos).max(side.vertex1.pos)
        return (lo, hi)

    @staticmethod
    def lines_intersect(p0start, p0end, p1start, p1end) -> bool:
        """do two segments strictly cross?

        Touching at endpoints does not count, except for segments that
        share an endpoint and fold back onto each other.
        """
        shared = None
        if p0end.equals(p1start) or p0end.equals(p1end):
            shared = p0end
        elif p0start.equals(p1start) or p0start.equals(p1end):
            shared = p0start
        if shared is not None:
            away0 = (p0start if shared is p0end else p0end).minus(shared)
            away1 = (p1start if shared.equals(p1end) else p1end).minus(shared)
            length0 = away0.length()
            length1 = away1.length()
            if length0 == 0.0 or length1 == 0.0:
                return False
            d = away0.divided_by(length0).minus(away1.divided_by(length1)).length()
            return d < 1e-5

        d0 = p0end.minus(p0start)
        d1 = p1end.minus(p1start)
        if abs(d0.cross(d1)) < 1e-9:
            # parallel
            return False
        alpha0, alpha1 = solve_2_linear(-d0.x, d1.x, -d0.y, d1.y,
                                        p0start.x - p1start.x, p0start.y - p1start.y)
        return (1e-6 < alpha0 < 0.999999) and (1e-6 < alpha1 < 0.999999)

    def is_self_intersecting(self) -> bool:
        sides = self.sides
        for i, side0 in enumerate(sides):
            for side1 in sides[i + 1:]:
                if CAG.lines_intersect(side0.vertex0.pos, side0.vertex1.pos,
                                       side1.vertex0.pos, side1.vertex1.pos):
                    return True
        return False

    def check(self):
        """``CheckResult`` listing anything malformed about the area"""
        return check_cag(self)

    ## derived areas

    def flipped(self) -> "CAG":
        """same outline, opposite orientation"""
        return CAG([side.flipped() for side in reversed(self.sides)])

    def transform(self, matrix) -> "CAG":
        result = CAG([side.transform(matrix) for side in self.sides])
        if matrix.is_mirroring():
            return result.flipped()
        return result

    def center(self, new_center=(0.0, 0.0)) -> "CAG":
        """translate so the middle of the bounding box lands on ``new_center``"""
        lo, hi = self.get_bounds()
        middle = lo.plus(hi).times(0.5)
        return self.translate(Vector2.parse(new_center).minus(middle))

    def canonicalized(self) -> "CAG":
        if self.is_canonical:
            return self
        return FuzzyCAGFactory().get_cag(self)

    def expanded_shell(self, radius: float, resolution: int = 8) -> "CAG":
        """band of half-width ``radius`` around the outline"""
        if resolution < 4:
            resolution = 4
        eps = resolve().epsilon
        cags = []
        pointmap = {}
        cag = self.canonicalized()
        for side in cag.sides:
            d = side.vertex1.pos.minus(side.vertex0.pos)
            dl = d.length()
            if dl <= eps:
                continue
            normal = d.times(1.0 / dl).normal().times(radius)
            shellpoints = [
                side.vertex1.pos.plus(normal),
                side.vertex1.pos.minus(normal),
                side.vertex0.pos.minus(normal),
                side.vertex0.pos.plus(normal),
            ]
            piece = _shell_piece(shellpoints)
            if piece is not None:
                cags.append(piece)
            for p1, p2 in ((side.vertex0.pos, side.vertex1.pos),
                           (side.vertex1.pos, side.vertex0.pos)):
                pointmap.setdefault(p1, []).append((p1, p2))

        for endpoints in pointmap.values():
            pcenter = endpoints[0][0]
            if len(endpoints) == 2:
                angle1 = endpoints[0][1].minus(pcenter).angle_degrees()
                angle2 = endpoints[1][1].minus(pcenter).angle_degrees()
                if angle2 < angle1:
                    angle2 += 360.0
                elif angle2 >= angle1 + 360.0:
                    angle2 -= 360.0
                if angle2 < angle1 + 180.0:
                    angle1, angle2 = angle2, angle1 + 360.0
                angle1 += 90.0
                angle2 -= 90.0
            else:
                angle1 = 0.0
                angle2 = 360.0
            fullcircle = angle2 - angle1 >= 360.0 - 1e-5
            if fullcircle:
                angle1 = 0.0
                angle2 = 360.0
            if angle2 - angle1 <= 1e-5:
                continue
            points = []
            if not fullcircle:
                points.append(pcenter)
            numsteps = max(1, int(math.floor(resolution * (angle2 - angle1) / 360.0 + 0.5)))
            for step in range(numsteps + 1):
                if step == numsteps:
                    angle = angle2
                else:
                    angle = angle1 + step * (angle2 - angle1) / numsteps
                if not fullcircle or step > 0:
                    points.append(pcenter.plus(Vector2.from_angle_degrees(angle).times(radius)))
            piece = _shell_piece(points)
            if piece is not None:
                cags.append(piece)

        logger.debug('expanded_shell: %d sides -> %d pieces', len(cag.sides), len(cags))
        return CAG().union(cags)

    def expand(self, radius: float, resolution: int = 8) -> "CAG":
        return self.union(self.expanded_shell(radius, resolution))

    def contract(self, radius: float, resolution: int = 8) -> "CAG":
        return self.subtract(self.expanded_shell(radius, resolution))

    def extrude(self, offset=(0.0, 0.0, 1.0), twist_angle=0.0, twist_steps=1) -> CSG:
        """linear extrusion along ``offset``, optionally twisted

        The area sits in the ``z = 0`` plane.  The top face is rotated
        by ``twist_angle`` degrees around the z axis, in
        ``twist_steps`` increments.
        """
        if not self.sides:
            return CSG()
        offset = Vector3.parse(offset)
        steps = 1 if (twist_angle == 0.0 or twist_steps < 1) else int(twist_steps)
        offset2d = Vector2(offset.x, offset.y)
        polygons = []
        prevcag = None
        prevz = 0.0
        for step in range(steps + 1):
            fraction = step / steps
            cag = self
            angle = twist_angle * fraction
            if angle != 0.0:
                cag = cag.rotate_z(angle)
            cag = cag.translate(offset2d.times(fraction))
            z = offset.z * fraction
            if step == 0 or step == steps:
                polygons.extend(cag._cap(z, flip=(step == 0) != (offset.z < 0.0)))
            if step > 0:
                for side, prevside in zip(cag.sides, prevcag.sides):
                    p1 = Polygon([Vertex(side.vertex1.pos.to_vector3(z)),
                                  Vertex(side.vertex0.pos.to_vector3(z)),
                                  Vertex(prevside.vertex0.pos.to_vector3(prevz))])
                    p2 = Polygon([Vertex(side.vertex1.pos.to_vector3(z)),
                                  Vertex(prevside.vertex0.pos.to_vector3(prevz)),
                                  Vertex(prevside.vertex1.pos.to_vector3(prevz))])
                    if offset.z < 0.0:
                        p1 = p1.flipped()
                        p2 = p2.flipped()
                    polygons.append(p1)
                    polygons.append(p2)
            prevcag = cag
            prevz = z
        return CSG(polygons)

    def _cap(self, z, flip):
        """the area as faces in the plane at height ``z``"""
        shell = self.to_csg(z - 1.0, z + 1.0)
        lo, hi = self.get_bounds()
        corners = [(lo.x - 1.0, lo.y - 1.0), (hi.x + 1.0, lo.y - 1.0),
                   (hi.x + 1.0, hi.y + 1.0), (lo.x - 1.0, hi.y + 1.0)]
        plane = CSG([Polygon([Vertex(Vector3(x, y, z)) for x, y in corners])])
        if flip:
            plane = plane.inverse()
        plane = plane.intersect(shell)
        # only keep the faces in the z plane
        return [p for p in plane.polygons if abs(p.plane.normal.z) > 0.99]

    ## outlines

    def get_outline_paths(self):
        """closed ``Path2D`` loops following the sides"""
        cag = self.canonicalized()
        outgoing = {}
        for side in cag.sides:
            outgoing.setdefault(side.vertex0.tag, []).append(side)

        paths = []
        while outgoing:
            vertextag = next(iter(outgoing))
            candidates = outgoing[vertextag]
            thisside = candidates.pop(0)
            if not candidates:
                del outgoing[vertextag]

            points = []
            starttag = thisside.vertex0.tag
            while True:
                points.append(thisside.vertex0.pos)
                nexttag = thisside.vertex1.tag
                if nexttag == starttag:
                    break
                candidates = outgoing.get(nexttag)
                if not candidates:
                    raise OpenOutlineError('area is not closed',
                                           {'point': thisside.vertex1.pos})
                index = 0
                if len(candidates) > 1:
                    # loops touching at a corner: take the sharpest right turn
                    thisangle = thisside.direction().angle_degrees()
                    bestangle = None
                    for i, candidate in enumerate(candidates):
                        anglediff = candidate.direction().angle_degrees() - thisangle
                        while anglediff <= -180.0:
                            anglediff += 360.0
                        while anglediff > 180.0:
                            anglediff -= 360.0
                        if bestangle is None or anglediff < bestangle:
                            index = i
                            bestangle = anglediff
                thisside = candidates.pop(index)
                if not candidates:
                    del outgoing[nexttag]
            paths.append(Path2D(points, True))
        return paths

    ## export

    def to_dxf_string(self, layer='PATHS') -> str:
        from polycsg.io.dxf import paths_to_dxf
        return paths_to_dxf(self.get_outline_paths(), layer)

    @staticmethod
    def paths_to_dxf(paths, layer='PATHS') -> str:
        from polycsg.io.dxf import paths_to_dxf
        return paths_to_dxf(paths, layer)

    def write_dxf(self, path, layer='PATHS'):
        from polycsg.io.dxf import write_dxf
        return write_dxf(self, path, layer)


def _shell_piece(points):
    """``CAG.from_points``, or None for a sliver too thin to be an area"""
    area = CAG.from_points_no_check(points).area()
    if abs(area) <= 1e-5:
        logger.debug('expanded_shell: skipping sliver of area %g', area)
        return None
    return CAG.from_points(points)


__all__ = ['CAG']
