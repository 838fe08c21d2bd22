## tolerance-based merging of near-identical vertices and planes

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

"""canonicalization of areas and solids

Boolean operations leave behind vertices that should coincide but
differ in the last few bits.  The factories here map every vertex (and
plane) to a single canonical instance per epsilon-sized neighbourhood,
so that downstream code can compare by identity and key by tag.

``FuzzyFactory`` quantizes each coordinate onto a ``1/tolerance`` grid.
A new object is registered under every combination of the lower and
upper grid cell of each coordinate, so any later value that rounds to
one of those cells finds it, whichever side of a cell boundary it
falls on.
"""

from __future__ import annotations

import itertools
import logging
import math
from collections import defaultdict

from polycsg.config import resolve
from polycsg.polygon import Polygon
from polycsg.side import Side

logger = logging.getLogger(__name__)


class FuzzyFactory:

    def __init__(self, tolerance: float):
        self.multiplier = 1.0 / tolerance
        self.lookuptable = {}

    def __len__(self):
        return len(self.lookuptable)

    def lookup_or_create(self, els, creator):
        multiplier = self.multiplier
        key = tuple(int(math.floor(el * multiplier + 0.5)) for el in els)
        try:
            return self.lookuptable[key]
        except KeyError:
            pass
        obj = creator(els)
        cells = []
        for el in els:
            q0 = int(math.floor(el * multiplier))
            cells.append((q0, q0 + 1))
        for hashkey in itertools.product(*cells):
            self.lookuptable[hashkey] = obj
        return obj


class FuzzyCAGFactory:
    """merges the vertices of areas within epsilon"""

    def __init__(self, config=None):
        self.vertexfactory = FuzzyFactory(resolve(config).epsilon)

    def get_vertex(self, vertex):
        return self.vertexfactory.lookup_or_create(vertex.pos, lambda els: vertex)

    def get_side(self, side):
        vertex0 = self.get_vertex(side.vertex0)
        vertex1 = self.get_vertex(side.vertex1)
        if vertex0 is vertex1:
            return None
        if vertex0 is side.vertex0 and vertex1 is side.vertex1:
            return side
        return Side(vertex0, vertex1)

    def get_cag(self, cag):
        sides = []
        collapsed = 0
        for side in cag.sides:
            newside = self.get_side(side)
            if newside is None:
                collapsed += 1
            else:
                sides.append(newside)

        # a side and its exact reverse enclose nothing
        pending = defaultdict(list)
        keep = [True] * len(sides)
        for idx, side in enumerate(sides):
            reverse = pending.get((side.vertex1.tag, side.vertex0.tag))
            if reverse:
                keep[reverse.pop()] = False
                keep[idx] = False
            else:
                pending[(side.vertex0.tag, side.vertex1.tag)].append(idx)
        cancelled = keep.count(False)
        if collapsed or cancelled:
            logger.debug('canonicalize: dropped %d collapsed and %d cancelling sides',
                         collapsed, cancelled)
        sides = [s for s, k in zip(sides, keep) if k]
        return type(cag)(sides, canonical=True)


class FuzzyCSGFactory:
    """merges the vertices and planes of solids within epsilon

    ``shared`` handles are kept as they are; surfaces are only ever
    identical by identity.
    """

    def __init__(self, config=None):
        eps = resolve(config).epsilon
        self.vertexfactory = FuzzyFactory(eps)
        self.planefactory = FuzzyFactory(eps)

    def get_vertex(self, vertex):
        return self.vertexfactory.lookup_or_create(vertex.pos, lambda els: vertex)

    def get_plane(self, plane):
        els = (plane.normal.x, plane.normal.y, plane.normal.z, plane.w)
        return self.planefactory.lookup_or_create(els, lambda els: plane)

    def get_polygon(self, polygon):
        plane = self.get_plane(polygon.plane)
        vertices = []
        for vertex in polygon.vertices:
            v = self.get_vertex(vertex)
            if not vertices or v is not vertices[-1]:
                vertices.append(v)
        while len(vertices) > 1 and vertices[0] is vertices[-1]:
            vertices.pop()
        if len(vertices) < 3:
            return None
        return Polygon(vertices, polygon.shared, plane)

    def get_csg(self, csg):
        polygons = []
        for polygon in csg.polygons:
            newpolygon = self.get_polygon(polygon)
            if newpolygon is not None:
                polygons.append(newpolygon)
        dropped = len(csg.polygons) - len(polygons)
        if dropped:
            logger.debug('canonicalize: dropped %d degenerate polygons', dropped)
        return type(csg)(polygons, canonical=True)


__all__ = ['FuzzyCAGFactory', 'FuzzyCSGFactory', 'FuzzyFactory']
