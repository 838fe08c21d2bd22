## binary space partitioning trees for solid boolean operations

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

"""BSP trees and the boolean operations built on them

Each ``Node`` holds a splitting plane, the polygons lying in that
plane, and front and back subtrees.  Space in front of a leaf is
outside the solid, space behind a leaf is inside.  Booleans are
expressed with three tree operations:

* ``clip_to(other)`` removes every polygon of this tree that lies
  inside the solid of ``other``.
* ``invert()`` turns the solid inside out.
* ``build(polygons)`` adds polygons to the tree, splitting them by the
  planes already in it.

Trees built from real models tend to be badly unbalanced, so every
walk uses an explicit stack instead of recursion.
"""

import logging

from polycsg.plane import SplitType

logger = logging.getLogger(__name__)


class Node:
    """a node of a BSP tree; an empty ``Node()`` is an empty solid"""

    __slots__ = ('plane', 'front', 'back', 'polygons')

    def __init__(self, polygons=None):
        self.plane = None
        self.front = None
        self.back = None
        self.polygons = []
        if polygons:
            self.build(polygons)

    def __repr__(self):
        return 'Node(plane={!r}, {} polygons)'.format(self.plane, len(self.polygons))

    def _nodes(self):
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.front is not None:
                stack.append(node.front)
            if node.back is not None:
                stack.append(node.back)

    def invert(self):
        """swap inside and outside, in place"""
        for node in self._nodes():
            node.polygons = [p.flipped() for p in node.polygons]
            if node.plane is not None:
                node.plane = node.plane.flipped()
            node.front, node.back = node.back, node.front

    def clip_polygons(self, polygons):
        """the parts of ``polygons`` outside the solid of this tree"""
        result = []
        stack = [(self, list(polygons))]
        while stack:
            node, polys = stack.pop()
            if node.plane is None:
                result.extend(polys)
                continue
            front = []
            back = []
            for polygon in polys:
                split = node.plane.split_polygon(polygon)
                if split.type is SplitType.FRONT or split.type is SplitType.COPLANAR_FRONT:
                    front.append(polygon)
                elif split.type is SplitType.BACK or split.type is SplitType.COPLANAR_BACK:
                    back.append(polygon)
                else:
                    if split.front is not None:
                        front.append(split.front)
                    if split.back is not None:
                        back.append(split.back)
            if front:
                if node.front is not None:
                    stack.append((node.front, front))
                else:
                    result.extend(front)
            # polygons behind a leaf are inside and are dropped
            if back and node.back is not None:
                stack.append((node.back, back))
        return result

    def clip_to(self, bsp):
        """remove the parts of this tree inside ``bsp``, in place"""
        for node in self._nodes():
            node.polygons = bsp.clip_polygons(node.polygons)

    def all_polygons(self):
        result = []
        for node in self._nodes():
            result.extend(node.polygons)
        return result

    def build(self, polygons):
        """insert ``polygons`` into the tree, in place"""
        stack = [(self, list(polygons))]
        while stack:
            node, polys = stack.pop()
            if not polys:
                continue
            if node.plane is None:
                node.plane = polys[0].plane
            front = []
            back = []
            for polygon in polys:
                split = node.plane.split_polygon(polygon)
                if split.type is SplitType.COPLANAR_FRONT or split.type is SplitType.COPLANAR_BACK:
                    node.polygons.append(polygon)
                elif split.type is SplitType.FRONT:
                    front.append(polygon)
                elif split.type is SplitType.BACK:
                    back.append(polygon)
                else:
                    if split.front is not None:
                        front.append(split.front)
                    if split.back is not None:
                        back.append(split.back)
            if front:
                if node.front is None:
                    node.front = Node()
                stack.append((node.front, front))
            if back:
                if node.back is None:
                    node.back = Node()
                stack.append((node.back, back))


def union(polygons_a, polygons_b):
    """boundary polygons of the union of two solids"""
    a = Node(polygons_a)
    b = Node(polygons_b)
    a.clip_to(b)
    b.clip_to(a)
    b.invert()
    b.clip_to(a)
    b.invert()
    a.build(b.all_polygons())
    result = a.all_polygons()
    logger.debug('union: %d + %d -> %d polygons',
                 len(polygons_a), len(polygons_b), len(result))
    return result


def subtract(polygons_a, polygons_b):
    """boundary polygons of solid a with solid b removed"""
    a = Node(polygons_a)
    b = Node(polygons_b)
    a.invert()
    a.clip_to(b)
    b.clip_to(a)
    b.invert()
    b.clip_to(a)
    b.invert()
    a.build(b.all_polygons())
    a.invert()
    result = a.all_polygons()
    logger.debug('subtract: %d - %d -> %d polygons',
                 len(polygons_a), len(polygons_b), len(result))
    return result


def intersect(polygons_a, polygons_b):
    """boundary polygons of the intersection of two solids"""
    a = Node(polygons_a)
    b = Node(polygons_b)
    a.invert()
    b.clip_to(a)
    b.invert()
    a.clip_to(b)
    b.clip_to(a)
    a.build(b.all_polygons())
    a.invert()
    result = a.all_polygons()
    logger.debug('intersect: %d & %d -> %d polygons',
                 len(polygons_a), len(polygons_b), len(result))
    return result


__all__ = ['Node', 'intersect', 'subtract', 'union']
