"""Merging of coplanar polygon fragments.

Boolean operations chop faces into many convex pieces.  ``retesselate``
glues neighbouring pieces of the same surface back together wherever
the result stays convex.  Polygons are grouped by plane tag and
``shared`` identity and joined along edges the two pieces traverse in
opposite directions, so the input should be canonicalized first.
"""

import logging
from collections import OrderedDict

from polycsg.checks import polygon_convex
from polycsg.config import resolve

logger = logging.getLogger(__name__)


def retesselate(polygons, config=None):
    """merge adjacent convex pieces of the same surface

    Returns a new list; the geometry covered is unchanged.
    """
    eps = resolve(config).epsilon
    groups = OrderedDict()
    for polygon in polygons:
        key = (polygon.plane.tag, id(polygon.shared))
        groups.setdefault(key, []).append(polygon)

    result = []
    for group in groups.values():
        if len(group) == 1:
            result.extend(group)
        else:
            result.extend(_merge_group(group, eps))
    if len(result) != len(polygons):
        logger.debug('retesselate: %d -> %d polygons', len(polygons), len(result))
    return result


def _edges(polygon):
    vertices = polygon.vertices
    count = len(vertices)
    for i in range(count):
        yield i, vertices[i], vertices[(i + 1) % count]


def _merge_group(polygons, eps):
    polygons = list(polygons)
    merged = True
    while merged:
        merged = False
        edges = {}
        for idx, polygon in enumerate(polygons):
            for i, a, b in _edges(polygon):
                edges[(a.tag, b.tag)] = idx
        for idx, polygon in enumerate(polygons):
            for i, a, b in _edges(polygon):
                other = edges.get((b.tag, a.tag))
                if other is None or other == idx:
                    continue
                joined = _join(polygon, i, polygons[other], eps)
                if joined is None:
                    continue
                polygons[idx] = joined
                del polygons[other]
                merged = True
                break
            if merged:
                break
    return polygons


def _join(first, index, second, eps):
    """join two polygons along edge ``index`` of ``first``

    ``second`` must contain the same edge in the opposite direction.
    Returns ``None`` unless the joined loop is convex.
    """
    count = len(first.vertices)
    a = first.vertices[index]
    b = first.vertices[(index + 1) % count]

    # first, starting at b and ending at a
    start = (index + 1) % count
    loop = list(first.vertices[start:] + first.vertices[:start])

    # second, from a to b, without its ends
    others = second.vertices
    j = next(k for k, v in enumerate(others) if v is a or v.tag == a.tag)
    between = []
    k = j + 1
    while True:
        vertex = others[k % len(others)]
        if vertex is b or vertex.tag == b.tag:
            break
        between.append(vertex)
        k += 1
    loop.extend(between)

    loop = _remove_collinear(loop, eps)
    if len(loop) < 3:
        return None
    normal = first.plane.normal
    if not polygon_convex([v.pos for v in loop], normal, eps * eps):
        return None
    return first.with_vertices(loop)


def _remove_collinear(vertices, eps):
    vertices = list(vertices)
    changed = True
    while changed and len(vertices) >= 3:
        changed = False
        count = len(vertices)
        for i in range(count):
            prev = vertices[i - 1].pos
            pos = vertices[i].pos
            nxt = vertices[(i + 1) % count].pos
            base = nxt.minus(prev)
            length = base.length()
            if length < eps:
                distance = pos.distance_to(prev)
            else:
                distance = pos.minus(prev).cross(base).length() / length
            if distance < eps:
                del vertices[i]
                changed = True
                break
    return vertices


__all__ = ['retesselate']
