"""Validation helpers for polycsg geometry."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Sequence


@dataclass
class CheckResult:
    ok: bool
    warnings: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.ok


def is_convex_point(prevpoint, point, nextpoint, normal, tol: float = 0.0) -> bool:
    """does the loop turn left (about ``normal``) at ``point``?"""
    crossproduct = point.minus(prevpoint).cross(nextpoint.minus(point))
    return crossproduct.dot(normal) >= -tol


def polygon_convex(points: Sequence, normal, tol: float = 0.0) -> bool:
    """``True`` if the closed loop of 3D points is convex about ``normal``"""

    count = len(points)
    if count < 3:
        return True
    prevprev = points[-2]
    prev = points[-1]
    for pos in points:
        if not is_convex_point(prevprev, prev, pos, normal, tol):
            return False
        prevprev = prev
        prev = pos
    return True


def check_cag(cag, min_area: float = 1e-5) -> CheckResult:
    """look for the usual ways a 2D area can be malformed

    Reports self intersection, vertices touched by an odd number of
    sides (an outline that does not close) and a non-positive area.
    """

    warnings = []
    if cag.is_self_intersecting():
        warnings.append('self intersects')

    counts = Counter()
    for side in cag.sides:
        counts[side.vertex0.pos] += 1
        counts[side.vertex1.pos] += 1
    for pos, count in counts.items():
        if count & 1:
            warnings.append('uneven number of sides ({}) for point {}'.format(count, pos))

    area = cag.area()
    if area < min_area:
        warnings.append('area is {}'.format(area))

    return CheckResult(not warnings, warnings)


__all__ = [
    'CheckResult',
    'check_cag',
    'is_convex_point',
    'polygon_convex',
]
