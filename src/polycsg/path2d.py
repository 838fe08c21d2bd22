"""Ordered 2D point sequences, open or closed."""

from __future__ import annotations

import math

from polycsg.config import resolve
from polycsg.errors import PathError
from polycsg.transformable import Transformable
from polycsg.vector import Vector2, Vector3


class Path2D(Transformable):
    """a polyline in the plane

    Points closer than epsilon to their predecessor are dropped; for a
    closed path the first point is also compared with the last.
    """

    def __init__(self, points=(), closed=False, config=None):
        eps = resolve(config).epsilon
        points = [Vector2.parse(p) for p in points]
        newpoints = []
        prev = points[-1] if (closed and points) else None
        for point in points:
            if prev is None or point.distance_to(prev) >= eps:
                newpoints.append(point)
            prev = point
        self.points = tuple(newpoints)
        self.closed = bool(closed)

    def __repr__(self):
        return 'Path2D({} points, closed={})'.format(len(self.points), self.closed)

    def __len__(self):
        return len(self.points)

    @classmethod
    def arc(cls, center=(0.0, 0.0), radius=1.0, start_angle=0.0, end_angle=360.0,
            resolution=None, make_tangent=False, config=None) -> "Path2D":
        """open path along a circular arc

        Angles are in degrees, 0 along +x and 90 along +y.
        ``resolution`` is the number of points per 360 degrees.  With
        ``make_tangent`` two tiny extra segments are added at the ends so
        the path leaves and enters tangent to the circle.  The result is
        open even for a full circle; ``close()`` it for a true circle.
        """
        cfg = resolve(config)
        if resolution is None:
            resolution = cfg.resolution2d
        center = Vector2.parse(center)
        endangle = end_angle
        # no need to make multiple turns
        while endangle - start_angle >= 720.0:
            endangle -= 360.0
        while endangle - start_angle <= -720.0:
            endangle += 360.0

        points = []
        absangledif = abs(endangle - start_angle)
        if absangledif < 1e-5:
            points.append(Vector2.from_angle_degrees(start_angle).times(radius).plus(center))
        else:
            numsteps = int(math.floor(resolution * absangledif / 360.0)) + 1
            # step size for half a degree
            edgestepsize = min(numsteps * 0.5 / absangledif, 0.25)
            numsteps_mod = numsteps + 2 if make_tangent else numsteps
            for i in range(numsteps_mod + 1):
                step = float(i)
                if make_tangent:
                    step = (i - 1) * (numsteps - 2 * edgestepsize) / numsteps + edgestepsize
                    step = min(max(step, 0.0), float(numsteps))
                angle = start_angle + step * (endangle - start_angle) / numsteps
                points.append(Vector2.from_angle_degrees(angle).times(radius).plus(center))
        return cls(points, False, config)

    def concat(self, other: "Path2D") -> "Path2D":
        if self.closed or other.closed:
            raise PathError('paths must not be closed')
        return Path2D(self.points + other.points, False)

    def append_point(self, point) -> "Path2D":
        if self.closed:
            raise PathError('path must not be closed')
        return Path2D(self.points + (Vector2.parse(point),), False)

    def close(self) -> "Path2D":
        return Path2D(self.points, True)

    def expand_to_cag(self, path_radius: float, resolution=None):
        """area swept by a disc of ``path_radius`` moving along the path"""
        from polycsg.cag import CAG
        from polycsg.side import Side
        from polycsg.vertex import Vertex2

        if resolution is None:
            resolution = resolve().resolution2d
        points = list(self.points)
        if self.closed and len(points) > 2:
            points = [points[-1]] + points
        sides = []
        prev = None
        for point in points:
            vertex = Vertex2(point)
            if prev is not None:
                sides.append(Side(prev, vertex))
            prev = vertex
        return CAG(sides).expanded_shell(path_radius, resolution)

    def rectangular_extrude(self, width: float, height: float, resolution=None):
        """solid of the expanded path, ``width`` across and ``height`` tall"""
        cag = self.expand_to_cag(width / 2.0, resolution)
        return cag.extrude(Vector3(0.0, 0.0, height))

    def inner_cag(self):
        """area enclosed by a closed path"""
        from polycsg.cag import CAG

        if not self.closed:
            raise PathError('the path should be closed')
        return CAG.from_points(self.points)

    def transform(self, matrix) -> "Path2D":
        return Path2D([p.transform(matrix) for p in self.points], self.closed)


__all__ = ['Path2D']
