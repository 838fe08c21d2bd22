"""Directed 2D edges, the building blocks of a CAG."""

from __future__ import annotations

from polycsg.config import resolve
from polycsg.errors import FakeSolidError
from polycsg.polygon import Polygon
from polycsg.vector import Vector2
from polycsg.vertex import Vertex, Vertex2


class Side:
    """edge from ``vertex0`` to ``vertex1``; the area lies on its left"""

    __slots__ = ('vertex0', 'vertex1', 'tag')

    def __init__(self, vertex0: Vertex2, vertex1: Vertex2, tag=None, config=None):
        self.vertex0 = vertex0
        self.vertex1 = vertex1
        self.tag = resolve(config).next_tag() if tag is None else tag

    def __repr__(self):
        return 'Side({!r} -> {!r})'.format(self.vertex0.pos, self.vertex1.pos)

    def __str__(self):
        return '{} -> {}'.format(self.vertex0, self.vertex1)

    @classmethod
    def from_fake_polygon(cls, polygon: Polygon) -> "Side":
        """lower a wall quad made by ``to_polygon_3d(-1, 1)`` back to a side

        The quad must have four vertices, all at ``z = +-1``, exactly two
        of them on top and adjacent in the loop.  Which way round they
        are adjacent decides the direction of the side.
        """
        if len(polygon.vertices) != 4:
            raise FakeSolidError('wall polygon must have 4 vertices, got {}'.format(
                len(polygon.vertices)), {'polygon': polygon})
        toppoints = []
        topindices = []
        for i, vertex in enumerate(polygon.vertices):
            pos = vertex.pos
            if abs(abs(pos.z) - 1.0) >= 0.001:
                raise FakeSolidError('wall vertex not at z=+-1: {}'.format(pos),
                                     {'polygon': polygon})
            if pos.z > 0.0:
                toppoints.append(Vector2(pos.x, pos.y))
                topindices.append(i)
        if len(toppoints) != 2:
            raise FakeSolidError('wall polygon must have 2 top vertices, got {}'.format(
                len(toppoints)), {'polygon': polygon})
        d = topindices[1] - topindices[0]
        if d == 1:
            return cls(Vertex2(toppoints[1]), Vertex2(toppoints[0]))
        elif d == 3:
            return cls(Vertex2(toppoints[0]), Vertex2(toppoints[1]))
        raise FakeSolidError('wall polygon top vertices are not adjacent',
                             {'polygon': polygon, 'indices': topindices})

    def to_polygon_3d(self, z0: float, z1: float) -> Polygon:
        """vertical wall quad between heights ``z0`` and ``z1``"""
        vertices = [
            Vertex(self.vertex0.pos.to_vector3(z0)),
            Vertex(self.vertex1.pos.to_vector3(z0)),
            Vertex(self.vertex1.pos.to_vector3(z1)),
            Vertex(self.vertex0.pos.to_vector3(z1)),
        ]
        return Polygon(vertices)

    def transform(self, matrix) -> "Side":
        return Side(self.vertex0.transform(matrix), self.vertex1.transform(matrix))

    def flipped(self) -> "Side":
        return Side(self.vertex1, self.vertex0)

    def direction(self) -> Vector2:
        return self.vertex1.pos.minus(self.vertex0.pos)

    def length_squared(self) -> float:
        return self.direction().length_squared()

    def length(self) -> float:
        return self.direction().length()


__all__ = ['Side']
