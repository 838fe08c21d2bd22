"""Vertices: a position plus a process-unique identity tag."""

from __future__ import annotations

from polycsg.config import resolve
from polycsg.vector import Vector2, Vector3


class Vertex:
    """a 3D polygon vertex

    ``tag`` is an allocation-order identity assigned at construction;
    two vertices at the same position have different tags unless they
    are the same object.
    """

    __slots__ = ('pos', 'tag')

    def __init__(self, pos, tag=None, config=None):
        self.pos = Vector3.parse(pos)
        self.tag = resolve(config).next_tag() if tag is None else tag

    def __repr__(self):
        return 'Vertex({!r})'.format(self.pos)

    def __str__(self):
        return str(self.pos)

    def flipped(self) -> "Vertex":
        return self

    def interpolate(self, other: "Vertex", fraction: float) -> "Vertex":
        return Vertex(self.pos.lerp(other.pos, fraction))

    def transform(self, matrix) -> "Vertex":
        return Vertex(self.pos.transform(matrix))

    def to_stl_string(self) -> str:
        return 'vertex {}\n'.format(self.pos.stl_string())

    def to_amf_string(self) -> str:
        return '<vertex><coordinates>{}</coordinates></vertex>'.format(
            self.pos.amf_string())


class Vertex2:
    """a 2D area vertex"""

    __slots__ = ('pos', 'tag')

    def __init__(self, pos, tag=None, config=None):
        self.pos = Vector2.parse(pos)
        self.tag = resolve(config).next_tag() if tag is None else tag

    def __repr__(self):
        return 'Vertex2({!r})'.format(self.pos)

    def __str__(self):
        return str(self.pos)

    def transform(self, matrix) -> "Vertex2":
        return Vertex2(self.pos.transform(matrix))


__all__ = ['Vertex', 'Vertex2']
