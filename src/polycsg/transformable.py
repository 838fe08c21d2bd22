"""Convenience transforms shared by every object with a ``transform()``."""

from polycsg.plane import Plane
from polycsg.vector import Vector3
from polycsg.xform import (Mirroring, RotationAbout, RotationX, RotationY,
                           RotationZ, Scale, Translation)


class Transformable:
    """mixin deriving translate/scale/rotate/mirror from ``transform(matrix)``

    Subclasses implement ``transform`` and return a new object; none of
    these methods modify ``self``.
    """

    def transform(self, matrix):
        raise NotImplementedError

    def translate(self, offset):
        return self.transform(Translation(offset))

    def scale(self, factor):
        return self.transform(Scale(factor))

    def rotate_x(self, degrees):
        return self.transform(RotationX(degrees))

    def rotate_y(self, degrees):
        return self.transform(RotationY(degrees))

    def rotate_z(self, degrees):
        return self.transform(RotationZ(degrees))

    def rotate(self, center, axis, degrees):
        return self.transform(RotationAbout(center, axis, degrees))

    def mirrored(self, plane):
        return self.transform(Mirroring(plane))

    def mirrored_x(self):
        return self.mirrored(_axis_plane(Vector3(1.0, 0.0, 0.0)))

    def mirrored_y(self):
        return self.mirrored(_axis_plane(Vector3(0.0, 1.0, 0.0)))

    def mirrored_z(self):
        return self.mirrored(_axis_plane(Vector3(0.0, 0.0, 1.0)))


def _axis_plane(normal):
    return Plane(normal, 0.0)


__all__ = ['Transformable']
