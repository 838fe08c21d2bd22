## immutable 2D and 3D coordinate vectors for polycsg

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

"""vectors for **polycsg**

``Vector2`` and ``Vector3`` are named tuples of floats.  Being tuples
they are immutable, hashable and iterable, and compare exactly,
component by component, with no tolerance.  Code that needs a
tolerance says so explicitly (see ``distance_to`` and the ``epsilon``
of ``polycsg.config``).

The arithmetic operators are vector operations, not tuple
operations: ::

    a = Vector3(1, 2, 3)
    b = a + Vector3(1, 0, 0)   # Vector3(2, 2, 3)
    c = 2.0 * b                # Vector3(4, 4, 6)

Angles are in degrees unless the function name says radians, and are
right-handed: positive angles sweep counter-clockwise.
"""

from __future__ import annotations

import math
from typing import NamedTuple


def _isgoodnum(n):
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def solve_2_linear(a, b, c, d, u, v):
    """solve the 2x2 system ``[[a, b], [c, d]] * [x, y] = [u, v]``

    The caller is responsible for making sure the system is not
    singular.
    """
    det = a * d - b * c
    x = u * d - b * v
    y = a * v - u * c
    return (x / det, y / det)


class Vector2(NamedTuple):
    x: float
    y: float

    @classmethod
    def parse(cls, value) -> "Vector2":
        """make a Vector2 out of just about any plausible argument"""
        if isinstance(value, Vector2):
            return value
        if _isgoodnum(value):
            return cls(float(value), float(value))
        if isinstance(value, (tuple, list)) and len(value) >= 2:
            return cls(float(value[0]), float(value[1]))
        raise ValueError('bad thing passed to Vector2.parse: {}'.format(value))

    @classmethod
    def from_angle_radians(cls, radians: float) -> "Vector2":
        return cls(math.cos(radians), math.sin(radians))

    @classmethod
    def from_angle_degrees(cls, degrees: float) -> "Vector2":
        return cls.from_angle_radians(math.radians(degrees))

    def __repr__(self):
        return 'Vector2({}, {})'.format(self.x, self.y)

    def __str__(self):
        return '({:.2f}, {:.2f})'.format(self.x, self.y)

    def __add__(self, a):
        return self.plus(a)

    def __sub__(self, a):
        return self.minus(a)

    def __mul__(self, a):
        return self.times(a)

    __rmul__ = __mul__

    def __truediv__(self, a):
        return self.divided_by(a)

    def __neg__(self):
        return self.negated()

    def plus(self, a: "Vector2") -> "Vector2":
        return Vector2(self.x + a.x, self.y + a.y)

    def minus(self, a: "Vector2") -> "Vector2":
        return Vector2(self.x - a.x, self.y - a.y)

    def times(self, a: float) -> "Vector2":
        return Vector2(self.x * a, self.y * a)

    def divided_by(self, a: float) -> "Vector2":
        return Vector2(self.x / a, self.y / a)

    def negated(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def abs(self) -> "Vector2":
        return Vector2(abs(self.x), abs(self.y))

    def dot(self, a: "Vector2") -> float:
        return self.x * a.x + self.y * a.y

    def cross(self, a: "Vector2") -> float:
        """z component of the 3D cross product"""
        return self.x * a.y - self.y * a.x

    def lerp(self, a: "Vector2", t: float) -> "Vector2":
        return self.plus(a.minus(self).times(t))

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def distance_to(self, a: "Vector2") -> float:
        return self.minus(a).length()

    def distance_to_squared(self, a: "Vector2") -> float:
        return self.minus(a).length_squared()

    def unit(self) -> "Vector2":
        return self.divided_by(self.length())

    def normal(self) -> "Vector2":
        """the vector rotated 90 degrees clockwise"""
        return Vector2(self.y, -self.x)

    def equals(self, a: "Vector2") -> bool:
        return self.x == a.x and self.y == a.y

    def min(self, a: "Vector2") -> "Vector2":
        return Vector2(min(self.x, a.x), min(self.y, a.y))

    def max(self, a: "Vector2") -> "Vector2":
        return Vector2(max(self.x, a.x), max(self.y, a.y))

    def angle_radians(self) -> float:
        return math.atan2(self.y, self.x)

    def angle_degrees(self) -> float:
        return math.degrees(self.angle_radians())

    def to_vector3(self, z: float = 0.0) -> "Vector3":
        return Vector3(self.x, self.y, z)

    def transform(self, matrix) -> "Vector2":
        return matrix.right_multiply_vector2(self)


class Vector3(NamedTuple):
    x: float
    y: float
    z: float

    @classmethod
    def parse(cls, value) -> "Vector3":
        """make a Vector3 out of just about any plausible argument

        Scalars fill every component, 2D values get ``z = 0``.
        """
        if isinstance(value, Vector3):
            return value
        if _isgoodnum(value):
            return cls(float(value), float(value), float(value))
        if isinstance(value, (tuple, list)):
            if len(value) == 2:
                return cls(float(value[0]), float(value[1]), 0.0)
            if len(value) >= 3:
                return cls(float(value[0]), float(value[1]), float(value[2]))
        raise ValueError('bad thing passed to Vector3.parse: {}'.format(value))

    def __repr__(self):
        return 'Vector3({}, {}, {})'.format(self.x, self.y, self.z)

    def __str__(self):
        return '({:.2f}, {:.2f}, {:.2f})'.format(self.x, self.y, self.z)

    def __add__(self, a):
        return self.plus(a)

    def __sub__(self, a):
        return self.minus(a)

    def __mul__(self, a):
        return self.times(a)

    __rmul__ = __mul__

    def __truediv__(self, a):
        return self.divided_by(a)

    def __neg__(self):
        return self.negated()

    def plus(self, a: "Vector3") -> "Vector3":
        return Vector3(self.x + a.x, self.y + a.y, self.z + a.z)

    def minus(self, a: "Vector3") -> "Vector3":
        return Vector3(self.x - a.x, self.y - a.y, self.z - a.z)

    def times(self, a: float) -> "Vector3":
        return Vector3(self.x * a, self.y * a, self.z * a)

    def divided_by(self, a: float) -> "Vector3":
        return Vector3(self.x / a, self.y / a, self.z / a)

    def negated(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def abs(self) -> "Vector3":
        return Vector3(abs(self.x), abs(self.y), abs(self.z))

    def dot(self, a: "Vector3") -> float:
        return self.x * a.x + self.y * a.y + self.z * a.z

    def cross(self, a: "Vector3") -> "Vector3":
        return Vector3(self.y * a.z - self.z * a.y,
                       self.z * a.x - self.x * a.z,
                       self.x * a.y - self.y * a.x)

    def lerp(self, a: "Vector3", t: float) -> "Vector3":
        return self.plus(a.minus(self).times(t))

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def distance_to(self, a: "Vector3") -> float:
        return self.minus(a).length()

    def distance_to_squared(self, a: "Vector3") -> float:
        return self.minus(a).length_squared()

    def unit(self) -> "Vector3":
        return self.divided_by(self.length())

    def equals(self, a: "Vector3") -> bool:
        return self.x == a.x and self.y == a.y and self.z == a.z

    def min(self, a: "Vector3") -> "Vector3":
        return Vector3(min(self.x, a.x), min(self.y, a.y), min(self.z, a.z))

    def max(self, a: "Vector3") -> "Vector3":
        return Vector3(max(self.x, a.x), max(self.y, a.y), max(self.z, a.z))

    def random_non_parallel_vector(self) -> "Vector3":
        """the axis vector along this vector's smallest component

        It is never parallel to a non-zero vector, which makes it a
        safe "right" vector for building a frame around this one.
        """
        a = self.abs()
        if a.x <= a.y and a.x <= a.z:
            return Vector3(1.0, 0.0, 0.0)
        elif a.y <= a.x and a.y <= a.z:
            return Vector3(0.0, 1.0, 0.0)
        else:
            return Vector3(0.0, 0.0, 1.0)

    def to_vector2(self) -> Vector2:
        return Vector2(self.x, self.y)

    def transform(self, matrix) -> "Vector3":
        return matrix.right_multiply_vector3(self)

    def stl_string(self) -> str:
        return '{!r} {!r} {!r}'.format(float(self.x), float(self.y), float(self.z))

    def amf_string(self) -> str:
        return '<x>{!r}</x><y>{!r}</y><z>{!r}</z>'.format(
            float(self.x), float(self.y), float(self.z))


__all__ = ['Vector2', 'Vector3', 'solve_2_linear']
