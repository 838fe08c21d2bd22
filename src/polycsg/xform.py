## generalized matrix transformation operations for 3D homogeneous
## coordinates in polycsg

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

import math

from polycsg.vector import Vector2, Vector3, _isgoodnum

## a matrix is represented as four rows of four numbers.  Vectors are
## column vectors, so M.mul(v) computes Mv and the translation part of
## an affine transform lives in the last column.  Matrix.mul(N)
## computes MN, which applies N first and then M.

## Matrices are immutable: every operation returns a new Matrix.  The
## trans flag gives a transposed view of the same elements without
## copying them.


class Matrix:
    """4x4 transformation matrix class for transforming homogemenous 3D coordinates"""

    def __init__(self, a=False, trans=False):
        rows = [[1.0, 0.0, 0.0, 0.0],
                [0.0, 1.0, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0]]

        if isinstance(a, Matrix):
            for i in range(4):
                rows[i] = list(a.getrow(i))

        elif isinstance(a, (tuple, list)):
            if len(a) == 4 and all(isinstance(r, (tuple, list)) and len(r) == 4
                                   for r in a):
                for i in range(4):
                    for j in range(4):
                        x = a[i][j]
                        if _isgoodnum(x):
                            rows[i][j] = x
                        else:
                            raise ValueError('bad element in matrix initialization: {}'.format(x))
            elif len(a) == 16:
                for i in range(4):
                    for j in range(4):
                        x = a[i*4+j]
                        if _isgoodnum(x):
                            rows[i][j] = x
                        else:
                            raise ValueError('bad element in matrix initialization: {}'.format(x))
            else:
                raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
        elif a is not False and a is not None:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))

        self.m = tuple(tuple(r) for r in rows)
        self.trans = trans

    def __repr__(self):
        return "Matrix({},{},{},{},{})".format(self.m[0], self.m[1],
                                               self.m[2], self.m[3], self.trans)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return all(self.getrow(i) == other.getrow(i) for i in range(4))

    def __hash__(self):
        return hash(tuple(self.getrow(i) for i in range(4)))

    #return value indexed by i,j
    def get(self, i, j):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to get: {},{}'.format(i, j))
        if self.trans:
            return self.m[j][i]
        else:
            return self.m[i][j]

    def getrow(self, i):
        if i < 0 or i > 3:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        if self.trans:
            return (self.m[0][i], self.m[1][i], self.m[2][i], self.m[3][i])
        else:
            return self.m[i]

    def getcol(self, j):
        if j < 0 or j > 3:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        if not self.trans:
            return (self.m[0][j], self.m[1][j], self.m[2][j], self.m[3][j])
        else:
            return self.m[j]

    def transposed(self):
        return Matrix(self, True)

    # matrix multiply.  If x is a matrix, compute MX.  If x is a
    # vector, compute Mx with homogeneous divide. If x is a scalar,
    # compute xM.  Respects transpose flag.

    def mul(self, x):
        if isinstance(x, Matrix):
            rows = []
            for i in range(4):
                r = self.getrow(i)
                rows.append([_dot4(r, x.getcol(j)) for j in range(4)])
            return Matrix(rows)
        elif isinstance(x, Vector3):
            return self.right_multiply_vector3(x)
        elif isinstance(x, Vector2):
            return self.right_multiply_vector2(x)
        elif _isgoodnum(x):
            return Matrix([[e * x for e in self.getrow(i)] for i in range(4)])

        raise ValueError('bad thing passed to mul(): {}'.format(x))

    def right_multiply_vector3(self, v):
        """compute Mv for a 3D point, taking w as 1"""
        h = (v.x, v.y, v.z, 1.0)
        x = _dot4(self.getrow(0), h)
        y = _dot4(self.getrow(1), h)
        z = _dot4(self.getrow(2), h)
        w = _dot4(self.getrow(3), h)
        if w != 1.0:
            inv = 1.0 / w
            x *= inv
            y *= inv
            z *= inv
        return Vector3(x, y, z)

    def left_multiply_vector3(self, v):
        """compute vM for a 3D point taken as a row vector, w as 1"""
        h = (v.x, v.y, v.z, 1.0)
        x = _dot4(h, self.getcol(0))
        y = _dot4(h, self.getcol(1))
        z = _dot4(h, self.getcol(2))
        w = _dot4(h, self.getcol(3))
        if w != 1.0:
            inv = 1.0 / w
            x *= inv
            y *= inv
            z *= inv
        return Vector3(x, y, z)

    def right_multiply_vector2(self, v):
        """compute Mv for a 2D point in the z=0 plane"""
        p = self.right_multiply_vector3(Vector3(v.x, v.y, 0.0))
        return Vector2(p.x, p.y)

    def left_multiply_vector2(self, v):
        p = self.left_multiply_vector3(Vector3(v.x, v.y, 0.0))
        return Vector2(p.x, p.y)

    def is_mirroring(self):
        """does this transform flip handedness?

        For a right-handed base u x v == w; if the triple product of
        the linear part is negative the transform mirrors.
        """
        u = Vector3(*self.getrow(0)[:3])
        v = Vector3(*self.getrow(1)[:3])
        w = Vector3(*self.getrow(2)[:3])
        return u.cross(v).dot(w) < 0.0


def _dot4(a, b):
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2] + a[3]*b[3]


def Identity():
    return Matrix()


# return the generalized 4x4 arbitrary axis rotation matrix
def Rotation(axis, angle, inverse=False):
    u = Vector3.parse(axis)
    m = u.length()
    if m < 1e-12:
        raise ValueError('zero-length rotation axis not allowed')
    u = u.divided_by(m)

    if inverse:
        angle *= -1.0
    rad = math.radians(angle % 360.0)

    ux = u.x
    uy = u.y
    uz = u.z

    cang = math.cos(rad)
    cmin = 1.0-cang
    sang = math.sin(rad)

    # see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux*ux*cmin, ux*uy*cmin-uz*sang, ux*uz*cmin+uy*sang, 0],
         [uy*ux*cmin+uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang, 0],
         [uz*ux*cmin-uy*sang, uz*uy*cmin+ux*sang, cang+uz*uz*cmin, 0],
         [0, 0, 0, 1]]

    return Matrix(R)


def RotationX(angle, inverse=False):
    return Rotation(Vector3(1.0, 0.0, 0.0), angle, inverse)


def RotationY(angle, inverse=False):
    return Rotation(Vector3(0.0, 1.0, 0.0), angle, inverse)


def RotationZ(angle, inverse=False):
    return Rotation(Vector3(0.0, 0.0, 1.0), angle, inverse)


def RotationAbout(center, axis, angle):
    """rotation by ``angle`` degrees around the line through ``center``"""
    c = Vector3.parse(center)
    return Translation(c).mul(Rotation(axis, angle)).mul(Translation(c, inverse=True))


def Translation(delta, inverse=False):
    d = Vector3.parse(delta)
    if inverse:
        d = d.negated()
    T = [[1, 0, 0, d.x],
         [0, 1, 0, d.y],
         [0, 0, 1, d.z],
         [0, 0, 0, 1]]
    return Matrix(T)


def Scale(x, y=False, z=False, inverse=False):
    sx = sy = sz = 1.0
    if _isgoodnum(x):
        sx = x
        if _isgoodnum(y) and _isgoodnum(z):
            sy = y
            sz = z
        else:
            sy = sz = x
    elif isinstance(x, (Vector2, Vector3, tuple, list)):
        v = Vector3.parse(x)
        if isinstance(x, Vector2) or len(x) == 2:
            v = Vector3(v.x, v.y, 1.0)
        sx, sy, sz = v
    else:
        raise ValueError('bad scaling values passed to Scale')

    if inverse:
        sx = 1.0/sx
        sy = 1.0/sy
        sz = 1.0/sz

    S = [[sx, 0, 0, 0],
         [0, sy, 0, 0],
         [0, 0, sz, 0],
         [0, 0, 0, 1.0]]
    return Matrix(S)


def Mirroring(plane):
    """reflection through an oriented plane"""
    n = plane.normal
    w = plane.w
    M = [[1.0 - 2.0*n.x*n.x, -2.0*n.x*n.y, -2.0*n.x*n.z, 2.0*n.x*w],
         [-2.0*n.y*n.x, 1.0 - 2.0*n.y*n.y, -2.0*n.y*n.z, 2.0*n.y*w],
         [-2.0*n.z*n.x, -2.0*n.z*n.y, 1.0 - 2.0*n.z*n.z, 2.0*n.z*w],
         [0, 0, 0, 1]]
    return Matrix(M)


__all__ = [
    'Identity',
    'Matrix',
    'Mirroring',
    'Rotation',
    'RotationAbout',
    'RotationX',
    'RotationY',
    'RotationZ',
    'Scale',
    'Translation',
]
