import pytest

from polycsg.basis import OrthoNormalBasis
from polycsg.config import configured
from polycsg.errors import ConvexityError, DegenerateGeometryError
from polycsg.polygon import Polygon, SharedProperties
from polycsg.vector import Vector3
from polycsg.vertex import Vertex

## unit tests for polycsg polygon.py


def _square(size=1.0, z=0.0, shared=None):
    return Polygon.create_from_points([(0, 0, z), (size, 0, z),
                                       (size, size, z), (0, size, z)], shared)


def _volume(csg):
    total = 0.0
    for tri in csg.to_triangles():
        total += tri.v0.dot(tri.v1.cross(tri.v2))
    return total / 6.0


class TestPolygon:

    def test_too_few_vertices(self):
        with pytest.raises(DegenerateGeometryError):
            Polygon([Vertex((0, 0, 0)), Vertex((1, 0, 0))])

    def test_plane_from_vertices(self):
        poly = _square(z=2.0)
        assert poly.plane.normal == Vector3(0.0, 0.0, 1.0)
        assert poly.plane.w == 2.0
        assert poly.shared is SharedProperties.default()

    def test_convexity_check_in_debug(self):
        points = [(0, 0, 0), (2, 0, 0), (2, 2, 0), (1, 0.5, 0), (0, 2, 0)]
        # accepted silently unless debug is on
        Polygon.create_from_points(points)
        with configured(debug=True):
            with pytest.raises(ConvexityError):
                Polygon.create_from_points(points)
            Polygon.create_from_points([(0, 0, 0), (2, 0, 0), (2, 2, 0), (0, 2, 0)])

    def test_flipped(self):
        red = SharedProperties(color=(1, 0, 0))
        poly = _square(shared=red)
        f = poly.flipped()
        assert f.shared is red
        assert f.plane.normal == Vector3(0.0, 0.0, -1.0)
        assert [v.pos for v in f.vertices] == [v.pos for v in reversed(poly.vertices)]
        assert f.vertices_convex()

    def test_color(self):
        poly = _square().with_color(0.5, 0.5, 1.0)
        assert poly.shared.color == (0.5, 0.5, 1.0, 1.0)

    def test_mirrored_stays_convex(self):
        poly = _square().translate((1, 0, 0)).mirrored_x()
        n = poly.plane.normal
        assert abs(n.x) < 1e-9 and abs(n.y) < 1e-9
        assert n.z == pytest.approx(1.0)
        assert poly.vertices_convex()
        xs = sorted(v.pos.x for v in poly.vertices)
        assert xs[0] == pytest.approx(-2.0)
        assert xs[-1] == pytest.approx(-1.0)

    def test_bounds(self):
        lo, hi = _square(2.0, z=1.0).bounding_box()
        assert lo == Vector3(0.0, 0.0, 1.0)
        assert hi == Vector3(2.0, 2.0, 1.0)
        center, radius = _square(2.0).bounding_sphere()
        assert center == Vector3(1.0, 1.0, 0.0)
        assert radius == pytest.approx(2.0 ** 0.5)

    def test_extrude(self):
        solid = _square().extrude((0, 0, 1))
        assert len(solid.polygons) == 6
        assert _volume(solid) == pytest.approx(1.0)
        # every face points away from the center of the cube
        center = Vector3(0.5, 0.5, 0.5)
        for poly in solid.polygons:
            assert poly.plane.signed_distance_to_point(center) < 0

    def test_extrude_downwards(self):
        solid = _square().extrude((0, 0, -2))
        assert _volume(solid) == pytest.approx(2.0)

    def test_stl_string(self):
        text = _square().to_stl_string()
        assert text.count('facet normal') == 2
        assert text.count('vertex ') == 6
        assert text.startswith('facet normal ')
        assert text.endswith('endloop\nendfacet\n')

    def test_project_to_basis(self):
        basis = OrthoNormalBasis.z0_plane()
        cag = _square(2.0, z=5.0).project_to_orthonormal_basis(basis)
        assert cag.area() == pytest.approx(4.0)
        # clockwise when seen from +z, still positive after projection
        cag = _square(2.0).flipped().project_to_orthonormal_basis(basis)
        assert cag.area() == pytest.approx(4.0)

    def test_project_perpendicular(self):
        wall = Polygon.create_from_points([(0, 0, 0), (1, 0, 0), (1, 0, 1), (0, 0, 1)])
        cag = wall.project_to_orthonormal_basis(OrthoNormalBasis.z0_plane())
        assert len(cag.sides) == 0
