import math

import pytest

from polycsg.config import get_config
from polycsg.errors import DegenerateGeometryError
from polycsg.plane import Plane, SplitType
from polycsg.polygon import Polygon, SharedProperties
from polycsg.vector import Vector3
from polycsg.xform import Mirroring, Translation

## unit tests for polycsg plane.py


def _square(z, size=1.0):
    return Polygon.create_from_points([(-size, -size, z), (size, -size, z),
                                       (size, size, z), (-size, size, z)])


def _approx_vec(v, expected, tol=1e-9):
    return all(abs(a - b) < tol for a, b in zip(v, expected))


class TestPlane:

    def test_normalized(self):
        p = Plane((0, 0, 2), 4)
        assert p.normal == Vector3(0.0, 0.0, 1.0)
        assert p.w == 2.0

    def test_zero_normal(self):
        with pytest.raises(DegenerateGeometryError):
            Plane((0, 0, 0), 1.0)

    def test_from_points(self):
        p = Plane.from_points((0, 0, 1), (1, 0, 1), (0, 1, 1))
        assert p.normal == Vector3(0.0, 0.0, 1.0)
        assert p.w == 1.0
        with pytest.raises(DegenerateGeometryError):
            Plane.from_points((0, 0, 0), (1, 1, 1), (2, 2, 2))

    def test_any_plane_from_points(self):
        pts = [Vector3(0, 0, 0), Vector3(1, 1, 1), Vector3(2, 2, 2)]
        p = Plane.any_plane_from_points(*pts)
        assert p.normal.length() == pytest.approx(1.0)
        for pt in pts:
            assert p.signed_distance_to_point(pt) == pytest.approx(0.0, abs=1e-9)

    def test_flipped_and_distance(self):
        p = Plane((0, 0, 1), 1.0)
        f = p.flipped()
        assert f.normal == Vector3(0.0, 0.0, -1.0)
        assert f.w == -1.0
        assert p.signed_distance_to_point(Vector3(5, 5, 3)) == 2.0
        assert f.signed_distance_to_point(Vector3(5, 5, 3)) == -2.0
        assert p.mirror_point(Vector3(0, 0, 3)) == Vector3(0.0, 0.0, -1.0)

    def test_tags_are_identities(self):
        a = Plane((0, 0, 1), 0.0)
        b = Plane((0, 0, 1), 0.0)
        assert a.equals(b)
        assert a.tag != b.tag

    def test_transform(self):
        p = Plane((0, 0, 1), 0.0).transform(Translation((0, 0, 2)))
        assert _approx_vec(p.normal, (0, 0, 1))
        assert p.w == pytest.approx(2.0)

    def test_transform_mirror_keeps_front(self):
        p = Plane((0, 0, 1), 1.0)
        m = p.transform(Mirroring(Plane((0, 0, 1), 0.0)))
        assert _approx_vec(m.normal, (0, 0, -1))
        assert m.w == pytest.approx(1.0)
        # a point in front stays in front
        assert m.signed_distance_to_point(Vector3(0, 0, -3)) > 0

    def test_intersect_with_plane(self):
        line = Plane((0, 0, 1), 0.0).intersect_with_plane(Plane((1, 0, 0), 0.0))
        assert _approx_vec(line.direction, (0, 1, 0))
        assert line.distance_to_point(Vector3(0, 5, 0)) == pytest.approx(0.0, abs=1e-12)
        assert Plane((0, 0, 1), 0.0).intersect_with_plane(Plane((0, 0, 1), 3.0)) is None


class TestSplitLine:

    def test_crossing(self):
        p = Plane((0, 0, 1), 0.0)
        x = p.split_line_between_points(Vector3(0, 0, -1), Vector3(0, 0, 3))
        assert x == Vector3(0.0, 0.0, 0.0)

    def test_clamped(self):
        p = Plane((0, 0, 1), 0.0)
        x = p.split_line_between_points(Vector3(0, 0, 1), Vector3(0, 0, 2))
        assert x == Vector3(0.0, 0.0, 1.0)

    def test_parallel_edge_uses_start(self):
        p = Plane((0, 0, 1), 0.0)
        x = p.split_line_between_points(Vector3(0, 0, 1), Vector3(1, 0, 1))
        assert x == Vector3(0.0, 0.0, 1.0)

    def test_zero_length_edge(self):
        p = Plane((0, 0, 1), 0.0)
        x = p.split_line_between_points(Vector3(0, 0, 0), Vector3(0, 0, 0))
        assert not any(math.isnan(c) for c in x)
        assert x == Vector3(0.0, 0.0, 0.0)


class TestSplitPolygon:

    def test_front_and_back(self):
        p = Plane((0, 0, 1), 0.0)
        assert p.split_polygon(_square(1.0)).type is SplitType.FRONT
        assert p.split_polygon(_square(-1.0)).type is SplitType.BACK

    def test_within_epsilon_is_coplanar(self):
        p = Plane((0, 0, 1), 0.0)
        eps = get_config().epsilon
        assert p.split_polygon(_square(eps / 2)).type is SplitType.COPLANAR_FRONT
        assert p.split_polygon(_square(eps / 2).flipped()).type is SplitType.COPLANAR_BACK

    def test_same_plane_is_coplanar_front(self):
        square = _square(0.0)
        assert square.plane.split_polygon(square).type is SplitType.COPLANAR_FRONT

    def test_touching_vertex_is_front(self):
        # one vertex on the plane, the rest in front
        poly = Polygon.create_from_points([(0, 0, 0), (1, 0, 1), (0, 1, 1)])
        assert Plane((0, 0, 1), 0.0).split_polygon(poly).type is SplitType.FRONT

    def test_spanning(self):
        shared = SharedProperties(color=(1, 0, 0))
        wall = Polygon.create_from_points([(-1, 0, -1), (1, 0, -1), (1, 0, 1), (-1, 0, 1)],
                                          shared)
        p = Plane((1, 0, 0), 0.0)
        eps = get_config().epsilon
        result = p.split_polygon(wall)
        assert result.type is SplitType.SPANNING
        assert len(result.front.vertices) == 4
        assert len(result.back.vertices) == 4
        for v in result.front.vertices:
            assert p.normal.dot(v.pos) >= p.w - eps
        for v in result.back.vertices:
            assert p.normal.dot(v.pos) <= p.w + eps
        # pieces keep the parent plane and shared handle
        assert result.front.plane is wall.plane
        assert result.back.plane is wall.plane
        assert result.front.shared is shared
        assert result.back.shared is shared

    def test_spanning_through_vertex(self):
        tri = Polygon.create_from_points([(-1, 0, 0), (1, 0, 0), (0, 1, 0)])
        result = Plane((1, 0, 0), 0.0).split_polygon(tri)
        assert result.type is SplitType.SPANNING
        front = [v.pos for v in result.front.vertices]
        back = [v.pos for v in result.back.vertices]
        assert len(front) == 3
        assert len(back) == 3
        assert Vector3(1.0, 0.0, 0.0) in front
        assert Vector3(-1.0, 0.0, 0.0) in back

    def test_crossings_near_vertices_are_merged(self):
        # two vertices sit within epsilon of the plane, so the crossing
        # points land right next to them
        eps = get_config().epsilon
        diamond = Polygon.create_from_points([(-1, 0, 0), (eps / 2, -1, 0),
                                              (1, 0, 0), (eps / 2, 1, 0)])
        result = Plane((1, 0, 0), 0.0).split_polygon(diamond)
        assert result.type is SplitType.SPANNING
        assert len(result.front.vertices) == 3
        assert len(result.back.vertices) == 3
