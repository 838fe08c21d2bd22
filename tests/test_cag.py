import random

import pytest

from polycsg.cag import CAG
from polycsg.config import configured
from polycsg.errors import (DegenerateGeometryError, GeometryError, OpenOutlineError,
                            SelfIntersectionError)
from polycsg.vector import Vector2

## unit tests for polycsg cag.py


def _volume(csg):
    total = 0.0
    for tri in csg.to_triangles():
        total += tri.v0.dot(tri.v1.cross(tri.v2))
    return total / 6.0


SQUARE = [(-2, -2), (2, -2), (2, 2), (-2, 2)]


class TestConstruction:

    def test_from_points(self):
        cag = CAG.from_points(SQUARE)
        assert cag.is_canonical
        assert len(cag.sides) == 4
        assert cag.area() == pytest.approx(16.0)

    def test_clockwise_input_is_flipped(self):
        cag = CAG.from_points(list(reversed(SQUARE)))
        assert cag.area() == pytest.approx(16.0)

    def test_concave(self):
        cag = CAG.from_points([(0, 0), (4, 0), (4, 4), (2, 1), (0, 4)])
        assert cag.area() == pytest.approx(16.0 - 6.0)

    def test_bad_input(self):
        with pytest.raises(DegenerateGeometryError):
            CAG.from_points([(0, 0), (1, 0)])
        with pytest.raises(DegenerateGeometryError):
            CAG.from_points([(0, 0), (1, 0), (0.5, 1e-5)])
        with pytest.raises(GeometryError):
            CAG.from_points([(0, 0), (1, 0), (2, 0)])
        with pytest.raises(SelfIntersectionError):
            CAG.from_points([(0, 0), (2, 2), (2, 0), (0, 2)])

    def test_circle(self):
        assert CAG.circle(radius=1, resolution=4).area() == pytest.approx(2.0)
        with configured(resolution2d=6):
            assert len(CAG.circle().sides) == 6
        cag = CAG.circle(center=(5, 5), radius=2, resolution=64)
        lo, hi = cag.get_bounds()
        assert lo.x == pytest.approx(3.0)
        assert hi.x == pytest.approx(7.0)

    def test_circle_closes(self):
        cag = CAG.circle(resolution=8)
        assert cag.sides[-1].vertex1 is cag.sides[0].vertex0

    def test_rectangle(self):
        cag = CAG.rectangle(center=(1, 1), radius=(2, 1))
        assert cag.area() == pytest.approx(8.0)
        lo, hi = cag.get_bounds()
        assert lo == Vector2(-1.0, 0.0)
        assert hi == Vector2(3.0, 2.0)

    def test_empty(self):
        cag = CAG()
        assert cag.area() == 0.0
        assert cag.get_bounds() == (Vector2(0, 0), Vector2(0, 0))
        assert cag.get_outline_paths() == []


class TestLinesIntersect:

    def _check(self, a, b, c, d):
        return CAG.lines_intersect(Vector2(*a), Vector2(*b), Vector2(*c), Vector2(*d))

    def test_crossing(self):
        assert self._check((0, 0), (2, 2), (0, 2), (2, 0))

    def test_touching(self):
        # T junction
        assert not self._check((0, 0), (2, 0), (1, 0), (1, 1))
        # corner
        assert not self._check((0, 0), (1, 0), (1, 0), (1, 1))

    def test_parallel(self):
        assert not self._check((0, 0), (1, 0), (0, 1), (1, 1))
        assert not self._check((0, 0), (1, 0), (2, 0), (3, 0))

    def test_fold_back(self):
        assert self._check((0, 0), (2, 0), (2, 0), (1, 0))
        assert self._check((0, 0), (2, 0), (0, 0), (1, 0))

    def test_zero_length(self):
        assert not self._check((0, 0), (1, 0), (1, 0), (1, 0))


class TestQueries:

    def test_self_intersection(self):
        bowtie = CAG.from_points_no_check([(0, 0), (2, 2), (2, 0), (0, 2)])
        assert bowtie.is_self_intersecting()
        assert not CAG.from_points(SQUARE).is_self_intersecting()

    def test_check(self):
        result = CAG.from_points(SQUARE).check()
        assert result
        assert result.warnings == []
        bowtie = CAG.from_points_no_check([(0, 0), (2, 2), (2, 0), (0, 2)])
        result = bowtie.check()
        assert not result
        assert 'self intersects' in result.warnings

    def test_flipped(self):
        cag = CAG.from_points(SQUARE)
        assert cag.flipped().area() == pytest.approx(-16.0)

    def test_transform(self):
        cag = CAG.from_points(SQUARE).translate((10, 0, 0))
        lo, hi = cag.get_bounds()
        assert lo == Vector2(8.0, -2.0)
        # mirroring keeps the area positive
        assert cag.mirrored_x().area() == pytest.approx(16.0)
        assert cag.scale((2, 1, 1)).area() == pytest.approx(32.0)

    def test_center(self):
        cag = CAG.rectangle(center=(5, 7), radius=(1, 2)).center()
        lo, hi = cag.get_bounds()
        assert lo == Vector2(-1.0, -2.0)
        assert hi == Vector2(1.0, 2.0)


class TestOutline:

    def test_single_loop(self):
        sides = list(CAG.circle(resolution=6).sides)
        random.Random(3).shuffle(sides)
        paths = CAG(sides).get_outline_paths()
        assert len(paths) == 1
        assert paths[0].closed
        assert len(paths[0]) == 6

    def test_loop_order(self):
        paths = CAG.from_points(SQUARE).get_outline_paths()
        points = paths[0].points
        start = points.index(Vector2(-2.0, -2.0))
        assert points[(start + 1) % 4] == Vector2(2.0, -2.0)

    def test_open_outline(self):
        sides = CAG.from_points(SQUARE).sides[:-1]
        with pytest.raises(OpenOutlineError):
            CAG(sides).get_outline_paths()

    def test_touching_corner(self):
        a = CAG.rectangle(center=(0, 0), radius=(1, 1))
        b = CAG.rectangle(center=(2, 2), radius=(1, 1))
        paths = CAG(a.sides + b.sides).get_outline_paths()
        assert sum(len(p) for p in paths) == 8
        for path in paths:
            assert path.closed

    def test_touching_corner_takes_sharpest_right_turn(self):
        a = CAG.from_points_no_check([(-1, -1), (1, -1), (1, 1), (-1, 1)])
        b = CAG.from_points_no_check([(1, 1), (3, 1), (3, 3), (1, 3)])
        paths = CAG(a.sides + b.sides).get_outline_paths()
        # the walk starts at (-1, 1) and crosses into b at the shared corner
        assert len(paths) == 1
        points = paths[0].points
        assert len(points) == 8
        corner = points.index(Vector2(1.0, 1.0))
        assert points[corner - 1] == Vector2(1.0, -1.0)
        assert points[corner + 1] == Vector2(3.0, 1.0)

    def test_hole(self):
        outer = CAG.rectangle(radius=(3, 3))
        inner = CAG.rectangle(radius=(1, 1))
        result = outer.subtract(inner)
        assert result.area() == pytest.approx(32.0)
        paths = result.get_outline_paths()
        assert len(paths) == 2


class TestBooleans:

    def test_union(self):
        a = CAG.rectangle(center=(0, 0), radius=(1, 1))
        b = CAG.rectangle(center=(1, 0), radius=(1, 1))
        result = a.union(b)
        assert result.is_canonical
        assert result.area() == pytest.approx(6.0)
        lo, hi = result.get_bounds()
        assert lo == Vector2(-1.0, -1.0)
        assert hi == Vector2(2.0, 1.0)

    def test_intersect(self):
        a = CAG.rectangle(center=(0, 0), radius=(1, 1))
        b = CAG.rectangle(center=(1, 0), radius=(1, 1))
        assert a.intersect(b).area() == pytest.approx(2.0)

    def test_subtract(self):
        a = CAG.rectangle(center=(0, 0), radius=(1, 1))
        b = CAG.rectangle(center=(1, 0), radius=(1, 1))
        result = a.subtract(b)
        assert result.area() == pytest.approx(2.0)
        lo, hi = result.get_bounds()
        assert hi.x == pytest.approx(0.0)

    def test_list_of_operands(self):
        a = CAG.rectangle(radius=(3, 1))
        holes = [CAG.rectangle(center=(-2, 0), radius=(0.5, 0.5)),
                 CAG.rectangle(center=(2, 0), radius=(0.5, 0.5))]
        assert a.subtract(holes).area() == pytest.approx(12.0 - 2.0)

    def test_disjoint_union(self):
        a = CAG.rectangle(center=(0, 0), radius=(1, 1))
        b = CAG.rectangle(center=(5, 0), radius=(1, 1))
        assert a.union(b).area() == pytest.approx(8.0)

    def test_result_is_valid(self):
        a = CAG.circle(radius=2, resolution=16)
        b = CAG.rectangle(center=(2, 0), radius=(1, 1))
        result = a.union(b)
        assert not result.is_self_intersecting()
        assert len(result.get_outline_paths()) == 1


class TestFakeSolid:

    def test_round_trip(self):
        cag = CAG.from_points(SQUARE)
        back = CAG.from_fake_csg(cag.to_csg(-1.0, 1.0))
        assert back.area() == pytest.approx(16.0)
        assert len(back.sides) == 4

    def test_walls(self):
        csg = CAG.from_points(SQUARE).to_csg(0.0, 3.0)
        assert len(csg.polygons) == 4
        for polygon in csg.polygons:
            assert abs(polygon.plane.normal.z) < 1e-12


class TestExtrude:

    def test_straight(self):
        solid = CAG.rectangle(radius=(1, 1)).extrude((0, 0, 2))
        assert _volume(solid) == pytest.approx(8.0)
        lo, hi = solid.get_bounds()
        assert lo.z == pytest.approx(0.0)
        assert hi.z == pytest.approx(2.0)

    def test_downwards(self):
        solid = CAG.rectangle(radius=(1, 1)).extrude((0, 0, -1))
        assert _volume(solid) == pytest.approx(4.0)

    def test_twisted(self):
        solid = CAG.rectangle(radius=(1, 1)).extrude((0, 0, 2), twist_angle=90, twist_steps=4)
        lo, hi = solid.get_bounds()
        assert hi.z == pytest.approx(2.0)
        assert _volume(solid) > 0.0

    def test_empty(self):
        assert len(CAG().extrude().polygons) == 0
