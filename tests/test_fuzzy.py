import pytest

from polycsg.cag import CAG
from polycsg.csg import CSG
from polycsg.fuzzy import *
from polycsg.polygon import Polygon, SharedProperties
from polycsg.side import Side
from polycsg.vertex import Vertex2

## unit tests for polycsg fuzzy.py


class TestFuzzyFactory:

    def test_lookup_within_tolerance(self):
        factory = FuzzyFactory(1e-5)
        first = factory.lookup_or_create((0.1, 0.2), lambda els: object())
        assert factory.lookup_or_create((0.1 + 4e-6, 0.2), lambda els: object()) is first
        assert factory.lookup_or_create((0.1, 0.2 - 4e-6), lambda els: object()) is first
        assert factory.lookup_or_create((0.1 + 3e-5, 0.2), lambda els: object()) is not first

    def test_registers_neighbouring_cells(self):
        factory = FuzzyFactory(1e-5)
        factory.lookup_or_create((0.5, 0.5, 0.5), lambda els: els)
        assert len(factory) == 8


class TestFuzzyCAGFactory:

    def test_short_side_dropped(self):
        side = Side(Vertex2((0, 0)), Vertex2((1e-6, 0)))
        assert FuzzyCAGFactory().get_side(side) is None

    def test_unchanged_side_reused(self):
        side = Side(Vertex2((0, 0)), Vertex2((1, 0)))
        assert FuzzyCAGFactory().get_side(side) is side

    def test_vertices_merged(self):
        a = Side(Vertex2((0, 0)), Vertex2((1, 0)))
        b = Side(Vertex2((1 + 1e-7, 0)), Vertex2((1, 1)))
        cag = CAG([a, b]).canonicalized()
        assert cag.is_canonical
        assert cag.sides[0].vertex1 is cag.sides[1].vertex0

    def test_antiparallel_sides_cancel(self):
        square = CAG.from_points([(0, 0), (1, 0), (1, 1), (0, 1)])
        extra = Side(Vertex2((5, 5)), Vertex2((6, 5)))
        cag = CAG(square.sides + (extra, extra.flipped())).canonicalized()
        assert len(cag.sides) == 4
        assert cag.area() == pytest.approx(1.0)

    def test_canonical_is_kept(self):
        cag = CAG.from_points([(0, 0), (1, 0), (1, 1)])
        assert cag.canonicalized() is cag


class TestFuzzyCSGFactory:

    def test_vertices_and_planes_merged(self):
        red = SharedProperties(color=(1, 0, 0))
        p1 = Polygon.create_from_points([(0, 0, 0), (1, 0, 0), (1, 1, 0)], red)
        p2 = Polygon.create_from_points([(0, 0, 1e-7), (1, 1, 0), (0, 1, 0)], red)
        csg = CSG([p1, p2]).canonicalized()
        q1, q2 = csg.polygons
        assert q1.vertices[0] is q2.vertices[0]
        assert q1.vertices[2] is q2.vertices[1]
        assert q1.plane is q2.plane
        assert q1.shared is red
        assert q2.shared is red
        assert csg.canonicalized() is csg

    def test_collapsed_polygon_dropped(self):
        sliver = Polygon.create_from_points([(0, 0, 0), (1, 0, 0), (1 + 1e-7, 1e-7, 0),
                                             (1, 1e-7, 0)])
        good = Polygon.create_from_points([(0, 0, 0), (1, 0, 0), (0, 1, 0)])
        csg = CSG([sliver, good]).canonicalized()
        assert len(csg.polygons) == 1
