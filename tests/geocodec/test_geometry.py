"""Tests for the geometry model — points, rings, composites, routes."""

import pytest

from geocodec.geometry import (
    Collection,
    Feature,
    GeometryKind,
    LinearRing,
    LineString,
    MeasuredPoint,
    MultiLineString,
    MultiPoint,
    Point,
    Polygon,
    Route,
)


@pytest.mark.unit
class TestPoint:
    """Point and MeasuredPoint value semantics."""

    def test_exact_equality(self):
        """Points compare by exact coordinates."""
        assert Point(1.0, 2.0) == Point(1.0, 2.0)
        assert Point(1.0, 2.0) != Point(1.0, 2.0000001)

    def test_point_is_hashable(self):
        """Frozen points can be used as set members."""
        assert len({Point(0, 0), Point(0, 0), Point(1, 0)}) == 2

    def test_point_is_immutable(self):
        """Assigning a coordinate raises."""
        p = Point(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 5.0

    def test_measured_point_not_equal_to_point(self):
        """Dataclass equality is kind-aware."""
        assert MeasuredPoint(1.0, 2.0, 0.0) != Point(1.0, 2.0)

    def test_equals_ignores_measure(self):
        """equals() compares coordinates only."""
        assert MeasuredPoint(1.0, 2.0, 5.0).equals(MeasuredPoint(1.0, 2.0, 9.0))
        assert MeasuredPoint(1.0, 2.0, 5.0).equals(Point(1.0, 2.0))

    def test_point_to_json(self):
        """Point JSON has x and y only."""
        assert Point(3.0, 4.0).to_json() == {"x": 3.0, "y": 4.0}

    def test_measured_point_json(self):
        """MeasuredPoint JSON adds the measure."""
        mp = MeasuredPoint.from_json({"x": 4020.0045, "y": -4377.0271, "measure": 37.33})
        assert mp.measure == pytest.approx(37.33)
        assert mp.to_json() == {"x": 4020.0045, "y": -4377.0271, "measure": 37.33}

    def test_point_kind(self):
        """Points carry the POINT kind and have no components."""
        assert Point(0, 0).kind is GeometryKind.POINT
        assert Point(0, 0).components == []


@pytest.mark.unit
class TestComposites:
    """Lines, rings, polygons and collections."""

    def test_linestring_from_coords(self):
        """from_coords builds Points in order."""
        line = LineString.from_coords([(0, 0), (1, 1), (2, 0)])
        assert line.components == [Point(0, 0), Point(1, 1), Point(2, 0)]
        assert line.kind is GeometryKind.LINESTRING

    def test_is_closed(self):
        """is_closed reflects first/last coordinate equality."""
        assert LineString.from_coords([(0, 0), (1, 0), (1, 1), (0, 0)]).is_closed
        assert not LineString.from_coords([(0, 0), (1, 0), (1, 1)]).is_closed
        assert not LineString().is_closed

    def test_ring_is_a_linestring(self):
        """LinearRing is a LineString subtype with its own kind."""
        ring = LinearRing.from_coords([(0, 0), (1, 0), (1, 1), (0, 0)])
        assert isinstance(ring, LineString)
        assert ring.kind is GeometryKind.LINEARRING

    def test_ring_not_equal_to_linestring(self):
        """A ring and a line with the same vertices are different values."""
        coords = [(0, 0), (1, 0), (0, 0)]
        assert LinearRing.from_coords(coords) != LineString.from_coords(coords)

    def test_points_walks_tree_in_order(self):
        """points() flattens nested components in document order."""
        geom = Collection([
            Point(0, 0),
            MultiLineString([
                LineString.from_coords([(1, 1), (2, 2)]),
                LineString.from_coords([(3, 3), (4, 4)]),
            ]),
        ])
        assert [(p.x, p.y) for p in geom.points()] == [(0, 0), (1, 1), (2, 2), (3, 3), (4, 4)]
        assert geom.point_count() == 5

    def test_clone_is_deep(self):
        """Mutating a clone leaves the original untouched."""
        poly = Polygon([LinearRing.from_coords([(0, 0), (1, 0), (1, 1), (0, 0)])])
        copy = poly.clone()
        copy.components[0].components.append(Point(9, 9))
        assert len(poly.components[0].components) == 4
        assert copy != poly

    def test_empty_defaults(self):
        """Composites default to an empty component list."""
        assert MultiPoint().components == []
        assert MultiPoint().components is not MultiPoint().components

    def test_feature_defaults(self):
        """Feature defaults to empty properties and no id."""
        f = Feature(Point(1, 2))
        assert f.properties == {}
        assert f.feature_id is None


@pytest.mark.unit
class TestRoute:
    """Route metadata and collection behaviour."""

    def test_route_is_collection(self):
        """Route is a Collection subtype with the ROUTE kind."""
        route = Route()
        assert isinstance(route, Collection)
        assert route.kind is GeometryKind.ROUTE
        assert route.parts is None
        assert route.center is None

    def test_from_parts_derives_counts(self):
        """from_parts sets parts from component sizes."""
        route = Route.from_parts(
            [
                LineString([MeasuredPoint(0, 0, 0), MeasuredPoint(1, 0, 1)]),
                LinearRing([
                    MeasuredPoint(0, 0, 1), MeasuredPoint(1, 0, 2),
                    MeasuredPoint(1, 1, 3), MeasuredPoint(0, 0, 4),
                ]),
            ],
            route_id=7,
            route_type="LINEM",
        )
        assert route.parts == [2, 4]
        assert route.route_id == 7
        assert route.route_type == "LINEM"
        assert sum(route.parts) == route.point_count()

    def test_measures(self):
        """measures() lists every vertex measure in order."""
        route = Route.from_parts([
            LineString([MeasuredPoint(0, 0, 0.0), MeasuredPoint(3, 4, 5.0)]),
        ])
        assert route.measures() == [0.0, 5.0]
