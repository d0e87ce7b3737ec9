"""Unit tests for scan-line intersection and plane geometry."""

import math

import pytest

from rebarfill.core.geometry import (
    arbitrary_axis,
    horizontal_circle_offsets,
    plane_to_world,
    side_of,
)
from rebarfill.core.intersection import (
    horizontal_runs,
    intersect,
    intersect_arc,
    intersect_segment,
)
from rebarfill.domain import (
    Arc,
    Point,
    Polyline,
    PolylineVertex,
    ScanLine,
    Segment,
    Vector3,
)

TOL = 1e-6


def wide_line(y: float) -> ScanLine:
    return ScanLine(y=y, x_start=-1000.0, x_end=1000.0)


class TestArbitraryAxis:
    """Tests for the arbitrary axis algorithm."""

    def test_world_z(self):
        ax, ay, az = arbitrary_axis(Vector3(0, 0, 1))
        assert (ax.x, ax.y, ax.z) == pytest.approx((1, 0, 0))
        assert (ay.x, ay.y, ay.z) == pytest.approx((0, 1, 0))
        assert (az.x, az.y, az.z) == pytest.approx((0, 0, 1))

    def test_negative_z_mirrors_x(self):
        """A -Z normal flips the X axis and keeps Y."""
        ax, ay, _ = arbitrary_axis(Vector3(0, 0, -1))
        assert (ax.x, ax.y, ax.z) == pytest.approx((-1, 0, 0))
        assert (ay.x, ay.y, ay.z) == pytest.approx((0, 1, 0))

    def test_plane_to_world_identity(self):
        world = plane_to_world(Point(3, 4), 0.0, Vector3(0, 0, 1))
        assert (world.x, world.y, world.z) == pytest.approx((3, 4, 0))

    def test_plane_to_world_elevation(self):
        world = plane_to_world(Point(3, 4), 25.0, Vector3(0, 0, 1))
        assert world.z == pytest.approx(25.0)

    def test_plane_to_world_flipped(self):
        world = plane_to_world(Point(3, 4), 0.0, Vector3(0, 0, -1))
        assert (world.x, world.y) == pytest.approx((-3, 4))


class TestHelpers:
    """Tests for side classification and circle offsets."""

    def test_side_of(self):
        assert side_of(5.0, 0.0, TOL) == 1
        assert side_of(-5.0, 0.0, TOL) == -1
        assert side_of(1e-9, 0.0, TOL) == 0

    def test_circle_miss(self):
        assert horizontal_circle_offsets(0.0, 10.0, 11.0, TOL) is None

    def test_circle_tangent(self):
        assert horizontal_circle_offsets(0.0, 10.0, 10.0, TOL) == 0.0

    def test_circle_chord(self):
        assert horizontal_circle_offsets(0.0, 5.0, 3.0, TOL) == pytest.approx(4.0)


class TestSegmentIntersection:
    """Tests for segment hits."""

    def test_transversal_crossing(self):
        hits = intersect_segment(5.0, Segment(Point(0, 0), Point(10, 10)), TOL)
        assert len(hits) == 1
        assert hits[0].x == pytest.approx(5.0)
        assert hits[0].side == 0

    def test_miss(self):
        assert intersect_segment(20.0, Segment(Point(0, 0), Point(10, 10)), TOL) == []

    def test_horizontal_segment_ignored(self):
        """Collinear horizontal segments are handled by their neighbours."""
        assert intersect_segment(0.0, Segment(Point(0, 0), Point(10, 0)), TOL) == []

    def test_endpoint_hit_tagged_with_far_side(self):
        """Hit at the start is tagged with the side the end lies on."""
        up = intersect_segment(0.0, Segment(Point(2, 0), Point(2, 10)), TOL)
        down = intersect_segment(0.0, Segment(Point(2, 0), Point(2, -10)), TOL)
        assert [(h.x, h.side) for h in up] == [(2, 1)]
        assert [(h.x, h.side) for h in down] == [(2, -1)]

    def test_end_vertex(self):
        hits = intersect_segment(10.0, Segment(Point(0, 0), Point(4, 10)), TOL)
        assert [(h.x, h.side) for h in hits] == [(4, -1)]


class TestArcIntersection:
    """Tests for arc hits."""

    def test_circle_through_center(self):
        """A line through the centre of a circle hits it exactly twice."""
        circle = Arc(Point(0, 0), 100.0, 0.0, 2 * math.pi)
        hits = intersect_arc(0.0, circle, TOL)
        assert sorted(h.x for h in hits) == pytest.approx([-100.0, 100.0])
        assert all(h.side == 0 for h in hits)

    def test_circle_tangent_cancels(self):
        """Tangent hits come in a same-side pair."""
        circle = Arc(Point(0, 0), 100.0, 0.0, 2 * math.pi)
        hits = intersect_arc(100.0, circle, TOL)
        assert len(hits) == 2
        assert all(h.x == pytest.approx(0.0) and h.side == -1 for h in hits)

    def test_upper_half_only(self):
        upper = Arc(Point(0, 0), 10.0, 0.0, math.pi)
        assert intersect_arc(-5.0, upper, TOL) == []
        hits = intersect_arc(5.0, upper, TOL)
        assert sorted(h.x for h in hits) == pytest.approx([-math.sqrt(75), math.sqrt(75)])

    def test_arc_endpoints_tagged(self):
        """Endpoints on the line carry the side the arc continues to."""
        upper = Arc(Point(0, 0), 10.0, 0.0, math.pi)
        lower = Arc(Point(0, 0), 10.0, math.pi, 2 * math.pi)
        assert {(round(h.x), h.side) for h in intersect_arc(0.0, upper, TOL)} == {(-10, 1), (10, 1)}
        assert {(round(h.x), h.side) for h in intersect_arc(0.0, lower, TOL)} == {(-10, -1), (10, -1)}

    def test_downward_normal(self):
        """Quarter arc with -Z normal is hit in the second quadrant."""
        arc = Arc(Point(0, 0), 10.0, 0.0, math.pi / 2, normal=Vector3(0, 0, -1))
        hits = intersect_arc(5.0, arc, TOL)
        assert len(hits) == 1
        assert hits[0].x == pytest.approx(-math.sqrt(75))


class TestIntersect:
    """Tests for the primitive dispatcher."""

    def test_polyline_spans(self):
        square = Polyline(
            tuple(PolylineVertex(Point(x, y)) for x, y in [(0, 0), (10, 0), (10, 10), (0, 10)]),
            closed=True,
        )
        hits = intersect(wide_line(5.0), square, TOL)
        assert sorted(h.x for h in hits) == pytest.approx([0.0, 10.0])

    def test_outside_scan_range_dropped(self):
        line = ScanLine(y=5.0, x_start=0.0, x_end=4.0)
        assert intersect(line, Segment(Point(8, 0), Point(8, 10)), TOL) == []

    def test_unsupported_primitive(self):
        with pytest.raises(TypeError):
            intersect(wide_line(0.0), "circle", TOL)  # type: ignore[arg-type]

    def test_horizontal_runs(self):
        on_line = Segment(Point(300, 5), Point(100, 5))
        off_line = Segment(Point(0, 6), Point(10, 6))
        assert horizontal_runs(wide_line(5.0), on_line, TOL) == [(100, 300)]
        assert horizontal_runs(wide_line(5.0), off_line, TOL) == []

    def test_horizontal_runs_of_polyline(self):
        square = Polyline(
            tuple(PolylineVertex(Point(x, y)) for x, y in [(0, 0), (10, 0), (10, 10), (0, 10)]),
        )
        assert horizontal_runs(wide_line(10.0), square, TOL) == [(0, 10)]
        assert horizontal_runs(wide_line(5.0), square, TOL) == []
        assert horizontal_runs(wide_line(0.0), Arc(Point(0, 0), 1.0, 0.0, math.pi), TOL) == []
