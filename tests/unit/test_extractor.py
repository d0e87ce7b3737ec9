"""Unit tests for BoundaryExtractor."""

import math
from unittest.mock import Mock

import pytest

from rebarfill.core.extractor import BoundaryExtractor
from rebarfill.core.processor import generate_bars
from rebarfill.core.scanline import ScanlineBarGenerator
from rebarfill.domain import (
    Arc,
    ArcEdge2D,
    BoundaryLoop,
    FilledRegion,
    GenericEntity,
    LineEdge2D,
    Point,
    Polyline,
    PolylineEntity,
    PolylineVertex,
    Segment,
    Vector3,
)
from rebarfill.exceptions import NoBoundaryFoundError


def square_loop(size: float, origin: tuple[float, float] = (0.0, 0.0)) -> BoundaryLoop:
    ox, oy = origin
    corners = [
        Point(ox, oy),
        Point(ox + size, oy),
        Point(ox + size, oy + size),
        Point(ox, oy + size),
    ]
    return BoundaryLoop(
        edges=tuple(LineEdge2D(corners[i], corners[(i + 1) % 4]) for i in range(4))
    )


class TestFilledRegion:
    """Tests for extracting hatch-like regions."""

    def test_all_loops_flattened(self):
        region = FilledRegion(loops=(square_loop(400), square_loop(200, (100, 100))), handle="2A")
        primitives = BoundaryExtractor().extract(region)

        assert len(primitives) == 8
        assert all(isinstance(p, Segment) for p in primitives)
        assert primitives[0] == Segment(Point(0, 0), Point(400, 0))

    def test_arc_edge(self):
        loop = BoundaryLoop(edges=(ArcEdge2D(Point(5, 5), 2.0, 0.0, 2 * math.pi),))
        primitives = BoundaryExtractor().extract(FilledRegion(loops=(loop,)))

        assert len(primitives) == 1
        arc = primitives[0]
        assert isinstance(arc, Arc)
        assert arc.center == Point(5, 5)
        assert arc.radius == 2.0
        assert arc.is_full_circle

    def test_flipped_plane(self):
        """Loops of a region facing -Z are mirrored into world X."""
        loop = BoundaryLoop(
            edges=(
                LineEdge2D(Point(10, 0), Point(10, 5)),
                ArcEdge2D(Point(10, 0), 1.0, 0.0, math.pi / 2),
            )
        )
        region = FilledRegion(loops=(loop,), normal=Vector3(0, 0, -1))
        segment, arc = BoundaryExtractor().extract(region)

        assert segment.start.x == pytest.approx(-10.0)
        assert segment.end.y == pytest.approx(5.0)
        assert arc.center.x == pytest.approx(-10.0)
        assert arc.normal == Vector3(0, 0, -1)

    def test_unsupported_edges_skipped(self):
        loop = BoundaryLoop(edges=square_loop(10).edges, unsupported=2)
        primitives = BoundaryExtractor().extract(FilledRegion(loops=(loop,)))
        assert len(primitives) == 4

    def test_no_loops(self):
        with pytest.raises(NoBoundaryFoundError) as exc_info:
            BoundaryExtractor().extract(FilledRegion(loops=(), handle="3B"))
        assert exc_info.value.entity_type == "HATCH"


class TestPolylineEntity:
    """Tests for polyline passthrough."""

    def test_passthrough(self):
        poly = Polyline(
            (PolylineVertex(Point(0, 0)), PolylineVertex(Point(1, 0)), PolylineVertex(Point(0, 1))),
        )
        primitives = BoundaryExtractor().extract(PolylineEntity(poly, handle="1F"))
        assert primitives == [poly]


class TestGenericEntity:
    """Tests for exploded entities."""

    def test_non_curves_discarded(self):
        segment = Segment(Point(0, 0), Point(1, 1))
        arc = Arc(Point(0, 0), 1.0, 0.0, math.pi)
        explode = Mock(return_value=[segment, "TEXT", None, arc])

        entity = GenericEntity(dxftype="INSERT", handle="4C")
        primitives = BoundaryExtractor(explode=explode).extract(entity)

        explode.assert_called_once_with(entity)
        assert primitives == [segment, arc]

    def test_without_explode_capability(self):
        with pytest.raises(NoBoundaryFoundError, match="INSERT"):
            BoundaryExtractor().extract(GenericEntity(dxftype="INSERT", handle="4C"))

    def test_only_non_curves(self):
        extractor = BoundaryExtractor(explode=lambda entity: [None, 42])
        with pytest.raises(NoBoundaryFoundError):
            extractor.extract(GenericEntity(dxftype="MTEXT"))

    def test_unknown_variant(self):
        with pytest.raises(TypeError):
            BoundaryExtractor().extract(object())  # type: ignore[arg-type]


class TestGenerateBars:
    """Tests for the geometry pipeline from entity to bars."""

    def test_tags_result_with_entity(self):
        region = FilledRegion(loops=(square_loop(400), square_loop(200, (100, 100))), handle="2A")
        result = generate_bars(region, BoundaryExtractor(), ScanlineBarGenerator(spacing=100.0))

        assert result.entity_type == "HATCH"
        assert result.handle == "2A"
        assert result.bar_count == 8
        assert result.total_length == pytest.approx(1400.0)

    def test_no_boundary_propagates(self):
        with pytest.raises(NoBoundaryFoundError):
            generate_bars(GenericEntity("TEXT"), BoundaryExtractor(), ScanlineBarGenerator())
