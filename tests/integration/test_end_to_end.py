"""End-to-end tests that write bars into real drawings and verify the output."""

import json
import math
from pathlib import Path

import ezdxf
import pytest

from rebarfill.config import RebarFillSettings
from rebarfill.core.processor import BarFillProcessor

OUTER = [(0, 0), (400, 0), (400, 400), (0, 400)]
INNER = [(100, 100), (300, 100), (300, 300), (100, 300)]


def save(doc, path: Path) -> Path:
    doc.saveas(path)
    return path


def rebar_lines(path: Path) -> list:
    return list(ezdxf.readfile(path).modelspace().query('LINE[layer=="REBAR"]'))


class TestHatchWithHole:
    """A hatch with an island is filled around the island."""

    @pytest.fixture
    def drawing(self, tmp_path):
        doc = ezdxf.new("R2010")
        hatch = doc.modelspace().add_hatch()
        hatch.paths.add_polyline_path(OUTER, is_closed=True)
        hatch.paths.add_polyline_path(INNER, is_closed=True)
        return save(doc, tmp_path / "slab.dxf"), hatch.dxf.handle

    def test_bars_skip_the_hole(self, drawing, tmp_path):
        path, handle = drawing
        clicks = tmp_path / "clicks.json"
        clicks.write_text(json.dumps([{"externalId": handle, "dbId": 1, "timestamp": 0}]))

        result = BarFillProcessor(RebarFillSettings()).process(path, selection_path=clicks)

        assert result.bar_count == 8
        assert result.total_length == pytest.approx(1400.0)

        lines = rebar_lines(tmp_path / "slab-rebar.dxf")
        assert len(lines) == 8
        for line in lines:
            start, end = line.dxf.start, line.dxf.end
            assert start.y == pytest.approx(end.y)
            # No bar runs through the hole
            if 100 < start.y < 300:
                assert end.x <= 100 + 1e-6 or start.x >= 300 - 1e-6

    def test_source_drawing_untouched(self, drawing):
        path, handle = drawing
        before = path.read_bytes()
        BarFillProcessor(RebarFillSettings()).process(path, handle=handle)
        assert path.read_bytes() == before


class TestCircularHatch:
    """A hatch bounded by a single circular edge."""

    def test_one_bar_across_the_diameter(self, tmp_path):
        doc = ezdxf.new("R2010")
        hatch = doc.modelspace().add_hatch()
        hatch.paths.add_edge_path().add_arc((0, 0), radius=100, start_angle=0, end_angle=360)
        path = save(doc, tmp_path / "pier.dxf")

        result = BarFillProcessor(RebarFillSettings()).process(path, handle=hatch.dxf.handle)

        assert result.scan_line_count == 3
        assert result.bar_count == 1
        assert result.total_length == pytest.approx(200.0)
        (line,) = rebar_lines(tmp_path / "pier-rebar.dxf")
        assert line.dxf.start.x == pytest.approx(-100.0)
        assert line.dxf.end.x == pytest.approx(100.0)


class TestBulgedPolyline:
    """A closed polyline with an arc span."""

    def test_stadium(self, tmp_path):
        # 200 wide rectangle capped by a half circle of radius 100 on the right
        doc = ezdxf.new("R2010")
        poly = doc.modelspace().add_lwpolyline(
            [(0, 0, 0), (200, 0, 1.0), (200, 200, 0), (0, 200, 0)],
            format="xyb",
            close=True,
        )
        path = save(doc, tmp_path / "stadium.dxf")

        result = BarFillProcessor(RebarFillSettings()).process(
            path, handle=poly.dxf.handle, dry_run=True
        )

        assert result.bar_count == 3
        lengths = sorted(bar.length for bar in result.bars)
        assert lengths == pytest.approx([200.0, 200.0, 300.0])


class TestBlockReference:
    """An INSERT is exploded into its curves."""

    def test_exploded_square(self, tmp_path):
        doc = ezdxf.new("R2010")
        block = doc.blocks.new("COLUMN")
        corners = [(0, 0), (200, 0), (200, 200), (0, 200)]
        for i, corner in enumerate(corners):
            block.add_line(corner, corners[(i + 1) % 4])
        block.add_text("C1")
        insert = doc.modelspace().add_blockref("COLUMN", (1000, 500))
        path = save(doc, tmp_path / "columns.dxf")

        result = BarFillProcessor(RebarFillSettings()).process(path, handle=insert.dxf.handle)

        assert result.entity_type == "INSERT"
        assert result.bar_count == 3
        assert result.total_length == pytest.approx(600.0)
        ys = sorted(line.dxf.start.y for line in rebar_lines(tmp_path / "columns-rebar.dxf"))
        assert ys == pytest.approx([500.0, 600.0, 700.0])
        assert all(math.isclose(b.start.x, 1000.0) for b in result.bars)
