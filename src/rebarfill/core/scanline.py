"""Scan-line bar generation.

This module sweeps horizontal scan-lines across a boundary and converts the
inside spans into bars using the even-odd fill rule:

1. Place scan-lines from the bottom to the top of the extents at a fixed spacing
2. Intersect every scan-line with every boundary primitive
3. Sort hits by x and coalesce hits that share a location or a horizontal edge
4. Pair hits (0, 1), (2, 3), ... into bars, dropping an odd trailing hit
"""

import math
from collections.abc import Callable, Sequence

import structlog

from rebarfill.core.intersection import DEFAULT_TOLERANCE, horizontal_runs, intersect
from rebarfill.domain import (
    Bar,
    BarFillResult,
    CurvePrimitive,
    Extents,
    IntersectionPoint,
    Point,
    ScanLine,
)

logger = structlog.get_logger(__name__)

BarSink = Callable[[Bar], None]


def scan_line_count(height: float, spacing: float, tolerance: float = DEFAULT_TOLERANCE) -> int:
    """Number of scan-lines covering a height, both ends inclusive.

    Examples:
        >>> scan_line_count(350.0, 100.0)
        4
        >>> scan_line_count(300.0, 100.0)
        4
    """
    return math.floor((height + tolerance) / spacing) + 1


def coalesce_hits(
    hits: Sequence[IntersectionPoint],
    tolerance: float,
    runs: Sequence[tuple[float, float]] = (),
) -> list[IntersectionPoint]:
    """Merge hits that belong to one boundary event on a scan-line.

    Hits must already be sorted by x. A cluster is a group of hits closer
    than tolerance, widened by any horizontal run of the boundary lying on
    the scan-line that starts inside it. Within a cluster at a single
    location:

    - transversal crossings are kept as they are
    - an endpoint hit continuing upward and one continuing downward form a
      boundary passing through a vertex, and collapse into one crossing
    - two endpoint hits continuing to the same side touch the scan-line
      and cancel
    - a single leftover endpoint hit is kept

    A cluster spanning a horizontal run is resolved the same way, except
    that a pass-through becomes one crossing at the run's left end
    when entering the region and its right end when leaving it. A touching run
    keeps both of its ends.

    Args:
        hits: Hits sorted by ascending x
        tolerance: Maximum x distance inside a cluster
        runs: (x_min, x_max) of boundary segments lying on the scan-line

    Returns:
        Coalesced hits, still sorted by x
    """
    result: list[IntersectionPoint] = []
    i = 0
    n = len(hits)

    while i < n:
        anchor = hits[i]
        reach = anchor.x
        j = i
        while True:
            while j < n and hits[j].x - reach <= tolerance:
                j += 1
            extended = max(
                (end for start, end in runs if start - tolerance <= reach < end - tolerance),
                default=None,
            )
            if extended is None:
                break
            reach = extended
        cluster = hits[i:j]
        i = j

        crossings = [hit for hit in cluster if hit.side == 0]
        above = sum(1 for hit in cluster if hit.side > 0)
        below = sum(1 for hit in cluster if hit.side < 0)
        keep = len(crossings) + min(above, below) + abs(above - below) % 2

        if reach - anchor.x > tolerance:
            left = IntersectionPoint(cluster[0].x, anchor.y)
            right = IntersectionPoint(cluster[-1].x, anchor.y)
            if keep % 2:
                inside = len(result) % 2 == 1
                result.append(right if inside else left)
            else:
                result.extend([left, right])
            continue

        for k in range(keep):
            source = crossings[k] if k < len(crossings) else anchor
            result.append(IntersectionPoint(source.x, source.y))

    return result


class ScanlineBarGenerator:
    """Generates bars filling a boundary with the even-odd rule.

    Example:
        generator = ScanlineBarGenerator(spacing=100.0, margin=1000.0)
        result = generator.generate(primitives, extents)
        print(result.bar_count, result.total_length)
    """

    def __init__(
        self,
        spacing: float = 100.0,
        margin: float = 1000.0,
        tolerance: float = DEFAULT_TOLERANCE,
    ) -> None:
        """Initialize the generator.

        Args:
            spacing: Distance between consecutive scan-lines
            margin: Extension of each scan-line beyond the extents
            tolerance: Geometric tolerance for endpoints and coincident hits

        Raises:
            ValueError: If spacing is not positive or margin is negative
        """
        if spacing <= 0:
            raise ValueError(f"Scan-line spacing must be positive, got {spacing}")
        if margin < 0:
            raise ValueError(f"Scan-line margin must not be negative, got {margin}")
        self.spacing = spacing
        self.margin = margin
        self.tolerance = tolerance

    def scan_lines(self, extents: Extents) -> list[ScanLine]:
        """Build the scan-lines for a set of extents, bottom to top."""
        count = scan_line_count(extents.height, self.spacing, self.tolerance)
        x_start = extents.min.x - self.margin
        x_end = extents.max.x + self.margin
        return [
            ScanLine(y=extents.min.y + i * self.spacing, x_start=x_start, x_end=x_end)
            for i in range(count)
        ]

    def hits(self, scan_line: ScanLine, primitives: Sequence[CurvePrimitive]) -> list[IntersectionPoint]:
        """Collect, sort and coalesce the hits of one scan-line."""
        collected: list[IntersectionPoint] = []
        runs: list[tuple[float, float]] = []
        for primitive in primitives:
            collected.extend(intersect(scan_line, primitive, self.tolerance))
            runs.extend(horizontal_runs(scan_line, primitive, self.tolerance))

        # Stable: equal x keeps primitive extraction order
        collected.sort(key=lambda hit: hit.x)
        return coalesce_hits(collected, self.tolerance, runs)

    def generate(
        self,
        primitives: Sequence[CurvePrimitive],
        extents: Extents,
        sink: BarSink | None = None,
    ) -> BarFillResult:
        """Sweep the region and generate bars.

        Args:
            primitives: Boundary primitives
            extents: Extents of the primitives
            sink: Optional callable invoked once per generated bar

        Returns:
            BarFillResult with bars in sweep order and aggregates
        """
        result = BarFillResult()
        lines = self.scan_lines(extents)
        result.scan_line_count = len(lines)

        for scan_line in lines:
            hits = self.hits(scan_line, primitives)
            if len(hits) % 2:
                logger.debug("Dropped unpaired hit", y=scan_line.y, hits=len(hits))

            for k in range(0, len(hits) - 1, 2):
                bar = Bar.between(
                    Point(hits[k].x, hits[k].y),
                    Point(hits[k + 1].x, hits[k + 1].y),
                )
                result.add(bar)
                if sink is not None:
                    sink(bar)

        logger.debug(
            "Scan-line sweep complete",
            scan_lines=result.scan_line_count,
            bars=result.bar_count,
            total_length=round(result.total_length, 2),
        )
        return result
