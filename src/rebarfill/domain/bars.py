"""Scan-line, intersection and bar types.

This module defines the data produced by the scan-line sweep:
- ScanLine: A horizontal sweep line
- IntersectionPoint: A hit between a scan-line and a boundary primitive
- Bar: One generated reinforcement bar
- BarFillResult: All bars of one run with their aggregates
"""

from dataclasses import dataclass, field

from rebarfill.domain.primitives import Point


@dataclass(frozen=True, slots=True)
class ScanLine:
    """A horizontal segment at height y spanning [x_start, x_end]."""

    y: float
    x_start: float
    x_end: float

    def contains_x(self, x: float) -> bool:
        return self.x_start <= x <= self.x_end


@dataclass(frozen=True, slots=True)
class IntersectionPoint:
    """A scan-line hit.

    Attributes:
        x: X coordinate of the hit
        y: Y coordinate of the hit (the scan-line height)
        side: 0 for a transversal crossing; +1 or -1 when the hit is a
            primitive endpoint or tangency and the primitive continues
            above (+1) or below (-1) the scan-line
    """

    x: float
    y: float
    side: int = 0


@dataclass(frozen=True, slots=True)
class Bar:
    """A generated bar between two paired intersection points."""

    start: Point
    end: Point
    length: float

    @classmethod
    def between(cls, start: Point, end: Point) -> "Bar":
        """Create a bar whose length is the distance between its endpoints."""
        return cls(start=start, end=end, length=start.distance_to(end))


@dataclass
class BarFillResult:
    """Outcome of one bar generation run.

    Attributes:
        bars: Bars in sweep order (bottom to top, left to right)
        bar_count: Number of bars
        total_length: Sum of bar lengths
        scan_line_count: Number of scan-lines swept
        entity_type: Type name of the source entity
        handle: Handle of the source entity
    """

    bars: list[Bar] = field(default_factory=list)
    bar_count: int = 0
    total_length: float = 0.0
    scan_line_count: int = 0
    entity_type: str | None = None
    handle: str | None = None

    def add(self, bar: Bar) -> None:
        """Append a bar and update the aggregates."""
        self.bars.append(bar)
        self.bar_count += 1
        self.total_length += bar.length
