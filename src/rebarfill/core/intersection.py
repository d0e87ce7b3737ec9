"""Scan-line versus boundary primitive intersection.

Every primitive is intersected against a horizontal scan-line on closed
intervals. Hits that fall on a primitive endpoint are tagged with the side
the primitive continues to, so the generator can tell a boundary passing
through a vertex from one merely touching the scan-line there.
"""

import math

from rebarfill.core.geometry import horizontal_circle_offsets, horizontal_line_x, side_of
from rebarfill.domain import (
    Arc,
    CurvePrimitive,
    IntersectionPoint,
    Polyline,
    ScanLine,
    Segment,
)
from rebarfill.domain.primitives import POINT_TOLERANCE, TAU, angle_in_sweep

DEFAULT_TOLERANCE = POINT_TOLERANCE


def intersect(
    scan_line: ScanLine,
    primitive: CurvePrimitive,
    tolerance: float = DEFAULT_TOLERANCE,
) -> list[IntersectionPoint]:
    """Intersect a scan-line with one boundary primitive.

    Args:
        scan_line: Horizontal sweep line
        primitive: Segment, Arc or Polyline
        tolerance: Distance under which a hit counts as an endpoint or tangency

    Returns:
        Hits inside the scan-line's x range, at most two per segment or arc
    """
    match primitive:
        case Segment():
            hits = intersect_segment(scan_line.y, primitive, tolerance)
        case Arc():
            hits = intersect_arc(scan_line.y, primitive, tolerance)
        case Polyline():
            hits = []
            for span in primitive.spans(tolerance):
                hits.extend(intersect(scan_line, span, tolerance))
            return hits
        case _:
            raise TypeError(f"Unsupported primitive: {type(primitive).__name__}")

    return [hit for hit in hits if scan_line.contains_x(hit.x)]


def horizontal_runs(
    scan_line: ScanLine,
    primitive: CurvePrimitive,
    tolerance: float = DEFAULT_TOLERANCE,
) -> list[tuple[float, float]]:
    """X intervals of straight boundary pieces lying on the scan-line.

    Such pieces produce no hits of their own; the endpoint hits at both of
    their ends belong to a single boundary event.

    Returns:
        (x_min, x_max) per collinear segment, in primitive order
    """
    match primitive:
        case Segment():
            segments = [primitive]
        case Polyline():
            segments = [span for span in primitive.spans(tolerance) if isinstance(span, Segment)]
        case _:
            return []

    return [
        (min(seg.start.x, seg.end.x), max(seg.start.x, seg.end.x))
        for seg in segments
        if abs(seg.start.y - scan_line.y) <= tolerance and abs(seg.end.y - scan_line.y) <= tolerance
    ]


def intersect_segment(y: float, segment: Segment, tolerance: float) -> list[IntersectionPoint]:
    """Intersect a horizontal line at height y with a segment.

    Horizontal segments yield no hits, whether collinear with the line or not;
    the edges adjacent to a collinear segment supply its endpoints.
    """
    start, end = segment.start, segment.end
    if abs(end.y - start.y) <= tolerance:
        return []

    start_side = side_of(start.y, y, tolerance)
    end_side = side_of(end.y, y, tolerance)

    if start_side == 0:
        return [IntersectionPoint(start.x, y, end_side)]
    if end_side == 0:
        return [IntersectionPoint(end.x, y, start_side)]
    if start_side == end_side:
        return []

    return [IntersectionPoint(horizontal_line_x(start, end, y), y)]


def intersect_arc(y: float, arc: Arc, tolerance: float) -> list[IntersectionPoint]:
    """Intersect a horizontal line at height y with an arc.

    A tangent line gives two coincident hits tagged with the side the arc
    lies on, so that they cancel out under the even-odd rule.
    """
    half_chord = horizontal_circle_offsets(arc.center.y, arc.radius, y, tolerance)
    if half_chord is None:
        return []

    start, end = arc.world_angles()
    sweep = arc.sweep_angle
    angular_tolerance = tolerance / arc.radius if arc.radius > 0 else tolerance
    dy = y - arc.center.y

    if half_chord == 0.0:
        angle = math.copysign(0.5 * math.pi, dy)
        if not angle_in_sweep(angle, start, sweep, angular_tolerance):
            return []
        side = -1 if dy > 0 else 1
        if not arc.is_full_circle and (
            _near(angle, start, angular_tolerance) or _near(angle, end, angular_tolerance)
        ):
            return [IntersectionPoint(arc.center.x, y, side)]
        return [IntersectionPoint(arc.center.x, y, side), IntersectionPoint(arc.center.x, y, side)]

    hits: list[IntersectionPoint] = []
    for offset in (-half_chord, half_chord):
        angle = math.atan2(dy, offset)
        if not angle_in_sweep(angle, start, sweep, angular_tolerance):
            continue
        side = 0
        if not arc.is_full_circle:
            # dy/d(angle) = r*cos(angle); cos has the sign of offset
            direction = 1 if offset > 0 else -1
            if _near(angle, start, angular_tolerance):
                side = direction
            elif _near(angle, end, angular_tolerance):
                side = -direction
        hits.append(IntersectionPoint(arc.center.x + offset, y, side))

    return hits


def _near(angle: float, reference: float, tolerance: float) -> bool:
    diff = (angle - reference) % TAU
    return diff <= tolerance or diff >= TAU - tolerance
