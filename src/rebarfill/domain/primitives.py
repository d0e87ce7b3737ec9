"""Curve primitives for boundary representation.

This module defines the normalized curve types every boundary is reduced to:
- Point: A 2D point in world coordinates
- Vector3: A 3D vector used for plane normals and origins
- Segment: A straight line segment
- Arc: A circular arc (or full circle) with its plane normal
- Polyline: A vertex/bulge sequence as stored by LWPOLYLINE entities
- Extents: An axis-aligned bounding box

All primitives are frozen; they are produced once by boundary extraction and
only read afterwards.
"""

import math
from dataclasses import dataclass

TAU = 2.0 * math.pi

# Default distance under which two points are the same point
POINT_TOLERANCE = 1e-6

# Angles (radians) at which a circle reaches its axis extremes
_QUADRANT_ANGLES = (0.0, 0.5 * math.pi, math.pi, 1.5 * math.pi)


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D world space.

    Attributes:
        x: X coordinate in drawing units
        y: Y coordinate in drawing units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def is_close(self, other: "Point", tolerance: float) -> bool:
        """Check geometric equality within a tolerance.

        Args:
            other: Point to compare against
            tolerance: Maximum distance for the points to count as equal

        Returns:
            True if the points are within tolerance of each other
        """
        return self.distance_to(other) <= tolerance


@dataclass(frozen=True, slots=True)
class Vector3:
    """A vector (or point) in 3D space."""

    x: float
    y: float
    z: float

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> "Vector3":
        """Return the unit vector in the same direction.

        Raises:
            ValueError: If the vector has zero length
        """
        length = self.length()
        if length == 0.0:
            raise ValueError("Cannot normalize a zero-length vector")
        return Vector3(self.x / length, self.y / length, self.z / length)


Z_AXIS = Vector3(0.0, 0.0, 1.0)


@dataclass(frozen=True, slots=True)
class Extents:
    """Axis-aligned bounding box.

    Attributes:
        min: Lower-left corner
        max: Upper-right corner
    """

    min: Point
    max: Point

    def __post_init__(self) -> None:
        if self.min.x > self.max.x or self.min.y > self.max.y:
            raise ValueError(f"Invalid extents: min {self.min} exceeds max {self.max}")

    @classmethod
    def from_points(cls, points: list[Point]) -> "Extents":
        """Build the smallest box containing all points.

        Raises:
            ValueError: If points is empty
        """
        if not points:
            raise ValueError("Cannot compute extents of an empty point list")
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(Point(min(xs), min(ys)), Point(max(xs), max(ys)))

    def merge(self, other: "Extents") -> "Extents":
        """Return the box enclosing both this box and other."""
        return Extents(
            Point(min(self.min.x, other.min.x), min(self.min.y, other.min.y)),
            Point(max(self.max.x, other.max.x), max(self.max.y, other.max.y)),
        )

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y


def angle_in_sweep(angle: float, start: float, sweep: float, tolerance: float = 0.0) -> bool:
    """Check whether an angle lies on a counter-clockwise sweep.

    Args:
        angle: Angle to test (radians)
        start: Sweep start angle (radians)
        sweep: Counter-clockwise sweep length in [0, 2*pi]
        tolerance: Angular slack at both ends

    Returns:
        True if angle is within [start, start + sweep]
    """
    offset = (angle - start) % TAU
    return offset <= sweep + tolerance or offset >= TAU - tolerance


@dataclass(frozen=True, slots=True)
class Segment:
    """A straight line segment."""

    start: Point
    end: Point

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    def bounding_box(self) -> Extents:
        return Extents.from_points([self.start, self.end])


@dataclass(frozen=True, slots=True)
class Arc:
    """A circular arc lying in a plane parallel to the XY plane.

    Angles follow the DXF convention: they are measured counter-clockwise
    about ``normal`` in the arc's object coordinate system. For a normal
    pointing down the Z axis the arc therefore runs clockwise in world space;
    use ``world_angles`` for world-space evaluation.

    Attributes:
        center: Center in world coordinates
        radius: Arc radius
        start_angle: Start angle in radians
        end_angle: End angle in radians
        normal: Plane normal (extrusion direction)
    """

    center: Point
    radius: float
    start_angle: float
    end_angle: float
    normal: Vector3 = Z_AXIS

    @property
    def sweep_angle(self) -> float:
        """Counter-clockwise sweep in (0, 2*pi]; a full circle gives 2*pi."""
        raw = self.end_angle - self.start_angle
        sweep = raw % TAU
        if sweep == 0.0 and raw != 0.0:
            return TAU
        return sweep

    @property
    def is_full_circle(self) -> bool:
        return self.sweep_angle >= TAU - 1e-12

    def world_angles(self) -> tuple[float, float]:
        """Start and end angle of the equivalent counter-clockwise world arc.

        A downward normal mirrors the object coordinate system about the
        Y axis, so an OCS angle ``a`` maps to ``pi - a`` and the sweep
        direction reverses.
        """
        if self.normal.z < 0.0:
            return (math.pi - self.end_angle, math.pi - self.start_angle)
        return (self.start_angle, self.end_angle)

    def point_at(self, angle: float) -> Point:
        """Evaluate the circle at a world-space angle."""
        return Point(
            self.center.x + self.radius * math.cos(angle),
            self.center.y + self.radius * math.sin(angle),
        )

    @property
    def length(self) -> float:
        return self.radius * self.sweep_angle

    def bounding_box(self) -> Extents:
        """Bounding box accounting for the swept angle range."""
        start, end = self.world_angles()
        sweep = self.sweep_angle
        points = [self.point_at(start), self.point_at(end)]
        for angle in _QUADRANT_ANGLES:
            if angle_in_sweep(angle, start, sweep):
                points.append(self.point_at(angle))
        return Extents.from_points(points)


@dataclass(frozen=True, slots=True)
class PolylineVertex:
    """A polyline vertex with the bulge of the span leaving it.

    Attributes:
        point: Vertex location
        bulge: Tangent of a quarter of the span's included angle
            (0 for a straight span, positive for counter-clockwise)
    """

    point: Point
    bulge: float = 0.0


def bulge_to_arc(start: Point, end: Point, bulge: float) -> Arc | None:
    """Convert a bulged polyline span to an arc.

    Args:
        start: Span start point
        end: Span end point
        bulge: Span bulge (must be non-zero)

    Returns:
        Counter-clockwise Arc covering the span, or None if the span
        has zero length
    """
    chord = start.distance_to(end)
    if chord == 0.0:
        return None

    included = 4.0 * math.atan(bulge)
    half = abs(included) / 2.0
    radius = chord / (2.0 * math.sin(half))

    # Center sits on the chord bisector, left of the chord for CCW spans
    ux = (end.x - start.x) / chord
    uy = (end.y - start.y) / chord
    offset = radius * math.cos(included / 2.0) * (1.0 if included > 0 else -1.0)
    cx = (start.x + end.x) / 2.0 - uy * offset
    cy = (start.y + end.y) / 2.0 + ux * offset

    start_angle = math.atan2(start.y - cy, start.x - cx)
    end_angle = math.atan2(end.y - cy, end.x - cx)
    if included < 0:
        start_angle, end_angle = end_angle, start_angle
    if end_angle <= start_angle:
        end_angle += TAU

    return Arc(Point(cx, cy), radius, start_angle, end_angle)


@dataclass(frozen=True, slots=True)
class Polyline:
    """A 2D polyline with optional bulged (arc) spans.

    Attributes:
        vertices: Ordered vertex/bulge pairs
        closed: True if a span joins the last vertex back to the first
    """

    vertices: tuple[PolylineVertex, ...]
    closed: bool = True

    def spans(self, tolerance: float = POINT_TOLERANCE) -> list[Segment | Arc]:
        """Split the polyline into straight segments and arcs.

        Args:
            tolerance: Spans shorter than this are skipped

        Returns:
            Segments and arcs in vertex order
        """
        n = len(self.vertices)
        count = n if self.closed else n - 1
        result: list[Segment | Arc] = []

        for i in range(max(count, 0)):
            vertex = self.vertices[i]
            nxt = self.vertices[(i + 1) % n]
            if vertex.point.is_close(nxt.point, tolerance):
                continue
            if vertex.bulge == 0.0:
                result.append(Segment(vertex.point, nxt.point))
            else:
                arc = bulge_to_arc(vertex.point, nxt.point, vertex.bulge)
                if arc is not None:
                    result.append(arc)

        return result

    def bounding_box(self) -> Extents:
        """Bounding box over the full vertex/bulge geometry.

        Raises:
            ValueError: If the polyline has no vertices
        """
        spans = self.spans()
        if not spans:
            return Extents.from_points([v.point for v in self.vertices])

        box = spans[0].bounding_box()
        for span in spans[1:]:
            box = box.merge(span.bounding_box())
        return box


CurvePrimitive = Segment | Arc | Polyline

CURVE_TYPES = (Segment, Arc, Polyline)
