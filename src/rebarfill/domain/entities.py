"""Drawing entity variants that can enclose a region.

The boundary extractor understands a closed set of entity shapes:
- FilledRegion: a hatch with one or more boundary loops defined in its own plane
- PolylineEntity: a single 2D polyline (LWPOLYLINE)
- GenericEntity: anything else, decomposed through an explode capability

These models are independent of ezdxf; the I/O layer converts host entities
into them.
"""

from dataclasses import dataclass, field
from typing import Any

from rebarfill.domain.primitives import Z_AXIS, Point, Polyline, Vector3


@dataclass(frozen=True, slots=True)
class LineEdge2D:
    """Straight boundary edge in loop-plane coordinates."""

    start: Point
    end: Point


@dataclass(frozen=True, slots=True)
class ArcEdge2D:
    """Circular boundary edge in loop-plane coordinates.

    Angles are radians, counter-clockwise in the loop plane.
    """

    center: Point
    radius: float
    start_angle: float
    end_angle: float


@dataclass(frozen=True)
class BoundaryLoop:
    """One closed loop of a filled region.

    Attributes:
        edges: Sub-curves in loop order
        unsupported: Number of sub-curves of other kinds (ellipse, spline)
            that could not be represented and were left out
    """

    edges: tuple[LineEdge2D | ArcEdge2D, ...]
    unsupported: int = 0


@dataclass(frozen=True)
class FilledRegion:
    """A filled region (hatch) bounded by one or more loops.

    Attributes:
        loops: Boundary loops
        elevation: Distance of the loop plane from the origin along normal
        normal: Plane normal (extrusion direction)
        handle: Entity handle in the drawing
    """

    loops: tuple[BoundaryLoop, ...]
    elevation: float = 0.0
    normal: Vector3 = Z_AXIS
    handle: str | None = None

    dxftype = "HATCH"


@dataclass(frozen=True)
class PolylineEntity:
    """A polyline entity that already is a single closed curve."""

    polyline: Polyline
    handle: str | None = None

    dxftype = "LWPOLYLINE"


@dataclass(frozen=True)
class GenericEntity:
    """Any other entity, decomposed on demand.

    Attributes:
        dxftype: Host entity type name (e.g. "INSERT", "CIRCLE")
        handle: Entity handle in the drawing
        source: Host object passed back to the explode capability
    """

    dxftype: str
    handle: str | None = None
    source: Any = field(default=None, repr=False, compare=False)


BoundaryEntity = FilledRegion | PolylineEntity | GenericEntity
