"""Domain models for rebarfill.

This module contains the core domain models representing boundary curves,
drawing entities, scan-lines, bars and selection records. All models are:

- Immutable where possible (using frozen dataclasses)
- Created fresh for every run and discarded afterwards
- Independent of ezdxf implementation details

Key classes:
- Point, Vector3: Coordinates
- Segment, Arc, Polyline: Normalized curve primitives
- Extents: Axis-aligned bounding box
- FilledRegion, PolylineEntity, GenericEntity: Entity variants
- ScanLine, IntersectionPoint, Bar, BarFillResult: Sweep output
- ClickRecord: A logged selection
"""

from rebarfill.domain.bars import Bar, BarFillResult, IntersectionPoint, ScanLine
from rebarfill.domain.entities import (
    ArcEdge2D,
    BoundaryEntity,
    BoundaryLoop,
    FilledRegion,
    GenericEntity,
    LineEdge2D,
    PolylineEntity,
)
from rebarfill.domain.primitives import (
    CURVE_TYPES,
    Z_AXIS,
    Arc,
    CurvePrimitive,
    Extents,
    Point,
    Polyline,
    PolylineVertex,
    Segment,
    Vector3,
)
from rebarfill.domain.selection import ClickRecord

__all__: list[str] = [
    # Coordinates
    "Point",
    "Vector3",
    "Z_AXIS",
    # Curve primitives
    "Segment",
    "Arc",
    "Polyline",
    "PolylineVertex",
    "CurvePrimitive",
    "CURVE_TYPES",
    "Extents",
    # Entity variants
    "LineEdge2D",
    "ArcEdge2D",
    "BoundaryLoop",
    "FilledRegion",
    "PolylineEntity",
    "GenericEntity",
    "BoundaryEntity",
    # Sweep output
    "ScanLine",
    "IntersectionPoint",
    "Bar",
    "BarFillResult",
    "ClickRecord",
]
