"""Conversion between ezdxf entities and domain models.

This module handles converting ezdxf entity representations into the
entity variants and curve primitives used by the geometry core, and provides
the explode capability for entities that are neither hatches nor polylines.

ezdxf angles are degrees; domain angles are radians.
"""

import math
from collections.abc import Iterator

from ezdxf.entities import DXFGraphic
from ezdxf.entities.boundary_paths import BoundaryPathType, EdgeType
from ezdxf.math import Vec3

from rebarfill.domain import (
    Arc,
    ArcEdge2D,
    BoundaryEntity,
    BoundaryLoop,
    CurvePrimitive,
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
from rebarfill.domain.primitives import TAU, bulge_to_arc

# Entities that are curves themselves and explode to a single primitive
CURVE_DXFTYPES = frozenset({"LINE", "ARC", "CIRCLE", "LWPOLYLINE"})


def _vector(vec: Vec3) -> Vector3:
    return Vector3(float(vec.x), float(vec.y), float(vec.z))


def _point(vec: Vec3) -> Point:
    return Point(float(vec.x), float(vec.y))


def hatch_to_region(hatch: DXFGraphic) -> FilledRegion:
    """Convert a HATCH entity to a FilledRegion.

    Polyline boundary paths are split into line and arc edges. Edge paths keep
    their line and arc edges; ellipse and spline edges are counted as
    unsupported. ezdxf normalizes clockwise arc edges to counter-clockwise
    angles when loading, so arc edge angles are used as stored.

    Args:
        hatch: ezdxf Hatch entity

    Returns:
        FilledRegion with one BoundaryLoop per boundary path
    """
    loops: list[BoundaryLoop] = []

    for path in hatch.paths:
        edges: list[LineEdge2D | ArcEdge2D] = []
        unsupported = 0

        if path.type == BoundaryPathType.POLYLINE:
            vertices = tuple(
                PolylineVertex(Point(float(x), float(y)), float(bulge))
                for x, y, bulge in path.vertices
            )
            for span in Polyline(vertices, closed=True).spans():
                if isinstance(span, Segment):
                    edges.append(LineEdge2D(span.start, span.end))
                else:
                    edges.append(
                        ArcEdge2D(span.center, span.radius, span.start_angle, span.end_angle)
                    )
        else:
            for edge in path.edges:
                if edge.type == EdgeType.LINE:
                    edges.append(LineEdge2D(_point(Vec3(edge.start)), _point(Vec3(edge.end))))
                elif edge.type == EdgeType.ARC:
                    edges.append(
                        ArcEdge2D(
                            center=_point(Vec3(edge.center)),
                            radius=float(edge.radius),
                            start_angle=math.radians(edge.start_angle),
                            end_angle=math.radians(edge.end_angle),
                        )
                    )
                else:
                    unsupported += 1

        loops.append(BoundaryLoop(edges=tuple(edges), unsupported=unsupported))

    return FilledRegion(
        loops=tuple(loops),
        elevation=float(Vec3(hatch.dxf.elevation).z),
        normal=_vector(Vec3(hatch.dxf.extrusion)),
        handle=hatch.dxf.handle,
    )


def lwpolyline_to_polyline(entity: DXFGraphic) -> Polyline:
    """Convert an LWPOLYLINE entity to a world-space Polyline.

    Vertices are transformed from the entity's object coordinate system;
    a downward extrusion mirrors the geometry, which flips bulge signs.
    """
    ocs = entity.ocs()
    elevation = float(entity.dxf.elevation)
    flip = -1.0 if Vec3(entity.dxf.extrusion).z < 0 else 1.0

    vertices = []
    for x, y, bulge in entity.get_points("xyb"):
        world = ocs.to_wcs(Vec3(x, y, elevation))
        vertices.append(PolylineVertex(_point(world), flip * float(bulge)))

    return Polyline(tuple(vertices), closed=bool(entity.closed))


def curve_from_dxf(entity: DXFGraphic) -> CurvePrimitive | None:
    """Convert a curve-like ezdxf entity to a primitive.

    Args:
        entity: Any ezdxf graphical entity

    Returns:
        Segment, Arc or Polyline for LINE, ARC, CIRCLE and LWPOLYLINE
        entities; None for anything else
    """
    dxftype = entity.dxftype()

    if dxftype == "LINE":
        return Segment(_point(Vec3(entity.dxf.start)), _point(Vec3(entity.dxf.end)))

    if dxftype in ("ARC", "CIRCLE"):
        center = entity.ocs().to_wcs(Vec3(entity.dxf.center))
        if dxftype == "CIRCLE":
            start, end = 0.0, TAU
        else:
            start = math.radians(entity.dxf.start_angle)
            end = math.radians(entity.dxf.end_angle)
        return Arc(
            center=_point(center),
            radius=float(entity.dxf.radius),
            start_angle=start,
            end_angle=end,
            normal=_vector(Vec3(entity.dxf.extrusion)),
        )

    if dxftype == "LWPOLYLINE":
        return lwpolyline_to_polyline(entity)

    return None


def dxf_to_entity(entity: DXFGraphic) -> BoundaryEntity:
    """Convert an ezdxf entity to the matching boundary entity variant."""
    dxftype = entity.dxftype()

    if dxftype == "HATCH":
        return hatch_to_region(entity)
    if dxftype == "LWPOLYLINE":
        return PolylineEntity(polyline=lwpolyline_to_polyline(entity), handle=entity.dxf.handle)
    return GenericEntity(dxftype=dxftype, handle=entity.dxf.handle, source=entity)


def explode_dxf_entity(entity: GenericEntity) -> Iterator[CurvePrimitive | None]:
    """Decompose a generic entity into its parts.

    Curve entities yield themselves. Other entities are decomposed with
    ezdxf's virtual_entities(); POLYLINE parts are decomposed once more and
    parts that are not curves yield None.
    Entities that cannot be decomposed yield nothing.

    Args:
        entity: GenericEntity whose source is an ezdxf entity
    """
    source = entity.source
    if source is None:
        return

    if source.dxftype() in CURVE_DXFTYPES:
        yield curve_from_dxf(source)
        return

    if not hasattr(source, "virtual_entities"):
        return

    for part in source.virtual_entities():
        # Nested 2D polylines decompose one level further into lines and arcs
        if part.dxftype() == "POLYLINE":
            for span in part.virtual_entities():
                yield curve_from_dxf(span)
        else:
            yield curve_from_dxf(part)
