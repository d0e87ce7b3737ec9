"""Boundary extraction.

Converts a drawing entity into the flat list of curve primitives that bound
it. Filled regions are projected loop by loop through their plane, polylines
are passed through unchanged, and anything else is exploded through an
injected capability and filtered down to curves.
"""

from collections.abc import Callable, Iterable

import structlog

from rebarfill.core.geometry import plane_to_world
from rebarfill.domain import (
    CURVE_TYPES,
    Arc,
    ArcEdge2D,
    BoundaryEntity,
    CurvePrimitive,
    FilledRegion,
    GenericEntity,
    LineEdge2D,
    Point,
    PolylineEntity,
    Segment,
)
from rebarfill.exceptions import NoBoundaryFoundError

logger = structlog.get_logger(__name__)

Exploder = Callable[[GenericEntity], Iterable[object]]


def _no_explode(entity: GenericEntity) -> Iterable[object]:
    return ()


class BoundaryExtractor:
    """Extracts boundary curve primitives from entity variants.

    The extractor is stateless; the explode capability is supplied by the
    I/O layer that knows the host drawing format.

    Example:
        extractor = BoundaryExtractor(explode=explode_dxf_entity)
        primitives = extractor.extract(entity)
    """

    def __init__(self, explode: Exploder | None = None) -> None:
        """Initialize the extractor.

        Args:
            explode: Callable decomposing a GenericEntity into parts;
                parts that are not curve primitives are discarded
        """
        self._explode = explode or _no_explode

    def extract(self, entity: BoundaryEntity) -> list[CurvePrimitive]:
        """Extract the boundary of an entity.

        Args:
            entity: Entity variant to extract from

        Returns:
            Curve primitives in extraction order

        Raises:
            NoBoundaryFoundError: If no curve primitive could be extracted
        """
        match entity:
            case FilledRegion():
                primitives = self._from_region(entity)
            case PolylineEntity():
                primitives = [entity.polyline]
            case GenericEntity():
                primitives = self._from_generic(entity)
            case _:
                raise TypeError(f"Unsupported entity variant: {type(entity).__name__}")

        if not primitives:
            raise NoBoundaryFoundError(entity.dxftype, entity.handle)

        logger.debug(
            "Boundary extracted",
            entity_type=entity.dxftype,
            handle=entity.handle,
            primitives=len(primitives),
        )
        return primitives

    def _from_region(self, region: FilledRegion) -> list[CurvePrimitive]:
        primitives: list[CurvePrimitive] = []

        for loop_idx, loop in enumerate(region.loops):
            if loop.unsupported:
                logger.warning(
                    "Skipped unsupported loop edges",
                    handle=region.handle,
                    loop=loop_idx,
                    skipped=loop.unsupported,
                )
            for edge in loop.edges:
                if isinstance(edge, LineEdge2D):
                    primitives.append(
                        Segment(
                            self._project(edge.start, region),
                            self._project(edge.end, region),
                        )
                    )
                elif isinstance(edge, ArcEdge2D):
                    primitives.append(
                        Arc(
                            center=self._project(edge.center, region),
                            radius=edge.radius,
                            start_angle=edge.start_angle,
                            end_angle=edge.end_angle,
                            normal=region.normal,
                        )
                    )

        return primitives

    def _from_generic(self, entity: GenericEntity) -> list[CurvePrimitive]:
        primitives: list[CurvePrimitive] = []
        discarded = 0

        for part in self._explode(entity):
            if isinstance(part, CURVE_TYPES):
                primitives.append(part)
            else:
                discarded += 1

        if discarded:
            logger.debug("Discarded non-curve parts", handle=entity.handle, discarded=discarded)
        return primitives

    @staticmethod
    def _project(point: Point, region: FilledRegion) -> Point:
        world = plane_to_world(point, region.elevation, region.normal)
        return Point(world.x, world.y)
