"""Extents of a set of boundary primitives."""

from collections.abc import Sequence

from rebarfill.domain import CurvePrimitive, Extents


def compute_extents(primitives: Sequence[CurvePrimitive]) -> Extents:
    """Merge the bounding boxes of all primitives into one.

    Args:
        primitives: Non-empty sequence of curve primitives

    Returns:
        Smallest axis-aligned box enclosing every primitive

    Raises:
        ValueError: If primitives is empty
    """
    if not primitives:
        raise ValueError("Cannot compute extents of an empty boundary")

    extents = primitives[0].bounding_box()
    for primitive in primitives[1:]:
        extents = extents.merge(primitive.bounding_box())
    return extents
