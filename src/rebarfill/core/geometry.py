"""Geometric operations for plane projection and scan-line hits.

This module provides core mathematical utilities for:
- Arbitrary axis algorithm (object coordinate system from a normal)
- Projecting loop-plane points into world space
- Side classification relative to a horizontal line
- Line and circle intersection with a horizontal line

All functions are pure and stateless.
"""

import math

from rebarfill.domain import Point, Vector3

# Threshold used by the DXF arbitrary axis algorithm
_ARBITRARY_AXIS_LIMIT = 1.0 / 64.0

_WORLD_Y = Vector3(0.0, 1.0, 0.0)
_WORLD_Z = Vector3(0.0, 0.0, 1.0)


def arbitrary_axis(normal: Vector3) -> tuple[Vector3, Vector3, Vector3]:
    """Compute the object coordinate system axes for a plane normal.

    Implements the DXF arbitrary axis algorithm, so loop-plane coordinates
    map to world space the same way CAD applications map them.

    Args:
        normal: Plane normal (extrusion direction), any length

    Returns:
        Tuple (ax, ay, az) of unit axis vectors

    Raises:
        ValueError: If normal has zero length

    Examples:
        >>> ax, ay, az = arbitrary_axis(Vector3(0.0, 0.0, 1.0))
        >>> # ax == (1, 0, 0), ay == (0, 1, 0)
        >>> ax, ay, az = arbitrary_axis(Vector3(0.0, 0.0, -1.0))
        >>> # ax == (-1, 0, 0), ay == (0, 1, 0)
    """
    az = normal.normalized()
    if abs(az.x) < _ARBITRARY_AXIS_LIMIT and abs(az.y) < _ARBITRARY_AXIS_LIMIT:
        ax = _WORLD_Y.cross(az).normalized()
    else:
        ax = _WORLD_Z.cross(az).normalized()
    ay = az.cross(ax).normalized()
    return ax, ay, az


def plane_to_world(point: Point, elevation: float, normal: Vector3) -> Vector3:
    """Project a loop-plane point into world space.

    The plane origin is ``(0, 0, elevation)`` in object coordinates.

    Args:
        point: 2D point in plane coordinates
        elevation: Plane elevation along the normal
        normal: Plane normal

    Returns:
        World-space 3D point
    """
    ax, ay, az = arbitrary_axis(normal)
    return Vector3(
        point.x * ax.x + point.y * ay.x + elevation * az.x,
        point.x * ax.y + point.y * ay.y + elevation * az.y,
        point.x * ax.z + point.y * ay.z + elevation * az.z,
    )


def side_of(value: float, reference: float, tolerance: float) -> int:
    """Classify a coordinate as above (+1), below (-1) or on (0) a reference."""
    delta = value - reference
    if delta > tolerance:
        return 1
    if delta < -tolerance:
        return -1
    return 0


def horizontal_line_x(start: Point, end: Point, y: float) -> float:
    """X coordinate where the infinite line through start/end meets height y.

    Raises:
        ZeroDivisionError: If the line is horizontal
    """
    t = (y - start.y) / (end.y - start.y)
    return start.x + t * (end.x - start.x)


def horizontal_circle_offsets(center_y: float, radius: float, y: float, tolerance: float) -> float | None:
    """Half chord length of a circle at height y.

    Args:
        center_y: Circle center Y
        radius: Circle radius
        y: Height of the horizontal line
        tolerance: Distance under which the line counts as tangent

    Returns:
        Non-negative half chord (0.0 for a tangent line), or None if the
        line misses the circle
    """
    dy = y - center_y
    gap = abs(dy) - radius
    if gap > tolerance:
        return None
    if gap >= -tolerance:
        return 0.0
    return math.sqrt(radius * radius - dy * dy)
