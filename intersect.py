"""
Ray and segment intersection.

Both routines report degenerate input (parallel directions, crossings
outside the valid parameter range) as None rather than raising.
"""

from typing import NamedTuple, Optional
import math

try:
    from .geometry import Point2D
except ImportError:
    from geometry import Point2D


# Determinant of two unit direction vectors, i.e. sin of the angle between
# the rays. Independent of coordinate scale.
PARALLEL_TOLERANCE = 1e-5

# Segment determinant below which segments count as parallel
SEGMENT_PARALLEL_EPS = 1e-10


class SegmentCrossing(NamedTuple):
    """Crossing of two segments with its normalized position along each."""
    point: Point2D
    t: float  # along the first segment
    u: float  # along the second segment


def ray_intersection(
    origin1: Point2D,
    angle1: float,
    origin2: Point2D,
    angle2: float,
    tolerance: float = PARALLEL_TOLERANCE
) -> Optional[Point2D]:
    """
    Find where two forward rays meet.

    Args:
        origin1: Start of the first ray
        angle1: Direction of the first ray in radians
        origin2: Start of the second ray
        angle2: Direction of the second ray in radians
        tolerance: Minimum |det| of the unit directions; below it the rays
            are treated as parallel

    Returns:
        The meeting point, or None if the rays are (near) parallel or meet
        behind either origin.
    """
    vx1, vy1 = math.cos(angle1), math.sin(angle1)
    vx2, vy2 = math.cos(angle2), math.sin(angle2)

    det = vx1 * vy2 - vy1 * vx2
    if abs(det) < tolerance:
        return None

    dx = origin2.x - origin1.x
    dy = origin2.y - origin1.y

    # origin1 + t*v1 = origin2 + u*v2
    t = (dx * vy2 - dy * vx2) / det
    u = (dx * vy1 - dy * vx1) / det

    if t < 0 or u < 0:
        return None

    return Point2D(origin1.x + t * vx1, origin1.y + t * vy1)


def segment_intersection(
    a_start: Point2D,
    a_end: Point2D,
    b_start: Point2D,
    b_end: Point2D
) -> Optional[SegmentCrossing]:
    """
    Find the crossing of segments a and b.

    Collinear overlaps are reported as no intersection, like any other
    parallel pair.

    Returns:
        SegmentCrossing(point, t, u) with t and u in [0, 1], or None.
    """
    ax = a_end.x - a_start.x
    ay = a_end.y - a_start.y
    bx = b_end.x - b_start.x
    by = b_end.y - b_start.y

    denom = ax * by - ay * bx
    if abs(denom) < SEGMENT_PARALLEL_EPS:
        return None

    dx = b_start.x - a_start.x
    dy = b_start.y - a_start.y

    t = (dx * by - dy * bx) / denom
    u = (dx * ay - dy * ax) / denom

    if t < 0 or t > 1 or u < 0 or u > 1:
        return None

    point = Point2D(a_start.x + t * ax, a_start.y + t * ay)
    return SegmentCrossing(point, t, u)
