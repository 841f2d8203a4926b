"""
Motif construction by the polygons-in-contact method.

For every corner of a polygon, two construction rays start at contact
points on the adjoining edges and are rotated inward by the crossing
angle. Where the pair meets, the corner contributes two raw segments.
The raw segments of the whole motif are then split wherever they cross
each other, and every resulting piece gets a SegmentId that stays the
same as long as the trimming topology does not change.

Algorithm:
1. Per corner i: contact points c1/c2 at `contact_fraction` toward the
   previous/next vertex, edge angles ang1/ang2
2. Turn sign from ang2 - ang1 normalized to (-pi, pi]; positive turns
   rotate ray 1 by +theta and ray 2 by -theta, negative turns the reverse
3. Ray intersection gives raw segments (c1 -> X) and (c2 -> X) with base
   identities 2i and 2i+1
4. Pairwise crossing of all raw segments; interior positions become splits
5. Each raw segment is emitted as consecutive pieces between sorted splits

The pairwise pass is quadratic, which is fine for the 2 x sides raw
segments of one motif. It runs once per motif in the local frame, never
over an instanced pattern.
"""

from dataclasses import dataclass
from itertools import combinations
from typing import NamedTuple, Optional
import logging
import math

try:
    from .geometry import Point2D, Edge, Polygon, regular_polygon, distance_to_segment
    from .intersect import ray_intersection, segment_intersection
except ImportError:
    from geometry import Point2D, Edge, Polygon, regular_polygon, distance_to_segment
    from intersect import ray_intersection, segment_intersection


logger = logging.getLogger(__name__)

# Crossings closer than this (in segment parameter) to an endpoint are
# touches, not splits. Contact points shared by neighboring rays hit this.
SPLIT_EPSILON = 0.001

# Split parameters closer than this are the same split
SPLIT_MERGE_EPS = 1e-9


class SegmentId(NamedTuple):
    """
    Identity of one trimmed piece of a motif.

    corner: polygon corner that emitted the ray
    side: 0 for the ray from the previous-edge contact, 1 for the next-edge one
    piece: zero-based index of the piece along the raw segment
    """
    corner: int
    side: int
    piece: int

    @property
    def base(self) -> int:
        return 2 * self.corner + self.side

    def __str__(self):
        return f"{self.base}_{self.piece}"

    @classmethod
    def parse(cls, text: str) -> 'SegmentId':
        """Parse the "<base>_<piece>" form, e.g. "7_2"."""
        base_text, sep, piece_text = text.strip().partition('_')
        if not sep:
            raise ValueError(f"Segment id must look like '<base>_<piece>', got {text!r}")
        try:
            base = int(base_text)
            piece = int(piece_text)
        except ValueError:
            raise ValueError(f"Segment id must look like '<base>_<piece>', got {text!r}") from None
        if base < 0 or piece < 0:
            raise ValueError(f"Segment id parts cannot be negative, got {text!r}")
        return cls(base // 2, base % 2, piece)


@dataclass(frozen=True)
class RawSegment:
    """Untrimmed construction segment from a contact point to a ray crossing."""
    start: Point2D
    end: Point2D
    corner: int
    side: int

    @property
    def base(self) -> int:
        return 2 * self.corner + self.side

    @property
    def edge(self) -> Edge:
        return Edge(self.start, self.end)


@dataclass(frozen=True)
class MotifSegment:
    """A trimmed piece of a raw segment."""
    start: Point2D
    end: Point2D
    segment_id: SegmentId

    @property
    def edge(self) -> Edge:
        return Edge(self.start, self.end)

    @property
    def length(self) -> float:
        return self.edge.length

    def translated(self, dx: float, dy: float) -> 'MotifSegment':
        return MotifSegment(
            self.start.translated(dx, dy),
            self.end.translated(dx, dy),
            self.segment_id
        )


@dataclass(frozen=True)
class Motif:
    """
    Trimmed segments of one polygon, in a frame centered at the origin.

    A motif is replaced as a whole whenever shape, size, contact fraction
    or crossing angle change.
    """
    polygon: Polygon
    contact_fraction: float
    crossing_angle: float  # degrees
    raw_segments: tuple[RawSegment, ...]
    segments: tuple[MotifSegment, ...]

    def __len__(self):
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)

    def ids(self) -> list[SegmentId]:
        return [s.segment_id for s in self.segments]

    def get(self, segment_id: SegmentId) -> Optional[MotifSegment]:
        for segment in self.segments:
            if segment.segment_id == segment_id:
                return segment
        return None

    def corner_points(self) -> dict[int, Point2D]:
        """Ray crossing point of every corner that produced one."""
        return {raw.corner: raw.end for raw in self.raw_segments}

    def find_segment(self, point: Point2D, tolerance: float) -> Optional[MotifSegment]:
        """
        First segment within `tolerance` of point, in construction order.

        Which of two overlapping segments is returned is not defined.
        """
        for segment in self.segments:
            if distance_to_segment(point, segment.start, segment.end) <= tolerance:
                return segment
        return None


def _normalize_angle(angle: float) -> float:
    """Normalize an angle into (-pi, pi]."""
    while angle <= -math.pi:
        angle += 2 * math.pi
    while angle > math.pi:
        angle -= 2 * math.pi
    return angle


def corner_construction(
    polygon: Polygon,
    contact_fraction: float,
    crossing_angle: float
) -> list[RawSegment]:
    """
    Build the raw construction segments of every corner.

    Args:
        polygon: Polygon in its winding order
        contact_fraction: Position of the contact points along each edge,
            measured from the corner (0 < t <= 0.5 for sensible output)
        crossing_angle: Inward rotation of the rays in degrees (0 < theta < 90)

    Returns:
        Two raw segments per corner whose rays meet; none for the others.
    """
    angle_rad = math.radians(crossing_angle)
    vertices = polygon.vertices
    n = len(vertices)
    raw = []

    for i in range(n):
        curr_v = vertices[i]
        prev_v = vertices[(i - 1) % n]
        next_v = vertices[(i + 1) % n]

        # Edge vectors pointing away from the corner
        v1 = (prev_v.x - curr_v.x, prev_v.y - curr_v.y)
        v2 = (next_v.x - curr_v.x, next_v.y - curr_v.y)

        c1 = Point2D(curr_v.x + v1[0] * contact_fraction, curr_v.y + v1[1] * contact_fraction)
        c2 = Point2D(curr_v.x + v2[0] * contact_fraction, curr_v.y + v2[1] * contact_fraction)

        ang1 = math.atan2(v1[1], v1[0])
        ang2 = math.atan2(v2[1], v2[0])

        # Positive: edge 2 lies counter-clockwise of edge 1, so inward is
        # +theta from edge 1 and -theta from edge 2
        if _normalize_angle(ang2 - ang1) > 0:
            r1a = ang1 + angle_rad
            r2a = ang2 - angle_rad
        else:
            r1a = ang1 - angle_rad
            r2a = ang2 + angle_rad

        crossing = ray_intersection(c1, r1a, c2, r2a)
        if crossing is None:
            logger.debug("Corner %d: construction rays do not meet", i)
            continue

        raw.append(RawSegment(c1, crossing, i, 0))
        raw.append(RawSegment(c2, crossing, i, 1))

    return raw


def _split_parameters(values: list[float]) -> list[float]:
    """Sort split parameters and merge the ones that coincide."""
    result = []
    for value in sorted(values):
        if result and value - result[-1] < SPLIT_MERGE_EPS:
            continue
        result.append(value)
    return result


def trim_segments(raw_segments: list[RawSegment]) -> list[MotifSegment]:
    """
    Split raw segments wherever they cross each other.

    Every raw segment has implicit splits at 0 and 1. A crossing adds a
    split to both segments involved when its position lies strictly in
    (SPLIT_EPSILON, 1 - SPLIT_EPSILON) on that segment.

    Returns:
        Pieces in raw segment order, then in order along each raw segment.
    """
    splits = [[0.0, 1.0] for _ in raw_segments]

    for i, j in combinations(range(len(raw_segments)), 2):
        a = raw_segments[i]
        b = raw_segments[j]
        crossing = segment_intersection(a.start, a.end, b.start, b.end)
        if crossing is None:
            continue
        if SPLIT_EPSILON < crossing.t < 1 - SPLIT_EPSILON:
            splits[i].append(crossing.t)
        if SPLIT_EPSILON < crossing.u < 1 - SPLIT_EPSILON:
            splits[j].append(crossing.u)

    pieces = []
    for raw, params in zip(raw_segments, splits):
        params = _split_parameters(params)
        edge = raw.edge
        for k in range(len(params) - 1):
            pieces.append(MotifSegment(
                edge.point_at(params[k]),
                edge.point_at(params[k + 1]),
                SegmentId(raw.corner, raw.side, k)
            ))

    return pieces


def build_motif(polygon: Polygon, contact_fraction: float, crossing_angle: float) -> Motif:
    """
    Compute the motif of a polygon.

    The polygon is moved so its centroid is the origin; its shape, size
    and winding are kept. Out-of-range parameters are not rejected and may
    give an empty or self-overlapping motif.
    """
    local = polygon.recentered()
    raw = corner_construction(local, contact_fraction, crossing_angle)
    segments = trim_segments(raw)

    logger.debug(
        "Motif for %d-gon (t=%s, angle=%s): %d raw, %d trimmed segments",
        len(local), contact_fraction, crossing_angle, len(raw), len(segments)
    )

    return Motif(
        polygon=local,
        contact_fraction=contact_fraction,
        crossing_angle=crossing_angle,
        raw_segments=tuple(raw),
        segments=tuple(segments)
    )


def build_motif_for_shape(
    sides: int,
    size: float,
    contact_fraction: float,
    crossing_angle: float
) -> Motif:
    """Compute the motif of a regular polygon with edge length `size`."""
    return build_motif(regular_polygon(sides, size), contact_fraction, crossing_angle)
