"""
Primitive plane geometry for motif construction.

Points, edges and polygons carry no behavior beyond derived measurements.
Polygon vertex order is the winding order: it decides which neighbors are
"previous" and "next" at every corner.
"""

from dataclasses import dataclass
from typing import Iterable
import math


@dataclass(frozen=True)
class Point2D:
    """A 2D point."""
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def translated(self, dx: float, dy: float) -> 'Point2D':
        return Point2D(self.x + dx, self.y + dy)

    def distance_to(self, other: 'Point2D') -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass
class BoundingBox:
    """Axis-aligned bounding box."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> tuple[float, float]:
        return (
            (self.min_x + self.max_x) / 2,
            (self.min_y + self.max_y) / 2
        )

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def expand(self, margin: float) -> 'BoundingBox':
        return BoundingBox(
            self.min_x - margin,
            self.min_y - margin,
            self.max_x + margin,
            self.max_y + margin
        )

    def union(self, other: 'BoundingBox') -> 'BoundingBox':
        return BoundingBox(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y)
        )


@dataclass(frozen=True)
class Edge:
    """A straight edge between two points."""
    start: Point2D
    end: Point2D

    @property
    def length(self) -> float:
        dx = self.end.x - self.start.x
        dy = self.end.y - self.start.y
        return math.sqrt(dx * dx + dy * dy)

    @property
    def angle(self) -> float:
        """Angle in radians."""
        return math.atan2(self.end.y - self.start.y, self.end.x - self.start.x)

    @property
    def midpoint(self) -> Point2D:
        return self.point_at(0.5)

    def point_at(self, t: float) -> Point2D:
        """Linear interpolation: t=0 is start, t=1 is end."""
        return Point2D(
            self.start.x + (self.end.x - self.start.x) * t,
            self.start.y + (self.end.y - self.start.y) * t
        )

    def distance_to_point(self, point: Point2D) -> float:
        return distance_to_segment(point, self.start, self.end)


@dataclass(frozen=True)
class Polygon:
    """
    A 2D polygon defined by an ordered tuple of vertices.

    The vertex count is fixed at construction. Centroid and edges are
    derived, never stored, so every polygon carries them consistently.
    """
    vertices: tuple[Point2D, ...]

    def __post_init__(self):
        vertices = tuple(
            v if isinstance(v, Point2D) else Point2D(*v) for v in self.vertices
        )
        if len(vertices) < 3:
            raise ValueError(f"Polygon needs at least 3 vertices, got {len(vertices)}")
        object.__setattr__(self, 'vertices', vertices)

    @classmethod
    def from_tuples(cls, points: Iterable[tuple[float, float]]) -> 'Polygon':
        return cls(tuple(Point2D(x, y) for x, y in points))

    def __len__(self):
        return len(self.vertices)

    def __getitem__(self, index):
        return self.vertices[index]

    def __iter__(self):
        return iter(self.vertices)

    @property
    def centroid(self) -> Point2D:
        x = sum(v.x for v in self.vertices) / len(self.vertices)
        y = sum(v.y for v in self.vertices) / len(self.vertices)
        return Point2D(x, y)

    @property
    def bounding_box(self) -> BoundingBox:
        xs = [v.x for v in self.vertices]
        ys = [v.y for v in self.vertices]
        return BoundingBox(min(xs), min(ys), max(xs), max(ys))

    @property
    def signed_area(self) -> float:
        """Shoelace area: positive for counter-clockwise winding (y up)."""
        n = len(self.vertices)
        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += self.vertices[i].x * self.vertices[j].y
            area -= self.vertices[j].x * self.vertices[i].y
        return area / 2.0

    @property
    def edge_length(self) -> float:
        """Length of the first edge; the size of a regular polygon."""
        return self.edges()[0].length

    def edges(self) -> list[Edge]:
        """Consecutive vertex pairs, including the wrap-around edge."""
        n = len(self.vertices)
        return [Edge(self.vertices[i], self.vertices[(i + 1) % n]) for i in range(n)]

    def contains(self, point: Point2D) -> bool:
        """Ray casting point-in-polygon test."""
        x, y = point
        n = len(self.vertices)
        inside = False

        j = n - 1
        for i in range(n):
            xi, yi = self.vertices[i]
            xj, yj = self.vertices[j]

            if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
                inside = not inside
            j = i

        return inside

    def translated(self, dx: float, dy: float) -> 'Polygon':
        return Polygon(tuple(v.translated(dx, dy) for v in self.vertices))

    def recentered(self) -> 'Polygon':
        """Same shape, translated so the centroid sits at the origin."""
        c = self.centroid
        return self.translated(-c.x, -c.y)


def regular_polygon(sides: int, size: float, center: tuple[float, float] = (0.0, 0.0)) -> Polygon:
    """
    Build a regular polygon with edge length `size`.

    Squares are axis-aligned with vertices ordered (-,-), (+,-), (+,+), (-,+)
    around the center. Other polygons start at 30 degrees, so a hexagon has
    vertex k at 30 + 60*k degrees and circumradius equal to its edge length.
    """
    if sides < 3:
        raise ValueError(f"A polygon needs at least 3 sides, got {sides}")

    cx, cy = center

    if sides == 4:
        h = size / 2
        return Polygon((
            Point2D(cx - h, cy - h),
            Point2D(cx + h, cy - h),
            Point2D(cx + h, cy + h),
            Point2D(cx - h, cy + h),
        ))

    radius = size / (2 * math.sin(math.pi / sides))
    vertices = []
    for k in range(sides):
        theta = math.radians(30 + 360 * k / sides)
        vertices.append(Point2D(
            cx + radius * math.cos(theta),
            cy + radius * math.sin(theta)
        ))
    return Polygon(tuple(vertices))


def distance_to_segment(point: Point2D, a: Point2D, b: Point2D) -> float:
    """Distance from point to segment a-b (projection clamped to [0, 1])."""
    dx = b.x - a.x
    dy = b.y - a.y
    length_sq = dx * dx + dy * dy

    if length_sq == 0:
        # Segment is a point
        return math.hypot(point.x - a.x, point.y - a.y)

    t = ((point.x - a.x) * dx + (point.y - a.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    proj_x = a.x + t * dx
    proj_y = a.y + t * dy

    return math.hypot(point.x - proj_x, point.y - proj_y)
