"""
Pattern instancing.

Places one computed motif at the center of every tile in a tiling and
applies the editing overlay. Nothing is kept between calls; each call
rebuilds the full line list from its inputs.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence
import logging

try:
    from .geometry import Point2D, Polygon, distance_to_segment
    from .motif import Motif, SegmentId, build_motif
    from .overlay import MotifOverlay
except ImportError:
    from geometry import Point2D, Polygon, distance_to_segment
    from motif import Motif, SegmentId, build_motif
    from overlay import MotifOverlay


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternLine:
    """A drawable line of the instanced pattern."""
    start: Point2D
    end: Point2D
    segment_id: SegmentId
    color: Optional[str] = None  # None = renderer default


@dataclass(frozen=True)
class Pattern:
    """Motif of a tiling plus the lines it produces on every tile."""
    motif: Optional[Motif]
    lines: tuple[PatternLine, ...] = field(default_factory=tuple)

    def __len__(self):
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)

    def find_line(self, point: Point2D, tolerance: float) -> Optional[PatternLine]:
        return find_line(self.lines, point, tolerance)


def instance_motif(
    motif: Motif,
    tiles: Sequence[Polygon],
    overlay: Optional[MotifOverlay] = None
) -> list[PatternLine]:
    """
    Translate the visible motif segments onto every tile.

    Lines come out tile by tile in tiling order, and within a tile in
    motif construction order.

    Args:
        motif: Motif in its local (origin centered) frame
        tiles: Tiling polygons; each one's centroid is its placement
        overlay: Hidden ids and color overrides (None = show all)

    Returns:
        List of PatternLine
    """
    overlay = overlay or MotifOverlay()
    visible = [s for s in motif.segments if not overlay.is_hidden(s.segment_id)]

    lines = []
    for tile in tiles:
        center = tile.centroid
        for segment in visible:
            lines.append(PatternLine(
                start=segment.start.translated(center.x, center.y),
                end=segment.end.translated(center.x, center.y),
                segment_id=segment.segment_id,
                color=overlay.color_for(segment.segment_id)
            ))

    return lines


def build_pattern(
    tiles: Sequence[Polygon],
    contact_fraction: float,
    crossing_angle: float,
    overlay: Optional[MotifOverlay] = None
) -> Pattern:
    """
    Compute the motif for a tiling and instance it.

    The motif is derived from the first tile's actual geometry, so it
    always matches the tiling in use. An empty tiling gives an empty
    pattern without a motif.
    """
    if not tiles:
        return Pattern(motif=None, lines=())

    motif = build_motif(tiles[0], contact_fraction, crossing_angle)
    lines = instance_motif(motif, tiles, overlay)

    logger.debug("Pattern: %d tiles x %d segments -> %d lines",
                 len(tiles), len(motif), len(lines))

    return Pattern(motif=motif, lines=tuple(lines))


def find_line(lines: Sequence[PatternLine], point: Point2D, tolerance: float) -> Optional[PatternLine]:
    """First line within `tolerance` of point, in draw order."""
    for line in lines:
        if distance_to_segment(point, line.start, line.end) <= tolerance:
            return line
    return None
