"""
Headless single-tile motif editor.

Shows one large tile centered on an editing canvas. Clicking near a
segment toggles its visibility (left button) or cycles its color (right
button). Hidden segments stay hittable as ghosts so they can be turned
back on. Every change hands the new overlay to the `on_update` callback.
"""

from dataclasses import dataclass
from typing import Callable, Iterator, Optional

try:
    from .geometry import Point2D, regular_polygon
    from .motif import Motif, MotifSegment, SegmentId, build_motif
    from .overlay import MotifOverlay, COLOR_CYCLE
except ImportError:
    from geometry import Point2D, regular_polygon
    from motif import Motif, MotifSegment, SegmentId, build_motif
    from overlay import MotifOverlay, COLOR_CYCLE


HIT_TOLERANCE = 10.0
TILE_SCALE = 0.35  # tile size relative to the smaller canvas side

LEFT_BUTTON = 0
RIGHT_BUTTON = 2

GHOST_COLOR = "#333333"
EDITOR_COLOR = "#bb86fc"


@dataclass(frozen=True)
class LineStyle:
    """How the editor draws one motif segment."""
    color: str
    width: float
    dashed: bool


class MotifEditor:
    """
    Editing surface for the overlay of one motif.

    Example:
        >>> editor = MotifEditor(grid_type="square", crossing_angle=60)
        >>> hit = editor.click(editor.segment_midpoint(editor.motif.ids()[0]))
    """

    def __init__(
        self,
        grid_type: str = "hex",
        contact_fraction: float = 0.25,
        crossing_angle: float = 75.0,
        width: float = 400.0,
        height: float = 400.0,
        overlay: Optional[MotifOverlay] = None,
        on_update: Optional[Callable[[MotifOverlay], None]] = None
    ):
        self.width = width
        self.height = height
        self.on_update = on_update
        self.grid_type = grid_type
        self.contact_fraction = contact_fraction
        self.crossing_angle = crossing_angle
        self.overlay = overlay or MotifOverlay()
        self.motif: Motif = self._build()

    @property
    def center(self) -> Point2D:
        return Point2D(self.width / 2, self.height / 2)

    @property
    def tile_size(self) -> float:
        return min(self.width, self.height) * TILE_SCALE

    def _build(self) -> Motif:
        if self.grid_type == "square":
            # Square spans center +/- tile_size
            tile = regular_polygon(4, 2 * self.tile_size)
        else:
            tile = regular_polygon(6, self.tile_size)
        return build_motif(tile, self.contact_fraction, self.crossing_angle)

    def set_params(
        self,
        grid_type: Optional[str] = None,
        contact_fraction: Optional[float] = None,
        crossing_angle: Optional[float] = None,
        overlay: Optional[MotifOverlay] = None
    ) -> None:
        """Replace parameters (and optionally the overlay) and recompute the motif."""
        if grid_type is not None:
            self.grid_type = grid_type
        if contact_fraction is not None:
            self.contact_fraction = contact_fraction
        if crossing_angle is not None:
            self.crossing_angle = crossing_angle
        if overlay is not None:
            self.overlay = overlay
        self.motif = self._build()

    def canvas_segments(self) -> list[MotifSegment]:
        """All motif segments, hidden ones included, in canvas coordinates."""
        c = self.center
        return [s.translated(c.x, c.y) for s in self.motif.segments]

    def segment_midpoint(self, segment_id: SegmentId) -> Optional[Point2D]:
        """Canvas midpoint of a segment, or None if the motif lacks it."""
        segment = self.motif.get(segment_id)
        if segment is None:
            return None
        return segment.edge.midpoint.translated(self.center.x, self.center.y)

    def find_hit(self, point: Point2D) -> Optional[SegmentId]:
        """Segment id under a canvas point, hidden segments included."""
        local = point.translated(-self.center.x, -self.center.y)
        segment = self.motif.find_segment(local, HIT_TOLERANCE)
        return segment.segment_id if segment is not None else None

    def click(self, point: Point2D, button: int = LEFT_BUTTON) -> Optional[SegmentId]:
        """
        Apply a click at a canvas point.

        Returns:
            The id of the segment that was hit, or None.
        """
        hit = self.find_hit(point)
        if hit is None:
            return None

        if button == LEFT_BUTTON:
            self.overlay = self.overlay.toggle_hidden(hit)
        elif button == RIGHT_BUTTON:
            self.overlay = self.overlay.cycle_color(hit, COLOR_CYCLE)
        else:
            return hit

        if self.on_update is not None:
            self.on_update(self.overlay)
        return hit

    def line_styles(self) -> Iterator[tuple[MotifSegment, LineStyle]]:
        """Each canvas segment with the style the editor draws it in."""
        for segment in self.canvas_segments():
            if self.overlay.is_hidden(segment.segment_id):
                yield segment, LineStyle(GHOST_COLOR, 1.0, True)
            else:
                color = self.overlay.color_for(segment.segment_id) or EDITOR_COLOR
                yield segment, LineStyle(color, 4.0, False)
