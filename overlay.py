"""
Per-segment visibility and color overrides.

An overlay is keyed by SegmentId and shared by every instance of a motif
in a pattern. It is owned by the editing layer and only read by the
instancer. Ids that no longer exist after a motif is recomputed are
ignored.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence
from types import MappingProxyType

try:
    from .motif import Motif, SegmentId
except ImportError:
    from motif import Motif, SegmentId


# Right-click color cycle; None is the pattern's default color
COLOR_CYCLE = (None, '#ff5252', '#69f0ae', '#448aff', '#e040fb')


@dataclass(frozen=True)
class MotifOverlay:
    """Hidden segment ids plus segment id -> color overrides."""
    hidden: frozenset = frozenset()
    colors: MappingProxyType = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        object.__setattr__(self, 'hidden', frozenset(self.hidden))
        object.__setattr__(self, 'colors', MappingProxyType(dict(self.colors)))

    def is_hidden(self, segment_id: SegmentId) -> bool:
        return segment_id in self.hidden

    def color_for(self, segment_id: SegmentId) -> Optional[str]:
        return self.colors.get(segment_id)

    def toggle_hidden(self, segment_id: SegmentId) -> 'MotifOverlay':
        if segment_id in self.hidden:
            hidden = self.hidden - {segment_id}
        else:
            hidden = self.hidden | {segment_id}
        return MotifOverlay(hidden, self.colors)

    def with_color(self, segment_id: SegmentId, color: Optional[str]) -> 'MotifOverlay':
        """Set a color override; None removes it."""
        colors = dict(self.colors)
        if color is None:
            colors.pop(segment_id, None)
        else:
            colors[segment_id] = color
        return MotifOverlay(self.hidden, colors)

    def cycle_color(self, segment_id: SegmentId, palette: Sequence[Optional[str]] = COLOR_CYCLE) -> 'MotifOverlay':
        """
        Advance the segment to the next palette color.

        A segment without an override moves to the first real color; a
        color not in the palette starts over from the default.
        """
        current = self.colors.get(segment_id)
        if current is None:
            next_idx = 1
        elif current in palette:
            next_idx = (list(palette).index(current) + 1) % len(palette)
        else:
            next_idx = 0
        return self.with_color(segment_id, palette[next_idx % len(palette)])

    def orphaned(self, motif: Motif) -> set[SegmentId]:
        """Ids referenced by the overlay that the motif does not have."""
        present = set(motif.ids())
        return (set(self.hidden) | set(self.colors)) - present
