"""
Drawing of star patterns with matplotlib.

Canvas coordinates have y pointing down, so the axes are inverted to
show patterns the way the tiling lays them out.
"""

from typing import Optional, Sequence
import logging

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection

try:
    from .geometry import Polygon
    from .pattern import Pattern, PatternLine
    from .config import PatternConfig
except ImportError:
    from geometry import Polygon
    from pattern import Pattern, PatternLine
    from config import PatternConfig


logger = logging.getLogger(__name__)

PIXELS_PER_INCH = 100


def lines_to_array(lines: Sequence[PatternLine]) -> np.ndarray:
    """Endpoints as an (N, 2, 2) array, as LineCollection expects."""
    if not lines:
        return np.zeros((0, 2, 2))
    return np.array([
        [[line.start.x, line.start.y], [line.end.x, line.end.y]]
        for line in lines
    ], dtype=float)


def draw_tiles(ax, tiles: Sequence[Polygon], color: str, linewidth: float = 1.0) -> None:
    """Draw tile outlines (the construction grid)."""
    for tile in tiles:
        outline = plt.Polygon([v.to_tuple() for v in tile], closed=True,
                              fill=False, edgecolor=color, linewidth=linewidth)
        ax.add_patch(outline)


def draw_pattern(ax, lines: Sequence[PatternLine], default_color: str,
                 linewidth: float = 2.0) -> Optional[LineCollection]:
    """Draw pattern lines, each in its override color or the default."""
    if not lines:
        return None
    colors = [line.color or default_color for line in lines]
    collection = LineCollection(lines_to_array(lines), colors=colors,
                                linewidths=linewidth, capstyle='round')
    ax.add_collection(collection)
    return collection


def render_pattern(pattern: Pattern, tiles: Sequence[Polygon], config: PatternConfig):
    """
    Render a pattern on a figure sized to the configured canvas.

    Returns:
        matplotlib Figure (caller closes it)
    """
    fig, ax = plt.subplots(figsize=(config.width / PIXELS_PER_INCH,
                                    config.height / PIXELS_PER_INCH))
    fig.patch.set_facecolor(config.background_color)
    ax.set_facecolor(config.background_color)

    if config.show_construction:
        draw_tiles(ax, tiles, config.construction_color)

    draw_pattern(ax, pattern.lines, config.pattern_color, config.line_width)

    ax.set_xlim(0, config.width)
    ax.set_ylim(config.height, 0)
    ax.set_aspect('equal')
    ax.axis('off')
    fig.subplots_adjust(left=0, right=1, top=1, bottom=0)

    return fig


def save_pattern(filename, pattern: Pattern, tiles: Sequence[Polygon], config: PatternConfig) -> None:
    """Render a pattern and save it; the file extension picks the format."""
    fig = render_pattern(pattern, tiles, config)
    try:
        fig.savefig(filename, dpi=PIXELS_PER_INCH, facecolor=fig.get_facecolor())
    finally:
        plt.close(fig)
    logger.debug("Saved %d lines to %s", len(pattern.lines), filename)
