"""
Square and hexagonal tilings of a rectangular canvas.

The grids overscan the canvas by one tile on every side so that the
pattern reaches the canvas border. Every tile is a regular polygon built
by geometry.regular_polygon, so tiles share the orientation of the motif
frame.
"""

import math

try:
    from .geometry import Polygon, regular_polygon
except ImportError:
    from geometry import Polygon, regular_polygon


GRID_TYPES = ("square", "hex")


def square_grid(width: float, height: float, size: float) -> list[Polygon]:
    """
    Cover width x height with squares of edge `size`, centered on the canvas.

    Tiles are ordered column by column.
    """
    cols = math.ceil(width / size) + 1
    rows = math.ceil(height / size) + 1

    # Center the grid
    x_offset = (width - cols * size) / 2
    y_offset = (height - rows * size) / 2

    tiles = []
    for i in range(-1, cols):
        for j in range(-1, rows):
            x = i * size + x_offset
            y = j * size + y_offset
            tiles.append(regular_polygon(4, size, (x + size / 2, y + size / 2)))
    return tiles


def hex_grid(width: float, height: float, size: float) -> list[Polygon]:
    """
    Cover width x height with pointy-top hexagons of edge `size`.

    Odd rows are shifted right by half a column. Tiles are ordered row by row.
    """
    pitch = size * math.sqrt(3)

    cols = math.ceil(width / pitch) + 2
    rows = math.ceil(height / (size * 1.5)) + 2

    # Center offsets roughly
    start_x = (width - cols * pitch) / 2
    start_y = (height - rows * size * 1.5) / 2

    tiles = []
    for row in range(-1, rows):
        for col in range(-1, cols):
            x_offset = pitch / 2 if row % 2 != 0 else 0
            cx = start_x + col * pitch + x_offset
            cy = start_y + row * size * 1.5
            tiles.append(regular_polygon(6, size, (cx, cy)))
    return tiles


def create_grid(grid_type: str, width: float, height: float, size: float) -> list[Polygon]:
    """Build a tiling by name ('square' or 'hex')."""
    if size <= 0:
        raise ValueError(f"Tile size must be positive, got {size}")
    if grid_type == "square":
        return square_grid(width, height, size)
    if grid_type == "hex":
        return hex_grid(width, height, size)
    raise ValueError(f"Unknown grid type {grid_type!r}, expected one of {GRID_TYPES}")
