"""Pytest fixtures for star pattern tests."""

import pytest
import sys
from pathlib import Path

# Add project directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend

from geometry import Polygon, regular_polygon


@pytest.fixture
def square() -> Polygon:
    """Square of side 200 centered at the origin (vertices at +/-100)."""
    return regular_polygon(4, 200)


@pytest.fixture
def hexagon() -> Polygon:
    """Hexagon of edge 100 centered at the origin."""
    return regular_polygon(6, 100)


@pytest.fixture
def square_tiles() -> list[Polygon]:
    """Two squares side by side."""
    return [
        regular_polygon(4, 100, (50, 50)),
        regular_polygon(4, 100, (150, 50)),
    ]
