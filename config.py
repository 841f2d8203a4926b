"""
Configuration for star pattern generation.

Defines tiling, motif and drawing settings plus the clamping ranges the
calling layer applies before handing parameters to the motif builder.
"""

from dataclasses import dataclass, replace
import json
from pathlib import Path

try:
    from .tiling import GRID_TYPES
except ImportError:
    from tiling import GRID_TYPES


# Caller-side parameter ranges (the motif builder itself never clamps)
TILE_COUNT_RANGE = (2, 36)
CONTACT_FRACTION_RANGE = (0.0, 0.5)
CROSSING_ANGLE_RANGE = (15.0, 89.0)


def _clamp(value, bounds):
    low, high = bounds
    return max(low, min(high, value))


@dataclass
class PatternConfig:
    """
    Configuration for one star pattern.

    Attributes:
        grid_type: Tiling, 'square' or 'hex'
        tile_count: Tiles across the canvas width (sets the tile size)
        contact_fraction: Contact point position along each edge, from the corner
        crossing_angle: Inward rotation of the construction rays in degrees
        width: Canvas width in drawing units
        height: Canvas height in drawing units
        pattern_color: Default line color
        construction_color: Color of the tiling outlines
        background_color: Canvas fill
        show_construction: Draw the tiling outlines under the pattern
        line_width: Pattern line width in points
    """
    # Tiling
    grid_type: str = "square"
    tile_count: int = 8

    # Motif
    contact_fraction: float = 0.25
    crossing_angle: float = 60.0  # degrees

    # Canvas
    width: float = 800.0
    height: float = 800.0

    # Drawing
    pattern_color: str = "#00bcd4"
    construction_color: str = "#555555"
    background_color: str = "#1a1a1a"
    show_construction: bool = False
    line_width: float = 2.0

    def validate(self) -> list[str]:
        """
        Validate configuration values.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if self.grid_type not in GRID_TYPES:
            errors.append(f"grid_type must be one of {GRID_TYPES}, got {self.grid_type!r}")

        if self.tile_count < 1:
            errors.append(f"tile_count must be >= 1, got {self.tile_count}")

        if not 0 < self.contact_fraction <= 0.5:
            errors.append(f"contact_fraction must be in (0, 0.5], got {self.contact_fraction}")

        if not 0 < self.crossing_angle < 90:
            errors.append(f"crossing_angle must be in (0, 90) degrees, got {self.crossing_angle}")

        if self.width <= 0 or self.height <= 0:
            errors.append(f"canvas size must be positive, got {self.width} x {self.height}")

        if self.line_width <= 0:
            errors.append(f"line_width must be positive, got {self.line_width}")

        return errors

    def clamped(self) -> "PatternConfig":
        """Copy with tile count, contact fraction and angle clamped to the input ranges."""
        return replace(
            self,
            tile_count=int(_clamp(self.tile_count, TILE_COUNT_RANGE)),
            contact_fraction=_clamp(self.contact_fraction, CONTACT_FRACTION_RANGE),
            crossing_angle=_clamp(self.crossing_angle, CROSSING_ANGLE_RANGE),
        )

    @property
    def grid_size(self) -> float:
        """Tile edge length for the current canvas width and tile count."""
        return self.width / self.tile_count

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "grid_type": self.grid_type,
            "tile_count": self.tile_count,
            "contact_fraction": self.contact_fraction,
            "crossing_angle": self.crossing_angle,
            "width": self.width,
            "height": self.height,
            "pattern_color": self.pattern_color,
            "construction_color": self.construction_color,
            "background_color": self.background_color,
            "show_construction": self.show_construction,
            "line_width": self.line_width,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PatternConfig":
        """Create from dictionary."""
        defaults = cls()
        return cls(
            grid_type=data.get("grid_type", defaults.grid_type),
            tile_count=int(data.get("tile_count", defaults.tile_count)),
            contact_fraction=float(data.get("contact_fraction", defaults.contact_fraction)),
            crossing_angle=float(data.get("crossing_angle", defaults.crossing_angle)),
            width=float(data.get("width", defaults.width)),
            height=float(data.get("height", defaults.height)),
            pattern_color=data.get("pattern_color", defaults.pattern_color),
            construction_color=data.get("construction_color", defaults.construction_color),
            background_color=data.get("background_color", defaults.background_color),
            show_construction=bool(data.get("show_construction", defaults.show_construction)),
            line_width=float(data.get("line_width", defaults.line_width)),
        )

    def save(self, filepath: Path | str) -> None:
        """Save configuration to JSON file."""
        filepath = Path(filepath)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: Path | str) -> "PatternConfig":
        """Load configuration from JSON file."""
        filepath = Path(filepath)
        if not filepath.exists():
            return cls()  # Return defaults if file doesn't exist

        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)


# Parameter presets for common looks
GRID_PRESETS = {
    "square-star": {"grid_type": "square", "contact_fraction": 0.25, "crossing_angle": 60.0},
    "square-lattice": {"grid_type": "square", "contact_fraction": 0.5, "crossing_angle": 67.5},
    "hex-star": {"grid_type": "hex", "contact_fraction": 0.25, "crossing_angle": 75.0},
    "hex-rosette": {"grid_type": "hex", "contact_fraction": 0.4, "crossing_angle": 80.0},
}
