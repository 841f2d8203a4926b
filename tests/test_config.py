"""Unit tests for config module."""

import json
import pytest

from config import PatternConfig, GRID_PRESETS


class TestPatternConfig:
    """Tests for PatternConfig."""

    def test_defaults_valid(self):
        assert PatternConfig().validate() == []

    def test_grid_size(self):
        config = PatternConfig(width=800, tile_count=8)
        assert config.grid_size == pytest.approx(100.0)

    @pytest.mark.parametrize("field, value", [
        ("grid_type", "triangle"),
        ("tile_count", 0),
        ("contact_fraction", 0.0),
        ("contact_fraction", 0.6),
        ("crossing_angle", 0.0),
        ("crossing_angle", 90.0),
        ("width", -1.0),
        ("line_width", 0.0),
    ])
    def test_validate_errors(self, field, value):
        config = PatternConfig(**{field: value})
        errors = config.validate()
        assert len(errors) == 1

    def test_clamped(self):
        """Clamping applies the input ranges and returns a copy."""
        config = PatternConfig(tile_count=100, contact_fraction=0.9, crossing_angle=5)
        clamped = config.clamped()
        assert clamped.tile_count == 36
        assert clamped.contact_fraction == 0.5
        assert clamped.crossing_angle == 15
        assert config.tile_count == 100

    def test_clamped_lower_bounds(self):
        clamped = PatternConfig(tile_count=1, contact_fraction=-0.2, crossing_angle=120).clamped()
        assert clamped.tile_count == 2
        assert clamped.contact_fraction == 0.0
        assert clamped.crossing_angle == 89

    def test_dict_round_trip(self):
        config = PatternConfig(grid_type="hex", tile_count=5, crossing_angle=72.5, show_construction=True)
        assert PatternConfig.from_dict(config.to_dict()) == config

    def test_from_dict_defaults(self):
        """Missing keys fall back to defaults."""
        config = PatternConfig.from_dict({"grid_type": "hex"})
        assert config.grid_type == "hex"
        assert config.tile_count == PatternConfig().tile_count

    def test_save_load(self, tmp_path):
        path = tmp_path / "pattern.json"
        config = PatternConfig(grid_type="hex", contact_fraction=0.3)
        config.save(path)
        assert json.loads(path.read_text())["contact_fraction"] == 0.3
        assert PatternConfig.load(path) == config

    def test_load_missing_file(self, tmp_path):
        assert PatternConfig.load(tmp_path / "missing.json") == PatternConfig()

    def test_presets_valid(self):
        for name, values in GRID_PRESETS.items():
            assert PatternConfig(**values).validate() == [], name


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
