"""Unit tests for pattern instancing and the editing overlay."""

import pytest

from geometry import Point2D, regular_polygon
from motif import SegmentId, build_motif
from overlay import MotifOverlay, COLOR_CYCLE
from pattern import PatternLine, Pattern, instance_motif, build_pattern, find_line


class TestMotifOverlay:
    """Tests for MotifOverlay."""

    def test_default_is_empty(self):
        overlay = MotifOverlay()
        assert overlay.hidden == frozenset()
        assert dict(overlay.colors) == {}

    def test_toggle_hidden(self):
        sid = SegmentId(0, 1, 0)
        hidden = MotifOverlay().toggle_hidden(sid)
        assert hidden.is_hidden(sid)
        assert not hidden.toggle_hidden(sid).is_hidden(sid)

    def test_mutators_return_new_overlay(self):
        """The original overlay is never modified."""
        original = MotifOverlay()
        original.toggle_hidden(SegmentId(0, 0, 0))
        original.with_color(SegmentId(0, 0, 0), "#fff")
        assert original.hidden == frozenset()
        assert dict(original.colors) == {}

    def test_with_color(self):
        sid = SegmentId(2, 0, 1)
        overlay = MotifOverlay().with_color(sid, "#ff0000")
        assert overlay.color_for(sid) == "#ff0000"
        assert overlay.with_color(sid, None).color_for(sid) is None

    def test_cycle_color(self):
        """Cycle goes through the palette and back to the default."""
        sid = SegmentId(1, 1, 0)
        overlay = MotifOverlay()
        seen = []
        for _ in range(len(COLOR_CYCLE)):
            overlay = overlay.cycle_color(sid)
            seen.append(overlay.color_for(sid))
        assert seen == list(COLOR_CYCLE[1:]) + [None]

    def test_cycle_unknown_color_resets(self):
        sid = SegmentId(1, 1, 0)
        overlay = MotifOverlay().with_color(sid, "#123456").cycle_color(sid)
        assert overlay.color_for(sid) is None

    def test_colors_are_read_only(self):
        overlay = MotifOverlay(colors={SegmentId(0, 0, 0): "#fff"})
        with pytest.raises(TypeError):
            overlay.colors[SegmentId(0, 0, 1)] = "#000"

    def test_orphaned(self, square):
        motif = build_motif(square, 0.25, 60)
        stale = SegmentId(40, 0, 0)
        overlay = MotifOverlay(hidden={stale, motif.ids()[0]})
        assert overlay.orphaned(motif) == {stale}


class TestInstanceMotif:
    """Tests for instance_motif."""

    def test_one_copy_per_tile(self, square_tiles):
        motif = build_motif(square_tiles[0], 0.25, 60)
        lines = instance_motif(motif, square_tiles)
        assert len(lines) == 2 * len(motif)

    def test_order_tiles_then_segments(self, square_tiles):
        """Outer loop over tiles, inner loop in motif construction order."""
        motif = build_motif(square_tiles[0], 0.25, 60)
        lines = instance_motif(motif, square_tiles)
        n = len(motif)
        assert [l.segment_id for l in lines[:n]] == motif.ids()
        assert [l.segment_id for l in lines[n:]] == motif.ids()
        assert all(l.start.x <= 100 for l in lines[:n])

    def test_translation_only(self, square_tiles):
        """Instances differ by exactly the center-to-center vector."""
        motif = build_motif(square_tiles[0], 0.25, 60)
        lines = instance_motif(motif, square_tiles)
        n = len(motif)
        for a, b in zip(lines[:n], lines[n:]):
            assert a.segment_id == b.segment_id
            assert b.start.x - a.start.x == pytest.approx(100.0)
            assert b.start.y - a.start.y == pytest.approx(0.0)
            assert b.end.x - a.end.x == pytest.approx(100.0)

    def test_hidden_segments_skipped_everywhere(self, square_tiles):
        motif = build_motif(square_tiles[0], 0.25, 60)
        hidden_id = motif.ids()[3]
        overlay = MotifOverlay(hidden={hidden_id})
        lines = instance_motif(motif, square_tiles, overlay)
        assert len(lines) == 2 * (len(motif) - 1)
        assert all(l.segment_id != hidden_id for l in lines)

    def test_unhide_restores_identical_lines(self, square_tiles):
        """Hide then unhide gives the same lines as never hiding."""
        motif = build_motif(square_tiles[0], 0.25, 60)
        sid = motif.ids()[0]
        overlay = MotifOverlay().toggle_hidden(sid).toggle_hidden(sid)
        assert instance_motif(motif, square_tiles, overlay) == instance_motif(motif, square_tiles)

    def test_colors_resolved(self, square_tiles):
        motif = build_motif(square_tiles[0], 0.25, 60)
        sid = motif.ids()[1]
        overlay = MotifOverlay(colors={sid: "#69f0ae"})
        lines = instance_motif(motif, square_tiles, overlay)
        for line in lines:
            expected = "#69f0ae" if line.segment_id == sid else None
            assert line.color == expected

    def test_orphaned_ids_ignored(self, square_tiles):
        motif = build_motif(square_tiles[0], 0.25, 60)
        overlay = MotifOverlay(hidden={SegmentId(50, 1, 9)}, colors={SegmentId(50, 0, 0): "#fff"})
        assert instance_motif(motif, square_tiles, overlay) == instance_motif(motif, square_tiles)

    def test_empty_tiling(self, square):
        motif = build_motif(square, 0.25, 60)
        assert instance_motif(motif, []) == []

    def test_empty_motif(self, square_tiles):
        motif = build_motif(square_tiles[0], 0.25, 45)
        assert instance_motif(motif, square_tiles) == []


class TestBuildPattern:
    """Tests for build_pattern."""

    def test_motif_sized_from_tiling(self):
        """The motif follows the tiles' actual edge length."""
        tiles = [regular_polygon(6, 40, (100, 100))]
        pattern = build_pattern(tiles, 0.25, 75)
        assert pattern.motif.polygon.edge_length == pytest.approx(40.0)

    def test_lines_match_instance_motif(self, square_tiles):
        pattern = build_pattern(square_tiles, 0.25, 60)
        assert list(pattern.lines) == instance_motif(pattern.motif, square_tiles)
        assert len(pattern) == len(pattern.lines)

    def test_empty_tiling(self):
        pattern = build_pattern([], 0.25, 60)
        assert pattern.motif is None
        assert len(pattern) == 0

    def test_stateless(self, square_tiles):
        """Every call recomputes the same result from its inputs."""
        overlay = MotifOverlay(hidden={SegmentId(0, 0, 0)})
        assert build_pattern(square_tiles, 0.25, 60, overlay) == build_pattern(square_tiles, 0.25, 60, overlay)


class TestFindLine:
    """Tests for pattern hit testing."""

    def test_hit_at_midpoint(self, square_tiles):
        pattern = build_pattern(square_tiles, 0.25, 60)
        target = pattern.lines[0]
        mid = Point2D((target.start.x + target.end.x) / 2, (target.start.y + target.end.y) / 2)
        assert pattern.find_line(mid, 10) is target

    def test_miss(self, square_tiles):
        pattern = build_pattern(square_tiles, 0.25, 60)
        assert pattern.find_line(Point2D(100, -50), 10) is None

    def test_first_match_wins(self):
        a = PatternLine(Point2D(0, 0), Point2D(10, 0), SegmentId(0, 0, 0))
        b = PatternLine(Point2D(0, 1), Point2D(10, 1), SegmentId(0, 1, 0))
        assert find_line([a, b], Point2D(5, 0.5), 10) is a
        assert find_line([b, a], Point2D(5, 0.5), 10) is b

    def test_pattern_default(self):
        assert Pattern(motif=None).find_line(Point2D(0, 0), 10) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
