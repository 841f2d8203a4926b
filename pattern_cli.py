#!/usr/bin/env python3
"""
Command-line star pattern generation.

Usage:
    python pattern_cli.py <output.png|output.svg> [options]

Options:
    --config        JSON configuration file
    --preset        Named parameter preset
    --grid          square or hex
    --tiles         Tiles across the canvas
    --contact       Contact fraction (0 - 0.5)
    --angle         Crossing angle in degrees
    --hide          Segment id to hide, e.g. 3_1 (repeatable)
    --color         Segment color override, e.g. 3_1=#ff5252 (repeatable)

Example:
    python pattern_cli.py star.svg --grid hex --angle 75 --hide 0_1
"""

import sys
import os
import argparse
import logging
from dataclasses import replace

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import PatternConfig, GRID_PRESETS
from tiling import GRID_TYPES, create_grid
from motif import SegmentId
from overlay import MotifOverlay
from pattern import build_pattern
from render import save_pattern


def _parse_color(text: str) -> tuple[SegmentId, str]:
    segment_text, sep, color = text.partition('=')
    if not sep or not color:
        raise argparse.ArgumentTypeError(f"expected ID=COLOR, got {text!r}")
    try:
        return SegmentId.parse(segment_text), color
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _parse_segment_id(text: str) -> SegmentId:
    try:
        return SegmentId.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Generate a star pattern from a square or hex tiling',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s star.png
  %(prog)s star.svg --grid hex --angle 75
  %(prog)s star.png --preset square-lattice --hide 0_0 --color 1_1=#ff5252
        """
    )
    parser.add_argument('output', help='Output image file (.png, .svg, .pdf)')
    parser.add_argument('--config', help='JSON configuration file')
    parser.add_argument('--preset', choices=sorted(GRID_PRESETS),
                        help='Parameter preset applied over the configuration')
    parser.add_argument('--grid', choices=GRID_TYPES, help='Tiling type')
    parser.add_argument('--tiles', type=int, help='Tiles across the canvas')
    parser.add_argument('--contact', type=float, help='Contact fraction (0 - 0.5)')
    parser.add_argument('--angle', type=float, help='Crossing angle in degrees')
    parser.add_argument('--width', type=float, help='Canvas width')
    parser.add_argument('--height', type=float, help='Canvas height')
    parser.add_argument('--hide', type=_parse_segment_id, action='append', default=[],
                        metavar='ID', help='Hide a motif segment (repeatable)')
    parser.add_argument('--color', type=_parse_color, action='append', default=[],
                        metavar='ID=COLOR', help='Color a motif segment (repeatable)')
    parser.add_argument('--construction', action='store_true',
                        help='Draw the tiling under the pattern')
    parser.add_argument('--save-config', metavar='FILE',
                        help='Write the effective configuration to a JSON file')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    return parser


def resolve_config(args: argparse.Namespace) -> PatternConfig:
    """Configuration file, then preset, then explicit options; clamped."""
    config = PatternConfig.load(args.config) if args.config else PatternConfig()

    if args.preset:
        config = replace(config, **GRID_PRESETS[args.preset])

    overrides = {
        'grid_type': args.grid,
        'tile_count': args.tiles,
        'contact_fraction': args.contact,
        'crossing_angle': args.angle,
        'width': args.width,
        'height': args.height,
    }
    config = replace(config, **{k: v for k, v in overrides.items() if v is not None})

    if args.construction:
        config = replace(config, show_construction=True)

    return config.clamped()


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.config and not os.path.exists(args.config):
        print(f"ERROR: Config file not found: {args.config}")
        return 1

    try:
        config = resolve_config(args)

        errors = config.validate()
        if errors:
            for error in errors:
                print(f"ERROR: {error}")
            return 1

        overlay = MotifOverlay(hidden=frozenset(args.hide), colors=dict(args.color))

        print(f"Options: grid={config.grid_type}, tiles={config.tile_count}, "
              f"contact={config.contact_fraction}, angle={config.crossing_angle}")

        tiles = create_grid(config.grid_type, config.width, config.height, config.grid_size)
        pattern = build_pattern(tiles, config.contact_fraction, config.crossing_angle, overlay)

        motif_size = len(pattern.motif) if pattern.motif is not None else 0
        print(f"Tiling: {len(tiles)} tiles, motif: {motif_size} segments, "
              f"pattern: {len(pattern.lines)} lines")

        if pattern.motif is not None:
            orphaned = overlay.orphaned(pattern.motif)
            if orphaned:
                print("Warning: not in this motif, ignored: "
                      + ", ".join(sorted(str(s) for s in orphaned)))

        if args.save_config:
            config.save(args.save_config)
            print(f"Saved configuration to {args.save_config}")

        print(f"Rendering: {args.output}")
        save_pattern(args.output, pattern, tiles, config)

        file_size = os.path.getsize(args.output)
        print(f"SUCCESS: Exported to {args.output} ({file_size:,} bytes)")
        return 0

    except Exception as e:
        print(f"ERROR: {e}")
        import traceback
        traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
