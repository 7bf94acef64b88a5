"""Sectorgen - command line entry point.

Generates a starmap of star systems, worlds and points of interest for
science-fiction tabletop games and prints it as text or markdown.
"""

import argparse
import logging
import sys

from .content.tags import tag_names, unknown_tags
from .engine import SectorGenerationError, generate_sector
from .interface.renderer import SectorRenderer
from .utils.constants import (
    DEFAULT_COLS,
    DEFAULT_OTHER_WORLD_CHANCE,
    DEFAULT_POI_CHANCE,
    DEFAULT_ROWS,
    EXTRA_STARS,
    LEGACY_EXTRA_STARS,
)
from .utils.format import OutputType
from .utils.rng import SectorRNG
from .utils.serialization import load_sector, save_sector

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="sectorgen",
        description="Sectorgen - procedural starmaps for science-fiction tabletop games",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                  # Standard 10x8 sector as text
  %(prog)s --rows 4 --cols 4 --seed 42      # Small, reproducible sector
  %(prog)s --format markdown > sector.md    # Markdown output
  %(prog)s --exclude Zombies --exclude "Holy War"
  %(prog)s --save sector.json               # Keep the sector for later
  %(prog)s --load sector.json --tui         # Browse a saved sector
        """,
    )

    parser.add_argument("--rows", type=int, default=DEFAULT_ROWS, help=f"Grid rows (default: {DEFAULT_ROWS})")
    parser.add_argument("--cols", type=int, default=DEFAULT_COLS, help=f"Grid columns (default: {DEFAULT_COLS})")
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="TAG",
        help="World tag to never generate (repeatable, case-insensitive)",
    )
    parser.add_argument(
        "--poi-chance",
        type=int,
        default=DEFAULT_POI_CHANCE,
        help=f"Percentage chance of a point of interest per star (default: {DEFAULT_POI_CHANCE})",
    )
    parser.add_argument(
        "--other-world-chance",
        type=int,
        default=DEFAULT_OTHER_WORLD_CHANCE,
        help="Cascading percentage chance of each additional world, below 100 "
        f"(default: {DEFAULT_OTHER_WORLD_CHANCE})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: current time)")
    parser.add_argument(
        "--legacy-count",
        action="store_true",
        help="Place one star beyond the rolled target, like older generators",
    )
    parser.add_argument(
        "--format",
        choices=[t.value for t in OutputType],
        default=OutputType.TEXT.value,
        help="Output format (default: text)",
    )
    parser.add_argument("--load", type=str, metavar="FILE", help="Load sector from JSON file instead of generating")
    parser.add_argument("--save", type=str, metavar="FILE", help="Save generated sector to JSON file")
    parser.add_argument("--list-tags", action="store_true", help="List world tags and exit")
    parser.add_argument("--tui", action="store_true", help="Browse the sector in a terminal user interface")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    if args.list_tags:
        print("\n".join(tag_names()))
        return 0

    if args.load:
        try:
            sector = load_sector(args.load)
        except FileNotFoundError:
            print(f"Error: File {args.load} not found.", file=sys.stderr)
            return 1
        except ValueError as e:
            print(f"Error loading sector: {e}", file=sys.stderr)
            return 1
        logger.info(f"Loaded {len(sector)} stars from {args.load}")
    else:
        unknown = unknown_tags(args.exclude)
        if unknown:
            print(f"Error: Unknown world tags: {', '.join(unknown)} (see --list-tags)", file=sys.stderr)
            return 1

        try:
            sector = generate_sector(
                rows=args.rows,
                cols=args.cols,
                excluded_tags=args.exclude,
                poi_chance=args.poi_chance,
                other_world_chance=args.other_world_chance,
                rng=SectorRNG(args.seed),
                extra_stars=LEGACY_EXTRA_STARS if args.legacy_count else EXTRA_STARS,
            )
        except SectorGenerationError as e:
            print(f"Error generating sector: {e}", file=sys.stderr)
            return 1

    if args.save:
        try:
            save_sector(sector, args.save)
        except OSError as e:
            print(f"Error saving sector: {e}", file=sys.stderr)
            return 1
        logger.info(f"Saved sector to {args.save}")

    if args.tui:
        from .interface.tui_app import SectorTUI

        SectorTUI(sector).run()
        return 0

    print(SectorRenderer().render(sector, OutputType(args.format)), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
