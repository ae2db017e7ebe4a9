#!/usr/bin/env python3
"""Show the preflop range table as 13x13 grids."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from isotrainer.game.ranges import RANGE_TABLE, RangeCategory, validate_range_table
from isotrainer.viz import RangeDisplay, display_range


def main():
    parser = argparse.ArgumentParser(
        description="Display the trainer's preflop ranges"
    )
    parser.add_argument(
        "-c", "--category",
        choices=[c.name.lower() for c in RangeCategory],
        help="Only show one category",
    )
    parser.add_argument(
        "-r", "--range",
        help="Show an arbitrary comma separated range (e.g. 'QQ+,AJo+,45s-78s')",
    )
    parser.add_argument(
        "--combined",
        action="store_true",
        help="Show every category in one grid",
    )
    parser.add_argument(
        "-o", "--output",
        help="Save a matplotlib plot to this file (with --combined or --category)",
    )

    args = parser.parse_args()
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s - %(message)s")
    console = Console()

    bad = validate_range_table()
    if bad:
        console.print(f"[red]Range table has malformed entries: {', '.join(bad)}[/]")
        return 1

    if args.range:
        display_range(args.range, title=args.range)
        return 0

    if args.combined:
        categories = [list(RangeCategory)]
    elif args.category:
        categories = [[RangeCategory[args.category.upper()]]]
    else:
        categories = [[c] for c in RangeCategory]

    for group in categories:
        display = RangeDisplay(console)
        display.load_categories(group)
        if len(group) == 1:
            title = f"{group[0].label}: {', '.join(RANGE_TABLE[group[0]])}"
        else:
            title = "Preflop Strategy"
        display.display_terminal(title=title)
        console.print()

        if args.output and len(categories) == 1:
            display.plot(title=title, save_path=args.output)
            console.print(f"[bold]Plot saved to:[/] {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
