"""
Command-line entry point.

    clickstories build panels.xlsx --title "Our Story" --logo logo.png --render
    clickstories preview panels.csv
    clickstories template my_panels.csv
"""

import argparse
import sys
from typing import Dict, List, Optional

from dotenv import load_dotenv

from clickstories import __version__
from clickstories.application.services.layout_classifier import classify_panel
from clickstories.domain_core.exceptions import ClickStoriesError
from clickstories.infra.assets.input_template import download_template
from clickstories.infra.config.dependencies import build_story_builder
from clickstories.infra.config.logging_config import get_logger, setup_logging
from clickstories.infra.readers.column_mapping import (
    PromptMappingResolver,
    StaticMappingResolver,
)
from clickstories.infra.readers.panel_reader import read_panels

logger = get_logger(__name__)


def parse_mapping(pairs: Optional[List[str]]) -> Dict[str, str]:
    """Parse repeated ``field=column`` arguments."""
    mapping = {}
    for pair in pairs or []:
        field, sep, column = pair.partition("=")
        if not sep or not field.strip() or not column.strip():
            raise argparse.ArgumentTypeError(
                f"invalid mapping '{pair}', expected field=column"
            )
        mapping[field.strip()] = column.strip()
    return mapping


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="clickstories",
        description="Compile click-through data stories into Quarto reveal.js decks",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show debug logging"
    )
    parser.add_argument(
        "--log-format", choices=["console", "json"], help="Log output format"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    source = argparse.ArgumentParser(add_help=False)
    source.add_argument("data_file", help="CSV or XLSX file with one panel per row")
    source.add_argument(
        "--map",
        action="append",
        metavar="FIELD=COLUMN",
        help="Map a panel field to a column name (repeatable)",
    )
    source.add_argument(
        "--interactive",
        action="store_true",
        help="Ask for column names that cannot be matched",
    )

    build = subparsers.add_parser("build", parents=[source], help="Write a story")
    build.add_argument("--title", "-t", required=True, help="Story title")
    build.add_argument("--subtitle", help="Story subtitle")
    build.add_argument("--output-dir", "-o", default=".", help="Output directory")
    build.add_argument(
        "--name", "-n", default="story", help="Story folder and document name"
    )
    build.add_argument("--logo", help="Logo image to copy into the story")
    build.add_argument("--style", help="SCSS theme to copy into the story")
    build.add_argument(
        "--render", action="store_true", help="Render HTML with quarto afterwards"
    )

    subparsers.add_parser(
        "preview", parents=[source], help="List panels and the layout each one gets"
    )

    template = subparsers.add_parser(
        "template", help="Copy the blank panel spreadsheet"
    )
    template.add_argument(
        "destfile", nargs="?", help="Destination (prints the packaged path if omitted)"
    )
    template.add_argument(
        "--overwrite", action="store_true", help="Replace an existing file"
    )

    return parser.parse_args(argv)


def _read(args: argparse.Namespace):
    resolver = PromptMappingResolver() if args.interactive else StaticMappingResolver()
    return read_panels(args.data_file, parse_mapping(args.map), resolver)


def run(args: argparse.Namespace) -> int:
    if args.command == "template":
        print(download_template(args.destfile, overwrite=args.overwrite))
        return 0

    panels = _read(args)

    if args.command == "preview":
        for panel in panels:
            print(f"{panel.name}\t{classify_panel(panel).key}")
        return 0

    result = build_story_builder().create_story(
        title=args.title,
        panels=panels,
        output_dir=args.output_dir,
        name=args.name,
        subtitle=args.subtitle,
        logo=args.logo,
        style=args.style,
        render_html=args.render,
    )
    print(result.qmd_file)
    if result.html_file:
        print(result.html_file)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None, args.log_format)

    try:
        return run(args)
    except ClickStoriesError as e:
        logger.debug("cli.failed", code=e.code)
        print(f"error: {e.message}", file=sys.stderr)
        return 1
    except argparse.ArgumentTypeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
