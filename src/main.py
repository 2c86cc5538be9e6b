"""Bus Lookup - Main Entry Point with CLI Commands.

Supports:
- lookup: Find a student's bus allocation by USN
- inspect: Load the spreadsheet and report what was indexed
"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from src.app.logic.data_loader import GlobalDataLoader
from src.app.logic.result import Illustration, build_result_card
from src.app.logic.search import search
from src.core.config import settings
from src.core.exceptions import LookupDataError


def configure_logging(level: str, debug: bool = False) -> None:
    """Route loguru's default sink to stderr at the requested level (DEBUG when debugging)."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if debug else level.upper())


def _make_loader(args: argparse.Namespace) -> GlobalDataLoader:
    config_path = Path(args.config) if args.config else None
    return GlobalDataLoader(config_path=config_path)


def cmd_lookup(args: argparse.Namespace) -> None:
    """Look up one identifier and print the result card."""
    loader = _make_loader(args)
    state = loader.load_state(args.source)
    outcome = search(state, args.identifier, loader.config.display.not_found_message)
    card = build_result_card(outcome, loader.config.display)

    image = card.image.value if isinstance(card.image, Illustration) else card.image
    print(f"Photo: {image}")
    if not card.is_found:
        print(card.message)
        return
    for label, value in card.fields:
        print(f"{label}: {value}")


def cmd_inspect(args: argparse.Namespace) -> None:
    """Load the spreadsheet and summarize the index."""
    logger.info("=== Inspecting Spreadsheet ===")
    loader = _make_loader(args)
    source = args.source or loader.config.source.url

    try:
        index = loader.build_index(source)
    except LookupDataError as e:
        logger.error(f"Failed to build index: {e}")
        sys.exit(1)

    first_row = next(iter(index.entries.values()), {})
    logger.info(f"Rows: {index.row_count:,}")
    logger.info(f"Columns: {list(first_row.keys())!r}")
    logger.info(f"Identifier column: {index.id_column!r}")
    logger.success(f"✅ Indexed {len(index):,} identifiers from {source}")


def main(argv: list[str] | None = None) -> None:
    """Main entry point with CLI argument parsing."""
    parser = argparse.ArgumentParser(
        description="Bus Lookup - Student bus allocation search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=str,
        help=f"Path to config.yaml (default: {settings.config_path})",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (default: %(default)s)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    # Lookup command
    parser_lookup = subparsers.add_parser("lookup", help="Find a student's bus allocation")
    parser_lookup.add_argument("identifier", help="Student USN (case and spacing are ignored)")
    parser_lookup.add_argument(
        "--source",
        type=str,
        help="Spreadsheet URL or local .xlsx path (default: configured download URL)",
    )
    parser_lookup.set_defaults(func=cmd_lookup)

    # Inspect command
    parser_inspect = subparsers.add_parser(
        "inspect", help="Load the spreadsheet and report what was indexed"
    )
    parser_inspect.add_argument(
        "--source",
        type=str,
        help="Spreadsheet URL or local .xlsx path (default: configured download URL)",
    )
    parser_inspect.set_defaults(func=cmd_inspect)

    # Parse arguments and execute
    args = parser.parse_args(argv)
    configure_logging(args.log_level, debug=settings.debug)
    args.func(args)


if __name__ == "__main__":
    main()
