# releasemenu - Interactive release selection menu
# Copyright (c) 2024-2026 Matthew Bright
# Licensed under the MIT License. See LICENSE file for details.

"""CLI entry point for releasemenu."""

import argparse
import json
import logging
import sys
from importlib.metadata import version

from .config import load_config, parse_verbosity
from .menu import Menu
from .output import print_error, print_selection, set_color
from .result import ResultFormatError, load_result

EXIT_ABORTED = 130


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="releasemenu",
        description="releasemenu - Pick container updates from a release result",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Keys:
  up/down   move the cursor
  space     toggle the update under the cursor
  enter     confirm the selection
  esc, ^C   abort

Examples:
  releasemenu result.json
  releasemenu -vv --json result.json > selected.json   (menu is drawn on stderr)
  release-tool --dry-run --json | releasemenu -

Environment variables:
  RELEASEMENU_VERBOSITY   Default verbosity (0-2)
  RELEASEMENU_TTY         Terminal device to read keys from
  RELEASEMENU_NO_COLOR    Disable styled output
  RELEASEMENU_LOG_DIR     Directory for releasemenu.log
        """,
    )

    parser.add_argument(
        "results",
        help="Release result JSON file, or - to read from stdin",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=None,
        help="Include skipped (-v) and ignored (-vv) controllers",
    )

    parser.add_argument(
        "--tty",
        help="Terminal device to read keys from (default: /dev/tty)",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the selected updates as JSON instead of a table",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"releasemenu {version('releasemenu')}",
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_arguments(argv)

    try:
        config = load_config(
            verbosity_override=parse_verbosity(args.verbose) if args.verbose is not None else None,
            tty_override=args.tty,
        )
    except ValueError as error:
        print_error(str(error))
        sys.exit(1)

    from .log_config import configure_logging

    # The menu is painted on stderr, so only errors may reach the console there
    configure_logging(log_dir=config.log_dir, console_level=logging.ERROR)

    set_color(config.color)

    try:
        if args.results == "-":
            results = load_result(sys.stdin)
        else:
            results = load_result(args.results)
    except (OSError, ResultFormatError) as error:
        print_error(str(error))
        sys.exit(1)

    # stdout stays free for the result so it can be redirected
    if not sys.stderr.isatty():
        print_error("Interactive selection requires a terminal on stderr.")
        sys.exit(1)

    menu = Menu(sys.stderr, results, verbosity=config.verbosity, tty=config.tty)
    selected, aborted = menu.run()
    if aborted:
        sys.exit(EXIT_ABORTED)

    if args.json:
        print(json.dumps([update.to_dict() for update in selected], indent=2))
    else:
        print_selection(selected)


if __name__ == "__main__":
    main()
