"""Command-line entry point: read diagram text, write SVG."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from skreate.core.errors import ParseError
from skreate.render import canonicalize, generate

_LOGGER = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skreate",
        description="Generate an SVG diagram from ice skating notation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Diagram from a file
  skreate dance.skate --out dance.svg

  # Minimal equivalent input, one move per line
  echo "LFO[angle=60]; RFO" | skreate --canonical
        """,
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="File of moves to draw (default: standard input)",
    )
    parser.add_argument(
        "-o",
        "--out",
        type=Path,
        help="File to write the SVG to (default: standard output)",
    )
    parser.add_argument(
        "--canonical",
        action="store_true",
        help="Print the canonical form of the input instead of SVG",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI, returning the process exit status."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    text = args.input.read_text(encoding="utf-8") if args.input else sys.stdin.read()
    try:
        output = canonicalize(text, "\n") + "\n" if args.canonical else generate(text)
    except ParseError as err:
        _LOGGER.debug("generation failed", exc_info=True)
        print(f"{args.input or '<stdin>'}:{err}", file=sys.stderr)
        return 1

    if args.out:
        args.out.write_text(output, encoding="utf-8")
        _LOGGER.info("wrote %s", args.out)
    else:
        sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
