"""Command line entry point: print a PGN file with piece glyphs."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pgnparser.core.errors import PgnError
from pgnparser.core.notation.pgn import parse_game
from pgnparser.display import format_game

_LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_READ_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="show-pgn",
        description="Parse a single-game PGN file and print its headers and moves.",
    )
    parser.add_argument("path", type=Path, help="PGN file path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log parser progress"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run ``show-pgn`` and return the process exit status."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        pgn_text = args.path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        _LOGGER.error("Cannot read %s: %s", args.path, exc)
        return EXIT_READ_ERROR

    try:
        game = parse_game(pgn_text)
    except PgnError as exc:
        _LOGGER.error(
            "%s: %s failed at offset %d: %s",
            args.path,
            exc.state.name.lower(),
            exc.offset,
            exc,
        )
        return EXIT_PARSE_ERROR

    print(format_game(game))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
