"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from fenboard.config import AppSettings, parse_log_level
from fenboard.core.errors import NotationError
from fenboard.core.position import Position
from fenboard.display import format_position

_LOGGER = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_BAD_FEN = 2


def run(position: Position | None = None, *, unicode: bool = False) -> str:
    """Render *position* (the starting position by default) as a text board."""
    if position is None:
        position = Position.initial()
    return format_position(position, unicode=unicode)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fenboard",
        description="Print a chess position given in Forsyth-Edwards Notation.",
    )
    parser.add_argument(
        "fen",
        nargs="?",
        help="FEN record to display (quote it); defaults to the starting position",
    )
    parser.add_argument(
        "--unicode",
        action="store_true",
        default=None,
        help="draw pieces with chess glyphs instead of letters",
    )
    parser.add_argument(
        "--gui",
        action="store_true",
        help="open the position in a window instead of printing it",
    )
    parser.add_argument(
        "--fen-out",
        action="store_true",
        help="also print the position's normalised FEN",
    )
    parser.add_argument(
        "--log-level",
        type=lambda raw: parse_log_level("--log-level", raw),
        help="logging threshold (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    return parser


def _settings_from_args(args: argparse.Namespace) -> AppSettings:
    settings = AppSettings.from_env()
    if args.unicode is not None:
        settings = replace(settings, use_unicode=args.unicode)
    if args.log_level is not None:
        settings = replace(settings, log_level=args.log_level)
    return replace(settings, gui=args.gui)


def main(argv: list[str] | None = None) -> int:
    """Console script: parse arguments, build the position, show it."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        settings = _settings_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=settings.log_level_value,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.fen is None:
        position = Position.initial()
    else:
        try:
            position = Position.from_fen(args.fen)
        except NotationError as exc:
            _LOGGER.debug("Rejected FEN %r", args.fen, exc_info=True)
            print(f"fenboard: {exc}", file=sys.stderr)
            return EXIT_BAD_FEN

    if settings.gui:
        from fenboard.ui.bootstrap import run_application

        return run_application(position, settings)

    sys.stdout.write(run(position, unicode=settings.use_unicode))
    if args.fen_out:
        print(position.to_fen())
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
