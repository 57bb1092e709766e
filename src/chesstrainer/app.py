"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from chesstrainer.ui.settings import MODES, THEMES, AppSettings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chess-trainer",
        description="Play chess on a clickable board, or drill square names.",
    )
    parser.add_argument("--mode", choices=MODES, default="game")
    parser.add_argument("--fen", help="start the game from this position")
    parser.add_argument(
        "--free-play",
        action="store_true",
        help="accept moves that leave the own king in check",
    )
    parser.add_argument("--flipped", action="store_true", help="view from Black's side")
    parser.add_argument("--theme", choices=THEMES, default="Classic")
    parser.add_argument("--no-hints", action="store_true", help="hide legal-move hints")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> AppSettings:
    return AppSettings(
        mode=args.mode,
        start_fen=args.fen,
        legal_only=not args.free_play,
        board_theme=args.theme,
        show_hints=not args.no_hints,
        flipped=args.flipped,
    )


def main(argv: list[str] | None = None) -> None:
    """Launch the chess trainer."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = settings_from_args(args)
    if settings.start_fen:
        from chesstrainer.core.notation import position_from_fen

        try:
            position_from_fen(settings.start_fen)
        except ValueError as exc:
            build_parser().error(str(exc))

    from chesstrainer.ui.bootstrap import run_application

    sys.exit(run_application(settings, [sys.argv[0]]))


if __name__ == "__main__":
    main()
