from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .app import FINISHED, TypingApp
from .config import Settings, default_data_dir, load_config
from .game import CommandMode, Game, TimeMode
from .words import CorpusError, WordFeed

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number of seconds: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"time must be positive, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typerow",
        description="Typing practice in the terminal: against the clock, or while a command runs.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-t", "--time",
        type=positive_int,
        metavar="TIME",
        help="time limit in seconds for a time mode game (default 60)",
    )
    parser.add_argument("--config", type=Path, metavar="PATH", help="JSON config file")
    parser.add_argument("--log-file", type=Path, metavar="PATH", help="where to write the log")
    parser.add_argument("-v", "--verbose", action="store_true", help="log at debug level")
    parser.add_argument(
        "-c", "--command",
        nargs=argparse.REMAINDER,
        metavar="COMMAND",
        help="a command to execute; everything after it is passed to the command",
    )
    return parser


def setup_logging(level: str, log_file: Optional[Path] = None) -> None:
    # the terminal belongs to the game, so logs only go to a file
    path = log_file or default_data_dir() / "typerow.log"
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
    except OSError as exc:
        print(f"warning: cannot open log file {path}: {exc}", file=sys.stderr)
        handler = logging.NullHandler()
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[handler], force=True)


def make_feed(settings: Settings) -> WordFeed:
    if settings.words_file is not None:
        return WordFeed.from_file(settings.words_file)
    return WordFeed()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is not None and not args.command:
        parser.error("argument -c/--command: expected a program to run")

    settings = Settings.from_config(load_config(args.config))
    setup_logging("DEBUG" if args.verbose else settings.log_level, args.log_file)

    duration = args.time or settings.duration_sec
    try:
        game = Game(make_feed(settings), limit=duration, row_char_budget=settings.row_char_budget)
    except CorpusError as exc:
        log.error("cannot start: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    mode = CommandMode(args.command) if args.command is not None else TimeMode(duration)
    try:
        mode.begin(game)
    except OSError as exc:
        log.error("failed to start %s: %s", args.command, exc)
        print("error: failed to start command", file=sys.stderr)
        return 1

    try:
        outcome = TypingApp(game, mode, tick_ms=settings.tick_ms).run()
        log.info("session %s", outcome or "closed")
        game.display.detach()
        if outcome != FINISHED:
            mode.interrupt()
        mode.end(game)
    finally:
        mode.close()

    log.info("final score %s", game.score())
    return 0
