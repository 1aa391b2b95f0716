"""CLI entrypoint: solve a crossword in the terminal."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, List, Optional, TextIO

from crossplay.core.exceptions import CrosswordError
from crossplay.core.models import Square
from crossplay.engine.session import SolvingSession
from crossplay.engine.word_index import rendered_word
from crossplay.io.game_store import LocalGameStore
from crossplay.io.puzzle_loader import LoaderConfig, open_puzzle
from crossplay.utils.logger import configure_logging, get_logger
from crossplay.utils.pretty import pretty_print_board


LOGGER = get_logger("crossplay.cli")

HELP = (
    "Commands: click ROW COL | type LETTERS | back | next | prev | show | help | quit"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve a crossword in the terminal")
    parser.add_argument(
        "--puzzle",
        required=True,
        help="Puzzle JSON path or URL (relative names resolve against CROSSPLAY_PUZZLE_URL)",
    )
    parser.add_argument("--user", default="player", help="Name recorded on written letters")
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level written to stderr",
    )
    return parser


def keystroke(session: SolvingSession, store: LocalGameStore, user: str, new_text_for) -> None:
    """Feed one edit of the active word's text through the session into the store."""

    state = store.snapshot()
    prior = rendered_word(session.cursor, session.puzzle.clues, state)
    change = session.handle_text(new_text_for(prior), state, prior)
    store.apply(change, user)


def run_command(
    line: str,
    session: SolvingSession,
    store: LocalGameStore,
    user: str,
    out: TextIO,
) -> bool:
    """Execute one command line; returns False when the loop should stop."""

    parts = line.split()
    if not parts:
        return True
    command, args = parts[0].lower(), parts[1:]

    if command in ("quit", "exit"):
        return False
    if command == "help":
        print(HELP, file=out)
        return True
    if command == "click":
        if len(args) != 2 or not all(arg.isdigit() for arg in args):
            print("usage: click ROW COL", file=out)
            return True
        session.click(Square(col=int(args[1]), row=int(args[0])))
    elif command == "type":
        for char in "".join(args):
            keystroke(session, store, user, lambda prior, char=char: prior + char)
    elif command == "back":
        keystroke(session, store, user, lambda prior: prior[:-1])
    elif command == "next":
        session.move_next()
    elif command == "prev":
        session.move_prev()
    elif command != "show":
        print(f"unknown command {command!r}. {HELP}", file=out)
        return True

    pretty_print_board(session.puzzle, store.snapshot(), session.cursor, stream=out)
    return True


def play(session: SolvingSession, store: LocalGameStore, user: str, lines: Iterable[str], out: TextIO) -> None:
    pretty_print_board(session.puzzle, store.snapshot(), session.cursor, stream=out)
    print(HELP, file=out)
    for line in lines:
        if not run_command(line, session, store, user, out):
            break


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    config = LoaderConfig()
    if args.timeout is not None:
        config.timeout_seconds = args.timeout

    try:
        puzzle = open_puzzle(args.puzzle, config)
    except CrosswordError as exc:
        LOGGER.error("Could not open puzzle: %s", exc)
        return 1

    play(SolvingSession(puzzle), LocalGameStore(), args.user, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
