# cli.py

"""
Command-line Sudoku solver.

Reads a puzzle from FILE (or standard input), solves it and prints the
solution, one row per line.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, NoReturn, Optional

from .exceptions import InvalidPuzzle
from .solver import Solver
from .text import format_board, format_board_ascii, read_board

log = logging.getLogger(__name__)

EXIT_SOLVED = 0
EXIT_USAGE = 1
EXIT_NO_INPUT = 2
EXIT_UNSOLVED = 3
EXIT_INVALID = 4


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="backtrack-sudoku",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "filename", nargs="?",
        help="Puzzle file; digits are givens, dots are empty cells "
             "(default: read standard input)")
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log search progress")
    parser.add_argument(
        "--pretty", action="store_true",
        help="Draw block borders around the solution")
    parser.add_argument(
        "--time-limit", type=float, metavar="SECONDS",
        help="Give up searching after this many seconds")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.time_limit is not None and args.time_limit < 0:
        parser.error("--time-limit cannot be negative")

    logging.basicConfig(
        format="%(levelname)s: %(message)s",
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        force=True,
    )

    try:
        if args.filename is None:
            # undecodable bytes are ignored like any other stray character
            if hasattr(sys.stdin, "reconfigure"):
                sys.stdin.reconfigure(errors="replace")
            board = read_board(sys.stdin)
        else:
            try:
                f = open(args.filename, "r", errors="replace")
            except OSError:
                log.error('could not open "%s"', args.filename)
                return EXIT_NO_INPUT
            with f:
                board = read_board(f)
    except InvalidPuzzle as exc:
        log.error("invalid puzzle: %s", exc)
        return EXIT_INVALID

    solver = Solver(board, time_limit=args.time_limit)
    if not solver.solve():
        if solver.status == "timeout":
            log.error("board could not be solved in %s seconds", args.time_limit)
        else:
            log.error("board could not be solved")
        return EXIT_UNSOLVED

    print(format_board_ascii(board) if args.pretty else format_board(board))
    return EXIT_SOLVED
