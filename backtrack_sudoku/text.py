# text.py

"""
Plain-text puzzle format.

A digit 1-9 is a given, a dot is an empty cell. Cells are read from top to
bottom and left to right; every other character is ignored. Example::

    5 3 . . 7 . . . .
    6 . . 1 9 5 . . .
    . 9 8 . . . . 6 .
    8 . . . 6 . . . 3
    4 . . 8 . 3 . . 1
    7 . . . 2 . . . 6
    . 6 . . . . 2 8 .
    . . . 4 1 9 . . 5
    . . . . 8 . . 7 9
"""

from __future__ import annotations

import logging
from typing import Iterable, TextIO

from .board import Board, next_cell
from .constants import MIN_NUM, SUBDIMENSION, TOTAL_CELLS

log = logging.getLogger(__name__)

EMPTY = "."
DIGITS = "123456789"


def _load(chars: Iterable[str]) -> Board:
    board = Board()
    pos = (MIN_NUM, MIN_NUM)
    read = 0
    for ch in chars:
        if ch not in DIGITS and ch != EMPTY:
            continue
        if ch != EMPTY:
            board.place_given(pos[0], pos[1], int(ch))
        read += 1
        nxt = next_cell(*pos)
        if nxt is None:
            break
        pos = nxt

    if read < TOTAL_CELLS:
        log.warning("Only %d of %d cells given, the rest are left empty", read, TOTAL_CELLS)
    log.debug("Read %d givens", len(board.givens))
    return board


def _chars(stream: TextIO) -> Iterable[str]:
    for line in stream:
        yield from line


def read_board(stream: TextIO) -> Board:
    """
    Read a board from an open text stream. Raises InvalidPuzzle if the
    givens contradict each other.
    """
    return _load(_chars(stream))


def parse_board(text: str) -> Board:
    return _load(text)


def format_board(board: Board) -> str:
    """One row per line, values separated by spaces, dots for unset cells."""
    return str(board)


def format_board_ascii(board: Board) -> str:
    lines = []
    horiz = ("+-" + "-" * 2 * SUBDIMENSION) * SUBDIMENSION + "+"
    for r, row in enumerate(board.rows_of_values()):
        if r % SUBDIMENSION == 0:
            lines.append(horiz)
        cells = [str(v) if v is not None else " " for v in row]
        # vertical separators between blocks
        line = "| "
        for b in range(SUBDIMENSION):
            start = b * SUBDIMENSION
            chunk = " ".join(cells[start: start + SUBDIMENSION])
            line += chunk + " | "
        lines.append(line.rstrip())
    lines.append(horiz)
    return "\n".join(lines)
