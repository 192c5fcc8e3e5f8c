# solver.py

from __future__ import annotations

import logging
import time
from typing import Optional

from .board import Board, next_cell
from .constants import MIN_NUM
from .exceptions import BoardInvariantError

log = logging.getLogger(__name__)


# --------------------------
# Backtracking solver with incremental constraint sets
# --------------------------


class Solver:
    """
    Depth-first search over the unset cells of a board, in row-major order,
    trying the smallest candidate first.

    The board is modified in place. On success it holds the first solution
    found; on failure every trial assignment has been undone and the board
    is back to the state it had before solve() was called.
    """

    def __init__(self, board: Board, time_limit: Optional[float] = None) -> None:
        assert time_limit is None or time_limit >= 0, "Time limit cannot be negative"
        self.board = board
        self.time_limit = time_limit
        self.status: str = "idle"
        self.assignments = 0
        self.backtracks = 0
        self._deadline: Optional[float] = None
        self._cutoff = False

    def _reset_state(self) -> None:
        self.status = "idle"
        self.assignments = 0
        self.backtracks = 0
        self._cutoff = False
        self._deadline = (
            None if self.time_limit is None
            else time.monotonic() + self.time_limit
        )

    def solve(self) -> bool:
        self._reset_state()
        log.debug("Searching, %d unset cells", self.board.unset_cells)

        solved = self._search(MIN_NUM, MIN_NUM)
        if solved:
            self.status = "solved"
        else:
            self.status = "timeout" if self._cutoff else "unsolved"

        log.debug(
            "Search %s after %d assignments, %d backtracks",
            self.status, self.assignments, self.backtracks,
        )
        return solved

    def _expired(self) -> bool:
        if self._deadline is not None and time.monotonic() >= self._deadline:
            self._cutoff = True
        return self._cutoff

    def _search(self, row: int, col: int) -> bool:
        board = self.board
        if board.unset_cells == 0:
            return True

        # find the next unset cell
        pos = (row, col)
        while pos is not None and board.is_set(*pos):
            pos = next_cell(*pos)
        if pos is None:
            raise BoardInvariantError(
                f"No unset cell after ({row}, {col}) but "
                f"{board.unset_cells} cells are counted as unset"
            )
        row, col = pos

        floor = MIN_NUM
        while not self._expired():
            v = board.candidates_at(row, col, floor)
            if v is None:
                break

            board.assign(row, col, v)
            self.assignments += 1
            if self._search(row, col):
                return True
            board.unassign(row, col, v)
            self.backtracks += 1

            floor = v + 1

        return False


def solve(board: Board, time_limit: Optional[float] = None) -> bool:
    """
    Solve board in place. Returns True if a solution was found (the board now
    holds it), False otherwise (the board is unchanged).
    """
    return Solver(board, time_limit).solve()
