from backtrack_sudoku.board import Board, Cell, block_index, following, next_cell
from backtrack_sudoku.constraints import ConstraintSet
from backtrack_sudoku.exceptions import BoardInvariantError, InvalidPuzzle, SudokuError
from backtrack_sudoku.solver import Solver, solve
from backtrack_sudoku.text import format_board, format_board_ascii, parse_board, read_board

__all__ = [
    "Board",
    "BoardInvariantError",
    "Cell",
    "ConstraintSet",
    "InvalidPuzzle",
    "Solver",
    "SudokuError",
    "block_index",
    "following",
    "format_board",
    "format_board_ascii",
    "next_cell",
    "parse_board",
    "read_board",
    "solve",
]
