# exceptions.py


class SudokuError(Exception):
    pass


class InvalidPuzzle(SudokuError, ValueError):
    """
    The givens of a puzzle contradict each other (two equal values in one
    row, column or block), or a given targets a cell that is already set.
    """


class BoardInvariantError(SudokuError, AssertionError):
    """
    Internal bookkeeping of a board went out of sync. Always a bug,
    never a property of the puzzle being solved.
    """
