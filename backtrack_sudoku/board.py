# board.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from .constants import MAX_NUM, MIN_NUM, SUBDIMENSION, TOTAL_CELLS, TOTAL_NUMS
from .constraints import ConstraintSet
from .exceptions import InvalidPuzzle

Value = Optional[int]
Pos = Tuple[int, int]

# --------------------------
# Geometry
# --------------------------


def block_index(row: int, col: int) -> int:
    """
    Block number of a cell. Blocks are numbered 1..9 from top to bottom,
    left to right.
    """
    assert MIN_NUM <= row <= MAX_NUM and MIN_NUM <= col <= MAX_NUM
    return ((row - 1) // SUBDIMENSION) * SUBDIMENSION + (col - 1) // SUBDIMENSION + 1


def following(num: int) -> int:
    """Circular successor of num in MIN_NUM..MAX_NUM."""
    assert MIN_NUM <= num <= MAX_NUM
    return (num - MIN_NUM + 1) % TOTAL_NUMS + MIN_NUM


def next_cell(row: int, col: int) -> Optional[Pos]:
    """
    Row-major successor of (row, col), or None after the last cell.
    """
    if row == MAX_NUM and col == MAX_NUM:
        return None
    col = following(col)
    if col == MIN_NUM:
        row = following(row)
    return row, col


def positions() -> Iterable[Pos]:
    for row in range(MIN_NUM, MAX_NUM + 1):
        for col in range(MIN_NUM, MAX_NUM + 1):
            yield row, col


# --------------------------
# Cells and boards
# --------------------------


@dataclass
class Cell:
    row: int
    col: int
    value: Value = None
    # indices into Board.rows / Board.columns / Board.blocks
    block: int = field(init=False)

    def __post_init__(self) -> None:
        self.block = block_index(self.row, self.col)

    @property
    def has_value(self) -> bool:
        return self.value is not None


class Board:
    """
    9x9 grid of cells plus the used-value sets of every row, column and block.

    Coordinates are 1-based. ``assign`` is the only way a value gets placed,
    both for givens and for trial placements during search, so the constraint
    sets always agree with the cell values.
    """

    def __init__(self) -> None:
        self.unset_cells = TOTAL_CELLS
        self.givens: Set[Pos] = set()

        # index 0 is unused so units can be addressed 1..9 directly
        self.rows: List[ConstraintSet] = [ConstraintSet() for _ in range(TOTAL_NUMS + 1)]
        self.columns: List[ConstraintSet] = [ConstraintSet() for _ in range(TOTAL_NUMS + 1)]
        self.blocks: List[ConstraintSet] = [ConstraintSet() for _ in range(TOTAL_NUMS + 1)]

        self._cells: List[List[Cell]] = [
            [Cell(row, col) for col in range(MIN_NUM, MAX_NUM + 1)]
            for row in range(MIN_NUM, MAX_NUM + 1)
        ]

    # --------------------------
    # Construction
    # --------------------------

    @classmethod
    def from_values(cls, values: Iterable[Value]) -> "Board":
        """
        Build a board from up to 81 row-major values. None or 0 leaves a cell
        unset. Raises InvalidPuzzle on contradictory givens.
        """
        board = cls()
        pos: Optional[Pos] = (MIN_NUM, MIN_NUM)
        for v in values:
            if pos is None:
                raise InvalidPuzzle(f"More than {TOTAL_CELLS} cell values given")
            if v:
                board.place_given(pos[0], pos[1], v)
            pos = next_cell(*pos)
        return board

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Value]]) -> "Board":
        return cls.from_values(v for row in rows for v in row)

    # --------------------------
    # Cell access
    # --------------------------

    def cell(self, row: int, col: int) -> Cell:
        assert MIN_NUM <= row <= MAX_NUM and MIN_NUM <= col <= MAX_NUM, (
            f"Cell ({row}, {col}) is outside the board"
        )
        return self._cells[row - 1][col - 1]

    def value_at(self, row: int, col: int) -> Value:
        return self.cell(row, col).value

    def is_set(self, row: int, col: int) -> bool:
        return self.cell(row, col).has_value

    def is_given(self, row: int, col: int) -> bool:
        return (row, col) in self.givens

    def _units(self, cell: Cell) -> Tuple[ConstraintSet, ConstraintSet, ConstraintSet]:
        return self.rows[cell.row], self.columns[cell.col], self.blocks[cell.block]

    # --------------------------
    # Assignment
    # --------------------------

    def assign(self, row: int, col: int, value: int) -> None:
        cell = self.cell(row, col)
        assert MIN_NUM <= value <= MAX_NUM, f"Value {value} out of range"
        assert not cell.has_value, f"Cell ({row}, {col}) is already set"
        row_set, col_set, block_set = self._units(cell)
        assert not (
            row_set.is_used(value)
            or col_set.is_used(value)
            or block_set.is_used(value)
        ), f"Value {value} is not a candidate for ({row}, {col})"

        self.unset_cells -= 1
        cell.value = value
        row_set.mark(value)
        col_set.mark(value)
        block_set.mark(value)

    def unassign(self, row: int, col: int, value: int) -> None:
        cell = self.cell(row, col)
        assert cell.value == value, (
            f"Cell ({row}, {col}) holds {cell.value}, not {value}"
        )
        row_set, col_set, block_set = self._units(cell)

        self.unset_cells += 1
        cell.value = None
        row_set.clear(value)
        col_set.clear(value)
        block_set.clear(value)

    def place_given(self, row: int, col: int, value: int) -> None:
        """
        Place a puzzle given, reporting contradictions as InvalidPuzzle
        instead of tripping the assertions in assign().
        """
        if not (MIN_NUM <= row <= MAX_NUM and MIN_NUM <= col <= MAX_NUM):
            raise InvalidPuzzle(f"Cell ({row}, {col}) is outside the board")
        if (
            isinstance(value, bool)
            or not isinstance(value, int)
            or not MIN_NUM <= value <= MAX_NUM
        ):
            raise InvalidPuzzle(f"Invalid value {value!r} for cell ({row}, {col})")
        cell = self.cell(row, col)
        if cell.has_value:
            raise InvalidPuzzle(f"Cell ({row}, {col}) is already set to {cell.value}")

        row_set, col_set, block_set = self._units(cell)
        if row_set.is_used(value):
            raise InvalidPuzzle(f"Value {value} appears twice in row {row}")
        if col_set.is_used(value):
            raise InvalidPuzzle(f"Value {value} appears twice in column {col}")
        if block_set.is_used(value):
            raise InvalidPuzzle(f"Value {value} appears twice in block {cell.block}")

        self.assign(row, col, value)
        self.givens.add((row, col))

    def clear_solution(self) -> None:
        """Unset every cell that is not a given."""
        for row, col in positions():
            v = self.value_at(row, col)
            if v is not None and not self.is_given(row, col):
                self.unassign(row, col, v)

    # --------------------------
    # Candidates
    # --------------------------

    def candidates_at(self, row: int, col: int, floor: int = MIN_NUM) -> Optional[int]:
        """
        Smallest value >= floor that is unused in the cell's row, column and
        block, or None when there is none.
        """
        row_set, col_set, block_set = self._units(self.cell(row, col))
        for v in range(max(floor, MIN_NUM), MAX_NUM + 1):
            if not (
                row_set.is_used(v) or col_set.is_used(v) or block_set.is_used(v)
            ):
                return v
        return None

    def candidates(self, row: int, col: int) -> List[int]:
        found: List[int] = []
        v = self.candidates_at(row, col)
        while v is not None:
            found.append(v)
            v = self.candidates_at(row, col, v + 1)
        return found

    # --------------------------
    # Inspection
    # --------------------------

    def values(self) -> List[Value]:
        """All 81 values in row-major order, None for unset cells."""
        return [self.value_at(row, col) for row, col in positions()]

    def rows_of_values(self) -> List[List[Value]]:
        return [[cell.value for cell in row] for row in self._cells]

    def validate(self) -> bool:
        """
        Check the cell values for duplicates in any row, column or block.
        Works from the values alone, independently of the constraint sets.
        Allows unset cells.
        """
        rows: List[Set[int]] = [set() for _ in range(TOTAL_NUMS + 1)]
        cols: List[Set[int]] = [set() for _ in range(TOTAL_NUMS + 1)]
        blocks: List[Set[int]] = [set() for _ in range(TOTAL_NUMS + 1)]

        for row, col in positions():
            v = self.value_at(row, col)
            if v is None:
                continue
            b = block_index(row, col)
            if v in rows[row] or v in cols[col] or v in blocks[b]:
                return False
            rows[row].add(v)
            cols[col].add(v)
            blocks[b].add(v)
        return True

    def is_solved(self) -> bool:
        return self.unset_cells == 0 and self.validate()

    def __str__(self) -> str:
        return "\n".join(
            " ".join(str(v) if v is not None else "." for v in row)
            for row in self.rows_of_values()
        )
