import pytest

from backtrack_sudoku import Board, InvalidPuzzle, block_index, following, next_cell


@pytest.mark.parametrize(
    "row, col, block",
    [(1, 1, 1), (1, 9, 3), (3, 3, 1), (4, 4, 5), (5, 7, 6), (9, 1, 7), (9, 9, 9)],
)
def test_block_index(row, col, block):
    assert block_index(row, col) == block


def test_following_wraps():
    assert following(1) == 2
    assert following(9) == 1


def test_next_cell_is_row_major():
    assert next_cell(1, 1) == (1, 2)
    assert next_cell(1, 9) == (2, 1)
    assert next_cell(8, 9) == (9, 1)
    assert next_cell(9, 9) is None

    visited = [(1, 1)]
    while True:
        pos = next_cell(*visited[-1])
        if pos is None:
            break
        visited.append(pos)
    assert len(visited) == 81
    assert visited == sorted(visited)


def test_new_board_is_empty():
    board = Board()
    assert board.unset_cells == 81
    assert board.values() == [None] * 81
    assert not board.is_set(5, 5)
    assert board.validate()
    assert not board.is_solved()


def test_assign_marks_row_column_and_block():
    board = Board()
    board.assign(2, 5, 7)

    assert board.is_set(2, 5)
    assert board.value_at(2, 5) == 7
    assert board.unset_cells == 80
    assert board.rows[2].is_used(7)
    assert board.columns[5].is_used(7)
    assert board.blocks[2].is_used(7)
    assert not board.rows[1].is_used(7)


def test_unassign_restores_state():
    board = Board()
    board.assign(2, 5, 7)
    board.unassign(2, 5, 7)

    assert not board.is_set(2, 5)
    assert board.unset_cells == 81
    assert board.rows[2].used() == []
    assert board.columns[5].used() == []
    assert board.blocks[2].used() == []


def test_assign_conflict_is_a_programming_error():
    board = Board()
    board.assign(1, 1, 5)
    with pytest.raises(AssertionError):
        board.assign(1, 9, 5)
    with pytest.raises(AssertionError):
        board.assign(1, 1, 6)


def test_unassign_wrong_value_is_a_programming_error():
    board = Board()
    board.assign(1, 1, 5)
    with pytest.raises(AssertionError):
        board.unassign(1, 1, 6)


def test_candidates_at_skips_used_values():
    board = Board()
    board.assign(1, 2, 1)  # row 1
    board.assign(4, 1, 2)  # column 1
    board.assign(3, 3, 3)  # block 1

    assert board.candidates_at(1, 1) == 4
    assert board.candidates_at(1, 1, 5) == 5
    assert board.candidates(1, 1) == [4, 5, 6, 7, 8, 9]


def test_candidates_at_returns_none_when_exhausted():
    board = Board()
    for col, v in enumerate(range(1, 9), start=1):
        board.assign(1, col, v)
    assert board.candidates_at(1, 9) == 9
    assert board.candidates_at(1, 9, 10) is None

    board.assign(5, 9, 9)
    assert board.candidates_at(1, 9) is None
    assert board.candidates(1, 9) == []


def test_candidates_never_marked():
    board = Board.from_rows([[5, 3, 0, 0, 7, 0, 0, 0, 0], [6, 0, 0, 1, 9, 5]])
    for row in range(1, 10):
        for col in range(1, 10):
            if board.is_set(row, col):
                continue
            cell = board.cell(row, col)
            for v in board.candidates(row, col):
                assert not board.rows[row].is_used(v)
                assert not board.columns[col].is_used(v)
                assert not board.blocks[cell.block].is_used(v)


def test_place_given_records_givens():
    board = Board()
    board.place_given(1, 1, 5)
    assert board.is_given(1, 1)
    assert board.givens == {(1, 1)}
    assert board.unset_cells == 80


@pytest.mark.parametrize(
    "first, second, unit",
    [
        ((1, 1, 5), (1, 2, 5), "row 1"),
        ((1, 1, 5), (9, 1, 5), "column 1"),
        ((1, 1, 5), (3, 3, 5), "block 1"),
    ],
)
def test_place_given_rejects_contradictions(first, second, unit):
    board = Board()
    board.place_given(*first)
    with pytest.raises(InvalidPuzzle, match=unit):
        board.place_given(*second)
    assert board.unset_cells == 80


def test_place_given_rejects_bad_input():
    board = Board()
    board.place_given(1, 1, 5)
    with pytest.raises(InvalidPuzzle):
        board.place_given(1, 1, 6)
    with pytest.raises(InvalidPuzzle):
        board.place_given(1, 2, 10)
    with pytest.raises(InvalidPuzzle):
        board.place_given(0, 2, 1)


def test_from_values_and_back():
    values = [None] * 81
    values[0] = 5
    values[80] = 9
    board = Board.from_values(values)
    assert board.values() == values
    assert board.givens == {(1, 1), (9, 9)}


def test_from_values_rejects_too_many():
    with pytest.raises(InvalidPuzzle):
        Board.from_values([0] * 82)


def test_validate_looks_at_values():
    board = Board()
    board.assign(1, 1, 5)
    # bypass assign to put the grid in a state the constraint sets never allow
    board.cell(1, 2).value = 5
    assert not board.validate()


def test_clear_solution_keeps_givens():
    board = Board()
    board.place_given(1, 1, 5)
    board.assign(1, 2, 1)
    board.assign(2, 1, 2)

    board.clear_solution()

    assert board.values()[0] == 5
    assert board.unset_cells == 80
    assert board.rows[1].used() == [5]


def test_str():
    board = Board()
    board.assign(1, 1, 5)
    lines = str(board).splitlines()
    assert len(lines) == 9
    assert lines[0] == "5 . . . . . . . ."


@pytest.mark.parametrize("value", [True, False, "5", 5.0])
def test_place_given_rejects_non_integers(value):
    board = Board()
    with pytest.raises(InvalidPuzzle):
        board.place_given(1, 1, value)
    assert board.unset_cells == 81


def test_from_values_rejects_booleans():
    with pytest.raises(InvalidPuzzle):
        Board.from_values([True] + [None] * 80)
