import pytest

CLASSIC_PUZZLE = """\
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

CLASSIC_SOLUTION = """\
5 3 4 6 7 8 9 1 2
6 7 2 1 9 5 3 4 8
1 9 8 3 4 2 5 6 7
8 5 9 7 6 1 4 2 3
4 2 6 8 5 3 7 9 1
7 1 3 9 2 4 8 5 6
9 6 1 5 3 7 2 8 4
2 8 7 4 1 9 6 3 5
3 4 5 2 8 6 1 7 9"""

# Self-consistent givens with no completion: (1, 8) can only take 8, after
# which (1, 9) needs 9, already used in column 9.
UNSOLVABLE_PUZZLE = """\
1 2 3 4 5 6 7 . .
. . . . . . . . .
. . . . . . . . .
. . . . . . . 9 .
. . . . . . . . .
. . . . . . . . .
. . . . . . . . 9
. . . . . . . . .
. . . . . . . . .
"""


@pytest.fixture
def classic_puzzle():
    return CLASSIC_PUZZLE


@pytest.fixture
def classic_solution():
    return CLASSIC_SOLUTION


@pytest.fixture
def unsolvable_puzzle():
    return UNSOLVABLE_PUZZLE
