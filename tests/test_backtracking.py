import itertools

import pytest

from dsalgo.backtracking import (
    rat_in_maze,
    solve_n_queens,
    solve_sudoku,
    unique_permutations,
)

PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]


def _queens_valid(board):
    n = len(board)
    positions = [(r, row.index(1)) for r, row in enumerate(board)]
    assert all(sum(row) == 1 for row in board)
    cols = [c for _, c in positions]
    assert len(set(cols)) == n
    assert len({r - c for r, c in positions}) == n
    assert len({r + c for r, c in positions}) == n
    return True


def test_four_queens_first_solution():
    assert solve_n_queens(4) == [
        [0, 1, 0, 0],
        [0, 0, 0, 1],
        [1, 0, 0, 0],
        [0, 0, 1, 0],
    ]


@pytest.mark.parametrize("n", [1, 5, 6, 8])
def test_queens_boards_are_valid(n):
    assert _queens_valid(solve_n_queens(n))


@pytest.mark.parametrize("n", [2, 3])
def test_queens_no_solution(n):
    assert solve_n_queens(n) is None


def test_queens_rejects_zero():
    with pytest.raises(ValueError):
        solve_n_queens(0)


def test_rat_in_maze_sample():
    grid = [
        [1, 0, 0, 0, 0],
        [1, 1, 1, 1, 1],
        [1, 1, 1, 0, 1],
        [0, 0, 0, 0, 1],
        [0, 0, 0, 0, 1],
    ]
    path = rat_in_maze(grid)
    cells = [(r, c) for r in range(5) for c in range(5) if path[r][c]]
    assert (0, 0) in cells and (4, 4) in cells
    assert len(cells) == 9
    for r, c in cells:
        assert grid[r][c] == 1
    x = y = 0
    while (x, y) != (4, 4):
        if x + 1 < 5 and path[x + 1][y]:
            x += 1
        else:
            assert path[x][y + 1] == 1
            y += 1


def test_rat_in_maze_blocked():
    assert rat_in_maze([[1, 0], [0, 1]]) is None


def test_unique_permutations_with_duplicates():
    assert unique_permutations([2, 1, 1]) == [[1, 1, 2], [1, 2, 1], [2, 1, 1]]


def test_unique_permutations_distinct_values():
    values = [3, 1, 4, 2]
    perms = unique_permutations(values)
    assert perms == sorted(perms)
    assert {tuple(p) for p in perms} == set(itertools.permutations(values))
    assert len(perms) == len(set(map(tuple, perms)))


def _sudoku_valid(board):
    digits = set(range(1, 10))
    for i in range(9):
        assert set(board[i]) == digits
        assert {board[r][i] for r in range(9)} == digits
    for top in range(0, 9, 3):
        for left in range(0, 9, 3):
            box = {board[r][c] for r in range(top, top + 3) for c in range(left, left + 3)}
            assert box == digits
    return True


def test_sudoku_solution_is_valid_and_keeps_givens():
    solved = solve_sudoku(PUZZLE)
    assert _sudoku_valid(solved)
    for r in range(9):
        for c in range(9):
            if PUZZLE[r][c]:
                assert solved[r][c] == PUZZLE[r][c]
    assert PUZZLE[0][2] == 0


def test_sudoku_minus_one_marks_empty():
    marked = [[cell if cell else -1 for cell in row] for row in PUZZLE]
    assert solve_sudoku(marked) == solve_sudoku(PUZZLE)


def test_sudoku_conflicting_givens():
    bad = [row[:] for row in PUZZLE]
    bad[0][2] = 5
    assert solve_sudoku(bad) is None


def test_sudoku_bad_shape():
    with pytest.raises(ValueError):
        solve_sudoku([[0] * 9] * 8)