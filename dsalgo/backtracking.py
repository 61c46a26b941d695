"""Backtracking searches: N queens, rat in a maze, permutations, sudoku."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

SUDOKU_SIZE = 9
_BOX = 3


def solve_n_queens(n: int) -> list[list[int]] | None:
    """First placement of ``n`` queens found row by row, as a 0/1 board."""
    if n < 1:
        raise ValueError("n must be positive")
    columns: list[int] = []
    used_cols: set[int] = set()
    used_diag: set[int] = set()
    used_anti: set[int] = set()

    def place(row: int) -> bool:
        if row == n:
            return True
        for col in range(n):
            if col in used_cols or row - col in used_diag or row + col in used_anti:
                continue
            columns.append(col)
            used_cols.add(col)
            used_diag.add(row - col)
            used_anti.add(row + col)
            if place(row + 1):
                return True
            columns.pop()
            used_cols.remove(col)
            used_diag.remove(row - col)
            used_anti.remove(row + col)
        return False

    if not place(0):
        return None
    return [[1 if c == col else 0 for c in range(n)] for col in columns]


def rat_in_maze(grid: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """A path moving only down or right, as a 0/1 matrix, or None.

    Open cells hold 1. Reaching the bottom-right corner ends the search.
    """
    n = len(grid)
    if n == 0 or any(len(row) != n for row in grid):
        raise ValueError("grid must be a non-empty square")
    solution = [[0] * n for _ in range(n)]

    def walk(x: int, y: int) -> bool:
        if x == n - 1 and y == n - 1:
            solution[x][y] = 1
            return True
        if x < n and y < n and grid[x][y] == 1:
            solution[x][y] = 1
            if walk(x + 1, y) or walk(x, y + 1):
                return True
            solution[x][y] = 0
        return False

    return solution if walk(0, 0) else None


def unique_permutations(values: Iterable[int]) -> list[list[int]]:
    """Distinct permutations of the values in lexicographic order."""
    items = sorted(values)
    result = [list(items)]
    while True:
        i = len(items) - 2
        while i >= 0 and items[i] >= items[i + 1]:
            i -= 1
        if i < 0:
            return result
        j = len(items) - 1
        while items[j] <= items[i]:
            j -= 1
        items[i], items[j] = items[j], items[i]
        items[i + 1:] = reversed(items[i + 1:])
        result.append(list(items))


def _allowed(board: list[list[int]], row: int, col: int, digit: int) -> bool:
    if digit in board[row]:
        return False
    if any(board[r][col] == digit for r in range(SUDOKU_SIZE)):
        return False
    top, left = row - row % _BOX, col - col % _BOX
    return all(
        board[r][c] != digit
        for r in range(top, top + _BOX)
        for c in range(left, left + _BOX)
    )


def solve_sudoku(grid: Sequence[Sequence[int | None]]) -> list[list[int]] | None:
    """Solved copy of a 9x9 sudoku, or None if it has no solution.

    Any cell not holding a digit 1-9 (such as 0, -1 or None) is empty.
    """
    if len(grid) != SUDOKU_SIZE or any(len(row) != SUDOKU_SIZE for row in grid):
        raise ValueError("grid must be 9x9")
    board = [
        [cell if isinstance(cell, int) and 1 <= cell <= 9 else 0 for cell in row]
        for row in grid
    ]
    empties = [
        (r, c) for r in range(SUDOKU_SIZE) for c in range(SUDOKU_SIZE) if not board[r][c]
    ]
    for r in range(SUDOKU_SIZE):
        for c in range(SUDOKU_SIZE):
            digit = board[r][c]
            if digit:
                board[r][c] = 0
                ok = _allowed(board, r, c, digit)
                board[r][c] = digit
                if not ok:
                    return None

    def fill(index: int) -> bool:
        if index == len(empties):
            return True
        row, col = empties[index]
        for digit in range(1, 10):
            if _allowed(board, row, col, digit):
                board[row][col] = digit
                if fill(index + 1):
                    return True
        board[row][col] = 0
        return False

    return board if fill(0) else None