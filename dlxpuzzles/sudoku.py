"""9x9 sudoku solved as an exact cover problem."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Optional

from .dlx import solve_exact_cover

__all__ = ["parse_board", "solve_sudoku", "format_board", "main"]

Board = list[list[int]]

_SIZE = 9
_CHOICES = _SIZE**3
_CONSTRAINTS = _SIZE * _SIZE * 4


def parse_board(text: str) -> Board:
    """Read 81 whitespace-separated digits (0 for blank) into a 9x9 board."""
    tokens = text.split()
    if len(tokens) < _SIZE * _SIZE:
        raise ValueError("Invalid input board")
    try:
        values = [int(token) for token in tokens[: _SIZE * _SIZE]]
    except ValueError as exc:
        raise ValueError("Invalid input board") from exc
    if any(value < 0 or value > 9 for value in values):
        raise ValueError("Invalid input board")
    return [values[row * _SIZE:(row + 1) * _SIZE] for row in range(_SIZE)]


def _constraints(i: int, j: int, k: int) -> tuple[int, int, int, int]:
    """Cell, row-digit, column-digit and box-digit constraints of one choice."""
    return (
        i * 9 + j,
        81 + i * 9 + k,
        162 + j * 9 + k,
        243 + (i // 3) * 27 + (j // 3) * 9 + k,
    )


def _validate(board: Sequence[Sequence[int]]) -> Board:
    grid = [list(row) for row in board]
    if len(grid) != _SIZE or any(len(row) != _SIZE for row in grid):
        raise ValueError("Invalid input board")
    if any(not 0 <= value <= 9 for row in grid for value in row):
        raise ValueError("Invalid input board")
    return grid


def solve_sudoku(board: Sequence[Sequence[int]]) -> Optional[Board]:
    """Return a filled copy of ``board``, or ``None`` if the search finds none."""
    grid = _validate(board)

    open_choices = [True] * _CHOICES
    open_constraints = [True] * _CONSTRAINTS
    for i, row in enumerate(grid):
        for j, digit in enumerate(row):
            if not digit:
                continue
            d = digit - 1
            for k in range(9):
                open_choices[i * 81 + j * 9 + k] = False
                open_choices[i * 81 + k * 9 + d] = False
                open_choices[k * 81 + j * 9 + d] = False
                open_choices[((i // 3) * 3 + k // 3) * 81 + ((j // 3) * 3 + k % 3) * 9 + d] = False
            for constraint in _constraints(i, j, d):
                open_constraints[constraint] = False

    choices = [choice for choice, is_open in enumerate(open_choices) if is_open]
    columns = {
        constraint: index
        for index, constraint in enumerate(
            c for c, is_open in enumerate(open_constraints) if is_open
        )
    }
    width = len(columns)

    matrix = []
    for choice in choices:
        i, j, k = choice // 81, (choice // 9) % 9, choice % 9
        line = [0] * width
        for constraint in _constraints(i, j, k):
            index = columns.get(constraint)
            if index is not None:
                line[index] = 1
        matrix.append(line)

    solutions = solve_exact_cover(matrix, width)
    if not solutions:
        return None
    for row_index in solutions[0]:
        choice = choices[row_index]
        grid[choice // 81][(choice // 9) % 9] = choice % 9 + 1
    return grid


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render a board as rows of space-terminated digits."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in board)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a board from standard input and print its solution, if any."""
    parser = argparse.ArgumentParser(
        prog="sudoku",
        description="Solve a sudoku read from standard input (81 digits, 0 for blank).",
    )
    parser.parse_args(argv)

    try:
        board = parse_board(sys.stdin.read())
    except ValueError:
        print("Invalid input board")
        return 1

    solved = solve_sudoku(board)
    if solved is not None:
        sys.stdout.write(format_board(solved))
    return 0


if __name__ == "__main__":
    sys.exit(main())