"""Dominosa: recover the domino layout of a board of numbers.

A board of height ``H`` has ``H + 1`` columns and holds the numbers
``0 .. H-1``. Every unordered pair of those numbers appears on exactly one
domino.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Optional

from .dlx import solve_exact_cover

__all__ = ["parse_board", "solve_dominosa", "format_solution", "main"]

Board = list[list[int]]
Cell = tuple[int, int]

_BAD_SIZE = "Invalid board size"
_BAD_ENTRY = "Invalid entry found in the board"


def _validate(board: Sequence[Sequence[int]]) -> Board:
    grid = [list(row) for row in board]
    height = len(grid)
    if height < 1 or any(len(row) != height + 1 for row in grid):
        raise ValueError(_BAD_SIZE)
    if any(not 0 <= value < height for row in grid for value in row):
        raise ValueError(_BAD_ENTRY)
    return grid


def parse_board(text: str) -> Board:
    """Read the height ``H`` followed by ``H * (H + 1)`` numbers."""
    tokens = text.split()
    try:
        height = int(tokens[0])
    except (IndexError, ValueError) as exc:
        raise ValueError(_BAD_SIZE) from exc
    if height < 1:
        raise ValueError(_BAD_SIZE)
    width = height + 1
    cells = tokens[1:1 + height * width]
    if len(cells) < height * width:
        raise ValueError(_BAD_ENTRY)
    try:
        values = [int(token) for token in cells]
    except ValueError as exc:
        raise ValueError(_BAD_ENTRY) from exc
    board = [values[row * width:(row + 1) * width] for row in range(height)]
    return _validate(board)


def solve_dominosa(board: Sequence[Sequence[int]]) -> Optional[list[str]]:
    """Return the layout as rows of ``-`` and ``|`` marks, or ``None``.

    A horizontal domino marks both of its cells with ``-`` and a vertical
    one with ``|``.
    """
    grid = _validate(board)
    height = len(grid)
    width = height + 1
    limit = height
    positions = height * width
    columns = positions + limit * limit

    dominoes: list[tuple[Cell, Cell]] = [
        ((i, j), (i, j + 1)) for i in range(height) for j in range(width - 1)
    ]
    dominoes += [
        ((i, j), (i + 1, j)) for i in range(height - 1) for j in range(width)
    ]

    matrix = []
    for (a, b), (c, d) in dominoes:
        line = [0] * columns
        first, second = grid[a][b], grid[c][d]
        line[a * width + b] = 1
        line[c * width + d] = 1
        line[positions + first * limit + second] = 1
        line[positions + second * limit + first] = 1
        matrix.append(line)

    solutions = solve_exact_cover(matrix, columns)
    if not solutions:
        return None

    layout = [[" "] * width for _ in range(height)]
    for row in solutions[0]:
        (a, b), (c, d) = dominoes[row]
        mark = "-" if a == c else "|"
        layout[a][b] = layout[c][d] = mark
    return ["".join(line) for line in layout]


def format_solution(layout: Sequence[str]) -> str:
    """Render a layout one row per line."""
    return "".join(f"{line}\n" for line in layout)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a board from standard input and print its domino layout."""
    parser = argparse.ArgumentParser(
        prog="dominosa",
        description="Solve dominosa; reads H then H*(H+1) numbers from standard input.",
    )
    parser.parse_args(argv)

    try:
        board = parse_board(sys.stdin.read())
    except ValueError as exc:
        print(exc)
        return 0 if str(exc) == _BAD_SIZE else 1

    layout = solve_dominosa(board)
    if layout is not None:
        sys.stdout.write(format_solution(layout))
    return 0


if __name__ == "__main__":
    sys.exit(main())