"""Rectangles (shikaku): split a grid into rectangles, one clue in each.

Every non-zero cell gives the area of the rectangle containing it; zero
cells are blank.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Optional

from .dlx import solve_exact_cover

__all__ = [
    "parse_board",
    "candidate_rectangles",
    "solve_rectangles",
    "format_board",
    "main",
]

Board = list[list[int]]
Rect = tuple[int, int, int, int]

_BAD_SIZE = "Invalid board size"


def _validate(board: Sequence[Sequence[int]]) -> Board:
    grid = [list(row) for row in board]
    if not grid or not grid[0] or any(len(row) != len(grid[0]) for row in grid):
        raise ValueError(_BAD_SIZE)
    if any(value < 0 for row in grid for value in row):
        raise ValueError(_BAD_SIZE)
    return grid


def parse_board(text: str) -> Board:
    """Read ``H W`` followed by ``H * W`` non-negative numbers."""
    tokens = text.split()
    try:
        height, width = int(tokens[0]), int(tokens[1])
    except (IndexError, ValueError) as exc:
        raise ValueError(_BAD_SIZE) from exc
    if height < 1 or width < 1:
        raise ValueError(_BAD_SIZE)
    cells = tokens[2:2 + height * width]
    if len(cells) < height * width:
        raise ValueError(_BAD_SIZE)
    try:
        values = [int(token) for token in cells]
    except ValueError as exc:
        raise ValueError(_BAD_SIZE) from exc
    board = [values[row * width:(row + 1) * width] for row in range(height)]
    return _validate(board)


def candidate_rectangles(board: Sequence[Sequence[int]]) -> list[Rect]:
    """List ``(top, bottom, left, right)`` rectangles holding exactly one clue.

    A rectangle is a candidate for a clue when it contains the clue's cell,
    its area equals the clue and no other clue lies inside it.
    """
    grid = _validate(board)
    height, width = len(grid), len(grid[0])

    # prefix[i][j] counts clues in rows < i and columns < j.
    prefix = [[0] * (width + 1) for _ in range(height + 1)]
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            prefix[i + 1][j + 1] = (
                prefix[i][j + 1] + prefix[i + 1][j] - prefix[i][j] + (value > 0)
            )

    def clues(top: int, bottom: int, left: int, right: int) -> int:
        return (
            prefix[bottom + 1][right + 1]
            - prefix[top][right + 1]
            - prefix[bottom + 1][left]
            + prefix[top][left]
        )

    rectangles: list[Rect] = []
    for i, row in enumerate(grid):
        for j, area in enumerate(row):
            if area == 0:
                continue
            for h in range(area // (width + 1) + 1, height + 1):
                if area % h:
                    continue
                w = area // h
                for top in range(max(0, i - h + 1), min(i, height - h) + 1):
                    bottom = top + h - 1
                    for left in range(max(0, j - w + 1), min(j, width - w) + 1):
                        right = left + w - 1
                        if clues(top, bottom, left, right) == 1:
                            rectangles.append((top, bottom, left, right))
    return rectangles


def solve_rectangles(board: Sequence[Sequence[int]]) -> Optional[Board]:
    """Label every cell with the index of its rectangle, or return ``None``."""
    grid = _validate(board)
    height, width = len(grid), len(grid[0])
    rectangles = candidate_rectangles(grid)

    matrix = []
    for top, bottom, left, right in rectangles:
        line = [0] * (height * width)
        for i in range(top, bottom + 1):
            for j in range(left, right + 1):
                line[i * width + j] = 1
        matrix.append(line)

    solutions = solve_exact_cover(matrix, height * width)
    if not solutions:
        return None

    for label, row in enumerate(solutions[0]):
        top, bottom, left, right = rectangles[row]
        for i in range(top, bottom + 1):
            for j in range(left, right + 1):
                grid[i][j] = label
    return grid


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render rows of space-terminated numbers."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in board)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a puzzle from standard input and print the labelled board."""
    parser = argparse.ArgumentParser(
        prog="rectangles",
        description="Solve a rectangles puzzle; reads H W then H*W numbers from standard input.",
    )
    parser.parse_args(argv)

    try:
        board = parse_board(sys.stdin.read())
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 0

    solved = solve_rectangles(board)
    if solved is None:
        print("No solution found", file=sys.stderr)
        return 1
    sys.stdout.write(format_board(solved))
    return 0


if __name__ == "__main__":
    sys.exit(main())