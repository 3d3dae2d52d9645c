"""The n-queens problem posed as an exact cover with optional diagonals."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Optional

from .dlx import solve_exact_cover

__all__ = ["solve_nqueens", "format_solutions", "main"]

Square = tuple[int, int]


def solve_nqueens(n: int) -> list[list[Square]]:
    """Return every placement of ``n`` non-attacking queens on an n-by-n board.

    Each solution lists ``(row, column)`` squares in the order the search
    picked them.
    """
    if n < 1:
        raise ValueError("Invalid board size")

    # Rows and files must each hold exactly one queen; the 2n-1 rising and
    # 2n-1 falling diagonals may hold at most one.
    essential = 2 * n
    optional = 4 * n - 2
    width = essential + optional

    matrix = []
    for i in range(n):
        for j in range(n):
            line = [0] * width
            line[i] = 1
            line[n + j] = 1
            line[2 * n + i + j] = 1
            line[5 * n - 2 + i - j] = 1
            matrix.append(line)

    solutions = solve_exact_cover(matrix, essential, optional, find_all=True)
    return [[divmod(row, n) for row in solution] for solution in solutions]


def format_solutions(solutions: Sequence[Sequence[Square]], list_all: bool) -> str:
    """Render the solution count and, if asked, every queen of every solution."""
    lines = [str(len(solutions))]
    if list_all:
        for index, solution in enumerate(solutions):
            lines.append(f"{index}:")
            lines.extend(f"{row} {column}" for row, column in solution)
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read ``N`` and a list-all flag from standard input and print the result."""
    parser = argparse.ArgumentParser(
        prog="nqueens",
        description="Count n-queens solutions; reads 'N LIST_ALL' from standard input.",
    )
    parser.parse_args(argv)

    tokens = sys.stdin.read().split()
    try:
        n, list_all = int(tokens[0]), int(tokens[1])
    except (IndexError, ValueError):
        print("Invalid board size")
        return 1
    if n < 1:
        print("Invalid board size")
        return 0

    sys.stdout.write(format_solutions(solve_nqueens(n), list_all != 0))
    return 0


if __name__ == "__main__":
    sys.exit(main())