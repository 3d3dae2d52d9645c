"""Spangram-style word grids: cover every letter with dictionary words.

Words are traced through the grid with king moves, each cell used by exactly
one word, and two diagonal strokes may not cross.
"""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

from .dlx import solve_exact_cover
from .trie import TrieNode

__all__ = [
    "Placement",
    "build_trie",
    "find_placements",
    "solve_spangram",
    "render_solution",
    "main",
]

Cell = tuple[int, int]

_NEIGHBOURS: tuple[Cell, ...] = (
    (-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1),
)
_MIN_WORD_LENGTH = 4
_DEFAULT_DICTIONARY = "words.txt"


@dataclass(frozen=True)
class Placement:
    """A word together with the cells it runs through, in order."""

    word: str
    path: tuple[Cell, ...]


def build_trie(words: Iterable[str], exclude: Iterable[str] = ()) -> TrieNode:
    """Build a trie of the words with at least four letters not in ``exclude``."""
    excluded = set(exclude)
    trie = TrieNode()
    for word in words:
        if len(word) >= _MIN_WORD_LENGTH and word not in excluded:
            trie.insert(word)
    return trie


def _normalise(grid: Sequence[str]) -> list[str]:
    lines = [line.lower() for line in grid]
    if not lines or not lines[0]:
        raise ValueError("grid must have at least one row and one column")
    if any(len(line) != len(lines[0]) for line in lines):
        raise ValueError("grid rows must all have the same length")
    return lines


def _has_step(path: Sequence[Cell], first: Cell, second: Cell) -> bool:
    """Whether ``path`` moves directly between ``first`` and ``second``."""
    return any(
        {a, b} == {first, second} for a, b in zip(path, path[1:])
    )


def find_placements(grid: Sequence[str], trie: TrieNode) -> list[Placement]:
    """List every way a trie word can be traced through the grid.

    Letters are compared in lower case. A path never revisits a cell and
    never crosses its own diagonal strokes.
    """
    lines = _normalise(grid)
    rows, cols = len(lines), len(lines[0])
    visited = [[False] * cols for _ in range(rows)]
    path: list[Cell] = []
    placements: list[Placement] = []

    def extend(node: TrieNode, i: int, j: int) -> None:
        if not (0 <= i < rows and 0 <= j < cols) or visited[i][j]:
            return
        following = node.children.get(lines[i][j])
        if following is None:
            return
        visited[i][j] = True
        path.append((i, j))
        if following.end:
            word = "".join(lines[x][y] for x, y in path)
            placements.append(Placement(word, tuple(path)))
        for dx, dy in _NEIGHBOURS:
            if abs(dx) != abs(dy) or not _has_step(path, (i + dx, j), (i, j + dy)):
                extend(following, i + dx, j + dy)
        path.pop()
        visited[i][j] = False

    for i in range(rows):
        for j in range(cols):
            extend(trie, i, j)
    return placements


def solve_spangram(
    grid: Sequence[str], trie: TrieNode, max_words: Optional[int] = None
) -> list[list[Placement]]:
    """Find a covering of the grid by trie words.

    Returns a list holding at most one solution, each a list of placements.
    With ``max_words`` the search gives up on selections larger than that.
    """
    lines = _normalise(grid)
    rows, cols = len(lines), len(lines[0])
    placements = find_placements(lines, trie)

    cells = rows * cols
    crossings = (rows - 1) * (cols - 1)
    matrix = []
    for placement in placements:
        line = [0] * (cells + crossings)
        for x, y in placement.path:
            line[x * cols + y] = 1
        for (x1, y1), (x2, y2) in zip(placement.path, placement.path[1:]):
            if abs(x2 - x1) == 1 and abs(y2 - y1) == 1:
                line[cells + min(x1, x2) * (cols - 1) + min(y1, y2)] = 1
        matrix.append(line)

    solutions = solve_exact_cover(matrix, cells, crossings, max_selected=max_words)
    return [[placements[row] for row in solution] for solution in solutions]


def render_solution(grid: Sequence[str], placements: Sequence[Placement]) -> str:
    """Draw the words on a spaced-out grid, first letters capitalised.

    The first line lists the words; below it the grid is drawn with ``-``,
    ``|``, ``\\`` and ``/`` joining consecutive letters of each word.
    """
    lines = _normalise(grid)
    rows, cols = len(lines), len(lines[0])
    output = [[" "] * (2 * cols - 1) for _ in range(2 * rows - 1)]
    for i, line in enumerate(lines):
        for j, char in enumerate(line):
            output[2 * i][2 * j] = char

    header = []
    for placement in placements:
        header.append(f"{placement.word} ")
        x, y = placement.path[0]
        output[2 * x][2 * y] = output[2 * x][2 * y].upper()
        for (x1, y1), (x2, y2) in zip(placement.path, placement.path[1:]):
            dx, dy = x2 - x1, y2 - y1
            if abs(dx) == 1 and dy == 0:
                output[2 * x1 + dx][2 * y1] = "|"
            elif abs(dy) == 1 and dx == 0:
                output[2 * x1][2 * y1 + dy] = "-"
            elif dx == dy:
                output[2 * x1 + dx][2 * y1 + dy] = "\\"
            else:
                output[2 * x1 + dx][2 * y1 + dy] = "/"

    body = "".join("".join(row) + "\n" for row in output)
    return "".join(header) + "\n" + body


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a grid from standard input and print a word covering of it."""
    parser = argparse.ArgumentParser(
        prog="spangram",
        description=(
            "Cover a letter grid read from standard input with dictionary words. "
            "A number limits the word count, an argument with a dot names the "
            "dictionary, anything else is a word to exclude."
        ),
    )
    parser.add_argument("arguments", nargs="*")
    options = parser.parse_args(argv)

    dictionary = _DEFAULT_DICTIONARY
    max_words: Optional[int] = None
    exclude: set[str] = set()
    for argument in options.arguments:
        digits = re.match(r"\d+", argument)
        if digits:
            max_words = int(digits.group())
        elif "." in argument:
            dictionary = argument
        else:
            exclude.add(argument)

    try:
        with open(dictionary, encoding="utf-8") as handle:
            trie = build_trie(handle.read().split(), exclude)
    except OSError as exc:
        print(f"Cannot read dictionary {dictionary}: {exc.strerror}", file=sys.stderr)
        return 1

    grid = sys.stdin.read().split()
    try:
        solutions = solve_spangram(grid, trie, max_words)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    for solution in solutions:
        sys.stdout.write(render_solution(grid, solution) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())