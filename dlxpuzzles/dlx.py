"""Exact cover search with Knuth's dancing links.

Columns are split into essential constraints, which must be covered exactly
once, and optional constraints, which may be covered at most once.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Optional

__all__ = ["DancingLinks", "solve_exact_cover"]


class _Cell:
    """A 1-entry of the matrix, linked to its neighbours in four directions."""

    __slots__ = ("left", "right", "up", "down", "column", "row")

    def __init__(self, column: Optional["_Column"], row: int) -> None:
        self.left = self.right = self.up = self.down = self
        self.column = column
        self.row = row


class _Column:
    """A column header with its own ring of cells and a live 1-count."""

    __slots__ = ("left", "right", "head", "size", "essential")

    def __init__(self, essential: bool) -> None:
        self.left = self.right = self
        self.head = _Cell(self, -1)
        self.size = 0
        self.essential = essential

    def append(self, cell: _Cell) -> None:
        """Attach a cell at the bottom of this column."""
        cell.up = self.head.up
        cell.down = self.head
        self.head.up.down = cell
        self.head.up = cell
        self.size += 1

    def cover(self) -> None:
        """Drop this column and every row that has a 1 in it."""
        self.left.right = self.right
        self.right.left = self.left
        for row_cell in _walk(self.head, "down"):
            for cell in _walk(row_cell, "right"):
                cell.up.down = cell.down
                cell.down.up = cell.up
                cell.column.size -= 1

    def uncover(self) -> None:
        """Undo :meth:`cover`, restoring links in reverse order."""
        for row_cell in _walk(self.head, "up"):
            for cell in _walk(row_cell, "left"):
                cell.up.down = cell
                cell.down.up = cell
                cell.column.size += 1
        self.left.right = self
        self.right.left = self


def _walk(start, direction: str) -> Iterator:
    """Yield the nodes of a ring after ``start``, reading each link lazily."""
    node = getattr(start, direction)
    while node is not start:
        yield node
        node = getattr(node, direction)


class DancingLinks:
    """A linked exact cover problem that can be searched repeatedly."""

    def __init__(self, matrix: Sequence[Sequence[object]], essential: int, optional: int) -> None:
        if essential < 0 or optional < 0:
            raise ValueError("column counts must be non-negative")
        width = essential + optional
        self._root = _Column(essential=False)
        self._columns = [_Column(essential=index < essential) for index in range(width)]
        for column in self._columns:
            column.left = self._root.left
            column.right = self._root
            self._root.left.right = column
            self._root.left = column

        for row_id, row in enumerate(matrix):
            if len(row) != width:
                raise ValueError(
                    f"row {row_id} has {len(row)} entries, expected {width}"
                )
            first: Optional[_Cell] = None
            for column, value in zip(self._columns, row):
                if not value:
                    continue
                cell = _Cell(column, row_id)
                column.append(cell)
                if first is None:
                    first = cell
                else:
                    cell.left = first.left
                    cell.right = first
                    first.left.right = cell
                    first.left = cell
        self.rows = len(matrix)

    def solve(self, find_all: bool = False, max_selected: Optional[int] = None) -> list[list[int]]:
        """Return solutions as lists of row indices in the order they were chosen.

        Without ``find_all`` the search stops at the first solution. With
        ``max_selected`` partial selections of that many rows are abandoned.
        """
        if max_selected is not None and max_selected < 0:
            raise ValueError("max_selected must be non-negative")
        search = self._search([], max_selected)
        try:
            if find_all:
                return list(search)
            first = next(search, None)
            return [] if first is None else [first]
        finally:
            search.close()

    def _choose_column(self) -> _Column:
        chosen = self._root.right
        for column in _walk(chosen, "right"):
            if not column.essential:
                break
            if column.size < chosen.size:
                chosen = column
        return chosen

    def _search(self, chosen: list[int], max_selected: Optional[int]) -> Iterator[list[int]]:
        if not self._root.right.essential:
            yield list(chosen)
            return
        if max_selected is not None and len(chosen) >= max_selected:
            return

        column = self._choose_column()
        if column.size == 0:
            return

        column.cover()
        try:
            for row_cell in _walk(column.head, "down"):
                chosen.append(row_cell.row)
                for cell in _walk(row_cell, "right"):
                    cell.column.cover()
                try:
                    yield from self._search(chosen, max_selected)
                finally:
                    for cell in _walk(row_cell, "left"):
                        cell.column.uncover()
                    chosen.pop()
        finally:
            column.uncover()


def solve_exact_cover(
    matrix: Sequence[Sequence[object]],
    essential: int,
    optional: int = 0,
    find_all: bool = False,
    max_selected: Optional[int] = None,
) -> list[list[int]]:
    """Build a :class:`DancingLinks` problem and solve it once."""
    return DancingLinks(matrix, essential, optional).solve(find_all, max_selected)