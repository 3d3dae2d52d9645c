import io
from itertools import combinations

import pytest

from dlxpuzzles.nqueens import format_solutions, main, solve_nqueens


def _attacks(a, b):
    (r1, c1), (r2, c2) = a, b
    return r1 == r2 or c1 == c2 or abs(r1 - r2) == abs(c1 - c2)


def test_four_queens_has_two_solutions():
    assert len(solve_nqueens(4)) == 2


def test_eight_queens_count():
    assert len(solve_nqueens(8)) == 92


def test_three_queens_has_none():
    assert solve_nqueens(3) == []


def test_single_queen():
    assert solve_nqueens(1) == [[(0, 0)]]


@pytest.mark.parametrize("n", [4, 5, 6, 7])
def test_solutions_are_valid_and_distinct(n):
    solutions = solve_nqueens(n)
    seen = set()
    for solution in solutions:
        assert len(solution) == n
        assert all(0 <= r < n and 0 <= c < n for r, c in solution)
        assert not any(_attacks(a, b) for a, b in combinations(solution, 2))
        seen.add(frozenset(solution))
    assert len(seen) == len(solutions)


@pytest.mark.parametrize("n", [0, -3])
def test_invalid_size_raises(n):
    with pytest.raises(ValueError):
        solve_nqueens(n)


def test_format_count_only():
    solutions = [[(0, 1), (1, 0)], [(0, 0), (1, 1)]]
    assert format_solutions(solutions, False) == "2\n"


def test_format_lists_every_queen():
    solutions = [[(0, 1), (1, 0)], [(0, 0), (1, 1)]]
    assert format_solutions(solutions, True) == "2\n0:\n0 1\n1 0\n1:\n0 0\n1 1\n"


def test_main_prints_solutions(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 1\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "1\n0:\n0 0\n"


def test_main_count_matches_solver(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("6 0"))
    assert main([]) == 0
    assert capsys.readouterr().out == f"{len(solve_nqueens(6))}\n"


def test_main_rejects_bad_size(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 1"))
    assert main([]) == 0
    assert capsys.readouterr().out == "Invalid board size\n"