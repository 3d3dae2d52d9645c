import pytest

from dlxpuzzles.dlx import DancingLinks, solve_exact_cover

KNUTH = [
    [0, 0, 1, 0, 1, 1, 0],
    [1, 0, 0, 1, 0, 0, 1],
    [0, 1, 1, 0, 0, 1, 0],
    [1, 0, 0, 1, 0, 0, 0],
    [0, 1, 0, 0, 0, 0, 1],
    [0, 0, 0, 1, 1, 0, 1],
]


def queens_matrix(n):
    width = 6 * n - 2
    rows = []
    for i in range(n):
        for j in range(n):
            row = [0] * width
            for c in (i, n + j, 2 * n + i + j, 5 * n - 2 + i - j):
                row[c] = 1
            rows.append(row)
    return rows, 2 * n, 4 * n - 2


def check_cover(matrix, essential, solution):
    width = len(matrix[0]) if matrix else essential
    counts = [sum(matrix[r][c] for r in solution) for c in range(width)]
    assert all(count == 1 for count in counts[:essential])
    assert all(count <= 1 for count in counts[essential:])
    assert len(set(solution)) == len(solution)


def test_knuth_example_has_unique_solution():
    solutions = solve_exact_cover(KNUTH, 7, 0, find_all=True)
    assert len(solutions) == 1
    assert sorted(solutions[0]) == [0, 3, 4]


def test_first_solution_matches_first_of_all():
    matrix, essential, optional = queens_matrix(6)
    links = DancingLinks(matrix, essential, optional)
    everything = links.solve(find_all=True)
    assert links.solve() == everything[:1]


def test_four_queens_count_and_validity():
    matrix, essential, optional = queens_matrix(4)
    solutions = solve_exact_cover(matrix, essential, optional, find_all=True)
    assert len(solutions) == 2
    for solution in solutions:
        check_cover(matrix, essential, solution)


def test_solutions_are_distinct_covers():
    matrix, essential, optional = queens_matrix(6)
    solutions = solve_exact_cover(matrix, essential, optional, find_all=True)
    assert len({tuple(sorted(s)) for s in solutions}) == len(solutions)
    for solution in solutions:
        check_cover(matrix, essential, solution)


def test_repeated_solving_restores_structure():
    matrix, essential, optional = queens_matrix(5)
    links = DancingLinks(matrix, essential, optional)
    first = links.solve(find_all=True)
    assert links.solve() == first[:1]
    assert links.solve(find_all=True) == first


def test_identity_matrix_selects_every_row():
    identity = [[int(i == j) for j in range(4)] for i in range(4)]
    solutions = solve_exact_cover(identity, 4, 0, find_all=True)
    assert len(solutions) == 1
    assert sorted(solutions[0]) == [0, 1, 2, 3]


def test_duplicate_rows_give_separate_solutions():
    matrix = [[1, 1], [1, 1]]
    assert solve_exact_cover(matrix, 2, 0, find_all=True) == [[0], [1]]


def test_unsatisfiable_problem_has_no_solutions():
    matrix = [[1, 0, 0], [0, 1, 0]]
    assert solve_exact_cover(matrix, 3, 0, find_all=True) == []
    assert solve_exact_cover(matrix, 3) == []


def test_no_essential_columns_gives_empty_selection():
    matrix = [[1, 0], [0, 1]]
    assert solve_exact_cover(matrix, 0, 2, find_all=True) == [[]]
    assert solve_exact_cover([], 0, 0) == [[]]


def test_no_rows_with_essential_column_fails():
    assert solve_exact_cover([], 1, 0, find_all=True) == []


def test_max_selected_prunes_large_selections():
    matrix = [[1, 1], [1, 0], [0, 1]]
    unlimited = solve_exact_cover(matrix, 2, 0, find_all=True)
    assert sorted(sorted(s) for s in unlimited) == [[0], [1, 2]]
    limited = solve_exact_cover(matrix, 2, 0, find_all=True, max_selected=1)
    assert limited == [[0]]
    assert solve_exact_cover(matrix, 2, 0, find_all=True, max_selected=0) == []


def test_optional_columns_prevent_conflicts():
    # Both rows cover separate essential columns but share an optional one.
    matrix = [[1, 0, 1], [0, 1, 1], [0, 1, 0]]
    solutions = solve_exact_cover(matrix, 2, 1, find_all=True)
    assert solutions == [[0, 2]]


def test_wrong_row_length_is_rejected():
    with pytest.raises(ValueError):
        DancingLinks([[1, 0], [1]], 2, 0)


def test_negative_column_counts_are_rejected():
    with pytest.raises(ValueError):
        DancingLinks([], -1, 0)
    with pytest.raises(ValueError):
        DancingLinks([], 0, -2)


def test_negative_max_selected_is_rejected():
    links = DancingLinks(KNUTH, 7, 0)
    with pytest.raises(ValueError):
        links.solve(max_selected=-1)