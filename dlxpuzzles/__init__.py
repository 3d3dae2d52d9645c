"""Exact-cover puzzle solvers (N-queens, Sudoku, Dominosa, Rectangles, Spangram) built on Dancing Links."""

__version__ = "0.1.0"