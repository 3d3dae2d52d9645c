[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dlxpuzzles"
version = "0.1.0"
description = "Exact-cover solvers for N-queens, Sudoku, Dominosa, Rectangles and Spangram puzzles using Dancing Links"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dancing links",
    "exact cover",
    "algorithm x",
    "sudoku",
    "n-queens",
    "dominosa",
    "shikaku",
    "puzzle",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dlx-nqueens = "dlxpuzzles.nqueens:main"
dlx-sudoku = "dlxpuzzles.sudoku:main"
dlx-dominosa = "dlxpuzzles.dominosa:main"
dlx-rectangles = "dlxpuzzles.rectangles:main"
dlx-spangram = "dlxpuzzles.spangram:main"

[tool.hatch.build.targets.wheel]
packages = ["dlxpuzzles"]

[tool.pytest.ini_options]
addopts = "-ra"
