# dlxpuzzles

Puzzle solvers that share one exact-cover engine based on Dancing Links (Algorithm X).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command-line tools

Each tool reads its puzzle from standard input and writes its answer to standard output.

### N-queens

```
echo "8 0" | dlx-nqueens
```

The first number is the board size and the second is a flag. The tool prints how many solutions there are. If the flag is non-zero, it then lists every solution: a line `i:` followed by one `row column` line per queen. A board size below 1 prints `Invalid board size`.

### Sudoku

```
dlx-sudoku < puzzle.txt
```

The input is 81 whitespace-separated digits, with `0` for an empty cell. The tool prints the solved board as nine rows of digits, each digit followed by a space. Input that is short or holds values outside `0..9` prints `Invalid input board` and exits with status 1. If no solution exists, nothing is printed.

### Dominosa

```
dlx-dominosa < board.txt
```

The input is the height `H`, then `H` rows of `H + 1` numbers, each in `0 .. H-1`. In the output, each cell shows `-` if it belongs to a horizontal domino and `|` if it belongs to a vertical one. Bad input prints `Invalid board size` or `Invalid entry found in the board`.

### Rectangles (Shikaku)

```
dlx-rectangles < board.txt
```

The input is the height and width, then the grid. A cell holding `0` is blank, and a positive number is the area of the rectangle that contains it. Each cell of the output holds the index of the rectangle that covers it. Errors and `No solution found` go to standard error.

### Spangram

```
dlx-spangram words.txt 6 < grid.txt
```

The grid is read as whitespace-separated lines of letters, one per row. Letters are compared in lower case. Each argument is handled by its form:

- an argument that starts with digits sets the largest number of words a solution may use;
- an argument that contains a dot names the dictionary file (the default is `words.txt` in the current directory);
- any other argument is a word to exclude.

The dictionary holds whitespace-separated words, and only words of four letters or more are used. Words are traced with king moves. No cell is used twice, every cell is covered exactly once, and no two diagonal strokes may cross. The tool prints at most one solution: a line with the words it uses, then the grid drawn with the first letter of each word in upper case and `-`, `|`, `\` and `/` joining the letters of each word.

## Library use

```python
from dlxpuzzles.dlx import solve_exact_cover

matrix = [
    [1, 0, 0, 1],
    [0, 1, 1, 0],
    [1, 1, 0, 0],
    [0, 0, 1, 1],
]
solutions = solve_exact_cover(matrix, essential=4, optional=0, find_all=True)
```

The first `essential` columns must be covered exactly once. The next `optional` columns may be covered at most once. Each solution is a list of row indices, in the order the search chose them. Without `find_all`, the search stops at the first solution. With `max_selected`, the search abandons any selection that has reached that many rows without being complete. `dlxpuzzles.dlx.DancingLinks` builds the linked structure once, and its `solve(find_all, max_selected)` can be called repeatedly.

The puzzle modules also provide functions you can call directly:

- `dlxpuzzles.nqueens`: `solve_nqueens(n)` returns every solution as a list of `(row, column)` squares. `format_solutions(solutions, list_all)` renders them.
- `dlxpuzzles.sudoku`: `parse_board`, `solve_sudoku` (returns a filled 9x9 board or `None`) and `format_board`.
- `dlxpuzzles.dominosa`: `parse_board`, `solve_dominosa` (returns rows of `-`/`|` marks or `None`) and `format_solution`.
- `dlxpuzzles.rectangles`: `parse_board`, `candidate_rectangles` (returns `(top, bottom, left, right)` tuples), `solve_rectangles` (returns a board of rectangle labels or `None`) and `format_board`.
- `dlxpuzzles.trie.TrieNode`: a prefix tree with `insert(word)` and `word in node`.
- `dlxpuzzles.spangram`: `build_trie(words, exclude)`, `find_placements(grid, trie)`, `solve_spangram(grid, trie, max_words)`, `render_solution(grid, placements)` and the `Placement` dataclass (`word`, `path`).

Invalid boards raise `ValueError`.

## Limitations

- Sudoku handles only the standard 9x9 board.
- Dominosa handles only the classic shape: height `H`, width `H + 1`, numbers `0 .. H-1`.
- Spangram ships no word list. You must supply a dictionary file. It finds at most one covering and does not require a word that spans the grid.