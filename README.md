# tetrafit

tetrafit reads a file of tetrominoes and arranges them into a small square.
Each piece is labelled with a letter, `A` for the first piece in the file,
`B` for the second and so on, and the filled square is printed.

## Installing

```
pip install .
```

## Input format

The file holds between 1 and 26 pieces. Each piece is four lines of four
characters, `.` for empty and `#` for filled, with exactly four `#` cells
that touch one another. Pieces are separated by a single empty line:

```
....
.##.
.##.
....

#...
#...
#...
#...
```

## Running

```
tetrafit pieces.txt
```

The same command is available as `python -m tetrafit.cli pieces.txt`.
Output for the file above:

```
AAB.
AAB.
..B.
..B.
```

Empty cells are shown as `.`. If the program is not given exactly one
argument, the file cannot be opened, or its content is not valid, it prints
`error`. The exit status is 0 in every case.

## How the square is found

The search starts from the smallest side whose area holds four cells per
piece (`tetrafit.board.minimal_side`) and tries each side in turn, growing by
one until every piece has been placed. Within one side, pieces are tried at
positions from the top-left corner, row by row, backtracking when a piece has
nowhere left to go. An attempt at a given side is abandoned early when a piece
runs out of positions while fewer than six fewer pieces than the total are on
the board, so for large inputs the square printed is the first one this search
fills, which is not guaranteed to be the smallest possible.

## Using it from Python

```python
from tetrafit.piece import parse_pieces
from tetrafit.solver import solve

with open("pieces.txt") as handle:
    pieces = parse_pieces(handle.read())

board = solve(pieces)
print(board.render(), end="")
```

- `tetrafit.piece.parse_pieces(text)` returns a list of `Tetromino` objects
  and raises `tetrafit.piece.InputError` when a block is invalid, a separator
  line is not empty, the last block is incomplete, or there are no pieces or
  more than 26. `is_valid_block`, `count_neighbours` and `make_tetromino`
  work on a single 4x4 block given as a list of row strings.
- `tetrafit.solver.solve(pieces)` returns a filled `Board`; the pieces passed
  in are not modified. `tetrafit.solver.fill(board, pieces)` runs one attempt
  on a given board and returns `True` on success.
- `tetrafit.board.Board(side)` is a square grid with `fits`, `place`,
  `remove`, `render` and a `rows` property.

The package also carries small helpers used by the program or available on
their own:

- `tetrafit.lines.LineReader` reads newline-separated lines from a text stream
  in fixed-size chunks, through `read_line()` or iteration.
- `tetrafit.output` has `put_char`, `put_str` and `put_endl`, writing to a
  stream or standard output.
- `tetrafit.chars` has ASCII classification and case helpers (`is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`).
- `tetrafit.numbers` has `parse_int`, `format_int`, `digit_count` and
  `write_int`.
- `tetrafit.textutil` has string helpers for splitting, trimming, searching,
  comparing and mapping characters.

## What it does not do

Pieces are never rotated or mirrored; each is placed in the shape it has in
the file. Only one solution is printed, and the program does not write it to
a file.

## Running the tests

```
pip install ".[test]"
pytest
```