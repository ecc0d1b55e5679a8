"""The square board that pieces are placed on."""

from __future__ import annotations

import math
from typing import List, Tuple

EMPTY = "."


def minimal_side(count: int) -> int:
    """Smallest side of a square with room for the cells of ``count`` pieces."""
    if count < 0:
        raise ValueError("count must not be negative")
    area = 4 * count
    side = math.isqrt(area)
    if side * side < area:
        side += 1
    return max(side, 1)


class Board:
    """A square grid of ``side`` by ``side`` cells, empty cells shown as '.'."""

    def __init__(self, side: int) -> None:
        if isinstance(side, bool) or not isinstance(side, int):
            raise TypeError("side must be an int")
        if side < 1:
            raise ValueError("side must be at least 1")
        self.side = side
        self._grid = [[EMPTY] * side for _ in range(side)]

    @property
    def rows(self) -> List[str]:
        """The board as a list of row strings."""
        return ["".join(row) for row in self._grid]

    def _cells(self, piece, row: int, col: int) -> List[Tuple[int, int]]:
        return [(row + r, col + c) for r, c in piece.cells]

    def fits(self, piece, row: int, col: int) -> bool:
        """True when ``piece`` placed with its origin at (row, col) lies on empty cells."""
        return all(
            0 <= r < self.side and 0 <= c < self.side and self._grid[r][c] == EMPTY
            for r, c in self._cells(piece, row, col)
        )

    def place(self, piece, row: int, col: int) -> None:
        """Mark the cells of ``piece`` at (row, col) with its letter."""
        if not self.fits(piece, row, col):
            raise ValueError(f"piece {piece.letter} does not fit at ({row}, {col})")
        for r, c in self._cells(piece, row, col):
            self._grid[r][c] = piece.letter

    def remove(self, letter: str) -> None:
        """Clear every cell holding ``letter``."""
        for row in self._grid:
            for c, ch in enumerate(row):
                if ch == letter:
                    row[c] = EMPTY

    def render(self) -> str:
        """The board as text, one line per row, each ended by a newline."""
        return "".join(line + "\n" for line in self.rows)