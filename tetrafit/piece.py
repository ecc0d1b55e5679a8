"""Tetromino blocks: validation of 4x4 text blocks and parsing of input files."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple

from tetrafit.lines import LineReader

BLOCK_SIZE = 4
FILLED = "#"
EMPTY = "."
MAX_PIECES = 26
_MIN_NEIGHBOURS = 6


class InputError(ValueError):
    """Raised when the input does not describe a valid set of pieces."""


@dataclass
class Tetromino:
    """A piece named by ``letter`` whose ``cells`` are (row, col) offsets.

    The offsets are shifted so that the smallest row and the smallest column
    are both 0. ``row``, ``col`` and ``order`` hold the solver's search state:
    the position being tried and the piece's place in the current placement
    order (0 while the piece is not on the board).
    """

    letter: str
    cells: Tuple[Tuple[int, int], ...]
    row: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)
    order: int = field(default=0, compare=False)


def _filled_cells(rows: Sequence[str]) -> List[Tuple[int, int]]:
    return [
        (r, c)
        for r, line in enumerate(rows)
        for c, ch in enumerate(line)
        if ch == FILLED
    ]


def count_neighbours(rows: Sequence[str]) -> int:
    """Count, for every filled cell, its filled orthogonal neighbours."""
    cells = set(_filled_cells(rows))
    return sum(
        (r + dr, c + dc) in cells
        for r, c in cells
        for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1))
    )


def is_valid_block(rows: Iterable[str]) -> bool:
    """True when ``rows`` is a 4x4 block of '.' and '#' holding one tetromino."""
    rows = list(rows)
    if len(rows) != BLOCK_SIZE:
        return False
    if any(len(line) != BLOCK_SIZE or set(line) - {EMPTY, FILLED} for line in rows):
        return False
    if sum(line.count(FILLED) for line in rows) != 4:
        return False
    has = [FILLED in line for line in rows]
    if has[0] and not has[1] and (has[2] or has[3]):
        return False
    if has[1] and not has[2] and has[3]:
        return False
    if any(EMPTY in line.strip(EMPTY) for line in rows):
        return False
    return count_neighbours(rows) >= _MIN_NEIGHBOURS


def make_tetromino(rows: Sequence[str], letter: str) -> Tetromino:
    """Build a piece from the filled cells of ``rows``, moved to the top-left corner."""
    if not isinstance(letter, str) or len(letter) != 1:
        raise ValueError(f"expected a single letter, got {letter!r}")
    cells = _filled_cells(rows)
    if not cells:
        raise InputError("block holds no filled cell")
    top = min(r for r, _ in cells)
    left = min(c for _, c in cells)
    return Tetromino(letter, tuple((r - top, c - left) for r, c in cells))


def parse_pieces(text: str) -> List[Tetromino]:
    """Parse 4-line blocks separated by empty lines into pieces lettered from 'A'.

    Raises InputError when a block is invalid, a separator line is not empty,
    the last block is incomplete, or there are no pieces or more than 26.
    """
    lines = iter(LineReader(io.StringIO(text)))
    pieces: List[Tetromino] = []
    block: List[str] = []
    for line in lines:
        block.append(line)
        if len(block) < BLOCK_SIZE:
            continue
        separator = next(lines, None)
        if not is_valid_block(block):
            raise InputError(f"invalid block {len(pieces) + 1}")
        if separator not in (None, ""):
            raise InputError(f"block {len(pieces) + 1} is not followed by an empty line")
        if len(pieces) == MAX_PIECES:
            raise InputError(f"more than {MAX_PIECES} pieces")
        pieces.append(make_tetromino(block, chr(ord("A") + len(pieces))))
        block = []
    if block:
        raise InputError("incomplete block at the end of the input")
    if not pieces:
        raise InputError("no pieces in the input")
    return pieces