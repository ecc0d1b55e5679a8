"""Placing all pieces on the smallest square board the search can fill."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence

from tetrafit.board import Board, minimal_side
from tetrafit.piece import Tetromino

_GIVE_UP_MARGIN = 6


def _advance(piece: Tetromino, last: int) -> None:
    """Wrap the piece's search position to the next row, or mark it exhausted (-1)."""
    if piece.row <= last and piece.col > last:
        piece.row += 1
        piece.col = 0
    if piece.row > last:
        piece.row = -1


def _withdraw(board: Board, pieces: List[Tetromino]) -> None:
    """Take placed pieces off the board and reset them, all but the last in the list."""
    for piece in pieces[:-1]:
        if piece.order != 0:
            piece.row = 0
            piece.col = 0
            piece.order = 0
            board.remove(piece.letter)


def fill(board: Board, pieces: Sequence[Tetromino]) -> bool:
    """Try to place every piece on ``board``; True on success.

    The search keeps its state in the pieces themselves (``row``, ``col``,
    ``order``), so pieces carry it over from one attempt to the next. The
    attempt is abandoned early when a piece runs out of positions while fewer
    than ``len(pieces) - 6`` pieces are on the board.
    """
    pieces = list(pieces)
    last = board.side - 1
    total = len(pieces)
    placed = 0
    index = 0
    while placed < total:
        piece = pieces[index]
        if piece.order == 0:
            _advance(piece, last)
            if piece.row == -1:
                piece.row = 0
                piece.col = 0
                if total - _GIVE_UP_MARGIN > placed:
                    _withdraw(board, pieces)
                    return False
                if index == total - 1:
                    if placed == 0:
                        return False
                    index = 0
                else:
                    index += 1
            elif board.fits(piece, piece.row, piece.col):
                board.place(piece, piece.row, piece.col)
                placed += 1
                piece.order = placed
                index = (index + 1) % total
            else:
                piece.col += 1
        elif piece.order == placed:
            placed -= 1
            board.remove(piece.letter)
            piece.order = 0
            piece.col += 1
        else:
            index = (index + 1) % total
    return True


def solve(pieces: Sequence[Tetromino]) -> Board:
    """Return the first board, growing from the minimal side, that holds all pieces."""
    work = [replace(piece, row=0, col=0, order=0) for piece in pieces]
    if not work:
        raise ValueError("no pieces to place")
    side = minimal_side(len(work))
    while True:
        board = Board(side)
        if fill(board, work):
            return board
        side += 1