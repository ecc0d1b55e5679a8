"""Command line entry point: fit the pieces of a file into the smallest square."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from tetrafit.output import put_str
from tetrafit.piece import InputError, parse_pieces
from tetrafit.solver import solve

_ERROR = "error\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read the piece file named by the single argument and print the filled square."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        put_str(_ERROR)
        return 0
    try:
        with open(args[0], encoding="ascii", errors="replace") as handle:
            text = handle.read()
        pieces = parse_pieces(text)
    except (OSError, InputError):
        put_str(_ERROR)
        return 0
    put_str(solve(pieces).render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())