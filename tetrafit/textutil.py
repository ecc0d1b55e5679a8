"""String helpers: splitting, trimming, searching, comparing and mapping."""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

_TRIM_CHARS = " \n\t"


def _check_char(ch: str) -> None:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")


def split_words(s: str, sep: str) -> List[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    _check_char(sep)
    return [word for word in s.split(sep) if word]


def count_words(s: str, sep: str) -> int:
    """Number of non-empty words in ``s`` separated by ``sep``."""
    return len(split_words(s, sep))


def word_length(s: str, sep: str) -> int:
    """Length of the leading run of ``s`` that holds no ``sep``."""
    _check_char(sep)
    position = s.find(sep)
    return len(s) if position < 0 else position


def trim(s: str) -> str:
    """Remove spaces, newlines and tabs from both ends of ``s``."""
    return s.strip(_TRIM_CHARS)


def substring(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start`` on.

    Raises ValueError when ``start`` lies beyond the end of ``s`` or either
    argument is negative.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        raise ValueError(f"start {start} is beyond the end of a string of length {len(s)}")
    return s[start:start + length]


def find(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle``, or None. An empty needle is found at 0."""
    position = haystack.find(needle)
    return None if position < 0 else position


def find_bounded(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Like :func:`find`, but the match must lie wholly within the first ``limit`` characters."""
    if not needle:
        return 0
    if limit <= 0:
        return None
    position = haystack[:limit].find(needle)
    return None if position < 0 else position


def index_of(s: str, ch: str) -> Optional[int]:
    """Index of the first ``ch`` in ``s``, or None."""
    _check_char(ch)
    position = s.find(ch)
    return None if position < 0 else position


def last_index_of(s: str, ch: str) -> Optional[int]:
    """Index of the last ``ch`` in ``s``, or None."""
    _check_char(ch)
    position = s.rfind(ch)
    return None if position < 0 else position


def compare(a: str, b: str) -> int:
    """Compare two strings by character codes.

    Returns the code difference at the first differing position; a string that
    ends first counts as having code 0 there. Equal strings give 0.
    """
    for left, right in zip(a, b):
        if left != right:
            return ord(left) - ord(right)
    if len(a) > len(b):
        return ord(a[len(b)])
    if len(b) > len(a):
        return -ord(b[len(a)])
    return 0


def compare_n(a: str, b: str, n: int) -> int:
    """Like :func:`compare`, looking at no more than ``n`` characters."""
    if n <= 0:
        return 0
    return compare(a[:n], b[:n])


def equals(a: Optional[str], b: Optional[str]) -> bool:
    """True when both strings are given and equal."""
    if a is None or b is None:
        return False
    return a == b


def equals_n(a: Optional[str], b: Optional[str], n: int) -> bool:
    """True when both strings are given and agree in their first ``n`` characters."""
    if a is None or b is None:
        return False
    return n == 0 or compare_n(a, b, n) == 0


def map_chars(s: str, func: Callable[[str], str]) -> str:
    """Apply ``func`` to every character of ``s`` and join the results."""
    return "".join(func(ch) for ch in s)


def map_chars_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Apply ``func(index, char)`` to every character of ``s`` and join the results."""
    return "".join(func(i, ch) for i, ch in enumerate(s))


def bounded_concat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    The result holds at most ``size - 1`` characters. Returns the resulting
    text and the length the full concatenation would have had. When ``size``
    is no larger than ``dest``, ``dest`` is left unchanged and the length
    reported is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dest):
        return dest, len(src) + size
    return (dest + src)[:size - 1], len(dest) + len(src)