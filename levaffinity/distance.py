"""Levenshtein edit distance and the affinity score derived from it."""

from __future__ import annotations

import math
from typing import Union

Text = Union[str, bytes]

__all__ = ["distance", "affinity"]


def _fold_char(char: str) -> str:
    """Lower-case one character, keeping it if lowering would change its length."""
    lowered = char.lower()
    return lowered if len(lowered) == 1 else char


def _fold(text: Text) -> Text:
    if isinstance(text, bytes):
        # ASCII-only lowering keeps the length and matches the byte semantics.
        return text.lower()
    return "".join(_fold_char(char) for char in text)


def distance(str1: Text, str2: Text, case_sensitive: bool = False) -> int:
    """Return the Levenshtein distance between two strings.

    Both arguments must be ``str`` or both ``bytes``. Unless ``case_sensitive``
    is true, each character is lower-cased before comparison.
    """
    if isinstance(str1, str) != isinstance(str2, str) or not all(
        isinstance(value, (str, bytes)) for value in (str1, str2)
    ):
        raise TypeError("distance() needs two str or two bytes values")

    if not str1:
        return len(str2)
    if not str2:
        return len(str1)

    # The shorter string forms the row, which keeps the working list small.
    if len(str1) > len(str2):
        str1, str2 = str2, str1

    if not case_sensitive:
        str1, str2 = _fold(str1), _fold(str2)

    previous = list(range(len(str1) + 1))
    for j, target in enumerate(str2, start=1):
        current = [j]
        for i, source in enumerate(str1, start=1):
            current.append(
                min(
                    previous[i - 1] + (source != target),
                    current[i - 1] + 1,
                    previous[i] + 1,
                )
            )
        previous = current
    return previous[-1]


def affinity(length1: int, length2: int, edit_distance: int) -> float:
    """Return ``1 - edit_distance / max(length1, length2)``.

    When both lengths are zero the ratio is undefined and ``nan`` is returned.
    """
    if min(length1, length2, edit_distance) < 0:
        raise ValueError("lengths and distance must not be negative")
    longest = max(length1, length2)
    if longest == 0:
        return math.nan
    return 1.0 - edit_distance / longest