"""Knuth-Morris-Pratt search built on the prefix (failure) function.

``build_prefix_function`` computes the classic LPS array: ``lps[i]`` is the
length of the longest proper prefix of ``pattern[: i + 1]`` that is also a
suffix of it.  ``kmp_search`` consumes that array to report every occurrence
of a pattern in linear time without ever moving backwards in the text.

Both functions accept any supported sequence (``str``, ``bytes``, ``list`` or
``tuple``) and return plain ``list[int]`` values.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from stringalgos._sequences import ensure_sequence

logger = logging.getLogger(__name__)


def build_prefix_function(pattern: Sequence) -> List[int]:
    """Return the failure array of *pattern*.

    The result has the same length as *pattern*; an empty pattern yields an
    empty list.  ``lps[0]`` is always ``0`` and ``0 <= lps[i] <= i`` holds for
    every position.
    """

    ensure_sequence(pattern, "pattern")
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def kmp_search(text: Sequence, pattern: Sequence) -> List[int]:
    """Return the ascending start offsets of *pattern* inside *text*.

    An empty pattern is treated as unmatchable and produces ``[]`` rather than
    a match at every position.  Overlapping occurrences are all reported.
    """

    ensure_sequence(text, "text")
    ensure_sequence(pattern, "pattern")
    if not pattern:
        return []

    lps = build_prefix_function(pattern)
    positions: List[int] = []
    i = j = 0
    while i < len(text):
        if text[i] == pattern[j]:
            i += 1
            j += 1
            if j == len(pattern):
                positions.append(i - j)
                j = lps[j - 1]
        elif j:
            j = lps[j - 1]
        else:
            i += 1

    logger.debug(
        "KMP located %d occurrence(s) of a %d-element pattern", len(positions), len(pattern)
    )
    return positions


__all__ = ["build_prefix_function", "kmp_search"]
