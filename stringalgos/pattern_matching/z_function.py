"""Z-function and the Z-based exact matcher.

``z_function`` computes, for every index ``i``, the length of the longest
common prefix of a sequence and its suffix starting at ``i``.  ``z_search``
runs it over ``pattern + SEPARATOR + text`` and reports every index whose
Z-value equals the pattern length.

The separator is a dedicated marker object rather than a reserved character.
It compares unequal to every element of every input, so texts and patterns
may contain ``'$'`` (or any other byte) without corrupting the result.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from stringalgos._sequences import ensure_sequence

logger = logging.getLogger(__name__)


class _Separator:
    """Marker placed between pattern and text in the combined sequence."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "SEPARATOR"


SEPARATOR = _Separator()


def z_function(s: Sequence) -> List[int]:
    """Return the Z-array of *s*.

    ``Z[0]`` is left at ``0``; it carries no match information and callers
    never consult it.
    """

    ensure_sequence(s, "s")
    n = len(s)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i <= right:
            z[i] = min(right - i + 1, z[i - left])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] - 1 > right:
            left, right = i, i + z[i] - 1
    return z


def build_search_sequence(text: Sequence, pattern: Sequence) -> list:
    """Return ``[*pattern, SEPARATOR, *text]`` as used by :func:`z_search`."""

    ensure_sequence(text, "text")
    ensure_sequence(pattern, "pattern")
    return [*pattern, SEPARATOR, *text]


def z_search(text: Sequence, pattern: Sequence) -> List[int]:
    """Return the ascending start offsets of *pattern* inside *text*.

    Matches :func:`stringalgos.pattern_matching.prefix_function.kmp_search`
    for every input, including the empty-pattern convention (``[]``).
    """

    ensure_sequence(text, "text")
    if not ensure_sequence(pattern, "pattern"):
        return []

    m = len(pattern)
    z = z_function(build_search_sequence(text, pattern))
    positions = [i - m - 1 for i in range(m + 1, len(z)) if z[i] == m]
    logger.debug(
        "Z-search located %d occurrence(s) of a %d-element pattern", len(positions), m
    )
    return positions


__all__ = ["SEPARATOR", "build_search_sequence", "z_function", "z_search"]
