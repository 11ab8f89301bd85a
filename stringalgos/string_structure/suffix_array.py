"""Naive suffix array construction.

Every suffix is materialised next to its start index and the pairs are sorted
by suffix content.  The construction costs O(n^2 log n) time and O(n^2)
memory, which is fine for the short inputs this module targets; prefix
doubling or SA-IS would be the place to start for anything larger.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from stringalgos._sequences import ensure_sequence

logger = logging.getLogger(__name__)


def naive_suffix_array(s: Sequence) -> List[int]:
    """Return the start indices of the suffixes of *s* in lexicographic order.

    The result is a permutation of ``range(len(s))``; an empty input yields an
    empty list.
    """

    ensure_sequence(s, "s")
    suffixes = [(s[i:], i) for i in range(len(s))]
    suffixes.sort(key=lambda pair: pair[0])
    logger.debug("Sorted %d suffixes", len(suffixes))
    return [index for _, index in suffixes]


def sorted_suffixes(s: Sequence) -> List[Tuple[int, Sequence]]:
    """Return ``(index, suffix)`` pairs following the suffix array order."""

    return [(index, s[index:]) for index in naive_suffix_array(s)]


__all__ = ["naive_suffix_array", "sorted_suffixes"]
