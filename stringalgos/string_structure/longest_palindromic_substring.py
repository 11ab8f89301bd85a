"""Longest palindromic substring via Manacher's algorithm.

The input is interleaved with gap markers so that odd and even palindromes
share one representation: ``"aba"`` becomes ``[gap, a, gap, b, gap, a, gap]``.
``palindrome_radii`` computes the radius ``P[i]`` of the longest palindrome
centred at every index of that interleaved sequence in linear time by seeding
each radius from its mirror inside the rightmost palindrome found so far.

The expansion loop checks indices against the sequence bounds instead of
relying on boundary sentinels.  Gap positions are only ever compared with
other gap positions, so no character needs to be reserved and any ``str``,
``bytes`` or list input is handled.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import List, Sequence

from stringalgos._sequences import ensure_sequence

logger = logging.getLogger(__name__)


class _Gap:
    __slots__ = ()

    def __repr__(self) -> str:
        return "GAP"


_GAP = _Gap()


@dataclass(frozen=True)
class PalindromeResult:
    """Best palindrome identified in *text*.

    Attributes
    ----------
    text:
        Original sequence.
    start:
        Inclusive start index of the palindrome inside *text*.
    length:
        Number of elements in the palindrome; ``0`` for empty input.
    """

    text: Sequence
    start: int
    length: int

    @property
    def end(self) -> int:
        """Exclusive end index of the palindrome."""

        return self.start + self.length

    @property
    def value(self) -> Sequence:
        """Return the palindromic slice of :attr:`text`."""

        return self.text[self.start : self.end]


def _interleave(s: Sequence) -> list:
    transformed: list = [_GAP]
    for item in s:
        transformed.append(item)
        transformed.append(_GAP)
    return transformed


def palindrome_radii(s: Sequence) -> List[int]:
    """Return the radius array over the gap-interleaved form of *s*.

    The returned list has ``2 * len(s) + 1`` entries.  Index ``2k + 1``
    corresponds to ``s[k]`` and even indices to the gaps between elements;
    the radius at any index equals the length of the matching palindrome in
    *s*.
    """

    ensure_sequence(s, "s")
    t = _interleave(s)
    size = len(t)
    radii = [0] * size
    center = right = 0
    for i in range(size):
        if i < right:
            radii[i] = min(right - i, radii[2 * center - i])
        while (
            i - radii[i] - 1 >= 0
            and i + radii[i] + 1 < size
            and t[i - radii[i] - 1] == t[i + radii[i] + 1]
        ):
            radii[i] += 1
        if i + radii[i] > right:
            center, right = i, i + radii[i]
    return radii


def find_longest_palindrome(s: Sequence) -> PalindromeResult:
    """Locate the longest palindromic substring of *s*.

    When several palindromes share the maximal length the leftmost one wins.
    Empty input produces a zero-length result starting at ``0``.
    """

    radii = palindrome_radii(s)
    max_len = 0
    center = 0
    for i, radius in enumerate(radii):
        # strict comparison keeps the leftmost centre on ties
        if radius > max_len:
            max_len, center = radius, i

    start = (center - max_len) // 2
    logger.debug("Longest palindrome spans [%d, %d)", start, start + max_len)
    return PalindromeResult(text=s, start=start, length=max_len)


def longest_palindromic_substring(s: Sequence) -> Sequence:
    """Return the longest palindromic substring of *s* (empty for empty input)."""

    return find_longest_palindrome(s).value


__all__ = [
    "PalindromeResult",
    "find_longest_palindrome",
    "longest_palindromic_substring",
    "palindrome_radii",
]
