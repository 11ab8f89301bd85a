from __future__ import annotations

import pytest

from stringalgos.pattern_matching.z_function import (
    SEPARATOR,
    build_search_sequence,
    z_function,
    z_search,
)


def _naive_z(s) -> list[int]:
    z = [0] * len(s)
    for i in range(1, len(s)):
        while i + z[i] < len(s) and s[z[i]] == s[i + z[i]]:
            z[i] += 1
    return z


def test_z_function_known_values() -> None:
    assert z_function("aabcaabxaaaz") == [0, 1, 0, 0, 3, 1, 0, 0, 2, 2, 1, 0]
    assert z_function("aaaaa") == [0, 4, 3, 2, 1]
    assert z_function("") == []
    assert z_function("q") == [0]


@pytest.mark.parametrize(
    "s", ["abacaba", "abababab", "aabxaab", "zzzzz", "abcdef", b"\x00\x01\x00\x01"]
)
def test_z_function_matches_naive_definition(s) -> None:
    assert z_function(s) == _naive_z(s)


def test_z_search_examples() -> None:
    assert z_search("abcabcabc", "abc") == [0, 3, 6]
    assert z_search("aaaa", "aa") == [0, 1, 2]
    assert z_search("abc", "abcd") == []


def test_z_search_empty_pattern() -> None:
    assert z_search("anything", "") == []
    assert z_search("", "") == []


def test_build_search_sequence_places_separator_between_pattern_and_text() -> None:
    combined = build_search_sequence("xyz", "ab")
    assert combined[:2] == ["a", "b"]
    assert combined[2] is SEPARATOR
    assert combined[3:] == ["x", "y", "z"]


def test_separator_never_matches_content() -> None:
    assert "$" != SEPARATOR
    assert z_search("a$b$c", "$") == [1, 3]
    assert z_search("$$$", "$$") == [0, 1]
    assert z_search([0, 1, 0, 1], [0, 1]) == [0, 2]


def test_z_search_rejects_non_sequences() -> None:
    with pytest.raises(TypeError):
        z_search(None, "a")  # type: ignore[arg-type]
