"""Classic string matching and string structure algorithms.

The package exposes four families of algorithms over ``str``, ``bytes`` and
list/tuple sequences:

* ``build_prefix_function`` / ``kmp_search`` - Knuth-Morris-Pratt matching.
* ``z_function`` / ``z_search`` - matching through the Z-array.
* ``longest_palindromic_substring`` - Manacher's linear-time palindrome search.
* ``naive_suffix_array`` - suffix ordering by direct sorting.

Every function is pure: it allocates fresh state per call and never mutates
its arguments.
"""

from __future__ import annotations

from .config import ConfigError, StringAlgoConfig, load_config
from .pattern_matching import (
    SEPARATOR,
    MatcherProfile,
    build_prefix_function,
    build_search_sequence,
    kmp_search,
    profile_matchers,
    write_profiles_to_csv,
    z_function,
    z_search,
)
from .string_structure import (
    PalindromeResult,
    find_longest_palindrome,
    longest_palindromic_substring,
    naive_suffix_array,
    palindrome_radii,
    sorted_suffixes,
)

__all__ = [
    "ConfigError",
    "MatcherProfile",
    "PalindromeResult",
    "SEPARATOR",
    "StringAlgoConfig",
    "build_prefix_function",
    "build_search_sequence",
    "find_longest_palindrome",
    "kmp_search",
    "load_config",
    "longest_palindromic_substring",
    "naive_suffix_array",
    "palindrome_radii",
    "profile_matchers",
    "sorted_suffixes",
    "write_profiles_to_csv",
    "z_function",
    "z_search",
]
