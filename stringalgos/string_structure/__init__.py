"""Palindrome and suffix-order structures over sequences."""

from .longest_palindromic_substring import (
    PalindromeResult,
    find_longest_palindrome,
    longest_palindromic_substring,
    palindrome_radii,
)
from .suffix_array import naive_suffix_array, sorted_suffixes

__all__ = [
    "PalindromeResult",
    "find_longest_palindrome",
    "longest_palindromic_substring",
    "naive_suffix_array",
    "palindrome_radii",
    "sorted_suffixes",
]
