"""Exact single-pattern matchers."""

from .prefix_function import build_prefix_function, kmp_search
from .z_function import SEPARATOR, build_search_sequence, z_function, z_search
from .matcher_profiles import MatcherProfile, profile_matchers, write_profiles_to_csv

__all__ = [
    "MatcherProfile",
    "SEPARATOR",
    "build_prefix_function",
    "build_search_sequence",
    "kmp_search",
    "profile_matchers",
    "write_profiles_to_csv",
    "z_function",
    "z_search",
]
