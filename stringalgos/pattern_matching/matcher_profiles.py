"""Runtime and memory profiling for the exact matchers.

``profile_matchers`` runs :func:`kmp_search` and :func:`z_search` on the same
input under ``tracemalloc``, checks that both report the same match list and
returns one :class:`MatcherProfile` per algorithm.  ``write_profiles_to_csv``
persists the metrics for regression tracking and ``main`` wires both into a
small command line tool:

    python -m stringalgos.pattern_matching.matcher_profiles --pattern abab
"""

from __future__ import annotations

from dataclasses import dataclass
import argparse
import csv
import logging
import random
import time
import tracemalloc
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from .prefix_function import kmp_search
from .z_function import z_search

logger = logging.getLogger(__name__)


CSV_HEADER = (
    "algorithm",
    "text_length",
    "pattern_length",
    "matches",
    "first_match",
    "time_seconds",
    "peak_bytes",
)

Matcher = Callable[[Sequence, Sequence], List[int]]


@dataclass(frozen=True)
class MatcherProfile:
    """Cost of one matcher over one text/pattern pair."""

    name: str
    text_length: int
    pattern_length: int
    positions: Tuple[int, ...]
    time_seconds: float
    peak_bytes: int

    @property
    def matches(self) -> int:
        return len(self.positions)

    @property
    def first_match(self) -> Optional[int]:
        return self.positions[0] if self.positions else None

    def to_row(self) -> List[str]:
        """Return the CSV row matching :data:`CSV_HEADER`."""

        first = "" if self.first_match is None else str(self.first_match)
        return [
            self.name,
            str(self.text_length),
            str(self.pattern_length),
            str(self.matches),
            first,
            f"{self.time_seconds:.9f}",
            str(self.peak_bytes),
        ]


def _measure(
    name: str, matcher: Matcher, text: Sequence, pattern: Sequence
) -> MatcherProfile:
    tracemalloc.start()
    try:
        started = time.perf_counter()
        positions = matcher(text, pattern)
        elapsed = time.perf_counter() - started
        _, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()
    logger.debug("%s: %d occurrence(s), peak %d bytes", name, len(positions), peak)
    return MatcherProfile(
        name=name,
        text_length=len(text),
        pattern_length=len(pattern),
        positions=tuple(positions),
        time_seconds=elapsed,
        peak_bytes=peak,
    )


def _first_disagreement(left: Sequence[int], right: Sequence[int]) -> int:
    for index, (a, b) in enumerate(zip(left, right)):
        if a != b:
            return index
    return min(len(left), len(right))


def _occurrence_at(positions: Sequence[int], index: int) -> str:
    return str(positions[index]) if index < len(positions) else "missing"


def profile_matchers(
    text: Sequence, pattern: Sequence
) -> Tuple[MatcherProfile, MatcherProfile]:
    """Profile KMP and Z-search on *text* / *pattern* and return their metrics.

    Raises
    ------
    AssertionError
        If the two matchers report different occurrence lists.
    """

    kmp_profile = _measure("kmp", kmp_search, text, pattern)
    z_profile = _measure("z", z_search, text, pattern)

    if kmp_profile.positions != z_profile.positions:
        index = _first_disagreement(kmp_profile.positions, z_profile.positions)
        kmp_at = _occurrence_at(kmp_profile.positions, index)
        z_at = _occurrence_at(z_profile.positions, index)
        raise AssertionError(
            f"KMP and Z-search disagree at occurrence #{index}: "
            f"kmp={kmp_at}, z={z_at} "
            f"({kmp_profile.matches} vs {z_profile.matches} occurrences)"
        )
    return kmp_profile, z_profile


def write_profiles_to_csv(path: Path, profiles: Iterable[MatcherProfile]) -> None:
    """Write one row per profile under :data:`CSV_HEADER`."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(CSV_HEADER)
        writer.writerows(profile.to_row() for profile in profiles)


def _default_dataset() -> Tuple[str, str]:
    """Return the deterministic text/pattern pair used by the CLI."""

    rng = random.Random(13)
    text = "".join(rng.choices("ab", k=20_000))
    return text, "abaab"


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for profiling the exact matchers."""

    parser = argparse.ArgumentParser(description=__doc__)
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--text", type=str, default=None, help="Text to search in")
    source.add_argument(
        "--text-file",
        type=Path,
        default=None,
        help="Read the text to search in from a UTF-8 file",
    )
    parser.add_argument("--pattern", type=str, default=None, help="Pattern to search for")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("matcher_profiles.csv"),
        help="Destination CSV file for profiling results.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    default_text, default_pattern = _default_dataset()
    if args.text_file is not None:
        try:
            text = args.text_file.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to read %s: %s", args.text_file, exc)
            return 1
    elif args.text is not None:
        text = args.text
    else:
        text = default_text
    pattern = args.pattern if args.pattern is not None else default_pattern

    try:
        profiles = profile_matchers(text, pattern)
    except AssertionError as exc:  # pragma: no cover - CLI guard
        logger.error("Failed to profile matchers: %s", exc)
        return 1

    for profile in profiles:
        logger.info(
            "%s: %d match(es) in %.6fs, peak %d bytes",
            profile.name,
            profile.matches,
            profile.time_seconds,
            profile.peak_bytes,
        )
    write_profiles_to_csv(args.output, profiles)
    logger.info("Profiles written to %s", args.output)
    return 0


__all__ = ["CSV_HEADER", "MatcherProfile", "main", "profile_matchers", "write_profiles_to_csv"]


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
