"""Interactive menu around the ``stringalgos`` package.

The tool reads one line per prompt from standard input, runs the selected
algorithm and prints the result together with the auxiliary arrays (the LPS
array for KMP, the Z-array of the combined search sequence) so the behaviour
of each algorithm can be followed step by step:

    $ python string_menu.py
    ==== Menu ====
    1) KMP with LPS
    ...

All algorithmic work lives in ``stringalgos``; this module only parses
options, reads input and formats output through a ``rich`` console.  Result
lines are printed with soft wrapping so long arrays stay on one line.

Menu options are matched as exact text after stripping surrounding
whitespace: ``01`` or ``1 extra`` are rejected with ``Invalid option.``
rather than being read as the integer ``1``.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, Iterable, Optional, Sequence, TextIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

from stringalgos import (
    SEPARATOR,
    ConfigError,
    StringAlgoConfig,
    build_prefix_function,
    build_search_sequence,
    find_longest_palindrome,
    kmp_search,
    load_config,
    naive_suffix_array,
    z_function,
    z_search,
)

logger = logging.getLogger("string_menu")

MENU_LINES = (
    "==== Menu ====",
    "1) KMP with LPS",
    "2) Z-Algorithm",
    "3) Manacher",
    "4) Suffix Array (naive)",
    "0) Exit",
)


@dataclass
class MenuSession:
    """Input source, output console and settings shared by the menu actions."""

    stdin: TextIO
    console: Console
    config: StringAlgoConfig

    def emit(self, line: str = "") -> None:
        self.console.print(line, markup=False, soft_wrap=True)

    def ask(self, prompt: str) -> Optional[str]:
        """Print *prompt* and return the next input line, ``None`` at EOF."""

        self.console.print(prompt, end="", markup=False, soft_wrap=True)
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")


def _join(values: Iterable[int], separator: str) -> str:
    return separator.join(str(value) for value in values)


def _format_indices(positions: Sequence[int], empty_marker: str) -> str:
    if not positions:
        return f"Indices: {empty_marker}"
    return f"Indices: {_join(positions, ', ')}"


def _render_search_sequence(sequence: Sequence[object], separator: str) -> str:
    return "".join(separator if item is SEPARATOR else str(item) for item in sequence)


def run_kmp(session: MenuSession) -> None:
    text = session.ask("\n[KMP] Enter text: ") or ""
    pattern = session.ask("[KMP] Enter pattern: ") or ""

    session.emit(_format_indices(kmp_search(text, pattern), session.config.empty_marker))
    if session.config.show_auxiliary:
        session.emit(f"LPS: [{_join(build_prefix_function(pattern), ' ')}]")


def run_z(session: MenuSession) -> None:
    text = session.ask("\n[Z] Enter text: ") or ""
    pattern = session.ask("[Z] Enter pattern: ") or ""

    session.emit(_format_indices(z_search(text, pattern), session.config.empty_marker))
    if session.config.show_auxiliary:
        combined = build_search_sequence(text, pattern)
        rendered = _render_search_sequence(combined, session.config.separator_display)
        session.emit(f'Z("{rendered}"): [{_join(z_function(combined), " ")}]')


def run_manacher(session: MenuSession) -> None:
    s = session.ask("\n[Manacher] Enter string: ") or ""

    result = find_longest_palindrome(s)
    session.emit(f'Longest palindrome: "{result.value}" (len {result.length})')


def run_suffix_array(session: MenuSession) -> None:
    s = session.ask("\n[Suffix Array] Enter string: ") or ""

    if len(s) > session.config.suffix_warning_length:
        logger.warning(
            "Naive suffix sort on %d characters needs quadratic memory", len(s)
        )
    order = naive_suffix_array(s)
    session.emit(f"SA: [{_join(order, ' ')}]")
    if session.config.list_suffixes and order:
        table = Table(title="Sorted suffixes")
        table.add_column("Index", justify="right")
        table.add_column("Suffix")
        for index in order:
            table.add_row(str(index), Text(s[index:]))
        session.console.print(table)


ACTIONS: Dict[str, Callable[[MenuSession], None]] = {
    "1": run_kmp,
    "2": run_z,
    "3": run_manacher,
    "4": run_suffix_array,
}


def run_menu(session: MenuSession) -> None:
    """Loop over menu selections until ``0`` or end of input."""

    while True:
        session.emit()
        for line in MENU_LINES:
            session.emit(line)
        choice = session.ask("Option: ")
        if choice is None:
            logger.debug("End of input reached")
            return
        choice = choice.strip()
        if choice == "0":
            return
        action = ACTIONS.get(choice)
        if action is None:
            session.emit("Invalid option.")
            continue
        action(session)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional JSON file overriding the display settings",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )
    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    console: Console | None = None,
) -> int:
    """Run the interactive menu and return the process exit status."""

    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        config = load_config(args.config)
    except (ConfigError, FileNotFoundError) as exc:
        logger.error("Failed to load configuration: %s", exc)
        return 2

    session = MenuSession(
        stdin=stdin if stdin is not None else sys.stdin,
        console=(
            console
            if console is not None
            else Console(highlight=False, emoji=False, soft_wrap=True)
        ),
        config=config,
    )
    run_menu(session)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
