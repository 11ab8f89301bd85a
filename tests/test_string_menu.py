"""Tests for the ``string_menu`` interactive tool."""

from __future__ import annotations

import io
import json
import logging
from pathlib import Path

import pytest
from rich.console import Console

import string_menu


def _run(
    lines: list[str], argv: list[str] | None = None, *, width: int | None = 200
) -> tuple[int, list[str]]:
    buffer = io.StringIO()
    console = Console(file=buffer, width=width, highlight=False, emoji=False)
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    status = string_menu.main(argv or [], stdin=stdin, console=console)
    return status, buffer.getvalue().splitlines()


def _has_line(lines: list[str], expected: str) -> bool:
    # prompts are not newline-terminated, so results share a line with them
    return any(line.endswith(expected) for line in lines)


def test_kmp_prints_indices_and_lps() -> None:
    status, lines = _run(["1", "abxabcabcaby", "abcaby", "0"])
    assert status == 0
    assert _has_line(lines, "Indices: 6")
    assert _has_line(lines, "LPS: [0 0 0 1 2 0]")


def test_kmp_without_matches_uses_empty_marker() -> None:
    _, lines = _run(["1", "anything", "", "0"])
    assert _has_line(lines, "Indices: (none)")
    assert _has_line(lines, "LPS: []")


def test_z_prints_combined_sequence() -> None:
    _, lines = _run(["2", "abcabcabc", "abc", "0"])
    assert _has_line(lines, "Indices: 0, 3, 6")
    assert _has_line(lines, 'Z("abc$abcabcabc"): [0 0 0 0 3 0 0 3 0 0 3 0 0]')


def test_manacher_output() -> None:
    _, lines = _run(["3", "babad", "0"])
    assert _has_line(lines, 'Longest palindrome: "bab" (len 3)')


def test_suffix_array_output_and_table() -> None:
    _, lines = _run(["4", "banana", "0"])
    assert _has_line(lines, "SA: [5 3 1 0 4 2]")
    output = "\n".join(lines)
    assert "Sorted suffixes" in output
    assert "banana" in output
    assert "anana" in output


def test_brackets_are_not_treated_as_markup() -> None:
    _, lines = _run(["3", "[b]x]b[", "0"])
    assert _has_line(lines, 'Longest palindrome: "[b]x]b[" (len 7)')


def test_long_results_stay_on_one_line_at_default_width() -> None:
    text = "ab " * 40
    _, lines = _run(["2", text, "ab", "0"], width=None)
    expected = ", ".join(str(position) for position in range(0, 120, 3))
    assert _has_line(lines, f"Indices: {expected}")
    z_lines = [line for line in lines if line.startswith("Z(")]
    assert len(z_lines) == 1
    assert z_lines[0].endswith(" 0 0]")


def test_option_must_match_exactly() -> None:
    _, lines = _run(["01", "1 extra", " 3 ", "aba", "0"])
    assert sum(line.endswith("Invalid option.") for line in lines) == 2
    assert _has_line(lines, 'Longest palindrome: "aba" (len 3)')


def test_invalid_option_and_end_of_input() -> None:
    status, lines = _run(["9", "abc"])
    assert status == 0
    assert sum(line.endswith("Invalid option.") for line in lines) == 2
    assert lines.count("==== Menu ====") == 3


def test_config_overrides_display(tmp_path: Path) -> None:
    config_path = tmp_path / "menu.json"
    config_path.write_text(
        json.dumps(
            {
                "separator_display": "|",
                "empty_marker": "-",
                "list_suffixes": False,
            }
        ),
        encoding="utf-8",
    )
    _, lines = _run(
        ["2", "ab", "zz", "4", "ab", "0"],
        argv=["--config", str(config_path)],
    )
    assert _has_line(lines, "Indices: -")
    assert _has_line(lines, 'Z("zz|ab"): [0 1 0 0 0]')
    assert _has_line(lines, "SA: [0 1]")
    assert "Sorted suffixes" not in "\n".join(lines)


def test_invalid_config_returns_error_status(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    config_path = tmp_path / "menu.json"
    config_path.write_text(json.dumps({"unknown": 1}), encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="string_menu"):
        status, lines = _run(["0"], argv=["--config", str(config_path)])
    assert status == 2
    assert lines == []
    assert "Failed to load configuration" in caplog.text


def test_long_suffix_input_logs_warning(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    config_path = tmp_path / "menu.json"
    config_path.write_text(
        json.dumps({"suffix_warning_length": 3, "list_suffixes": False}),
        encoding="utf-8",
    )
    with caplog.at_level(logging.WARNING, logger="string_menu"):
        _, lines = _run(["4", "abcd", "0"], argv=["--config", str(config_path)])
    assert _has_line(lines, "SA: [0 1 2 3]")
    assert "quadratic memory" in caplog.text
