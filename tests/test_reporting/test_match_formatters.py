"""Tests for lotto_match.reporting.formatters."""

from __future__ import annotations

import typer

from lotto_match.matching.scanner import ScanSummary
from lotto_match.reporting.formatters import (
    ColorHighlighter,
    PlainHighlighter,
    format_match_text,
    format_no_matches,
    format_no_sources,
    format_scan_footer,
    format_search_banner,
    make_highlighter,
)


# ── Highlighters ──────────────────────────────────────────────────────────────


def test_make_highlighter_colour() -> None:
    assert isinstance(make_highlighter(True), ColorHighlighter)


def test_make_highlighter_plain() -> None:
    assert isinstance(make_highlighter(False), PlainHighlighter)


def test_colour_highlighter_uses_yellow_and_green() -> None:
    h = ColorHighlighter()
    assert h.label("2024-01-01") == typer.style("2024-01-01", fg=typer.colors.YELLOW)
    assert h.match("4") == typer.style("4", fg=typer.colors.GREEN)


def test_plain_highlighter_brackets_matches_only() -> None:
    h = PlainHighlighter()
    assert h.label("2024-01-01") == "2024-01-01"
    assert h.match("4") == "[4]"


# ── format_match_text ─────────────────────────────────────────────────────────


def test_match_text_single_space_separated() -> None:
    text = format_match_text("2024-01-01", [(4, True), (99, False), (8, True)], PlainHighlighter())
    assert text == "2024-01-01 [4] 99 [8]"


def test_match_text_label_only() -> None:
    assert format_match_text("(Not found)", [], PlainHighlighter()) == "(Not found)"


def test_match_text_colour_keeps_unmatched_plain() -> None:
    text = format_match_text("d", [(4, True), (99, False)], ColorHighlighter())
    assert text.endswith(" 99")
    assert typer.style("4", fg=typer.colors.GREEN) in text


# ── Banners and summaries ─────────────────────────────────────────────────────


def test_search_banner() -> None:
    assert format_search_banner((4, 6, 8, 18, 21, 26)) == "Searching... 4 6 8 18 21 26"


def test_no_sources_message() -> None:
    assert format_no_sources(".csv") == "No .csv files found in the current directory."
    assert format_no_sources(".csv", ".") == "No .csv files found in the current directory."


def test_no_sources_message_names_other_directory() -> None:
    assert format_no_sources(".csv", "data/draws") == "No .csv files found in data/draws."


def test_no_matches_message() -> None:
    assert format_no_matches(".csv") == (
        "No lines with positional matches found across all .csv files."
    )


def test_scan_footer() -> None:
    summary = ScanSummary(sources_scanned=2, lines_read=10, lines_skipped=3)
    assert format_scan_footer(summary) == (
        "Scanned 2 source(s), 10 line(s) read, 3 skipped, 0 match(es)."
    )
