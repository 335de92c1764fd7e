"""
Terminal formatters for the ``search`` command.

Match lines
-----------
Each ranked line reads ``<label> <v1> <v2> ...`` with the label and every
matched value highlighted::

  2024-01-01 4 99 8 99 21 26      (label yellow, 4/8/21/26 green)
  2024-01-01 [4] 99 [8] 99 [21] [26]   (plain mode)

Colouring goes through ``typer.style`` so it respects the same ANSI handling
as the rest of the CLI output. Plain mode wraps matched values in brackets
so matches stay visible when output is piped to a file.

Summary messages
----------------
``format_no_sources`` and ``format_no_matches`` are the two empty-result
messages; which one applies is decided by the caller from the scan summary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Protocol

import typer

if TYPE_CHECKING:
    from lotto_match.matching.scanner import ScanSummary


# ── Highlighters ──────────────────────────────────────────────────────────────


class Highlighter(Protocol):
    """Marks the label and matched values of a display line."""

    def label(self, text: str) -> str: ...

    def match(self, text: str) -> str: ...


class ColorHighlighter:
    """ANSI colours: yellow label, green matched values."""

    def label(self, text: str) -> str:
        return typer.style(text, fg=typer.colors.YELLOW)

    def match(self, text: str) -> str:
        return typer.style(text, fg=typer.colors.GREEN)


class PlainHighlighter:
    """No escape codes: label unchanged, matched values in ``[brackets]``."""

    def label(self, text: str) -> str:
        return text

    def match(self, text: str) -> str:
        return f"[{text}]"


def make_highlighter(color: bool) -> Highlighter:
    """Return the highlighter for the configured output mode."""
    return ColorHighlighter() if color else PlainHighlighter()


# ── Match lines ───────────────────────────────────────────────────────────────


def format_match_text(
    label:       str,
    values:      Iterable[tuple[int, bool]],
    highlighter: Highlighter,
) -> str:
    """Build the display line for one matched draw.

    Args:
        label:       Draw label (already substituted when empty).
        values:      ``(value, matched)`` pairs in field order.
                     Discarded fields must not be included.
        highlighter: Marks the label and matched values.

    Returns:
        ``label`` followed by each value, single-space separated.
    """
    tokens = [highlighter.label(label)]
    for value, matched in values:
        text = str(value)
        tokens.append(highlighter.match(text) if matched else text)
    return " ".join(tokens)


# ── Banners and summaries ─────────────────────────────────────────────────────


def format_search_banner(chosen_numbers: Iterable[int]) -> str:
    """Return the header line printed before any results."""
    return "Searching... " + " ".join(str(n) for n in chosen_numbers)


def format_no_sources(extension: str, directory: str = ".") -> str:
    """Empty-scan message; names ``directory`` unless it is the working directory."""
    where = "the current directory" if directory in (".", "") else directory
    return f"No {extension} files found in {where}."


def format_no_matches(extension: str) -> str:
    return f"No lines with positional matches found across all {extension} files."


def format_scan_footer(summary: "ScanSummary") -> str:
    """One-line statistics for a finished scan (``search --stats``)."""
    return (
        f"Scanned {summary.sources_scanned} source(s), "
        f"{summary.lines_read} line(s) read, "
        f"{summary.lines_skipped} skipped, "
        f"{len(summary.results)} match(es)."
    )
