"""
Draw line parser: one ``;``-delimited text line → ``ParsedRecord`` → ``MatchResult``.

Line format
-----------
  <label>;<n1>;<n2>;<n3>;<n4>;<n5>;<n6>[;<ignored>...]

  e.g.  2024-01-01;4;6;8;18;21;26

Skipped lines (no record, not an error):
  - empty lines
  - lines whose first character is an ASCII letter (column headers)
  - lines whose first character is ``#`` (comments)

Field rules:
  - The label is field 0; an empty label becomes ``"(Not found)"``.
  - Fields 1..field_count are parsed as integers. Parsing follows C ``stoi``:
    leading whitespace and a sign are accepted, trailing text after the
    digits is ignored (``"26\\r"`` → 26, ``"12abc"`` → 12), and values outside
    the signed 32-bit range are rejected.
  - A field that does not parse contributes nothing: it is never matched and
    produces no display token. Positions are ordinal, so a bad field 2 does
    not shift field 3 into slot 2.
  - Fields beyond ``field_count`` are ignored.

Nothing in this module raises for any input text, and malformed fields are
never logged.
"""

from __future__ import annotations

import re
from typing import Optional

from lotto_match.config import MatchConfig
from lotto_match.models.match import MatchResult, ParsedRecord
from lotto_match.reporting.formatters import Highlighter, PlainHighlighter, format_match_text

COMMENT_PREFIX = "#"

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

# C isspace() set, then optional sign and ASCII digits.
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def parse_int_field(text: str) -> Optional[int]:
    """Parse the leading integer of ``text``, or return ``None``.

    Returns ``None`` for empty/non-numeric text and for values outside the
    signed 32-bit range.
    """
    m = _LEADING_INT.match(text)
    if m is None:
        return None
    value = int(m.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def is_skipped_line(line: str) -> bool:
    """Return True for empty, header (leading ASCII letter) and comment lines."""
    if not line:
        return True
    first = line[0]
    return (first.isascii() and first.isalpha()) or first == COMMENT_PREFIX


class DrawLineParser:
    """Parses draw lines and scores them against a fixed chosen-number vector.

    The chosen numbers and record layout come from ``MatchConfig`` at
    construction time and never change afterwards.

    Usage::

        parser = DrawLineParser(config.match, make_highlighter(config.output.color))
        result = parser.process("2024-01-01;4;6;8;18;21;26", 1, "draws.csv")
        if result is not None:
            print(result.render_text)
    """

    def __init__(
        self,
        match_config: MatchConfig,
        highlighter:  Highlighter | None = None,
    ) -> None:
        self.match_config = match_config
        self.chosen_numbers = tuple(match_config.chosen_numbers)
        self.highlighter = highlighter or PlainHighlighter()

    def parse(
        self,
        line:        str,
        line_number: int,
        source_name: str,
    ) -> ParsedRecord | None:
        """Split one line into a ``ParsedRecord``; ``None`` if the line is skipped."""
        if is_skipped_line(line):
            return None

        fields = line.split(self.match_config.delimiter)
        if not fields:
            return None

        label = fields[0] or self.match_config.not_found_label
        positional = fields[1 : self.match_config.field_count + 1]

        return ParsedRecord(
            label=label,
            values=tuple(parse_int_field(f) for f in positional),
            source_name=source_name,
            source_line_number=line_number,
        )

    def match(self, record: ParsedRecord) -> MatchResult | None:
        """Score ``record`` against the chosen numbers; ``None`` when nothing matches."""
        matched = [False] * len(self.chosen_numbers)
        tokens: list[tuple[int, bool]] = []

        for index, value in record.parsed_values():
            hit = value == self.chosen_numbers[index]
            matched[index] = hit
            tokens.append((value, hit))

        match_count = sum(matched)
        if match_count == 0:
            return None

        return MatchResult(
            label=record.label,
            values=record.values,
            match_count=match_count,
            matched_positions=tuple(matched),
            render_text=format_match_text(record.label, tokens, self.highlighter),
            source_name=record.source_name,
            source_line_number=record.source_line_number,
        )

    def process(
        self,
        line:        str,
        line_number: int,
        source_name: str,
    ) -> MatchResult | None:
        """Parse and score one line in a single step."""
        record = self.parse(line, line_number, source_name)
        if record is None:
            return None
        return self.match(record)


def process_line(
    line:           str,
    line_number:    int,
    source_name:    str,
    chosen_numbers: tuple[int, ...] | list[int],
    highlighter:    Highlighter | None = None,
) -> MatchResult | None:
    """Score a single line against ``chosen_numbers`` with default layout settings.

    Convenience wrapper for one-off checks; scans should build one
    ``DrawLineParser`` and reuse it.
    """
    config = MatchConfig(
        chosen_numbers=tuple(chosen_numbers),
        field_count=len(chosen_numbers),
    )
    return DrawLineParser(config, highlighter).process(line, line_number, source_name)
