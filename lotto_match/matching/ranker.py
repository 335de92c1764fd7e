"""
Match ranker: the total order used to present matched draw lines.

Ordering (first rule that discriminates wins)
---------------------------------------------
  1. match_count, descending.
  2. matched_positions, leftmost-first: at the first index where two
     results differ, the one with a match there ranks first. A match on
     chosen number 0 therefore outweighs matches on positions 1..5
     combined, and so on down the vector.
  3. source_name, ascending.
  4. source_line_number, ascending.

Two results only compare equal when all four keys are identical, which
cannot happen for distinct (source_name, line) pairs, so the order is
effectively total.

``ranking_key`` is used for sorting; ``compare_results`` spells the same
rules out step by step and is kept consistent with the key by tests.
"""

from __future__ import annotations

from typing import Iterable

from lotto_match.models.match import MatchResult


def ranking_key(result: MatchResult) -> tuple:
    """Composite sort key implementing the four-level order.

    ``not matched`` maps a match to ``False`` so that, under ascending tuple
    comparison, a matched position sorts before an unmatched one.
    """
    return (
        -result.match_count,
        tuple(not m for m in result.matched_positions),
        result.source_name,
        result.source_line_number,
    )


def compare_results(a: MatchResult, b: MatchResult) -> int:
    """Three-way comparison: negative if ``a`` ranks before ``b``, 0 if tied."""
    if a.match_count != b.match_count:
        return -1 if a.match_count > b.match_count else 1

    for mine, theirs in zip(a.matched_positions, b.matched_positions):
        if mine != theirs:
            return -1 if mine else 1

    if a.source_name != b.source_name:
        return -1 if a.source_name < b.source_name else 1

    if a.source_line_number != b.source_line_number:
        return -1 if a.source_line_number < b.source_line_number else 1

    return 0


def rank_results(results: Iterable[MatchResult]) -> list[MatchResult]:
    """Return a new list of ``results`` in ranked order."""
    return sorted(results, key=ranking_key)
