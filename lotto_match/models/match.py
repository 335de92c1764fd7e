"""
Draw record and match result models.

``ParsedRecord`` is one draw line after field splitting and integer parsing.
Its ``values`` tuple is indexed by ordinal position: ``values[0]`` holds
field 1, ``values[1]`` field 2, and so on. A field that was missing or did
not parse keeps its slot as ``None`` so later positions are never shifted
left.

``MatchResult`` is only created for records with at least one positional
match. It carries the precomputed display string and the ``(source_name,
source_line_number)`` pair used as the final ranking tie-break.
"""

from __future__ import annotations

from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ParsedRecord(BaseModel):
    """One parsed draw line.

    Attributes:
        label: First field, or the configured "not found" label when empty.
        values: Parsed integers by ordinal position (``None`` = no value).
        source_name: Identifier of the source (file name) the line came from.
        source_line_number: 1-based line position within that source.
    """

    model_config = ConfigDict(frozen=True)

    label: str
    values: tuple[Optional[int], ...] = ()
    source_name: str
    source_line_number: int = Field(ge=1)

    def parsed_values(self) -> Iterator[tuple[int, int]]:
        """Yield ``(position_index, value)`` for every position that parsed."""
        for index, value in enumerate(self.values):
            if value is not None:
                yield index, value


class MatchResult(BaseModel):
    """A draw line with at least one positional match against the chosen numbers.

    Attributes:
        label: Display label of the draw (usually its date).
        values: Same positional tuple as the originating ``ParsedRecord``.
        match_count: Number of positions equal to the chosen number there.
        matched_positions: One flag per chosen number; ``True`` iff matched.
        render_text: Display line with label and matched values highlighted.
        source_name: Source the line came from.
        source_line_number: 1-based line position within that source.
    """

    model_config = ConfigDict(frozen=True)

    label: str
    values: tuple[Optional[int], ...] = ()
    match_count: int = Field(ge=1)
    matched_positions: tuple[bool, ...]
    render_text: str
    source_name: str
    source_line_number: int = Field(ge=1)

    @model_validator(mode="after")
    def validate_match_count(self) -> "MatchResult":
        """``match_count`` must equal the number of flagged positions."""
        flagged = sum(self.matched_positions)
        if flagged != self.match_count:
            raise ValueError(
                f"match_count ({self.match_count}) does not agree with "
                f"matched_positions ({flagged} flagged)."
            )
        return self
