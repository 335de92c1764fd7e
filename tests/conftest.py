"""
Shared pytest fixtures for the lotto-match test suite.

Provides:
  - ``match_config``: default ``MatchConfig`` (chosen numbers 4 6 8 18 21 26).
  - ``parser``: a ``DrawLineParser`` with the plain highlighter, so render
    text is free of ANSI escapes and easy to assert on.
  - ``write_source``: helper that writes a draw file into ``tmp_path``.
  - ``make_result``: factory for ``MatchResult`` objects used by ranker tests.
  - ``clean_env``: strips ``LOTTO_MATCH_*`` variables from the environment.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import pytest

from lotto_match.config import MatchConfig
from lotto_match.ingestion.draw_csv import DrawLineParser
from lotto_match.models.match import MatchResult
from lotto_match.reporting.formatters import PlainHighlighter

CHOSEN = (4, 6, 8, 18, 21, 26)


@pytest.fixture
def match_config() -> MatchConfig:
    return MatchConfig()


@pytest.fixture
def parser(match_config: MatchConfig) -> DrawLineParser:
    return DrawLineParser(match_config, PlainHighlighter())


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return ``write(name, content) -> Path`` writing into ``tmp_path``."""

    def _write(name: str, content: str) -> Path:
        p = tmp_path / name
        p.write_text(content, encoding="utf-8")
        return p

    return _write


@pytest.fixture
def make_result() -> Callable[..., MatchResult]:
    """Factory for ``MatchResult`` with a given match vector and source position."""

    def _make(
        matched: tuple[bool, ...] | list[bool],
        source_name: str = "a.csv",
        line: int = 1,
    ) -> MatchResult:
        matched = tuple(matched)
        return MatchResult(
            label="2024-01-01",
            values=(),
            match_count=sum(matched),
            matched_positions=matched,
            render_text=f"{source_name}:{line}",
            source_name=source_name,
            source_line_number=line,
        )

    return _make


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in (
        "LOTTO_MATCH_DIRECTORY",
        "LOTTO_MATCH_LOG_LEVEL",
        "LOTTO_MATCH_NO_COLOR",
        "LOTTO_MATCH_DEBUG",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo ``configure_logging`` side effects (CLI tests call it via ``force=True``)."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)
