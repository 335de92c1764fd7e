"""Tests for lotto_match.ingestion.sources."""

from __future__ import annotations

import logging

import pytest

from lotto_match.ingestion.sources import (
    SourceDiscoveryError,
    discover_sources,
    read_source_lines,
)


# ── discover_sources ──────────────────────────────────────────────────────────


def test_discover_sorted_by_name(tmp_path, write_source) -> None:
    write_source("b.csv", "")
    write_source("a.csv", "")
    write_source("c.csv", "")
    names = [p.name for p in discover_sources(tmp_path)]
    assert names == ["a.csv", "b.csv", "c.csv"]


def test_discover_filters_extension(tmp_path, write_source) -> None:
    write_source("draws.csv", "")
    write_source("notes.txt", "")
    write_source("UPPER.CSV", "")
    names = [p.name for p in discover_sources(tmp_path, ".csv")]
    assert names == ["draws.csv"]


def test_discover_ignores_directories(tmp_path, write_source) -> None:
    (tmp_path / "nested.csv").mkdir()
    write_source("real.csv", "")
    names = [p.name for p in discover_sources(tmp_path)]
    assert names == ["real.csv"]


def test_discover_not_recursive(tmp_path, write_source) -> None:
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "inner.csv").write_text("", encoding="utf-8")
    assert discover_sources(tmp_path) == []


def test_discover_empty_directory(tmp_path) -> None:
    assert discover_sources(tmp_path) == []


def test_discover_missing_directory_raises(tmp_path) -> None:
    with pytest.raises(SourceDiscoveryError):
        discover_sources(tmp_path / "missing")


def test_discovery_error_is_oserror() -> None:
    assert issubclass(SourceDiscoveryError, OSError)


# ── read_source_lines ─────────────────────────────────────────────────────────


def test_read_lines_strips_terminators(tmp_path) -> None:
    p = tmp_path / "crlf.csv"
    p.write_bytes(b"2024-01-01;4\r\n2024-01-02;6\r\n")
    assert read_source_lines(p) == ["2024-01-01;4", "2024-01-02;6"]


def test_read_lines_keeps_blank_lines(write_source) -> None:
    p = write_source("gaps.csv", "a\n\nb\n")
    assert read_source_lines(p) == ["a", "", "b"]


def test_read_missing_file_returns_empty_and_logs(tmp_path, caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="lotto_match.ingestion.sources"):
        assert read_source_lines(tmp_path / "gone.csv") == []
    assert "Could not open the file gone.csv" in caplog.text


def test_read_undecodable_bytes_replaced_not_dropped(tmp_path) -> None:
    p = tmp_path / "latin1.csv"
    p.write_bytes(b"\xff\xfe\xfa;4\n2024-01-01;4\n")
    lines = read_source_lines(p, encoding="utf-8")
    assert len(lines) == 2
    assert "�" in lines[0]
    assert lines[1] == "2024-01-01;4"


def test_read_unknown_encoding_returns_empty_and_logs(write_source, caplog) -> None:
    p = write_source("a.csv", "2024-01-01;4\n")
    with caplog.at_level(logging.ERROR, logger="lotto_match.ingestion.sources"):
        assert read_source_lines(p, encoding="no-such-codec") == []
    assert "Could not open the file a.csv" in caplog.text
