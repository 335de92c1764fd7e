"""
Scanner: runs the draw line parser over every source and ranks the result.

Control flow::

    for source in sorted sources:
        for (line_number, line) in enumerate(lines, start=1):
            parser.process(line, line_number, source.name)
    concatenate per-source results → rank once → render

Sources are independent: each produces its own ``SourceScan`` and the
results are only merged before the single final sort.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from lotto_match.config import AppConfig
from lotto_match.ingestion.draw_csv import DrawLineParser
from lotto_match.ingestion.sources import discover_sources, read_source_lines
from lotto_match.matching.ranker import rank_results
from lotto_match.models.match import MatchResult
from lotto_match.reporting.formatters import make_highlighter

logger = logging.getLogger(__name__)


@dataclass
class SourceScan:
    """Results and line counters for one source.

    Attributes:
        source_name:   Source identifier (file name).
        results:       Matched lines in file order.
        lines_read:    Total lines seen, including skipped ones.
        lines_skipped: Empty, header and comment lines.
    """

    source_name:   str
    results:       list[MatchResult] = field(default_factory=list)
    lines_read:    int = 0
    lines_skipped: int = 0


@dataclass
class ScanSummary:
    """Outcome of a full scan across all sources.

    ``results`` is already in ranked order.
    """

    sources_scanned: int = 0
    lines_read:      int = 0
    lines_skipped:   int = 0
    results:         list[MatchResult] = field(default_factory=list)

    def render_lines(self) -> list[str]:
        """Display strings in final ranked order."""
        return [r.render_text for r in self.results]


def scan_lines(
    lines:       Iterable[str],
    source_name: str,
    parser:      DrawLineParser,
) -> SourceScan:
    """Parse and score every line of one source.

    Line numbers are 1-based and count skipped lines too, so they always
    point at the physical line in the file.
    """
    scan = SourceScan(source_name=source_name)
    for line_number, line in enumerate(lines, start=1):
        scan.lines_read += 1
        record = parser.parse(line, line_number, source_name)
        if record is None:
            scan.lines_skipped += 1
            continue
        result = parser.match(record)
        if result is not None:
            scan.results.append(result)
    return scan


def scan_sources(
    paths:    Iterable[Path],
    parser:   DrawLineParser,
    encoding: str = "utf-8",
) -> ScanSummary:
    """Scan every source in name order, then rank the combined results.

    Args:
        paths:    Source files. They are re-sorted by name here so callers
                  need not guarantee ordering.
        parser:   Configured parser (carries the chosen numbers).
        encoding: Text encoding used to read each source.

    Returns:
        ``ScanSummary`` with ranked results and aggregate counters.
    """
    summary = ScanSummary()
    collected: list[MatchResult] = []

    for path in sorted(paths, key=lambda p: p.name):
        lines = read_source_lines(path, encoding=encoding)
        scan = scan_lines(lines, path.name, parser)
        logger.info(
            "Scanned %s: %d line(s), %d skipped, %d match(es)",
            scan.source_name, scan.lines_read, scan.lines_skipped, len(scan.results),
        )
        summary.sources_scanned += 1
        summary.lines_read += scan.lines_read
        summary.lines_skipped += scan.lines_skipped
        collected.extend(scan.results)

    summary.results = rank_results(collected)
    return summary


def run_search(config: AppConfig, directory: Path | str | None = None) -> ScanSummary:
    """Discover sources and scan them using ``config``.

    Args:
        config:    Application config (chosen numbers, source settings, colour).
        directory: Optional override for ``config.sources.directory``.

    Raises:
        SourceDiscoveryError: If the scan directory does not exist.
    """
    target = Path(directory) if directory is not None else Path(config.sources.directory)
    paths = discover_sources(target, config.sources.extension)
    parser = DrawLineParser(config.match, make_highlighter(config.output.color))
    summary = scan_sources(paths, parser, encoding=config.sources.encoding)
    logger.info(
        "Search finished: %d source(s), %d match(es)",
        summary.sources_scanned, len(summary.results),
    )
    return summary
