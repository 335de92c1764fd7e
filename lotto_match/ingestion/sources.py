"""
Draw source discovery and reading.

A *source* is one regular file directly inside the scan directory whose
suffix equals the configured extension (``.csv`` by default, compared
case-sensitively). Sources are returned sorted by file name, which is also
the order they are scanned in.

Read failures are contained per source: a file that cannot be opened is
logged and contributes no lines; the scan carries on with the rest.
Undecodable bytes are replaced rather than failing the whole file.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class SourceDiscoveryError(OSError):
    """Raised when the scan directory is missing or not a directory."""


def discover_sources(directory: Path | str, extension: str = ".csv") -> list[Path]:
    """List draw files in ``directory`` sorted by name.

    Args:
        directory: Directory to look in (not searched recursively).
        extension: File suffix to select, including the dot.

    Returns:
        Sorted list of matching file paths (may be empty).

    Raises:
        SourceDiscoveryError: If ``directory`` does not exist or is not a directory.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise SourceDiscoveryError(f"Directory not found: {directory}")

    sources = [
        entry
        for entry in directory.iterdir()
        if entry.is_file() and entry.suffix == extension
    ]
    sources.sort(key=lambda p: p.name)
    logger.debug("Found %d %s source(s) in %s", len(sources), extension, directory)
    return sources


def read_source_lines(path: Path, encoding: str = "utf-8") -> list[str]:
    """Return the lines of ``path`` without line terminators.

    ``\\r\\n`` and ``\\r`` endings are normalised by universal-newline reading.
    Bytes that do not decode are replaced with U+FFFD, so a stray Latin-1
    header only affects its own line.

    Returns:
        The file's lines, or ``[]`` if the file cannot be opened.
    """
    try:
        with path.open("r", encoding=encoding, errors="replace") as fh:
            return [line.rstrip("\n") for line in fh]
    except (OSError, LookupError) as exc:
        logger.error("Error: Could not open the file %s (%s)", path.name, exc)
        return []
