"""
lotto-match CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Execute action.
  4. Report result to stdout.

Install and run::

    pip install -e .
    lotto-match --help
    lotto-match search
    lotto-match search --dir data/draws --no-color
    lotto-match validate-config --full
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="lotto-match",
    help="Rank lottery draw records by positional matches against chosen numbers.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from lotto_match.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except (ValueError, TypeError) as exc:
        # ValidationError and TOMLDecodeError are ValueErrors; a section that is
        # not a table (`match = 5`) raises TypeError.
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from lotto_match.utils.logging import configure_logging
    configure_logging(config.logging)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("search")
def search(
    directory: Optional[str] = typer.Option(
        None,
        "--dir",
        "-d",
        help="Directory holding the draw files (default: config sources.directory).",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help=(
            "Mark matched values with [brackets] instead of ANSI colours. "
            "Implied when stdout is not a terminal."
        ),
    ),
    show_stats: bool = typer.Option(
        False,
        "--stats",
        help="Print a one-line scan summary after the results.",
    ),
) -> None:
    """Scan draw files and print lines with positional matches, best first.

    Lines are ranked by number of matches, then by which chosen numbers
    matched (earlier positions first), then by file name and line number.
    """
    from lotto_match.ingestion.sources import SourceDiscoveryError
    from lotto_match.matching.scanner import run_search
    from lotto_match.reporting.formatters import (
        format_no_matches,
        format_no_sources,
        format_scan_footer,
        format_search_banner,
    )

    config = _load_config_or_exit(config_path)
    if config.output.color and (no_color or not sys.stdout.isatty()):
        config = config.model_copy(
            update={"output": config.output.model_copy(update={"color": False})}
        )
    _configure_logging(config)

    typer.echo("")
    typer.echo(format_search_banner(config.match.chosen_numbers))
    typer.echo("")

    try:
        summary = run_search(config, directory=directory)
    except SourceDiscoveryError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    extension = config.sources.extension
    if summary.sources_scanned == 0:
        typer.echo(format_no_sources(extension, directory or config.sources.directory))
        return

    if not summary.results:
        typer.echo(format_no_matches(extension))
    else:
        for line in summary.render_lines():
            typer.echo(line)

    if show_stats:
        typer.echo("")
        typer.echo(format_scan_footer(summary))

    typer.echo("")


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Chosen numbers:   {' '.join(str(n) for n in config.match.chosen_numbers)}")
    typer.echo(f"  Delimiter:        {config.match.delimiter!r}")
    typer.echo(f"  Source directory: {config.sources.directory}")
    typer.echo(f"  Source extension: {config.sources.extension}")
    typer.echo(f"  Colour output:    {config.output.color}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
