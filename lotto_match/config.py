"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``     : committed static defaults
  2. ``config/local.toml``       : optional local overrides (gitignored)
  3. ``.env``                    : local env overrides (gitignored)
  4. Environment variables       : ``LOTTO_MATCH_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

The chosen numbers live in ``[match]`` and are handed to the parser at
construction time. They are deliberately not exposed as a CLI flag or
environment variable.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

DEFAULT_CHOSEN_NUMBERS: tuple[int, ...] = (4, 6, 8, 18, 21, 26)
NOT_FOUND_LABEL = "(Not found)"

# ── Sub-config models ─────────────────────────────────────────────────────────


class MatchConfig(BaseModel):
    """Chosen-number vector and record layout.

    ``chosen_numbers[i]`` is compared only against ordinal field ``i + 1``
    of each record.
    """

    model_config = ConfigDict(frozen=True)

    chosen_numbers: tuple[int, ...] = DEFAULT_CHOSEN_NUMBERS
    field_count: int = 6
    delimiter: str = ";"
    not_found_label: str = NOT_FOUND_LABEL

    @field_validator("field_count")
    @classmethod
    def validate_field_count(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"field_count must be >= 1, got {v}.")
        return v

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError(f"delimiter must be a single character, got {v!r}.")
        return v

    @model_validator(mode="after")
    def validate_vector_length(self) -> "MatchConfig":
        if len(self.chosen_numbers) != self.field_count:
            raise ValueError(
                f"chosen_numbers has {len(self.chosen_numbers)} values but "
                f"field_count is {self.field_count}."
            )
        return self


class SourcesConfig(BaseModel):
    """Where draw files are looked up and how they are read."""

    model_config = ConfigDict(frozen=True)

    directory: str = "."
    extension: str = ".csv"
    encoding: str = "utf-8"

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2:
            raise ValueError(f"extension must look like '.csv', got '{v}'.")
        return v


class OutputConfig(BaseModel):
    """Terminal output settings."""

    model_config = ConfigDict(frozen=True)

    color: bool = True


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "WARNING"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration.

    Constructed by ``load_config()``; every CLI command receives one.
    """

    model_config = ConfigDict(frozen=True)

    match: MatchConfig = MatchConfig()
    sources: SourcesConfig = SourcesConfig()
    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``. When the default file is
            absent (e.g. a wheel install) the built-in defaults are used.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If an explicit ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    raw: dict[str, Any] = {}
    if config_path is None:
        default_path = root / "config" / "default.toml"
        if default_path.exists():
            raw = _read_toml_with_local(default_path)
    else:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        raw = _read_toml_with_local(config_path)

    # 3. Apply LOTTO_MATCH_* environment variable overrides
    raw = _apply_env_overrides(raw)

    # 4. Build and validate AppConfig
    return _build_app_config(raw)


def _read_toml_with_local(config_path: Path) -> dict[str, Any]:
    """Read ``config_path`` and deep-merge a sibling ``local.toml`` if present."""
    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)
    return raw


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _is_truthy(value: str) -> bool:
    return value.lower() in ("1", "true", "yes")


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply LOTTO_MATCH_* env vars to the raw config dict.

    Supported overrides:
      LOTTO_MATCH_DIRECTORY  → raw["sources"]["directory"]
      LOTTO_MATCH_LOG_LEVEL  → raw["logging"]["level"]
      LOTTO_MATCH_NO_COLOR   → raw["output"]["color"] = False
      LOTTO_MATCH_DEBUG      → raw["debug"]
    """
    if directory := os.environ.get("LOTTO_MATCH_DIRECTORY"):
        raw.setdefault("sources", {})["directory"] = directory

    if log_level := os.environ.get("LOTTO_MATCH_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if no_color := os.environ.get("LOTTO_MATCH_NO_COLOR"):
        if _is_truthy(no_color):
            raw.setdefault("output", {})["color"] = False

    if debug := os.environ.get("LOTTO_MATCH_DEBUG"):
        raw["debug"] = _is_truthy(debug)

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        match=MatchConfig(**raw.get("match", {})),
        sources=SourcesConfig(**raw.get("sources", {})),
        output=OutputConfig(**raw.get("output", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
