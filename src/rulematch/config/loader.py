"""Load and merge configuration from .rulematch.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from rulematch.config.schema import (
    OUTPUT_FORMATS,
    MatcherConfig,
    OutputConfig,
    RulematchConfig,
)

CONFIG_FILENAME = ".rulematch.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Return the explicit *override* path, else ``root/.rulematch.toml`` if present."""
    if not override:
        default = root / CONFIG_FILENAME
        return default if default.is_file() else None
    explicit = Path(override)
    if explicit.is_file():
        return explicit
    raise ConfigError(f"Config file not found: {override}")


def _read_toml(path: Path) -> Dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _section(raw: Dict[str, Any], name: str, cls: type):
    """Instantiate *cls* from table ``[name]``; keys it does not declare are dropped."""
    table = raw.get(name, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[{name}] must be a table")
    known = {f.name for f in dataclasses.fields(cls)}
    return cls(**{key: table[key] for key in known & table.keys()})


def _merge_env_overrides(cfg: RulematchConfig) -> None:
    """Apply RULEMATCH_* environment variable overrides."""
    if val := os.environ.get("RULEMATCH_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("RULEMATCH_RULESETS"):
        cfg.matcher.rulesets.extend(p.strip() for p in val.split(os.pathsep) if p.strip())


def load_config(
    root: Path,
    config_override: Optional[str] = None,
) -> RulematchConfig:
    """Load, validate, and return a RulematchConfig.

    Relative ruleset paths in the file are resolved against the file's
    directory.
    """
    config_path = find_config_file(root, config_override)

    if config_path is None:
        cfg = RulematchConfig()
    else:
        raw = _read_toml(config_path)
        cfg = RulematchConfig(
            version=str(raw.get("version", "1.0")),
            matcher=_section(raw, "matcher", MatcherConfig),
            output=_section(raw, "output", OutputConfig),
        )
        if not isinstance(cfg.matcher.rulesets, list):
            raise ConfigError(f"matcher.rulesets must be a list of paths: {config_path}")
        cfg.matcher.rulesets = [
            str(config_path.parent / r) for r in cfg.matcher.rulesets
        ]
        if cfg.output.format not in OUTPUT_FORMATS:
            raise ConfigError(f"Invalid output format: {cfg.output.format}")

    _merge_env_overrides(cfg)
    return cfg
