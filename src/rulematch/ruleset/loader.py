"""Read ruleset files (YAML, JSON or TOML) into a list of rule entries."""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any, List, Union

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import yaml


class RulesetError(Exception):
    """Base class for ruleset loading failures."""


class RulesetNotFoundError(RulesetError):
    """Raised when the ruleset path is not a readable file."""


class RulesetFormatError(RulesetError):
    """Raised when a ruleset file does not hold a list of rules."""


def _parse_yaml(text: str) -> Any:
    return yaml.safe_load(text)


def _parse_json(text: str) -> Any:
    return json.loads(text)


def _parse_toml(text: str) -> Any:
    # A TOML document is always a table; the rule list sits under "rules".
    data = tomllib.loads(text)
    return data.get("rules", data)


_PARSERS = {
    ".yaml": _parse_yaml,
    ".yml": _parse_yaml,
    ".json": _parse_json,
    ".toml": _parse_toml,
}


def read_ruleset(path: Union[str, Path]) -> List[Any]:
    """Return the rule entries stored in *path*.

    Entries are returned as written; skipping malformed ones is left to
    :meth:`Matcher.add_ruleset`.
    """
    p = Path(path)
    if not p.is_file() or not os.access(p, os.R_OK):
        raise RulesetNotFoundError(f"Ruleset file not found or not readable: {path}")

    parse = _PARSERS.get(p.suffix.lower(), _parse_yaml)
    try:
        data = parse(p.read_text(encoding="utf-8"))
    except (
        UnicodeDecodeError,
        json.JSONDecodeError,
        tomllib.TOMLDecodeError,
        yaml.YAMLError,
    ) as exc:
        raise RulesetFormatError(f"Failed to parse ruleset {path}: {exc}") from exc

    if not isinstance(data, (list, tuple)):
        raise RulesetFormatError(f"Ruleset file must contain a list of rules: {path}")
    return list(data)
