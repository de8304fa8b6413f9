"""Shared test fixtures — matchers and ruleset files."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path

import pytest

from rulematch.matcher.string import StringMatcher


@pytest.fixture
def matcher() -> StringMatcher:
    return StringMatcher()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep RULEMATCH_* variables from the outer shell out of the tests."""
    monkeypatch.delenv("RULEMATCH_FORMAT", raising=False)
    monkeypatch.delenv("RULEMATCH_RULESETS", raising=False)


@pytest.fixture
def yaml_ruleset(tmp_path: Path) -> Path:
    """A YAML ruleset with single and list patterns."""
    path = tmp_path / "rules.yaml"
    path.write_text(textwrap.dedent("""\
        - [startsWith, ["/api", "/admin"]]
        - [contains, ["user", "profile"]]
    """))
    return path


@pytest.fixture
def json_ruleset(tmp_path: Path) -> Path:
    path = tmp_path / "rules.json"
    path.write_text(json.dumps([["startsWith", "/api"], ["contains", "admin"]]))
    return path


@pytest.fixture
def mixed_ruleset(tmp_path: Path) -> Path:
    """Valid and malformed entries side by side."""
    path = tmp_path / "mixed.json"
    path.write_text(json.dumps([
        ["startsWith", "/api"],
        ["contains"],
        [None, "/admin"],
        [],
    ]))
    return path
