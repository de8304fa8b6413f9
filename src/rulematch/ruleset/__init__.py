"""Ruleset files — reading declarative rule lists from disk."""

from rulematch.ruleset.loader import (
    RulesetError,
    RulesetFormatError,
    RulesetNotFoundError,
    read_ruleset,
)

__all__ = [
    "RulesetError",
    "RulesetFormatError",
    "RulesetNotFoundError",
    "read_ruleset",
]
