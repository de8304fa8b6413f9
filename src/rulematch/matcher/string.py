"""String matcher — prefix, substring and regex rule types."""

from __future__ import annotations

import re
from typing import Any, Optional

from rulematch.matcher.base import Matcher
from rulematch.matcher.models import Rule

STARTS_WITH = "startsWith"
CONTAINS = "contains"
REGEX = "regex"


def _pattern_text(pattern: Any) -> Optional[str]:
    """Return *pattern* as text; numbers from YAML/TOML are stringified."""
    if isinstance(pattern, str):
        return pattern
    if isinstance(pattern, (int, float)) and not isinstance(pattern, bool):
        return str(pattern)
    return None


def starts_with(value: str, pattern: Any) -> bool:
    text = _pattern_text(pattern)
    return text is not None and value.startswith(text)


def contains(value: str, pattern: Any) -> bool:
    text = _pattern_text(pattern)
    return text is not None and text in value


def regex(value: str, pattern: Any) -> bool:
    """Search *value* for *pattern*. Flags go inline, e.g. ``(?i)``."""
    text = _pattern_text(pattern)
    if text is None:
        return False
    try:
        return re.search(text, value) is not None
    except re.error:
        return False


class StringMatcher(Matcher):
    """Filters strings by ``startsWith``, ``contains`` and ``regex`` rules.

    Values that are not ``str`` never match, whatever rules are registered.
    """

    def define_builtin_rule_types(self) -> None:
        self.register_rule_type(STARTS_WITH, starts_with)
        self.register_rule_type(CONTAINS, contains)
        self.register_rule_type(REGEX, regex)

    def find_match(self, value: Any) -> Optional[Rule]:
        if not isinstance(value, str):
            return None
        return super().find_match(value)
