"""Check result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from rulematch.matcher.models import Rule


@dataclass
class MatchResult:
    """Outcome of matching a single value."""

    value: str
    rule: Optional[Rule] = None  # first matching rule, if any

    @property
    def matched(self) -> bool:
        return self.rule is not None


@dataclass
class CheckResult:
    """Complete result of a ``rulematch check`` run."""

    results: List[MatchResult] = field(default_factory=list)
    rule_count: int = 0

    @property
    def matched(self) -> List[MatchResult]:
        return [r for r in self.results if r.matched]

    @property
    def unmatched(self) -> List[MatchResult]:
        return [r for r in self.results if not r.matched]

    @property
    def all_matched(self) -> bool:
        return bool(self.results) and not self.unmatched
