"""Reporters for check results."""

from rulematch.output.models import CheckResult, MatchResult

__all__ = ["CheckResult", "MatchResult"]
