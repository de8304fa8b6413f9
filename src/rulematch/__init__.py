"""rulematch — pluggable rule matching for strings and beyond."""

from rulematch.matcher import Matcher, Rule, RuleHandler, StringMatcher
from rulematch.ruleset import RulesetError, RulesetFormatError, RulesetNotFoundError

__version__ = "0.1.0"

__all__ = [
    "Matcher",
    "Rule",
    "RuleHandler",
    "RulesetError",
    "RulesetFormatError",
    "RulesetNotFoundError",
    "StringMatcher",
    "__version__",
]
