"""Matcher engine — rule model, generic registry, string specialization."""

from rulematch.matcher.base import Matcher, RuleHandler
from rulematch.matcher.models import Rule
from rulematch.matcher.string import StringMatcher

__all__ = ["Matcher", "Rule", "RuleHandler", "StringMatcher"]
