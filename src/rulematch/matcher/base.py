"""Generic rule engine — ordered rules dispatched to pluggable handlers."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from rulematch.matcher.models import Rule
from rulematch.ruleset.loader import read_ruleset

RuleHandler = Callable[[Any, Any], bool]


def _rule_spec(entry: Any) -> Optional[Tuple[Any, Any]]:
    """Return ``(type, pattern)`` for a usable ruleset entry, else None.

    Rule type names are strings; any other type value marks the entry as
    malformed.
    """
    if isinstance(entry, (list, tuple)):
        if len(entry) < 2:
            return None
        rule_type, pattern = entry[0], entry[1]
    elif isinstance(entry, Mapping):
        rule_type, pattern = entry.get("type"), entry.get("pattern")
    else:
        return None
    if not isinstance(rule_type, str) or pattern is None:
        return None
    return rule_type, pattern


class Matcher:
    """Holds an ordered rule list and the handlers that evaluate it.

    Subclasses install their built-in rule types by overriding
    :meth:`define_builtin_rule_types`; see :class:`StringMatcher`.
    """

    def __init__(self) -> None:
        self._rules: List[Rule] = []
        self._handlers: Dict[str, RuleHandler] = {}
        self.define_builtin_rule_types()

    def define_builtin_rule_types(self) -> None:
        """Hook for subclasses to register their built-in handlers."""

    # ---- registration ----

    def register_rule_type(self, rule_type: str, handler: RuleHandler) -> None:
        """Bind *handler* to *rule_type*, replacing any previous binding.

        Handlers are looked up when matching, so a replacement applies to
        rules added before it as well as after.
        """
        self._handlers[rule_type] = handler

    # ---- rules ----

    def add_rule(self, rule_type: str, pattern: Any) -> None:
        """Add a rule; a list or tuple pattern adds one rule per element."""
        if isinstance(pattern, (list, tuple)):
            for p in pattern:
                self.add_rule(rule_type, p)
        else:
            self._rules.append(Rule(type=rule_type, pattern=pattern))

    def add_ruleset(self, rules: Iterable[Any]) -> None:
        """Add every ``[type, pattern]`` entry of *rules*.

        Entries missing a type or a pattern are skipped without error.
        """
        for entry in rules:
            spec = _rule_spec(entry)
            if spec is None:
                continue
            self.add_rule(*spec)

    def load_ruleset_from_file(self, path: Union[str, Path]) -> None:
        """Read a ruleset file and add its entries.

        Raises:
            RulesetNotFoundError: *path* is not a readable file.
            RulesetFormatError: the file does not hold a list of rules.
        """
        self.add_ruleset(read_ruleset(path))

    # ---- queries ----

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return tuple(self._rules)

    @property
    def rule_types(self) -> Tuple[str, ...]:
        return tuple(self._handlers)

    def __len__(self) -> int:
        return len(self._rules)

    def __bool__(self) -> bool:
        # Truthy even when no rules are stored.
        return True

    # ---- evaluation ----

    def find_match(self, value: Any) -> Optional[Rule]:
        """Return the first rule that matches *value*, or None."""
        for rule in self._rules:
            handler = self._handlers.get(rule.type)
            if handler is None:
                continue
            if handler(value, rule.pattern):
                return rule
        return None

    def matches(self, value: Any) -> bool:
        """True if any rule matches *value*."""
        return self.find_match(value) is not None
