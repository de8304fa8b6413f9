"""Tests for the string matcher and its built-in rule types."""

import pytest

from rulematch.matcher.models import Rule
from rulematch.matcher.string import StringMatcher, contains, regex, starts_with


class TestBuiltinHandlers:
    @pytest.mark.parametrize("value,pattern,expected", [
        ("/api/users", "/api", True),
        ("/api", "/api", True),
        ("/users/api", "/api", False),
        ("", "/api", False),
        ("anything", "", True),
        ("", "", True),
    ])
    def test_starts_with(self, value, pattern, expected):
        assert starts_with(value, pattern) is expected

    @pytest.mark.parametrize("value,pattern,expected", [
        ("/api/users", "api", True),
        ("/users/api", "api", True),
        ("api/users", "api", True),
        ("/users", "api", False),
        ("", "api", False),
        ("", "", True),
    ])
    def test_contains(self, value, pattern, expected):
        assert contains(value, pattern) is expected

    @pytest.mark.parametrize("value,pattern,expected", [
        ("/api/users/123", r"^/api/users/\d+$", True),
        ("/api/users/abc", r"^/api/users/\d+$", False),
        ("/api/users", r"^/api/users/\d+$", False),
        ("prefix /users/7 suffix", r"/users/\d", True),
        ("ADMIN", r"(?i)admin", True),
        ("ADMIN", r"admin", False),
    ])
    def test_regex(self, value, pattern, expected):
        assert regex(value, pattern) is expected

    def test_invalid_regex_is_no_match(self):
        assert regex("abc", "(unclosed") is False

    @pytest.mark.parametrize("handler", [starts_with, contains, regex])
    @pytest.mark.parametrize("pattern", [None, True, False, ["1"], {"p": "1"}, b"1"])
    def test_unsupported_pattern_is_no_match(self, handler, pattern):
        assert handler("1 True False", pattern) is False

    @pytest.mark.parametrize("handler,pattern,value", [
        (starts_with, 2024, "2024-01-01"),
        (contains, 1.5, "v1.5.0"),
        (regex, 42, "answer=42"),
    ])
    def test_numeric_pattern_compared_as_text(self, handler, pattern, value):
        assert handler(value, pattern) is True
        assert handler("nothing here", pattern) is False


class TestStringMatcher:
    def test_builtin_types_registered(self, matcher):
        assert set(matcher.rule_types) == {"startsWith", "contains", "regex"}

    def test_add_rule_single_and_list(self, matcher):
        matcher.add_rule("startsWith", "/api")
        assert matcher.matches("/api/users")
        assert matcher.matches("/api")
        assert not matcher.matches("/users/api")
        assert not matcher.matches("")

        other = StringMatcher()
        other.add_rule("startsWith", ["/api", "/admin"])
        assert other.matches("/api/users")
        assert other.matches("/admin/dashboard")
        assert not other.matches("/users")

    def test_multiple_rule_types(self, matcher):
        matcher.add_rule("startsWith", "/api")
        matcher.add_rule("contains", "admin")
        matcher.add_rule("regex", r"^/users/\d+$")
        assert matcher.matches("/api/users")
        assert matcher.matches("/some/admin/page")
        assert matcher.matches("/users/123")
        assert not matcher.matches("/dashboard")

    def test_scenario_prefix_or_substring(self, matcher):
        matcher.add_ruleset([("startsWith", "/api"), ("contains", "admin")])
        assert matcher.matches("/api/x") is True
        assert matcher.matches("/x/admin/y") is True
        assert matcher.matches("/x") is False

    @pytest.mark.parametrize("value", [42, 4.2, None, b"/api", ["/api"], {"v": "/api"}])
    def test_non_string_never_matches(self, matcher, value):
        matcher.add_rule("contains", "")
        matcher.register_rule_type("always", lambda v, p: True)
        matcher.add_rule("always", "*")
        assert matcher.matches(value) is False
        assert matcher.find_match(value) is None

    def test_override_builtin_applies_to_existing_rules(self, matcher):
        matcher.add_rule("contains", "admin")
        assert matcher.matches("/admin")
        matcher.register_rule_type("contains", lambda value, pattern: value == pattern)
        assert not matcher.matches("/admin")
        assert matcher.matches("admin")

    def test_custom_rule_type(self, matcher):
        matcher.register_rule_type("endsWith", lambda value, pattern: value.endswith(pattern))
        matcher.add_rule("endsWith", [".json", ".yaml"])
        assert matcher.matches("rules.yaml")
        assert not matcher.matches("rules.toml")

    def test_bad_regex_rule_does_not_block_later_rules(self, matcher):
        matcher.add_rule("regex", "[broken")
        matcher.add_rule("startsWith", "/ok")
        assert matcher.matches("/ok/path")
        assert not matcher.matches("[broken")

    def test_find_match_reports_rule(self, matcher):
        matcher.add_rule("startsWith", "/api")
        matcher.add_rule("contains", "admin")
        assert matcher.find_match("/x/admin") == Rule("contains", "admin")
