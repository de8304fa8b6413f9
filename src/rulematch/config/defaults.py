"""Starter .rulematch.toml and rules.yaml templates written by ``rulematch init``."""

DEFAULT_TOML = """\
# rulematch configuration
version = "1.0"

[matcher]
rulesets = ["rules.yaml"]   # ruleset files, loaded in order

[output]
format = "terminal"         # terminal | json
show_summary = true
"""

DEFAULT_RULESET = """\
# Each entry is [type, pattern]; a list of patterns adds one rule per pattern.
# Built-in types: startsWith, contains, regex (Python syntax, inline flags).
- [startsWith, ["/api", "/admin"]]
- [contains, "debug"]
- [regex, '^/users/\\d+$']
"""
