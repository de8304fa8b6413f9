"""rulematch CLI — Typer application with check, filter, rules, and init commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from rulematch import __version__
from rulematch.config.loader import CONFIG_FILENAME, ConfigError, load_config
from rulematch.config.schema import OUTPUT_FORMATS, RulematchConfig
from rulematch.matcher.string import StringMatcher
from rulematch.ruleset.loader import RulesetError

app = typer.Typer(
    name="rulematch",
    help="Match strings against startsWith, contains, and regex rulesets.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)

_RULESET_OPTION = typer.Option(
    None, "--ruleset", "-r", help="Ruleset file (YAML, JSON or TOML); repeatable",
)
_CONFIG_OPTION = typer.Option(None, "--config", "-c", help=f"Path to {CONFIG_FILENAME}")


def _load_config(config: Optional[str]) -> RulematchConfig:
    try:
        return load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _build_matcher(
    cfg: RulematchConfig,
    rulesets: Optional[List[Path]],
    *,
    verbose: bool = False,
) -> StringMatcher:
    """Create a StringMatcher loaded with config rulesets, then CLI ones."""
    matcher = StringMatcher()
    paths = [*cfg.matcher.rulesets, *(str(p) for p in rulesets or [])]

    for path in paths:
        try:
            matcher.load_ruleset_from_file(path)
        except RulesetError as exc:
            console.print(f"[bold red]Ruleset error:[/bold red] {exc}")
            raise typer.Exit(code=2) from exc
        if verbose:
            console.print(f"[dim]Loaded ruleset: {path}[/dim]")

    if verbose:
        console.print(f"[dim]Rules loaded: {len(matcher)}[/dim]")
    if not len(matcher):
        console.print("[yellow]⚠[/yellow]  No rules loaded; nothing will match.")
    return matcher


# ── check ─────────────────────────────────────────────────────────────────────


@app.command()
def check(
    values: List[str] = typer.Argument(..., help="Values to test against the rules"),
    ruleset: Optional[List[Path]] = _RULESET_OPTION,
    config: Optional[str] = _CONFIG_OPTION,
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Report which VALUES match the loaded rules. Exits 1 if any value does not."""
    from rulematch.output import json_report, terminal
    from rulematch.output.models import CheckResult, MatchResult

    cfg = _load_config(config)

    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]

    matcher = _build_matcher(cfg, ruleset, verbose=verbose)

    result = CheckResult(
        results=[MatchResult(value=v, rule=matcher.find_match(v)) for v in values],
        rule_count=len(matcher),
    )

    if cfg.output.format == "json":
        print(json_report.render(result))
    else:
        terminal.render(result, show_summary=cfg.output.show_summary)

    if not result.all_matched:
        raise typer.Exit(code=1)


# ── filter ────────────────────────────────────────────────────────────────────


@app.command(name="filter")
def filter_lines(
    file: Optional[Path] = typer.Argument(None, help="Input file (default: stdin)"),
    ruleset: Optional[List[Path]] = _RULESET_OPTION,
    config: Optional[str] = _CONFIG_OPTION,
    invert: bool = typer.Option(False, "--invert", "-x", help="Print lines that do not match"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Print the input lines that match the loaded rules."""
    cfg = _load_config(config)
    matcher = _build_matcher(cfg, ruleset, verbose=verbose)

    if file is None:
        lines = sys.stdin.read().splitlines()
    else:
        try:
            lines = file.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            console.print(f"[bold red]Error:[/bold red] cannot read {file}: {exc}")
            raise typer.Exit(code=2) from exc

    for line in lines:
        if matcher.matches(line) != invert:
            typer.echo(line)


# ── rules ─────────────────────────────────────────────────────────────────────


@app.command()
def rules(
    ruleset: Optional[List[Path]] = _RULESET_OPTION,
    config: Optional[str] = _CONFIG_OPTION,
) -> None:
    """List the loaded rules in evaluation order."""
    from rulematch.output import terminal

    cfg = _load_config(config)
    matcher = _build_matcher(cfg, ruleset)
    terminal.render_rules(matcher.rules)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .rulematch.toml and rules.yaml in the current directory."""
    from rulematch.config.defaults import DEFAULT_RULESET, DEFAULT_TOML

    root = Path.cwd()
    targets = [(root / CONFIG_FILENAME, DEFAULT_TOML), (root / "rules.yaml", DEFAULT_RULESET)]

    for path, _ in targets:
        if path.exists():
            console.print(f"[yellow]⚠[/yellow]  {path.name} already exists at {path}")
            raise typer.Exit(code=1)

    for path, template in targets:
        path.write_text(template, encoding="utf-8")
        console.print(f"[green]✓[/green] Created {path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"rulematch {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """rulematch — Match strings against pluggable rulesets."""
