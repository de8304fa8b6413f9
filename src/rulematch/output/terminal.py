"""Rich terminal reporter — match table and rule listing."""

from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from rulematch.matcher.models import Rule
from rulematch.output.models import CheckResult


def _verdict(matched: bool) -> Text:
    if matched:
        return Text(" ✓ MATCH ", style="bold black on green")
    return Text(" ✗ NO MATCH ", style="bold white on red")


def render(
    result: CheckResult,
    *,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print check results to the terminal using Rich."""
    console = console or Console()

    table = Table(
        title="rulematch results",
        show_lines=False,
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Result", justify="center", width=14)
    table.add_column("Value", style="magenta")
    table.add_column("Rule type", style="cyan")
    table.add_column("Pattern", style="green")

    for r in result.results:
        table.add_row(
            _verdict(r.matched),
            Text(r.value),
            Text(str(r.rule.type) if r.rule else "-"),
            Text(repr(r.rule.pattern) if r.rule else "-"),
        )

    console.print(table)

    if show_summary:
        _print_summary(console, result)


def render_rules(rules: Sequence[Rule], *, console: Optional[Console] = None) -> None:
    """Print the loaded rules, in evaluation order."""
    console = console or Console()

    if not rules:
        console.print("[yellow]No rules loaded.[/yellow]")
        return

    table = Table(title="Loaded rules", title_style="bold", border_style="dim")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Type", style="cyan")
    table.add_column("Pattern", style="green")
    for i, rule in enumerate(rules, start=1):
        table.add_row(str(i), Text(str(rule.type)), Text(repr(rule.pattern)))
    console.print(table)


def _print_summary(console: Console, result: CheckResult) -> None:
    console.print()
    console.print(f"[dim]Rules:[/dim]     {result.rule_count}")
    console.print(f"[dim]Values:[/dim]    {len(result.results)}")
    console.print(f"[dim]Matched:[/dim]   {len(result.matched)}")
    console.print(f"[dim]Unmatched:[/dim] {len(result.unmatched)}")
