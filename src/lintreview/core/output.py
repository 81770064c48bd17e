"""Rich terminal formatting for lintreview output."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from lintreview.core.models import CorrectionRule, ReviewResult

console = Console()
error_console = Console(stderr=True)


def print_error(message: str) -> None:
    error_console.print(f"[red]❌ {escape(message)}[/red]", highlight=False)


def print_review_footer(result: ReviewResult) -> None:
    """Summarize a run on stderr so stdout stays clean for piping."""
    color = "red" if result.blocking_count else "yellow" if result.reported_count else "green"
    error_console.print(
        f"  [{color}]{result.reported_count} of {result.issue_count} issues reported[/{color}]"
        f"  [dim]({result.blocking_count} blocking)[/dim]"
    )


def print_rules(rules: list[CorrectionRule], source: str) -> None:
    """Print loaded correction rules as a table."""
    if not rules:
        console.print(f"\n  [yellow]No correction rules loaded from {source}.[/yellow]\n")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Issue")
    table.add_column("Ext")
    table.add_column("Replace")
    table.add_column("With")
    table.add_column("Requires")
    for rule in rules:
        table.add_row(
            escape(rule.issue_id),
            escape(rule.ext),
            escape(rule.target_error),
            escape(rule.correction),
            escape(rule.required_import) if rule.required_import else "[dim]-[/dim]",
        )

    console.print(Panel(
        table,
        title=f"[bold]Correction rules: {escape(source)}[/bold]",
        border_style="cyan",
        padding=(0, 1),
    ))
