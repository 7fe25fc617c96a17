"""Rich display helpers for terminal output.

Provides formatted display functions for validation reports, individual
failures, and the rule catalog using Rich tables.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from fieldcheck.validation.messages import MessageCatalog
from fieldcheck.validation.report import ValidationReport


def display_validation_summary(report: ValidationReport, console: Console) -> None:
    """Print record counts, failure count and pass rate.

    Args:
        report: ValidationReport to display.
        console: Rich Console for output.
    """
    table = Table(title="Validation Summary", show_lines=True)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Records Validated", str(report.total_records))

    invalid_style = "bold red" if report.invalid_records > 0 else "green"
    table.add_row("Invalid Records", Text(str(report.invalid_records), style=invalid_style))
    table.add_row("Failures", str(report.failure_count))
    table.add_row("Pass Rate", f"{report.pass_rate:.0%}")

    status = (
        Text("VALID", style="bold green")
        if report.all_valid
        else Text("INVALID", style="bold red")
    )
    table.add_row("Status", status)

    console.print(table)

    if report.summary_by_field:
        field_table = Table(title="Failures by Field", show_lines=True)
        field_table.add_column("Field", style="bold cyan")
        field_table.add_column("Failures", justify="right", style="red")
        for field, count in sorted(report.summary_by_field.items(), key=lambda kv: -kv[1]):
            field_table.add_row(field, str(count))
        console.print(field_table)


def display_failures(
    report: ValidationReport,
    *,
    console: Console,
    limit: int = 50,
) -> None:
    """Print failures in record/declaration order.

    Args:
        report: ValidationReport whose rows to show.
        console: Rich Console for output.
        limit: Maximum number of failures to show (default 50).
    """
    if not report.rows:
        console.print("[dim]No validation failures found.[/dim]")
        return

    shown = report.rows[:limit]
    table = Table(title=f"Failures ({len(shown)} shown)", show_lines=True)
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Record", justify="right")
    table.add_column("Field", style="bold cyan", no_wrap=True)
    table.add_column("Rule", style="bold", no_wrap=True)
    table.add_column("Value", max_width=30)
    table.add_column("Message", max_width=60)

    for idx, row in enumerate(shown, 1):
        value = "-" if row.value is None else repr(row.value)
        if len(value) > 30:
            value = value[:27] + "..."
        table.add_row(
            str(idx),
            str(row.record_index),
            row.field,
            row.rule,
            Text(value),
            row.message,
        )

    console.print(table)

    hidden = len(report.rows) - len(shown)
    if hidden > 0:
        console.print(f"[dim]{hidden} more failure(s) not shown[/dim]")


def display_rule_catalog(
    rule_names: list[str], messages: MessageCatalog, console: Console
) -> None:
    """Print registered rule names with the message each one renders.

    Args:
        rule_names: Registered rule names.
        messages: Catalog supplying the templates.
        console: Rich Console for output.
    """
    table = Table(title=f"Registered Rules ({messages.locale})", show_lines=False)
    table.add_column("Rule", style="bold cyan", no_wrap=True)
    table.add_column("Message Template")

    templates = messages.templates
    for name in rule_names:
        template = templates.get(name)
        if template is None:
            table.add_row(name, Text(messages.template_for(name), style="dim"))
        else:
            table.add_row(name, template)

    console.print(table)
    console.print(f"\n[bold]{len(rule_names)}[/bold] rules registered")
