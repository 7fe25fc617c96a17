"""fieldcheck CLI application entry point.

Provides commands for listing the registered rules and validating JSON or
CSV records against a JSON rule set.

Usage:
    fieldcheck version
    fieldcheck rules [--locale es]
    fieldcheck validate <data-file> <rules-file> [--markdown report.md] [--json]

Exit codes for ``validate``: 0 when every record is valid, 1 when any
record fails, 2 when the inputs or the rule set cannot be used.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

app = typer.Typer(
    name="fieldcheck",
    help="Declarative field validation for flat records.",
    no_args_is_help=True,
)

console = Console()

EXIT_INVALID = 1
EXIT_CONFIG = 2


@app.command()
def version() -> None:
    """Show the current version."""
    from fieldcheck import __version__

    console.print(f"fieldcheck {__version__}")


@app.command()
def rules(
    locale: Annotated[
        str,
        typer.Option("--locale", "-l", help="Message catalog locale"),
    ] = "en",
) -> None:
    """List every built-in rule with its message template."""
    from fieldcheck.cli.display import display_rule_catalog
    from fieldcheck.errors import ConfigurationError
    from fieldcheck.validation.messages import MessageCatalog
    from fieldcheck.validation.registry import RuleRegistry

    try:
        messages = MessageCatalog.load(locale)
    except ConfigurationError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=EXIT_CONFIG) from e

    registry = RuleRegistry.with_builtins()
    display_rule_catalog(registry.names(), messages, console)


@app.command()
def validate(
    data_file: Annotated[
        Path,
        typer.Argument(help="Records to validate (.json object/array or .csv)"),
    ],
    rules_file: Annotated[
        Path,
        typer.Argument(help="JSON object mapping field names to rule declarations"),
    ],
    locale: Annotated[
        str,
        typer.Option("--locale", "-l", help="Message catalog locale"),
    ] = "en",
    markdown: Annotated[
        Path | None,
        typer.Option("--markdown", "-m", help="Write a Markdown report to this file"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the report as JSON instead of tables"),
    ] = False,
    limit: Annotated[
        int,
        typer.Option("--limit", help="Maximum number of failures to display"),
    ] = 50,
) -> None:
    """Validate records against a rule set.

    Loads the rule set, evaluates every record, and displays a summary
    plus each failure with its rendered message.
    """
    from fieldcheck.cli.display import display_failures, display_validation_summary
    from fieldcheck.errors import FieldCheckError
    from fieldcheck.parsing.loader import load_records, load_ruleset
    from fieldcheck.validation.engine import ValidationEngine
    from fieldcheck.validation.messages import MessageCatalog
    from fieldcheck.validation.report import ValidationReport

    for path in (data_file, rules_file):
        if not path.is_file():
            console.print(f"[bold red]Error:[/bold red] File not found: {path}")
            raise typer.Exit(code=EXIT_CONFIG)

    # Stage 1: Load inputs
    if not as_json:
        console.print(f"\n[bold blue][1/2][/bold blue] Loading {data_file.name}...")
    try:
        ruleset = load_ruleset(rules_file)
        records = load_records(data_file)
        messages = MessageCatalog.load(locale)
    except (FieldCheckError, ValueError) as e:
        console.print(f"[bold red]Error loading inputs:[/bold red] {e}")
        raise typer.Exit(code=EXIT_CONFIG) from e

    # Stage 2: Evaluate
    if not as_json:
        console.print(
            f"[bold blue][2/2][/bold blue] Validating {len(records)} records "
            f"against {len(ruleset)} fields..."
        )
    engine = ValidationEngine(messages=messages)
    try:
        results = [engine.evaluate(record, ruleset) for record in records]
    except FieldCheckError as e:
        console.print(f"[bold red]Validation error:[/bold red] {e}")
        raise typer.Exit(code=EXIT_CONFIG) from e

    report = ValidationReport.from_results(results, messages, source=data_file.name)

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
    else:
        console.print()
        display_validation_summary(report, console)
        display_failures(report, console=console, limit=limit)

    if markdown is not None:
        markdown.parent.mkdir(parents=True, exist_ok=True)
        markdown.write_text(report.to_markdown(), encoding="utf-8")
        if not as_json:
            console.print(f"\n[green]Report written to {markdown}[/green]")

    if not report.all_valid:
        raise typer.Exit(code=EXIT_INVALID)
