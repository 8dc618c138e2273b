import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from schema_lint.core.configuration import ConfigurationError, OutputFormat, load_configuration
from schema_lint.core.lint import lint_paths
from schema_lint.formatters import FORMATTERS
from schema_lint.rules import ALL_RULES

console = Console()


def lint(
    paths: Annotated[list[str] | None, typer.Argument(help="Schema files or directories to lint.")] = None,
    output_format: Annotated[
        OutputFormat | None, typer.Option("--format", "-f", help="Output format (default: text).")
    ] = None,
    rules: Annotated[str | None, typer.Option("--rules", "-r", help="Comma-separated rule names to run.")] = None,
    comment_descriptions: Annotated[
        bool, typer.Option("--comment-descriptions", help="Treat leading # comments as descriptions.")
    ] = False,
    config: Annotated[Path | None, typer.Option("--config", "-c", help="Path to a JSON configuration file.")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Check the descriptions in GraphQL schema files."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    overrides = {
        "format": output_format,
        "comment_descriptions": True if comment_descriptions else None,
        "rules": [name.strip() for name in rules.split(",") if name.strip()] if rules else None,
    }
    try:
        configuration = load_configuration(config, overrides)
    except ConfigurationError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(2) from exc

    targets = paths or configuration.schema_paths
    if not targets:
        console.print("[red]No schema paths given.[/red]")
        raise typer.Exit(2)

    try:
        results = lint_paths(targets, configuration)
    except (OSError, UnicodeDecodeError) as exc:
        console.print(f"[red]Failed to read schema: {escape(str(exc))}[/red]")
        raise typer.Exit(2) from exc

    if not results:
        console.print("[red]No schema files found.[/red]")
        raise typer.Exit(2)

    output = FORMATTERS[configuration.format](results)
    if configuration.format == OutputFormat.TEXT:
        console.print(output, soft_wrap=True, highlight=False)
    elif output:
        typer.echo(output)

    if any(result.messages for result in results):
        raise typer.Exit(1)


def list_rules() -> None:
    """List the available rules."""
    table = Table(show_lines=False)
    table.add_column("rule", no_wrap=True)
    table.add_column("summary")
    for name, rule in ALL_RULES.items():
        table.add_row(name, rule.summary)
    console.print(table)
