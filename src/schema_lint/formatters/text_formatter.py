from collections.abc import Sequence

from rich.markup import escape

from schema_lint.models import FileResult


def format_text(results: Sequence[FileResult]) -> str:
    """Render results as rich markup, grouped by file, with a summary line."""
    lines: list[str] = []
    total = 0
    for result in results:
        if not result.messages:
            continue
        lines.append(f"[bold underline]{escape(result.path)}[/bold underline]")
        for message in result.messages:
            location = f"{message.location.line}:{message.location.column}" if message.location else "-"
            lines.append(f"  [dim]{location:<9}[/dim] {escape(message.message)}  [dim]{message.rule}[/dim]")
        lines.append("")
        total += result.error_count

    if total:
        lines.append(f"[red]{total} error{'' if total == 1 else 's'} detected[/red]")
    else:
        lines.append("[green]No errors detected[/green]")
    return "\n".join(lines)
