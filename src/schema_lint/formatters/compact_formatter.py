from collections.abc import Sequence

from schema_lint.models import FileResult


def format_compact(results: Sequence[FileResult]) -> str:
    lines = []
    for result in results:
        for message in result.messages:
            if message.location:
                where = f"{result.path}:{message.location.line}:{message.location.column}"
            else:
                where = result.path
            lines.append(f"{where} {message.message} ({message.rule})")
    return "\n".join(lines)
