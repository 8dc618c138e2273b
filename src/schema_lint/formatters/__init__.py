from collections.abc import Callable, Sequence

from schema_lint.core.configuration import OutputFormat
from schema_lint.formatters.compact_formatter import format_compact
from schema_lint.formatters.json_formatter import format_json
from schema_lint.formatters.text_formatter import format_text
from schema_lint.models import FileResult

FORMATTERS: dict[OutputFormat, Callable[[Sequence[FileResult]], str]] = {
    OutputFormat.TEXT: format_text,
    OutputFormat.JSON: format_json,
    OutputFormat.COMPACT: format_compact,
}

__all__ = ["FORMATTERS", "format_compact", "format_json", "format_text"]
