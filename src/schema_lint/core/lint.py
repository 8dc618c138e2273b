import logging
from collections.abc import Iterable
from pathlib import Path

from graphql.language import Source

from schema_lint.core.configuration import Configuration
from schema_lint.core.files import find_schema_files
from schema_lint.core.validator import validate_schema_definition
from schema_lint.core.violation import Violation
from schema_lint.models import FileResult, LintMessage, Position
from schema_lint.rules import resolve_rules

logger = logging.getLogger(__name__)


def _to_message(violation: Violation) -> LintMessage:
    location = None
    if violation.locations:
        first = violation.locations[0]
        location = Position(line=first.line, column=first.column)
    return LintMessage(rule=violation.rule_name, message=violation.message, location=location)


def lint_source(text: str, configuration: Configuration, name: str = "GraphQL request") -> FileResult:
    rules = resolve_rules(configuration.rules)
    violations = validate_schema_definition(Source(text, name), rules, configuration)
    return FileResult(path=name, messages=[_to_message(v) for v in violations])


def lint_paths(paths: Iterable[str | Path], configuration: Configuration) -> list[FileResult]:
    """Lint every schema file found under ``paths``.

    Returns one FileResult per file, in path order.
    """
    results = []
    for path in find_schema_files(paths):
        text = path.read_text(encoding="utf-8")
        results.append(lint_source(text, configuration, str(path)))
    logger.info("Linted %d schema file(s)", len(results))
    return results
