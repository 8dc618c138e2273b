import logging
from collections.abc import Sequence

from graphql import GraphQLSyntaxError
from graphql.language import DocumentNode, Source, parse, visit

from schema_lint.core.configuration import Configuration
from schema_lint.core.violation import Violation
from schema_lint.rules import DescriptionRule

logger = logging.getLogger(__name__)

SYNTAX_ERROR_RULE = "graphql-syntax-error"


class ValidationContext:
    """Collects the violations reported while linting one document."""

    def __init__(self, ast: DocumentNode, source: Source) -> None:
        self.ast = ast
        self.source = source
        self.errors: list[Violation] = []

    def report_error(self, error: Violation) -> None:
        self.errors.append(error)


def validate_schema_definition(
    source: Source | str,
    rules: Sequence[type[DescriptionRule]],
    configuration: Configuration,
) -> list[Violation]:
    """Run ``rules`` over a schema document and return violations in discovery order.

    A document that does not parse yields a single syntax-error violation and
    no rule is run.
    """
    if isinstance(source, str):
        source = Source(source)

    try:
        ast = parse(source)
    except GraphQLSyntaxError as error:
        logger.debug("Failed to parse %s: %s", source.name, error.message)
        position = error.positions[0] if error.positions else None
        return [Violation(SYNTAX_ERROR_RULE, error.message, offset=position, source=source)]

    context = ValidationContext(ast, source)
    for rule in rules:
        visit(ast, rule(configuration, context))

    logger.debug("Found %d violation(s) in %s", len(context.errors), source.name)
    return context.errors
