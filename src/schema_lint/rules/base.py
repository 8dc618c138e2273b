from graphql.language import Node, Visitor

from schema_lint.core.configuration import Configuration
from schema_lint.core.location import resolve_position
from schema_lint.core.ports.sink import ViolationSink
from schema_lint.core.violation import Violation


class DescriptionRule(Visitor):
    """Base for rules: a visitor bound to a configuration and a violation sink."""

    name = ""
    summary = ""

    def __init__(self, configuration: Configuration, context: ViolationSink) -> None:
        super().__init__()
        self.configuration = configuration
        self.context = context

    def report(self, message: str, node: Node, offset: int | None = None) -> None:
        position = resolve_position(node, offset)
        self.context.report_error(Violation(self.name, message, [node], position))
