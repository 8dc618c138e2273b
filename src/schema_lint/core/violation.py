from collections.abc import Sequence

from graphql import GraphQLError
from graphql.language import Node, Source

from schema_lint.core.location import source_location


class Violation(GraphQLError):
    """A single lint failure reported by a rule.

    ``offset`` is optional. When set it overrides the location of ``nodes[0]``
    and must be an absolute position within the body of the schema source.
    """

    rule_name: str
    offset: int | None

    def __init__(
        self,
        rule_name: str,
        message: str,
        nodes: Sequence[Node] = (),
        offset: int | None = None,
        source: Source | None = None,
    ) -> None:
        if offset is not None:
            if source is None and nodes and nodes[0].loc:
                source = nodes[0].loc.source
            super().__init__(message, list(nodes) or None, source=source, positions=[offset])
        else:
            super().__init__(message, list(nodes) or None, source=source)
        # Source.get_location puts column-1 positions on the previous line.
        if self.source is not None and self.positions:
            self.locations = [source_location(self.source, position) for position in self.positions]
        self.rule_name = rule_name
        self.offset = offset
