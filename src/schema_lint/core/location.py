from graphql.language import Node, Source, SourceLocation

from schema_lint.core.description import description_token


def resolve_position(node: Node, offset: int | None) -> int | None:
    """Map an offset within a node's quoted description to an absolute source position.

    Non-negative offsets count from the opening delimiter, negative offsets
    count back from the end of the closing delimiter (``-1`` is the last
    character). Returns ``None`` when the node's own location should be used.
    """
    if offset is None:
        return None
    token = description_token(node)
    if token is None:
        return None
    if offset >= 0:
        return token.start + offset
    return token.end + offset


def source_location(source: Source, position: int) -> SourceLocation:
    """Return the 1-based line and column of ``position`` in ``source``.

    A position right after a newline is at column 1 of the following line.
    """
    preceding = source.body[:position]
    line = preceding.count("\n") + 1
    column = position - (preceding.rfind("\n") + 1) + 1
    return SourceLocation(line, column)
