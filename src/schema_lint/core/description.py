"""Helpers for reading descriptions exactly as they were written in the source.

The parser exposes ``node.description`` but that value is unescaped and
block-dedented, so the delimiters and surrounding newlines are gone. The
layout checks need the raw form, which is recovered from the token stream.
"""

import re

from graphql.language import Node, Token, TokenKind
from graphql.language.block_string import dedent_block_string_lines

_DELIMITED_KINDS = frozenset({TokenKind.STRING, TokenKind.BLOCK_STRING})

# One match per blank line, so adjacent blank lines are reported separately.
_BLANK_LINE = re.compile(r"\n[^\S\n]*(?=\n)")
_TRAILING_QUOTES_ON_OWN_LINE = re.compile(r'\n\s*"""\Z')
_VALID_FIRSTLINE = re.compile(r"[^\n]+(\n\n|\Z)")

TRIPLE_QUOTE = '"""'


def description_token(node: Node) -> Token | None:
    """Return the delimited-string token of the node's own description.

    Strings inside the node's body (field descriptions, default values) never
    count, so a node with no string description, such as one described by
    comments, has no token.
    """
    description = getattr(node, "description", None)
    if description is None or description.loc is None:
        return None
    token = description.loc.start_token
    if token.kind not in _DELIMITED_KINDS:
        return None
    return token


def full_description(node: Node) -> str:
    """Return the node's description including its leading and trailing quotes.

    Returns an empty string when the node has no delimited description, which
    is the case for comment-based descriptions.
    """
    token = description_token(node)
    if token is None or node.loc is None:
        return ""
    return node.loc.source.body[token.start : token.end]


def blank_line_before_node(node: Node) -> bool:
    """True if the node has a blank line before it, or follows a ``{``.

    Comment lines are skipped, so a comment touching the node only passes
    when a blank line precedes the comment block itself.
    """
    if node.loc is None:
        return True
    prev_token = node.loc.start_token.prev
    while prev_token is not None and prev_token.kind == TokenKind.COMMENT:
        prev_token = prev_token.prev
    return (
        prev_token is None
        or prev_token.kind == TokenKind.SOF
        or prev_token.next is None
        or prev_token.line < prev_token.next.line - 1
        or prev_token.kind == TokenKind.BRACE_L
    )


def get_description(node: Node, comment_descriptions: bool = False) -> str | None:
    """Return the unescaped description of a definition node, if any.

    With ``comment_descriptions`` the legacy convention is honored: a block of
    ``#`` comments directly above the node is used when no string description
    is present.
    """
    description = getattr(node, "description", None)
    if description is not None:
        return description.value
    if comment_descriptions:
        comments = _leading_comment_block(node)
        if comments:
            return "\n".join(dedent_block_string_lines(["", *comments]))
    return None


def _leading_comment_block(node: Node) -> list[str]:
    if node.loc is None:
        return []
    comments: list[str] = []
    token = node.loc.start_token.prev
    while (
        token is not None
        and token.kind == TokenKind.COMMENT
        and token.next is not None
        and token.prev is not None
        and token.line + 1 == token.next.line
        and token.line != token.prev.line
    ):
        comments.append(token.value or "")
        token = token.prev
    comments.reverse()
    return comments


# -- Layout predicates over the unescaped description --


def description_is_one_line(description: str) -> bool:
    return "\n" not in description


def description_has_blank_line(description: str) -> bool:
    return _BLANK_LINE.search(description) is not None


def description_has_valid_firstline(description: str) -> bool:
    """A non-empty first line that is either the whole text or followed by a blank line."""
    return _VALID_FIRSTLINE.match(description) is not None


# -- Layout predicates over the quoted description --


def leading_quotes_are_triple_quote(description_with_quotes: str) -> bool:
    return description_with_quotes.startswith(TRIPLE_QUOTE)


def leading_quotes_are_single_quote(description_with_quotes: str) -> bool:
    return description_with_quotes.startswith('"') and not leading_quotes_are_triple_quote(description_with_quotes)


def leading_quotes_on_their_own_line(description_with_quotes: str) -> bool:
    return description_with_quotes.startswith(TRIPLE_QUOTE + "\n")


def trailing_quotes_on_their_own_line(description_with_quotes: str) -> bool:
    return _TRAILING_QUOTES_ON_OWN_LINE.search(description_with_quotes) is not None


def blank_line_offsets(description_with_quotes: str) -> list[int]:
    """Offsets of every blank line inside the quoted description, in source order.

    Each offset points one past the newline that ends the preceding line,
    i.e. at the start of the blank line itself.
    """
    return [match.start() + 1 for match in _BLANK_LINE.finditer(description_with_quotes)]
