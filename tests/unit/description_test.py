"""Unit tests for description extraction and layout predicates."""

import pytest
from graphql.language import DocumentNode, FieldDefinitionNode, ObjectTypeDefinitionNode, parse

from schema_lint.core.description import (
    blank_line_before_node,
    blank_line_offsets,
    description_has_blank_line,
    description_has_valid_firstline,
    description_is_one_line,
    description_token,
    full_description,
    get_description,
    leading_quotes_are_single_quote,
    leading_quotes_are_triple_quote,
    leading_quotes_on_their_own_line,
    trailing_quotes_on_their_own_line,
)


def _first_type(sdl: str) -> ObjectTypeDefinitionNode:
    document: DocumentNode = parse(sdl)
    node = document.definitions[0]
    assert isinstance(node, ObjectTypeDefinitionNode)
    return node


def _fields(sdl: str) -> list[FieldDefinitionNode]:
    return list(_first_type(sdl).fields)


class TestFullDescription:
    def test_returns_block_string_with_its_quotes(self) -> None:
        node = _first_type('"""\nSummary.\n"""\ntype A { a: String }')
        assert full_description(node) == '"""\nSummary.\n"""'

    def test_returns_single_quoted_string_with_its_quotes(self) -> None:
        node = _first_type('"Summary." type A { a: String }')
        assert full_description(node) == '"Summary."'

    def test_returns_empty_string_without_description(self) -> None:
        node = _first_type("type A { a: String }")
        assert full_description(node) == ""
        assert description_token(node) is None

    def test_ignores_strings_after_the_description(self) -> None:
        (field,) = _fields('type A { """Doc.""" a(arg: String = "default"): String }')
        assert full_description(field) == '"""Doc."""'

    def test_token_offsets_point_into_the_source(self) -> None:
        sdl = 'type A {\n  """Doc."""\n  a: String\n}'
        (field,) = _fields(sdl)
        token = description_token(field)
        assert token is not None
        assert sdl[token.start : token.end] == '"""Doc."""'


class TestBlankLineBeforeNode:
    def test_first_definition_in_file(self) -> None:
        assert blank_line_before_node(_first_type('"""\nA\n"""\ntype A { a: String }'))

    def test_first_field_after_opening_brace(self) -> None:
        (field,) = _fields('type A {\n  """Doc."""\n  a: String\n}')
        assert blank_line_before_node(field)

    def test_previous_line_not_blank(self) -> None:
        fields = _fields('type A {\n  a: String\n  """Doc."""\n  b: String\n}')
        assert not blank_line_before_node(fields[1])

    def test_comment_touching_the_node_is_skipped(self) -> None:
        fields = _fields('type A {\n  a: String\n  # comment\n  """Doc."""\n  b: String\n}')
        assert not blank_line_before_node(fields[1])

    def test_blank_line_before_comment_block(self) -> None:
        fields = _fields('type A {\n  a: String\n\n  # one\n  # two\n  """Doc."""\n  b: String\n}')
        assert blank_line_before_node(fields[1])


class TestGetDescription:
    def test_string_description_is_unescaped(self) -> None:
        node = _first_type('"""\n    Summary.\n\n    More.\n"""\ntype A { a: String }')
        assert get_description(node) == "Summary.\n\nMore."

    def test_comments_are_ignored_by_default(self) -> None:
        node = _first_type("# Summary.\ntype A { a: String }")
        assert get_description(node) is None

    def test_comment_block_is_used_when_enabled(self) -> None:
        node = _first_type("# Summary.\n#\n#   Indented.\ntype A { a: String }")
        assert get_description(node, comment_descriptions=True) == "Summary.\n\n  Indented."

    def test_comment_separated_by_blank_line_is_not_a_description(self) -> None:
        node = _first_type("# Unrelated.\n\ntype A { a: String }")
        assert get_description(node, comment_descriptions=True) is None

    def test_string_description_wins_over_comments(self) -> None:
        node = _first_type('# Comment.\n"""Doc."""\ntype A { a: String }')
        assert get_description(node, comment_descriptions=True) == "Doc."


@pytest.mark.parametrize(
    ("quoted", "triple", "single", "leading_own_line", "trailing_own_line"),
    [
        ('"""Doc."""', True, False, False, False),
        ('"Doc."', False, True, False, False),
        ('"""\nDoc.\n"""', True, False, True, True),
        ('"""Doc.\n  """', True, False, False, True),
        ('"""\nDoc."""', True, False, True, False),
        ("", False, False, False, False),
    ],
    ids=["one-line", "single-quote", "own-lines", "trailing-only", "leading-only", "comment"],
)
def test_quote_predicates(
    quoted: str, triple: bool, single: bool, leading_own_line: bool, trailing_own_line: bool
) -> None:
    assert leading_quotes_are_triple_quote(quoted) is triple
    assert leading_quotes_are_single_quote(quoted) is single
    assert leading_quotes_on_their_own_line(quoted) is leading_own_line
    assert trailing_quotes_on_their_own_line(quoted) is trailing_own_line


def test_one_line_descriptions() -> None:
    assert description_is_one_line("Doc.")
    assert not description_is_one_line("Doc.\nMore.")


def test_blank_line_detection_ignores_whitespace_on_the_blank_line() -> None:
    assert description_has_blank_line("Doc.\n   \nMore.")
    assert description_has_blank_line("Doc.\n\nMore.")
    assert not description_has_blank_line("Doc.\nMore.")


@pytest.mark.parametrize(
    ("description", "valid"),
    [
        ("Summary.", True),
        ("Summary.\n\nDetails.", True),
        ("Summary\ncontinued.", False),
        ("Summary\ncontinued.\n\nDetails.", False),
        ("\nSummary.", False),
    ],
)
def test_valid_firstline(description: str, valid: bool) -> None:
    assert description_has_valid_firstline(description) is valid


def test_blank_line_offsets_point_at_the_start_of_each_blank_line() -> None:
    quoted = '"""Doc.\n\n  More.\n  \n  Even more.\n"""'
    offsets = blank_line_offsets(quoted)
    assert offsets == [8, 17]
    assert quoted[offsets[0] - 1] == "\n"
    assert quoted[offsets[1] - 1] == "\n"
    assert blank_line_offsets(quoted) == offsets


def test_adjacent_blank_lines_are_not_merged_across_text() -> None:
    quoted = '"""a\n\nb\n\nc"""'
    assert blank_line_offsets(quoted) == [5, 8]


def test_consecutive_blank_lines_each_get_an_offset() -> None:
    assert blank_line_offsets('"""a\n\n\n  b\n  """') == [5, 6]


def test_comment_described_nodes_have_no_delimited_description() -> None:
    node = _first_type('# An object.\ntype A {\n  """Field doc."""\n  f(a: String = "x"): String\n}')

    assert get_description(node, comment_descriptions=True) == "An object."
    assert description_token(node) is None
    assert full_description(node) == ""
