from typing import Any

from graphql.language import SKIP, TypeDefinitionNode, VisitorAction

from schema_lint.core.description import (
    blank_line_before_node,
    description_has_valid_firstline,
    full_description,
    get_description,
    leading_quotes_are_single_quote,
    leading_quotes_are_triple_quote,
    leading_quotes_on_their_own_line,
    trailing_quotes_on_their_own_line,
)
from schema_lint.rules.base import DescriptionRule


class TypesHaveDescriptions(DescriptionRule):
    """Every non-scalar type definition has a well-formatted description.

    Types want a one-line summary, optionally followed by a blank line and
    more text, with both triple-quotes on their own lines. Type extensions
    ("extend type Foo") are never visited: they are not required, or even
    allowed, to carry a description.
    """

    name = "types-have-descriptions"
    summary = "Types have a description: a one-line summary, with triple-quotes on their own lines."

    def enter_object_type_definition(self, node: TypeDefinitionNode, *_args: Any) -> None:
        self._validate(node, "object")

    def enter_interface_type_definition(self, node: TypeDefinitionNode, *_args: Any) -> None:
        self._validate(node, "interface")

    def enter_union_type_definition(self, node: TypeDefinitionNode, *_args: Any) -> None:
        self._validate(node, "union")

    def enter_enum_type_definition(self, node: TypeDefinitionNode, *_args: Any) -> None:
        self._validate(node, "enum")

    def enter_input_object_type_definition(self, node: TypeDefinitionNode, *_args: Any) -> None:
        self._validate(node, "input object")

    # Scalars are not things we define, we only make use of them.
    def enter_scalar_type_definition(self, node: TypeDefinitionNode, *_args: Any) -> None:
        return None

    def enter_object_type_extension(self, *_args: Any) -> VisitorAction:
        return SKIP

    def enter_interface_type_extension(self, *_args: Any) -> VisitorAction:
        return SKIP

    def enter_union_type_extension(self, *_args: Any) -> VisitorAction:
        return SKIP

    def enter_enum_type_extension(self, *_args: Any) -> VisitorAction:
        return SKIP

    def enter_input_object_type_extension(self, *_args: Any) -> VisitorAction:
        return SKIP

    def enter_scalar_type_extension(self, *_args: Any) -> VisitorAction:
        return SKIP

    def _validate(self, node: TypeDefinitionNode, type_kind: str) -> None:
        description = get_description(node, self.configuration.get_comment_descriptions())

        if not description:
            self._report_error("is missing", node, type_kind)
            return

        description_with_quotes = full_description(node)

        if not blank_line_before_node(node):
            self._report_error("should have a blank line before it", node, type_kind)

        if not description_has_valid_firstline(description):
            self._report_error(
                "should have a one-line firstline, then optionally a blank line followed by other text",
                node,
                type_kind,
            )

        if not leading_quotes_are_triple_quote(description_with_quotes):
            self._report_error("should use triple-quotes", node, type_kind, 0)
            if leading_quotes_are_single_quote(description_with_quotes):
                self._report_error("should use triple-quotes", node, type_kind, -1)

        if not leading_quotes_on_their_own_line(description_with_quotes):
            self._report_error("should put the leading triple-quote on its own line", node, type_kind, 0)

        if not trailing_quotes_on_their_own_line(description_with_quotes):
            self._report_error("should put the trailing triple-quote on its own line", node, type_kind, -3)

    def _report_error(self, error: str, node: TypeDefinitionNode, type_kind: str, offset: int | None = None) -> None:
        self.report(f"The {type_kind} type `{node.name.value}`s description {error}.", node, offset)
