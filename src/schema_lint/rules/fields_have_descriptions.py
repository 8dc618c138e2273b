from collections.abc import Iterator, Sequence
from typing import Any

from graphql.language import FieldDefinitionNode, InterfaceTypeDefinitionNode, Node

from schema_lint.core.description import (
    blank_line_before_node,
    blank_line_offsets,
    description_has_blank_line,
    description_is_one_line,
    full_description,
    get_description,
    leading_quotes_are_single_quote,
    leading_quotes_are_triple_quote,
    leading_quotes_on_their_own_line,
    trailing_quotes_on_their_own_line,
)
from schema_lint.rules.base import DescriptionRule


def _flatten(ancestors: Sequence[Any]) -> Iterator[Node]:
    # Each ancestor is either a node or a tuple of sibling nodes.
    for ancestor in ancestors:
        if isinstance(ancestor, Node):
            yield ancestor
        else:
            yield from ancestor


def find_interface(ancestors: Sequence[Any], name: str) -> InterfaceTypeDefinitionNode | None:
    for ancestor in _flatten(ancestors):
        if isinstance(ancestor, InterfaceTypeDefinitionNode) and ancestor.name.value == name:
            return ancestor
    return None


def interface_fields_for(parent_type: Node, ancestors: Sequence[Any]) -> set[str]:
    """Names of all fields declared on the interfaces implemented by ``parent_type``.

    Interfaces that are not defined in the same document are ignored.
    """
    field_names: set[str] = set()
    for named_type in getattr(parent_type, "interfaces", None) or ():
        interface = find_interface(ancestors, named_type.name.value)
        if interface is None:
            continue
        field_names.update(field.name.value for field in interface.fields or ())
    return field_names


def _is_deprecated(node: FieldDefinitionNode) -> bool:
    return any(directive.name.value == "deprecated" for directive in node.directives or ())


class FieldsHaveDescriptions(DescriptionRule):
    name = "fields-have-descriptions"
    summary = "Fields have a description: one line, or quotes on the text's first and own last line."

    def enter_field_definition(
        self,
        node: FieldDefinitionNode,
        _key: Any,
        _parent: Any,
        _path: Any,
        ancestors: list[Any],
    ) -> None:
        parent_type = ancestors[-1]
        description = get_description(node, self.configuration.get_comment_descriptions())

        if not description:
            # Deprecated fields and fields inherited from an interface are exempt.
            if _is_deprecated(node) or node.name.value in interface_fields_for(parent_type, ancestors):
                return
            self._report_error("is missing", node, parent_type)
            return

        description_with_quotes = full_description(node)

        if not blank_line_before_node(node):
            self._report_error("should have a blank line before it", node, parent_type)

        if not leading_quotes_are_triple_quote(description_with_quotes):
            self._report_error("should use triple-quotes", node, parent_type, 0)
            if leading_quotes_are_single_quote(description_with_quotes):
                self._report_error("should use triple-quotes", node, parent_type, -1)

        if description_has_blank_line(description):
            offsets = blank_line_offsets(description_with_quotes)
            for offset in offsets:
                self._report_error("should not include a blank line", node, parent_type, offset)
            if not offsets:
                self._report_error("should not include a blank line", node, parent_type)

        if leading_quotes_on_their_own_line(description_with_quotes):
            self._report_error("should not put the leading triple-quote on its own line", node, parent_type, 0)

        trailing_on_own_line = trailing_quotes_on_their_own_line(description_with_quotes)
        if description_is_one_line(description):
            if trailing_on_own_line:
                self._report_error(
                    "should not put the trailing triple-quote on its own line", node, parent_type, -3
                )
        elif not trailing_on_own_line:
            self._report_error("should put the trailing triple-quote on its own line", node, parent_type, -3)

    def _report_error(self, error: str, node: FieldDefinitionNode, parent_type: Node, offset: int | None = None) -> None:
        parent_name = parent_type.name.value  # type: ignore[attr-defined]
        self.report(f"The field `{parent_name}.{node.name.value}`s description {error}.", node, offset)
