from collections.abc import Sequence

from schema_lint.core.configuration import ConfigurationError
from schema_lint.rules.base import DescriptionRule
from schema_lint.rules.fields_have_descriptions import FieldsHaveDescriptions
from schema_lint.rules.types_have_descriptions import TypesHaveDescriptions

ALL_RULES: dict[str, type[DescriptionRule]] = {
    rule.name: rule
    for rule in (
        FieldsHaveDescriptions,
        TypesHaveDescriptions,
    )
}


def resolve_rules(names: Sequence[str] | None = None) -> list[type[DescriptionRule]]:
    """Return rule classes for ``names`` in the given order, or every rule for ``None``."""
    if names is None:
        return list(ALL_RULES.values())
    unknown = [name for name in names if name not in ALL_RULES]
    if unknown:
        raise ConfigurationError(f"Unknown rule(s): {', '.join(unknown)}. Available: {sorted(ALL_RULES)}")
    return [ALL_RULES[name] for name in names]


__all__ = [
    "ALL_RULES",
    "DescriptionRule",
    "FieldsHaveDescriptions",
    "TypesHaveDescriptions",
    "resolve_rules",
]
