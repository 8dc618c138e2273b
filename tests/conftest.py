"""Shared fixtures and helpers for tests."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from schema_lint.core.configuration import COMMENT_DESCRIPTIONS_ENV, Configuration
from schema_lint.core.validator import validate_schema_definition
from schema_lint.rules import DescriptionRule

_REPO_ROOT = Path(__file__).parent.parent

RuleRunner = Callable[..., list[dict[str, Any]]]


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(COMMENT_DESCRIPTIONS_ENV, raising=False)


@pytest.fixture
def run_rule() -> RuleRunner:
    """Return a helper that lints an SDL string with one rule.

    The helper returns each violation as ``{"message": ..., "locations": [{"line": ..., "column": ...}]}``
    in the order the rule reported them.
    """

    def _run(rule: type[DescriptionRule], sdl: str, **configuration: Any) -> list[dict[str, Any]]:
        errors = validate_schema_definition(sdl, [rule], Configuration(**configuration))
        assert all(error.rule_name == rule.name for error in errors)
        return [
            {
                "message": error.message,
                "locations": [{"line": loc.line, "column": loc.column} for loc in error.locations or []],
            }
            for error in errors
        ]

    return _run
