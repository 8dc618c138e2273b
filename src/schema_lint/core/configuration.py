"""Linter configuration.

Values are merged from, in increasing precedence: defaults, a JSON rc file,
the environment and explicit overrides (usually CLI options).
"""

import json
import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

logger = logging.getLogger(__name__)

RC_FILE_NAME = ".schema-lintrc"
COMMENT_DESCRIPTIONS_ENV = "SCHEMA_LINT_COMMENT_DESCRIPTIONS"

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigurationError(ValueError):
    pass


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    COMPACT = "compact"


class Configuration(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    comment_descriptions: bool = False
    rules: list[str] | None = None
    schema_paths: list[str] = []
    format: OutputFormat = OutputFormat.TEXT

    def get_comment_descriptions(self) -> bool:
        return self.comment_descriptions


def _read_rc_file(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid JSON in configuration file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
    return data


def load_configuration(
    config_path: Path | None = None,
    overrides: dict[str, Any] | None = None,
    cwd: Path | None = None,
) -> Configuration:
    data: dict[str, Any] = {}

    path = config_path
    if path is None:
        candidate = (cwd or Path.cwd()) / RC_FILE_NAME
        if candidate.is_file():
            path = candidate
    elif not path.is_file():
        raise ConfigurationError(f"Configuration file not found: {path}")

    if path is not None:
        logger.debug("Loading configuration from %s", path)
        data.update(_read_rc_file(path))

    env_value = os.getenv(COMMENT_DESCRIPTIONS_ENV)
    if env_value is not None:
        data["comment_descriptions"] = env_value.strip().lower() in _TRUTHY

    data.update({key: value for key, value in (overrides or {}).items() if value is not None})

    try:
        configuration = Configuration.model_validate(data)
    except PydanticValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc

    if configuration.rules is not None:
        from schema_lint.rules import resolve_rules

        resolve_rules(configuration.rules)

    return configuration
