import json
from collections.abc import Sequence
from typing import Any

from schema_lint.models import FileResult


def format_json(results: Sequence[FileResult]) -> str:
    errors: list[dict[str, Any]] = []
    for result in results:
        for message in result.messages:
            location: dict[str, Any] = {"file": result.path}
            if message.location:
                location.update(line=message.location.line, column=message.location.column)
            errors.append({"message": message.message, "location": location, "rule": message.rule})
    return json.dumps({"errors": errors}, indent=2)
