from typing import Protocol

from schema_lint.core.violation import Violation


class ViolationSink(Protocol):
    def report_error(self, error: Violation) -> None: ...
