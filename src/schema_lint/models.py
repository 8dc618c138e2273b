from pydantic import BaseModel


class Position(BaseModel):
    line: int
    column: int


class LintMessage(BaseModel):
    rule: str
    message: str
    location: Position | None = None


class FileResult(BaseModel):
    path: str
    messages: list[LintMessage] = []

    @property
    def error_count(self) -> int:
        return len(self.messages)
