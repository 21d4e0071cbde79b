"""Result types returned by the validator web service (``out=json``)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ValidationMessage(BaseModel):
    """One row of the validator's ``messages`` list."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: str
    message: str = ""
    subtype: str | None = None
    extract: str | None = None
    first_line: int | None = Field(default=None, alias="firstLine")
    first_column: int | None = Field(default=None, alias="firstColumn")
    last_line: int | None = Field(default=None, alias="lastLine")
    last_column: int | None = Field(default=None, alias="lastColumn")

    @property
    def is_error(self) -> bool:
        return self.type == "error"


class ValidationResult(BaseModel):
    """Decoded validator response, messages kept in service order."""

    model_config = ConfigDict(extra="allow")

    url: str | None = None
    messages: list[ValidationMessage]

    @property
    def errors(self) -> list[ValidationMessage]:
        return [row for row in self.messages if row.is_error]
