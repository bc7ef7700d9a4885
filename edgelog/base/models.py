"""Wire models for logging endpoint responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BigQueryEndpoint(BaseModel):
    """A BigQuery logging endpoint attached to one service version.

    Deletion is soft on the server side: a deleted record keeps its row
    and carries a non-null ``deleted_at``.
    """

    model_config = ConfigDict(extra="ignore")

    service_id: str = ""
    name: str = ""
    format: str = ""
    user: str = ""
    project_id: str = ""
    dataset: str = ""
    table: str = ""
    secret_key: str = Field(default="", repr=False)
    response_condition: str = ""
    created_at: str | None = None
    updated_at: str | None = None
    deleted_at: str | None = None

    @field_validator(
        "service_id", "name", "format", "user", "project_id",
        "dataset", "table", "secret_key", "response_condition",
        mode="before",
    )
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        # The API sends null for unset string attributes.
        return "" if value is None else value


class StatusResponse(BaseModel):
    """Acknowledgment body returned by destructive calls, e.g. ``{"status": "ok"}``."""

    model_config = ConfigDict(extra="ignore")

    status: str = ""

    @field_validator("status", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def ok(self) -> bool:
        return self.status == "ok"
