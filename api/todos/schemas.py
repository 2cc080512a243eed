"""
Todo API schemas (request models).

Every field is optional: missing values are stored as NULL.
"""

from __future__ import annotations

from pydantic import BaseModel


class CreateTodoListRequest(BaseModel):
    title: str | None = None
    description: str | None = None
    category_id: int | None = None


class UpdateTodoListRequest(CreateTodoListRequest):
    # Full overwrite: omitted fields are written as NULL too.
    id: int | None = None
    status: bool | None = None
