"""
Todo business logic: maps repository results to HTTP semantics.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from . import repository, schemas

logger = logging.getLogger(__name__)


def _not_found(entity: str, entity_id: int | None) -> HTTPException:
    logger.info("lookup_not_found entity=%s id=%s", entity, entity_id)
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{entity} not found.",
    )


async def list_categories() -> list[dict]:
    return await repository.list_categories()


async def get_category(category_id: int) -> dict:
    row = await repository.get_category(category_id)
    if row is None:
        raise _not_found("Category", category_id)
    return row


async def list_todo_lists() -> list[dict]:
    return await repository.list_todo_lists()


async def get_todo_list(todo_list_id: int) -> dict:
    row = await repository.get_todo_list(todo_list_id)
    if row is None:
        raise _not_found("Todo list", todo_list_id)
    return row


async def create_todo_list(payload: schemas.CreateTodoListRequest) -> dict:
    row = await repository.create_todo_list(
        title=payload.title,
        description=payload.description,
        category_id=payload.category_id,
    )
    logger.info("todo_list_created id=%s category_id=%s", row["id"], row["category_id"])
    return row


async def update_todo_list(payload: schemas.UpdateTodoListRequest) -> dict[str, str]:
    row = await repository.update_todo_list(
        payload.id,
        title=payload.title,
        description=payload.description,
        category_id=payload.category_id,
        status=payload.status,
    )
    if row is None:
        raise _not_found("Todo list", payload.id)

    logger.info("todo_list_updated id=%s status=%s", row["id"], row["status"])
    return {"message": f"Todo list {row['id']} updated."}
