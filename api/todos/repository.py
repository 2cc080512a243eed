"""
Categories and todo lists persistence (raw SQL).
"""

from __future__ import annotations

from core import db

_TODO_LIST_COLUMNS = "id, title, description, category_id, status, created_at, updated_at"


async def list_categories() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, name
        FROM categories
        ORDER BY id
        """
    )


async def get_category(category_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, name
        FROM categories
        WHERE id = $1
        """,
        category_id,
    )


async def list_todo_lists() -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_TODO_LIST_COLUMNS}
        FROM todo_lists
        ORDER BY id
        """
    )


async def get_todo_list(todo_list_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_TODO_LIST_COLUMNS}
        FROM todo_lists
        WHERE id = $1
        """,
        todo_list_id,
    )


async def create_todo_list(
    *,
    title: str | None,
    description: str | None,
    category_id: int | None,
) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO todo_lists (title, description, category_id)
        VALUES ($1, $2, $3)
        RETURNING {_TODO_LIST_COLUMNS}
        """,
        title,
        description,
        category_id,
    )
    if row is None:
        raise RuntimeError("Failed to create todo list.")
    return row


async def update_todo_list(
    todo_list_id: int | None,
    *,
    title: str | None,
    description: str | None,
    category_id: int | None,
    status: bool | None,
) -> dict | None:
    """
    Overwrite every editable column of one todo list.

    Returns None when no row has `todo_list_id`.
    """
    return await db.fetch_one(
        f"""
        UPDATE todo_lists
        SET title = $2,
            description = $3,
            category_id = $4,
            status = $5,
            updated_at = now()
        WHERE id = $1
        RETURNING {_TODO_LIST_COLUMNS}
        """,
        todo_list_id,
        title,
        description,
        category_id,
        status,
    )
