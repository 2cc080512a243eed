"""
Categories and todo lists API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from . import schemas, service

router = APIRouter()


@router.get("/categories")
async def list_categories() -> list[dict]:
    return await service.list_categories()


@router.get("/category/{category_id}")
async def get_category(category_id: int) -> dict:
    return await service.get_category(category_id)


@router.get("/todo_lists")
async def list_todo_lists() -> list[dict]:
    return await service.list_todo_lists()


@router.get("/todo_list/{todo_list_id}")
async def get_todo_list(todo_list_id: int) -> dict:
    return await service.get_todo_list(todo_list_id)


@router.post("/todo_list")
async def create_todo_list(request: schemas.CreateTodoListRequest) -> dict:
    return await service.create_todo_list(request)


@router.patch("/todo_list")
async def update_todo_list(request: schemas.UpdateTodoListRequest) -> dict:
    """
    Full overwrite of title, description, category_id and status.
    """
    return await service.update_todo_list(request)
