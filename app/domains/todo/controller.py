"""Todo API controller with FastAPI endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query

from app.core.dependencies import get_todo_id, get_todo_service
from app.domains.todo.service import TodoService
from app.exceptions.todo import TodoNotFoundError
from app.schemas.base import SuccessResponse
from app.schemas.todo import TodoCreate, TodoFilter, TodoResponse, TodoUpdate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/todos",
    tags=["todos"],
)


@router.get("", response_model=list[TodoResponse])
async def get_todos(
    tag: str | None = Query(None, description="Only todos carrying this exact tag name"),
    service: TodoService = Depends(get_todo_service),
):
    """Get all todos, newest first, with optional tag filter."""
    return await service.get_todos_list(TodoFilter(tag=tag))


@router.post("", response_model=TodoResponse, status_code=201)
async def create_todo(
    todo_data: TodoCreate,
    service: TodoService = Depends(get_todo_service),
):
    """Create a new todo."""
    return await service.create_todo(todo_data)


@router.get("/{todo_id}", response_model=TodoResponse)
async def get_todo(
    todo_id: UUID = Depends(get_todo_id),
    service: TodoService = Depends(get_todo_service),
):
    """Get a specific todo by ID."""
    todo = await service.get_todo_by_id(todo_id)
    if not todo:
        raise TodoNotFoundError("Todo not found")
    return todo


@router.put("/{todo_id}", response_model=TodoResponse)
async def update_todo(
    todo_id: UUID = Depends(get_todo_id),
    todo_data: TodoUpdate = Body(...),
    service: TodoService = Depends(get_todo_service),
):
    """Update a specific todo. Omitted fields are left unchanged."""
    return await service.update_todo(todo_id, todo_data)


@router.patch("/{todo_id}/toggle", response_model=TodoResponse)
async def toggle_todo(
    todo_id: UUID = Depends(get_todo_id),
    service: TodoService = Depends(get_todo_service),
):
    """Toggle the completed flag of a todo."""
    return await service.toggle_todo(todo_id)


@router.delete("/{todo_id}", response_model=SuccessResponse)
async def delete_todo(
    todo_id: UUID = Depends(get_todo_id),
    service: TodoService = Depends(get_todo_service),
):
    """Delete a specific todo, its files and its tag links."""
    success = await service.delete_todo(todo_id)
    return SuccessResponse(success=success)
