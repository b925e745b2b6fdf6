# app/core/dependencies.py
"""FastAPI dependencies shared by the domain controllers."""

import logging
from uuid import UUID

from fastapi import Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.domains.file.service import FileService
from app.domains.file.storage import FileStorage, get_file_storage
from app.domains.tag.service import TagService
from app.domains.todo.service import TodoService
from app.exceptions.file import TodoFileNotFoundError
from app.exceptions.todo import TodoNotFoundError

logger = logging.getLogger(__name__)

__all__ = [
    "get_db",
    "get_file_storage",
    "get_todo_service",
    "get_file_service",
    "get_tag_service",
    "get_todo_id",
    "get_file_id",
    "parse_id",
]


def parse_id(value: str) -> UUID | None:
    """Parse a client-supplied id; ``None`` if it cannot name any record."""
    try:
        return UUID(value)
    except ValueError:
        return None


def get_todo_id(todo_id: str = Path(..., description="Todo ID")) -> UUID:
    parsed = parse_id(todo_id)
    if parsed is None:
        raise TodoNotFoundError("Todo not found")
    return parsed


def get_file_id(file_id: str = Path(..., description="File ID")) -> UUID:
    parsed = parse_id(file_id)
    if parsed is None:
        raise TodoFileNotFoundError("File not found")
    return parsed


def get_todo_service(
    db: AsyncSession = Depends(get_db),
    storage: FileStorage = Depends(get_file_storage),
) -> TodoService:
    return TodoService(db, storage)


def get_file_service(
    db: AsyncSession = Depends(get_db),
    storage: FileStorage = Depends(get_file_storage),
) -> FileService:
    return FileService(db, storage)


def get_tag_service(db: AsyncSession = Depends(get_db)) -> TagService:
    return TagService(db)
