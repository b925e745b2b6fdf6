"""File attachment API controller."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from app.core.dependencies import get_file_id, get_file_service, parse_id
from app.domains.file.service import FileService
from app.exceptions.todo import TodoNotFoundError
from app.schemas.base import SuccessResponse
from app.schemas.file import FileUpload, FileUploadResponse, TodoFileResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/files",
    tags=["files"],
)


@router.post("", response_model=FileUploadResponse, status_code=201)
async def upload_file(
    upload: FileUpload,
    service: FileService = Depends(get_file_service),
):
    """Attach a base64 data-URL encoded file to a todo."""
    todo_id = parse_id(upload.todo_id)
    if todo_id is None:
        raise TodoNotFoundError("Todo not found")

    todo_file, stored = await service.attach_file(
        todo_id=todo_id,
        data_url=upload.file,
        filename=upload.filename,
        mimetype=upload.mimetype,
    )

    return {
        "id": todo_file.id,
        "filename": todo_file.filename,
        "url": stored.url,
        "size": todo_file.size,
        "mimetype": todo_file.mimetype,
        "created_at": todo_file.created_at,
    }


@router.get("", response_model=list[TodoFileResponse])
async def list_files(
    todo_id: str = Query(..., alias="todoId", description="Owning todo ID"),
    service: FileService = Depends(get_file_service),
):
    """Get the files attached to a todo; empty for unknown todos."""
    parsed = parse_id(todo_id)
    if parsed is None:
        return []
    return await service.list_files(parsed)


@router.delete("/{file_id}", response_model=SuccessResponse)
async def delete_file(
    file_id: UUID = Depends(get_file_id),
    service: FileService = Depends(get_file_service),
):
    """Delete a file's bytes and its record."""
    success = await service.delete_file(file_id)
    return SuccessResponse(success=success)
