"""File attachment service layer with business logic."""

import logging
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import asc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.config import settings
from app.domains.file.storage import DeleteResult, FileStorage, StoredFile
from app.exceptions.base import StorageError
from app.exceptions.file import FilePathNotAllowedError, TodoFileNotFoundError
from app.exceptions.todo import TodoNotFoundError
from models.file import TodoFile
from models.todo import Todo

logger = logging.getLogger(__name__)

DEFAULT_MIMETYPE = "application/octet-stream"


class FileService:
    """Service class for attaching and detaching todo files.

    Bytes go through ``FileStorage``; metadata rows through the session.
    """

    def __init__(self, db: AsyncSession, storage: FileStorage, max_file_size: Optional[int] = None):
        self.db = db
        self.storage = storage
        self.max_file_size = settings.max_file_size if max_file_size is None else max_file_size

    async def attach_file(
        self,
        todo_id: UUID,
        data_url: str,
        filename: str,
        mimetype: Optional[str] = None,
    ) -> Tuple[TodoFile, StoredFile]:
        """Store the bytes of ``data_url`` and record them against a todo."""

        todo = await self.db.get(Todo, todo_id)
        if not todo:
            raise TodoNotFoundError("Todo not found")

        stored = self.storage.save_data_url(data_url, filename, max_size=self.max_file_size)

        todo_file = TodoFile(
            todo_id=todo_id,
            filename=filename,
            path=stored.path,
            mimetype=mimetype or stored.mimetype or DEFAULT_MIMETYPE,
            size=stored.size,
        )

        try:
            self.db.add(todo_file)
            await self.db.commit()
            await self.db.refresh(todo_file)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.exception("Failed to record file %r for todo %s", filename, todo_id)
            self.storage.delete(stored.path)
            raise StorageError("Failed to upload file") from e

        logger.info("Attached file %s (%d bytes) to todo %s", todo_file.id, todo_file.size, todo_id)
        return todo_file, stored

    async def get_file_by_id(self, file_id: UUID) -> Optional[TodoFile]:
        """Get a file attachment by ID."""
        return await self.db.get(TodoFile, file_id)

    async def list_files(self, todo_id: UUID) -> List[TodoFile]:
        """Get the files attached to a todo, oldest first."""
        query = (
            select(TodoFile)
            .where(TodoFile.todo_id == todo_id)
            .order_by(asc(TodoFile.created_at))
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def delete_file(self, file_id: UUID) -> bool:
        """Remove a file's bytes, then its metadata row.

        A stored path outside the upload directory aborts the whole deletion.
        A blob that is already gone or cannot be unlinked does not stop the
        row from being deleted.
        """

        todo_file = await self.get_file_by_id(file_id)
        if not todo_file:
            raise TodoFileNotFoundError("File not found")

        outcome = self.storage.delete(todo_file.path)
        if outcome is DeleteResult.REFUSED:
            raise FilePathNotAllowedError()
        if outcome is not DeleteResult.REMOVED:
            logger.warning("Deleting file record %s without its bytes (%s)", file_id, outcome.value)

        try:
            await self.db.delete(todo_file)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.exception("Failed to delete file record %s", file_id)
            raise StorageError("Failed to delete file") from e

        logger.info("Deleted file %s", file_id)
        return True
