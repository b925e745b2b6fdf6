"""Todo service layer with business logic."""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from app.domains.file.storage import DeleteResult, FileStorage
from app.domains.tag.service import TagService
from app.exceptions.base import StorageError
from app.exceptions.todo import TodoNotFoundError, TodoValidationError
from app.schemas.todo import TodoCreate, TodoFilter, TodoUpdate
from models.base import utcnow
from models.tag import Tag, TodoTag
from models.todo import TITLE_MAX_LENGTH, Todo

logger = logging.getLogger(__name__)


class TodoService:
    """Service class for todo business logic."""

    def __init__(self, db: AsyncSession, storage: Optional[FileStorage] = None):
        self.db = db
        self.storage = storage
        self.tags = TagService(db)

    async def create_todo(self, todo_data: TodoCreate) -> Todo:
        """Create a new todo with its tags."""

        title = self._clean_title(todo_data.title)

        try:
            tags = await self.tags.get_or_create_tags(todo_data.tags)
            todo = Todo(
                title=title,
                description=self._clean_description(todo_data.description),
                completed=False,
                tag_links=[TodoTag(tag_id=tag.id) for tag in tags],
            )
            self.db.add(todo)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.exception("Failed to create todo %r", title)
            raise StorageError("Failed to create todo") from e

        logger.info("Created todo %s with %d tag(s)", todo.id, len(tags))
        return await self._get_todo_or_raise(todo.id)

    async def get_todo_by_id(self, todo_id: UUID) -> Optional[Todo]:
        """Get a todo by ID with its tags and files."""
        return await self._get_todo(todo_id)

    async def get_todos_list(self, filters: Optional[TodoFilter] = None) -> List[Todo]:
        """Get all todos, newest first, optionally only those carrying a tag."""

        query = self._todo_query()

        if filters and filters.tag:
            query = query.where(Todo.tags.any(Tag.name == filters.tag))

        query = query.order_by(desc(Todo.created_at))

        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def update_todo(self, todo_id: UUID, todo_data: TodoUpdate) -> Todo:
        """Apply a partial update.

        Only fields present in ``todo_data`` are touched. A present ``tags``
        list replaces every existing association, even when it is empty.
        Column changes and the tag replacement are committed together.
        """

        todo = await self._get_todo(todo_id, with_links=True)
        if not todo:
            raise TodoNotFoundError("Todo not found")

        update_data: Dict[str, Any] = todo_data.model_dump(exclude_unset=True)

        # validate everything before the todo is modified
        changes: Dict[str, Any] = {}
        if "title" in update_data:
            changes["title"] = self._clean_title(update_data["title"])
        if "description" in update_data:
            changes["description"] = self._clean_description(update_data["description"])
        if "completed" in update_data:
            changes["completed"] = update_data["completed"]

        try:
            if "tags" in update_data:
                tags = await self.tags.get_or_create_tags(update_data["tags"])
                self._replace_tags(todo, tags)
            for field, value in changes.items():
                setattr(todo, field, value)
            todo.updated_at = utcnow()
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.exception("Failed to update todo %s", todo_id)
            raise StorageError("Failed to update todo") from e

        logger.info("Updated todo %s (%s)", todo_id, ", ".join(sorted(update_data)) or "no fields")
        return await self._get_todo_or_raise(todo_id)

    async def toggle_todo(self, todo_id: UUID) -> Todo:
        """Flip the completed flag of a todo."""

        todo = await self._get_todo(todo_id)
        if not todo:
            raise TodoNotFoundError("Todo not found")

        todo.completed = not todo.completed
        todo.updated_at = utcnow()

        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.exception("Failed to toggle todo %s", todo_id)
            raise StorageError("Failed to update todo") from e

        return await self._get_todo_or_raise(todo_id)

    async def delete_todo(self, todo_id: UUID) -> bool:
        """Delete a todo together with its files and tag links.

        Stored bytes are removed first, one file at a time. Failing to remove
        them is logged and does not block the deletion of the rows. Tags are
        left in place even when no other todo uses them.
        """

        todo = await self._get_todo(todo_id, with_links=True)
        if not todo:
            raise TodoNotFoundError("Todo not found")

        file_count = len(todo.files)
        for todo_file in todo.files:
            self._remove_stored_file(todo_file.path)

        try:
            await self.db.delete(todo)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.exception("Failed to delete todo %s", todo_id)
            raise StorageError("Failed to delete todo") from e

        logger.info("Deleted todo %s and %d file(s)", todo_id, file_count)
        return True

    # Private helper methods

    def _todo_query(self, with_links: bool = False):
        options = [selectinload(Todo.tags), selectinload(Todo.files)]
        if with_links:
            options.append(selectinload(Todo.tag_links))
        return select(Todo).options(*options).execution_options(populate_existing=True)

    async def _get_todo(self, todo_id: UUID, with_links: bool = False) -> Optional[Todo]:
        result = await self.db.execute(self._todo_query(with_links).where(Todo.id == todo_id))
        return result.scalar_one_or_none()

    async def _get_todo_or_raise(self, todo_id: UUID) -> Todo:
        todo = await self._get_todo(todo_id)
        if not todo:
            raise TodoNotFoundError("Todo not found")
        return todo

    def _replace_tags(self, todo: Todo, tags: List[Tag]) -> None:
        """Make ``todo`` carry exactly ``tags``."""
        current = {link.tag_id: link for link in todo.tag_links}
        # links for tags that stay are reused so the (todo_id, tag_id) key is never inserted twice
        todo.tag_links = [current.get(tag.id) or TodoTag(tag_id=tag.id) for tag in tags]

    def _remove_stored_file(self, path: str) -> None:
        if self.storage is None:
            logger.warning("No file storage configured; leaving %s on disk", path)
            return
        outcome = self.storage.delete(path)
        if outcome is not DeleteResult.REMOVED:
            logger.warning("Stored file %s not removed (%s)", path, outcome.value)

    @staticmethod
    def _clean_title(title: Optional[str]) -> str:
        cleaned = (title or "").strip()
        if not cleaned:
            raise TodoValidationError("Title is required")
        if len(cleaned) > TITLE_MAX_LENGTH:
            raise TodoValidationError(f"Title cannot be longer than {TITLE_MAX_LENGTH} characters")
        return cleaned

    @staticmethod
    def _clean_description(description: Optional[str]) -> Optional[str]:
        if description is None:
            return None
        return description.strip()
