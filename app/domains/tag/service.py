"""Tag service layer.

Tags are found or created by exact name. Names are trimmed but never
case-folded, so ``Work`` and ``work`` are two different tags.
"""

import logging
import uuid
from collections.abc import Iterable
from typing import List, Optional

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.exceptions.base import StorageError
from app.exceptions.tag import TagValidationError
from models.base import utcnow
from models.tag import TAG_NAME_MAX_LENGTH, Tag

logger = logging.getLogger(__name__)

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def normalize_tag_names(names: Optional[Iterable[str]]) -> List[str]:
    """Trim names, drop blank ones and collapse duplicates, keeping first-seen order."""
    if not names:
        return []
    cleaned = (name.strip() for name in names if name is not None)
    return list(dict.fromkeys(name for name in cleaned if name))


class TagService:
    """Service class for tag lookup and reconciliation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_or_create_tags(self, names: Iterable[str]) -> List[Tag]:
        """Return the tags for ``names``, creating the missing ones.

        Does not commit; the caller owns the transaction.
        """
        tag_names = normalize_tag_names(names)
        if not tag_names:
            return []

        if any(len(name) > TAG_NAME_MAX_LENGTH for name in tag_names):
            raise TagValidationError(
                f"Tag names cannot be longer than {TAG_NAME_MAX_LENGTH} characters"
            )

        await self._insert_missing(tag_names)

        result = await self.db.execute(select(Tag).where(Tag.name.in_(tag_names)))
        by_name = {tag.name: tag for tag in result.scalars().all()}
        return [by_name[name] for name in tag_names]

    async def get_tag_by_name(self, name: str) -> Optional[Tag]:
        """Get a tag by its exact (trimmed) name."""
        result = await self.db.execute(select(Tag).where(Tag.name == name.strip()))
        return result.scalar_one_or_none()

    async def list_tags(self) -> List[Tag]:
        """Get all tags ordered by name, including ones no todo references."""
        result = await self.db.execute(select(Tag).order_by(Tag.name))
        return list(result.scalars().all())

    # Private helper methods

    async def _insert_missing(self, tag_names: List[str]) -> None:
        """Insert tags that do not exist yet, ignoring names that already do."""
        dialect = self.db.get_bind().dialect.name
        insert = _UPSERT_DIALECTS.get(dialect)
        if insert is None:
            raise RuntimeError(f"Tag upsert is not supported on {dialect!r}")

        now = utcnow()
        rows = [
            {"id": uuid.uuid4(), "name": name, "created_at": now, "updated_at": now}
            for name in tag_names
        ]
        stmt = insert(Tag.__table__).values(rows).on_conflict_do_nothing(index_elements=["name"])
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.exception("Failed to upsert tags %s", tag_names)
            raise StorageError("Failed to save tags") from e

        if result.rowcount:
            logger.info("Created %d new tag(s)", result.rowcount)
