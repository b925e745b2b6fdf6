"""
A module defining the `Todo` ORM model representing a to-do item.

A todo owns its file attachments and its tag links; both collections are
removed together with the todo. Tags themselves are shared between todos and
outlive every todo that references them.
"""

from sqlalchemy import Boolean, Column, String, Text
from sqlalchemy.orm import relationship

from .base import BaseModel

TITLE_MAX_LENGTH = 500


class Todo(BaseModel):
    __tablename__ = "todos"

    title = Column(String(TITLE_MAX_LENGTH), nullable=False)
    description = Column(Text)
    completed = Column(Boolean, default=False, nullable=False)

    # Relationships
    files = relationship(
        "TodoFile",
        back_populates="todo",
        cascade="all, delete-orphan",
        order_by="TodoFile.created_at",
    )
    tag_links = relationship(
        "TodoTag",
        back_populates="todo",
        cascade="all, delete-orphan",
    )
    tags = relationship(
        "Tag",
        secondary="todo_tags",
        viewonly=True,
        order_by="Tag.name",
    )

    def __repr__(self) -> str:
        return f"<Todo(id={self.id}, title={self.title!r})>"
