"""
Tag and TodoTag models.

Tags are matched by exact, case-sensitive name. The join table carries no
state of its own: a row exists or it does not.
"""

from sqlalchemy import Column, ForeignKey, String
from sqlalchemy.orm import relationship

from .base import UUID, Base, BaseModel

TAG_NAME_MAX_LENGTH = 100


class Tag(BaseModel):
    """A shared label, many-to-many with todos."""

    __tablename__ = "tags"

    name = Column(String(TAG_NAME_MAX_LENGTH), nullable=False, unique=True)

    todo_links = relationship("TodoTag", back_populates="tag")

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, name={self.name!r})>"


class TodoTag(Base):
    """Association between one todo and one tag."""

    __tablename__ = "todo_tags"

    todo_id = Column(UUID(), ForeignKey("todos.id", ondelete="CASCADE"), primary_key=True)
    tag_id = Column(UUID(), ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True)

    todo = relationship("Todo", back_populates="tag_links")
    tag = relationship("Tag", back_populates="todo_links")
