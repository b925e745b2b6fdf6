"""
File model for todo attachments.
"""

from pathlib import PurePath

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import UUID, BaseModel


class TodoFile(BaseModel):
    """
    Represents a file attached to a todo.

    ``filename`` is the name supplied by the uploader; ``path`` is where the
    bytes live inside the managed upload directory.
    """

    __tablename__ = "todo_files"

    todo_id = Column(UUID(), ForeignKey("todos.id", ondelete="CASCADE"), nullable=False, index=True)
    filename = Column(String(255), nullable=False)
    path = Column(String(1024), nullable=False)
    mimetype = Column(String(255), nullable=False, default="application/octet-stream")
    size = Column(Integer, nullable=False)

    # Relationships
    todo = relationship("Todo", back_populates="files")

    @property
    def stored_name(self) -> str:
        return PurePath(self.path).name
