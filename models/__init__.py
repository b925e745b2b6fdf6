"""
Models package initialization.
"""

from .base import Base, BaseModel
from .file import TodoFile
from .tag import Tag, TodoTag
from .todo import Todo

__all__ = [
    "Base",
    "BaseModel",
    "Todo",
    "Tag",
    "TodoTag",
    "TodoFile",
]
