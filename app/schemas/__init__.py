# ruff: noqa: F403, F401
"""Schemas package initialization."""

from .base import *
from .file import *
from .tag import *
from .todo import *
