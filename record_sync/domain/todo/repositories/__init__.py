"""
Repository Interfaces for Todo Sync
"""

from .todo_repository import ITodoRepository

__all__ = [
    "ITodoRepository",
]
