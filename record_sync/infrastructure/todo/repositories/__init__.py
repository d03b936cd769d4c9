"""
Concrete Todo Repository Implementations
"""

from .http_todo_repository import HttpTodoRepository

__all__ = [
    "HttpTodoRepository",
]
