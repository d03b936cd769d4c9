"""
Use Cases for Todo Sync
"""

from .find_all_todo_use_case import FindAllTodoUseCase
from .find_by_id_todo_use_case import FindByIdTodoUseCase
from .create_todo_use_case import CreateTodoUseCase
from .create_all_todo_use_case import CreateAllTodoUseCase

__all__ = [
    "FindAllTodoUseCase",
    "FindByIdTodoUseCase",
    "CreateTodoUseCase",
    "CreateAllTodoUseCase",
]
