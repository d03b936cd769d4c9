"""
Todo Sync Application Layer
"""

from .use_cases import (
    FindAllTodoUseCase,
    FindByIdTodoUseCase,
    CreateTodoUseCase,
    CreateAllTodoUseCase,
)

__all__ = [
    "FindAllTodoUseCase",
    "FindByIdTodoUseCase",
    "CreateTodoUseCase",
    "CreateAllTodoUseCase",
]
