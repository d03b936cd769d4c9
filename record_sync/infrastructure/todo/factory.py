"""
Infrastructure: Todo Sync Factory

Dependency injection factory for assembling the todo sync components.
"""

import os
from dataclasses import dataclass
from typing import Optional

import requests

from record_sync.application.todo import (
    FindAllTodoUseCase,
    FindByIdTodoUseCase,
    CreateTodoUseCase,
    CreateAllTodoUseCase,
)
from record_sync.config import get_config
from record_sync.infrastructure.adapters import LoggerAdapter
from record_sync.infrastructure.todo.repositories import HttpTodoRepository
from record_sync.logging_utils import StructuredLogger
from record_sync.models import ComponentType


@dataclass
class TodoSyncUseCases:
    """The todo use cases, sharing one repository."""

    find_all: FindAllTodoUseCase
    find_by_id: FindByIdTodoUseCase
    create: CreateTodoUseCase
    create_all: CreateAllTodoUseCase


class TodoSyncFactory:
    """Factory for creating todo sync components."""

    @staticmethod
    def create_use_cases(
        base_url: str,
        timeout: float = 30,
        session: Optional[requests.Session] = None,
    ) -> TodoSyncUseCases:
        """
        Create fully wired todo use cases.

        Args:
            base_url: Todo API root
            timeout: Per-request timeout in seconds
            session: Optional shared HTTP session

        Returns:
            TodoSyncUseCases bound to one HttpTodoRepository
        """
        repository = HttpTodoRepository(
            base_url=base_url,
            session=session or requests.Session(),
            timeout=timeout,
        )
        logger = LoggerAdapter(StructuredLogger(ComponentType.TODO_SYNC))

        return TodoSyncUseCases(
            find_all=FindAllTodoUseCase(repository, logger),
            find_by_id=FindByIdTodoUseCase(repository, logger),
            create=CreateTodoUseCase(repository, logger),
            create_all=CreateAllTodoUseCase(repository, logger),
        )

    @staticmethod
    def create_from_env() -> TodoSyncUseCases:
        """
        Create use cases from config defaults and environment overrides.

        Environment:
            TODO_API_BASE_URL, TODO_API_TIMEOUT
        """
        config = get_config()["todo_sync"]
        base_url = os.getenv("TODO_API_BASE_URL", config["base_url"])
        timeout = float(os.getenv("TODO_API_TIMEOUT", config["timeout_seconds"]))

        return TodoSyncFactory.create_use_cases(base_url=base_url, timeout=timeout)
