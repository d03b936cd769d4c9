"""
Use Case: Create Todo
"""

import uuid

from record_sync.application.interfaces import ILogger
from record_sync.domain.todo.entities import Todo
from record_sync.domain.todo.repositories import ITodoRepository


class CreateTodoUseCase:
    """Persist a single todo."""

    def __init__(self, todo_repository: ITodoRepository, logger: ILogger):
        self.todo_repository = todo_repository
        self.logger = logger

    def execute(self, todo: Todo) -> None:
        self.todo_repository.create(todo)
        self.logger.log_event(
            trace_id=str(uuid.uuid4()),
            event_type="RECORD_CREATED",
            data=todo.to_dict(),
            metrics={"id": todo.id},
        )
