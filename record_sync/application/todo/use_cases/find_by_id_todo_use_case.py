"""
Use Case: Find Todo By Id
"""

import uuid

from record_sync.application.interfaces import ILogger
from record_sync.domain.todo.entities import Todo
from record_sync.domain.todo.repositories import ITodoRepository


class FindByIdTodoUseCase:
    """Fetch a single todo by identifier."""

    def __init__(self, todo_repository: ITodoRepository, logger: ILogger):
        self.todo_repository = todo_repository
        self.logger = logger

    def execute(self, todo_id: int) -> Todo:
        todo = self.todo_repository.find_by_id(todo_id)

        self.logger.log_event(
            trace_id=str(uuid.uuid4()),
            event_type="RECORDS_FETCHED",
            data={"source": "todos", "id": todo_id},
            metrics={"count": 1},
        )
        return todo
