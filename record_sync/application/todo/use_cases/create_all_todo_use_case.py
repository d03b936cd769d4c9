"""
Use Case: Create All Todos
"""

import uuid
from typing import Iterable

from record_sync.application.interfaces import ILogger
from record_sync.domain.todo.entities import Todo
from record_sync.domain.todo.repositories import ITodoRepository


class CreateAllTodoUseCase:
    """
    Persist a sequence of todos in order.

    Stops at the first failure. Todos created before the failure stay
    created; there is no rollback and no partial-success report.
    """

    def __init__(self, todo_repository: ITodoRepository, logger: ILogger):
        self.todo_repository = todo_repository
        self.logger = logger

    def execute(self, todos: Iterable[Todo]) -> None:
        """
        Args:
            todos: Todos to create, in order

        Raises:
            RecordSyncError: from the first failing create
        """
        trace_id = str(uuid.uuid4())
        created = 0
        for todo in todos:
            self.todo_repository.create(todo)
            created += 1

        self.logger.log_event(
            trace_id=trace_id,
            event_type="RECORD_CREATED",
            data={"target": "todos"},
            metrics={"count": created},
        )
