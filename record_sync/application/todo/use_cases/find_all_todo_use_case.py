"""
Use Case: Find All Todos
"""

import uuid
from typing import List

from record_sync.application.interfaces import ILogger
from record_sync.domain.todo.entities import Todo
from record_sync.domain.todo.repositories import ITodoRepository


class FindAllTodoUseCase:
    """
    Fetch every todo from the repository.

    Each todo is rebuilt through the entity constructor before it is
    returned, so a repository that hands back unvalidated objects still
    cannot leak them past this boundary.
    """

    def __init__(self, todo_repository: ITodoRepository, logger: ILogger):
        self.todo_repository = todo_repository
        self.logger = logger

    def execute(self) -> List[Todo]:
        """
        Returns:
            Todos in source order

        Raises:
            RecordSyncError: on the first failure; no partial list is returned
        """
        trace_id = str(uuid.uuid4())
        todos = self.todo_repository.find_all()

        validated = [
            Todo(
                user_id=todo.user_id,
                id=todo.id,
                title=todo.title,
                completed=todo.completed,
            )
            for todo in todos
        ]

        self.logger.log_event(
            trace_id=trace_id,
            event_type="RECORDS_FETCHED",
            data={"source": "todos"},
            metrics={"count": len(validated)},
        )
        return validated
