"""
Use Case: Find All Users
"""

import uuid
from typing import List

from record_sync.application.interfaces import ILogger
from record_sync.domain.user.repositories import IFindUserRepository
from ..dtos import UserDTO, user_to_dto


class FindAllUserUseCase:
    """Read every user and hand them out as DTOs."""

    def __init__(self, find_user_repository: IFindUserRepository, logger: ILogger):
        self.find_user_repository = find_user_repository
        self.logger = logger

    def execute(self) -> List[UserDTO]:
        users = self.find_user_repository.find_all()
        dtos = [user_to_dto(user) for user in users]

        self.logger.log_event(
            trace_id=str(uuid.uuid4()),
            event_type="RECORDS_FETCHED",
            data={"source": "users"},
            metrics={"count": len(dtos)},
        )
        return dtos
