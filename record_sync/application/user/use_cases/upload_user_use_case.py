"""
Use Case: Upload User
"""

import uuid

from record_sync.application.interfaces import ILogger
from record_sync.domain.user.repositories import IUploadUserRepository
from ..dtos import UserDTO, dto_to_user


class UploadUserUseCase:
    """
    Write one user to the upload sink.

    The DTO is validated by converting it to a User first; an invalid
    DTO never reaches the sink.
    """

    def __init__(self, upload_user_repository: IUploadUserRepository, logger: ILogger):
        self.upload_user_repository = upload_user_repository
        self.logger = logger

    def execute(self, dto: UserDTO) -> None:
        user = dto_to_user(dto)
        self.upload_user_repository.upload(user)

        self.logger.log_event(
            trace_id=str(uuid.uuid4()),
            event_type="RECORD_UPLOADED",
            data=user.to_dict(),
            metrics={"id": user.id},
        )
