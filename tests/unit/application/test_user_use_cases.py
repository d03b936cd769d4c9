"""
Unit tests for the user export use cases.
"""

import pytest
from unittest.mock import MagicMock

from record_sync.application.user import (
    FindAllUserUseCase,
    UploadUserUseCase,
    UserDTO,
)
from record_sync.domain.exceptions import RequestError, ValidationError
from record_sync.domain.user.entities import User


class TestFindAllUserUseCase:

    def test_returns_dtos_in_source_order(self, mock_logger):
        """Test users come back as DTOs in source order"""
        users = [
            User(id=2, name="B", email="b@example.com", status_code=0),
            User(id=1, name="A", email="a@example.com", status_code=1),
        ]
        repository = MagicMock()
        repository.find_all.return_value = users

        result = FindAllUserUseCase(repository, mock_logger).execute()

        assert result == [
            UserDTO(id=2, name="B", email="b@example.com", status_code=0),
            UserDTO(id=1, name="A", email="a@example.com", status_code=1),
        ]

    def test_propagates_repository_error(self, mock_logger):
        """Test read failures reach the caller"""
        repository = MagicMock()
        repository.find_all.side_effect = ValidationError("email", "invalid email")

        with pytest.raises(ValidationError):
            FindAllUserUseCase(repository, mock_logger).execute()


class TestUploadUserUseCase:

    def test_uploads_validated_user(self, mock_logger):
        """Test the DTO is converted to a User before upload"""
        repository = MagicMock()
        dto = UserDTO(id=4, name="Ada", email="ada@example.com", status_code=3)

        UploadUserUseCase(repository, mock_logger).execute(dto)

        repository.upload.assert_called_once_with(
            User(id=4, name="Ada", email="ada@example.com", status_code=3)
        )

    def test_invalid_dto_never_reaches_sink(self, mock_logger):
        """Test an invalid DTO is rejected before upload"""
        repository = MagicMock()
        dto = UserDTO(id=0, name="Ada", email="ada@example.com", status_code=3)

        with pytest.raises(ValidationError):
            UploadUserUseCase(repository, mock_logger).execute(dto)
        repository.upload.assert_not_called()

    def test_propagates_upload_error(self, mock_logger):
        """Test upload failures reach the caller"""
        repository = MagicMock()
        repository.upload.side_effect = RequestError("AccessDenied")
        dto = UserDTO(id=4, name="Ada", email="ada@example.com", status_code=3)

        with pytest.raises(RequestError, match="AccessDenied"):
            UploadUserUseCase(repository, mock_logger).execute(dto)

    def test_logs_upload_event(self, mock_logger):
        """Test an upload logs RECORD_UPLOADED with the user id"""
        repository = MagicMock()
        dto = UserDTO(id=4, name="Ada", email="ada@example.com", status_code=3)

        UploadUserUseCase(repository, mock_logger).execute(dto)

        kwargs = mock_logger.log_event.call_args.kwargs
        assert kwargs["event_type"] == "RECORD_UPLOADED"
        assert kwargs["metrics"] == {"id": 4}
