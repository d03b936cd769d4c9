"""
Shared test fixtures and utilities for record sync tests
"""

import pytest
from unittest.mock import MagicMock

from record_sync.domain.todo.entities import Todo
from record_sync.domain.user.entities import User


def _create_mock_response(status_code=200, json_data=None, json_error=None):
    """
    Create a mocked requests.Response usable as a context manager.

    Args:
        status_code: HTTP status code
        json_data: Value returned from response.json()
        json_error: Exception raised from response.json() instead

    Returns:
        MagicMock standing in for the response
    """
    response = MagicMock()
    response.status_code = status_code
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def make_response():
    """Factory fixture for mocked HTTP responses."""
    return _create_mock_response


@pytest.fixture
def mock_session():
    """requests.Session stand-in."""
    return MagicMock()


@pytest.fixture
def mock_logger():
    """ILogger stand-in for use cases."""
    return MagicMock()


@pytest.fixture
def sample_todos():
    return [
        Todo(user_id=1, id=1, title="buy milk", completed=False),
        Todo(user_id=1, id=2, title="write report", completed=True),
        Todo(user_id=2, id=3, title="call bob", completed=False),
    ]


@pytest.fixture
def sample_user():
    return User(id=7, name="Ada Lovelace", email="ada@example.com", status_code=1)
