"""
Record Sync Core Package

Two small applications built on the same layering:
- Todo sync: read todos from an HTTP API, optionally create them elsewhere
- User export: read users from Postgres, write each one to S3 as JSON

Architecture: domain entities validate themselves, repositories adapt one
external system each, use cases sequence single repository calls.
"""

__version__ = "0.1.0"

from .domain.exceptions import (
    RecordSyncError, ValidationError, RequestError, SerializationError
)
from .domain.todo.entities import Todo
from .domain.user.entities import User
from .application.user.dtos import UserDTO, user_to_dto, dto_to_user
