"""
Concrete User Repository Implementations
"""

from .postgres_find_user_repository import PostgresFindUserRepository
from .s3_upload_user_repository import S3UploadUserRepository

__all__ = [
    "PostgresFindUserRepository",
    "S3UploadUserRepository",
]
