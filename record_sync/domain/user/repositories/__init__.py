"""
Repository Interfaces for User Export

Reading and writing are separate capabilities so that each use case
depends only on the one it needs.
"""

from .find_user_repository import IFindUserRepository
from .upload_user_repository import IUploadUserRepository

__all__ = [
    "IFindUserRepository",
    "IUploadUserRepository",
]
