"""
Repository Interface: Upload User Repository
"""

from typing import Protocol
from ..entities import User


class IUploadUserRepository(Protocol):
    """Write-only sink for users."""

    def upload(self, user: User) -> None:
        """
        Write one user, replacing any previous copy.

        Raises:
            RequestError: on storage failure
        """
        ...
