"""
Repository Interface: Find User Repository
"""

from typing import Protocol, List
from ..entities import User


class IFindUserRepository(Protocol):
    """Read-only access to stored users."""

    def find_all(self) -> List[User]:
        """
        Fetch every user.

        Returns:
            Users in source order

        Raises:
            ValidationError: if any row is invalid (no partial result)
            RequestError: on database failure
        """
        ...
