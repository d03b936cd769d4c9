"""
DTO: User

Structural mirror of the User entity used at the use-case boundary.
Carries no invariants; validity is checked when converted back to a User.
"""

from dataclasses import dataclass
from typing import Any, Dict

from record_sync.domain.user.entities import User


@dataclass
class UserDTO:
    """User data crossing the use-case boundary."""

    id: int
    name: str
    email: str
    status_code: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "status_code": self.status_code,
        }


def user_to_dto(user: User) -> UserDTO:
    """Map a validated User to its DTO."""
    return UserDTO(
        id=user.id,
        name=user.name,
        email=user.email,
        status_code=user.status_code,
    )


def dto_to_user(dto: UserDTO) -> User:
    """
    Map a DTO back to a User.

    Raises:
        ValidationError: if the DTO holds an invalid field combination
    """
    return User(
        id=dto.id,
        name=dto.name,
        email=dto.email,
        status_code=dto.status_code,
    )
