"""
DTOs for User Export Application Layer
"""

from .user_dto import UserDTO, user_to_dto, dto_to_user

__all__ = [
    "UserDTO",
    "user_to_dto",
    "dto_to_user",
]
