"""
User Export Application Layer
"""

from .dtos import UserDTO, user_to_dto, dto_to_user
from .use_cases import FindAllUserUseCase, UploadUserUseCase

__all__ = [
    "UserDTO",
    "user_to_dto",
    "dto_to_user",
    "FindAllUserUseCase",
    "UploadUserUseCase",
]
