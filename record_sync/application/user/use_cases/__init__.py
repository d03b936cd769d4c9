"""
Use Cases for User Export
"""

from .find_all_user_use_case import FindAllUserUseCase
from .upload_user_use_case import UploadUserUseCase

__all__ = [
    "FindAllUserUseCase",
    "UploadUserUseCase",
]
