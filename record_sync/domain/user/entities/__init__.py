"""
Domain Entities for User Export
"""

from .user import User

__all__ = [
    "User",
]
