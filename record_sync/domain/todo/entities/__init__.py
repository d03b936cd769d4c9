"""
Domain Entities for Todo Sync
"""

from .todo import Todo

__all__ = [
    "Todo",
]
