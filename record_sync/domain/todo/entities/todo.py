"""
Domain Entity: Todo

A single todo item as served by the todo HTTP API.
"""

from dataclasses import dataclass
from typing import Any, Dict

from record_sync.domain.exceptions import ValidationError


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Todo:
    """
    Validated, immutable todo item.

    Attributes:
        user_id: Owner of the todo (non-zero)
        id: Todo identifier (non-zero)
        title: Non-empty title
        completed: Completion flag
    """

    user_id: int
    id: int
    title: str
    completed: bool

    def __post_init__(self):
        """Validate invariants."""
        if not _is_int(self.user_id) or self.user_id == 0:
            raise ValidationError("userId", "userId must not be 0")
        if not _is_int(self.id) or self.id == 0:
            raise ValidationError("id", "id must not be 0")
        if not isinstance(self.title, str) or self.title == "":
            raise ValidationError("title", "title can not be empty")
        if not isinstance(self.completed, bool):
            raise ValidationError("completed", "completed must be a boolean")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Todo":
        """
        Build a Todo from the API wire shape.

        Missing keys are passed through as None so that the failing
        field is reported by validation.
        """
        return cls(
            user_id=data.get("userId"),
            id=data.get("id"),
            title=data.get("title"),
            completed=data.get("completed"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the API wire shape."""
        return {
            "userId": self.user_id,
            "id": self.id,
            "title": self.title,
            "completed": self.completed,
        }
