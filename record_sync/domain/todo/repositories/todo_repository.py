"""
Repository Interface: Todo Repository

Defines the contract for reading and creating todos.
"""

from typing import Protocol, List
from ..entities import Todo


class ITodoRepository(Protocol):
    """
    Interface for todo data access.

    Every call is a single synchronous request against the backing store.
    """

    def find_all(self) -> List[Todo]:
        """
        Fetch every todo.

        Returns:
            Todos in source order

        Raises:
            ValidationError: if any record is malformed (no partial result)
            RequestError: on transport failure
            SerializationError: on malformed payload
        """
        ...

    def find_by_id(self, todo_id: int) -> Todo:
        """
        Fetch a single todo.

        Args:
            todo_id: Todo identifier

        Returns:
            The todo
        """
        ...

    def create(self, todo: Todo) -> None:
        """
        Persist a todo.

        Args:
            todo: Validated todo to create

        Raises:
            RequestError: if the store rejects the write
        """
        ...
