"""
Todo Repository Interface

Defines the data access interface for Todo items, decoupling handlers from the store.
"""

from abc import ABC, abstractmethod
from typing import Optional

from todo_service.domain.todo import Todo


class TodoRepository(ABC):
    """Todo Repository Interface"""

    @abstractmethod
    async def get_all(self) -> list[Todo]:
        """
        List Todos

        Returns at most the configured limit, in no particular order.

        Raises:
            StoreError: Store failure or malformed record
        """
        pass

    @abstractmethod
    async def get_by_id(self, id: str) -> Optional[Todo]:
        """
        Get Todo by ID

        Args:
            id: Todo ID

        Returns:
            Todo if found, None otherwise

        Raises:
            StoreError: Store failure or malformed record
            InvariantViolationError: More than one record shares the ID
        """
        pass

    @abstractmethod
    async def insert(self, todo: Todo) -> None:
        """
        Write a Todo, overwriting any record with the same ID

        Args:
            todo: Todo with its ID already assigned

        Raises:
            ValidationError: Todo has no ID
            StoreError: Store failure
        """
        pass

    @abstractmethod
    async def update(self, todo: Todo) -> Todo:
        """
        Update title and description of an existing Todo

        The ID and creation time are never changed.

        Args:
            todo: Todo carrying the ID and the new title/description

        Returns:
            Todo: The stored Todo after the update

        Raises:
            NotFoundError: No record with this ID
            StoreError: Store failure
        """
        pass

    @abstractmethod
    async def delete(self, id: str) -> None:
        """
        Delete a Todo

        Deleting a missing ID is not an error.

        Args:
            id: Todo ID

        Raises:
            StoreError: Store failure
        """
        pass
