"""Todo repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.todo import Todo


class ITodoRepository(Protocol):
    """Repository interface for Todo entities."""

    async def get(self, id: UUID) -> Todo | None:
        """Get a todo by ID."""
        ...

    async def list_all(self) -> list[Todo]:
        """Get all todos, newest first."""
        ...

    async def create(self, todo: Todo) -> Todo:
        """Create a new todo."""
        ...

    async def update(self, todo: Todo) -> Todo:
        """Update an existing todo."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a todo and return whether a row matched."""
        ...
