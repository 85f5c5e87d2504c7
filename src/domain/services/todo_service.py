"""Todo service layer with business logic."""

from collections.abc import Callable
from datetime import datetime
from uuid import UUID

import structlog

from core.exceptions import TodoNotFoundError
from domain.entities.todo import Todo, TodoStatus, to_utc, utcnow
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class TodoService:
    """Service layer for Todo business logic.

    Each operation opens its own unit of work; no state is kept between calls.
    Update and toggle read then write without locking, so concurrent edits to
    the same todo resolve as last write wins.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_all(self) -> list[Todo]:
        """Get all todos ordered by creation time, newest first."""
        async with self._uow_factory() as uow:
            return await uow.todos.list_all()

    async def create(
        self,
        title: str,
        note: str | None = None,
        due_at: datetime | None = None,
        status: TodoStatus | None = None,
    ) -> Todo:
        """Create a new todo. Status defaults to pending."""
        async with self._uow_factory() as uow:
            todo = Todo(
                title=title,
                note=note,
                due_at=to_utc(due_at) if due_at else None,
                status=status or TodoStatus.PENDING,
            )

            created = await uow.todos.create(todo)
            await uow.commit()

            logger.info("todo_created", todo_id=str(created.id))
            return created

    async def update(
        self,
        todo_id: UUID,
        title: str,
        note: str | None = None,
        status: TodoStatus | None = None,
        due_at: datetime | None = None,
    ) -> Todo:
        """Replace the title, note and status of an existing todo.

        ``due_at`` only replaces the stored deadline when given; passing None
        keeps the current one.
        """
        async with self._uow_factory() as uow:
            todo = await uow.todos.get(todo_id)

            if not todo:
                raise TodoNotFoundError(str(todo_id))

            todo.title = title
            todo.note = note
            todo.status = status or TodoStatus.PENDING
            if due_at is not None:
                todo.due_at = to_utc(due_at)

            todo.updated_at = utcnow()

            updated = await uow.todos.update(todo)
            await uow.commit()

            return updated

    async def set_completed(self, todo_id: UUID, completed: bool) -> Todo:
        """Mark a todo completed or back to pending."""
        async with self._uow_factory() as uow:
            todo = await uow.todos.get(todo_id)

            if not todo:
                raise TodoNotFoundError(str(todo_id))

            if completed:
                todo.complete()
            else:
                todo.reopen()

            updated = await uow.todos.update(todo)
            await uow.commit()

            logger.info("todo_status_changed", todo_id=str(todo_id), status=updated.status.value)
            return updated

    async def delete(self, todo_id: UUID) -> bool:
        """Delete a todo. Deleting an unknown id is not an error."""
        async with self._uow_factory() as uow:
            deleted = await uow.todos.delete(todo_id)
            await uow.commit()

        if deleted:
            logger.info("todo_deleted", todo_id=str(todo_id))
        return deleted
