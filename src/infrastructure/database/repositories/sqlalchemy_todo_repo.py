"""SQLAlchemy implementation of Todo repository."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import StoreError
from domain.entities.todo import Todo
from infrastructure.database.models import TodoModel


class SQLAlchemyTodoRepository:
    """SQLAlchemy implementation of ITodoRepository.

    Driver and constraint failures surface as ``StoreError`` so callers never
    see SQLAlchemy exceptions.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Todo | None:
        """Get a todo by ID."""
        stmt = select(TodoModel).where(TodoModel.id == id)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise StoreError(str(e), operation="get") from e
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_all(self) -> list[Todo]:
        """Get all todos ordered by created_at, newest first."""
        stmt = select(TodoModel).order_by(TodoModel.created_at.desc())
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise StoreError(str(e), operation="list") from e
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, todo: Todo) -> Todo:
        """Create a new todo."""
        model = self._to_model(todo)
        self._session.add(model)
        try:
            await self._session.flush()
            await self._session.refresh(model)
        except SQLAlchemyError as e:
            raise StoreError(str(e), operation="create") from e
        return self._to_entity(model)

    async def update(self, todo: Todo) -> Todo:
        """Update an existing todo. created_at is never written."""
        stmt = select(TodoModel).where(TodoModel.id == todo.id)
        try:
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

            if not model:
                raise StoreError(f"todo {todo.id} vanished before update", operation="update")

            model.title = todo.title
            model.note = todo.note
            model.due_at = todo.due_at
            model.status = todo.status.value
            model.updated_at = todo.updated_at

            await self._session.flush()
        except SQLAlchemyError as e:
            raise StoreError(str(e), operation="update") from e
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a todo. Returns False when no row matched."""
        stmt = delete(TodoModel).where(TodoModel.id == id)
        try:
            result = await self._session.execute(stmt)
            await self._session.flush()
        except SQLAlchemyError as e:
            raise StoreError(str(e), operation="delete") from e
        return bool(result.rowcount)

    def _to_entity(self, model: TodoModel) -> Todo:
        """Convert ORM model to domain entity."""
        return Todo(
            id=model.id,
            title=model.title,
            note=model.note,
            due_at=model.due_at,
            status=model.status,  # type: ignore[arg-type]
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Todo) -> TodoModel:
        """Convert domain entity to ORM model."""
        return TodoModel(
            id=entity.id,
            title=entity.title,
            note=entity.note,
            due_at=entity.due_at,
            status=entity.status.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
