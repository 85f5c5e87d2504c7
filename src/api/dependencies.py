"""Dependency injection factories for the API."""

from typing import Callable

from fastapi import Depends, Request

from domain.services.todo_service import TodoService
from infrastructure.database.session import Database
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_database(request: Request) -> Database:
    """Database gateway attached to the app at creation time."""
    return request.app.state.database  # type: ignore[no-any-return]


def get_uow_factory(
    database: Database = Depends(get_database),
) -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(database.session_factory)

    return factory


def get_todo_service(
    uow_factory: Callable[[], SQLAlchemyUnitOfWork] = Depends(get_uow_factory),
) -> TodoService:
    """Get Todo service instance."""
    return TodoService(uow_factory)
