"""Unit tests for the SQLAlchemy unit of work."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from core.exceptions import StoreError
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


@pytest.fixture
def session() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def uow(session: AsyncMock) -> SQLAlchemyUnitOfWork:
    return SQLAlchemyUnitOfWork(MagicMock(return_value=session))


class TestSQLAlchemyUnitOfWork:
    @pytest.mark.asyncio
    async def test_commit_failure_becomes_store_error(
        self, uow: SQLAlchemyUnitOfWork, session: AsyncMock
    ) -> None:
        session.commit.side_effect = OperationalError(
            "COMMIT", {}, Exception("database is locked")
        )

        with pytest.raises(StoreError) as exc_info:
            async with uow:
                await uow.commit()

        assert "database is locked" in exc_info.value.message
        assert exc_info.value.details == {"operation": "commit"}
        session.rollback.assert_awaited_once()
        session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_clean_exit_closes_without_rollback(
        self, uow: SQLAlchemyUnitOfWork, session: AsyncMock
    ) -> None:
        async with uow:
            await uow.commit()

        session.commit.assert_awaited_once()
        session.rollback.assert_not_awaited()
        session.close.assert_awaited_once()

    def test_repository_requires_context(self, uow: SQLAlchemyUnitOfWork) -> None:
        with pytest.raises(RuntimeError):
            _ = uow.todos
