"""Unit tests for the Todo entity."""

from datetime import datetime, timedelta, timezone

import pytest

from domain.entities.todo import Todo, TodoStatus, to_utc


class TestToUtc:
    def test_naive_is_taken_as_utc(self) -> None:
        result = to_utc(datetime(2030, 1, 1, 8, 30))

        assert result == datetime(2030, 1, 1, 8, 30, tzinfo=timezone.utc)

    def test_aware_is_converted(self) -> None:
        result = to_utc(datetime(2030, 1, 1, 8, 30, tzinfo=timezone(timedelta(hours=-5))))

        assert result.tzinfo == timezone.utc
        assert result.hour == 13


class TestTodoEntity:
    def test_defaults(self) -> None:
        todo = Todo(title="Defaults")

        assert todo.status == TodoStatus.PENDING
        assert todo.note is None
        assert todo.due_at is None
        assert todo.created_at.tzinfo is not None

    def test_status_string_is_coerced(self) -> None:
        todo = Todo(title="From storage", status="completed")  # type: ignore[arg-type]

        assert todo.status is TodoStatus.COMPLETED

    def test_unknown_status_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            Todo(title="Bad", status="archived")  # type: ignore[arg-type]

    def test_naive_timestamps_from_storage_become_utc(self) -> None:
        todo = Todo(
            title="Loaded",
            due_at=datetime(2030, 2, 2, 10, 0),
            created_at=datetime(2026, 1, 1, 0, 0),
            updated_at=datetime(2026, 1, 2, 0, 0),
        )

        assert todo.due_at == datetime(2030, 2, 2, 10, 0, tzinfo=timezone.utc)
        assert todo.created_at.tzinfo == timezone.utc

    def test_updated_at_never_before_created_at(self) -> None:
        created = datetime(2026, 5, 5, tzinfo=timezone.utc)
        todo = Todo(title="Clock skew", created_at=created, updated_at=created - timedelta(days=1))

        assert todo.updated_at == created

    def test_complete_and_reopen(self) -> None:
        todo = Todo(title="Flip", updated_at=datetime(2000, 1, 1, tzinfo=timezone.utc),
                    created_at=datetime(2000, 1, 1, tzinfo=timezone.utc))

        todo.complete()
        assert todo.status == TodoStatus.COMPLETED
        completed_at = todo.updated_at
        assert completed_at > datetime(2000, 1, 1, tzinfo=timezone.utc)

        todo.reopen()
        assert todo.status == TodoStatus.PENDING
        assert todo.updated_at >= completed_at
