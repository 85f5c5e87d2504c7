"""Todo domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import StrEnum
from uuid import UUID, uuid4


class TodoStatus(StrEnum):
    """Allowed todo states."""

    PENDING = "pending"
    COMPLETED = "completed"


def generate_id() -> UUID:
    """Generate a new todo identifier."""
    return uuid4()


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_utc(value: datetime) -> datetime:
    """Normalize a datetime to aware UTC. Naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass
class Todo:
    """Domain entity for a Todo."""

    title: str
    id: UUID = field(default_factory=generate_id)
    note: str | None = None
    due_at: datetime | None = None
    status: TodoStatus = TodoStatus.PENDING
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def complete(self) -> None:
        """Mark the todo as completed."""
        self.status = TodoStatus.COMPLETED
        self.updated_at = utcnow()

    def reopen(self) -> None:
        """Mark the todo as pending again."""
        self.status = TodoStatus.PENDING
        self.updated_at = utcnow()

    def __post_init__(self) -> None:
        """Keep timestamps in UTC and updated_at no older than created_at."""
        self.status = TodoStatus(self.status)
        self.created_at = to_utc(self.created_at)
        self.updated_at = to_utc(self.updated_at)
        if self.due_at is not None:
            self.due_at = to_utc(self.due_at)
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at
