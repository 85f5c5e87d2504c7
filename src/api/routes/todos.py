"""Todo API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from api.dependencies import get_todo_service
from api.schemas.todo import TodoPayload, TodoResponse, TogglePayload
from domain.entities.todo import Todo
from domain.services.todo_service import TodoService

router = APIRouter(prefix="/api/todos", tags=["todos"])

_ERROR_RESPONSES: dict[int | str, dict[str, str]] = {
    400: {"description": "Invalid payload, unknown id or store failure (plain text)"},
}


@router.post(
    "",
    response_model=TodoResponse,
    summary="Create a todo",
    responses=_ERROR_RESPONSES,
)
async def create_todo(
    body: TodoPayload,
    service: TodoService = Depends(get_todo_service),
) -> TodoResponse:
    """
    Create a new todo with an optional note and deadline.

    `status` defaults to `pending`; `dueAt` is stored in UTC.
    """
    todo = await service.create(
        title=body.title,
        note=body.note,
        due_at=body.due_at,
        status=body.status,
    )
    return _build_todo_response(todo)


@router.get(
    "",
    response_model=list[TodoResponse],
    summary="List todos",
    responses=_ERROR_RESPONSES,
)
async def list_todos(
    service: TodoService = Depends(get_todo_service),
) -> list[TodoResponse]:
    """Get all todos ordered by creation time, newest first."""
    todos = await service.list_all()
    return [_build_todo_response(todo) for todo in todos]


@router.put(
    "/{todo_id}",
    response_model=TodoResponse,
    summary="Update a todo",
    responses=_ERROR_RESPONSES,
)
async def update_todo(
    todo_id: UUID,
    body: TodoPayload,
    service: TodoService = Depends(get_todo_service),
) -> TodoResponse:
    """
    Replace title, note and status of a todo.

    `dueAt` is only changed when the payload carries a non-null value.
    """
    todo = await service.update(
        todo_id=todo_id,
        title=body.title,
        note=body.note,
        status=body.status,
        due_at=body.due_at,
    )
    return _build_todo_response(todo)


@router.delete(
    "/{todo_id}",
    response_class=PlainTextResponse,
    summary="Delete a todo",
    responses={200: {"description": "Always `ok`, also when nothing matched"}},
)
async def delete_todo(
    todo_id: UUID,
    service: TodoService = Depends(get_todo_service),
) -> PlainTextResponse:
    """Delete a todo permanently."""
    await service.delete(todo_id)
    return PlainTextResponse("ok")


@router.patch(
    "/{todo_id}/complete",
    response_model=TodoResponse,
    summary="Mark a todo completed or pending",
    responses=_ERROR_RESPONSES,
)
async def toggle_complete(
    todo_id: UUID,
    body: TogglePayload,
    service: TodoService = Depends(get_todo_service),
) -> TodoResponse:
    """Set status to `completed` when `completed` is true, else `pending`."""
    todo = await service.set_completed(todo_id, body.completed)
    return _build_todo_response(todo)


def _build_todo_response(todo: Todo) -> TodoResponse:
    """Convert domain entity to response schema."""
    return TodoResponse(
        id=todo.id,
        title=todo.title,
        note=todo.note,
        due_at=todo.due_at,
        status=todo.status,
        created_at=todo.created_at,
        updated_at=todo.updated_at,
    )
